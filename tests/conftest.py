from pathlib import Path

import pytest


class ScriptedConfirm:
    """Stand-in for the interactive prompt: replays answers and records questions."""

    def __init__(self, *answers: bool):
        self.answers = list(answers)
        self.questions = []

    def __call__(self, question: str) -> bool:
        self.questions.append(question)
        return self.answers.pop(0)


@pytest.fixture
def confirm_yes() -> ScriptedConfirm:
    return ScriptedConfirm(True, True)


@pytest.fixture
def confirm_no() -> ScriptedConfirm:
    return ScriptedConfirm(False, False)


@pytest.fixture
def config_file(tmp_path: Path):
    """Write a tailwind.config.js into tmp_path and return its path."""

    def _write(text: str, name: str = "tailwind.config.js") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def no_color(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
