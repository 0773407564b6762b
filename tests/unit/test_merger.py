"""Tests for merging a shade ramp into a Tailwind config file."""

import re

import pytest

from tailshade.core import config as c
from tailshade.core.errors import ConfigReadError, ConfigWriteError, MisuseError
from tailshade.logic.config.merger import (
    MergeOutcome,
    apply_colors,
    backup_path_for,
    ensure_colors,
    merge_colors,
    write_config,
)
from tailshade.logic.config.parser import ConfigModule, parse_config, parse_document
from tailshade.logic.shades.engine import generate_shades

from tests.conftest import ScriptedConfirm

EXISTING = """module.exports = {
  content: ['./src/**/*.html'],
  theme: {
    extend: {
      colors: {
        accent: '#ff00ff',
        primary: '#000000',
        'primary-50': '#111111',
      },
    },
  },
};
"""


def _backups(directory):
    return sorted(p for p in directory.iterdir() if re.fullmatch(r"tailwind\.config\.backup\.\d+\.js", p.name))


class TestApplyColors:
    def test_merge_into_empty_file(self, config_file, confirm_no):
        path = config_file("")
        shades = generate_shades(c.DEFAULT_COLOR)

        outcome = apply_colors(path, c.DEFAULT_NAME, shades, c.DEFAULT_COLOR, confirm_no)

        assert outcome is MergeOutcome.UPDATED
        assert confirm_no.questions == []
        doc = parse_document(path.read_text(encoding="utf-8"))
        assert list(doc) == ["theme"]
        assert list(doc["theme"]) == ["extend"]
        assert list(doc["theme"]["extend"]) == ["colors"]
        colors = doc["theme"]["extend"]["colors"]
        assert colors["primary"] == "#3490dc"
        assert len(colors) == 11
        for label in c.SHADE_LABELS:
            assert colors[f"primary-{label}"] == shades[label]

    def test_declined_overwrite_leaves_file_untouched(self, config_file, confirm_no):
        path = config_file(EXISTING)
        before = path.read_bytes()

        outcome = apply_colors(path, "primary", generate_shades("#3490dc"), "#3490dc", confirm_no)

        assert outcome is MergeOutcome.SKIPPED
        assert path.read_bytes() == before
        assert len(confirm_no.questions) == 1
        assert "primary" in confirm_no.questions[0]

    def test_accepted_overwrite_only_touches_named_keys(self, config_file, confirm_yes):
        path = config_file(EXISTING)
        shades = generate_shades("#3490dc")

        outcome = apply_colors(path, "primary", shades, "#3490dc", confirm_yes)

        assert outcome is MergeOutcome.UPDATED
        doc = parse_document(path.read_text(encoding="utf-8"))
        assert doc["content"] == ["./src/**/*.html"]
        colors = doc["theme"]["extend"]["colors"]
        assert colors["accent"] == "#ff00ff"
        assert colors["primary"] == "#3490dc"
        assert colors["primary-50"] == shades["50"]
        assert set(colors) == {"accent", "primary"} | {f"primary-{label}" for label in c.SHADE_LABELS}

    def test_new_name_does_not_prompt(self, config_file, confirm_no):
        path = config_file(EXISTING)

        outcome = apply_colors(path, "brand", generate_shades("teal"), "teal", confirm_no)

        assert outcome is MergeOutcome.UPDATED
        assert confirm_no.questions == []
        colors = parse_document(path.read_text(encoding="utf-8"))["theme"]["extend"]["colors"]
        assert colors["primary"] == "#000000"
        assert colors["brand"] == "teal"
        assert colors["brand-500"] == "teal"

    def test_keeps_preamble(self, config_file, confirm_yes):
        path = config_file(c.CONFIG_TEMPLATE)

        apply_colors(path, "primary", generate_shades("#3490dc"), "#3490dc", confirm_yes)

        text = path.read_text(encoding="utf-8")
        assert text.startswith("/**\n * @type {import('tailwindcss').Config}\n */\nmodule.exports = {")
        assert text.endswith("};\n")

    def test_creates_backup_copy(self, tmp_path, config_file, confirm_yes):
        path = config_file(EXISTING)

        apply_colors(path, "primary", generate_shades("#3490dc"), "#3490dc", confirm_yes)

        backups = _backups(tmp_path)
        assert len(backups) == 1
        assert backups[0].read_text(encoding="utf-8") == EXISTING

    def test_backup_failure_is_not_fatal(self, config_file, confirm_yes, monkeypatch, capsys):
        path = config_file(EXISTING)

        def refuse(src, dst):
            raise PermissionError("read-only directory")

        monkeypatch.setattr("tailshade.logic.config.merger.shutil.copyfile", refuse)

        outcome = apply_colors(path, "primary", generate_shades("#3490dc"), "#3490dc", confirm_yes)

        assert outcome is MergeOutcome.UPDATED
        assert "[warning] could not back up" in capsys.readouterr().err
        assert parse_document(path.read_text(encoding="utf-8"))["theme"]["extend"]["colors"]["primary"] == "#3490dc"

    def test_parse_failure_writes_nothing(self, config_file, confirm_yes):
        text = "module.exports = { plugins: [require('x')] };\n"
        path = config_file(text)

        with pytest.raises(ConfigReadError, match="unsupported expression"):
            apply_colors(path, "primary", generate_shades("#3490dc"), "#3490dc", confirm_yes)

        assert path.read_text(encoding="utf-8") == text

    def test_missing_file_is_read_error(self, tmp_path, confirm_yes):
        with pytest.raises(ConfigReadError, match="could not read"):
            apply_colors(tmp_path / "tailwind.config.js", "primary", {"50": "#ffffff"}, "#3490dc", confirm_yes)

    def test_write_failure(self, tmp_path, config_file, confirm_yes, monkeypatch):
        path = config_file(EXISTING)

        def refuse(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr("tailshade.logic.config.merger.os.replace", refuse)

        with pytest.raises(ConfigWriteError, match="disk full"):
            apply_colors(path, "primary", generate_shades("#3490dc"), "#3490dc", confirm_yes)

        assert path.read_text(encoding="utf-8") == EXISTING
        assert not (tmp_path / "tailwind.config.js.tmp").exists()

    def test_emoji_escapes_are_rewritten_as_utf8(self, tmp_path, config_file, confirm_yes):
        path = config_file(r"""module.exports = { content: ['\uD83D\uDE00'] };""" + "\n")

        outcome = apply_colors(path, "primary", generate_shades("#3490dc"), "#3490dc", confirm_yes)

        assert outcome is MergeOutcome.UPDATED
        assert parse_document(path.read_text(encoding="utf-8"))["content"] == ["\U0001F600"]
        assert not (tmp_path / "tailwind.config.js.tmp").exists()

    def test_unencodable_text_is_write_error(self, tmp_path, config_file):
        path = config_file(EXISTING)

        with pytest.raises(ConfigWriteError, match="could not write"):
            write_config(path, ConfigModule(document={"content": ["\ud83d"]}))

        assert path.read_text(encoding="utf-8") == EXISTING
        assert not (tmp_path / "tailwind.config.js.tmp").exists()

    @pytest.mark.parametrize("name, shades", [("", {"50": "#ffffff"}), ("primary", {}), ("primary", None)])
    def test_missing_arguments_touch_nothing(self, tmp_path, config_file, confirm_yes, name, shades):
        path = config_file(EXISTING)

        with pytest.raises(MisuseError):
            apply_colors(path, name, shades, "#3490dc", confirm_yes)

        assert path.read_text(encoding="utf-8") == EXISTING
        assert _backups(tmp_path) == []

    def test_non_object_colors_is_rejected(self, config_file, confirm_yes):
        path = config_file("module.exports = { theme: { extend: { colors: 'nope' } } }")

        with pytest.raises(ConfigReadError, match="theme.extend.colors"):
            apply_colors(path, "primary", {"50": "#ffffff"}, "#3490dc", confirm_yes)

    def test_cjs_backup_keeps_suffix(self, tmp_path):
        backup = backup_path_for(tmp_path / "tailwind.config.cjs", 1729333333333)
        assert backup == tmp_path / "tailwind.config.backup.1729333333333.cjs"


class TestMergeColors:
    def test_logs_base_then_ascending_shades(self, capsys, no_color):
        colors = {}
        merge_colors(colors, "brand", {"900": "#000000", "50": "#ffffff", "100": "#eeeeee"}, "#777777")

        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "[info] added base color: brand => #777777",
            "[info] added shade: brand-50 => #ffffff",
            "[info] added shade: brand-100 => #eeeeee",
            "[info] added shade: brand-900 => #000000",
        ]
        assert list(colors) == ["brand", "brand-50", "brand-100", "brand-900"]

    def test_reports_updates(self, capsys, no_color):
        colors = {"brand": "#000000", "brand-50": "#111111", "other": "#222222"}
        merge_colors(colors, "brand", {"50": "#ffffff"}, "#777777")

        out = capsys.readouterr().out
        assert "updated base color: brand => #777777" in out
        assert "updated shade: brand-50 => #ffffff" in out
        assert colors["other"] == "#222222"


class TestEnsureColors:
    def test_creates_missing_levels_and_keeps_siblings(self):
        doc = {"content": [], "theme": {"fontFamily": {"sans": ["Inter"]}}}
        colors = ensure_colors(doc)
        assert colors == {}
        assert doc == {"content": [], "theme": {"fontFamily": {"sans": ["Inter"]}, "extend": {"colors": {}}}}

    def test_returns_existing_mapping(self):
        doc = parse_config(EXISTING).document
        assert ensure_colors(doc) is doc["theme"]["extend"]["colors"]


def test_scripted_confirm_replays_answers():
    confirm = ScriptedConfirm(True, False)
    assert confirm("a?") is True
    assert confirm("b?") is False
    assert confirm.questions == ["a?", "b?"]
