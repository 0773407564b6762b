#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tailshade/logic/config/merger.py

import enum
import os
import shutil
import time
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional, Union

from tailshade.core import config as c
from tailshade.core.errors import (
    BackupError,
    ConfigParseError,
    ConfigReadError,
    ConfigWriteError,
    MisuseError,
)
from tailshade.shared.logger import log
from .parser import ConfigDocument, ConfigModule, ConfigValue, parse_config
from .serializer import serialize_config

PathLike = Union[str, "os.PathLike[str]"]
Confirm = Callable[[str], bool]


class MergeOutcome(enum.Enum):
    UPDATED = "updated"
    SKIPPED = "skipped"


def backup_path_for(path: Path, timestamp_ms: int) -> Path:
    """tailwind.config.js -> tailwind.config.backup.<ms>.js, in the same directory."""
    return path.with_name(f"{path.stem}.{c.BACKUP_INFIX}.{timestamp_ms}{path.suffix}")


def create_backup(path: Path) -> Path:
    backup = backup_path_for(path, int(time.time() * 1000))
    try:
        shutil.copyfile(path, backup)
    except OSError as e:
        raise BackupError(f"could not back up '{path}': {e}") from e
    return backup


def load_config(path: Path) -> ConfigModule:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(f"could not read '{path}': {e}") from e
    try:
        return parse_config(text)
    except ConfigParseError as e:
        raise ConfigParseError(f"could not parse '{path}': {e.reason}", e.line, e.column) from e


def write_config(path: Path, module: ConfigModule) -> None:
    """Replace the file in full. The text lands in a sibling first, then is renamed over."""
    tmp = path.with_name(path.name + ".tmp")
    try:
        text = serialize_config(module)
        with tmp.open("w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp, path)
    except (OSError, ValueError) as e:
        tmp.unlink(missing_ok=True)
        raise ConfigWriteError(f"could not write '{path}': {e}") from e


def _ensure_mapping(parent: Dict[str, ConfigValue], key: str, dotted: str) -> Dict[str, ConfigValue]:
    value = parent.get(key)
    if value is None:
        value = parent[key] = {}
    if not isinstance(value, dict):
        raise ConfigReadError(f"'{dotted}' must be an object, found {type(value).__name__}")
    return value


def ensure_colors(document: ConfigDocument) -> Dict[str, ConfigValue]:
    """Return theme.extend.colors, creating any missing level. Sibling keys are left alone."""
    theme = _ensure_mapping(document, "theme", "theme")
    extend = _ensure_mapping(theme, "extend", "theme.extend")
    return _ensure_mapping(extend, "colors", "theme.extend.colors")


def _shade_order(label: str):
    return (0, int(label)) if label.isdigit() else (1, label)


def merge_colors(colors: Dict[str, ConfigValue], color_name: str, shades: Mapping[str, str], base_color: str) -> None:
    """Write the base color, then each shade in ascending label order, logging each key."""
    verb = "updated" if color_name in colors else "added"
    colors[color_name] = base_color
    log("info", f"{verb} base color: {color_name} => {base_color}")

    for label in sorted(shades, key=_shade_order):
        key = f"{color_name}-{label}"
        verb = "updated" if key in colors else "added"
        colors[key] = shades[label]
        log("info", f"{verb} shade: {key} => {shades[label]}")


def apply_colors(
    path: PathLike,
    color_name: str,
    shades: Optional[Mapping[str, str]],
    base_color: str,
    confirm: Confirm,
) -> MergeOutcome:
    """
    Merge a named color and its shade ramp into the Tailwind config at `path`.

    Steps: back up the file (best effort), load and parse it, make sure
    theme.extend.colors exists, ask before overwriting an existing entry,
    set '<name>' and '<name>-<label>' keys, and rewrite the whole file.

    Returns MergeOutcome.SKIPPED when the operator declines an overwrite; the
    file is not touched in that case. Raises MisuseError for an empty name
    or ramp, ConfigReadError/ConfigWriteError for I/O and parse failures.
    """
    if not color_name or not shades:
        raise MisuseError("missing required arguments: --color and --name")

    path = Path(path)

    try:
        backup = create_backup(path)
        log("info", f"backup created at: {backup}")
    except BackupError as e:
        log("warning", str(e))

    module = load_config(path)
    colors = ensure_colors(module.document)

    if colors.get(color_name) is not None:
        question = f"color '{color_name}' already exists in {path.name}. overwrite it? (y/n): "
        if not confirm(question):
            log("info", f"skipped: '{color_name}' left unchanged")
            return MergeOutcome.SKIPPED

    merge_colors(colors, color_name, shades, base_color)
    write_config(path, module)
    log("success", f"tailwind config updated with new shades for '{color_name}'")
    return MergeOutcome.UPDATED
