#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tailshade/logic/config/discovery.py

import os
from pathlib import Path
from typing import Callable, Optional, Union

from tailshade.core import config as c
from tailshade.core.errors import ConfigWriteError
from tailshade.shared.logger import log


def create_config_template(path: Path) -> None:
    try:
        path.write_text(c.CONFIG_TEMPLATE, encoding="utf-8")
    except OSError as e:
        raise ConfigWriteError(f"could not create '{path}': {e}") from e


def locate_config(directory: Union[str, "os.PathLike[str]"], confirm: Callable[[str], bool]) -> Optional[Path]:
    """
    Find the Tailwind config to update in `directory`.

    tailwind.config.js wins over tailwind.config.cjs. When neither exists
    the operator is asked whether to create a fresh tailwind.config.js;
    declining returns None and nothing is written.
    """
    directory = Path(directory)
    js_path = directory / c.CONFIG_FILE_JS
    cjs_path = directory / c.CONFIG_FILE_CJS

    if js_path.exists():
        return js_path
    if cjs_path.exists():
        log("info", f"found {c.CONFIG_FILE_CJS} instead of {c.CONFIG_FILE_JS}")
        return cjs_path

    log("info", "no config file found")
    question = f"no {c.CONFIG_FILE_JS} or {c.CONFIG_FILE_CJS} found. create a new one? (y/n): "
    if not confirm(question):
        log("info", "aborting. no config file was created")
        return None

    create_config_template(js_path)
    log("success", f"new {c.CONFIG_FILE_JS} created")
    return js_path
