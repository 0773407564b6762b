#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tailshade/logic/update/engine.py

import argparse
import sys
from pathlib import Path
from typing import Optional

from tailshade.core.errors import MisuseError
from tailshade.logic.config.discovery import locate_config
from tailshade.logic.config.merger import MergeOutcome, apply_colors
from tailshade.logic.shades.engine import generate_shades
from tailshade.logic.shades.renderer import render_shades, render_shades_plain
from tailshade.shared.logger import log
from tailshade.shared.prompt import always_yes, ask_yes_no


def run(args: argparse.Namespace, cwd: Optional[Path] = None) -> Optional[MergeOutcome]:
    """
    Generate the ramp for args.color and merge it into the project's
    Tailwind config. Returns None when nothing was merged (dry run, or the
    operator declined to create a config file).
    """
    if not args.color or not args.name:
        raise MisuseError("missing required arguments: --color and --name")

    confirm = always_yes if getattr(args, "yes", False) else ask_yes_no

    shades = generate_shades(args.color)

    if getattr(args, "no_preview", False) or not sys.stdout.isatty():
        if getattr(args, "dry_run", False):
            render_shades_plain(args.name, shades)
    else:
        render_shades(args.name, shades)

    if getattr(args, "dry_run", False):
        log("info", "dry run: no files were touched")
        return None

    directory = Path.cwd() if cwd is None else Path(cwd)
    config_path = locate_config(directory, confirm)
    if config_path is None:
        return None

    output = getattr(args, "output", None)
    if output and (directory / output).resolve() != config_path.resolve():
        log("info", f"--output '{output}' is informational only; updating {config_path.name}")

    return apply_colors(config_path, args.name, shades, args.color, confirm)
