#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tailshade/main.py

import argparse
import sys
from typing import List, Optional

from tailshade import __version__
from tailshade.core import config as c
from tailshade.core.errors import MisuseError, TailshadeError
from tailshade.logic.update import engine
from tailshade.shared.logger import log, TailshadeArgumentParser
from tailshade.shared.sanitizer import INPUT_HANDLERS
from tailshade.shared.truecolor import ensure_truecolor


def get_parser() -> argparse.ArgumentParser:
    """Create argument parser for the tailshade command."""
    parser = TailshadeArgumentParser(
        prog="tailshade",
        description="tailshade: generate a 50-900 shade ramp from one color and add it to tailwind.config.js",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"tailshade {__version__}",
        help="show program version and exit",
    )

    input_group = parser.add_argument_group("color input")
    input_group.add_argument(
        "-c",
        "--color",
        type=INPUT_HANDLERS["color"],
        default=c.DEFAULT_COLOR,
        help=f"base color as hex, rgb(), hsl() or a css name (default: {c.DEFAULT_COLOR})",
    )
    input_group.add_argument(
        "-n",
        "--name",
        type=INPUT_HANDLERS["color_name"],
        default=c.DEFAULT_NAME,
        help=f"color name used for the tailwind keys (default: {c.DEFAULT_NAME})",
    )
    input_group.add_argument(
        "-o",
        "--output",
        type=INPUT_HANDLERS["path"],
        default=c.DEFAULT_OUTPUT,
        help=f"config file name, informational only (default: {c.DEFAULT_OUTPUT})",
    )

    run_group = parser.add_argument_group("run options")
    run_group.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="answer yes to every prompt",
    )
    run_group.add_argument(
        "--dry-run",
        action="store_true",
        help="print the generated shades without touching any file",
    )
    run_group.add_argument(
        "--no-preview",
        action="store_true",
        help="do not render color swatches",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for tailshade CLI"""
    parser = get_parser()
    args = parser.parse_args(argv)
    if not args.no_preview:
        ensure_truecolor()

    try:
        engine.run(args)
    except MisuseError as e:
        log("error", str(e))
        sys.exit(1)
    except TailshadeError as e:
        log("error", str(e))
    except KeyboardInterrupt:
        print()
        log("error", "interrupted")
        sys.exit(130)


if __name__ == "__main__":
    main()
