#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tailshade/shared/logger.py

import argparse
import os
import sys

from tailshade.core import config as c


def _use_color(stream) -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def log(level: str, message: str) -> None:
    """
    Print '[level] message'. info/success go to stdout, everything else to
    stderr. Tags are ANSI-styled only on a terminal and never when NO_COLOR is set.
    """
    level = str(level).lower()
    stream = sys.stdout if level in ["info", "success"] else sys.stderr
    if not _use_color(stream):
        print(f"[{level}] {message}", file=stream)
        return
    tag_color = c.MSG_BOLD_COLORS.get(level, c.RESET)
    msg_color = c.MSG_COLORS.get(level, c.RESET)
    print(f"{tag_color}[{level}]{c.RESET} {msg_color}{message}{c.RESET}", file=stream)


class TailshadeArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """
        Routes argparse failures (including rejected --color values) through
        the color-coded logger, then exits with the standard CLI error code 2.
        """
        log("error", message)
        sys.exit(2)
