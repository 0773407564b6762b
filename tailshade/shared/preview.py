#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tailshade/shared/preview.py

import re

from tailshade.core import config as c
from tailshade.shared.sanitizer import parse_color

ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def get_visible_len(s: str) -> int:
    return len(ANSI_ESCAPE.sub('', s))


def print_color_block(color: str, title: str = "color", end: str = "\n") -> None:
    """Print a truecolor swatch followed by the color's own notation."""
    r, g, b = (int(round(v)) for v in parse_color(color))
    padding = " " * max(0, 18 - get_visible_len(title))

    print(f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   \033[48;2;{r};{g};{b}m                {c.RESET}  {c.BOLD_WHITE}{color}{c.RESET}", end=end)
