#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tailshade/logic/shades/renderer.py

from typing import Dict

from tailshade.core import config as c
from tailshade.shared.preview import print_color_block


def render_shades(color_name: str, shades: Dict[str, str]) -> None:
    """Print the shade ramp as swatches, one line per Tailwind key."""
    print()
    for label, color in shades.items():
        key = f"{color_name}-{label}"
        title = f"{c.MSG_BOLD_COLORS['info']}{key:>14}{c.RESET}"
        print_color_block(color, title)
    print()


def render_shades_plain(color_name: str, shades: Dict[str, str]) -> None:
    """Print the ramp as 'key: value' lines, for pipes and --no-preview."""
    for label, color in shades.items():
        print(f"{color_name}-{label}: {color}")
