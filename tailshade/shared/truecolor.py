#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tailshade/shared/truecolor.py

import os
import sys


def ensure_truecolor() -> None:
    """Advertise 24-bit color support so swatch previews render on capable terminals."""
    if sys.platform == "win32":
        return
    if os.environ.get("COLORTERM") not in ("truecolor", "24bit"):
        os.environ["COLORTERM"] = "truecolor"
