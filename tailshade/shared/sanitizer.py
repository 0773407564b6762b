#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tailshade/shared/sanitizer.py

import argparse
import math
import re
from typing import List, Tuple

from tailshade.core import config as c
from tailshade.core.conversions import hsl_to_rgb
from tailshade.core.errors import InvalidColorError

HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
FUNC_RE = re.compile(r"^(rgba?|hsla?)\s*\((.*)\)$", re.IGNORECASE)
NUMBER_RE = re.compile(r"^[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?(%|deg)?$", re.IGNORECASE)


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def _split_args(body: str) -> List[str]:
    """
    Splits the inside of a CSS color function into tokens. Both the legacy
    comma syntax ('52, 144, 220') and the modern space syntax with an
    optional '/ alpha' tail ('52 144 220 / 50%') are accepted.
    """
    body = body.replace("/", " ")
    return [tok for tok in re.split(r"[\s,]+", body.strip()) if tok]


def _parse_number(token: str, value) -> Tuple[float, str]:
    m = NUMBER_RE.match(token)
    if not m:
        raise InvalidColorError(value)
    unit = (m.group(3) or "").lower()
    number = float(token[: len(token) - len(unit)] if unit else token)
    if not math.isfinite(number):
        raise InvalidColorError(value)
    return number, unit


def _parse_rgb_args(tokens: List[str], value) -> Tuple[float, float, float]:
    channels = []
    for tok in tokens[:3]:
        number, unit = _parse_number(tok, value)
        if unit == "%":
            number = number / c.PERCENT * c.RGB_MAX
        elif unit:
            raise InvalidColorError(value)
        if not 0.0 <= number <= c.RGB_MAX:
            raise InvalidColorError(value)
        channels.append(number)
    return channels[0], channels[1], channels[2]


def _parse_hsl_args(tokens: List[str], value) -> Tuple[float, float, float]:
    hue, hue_unit = _parse_number(tokens[0], value)
    if hue_unit == "%":
        raise InvalidColorError(value)
    fractions = []
    for tok in tokens[1:3]:
        number, unit = _parse_number(tok, value)
        if unit == "deg":
            raise InvalidColorError(value)
        if not 0.0 <= number <= c.PERCENT:
            raise InvalidColorError(value)
        fractions.append(number / c.PERCENT)
    return hsl_to_rgb(hue % c.HUE_MAX, fractions[0], fractions[1])


def parse_color(value) -> Tuple[float, float, float]:
    """
    Parses a color in hex, rgb()/rgba(), hsl()/hsla() or CSS named-color
    notation into an (r, g, b) triple of 0-255 floats. Alpha components
    are accepted and discarded. Raises InvalidColorError on anything else.
    """
    if not isinstance(value, str):
        raise InvalidColorError(value)
    s = value.strip()
    if not s:
        raise InvalidColorError(value)

    m = HEX_RE.match(s)
    if m:
        digits = m.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return tuple(float(int(digits[i : i + 2], 16)) for i in (0, 2, 4))

    named = c.COLOR_NAMES.get(s.lower())
    if named:
        return tuple(float(int(named[i : i + 2], 16)) for i in (0, 2, 4))

    m = FUNC_RE.match(s)
    if m:
        func = m.group(1).lower()
        tokens = _split_args(m.group(2))
        if len(tokens) not in (3, 4):
            raise InvalidColorError(value)
        if len(tokens) == 4:
            _parse_number(tokens[3], value)
        if func.startswith("rgb"):
            return _parse_rgb_args(tokens, value)
        return _parse_hsl_args(tokens, value)

    raise InvalidColorError(value)


def is_valid_color(value) -> bool:
    try:
        parse_color(value)
    except InvalidColorError:
        return False
    return True


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_color(v: str) -> str:
    """
    Validator for --color. Keeps the notation the user typed, but gives
    bare hex digits their leading '#' so the value is usable as CSS.
    """
    s = str(v).strip()
    try:
        parse_color(s)
    except InvalidColorError:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid color value: '{raw}'")
    if HEX_RE.match(s) and not s.startswith("#"):
        s = "#" + s
    return s


def handle_color_name(v: str) -> str:
    """Validator for --name. Emptiness is left for the merger to reject."""
    return _sanitize_for_log(v).replace(" ", "-")


def handle_path(v: str) -> str:
    s = str(v).strip()
    if not s:
        raise argparse.ArgumentTypeError("empty path")
    return s


INPUT_HANDLERS = {
    "color": handle_color,
    "color_name": handle_color_name,
    "path": handle_path,
}
