#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tailshade/logic/shades/engine.py

from typing import Dict, List, Sequence, Tuple

from tailshade.core import config as c
from tailshade.core import conversions as conv
from tailshade.shared.sanitizer import parse_color

Lab = Tuple[float, float, float]


def _interpolate_lab(lab1: Lab, lab2: Lab, t: float) -> Lab:
    """Linear interpolation between two Lab points."""
    return (
        lab1[0] + t * (lab2[0] - lab1[0]),
        lab1[1] + t * (lab2[1] - lab1[1]),
        lab1[2] + t * (lab2[2] - lab1[2]),
    )


def sample_lab_path(stops: Sequence[Lab], count: int) -> List[str]:
    """
    Sample `count` evenly spaced colors along a piecewise-linear path through
    `stops` (stops are spread evenly over [0, 1]). Returns CSS hex strings.
    """
    num_segments = len(stops) - 1
    total_intervals = count - 1
    samples: List[str] = []

    for i in range(count):
        t_global = (i / total_intervals) if total_intervals > 0 else 0
        t_scaled = t_global * num_segments
        idx = min(int(t_scaled), num_segments - 1)
        L, a, b = _interpolate_lab(stops[idx], stops[idx + 1], t_scaled - idx)
        samples.append(conv.rgb_to_hex(*conv.lab_to_rgb(L, a, b)))

    return samples


def generate_shades(base_color: str) -> Dict[str, str]:
    """
    Build the 50..900 shade ramp for a base color.

    The ramp runs light to dark through three anchors: the base color with
    its HSL lightness raised to 90%, the base color itself, and the base
    color with its lightness dropped to 10%. The path is interpolated in
    CIE Lab and sampled at ten even steps. The '500' entry is always the
    base color exactly as given.

    Raises InvalidColorError if `base_color` is not a recognised notation.
    """
    rgb = parse_color(base_color)

    light = conv.round_rgb(*conv.with_hsl_lightness(rgb, c.LIGHT_ENDPOINT_L))
    dark = conv.round_rgb(*conv.with_hsl_lightness(rgb, c.DARK_ENDPOINT_L))
    stops = [conv.rgb_to_lab(*light), conv.rgb_to_lab(*rgb), conv.rgb_to_lab(*dark)]

    samples = sample_lab_path(stops, len(c.SHADE_LABELS))
    samples[c.BASE_SHADE_INDEX] = base_color

    return dict(zip(c.SHADE_LABELS, samples))


def lightness(color: str) -> float:
    """CIE L* of a color in any supported notation."""
    return conv.rgb_to_lab(*parse_color(color))[0]
