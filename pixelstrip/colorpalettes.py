"""Predefined sixteen-entry colour palettes and gradient palettes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from pixelstrip.colors import HTMLColorCode as C

PALETTE_SIZE = 16


def palette16(colors: Iterable[int]) -> tuple[int, ...]:
    """Build a sixteen-entry palette of 0xRRGGBB codes; missing entries are black."""
    entries = [int(c) for c in colors]
    if len(entries) > PALETTE_SIZE:
        raise ValueError(f"a palette holds at most {PALETTE_SIZE} colours, got {len(entries)}")
    for code in entries:
        if not 0 <= code <= 0xFFFFFF:
            raise ValueError(f"colour code out of range: {code:#x}")
    entries.extend([0] * (PALETTE_SIZE - len(entries)))
    return tuple(entries)


@dataclass(frozen=True)
class GradientStop:
    """One stop of a gradient palette: a position from 0 to 255 and its colour."""

    index: int
    r: int
    g: int
    b: int


def gradient_stops(raw: Iterable[int]) -> tuple[GradientStop, ...]:
    """Parse the flat (index, r, g, b) byte form of a gradient palette."""
    data = bytes(raw)
    if len(data) % 4:
        raise ValueError("gradient palette data must come in groups of four bytes")
    return tuple(GradientStop(*data[i : i + 4]) for i in range(0, len(data), 4))


CLOUD_COLORS = palette16([
    C.Blue, C.DarkBlue, C.DarkBlue, C.DarkBlue,
    C.DarkBlue, C.DarkBlue, C.DarkBlue, C.DarkBlue,
    C.Blue, C.DarkBlue, C.SkyBlue, C.SkyBlue,
    C.LightBlue, C.White, C.LightBlue, C.SkyBlue,
])

# Only fifteen colours are given; the last entry is black.
LAVA_COLORS = palette16([
    C.Black, C.Maroon, C.Black, C.Maroon,
    C.DarkRed, C.Maroon, C.DarkRed,
    C.DarkRed, C.DarkRed, C.Red, C.Orange,
    C.White, C.Orange, C.Red, C.DarkRed,
])

OCEAN_COLORS = palette16([
    C.MidnightBlue, C.DarkBlue, C.MidnightBlue, C.Navy,
    C.DarkBlue, C.MediumBlue, C.SeaGreen, C.Teal,
    C.CadetBlue, C.Blue, C.DarkCyan, C.CornflowerBlue,
    C.Aquamarine, C.SeaGreen, C.Aqua, C.LightSkyBlue,
])

FOREST_COLORS = palette16([
    C.DarkGreen, C.DarkGreen, C.DarkOliveGreen, C.DarkGreen,
    C.Green, C.ForestGreen, C.OliveDrab, C.Green,
    C.SeaGreen, C.MediumAquamarine, C.LimeGreen, C.YellowGreen,
    C.LightGreen, C.LawnGreen, C.MediumAquamarine, C.ForestGreen,
])

RAINBOW_COLORS = palette16([
    0xFF0000, 0xD52A00, 0xAB5500, 0xAB7F00,
    0xABAB00, 0x56D500, 0x00FF00, 0x00D52A,
    0x00AB55, 0x0056AA, 0x0000FF, 0x2A00D5,
    0x5500AB, 0x7F0081, 0xAB0055, 0xD5002B,
])

RAINBOW_STRIPE_COLORS = palette16([
    0xFF0000, 0x000000, 0xAB5500, 0x000000,
    0xABAB00, 0x000000, 0x00FF00, 0x000000,
    0x00AB55, 0x000000, 0x0000FF, 0x000000,
    0x5500AB, 0x000000, 0xAB0055, 0x000000,
])
RAINBOW_STRIPES_COLORS = RAINBOW_STRIPE_COLORS

PARTY_COLORS = palette16([
    0x5500AB, 0x84007C, 0xB5004B, 0xE5001B,
    0xE81700, 0xB84700, 0xAB7700, 0xABAB00,
    0xAB5500, 0xDD2200, 0xF2000E, 0xC2003E,
    0x8F0071, 0x5F00A1, 0x2F00D0, 0x0007F9,
])

# Black-body style ramp; indices above about 240 wrap back towards black.
HEAT_COLORS = palette16([
    0x000000,
    0x330000, 0x660000, 0x990000, 0xCC0000, 0xFF0000,
    0xFF3300, 0xFF6600, 0xFF9900, 0xFFCC00, 0xFFFF00,
    0xFFFF33, 0xFFFF66, 0xFFFF99, 0xFFFFCC, 0xFFFFFF,
])

RAINBOW_GP = gradient_stops([
    0, 255, 0, 0,
    32, 171, 85, 0,
    64, 171, 171, 0,
    96, 0, 255, 0,
    128, 0, 171, 85,
    160, 0, 0, 255,
    192, 85, 0, 171,
    224, 171, 0, 85,
    255, 255, 0, 0,
])