"""Chipset identifiers for strips added to the controller registry."""

from __future__ import annotations

from enum import IntEnum


class ESPIChipsets(IntEnum):
    """Clocked (SPI style) LED chipsets.  DOTSTAR drives the same parts as APA102."""

    LPD6803 = 0
    LPD8806 = 1
    WS2801 = 2
    WS2803 = 3
    SM16716 = 4
    P9813 = 5
    APA102 = 6
    SK9822 = 7
    DOTSTAR = 8


class ESM(IntEnum):
    """Matrix panel drivers."""

    SMART_MATRIX = 0


class OWS2811(IntEnum):
    """Eight-lane parallel WS281x output variants."""

    OCTOWS2811 = 0
    OCTOWS2811_400 = 1
    OCTOWS2813 = 2


class SWS2812(IntEnum):
    """WS2812 strips driven through a serial port."""

    WS2812SERIAL = 0


_ATTINY_CONTROLLERS = 2
_DEFAULT_CONTROLLERS = 8


def controller_count_limit(attiny: bool = False) -> int:
    """Number of controllers a target supports: 2 on ATtiny parts, 8 elsewhere."""
    return _ATTINY_CONTROLLERS if attiny else _DEFAULT_CONTROLLERS