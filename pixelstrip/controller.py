"""Base class for LED controllers that turn pixel data into output frames."""

from __future__ import annotations

from typing import MutableSequence, Optional, Union

from pixelstrip.pixelset import PixelView
from pixelstrip.pixeltypes import CRGB

DISABLE_DITHER = 0
BINARY_DITHER = 1

Color = Union[CRGB, int]


def _as_crgb(color: Color) -> CRGB:
    if isinstance(color, CRGB):
        return color.copy()
    return CRGB.from_code(color)


class LedController:
    """A strip of pixels together with its output settings.

    The controller does not own its pixels: it reads them from the sequence
    given to :meth:`set_leds`.  Each show builds a frame of adjusted pixels
    and hands it to :meth:`_write`, which by default keeps it as
    ``last_frame``; subclasses override it to send the frame somewhere.
    """

    def __init__(self) -> None:
        self._leds: MutableSequence[CRGB] = []
        self._count = 0
        self.dither = BINARY_DITHER
        self.correction = CRGB(255, 255, 255)
        self.temperature = CRGB(255, 255, 255)
        self.max_refresh_rate = 0
        self.last_frame: Optional[list[CRGB]] = None
        self.frames_shown = 0

    def init(self) -> None:
        """Prepare the controller for output, forgetting any earlier frame."""
        self.last_frame = None
        self.frames_shown = 0

    def set_leds(self, leds: MutableSequence[CRGB], count: int) -> None:
        """Drive the first ``count`` pixels of ``leds``."""
        if count < 0:
            raise ValueError(f"pixel count must not be negative, got {count}")
        if count > len(leds):
            raise ValueError(f"pixel count {count} exceeds the {len(leds)} pixels given")
        self._leds = leds
        self._count = count

    def _adjustment(self, scale: int) -> CRGB:
        level = int(scale) & 0xFF
        adjust = CRGB(level, level, level)
        adjust.nscale8(_as_crgb(self.correction))
        adjust.nscale8(_as_crgb(self.temperature))
        return adjust

    def _write(self, frame: list[CRGB]) -> None:
        self.last_frame = frame

    def _emit(self, frame: list[CRGB]) -> list[CRGB]:
        self._write(frame)
        self.frames_shown += 1
        return frame

    def show_leds(self, scale: int = 255) -> list[CRGB]:
        """Output the pixels scaled by brightness, correction and temperature."""
        adjust = self._adjustment(scale)
        return self._emit([pixel.scale8(adjust) for pixel in self.leds()])

    def show_color(self, color: Color, scale: int = 255) -> list[CRGB]:
        """Output every pixel as ``color``, leaving the pixel data untouched."""
        shown = _as_crgb(color).scale8(self._adjustment(scale))
        return self._emit([shown.copy() for _ in range(self._count)])

    def clear_led_data(self) -> None:
        """Set every driven pixel to black."""
        self.leds().fill_solid(0)

    def size(self) -> int:
        """Number of pixels driven."""
        return self._count

    def leds(self) -> PixelView:
        """A view of the driven pixels; writes go to the underlying data."""
        return PixelView.of_length(self._leds, self._count)