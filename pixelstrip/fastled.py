"""The top-level registry that drives every added LED controller."""

from __future__ import annotations

import time
from typing import Callable, MutableSequence, Optional, Protocol, Union

from pixelstrip.controller import BINARY_DITHER, DISABLE_DITHER, LedController
from pixelstrip.pixelset import PixelView
from pixelstrip.pixeltypes import CRGB

Color = Union[CRGB, int]
PowerFunction = Callable[[int, int], int]

_DITHER_FPS_THRESHOLD = 100
_DEFAULT_POWER_DATA = 0xFFFFFFFF


class _Clock(Protocol):
    def micros(self) -> int: ...

    def sleep(self, microseconds: int) -> None: ...


class _SystemClock:
    """Monotonic wall clock measured in microseconds."""

    def micros(self) -> int:
        return time.monotonic_ns() // 1000

    def sleep(self, microseconds: int) -> None:
        time.sleep(max(microseconds, 0) / 1_000_000)


def _as_crgb(color: Color) -> CRGB:
    if isinstance(color, CRGB):
        return color.copy()
    return CRGB.from_code(color)


class FastLED:
    """Keeps the added controllers and their shared settings.

    Brightness, the refresh-rate cap, a power-limiting function and frame-rate
    tracking apply to every controller; ``show`` writes all of them out.
    """

    def __init__(self, clock: Optional[_Clock] = None) -> None:
        self._clock: _Clock = clock if clock is not None else _SystemClock()
        self._controllers: list[LedController] = []
        self._scale = 255
        self._fps = 0
        self._min_micros = 0
        self._power_func: Optional[PowerFunction] = None
        self._power_data = _DEFAULT_POWER_DATA
        self._last_show = 0
        self._fps_frames = 0
        self._last_frame_ms = 0

    @property
    def brightness(self) -> int:
        """Global brightness scale, 0 to 255."""
        return self._scale

    @brightness.setter
    def brightness(self, scale: int) -> None:
        self._scale = int(scale) & 0xFF

    @property
    def fps(self) -> int:
        """The most recently measured frames per second."""
        return self._fps

    @property
    def min_micros(self) -> int:
        """Minimum time between frames in microseconds; 0 means no cap."""
        return self._min_micros

    def _millis(self) -> int:
        return self._clock.micros() // 1000

    def add_leds(
        self,
        controller: LedController,
        data: MutableSequence[CRGB],
        leds_or_offset: int,
        leds_if_offset: int = 0,
    ) -> LedController:
        """Register ``controller`` for pixels of ``data``.

        With three arguments the third is the pixel count; with four the third
        is an offset into ``data`` and the fourth the count.
        """
        if leds_if_offset > 0:
            offset, count = leds_or_offset, leds_if_offset
        else:
            offset, count = 0, leds_or_offset
        if offset < 0:
            raise IndexError(f"offset must not be negative, got {offset}")
        if offset == 0:
            leds: MutableSequence[CRGB] = data
        elif count > 0:
            leds = PixelView(data, offset, offset + count - 1)  # type: ignore[assignment]
        else:
            leds = []
        controller.init()
        controller.set_leds(leds, count)
        self._controllers.append(controller)
        self.set_max_refresh_rate(controller.max_refresh_rate, True)
        return controller

    def _wait_for_frame_slot(self) -> None:
        while self._min_micros:
            elapsed = self._clock.micros() - self._last_show
            if elapsed >= self._min_micros:
                break
            self._clock.sleep(self._min_micros - elapsed)
        self._last_show = self._clock.micros()

    def _power_scale(self, scale: int) -> int:
        scale = int(scale) & 0xFF
        if self._power_func is not None:
            scale = int(self._power_func(scale, self._power_data)) & 0xFF
        return scale

    def _each_frame(self, write: Callable[[LedController], object]) -> None:
        for controller in self._controllers:
            saved = controller.dither
            if self._fps < _DITHER_FPS_THRESHOLD:
                controller.dither = DISABLE_DITHER
            try:
                write(controller)
            finally:
                controller.dither = saved
        self.count_fps()

    def show(self, scale: Optional[int] = None) -> None:
        """Write every controller's pixels, at ``scale`` or the global brightness."""
        self._wait_for_frame_slot()
        level = self._power_scale(self._scale if scale is None else scale)
        self._each_frame(lambda c: c.show_leds(level))

    def show_color(self, color: Color, scale: Optional[int] = None) -> None:
        """Show ``color`` on every pixel of every controller without touching pixel data."""
        self._wait_for_frame_slot()
        level = self._power_scale(self._scale if scale is None else scale)
        shown = _as_crgb(color)
        self._each_frame(lambda c: c.show_color(shown, level))

    def clear(self, write_data: bool = False) -> None:
        """Blank the pixel data, and with ``write_data`` also show black."""
        if write_data:
            self.show_color(CRGB(0, 0, 0), 0)
        self.clear_data()

    def clear_data(self) -> None:
        """Set every controller's pixels to black."""
        for controller in self._controllers:
            controller.clear_led_data()

    def delay(self, ms: int) -> None:
        """Wait ``ms`` milliseconds, showing frames throughout (at least once)."""
        start = self._millis()
        while True:
            self._clock.sleep(1000)
            self.show()
            if self._millis() - start >= ms:
                break

    def set_temperature(self, temperature: Color) -> None:
        """Give every controller the colour temperature ``temperature``."""
        for controller in self._controllers:
            controller.temperature = _as_crgb(temperature)

    def set_correction(self, correction: Color) -> None:
        """Give every controller the colour correction ``correction``."""
        for controller in self._controllers:
            controller.correction = _as_crgb(correction)

    def set_dither(self, dither_mode: int = BINARY_DITHER) -> None:
        """Give every controller the dithering mode ``dither_mode``."""
        for controller in self._controllers:
            controller.dither = dither_mode

    def set_max_refresh_rate(self, refresh: int, constrain: bool = False) -> None:
        """Cap frames at ``refresh`` per second.

        With ``constrain`` the cap can only get slower; otherwise a refresh of
        0 removes it.
        """
        refresh = int(refresh) & 0xFFFF
        if constrain:
            if refresh > 0:
                self._min_micros = max(1_000_000 // refresh, self._min_micros)
        elif refresh > 0:
            self._min_micros = 1_000_000 // refresh
        else:
            self._min_micros = 0

    def set_power_function(
        self, func: Optional[PowerFunction], data: int = _DEFAULT_POWER_DATA
    ) -> None:
        """Use ``func(scale, data)`` to choose the brightness of each frame; None disables it."""
        self._power_func = func
        self._power_data = int(data) & 0xFFFFFFFF

    def count_fps(self, frames: int = 25) -> None:
        """Count a frame; after every ``frames`` frames recompute the frame rate."""
        due = self._fps_frames >= frames
        self._fps_frames += 1
        if due:
            elapsed = self._millis() - self._last_frame_ms
            if elapsed == 0:
                elapsed = 1
            self._fps = ((self._fps_frames * 1000) // elapsed) & 0xFFFF
            self._fps_frames = 0
            self._last_frame_ms = self._millis()

    def __len__(self) -> int:
        return len(self._controllers)

    def __getitem__(self, index: int) -> LedController:
        """The controller at ``index``; any index out of range gives the first."""
        if not self._controllers:
            raise IndexError("no controllers have been added")
        if 0 <= index < len(self._controllers):
            return self._controllers[index]
        return self._controllers[0]

    def size(self) -> int:
        """Number of pixels on the first controller."""
        return self[0].size()

    def leds(self) -> PixelView:
        """The pixels of the first controller."""
        return self[0].leds()