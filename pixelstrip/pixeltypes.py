"""The RGB pixel type and its 8-bit colour arithmetic."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

_CHANNELS = ("r", "g", "b")
_ALIASES = {"red": "r", "green": "g", "blue": "b"}


def _byte(value: int) -> int:
    return int(value) & 0xFF


def _qadd8(a: int, b: int) -> int:
    return min(a + b, 255)


def _qsub8(a: int, b: int) -> int:
    return max(a - b, 0)


def _qmul8(a: int, b: int) -> int:
    return min(a * b, 255)


def _scale8(value: int, scale: int) -> int:
    return (value * (1 + scale)) >> 8


def _scale8_video(value: int, scale: int) -> int:
    if value == 0:
        return 0
    return ((value * scale) >> 8) + (1 if scale else 0)


def _scale16(value: int, scale: int) -> int:
    return (value * (1 + scale)) >> 16


def _lerp8by8(a: int, b: int, frac: int) -> int:
    if b > a:
        return a + _scale8(b - a, frac)
    return a - _scale8(a - b, frac)


def _lerp16by16(a: int, b: int, frac: int) -> int:
    if b > a:
        return a + _scale16(b - a, frac)
    return a - _scale16(a - b, frac)


@dataclass(eq=False)
class CRGB:
    """An RGB pixel whose channels are 8-bit values with saturating arithmetic.

    Equality compares channels; ordering compares the sum of the channels.
    """

    r: int = 0
    g: int = 0
    b: int = 0

    def __setattr__(self, name: str, value: object) -> None:
        name = _ALIASES.get(name, name)
        if name in _CHANNELS:
            value = _byte(value)  # type: ignore[arg-type]
        object.__setattr__(self, name, value)

    def __getattr__(self, name: str) -> int:
        target = _ALIASES.get(name)
        if target is None:
            raise AttributeError(name)
        return getattr(self, target)

    @classmethod
    def from_code(cls, colorcode: int) -> CRGB:
        """Build a pixel from a 0xRRGGBB colour code."""
        code = int(colorcode)
        return cls((code >> 16) & 0xFF, (code >> 8) & 0xFF, code & 0xFF)

    def copy(self) -> CRGB:
        return CRGB(self.r, self.g, self.b)

    def __getitem__(self, index: int) -> int:
        return getattr(self, _CHANNELS[index])

    def __setitem__(self, index: int, value: int) -> None:
        setattr(self, _CHANNELS[index], value)

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b))

    def set_rgb(self, r: int, g: int, b: int) -> CRGB:
        """Set all three channels and return this pixel."""
        self.r, self.g, self.b = r, g, b
        return self

    def set_color_code(self, colorcode: int) -> CRGB:
        """Set the channels from a 0xRRGGBB colour code and return this pixel."""
        code = int(colorcode)
        return self.set_rgb((code >> 16) & 0xFF, (code >> 8) & 0xFF, code & 0xFF)

    def _apply(self, func, *values: int) -> CRGB:
        r, g, b = values if len(values) == 3 else values * 3
        self.r = func(self.r, r)
        self.g = func(self.g, g)
        self.b = func(self.b, b)
        return self

    def add_to_rgb(self, d: int) -> CRGB:
        """Add a constant to each channel, saturating at 255."""
        return self._apply(_qadd8, _byte(d))

    def subtract_from_rgb(self, d: int) -> CRGB:
        """Subtract a constant from each channel, saturating at 0."""
        return self._apply(_qsub8, _byte(d))

    def increment(self) -> CRGB:
        """Add one to each channel, saturating at 255."""
        return self.add_to_rgb(1)

    def decrement(self) -> CRGB:
        """Subtract one from each channel, saturating at 0."""
        return self.subtract_from_rgb(1)

    def __iadd__(self, other: CRGB) -> CRGB:
        if not isinstance(other, CRGB):
            return NotImplemented
        return self._apply(_qadd8, *other)

    def __isub__(self, other: CRGB) -> CRGB:
        if not isinstance(other, CRGB):
            return NotImplemented
        return self._apply(_qsub8, *other)

    def __add__(self, other: CRGB) -> CRGB:
        if not isinstance(other, CRGB):
            return NotImplemented
        return self.copy()._apply(_qadd8, *other)

    def __sub__(self, other: CRGB) -> CRGB:
        if not isinstance(other, CRGB):
            return NotImplemented
        return self.copy()._apply(_qsub8, *other)

    def __imul__(self, d: int) -> CRGB:
        return self._apply(_qmul8, _byte(d))

    def __mul__(self, d: int) -> CRGB:
        return self.copy()._apply(_qmul8, _byte(d))

    def __ifloordiv__(self, d: int) -> CRGB:
        return self._apply(lambda c, v: c // v, _byte(d))

    def __floordiv__(self, d: int) -> CRGB:
        return self.copy().__ifloordiv__(d)

    def __irshift__(self, d: int) -> CRGB:
        return self._apply(lambda c, v: c >> v, _byte(d))

    def __ior__(self, other: Union[CRGB, int]) -> CRGB:
        if isinstance(other, CRGB):
            return self._apply(max, *other)
        return self._apply(max, _byte(other))

    def __or__(self, other: CRGB) -> CRGB:
        if not isinstance(other, CRGB):
            return NotImplemented
        return self.copy()._apply(max, *other)

    def __iand__(self, other: Union[CRGB, int]) -> CRGB:
        if isinstance(other, CRGB):
            return self._apply(min, *other)
        return self._apply(min, _byte(other))

    def __and__(self, other: CRGB) -> CRGB:
        if not isinstance(other, CRGB):
            return NotImplemented
        return self.copy()._apply(min, *other)

    def __imod__(self, scaledown: int) -> CRGB:
        return self.nscale8_video(scaledown)

    def __mod__(self, scaledown: int) -> CRGB:
        return self.copy().nscale8_video(scaledown)

    def __neg__(self) -> CRGB:
        return CRGB(255 - self.r, 255 - self.g, 255 - self.b)

    def __bool__(self) -> bool:
        return bool(self.r or self.g or self.b)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CRGB):
            return NotImplemented
        return (self.r, self.g, self.b) == (other.r, other.g, other.b)

    def _total(self) -> int:
        return self.r + self.g + self.b

    def __lt__(self, other: CRGB) -> bool:
        if not isinstance(other, CRGB):
            return NotImplemented
        return self._total() < other._total()

    def __le__(self, other: CRGB) -> bool:
        if not isinstance(other, CRGB):
            return NotImplemented
        return self._total() <= other._total()

    def __gt__(self, other: CRGB) -> bool:
        if not isinstance(other, CRGB):
            return NotImplemented
        return self._total() > other._total()

    def __ge__(self, other: CRGB) -> bool:
        if not isinstance(other, CRGB):
            return NotImplemented
        return self._total() >= other._total()

    def nscale8_video(self, scaledown: int) -> CRGB:
        """Scale to scaledown/256 brightness; non-zero channels stay non-zero unless scaledown is 0."""
        return self._apply(_scale8_video, _byte(scaledown))

    def fade_light_by(self, fadefactor: int) -> CRGB:
        """Video-scale by 255 - fadefactor."""
        return self.nscale8_video(255 - _byte(fadefactor))

    def nscale8(self, scaledown: Union[int, CRGB]) -> CRGB:
        """Scale to scaledown/256 brightness, per channel when given a pixel."""
        if isinstance(scaledown, CRGB):
            return self._apply(_scale8, *scaledown)
        return self._apply(_scale8, _byte(scaledown))

    def scale8(self, scaledown: CRGB) -> CRGB:
        """Return a new pixel scaled channel by channel by another pixel."""
        return self.copy()._apply(_scale8, *scaledown)

    def fade_to_black_by(self, fadefactor: int) -> CRGB:
        """Scale by 255 - fadefactor, allowing channels to reach zero."""
        return self.nscale8(255 - _byte(fadefactor))

    def get_luma(self) -> int:
        """Approximate perceived brightness from 0 to 255."""
        luma = _scale8(self.r, 54) + _scale8(self.g, 183) + _scale8(self.b, 18)
        return luma & 0xFF

    def get_average_light(self) -> int:
        """Average of the three channels."""
        total = _scale8(self.r, 85) + _scale8(self.g, 85) + _scale8(self.b, 85)
        return total & 0xFF

    def maximize_brightness(self, limit: int = 255) -> None:
        """Scale up so the brightest channel reaches about ``limit``."""
        peak = max(self.r, self.g, self.b)
        if peak > 0:
            factor = ((_byte(limit) * 256) // peak) & 0xFFFF
            self._apply(lambda c, f: (c * f) // 256, factor)

    def lerp8(self, other: CRGB, frac: int) -> CRGB:
        """Return the blend from this pixel towards ``other`` by frac/256."""
        frac = _byte(frac)
        return CRGB(*(_lerp8by8(a, b, frac) for a, b in zip(self, other)))

    def lerp16(self, other: CRGB, frac: int) -> CRGB:
        """Return the blend from this pixel towards ``other`` by frac/65536."""
        frac = int(frac) & 0xFFFF
        return CRGB(*(_lerp16by16(a << 8, b << 8, frac) >> 8 for a, b in zip(self, other)))

    def get_parity(self) -> int:
        """Lowest bit of the 8-bit sum of the channels."""
        return ((self.r + self.g + self.b) & 0xFF) & 0x01

    def set_parity(self, parity: int) -> None:
        """Nudge the colour by the smallest step so its parity becomes ``parity``."""
        if parity == self.get_parity():
            return
        r, g, b = self.r, self.g, self.b
        grey = r == g == b
        if parity:
            if 0 < b < 255:
                if grey:
                    r += 1
                    g += 1
                b += 1
            elif 0 < r < 255:
                r += 1
            elif 0 < g < 255:
                g += 1
            else:
                if grey:
                    r ^= 1
                    g ^= 1
                b ^= 1
        else:
            if b > 1:
                if grey:
                    r -= 1
                    g -= 1
                b -= 1
            elif g > 1:
                g -= 1
            elif r > 1:
                r -= 1
            else:
                if grey:
                    r ^= 1
                    g ^= 1
                b ^= 1
        self.set_rgb(r, g, b)