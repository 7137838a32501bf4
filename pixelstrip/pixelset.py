"""Windows onto runs of RGB pixels that index and update like arrays."""

from __future__ import annotations

from typing import Callable, Iterator, MutableSequence, Union

from pixelstrip.pixeltypes import CRGB

Color = Union[CRGB, int]


def _byte(value: int) -> int:
    return int(value) & 0xFF


def _as_crgb(color: Color) -> CRGB:
    if isinstance(color, CRGB):
        return color
    return CRGB.from_code(color)


class PixelView:
    """A window onto a list of :class:`CRGB` pixels.

    The window does not own the pixels: writes go straight to the underlying
    list.  A window may run backwards, in which case index 0 is its highest
    position in the list.  The list should hold distinct pixel objects.
    """

    def __init__(self, leds: MutableSequence[CRGB], start: int, end: int) -> None:
        """Cover ``leds[start]`` to ``leds[end]`` inclusive; ``start > end`` runs backwards."""
        step = -1 if end - start < 0 else 1
        self._setup(leds, start, (end - start) + step)

    def _setup(self, leds: MutableSequence[CRGB], base: int, length: int) -> None:
        self._leds = leds
        self._base = base
        self._length = length
        self._dir = -1 if length < 0 else 1
        if length:
            last = base + length - self._dir
            low, high = min(base, last), max(base, last)
            if low < 0 or high >= len(leds):
                raise IndexError(
                    f"view [{base}, {last}] reaches outside {len(leds)} pixels"
                )
        elif not 0 <= base <= len(leds):
            raise IndexError(f"view start {base} is outside {len(leds)} pixels")

    @classmethod
    def of_length(cls, leds: MutableSequence[CRGB], length: int) -> PixelView:
        """A view starting at ``leds[0]`` covering ``length`` pixels; negative runs backwards."""
        view = cls.__new__(cls)
        view._setup(leds, 0, length)
        return view

    @staticmethod
    def _make(leds: MutableSequence[CRGB], base: int, length: int) -> PixelView:
        view = PixelView.__new__(PixelView)
        view._setup(leds, base, length)
        return view

    @property
    def leds(self) -> MutableSequence[CRGB]:
        """The underlying pixel list."""
        return self._leds

    @property
    def start(self) -> int:
        """Position in the underlying list of the view's first pixel."""
        return self._base

    def _positions(self) -> range:
        return range(self._base, self._base + self._length, self._dir)

    def _position(self, index: int) -> int:
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError(f"pixel index out of range for a view of {size}")
        return self._base + self._dir * index

    def __len__(self) -> int:
        return abs(self._length)

    def __iter__(self) -> Iterator[CRGB]:
        for position in self._positions():
            yield self._leds[position]

    def __getitem__(self, index: int) -> CRGB:
        return self._leds[self._position(index)]

    def __setitem__(self, index: int, color: Color) -> None:
        self._leds[self._position(index)].set_rgb(*_as_crgb(color))

    def __eq__(self, other: object) -> bool:
        """Views are equal when they cover the same pixels in the same order."""
        if not isinstance(other, PixelView):
            return NotImplemented
        return (
            self._leds is other._leds
            and self._base == other._base
            and self._length == other._length
        )

    def __hash__(self) -> int:
        return hash((id(self._leds), self._base, self._length))

    def __neg__(self) -> PixelView:
        """The same pixels in the opposite order."""
        if not self._length:
            return self._make(self._leds, self._base, 0)
        return PixelView(self._leds, self._base + self._length - self._dir, self._base)

    def __bool__(self) -> bool:
        return any(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(start={self._base}, length={self._length})"

    def reversed(self) -> bool:
        """Whether the view runs backwards over the list."""
        return self._length < 0

    def subset(self, start: int, end: int) -> PixelView:
        """Inclusive window measured from this view's first list position."""
        return PixelView(self._leds, self._base + start, self._base + end)

    def _each(self, func: Callable[[CRGB], object]) -> PixelView:
        for pixel in self:
            func(pixel)
        return self

    def _pairwise(self, other: PixelView, func: Callable[[CRGB, CRGB], object]) -> PixelView:
        for pixel, source in zip(self, other):
            func(pixel, source)
        return self

    def fill_solid(self, color: Color) -> PixelView:
        """Set every pixel to ``color``."""
        rgb = tuple(_as_crgb(color))
        return self._each(lambda p: p.set_rgb(*rgb))

    def assign(self, other: PixelView) -> PixelView:
        """Copy pixels from ``other``; only the shorter length is copied."""
        return self._pairwise(other, lambda p, q: p.set_rgb(*q))

    def add_to_rgb(self, inc: int) -> PixelView:
        return self._each(lambda p: p.add_to_rgb(inc))

    def sub_from_rgb(self, inc: int) -> PixelView:
        return self._each(lambda p: p.subtract_from_rgb(inc))

    def increment(self) -> PixelView:
        return self._each(CRGB.increment)

    def decrement(self) -> PixelView:
        return self._each(CRGB.decrement)

    def __iadd__(self, other: PixelView) -> PixelView:
        if not isinstance(other, PixelView):
            return NotImplemented
        return self._pairwise(other, CRGB.__iadd__)

    def __isub__(self, other: PixelView) -> PixelView:
        if not isinstance(other, PixelView):
            return NotImplemented
        return self._pairwise(other, CRGB.__isub__)

    def __ifloordiv__(self, d: int) -> PixelView:
        return self._each(lambda p: p.__ifloordiv__(d))

    def __irshift__(self, d: int) -> PixelView:
        return self._each(lambda p: p.__irshift__(d))

    def __imul__(self, d: int) -> PixelView:
        return self._each(lambda p: p.__imul__(d))

    def __imod__(self, scaledown: int) -> PixelView:
        return self.nscale8_video(scaledown)

    def __ior__(self, other: Union[PixelView, CRGB, int]) -> PixelView:
        if isinstance(other, PixelView):
            return self._pairwise(other, CRGB.__ior__)
        return self._each(lambda p: p.__ior__(other))

    def __iand__(self, other: Union[PixelView, CRGB, int]) -> PixelView:
        if isinstance(other, PixelView):
            return self._pairwise(other, CRGB.__iand__)
        return self._each(lambda p: p.__iand__(other))

    def nscale8_video(self, scaledown: int) -> PixelView:
        """Video-scale every pixel; lit channels stay lit unless scaledown is 0."""
        return self._each(lambda p: p.nscale8_video(scaledown))

    def fade_light_by(self, fadefactor: int) -> PixelView:
        return self.nscale8_video(255 - _byte(fadefactor))

    def nscale8(self, scaledown: Union[int, CRGB, PixelView]) -> PixelView:
        """Scale every pixel by a value, a pixel, or pixel by pixel by another view."""
        if isinstance(scaledown, PixelView):
            return self._pairwise(scaledown, lambda p, q: p.nscale8(q))
        return self._each(lambda p: p.nscale8(scaledown))

    def fade_to_black_by(self, fade: int) -> PixelView:
        return self.nscale8(255 - _byte(fade))


class CRGBArray(PixelView):
    """A view that owns a fresh list of ``size`` black pixels."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"array size must not be negative, got {size}")
        self._setup([CRGB() for _ in range(size)], 0, size)