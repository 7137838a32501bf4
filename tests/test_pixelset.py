import pytest
from hypothesis import given
from hypothesis import strategies as st

from pixelstrip.pixelset import CRGBArray, PixelView
from pixelstrip.pixeltypes import CRGB


def ramp(n=10):
    return [CRGB(i, i, i) for i in range(n)]


def reds(view):
    return [p.r for p in view]


def test_forward_view_is_inclusive():
    leds = ramp()
    view = PixelView(leds, 2, 5)
    assert reds(view) == list(range(2, 6))
    assert len(view) == len(range(2, 6))
    assert not view.reversed()


def test_backward_view_runs_in_reverse():
    leds = ramp()
    view = PixelView(leds, 5, 2)
    assert reds(view) == list(range(5, 1, -1))
    assert view.reversed()


def test_single_pixel_view():
    leds = ramp()
    view = PixelView(leds, 3, 3)
    assert reds(view) == [3]


def test_of_length_forward_and_empty():
    leds = ramp()
    assert reds(PixelView.of_length(leds, 4)) == list(range(4))
    empty = PixelView.of_length(leds, 0)
    assert len(empty) == 0
    assert list(empty) == []


def test_of_length_negative_reaching_before_start_fails():
    with pytest.raises(IndexError):
        PixelView.of_length(ramp(), -3)


def test_view_outside_list_fails():
    with pytest.raises(IndexError):
        PixelView(ramp(5), 2, 5)
    with pytest.raises(IndexError):
        PixelView(ramp(5), -1, 2)


def test_indexing_follows_direction():
    leds = ramp()
    view = PixelView(leds, 6, 3)
    assert view[0] is leds[6]
    assert view[-1] is leds[3]
    with pytest.raises(IndexError):
        view[4]


def test_setitem_writes_through():
    leds = ramp()
    view = PixelView(leds, 7, 4)
    view[1] = CRGB(9, 8, 7)
    view[2] = 0x010203
    assert leds[6] == CRGB(9, 8, 7)
    assert leds[5] == CRGB.from_code(0x010203)


def test_equality_compares_windows():
    leds = ramp()
    assert PixelView(leds, 1, 4) == PixelView(leds, 1, 4)
    assert not PixelView(leds, 1, 4) == PixelView(leds, 4, 1)
    assert not PixelView(leds, 1, 4) == PixelView(ramp(), 1, 4)


def test_negation_reverses():
    leds = ramp()
    view = PixelView(leds, 2, 6)
    assert reds(-view) == reds(view)[::-1]
    assert -(-view) == view


def test_subset_is_relative_to_start():
    leds = ramp()
    view = PixelView(leds, 3, 8)
    assert reds(view.subset(1, 2)) == [leds[4].r, leds[5].r]


def test_bool_checks_any_lit_pixel():
    leds = [CRGB() for _ in range(4)]
    view = PixelView(leds, 0, 3)
    assert not view
    leds[2].set_rgb(0, 0, 1)
    assert view


def test_fill_solid_only_touches_view():
    leds = ramp()
    PixelView(leds, 2, 4).fill_solid(CRGB(1, 2, 3))
    assert all(p == CRGB(1, 2, 3) for p in leds[2:5])
    assert leds[1] == CRGB(1, 1, 1)
    assert leds[5] == CRGB(5, 5, 5)


def test_assign_truncates_to_shorter():
    target = [CRGB() for _ in range(3)]
    source = ramp(6)
    PixelView(target, 0, 2).assign(PixelView(source, 5, 0))
    assert [p.r for p in target] == [source[5].r, source[4].r, source[3].r]


def test_add_and_sub_constant_saturate():
    leds = [CRGB(250, 10, 0), CRGB(5, 255, 100)]
    expected_add = [p.copy().add_to_rgb(10) for p in leds]
    view = PixelView(leds, 0, 1)
    view.add_to_rgb(10)
    assert leds == expected_add
    assert leds[0].r == 255
    expected_sub = [p.copy().subtract_from_rgb(20) for p in leds]
    view.sub_from_rgb(20)
    assert leds == expected_sub


def test_increment_decrement():
    leds = [CRGB(0, 255, 7)]
    view = PixelView(leds, 0, 0)
    view.increment()
    assert leds[0] == CRGB(1, 255, 8)
    view.decrement()
    view.decrement()
    assert leds[0] == CRGB(0, 253, 6)


def test_pairwise_add_and_subtract():
    a = [CRGB(100, 200, 0), CRGB(1, 2, 3)]
    b = [CRGB(100, 100, 9), CRGB(3, 2, 1)]
    expected = [x + y for x, y in zip(a, b)]
    view = PixelView(a, 0, 1)
    view += PixelView(b, 0, 1)
    assert a == expected
    expected = [x - y for x, y in zip(a, b)]
    view -= PixelView(b, 0, 1)
    assert a == expected


def test_divide_shift_multiply():
    leds = [CRGB(100, 50, 9)]
    view = PixelView(leds, 0, 0)
    view //= 2
    assert leds[0] == CRGB(50, 25, 4)
    view >>= 1
    assert leds[0] == CRGB(25, 12, 2)
    view *= 20
    assert leds[0] == CRGB(255, 240, 40)


def test_scaling_matches_pixel_methods():
    base = [CRGB(200, 1, 0), CRGB(30, 60, 90)]
    for method, arg in [
        ("nscale8_video", 64),
        ("fade_light_by", 200),
        ("nscale8", 64),
        ("fade_to_black_by", 200),
    ]:
        leds = [p.copy() for p in base]
        expected = [getattr(p.copy(), method)(arg) for p in base]
        getattr(PixelView(leds, 0, 1), method)(arg)
        assert leds == expected


def test_mod_is_video_scaling():
    leds = [CRGB(200, 1, 0)]
    expected = leds[0].copy().nscale8_video(10)
    view = PixelView(leds, 0, 0)
    view %= 10
    assert leds[0] == expected
    assert leds[0].g == 1


def test_nscale8_by_pixel_and_view():
    leds = [CRGB(200, 100, 50), CRGB(10, 20, 30)]
    scales = [CRGB(128, 255, 0), CRGB(0, 64, 255)]
    expected = [p.scale8(s) for p, s in zip(leds, scales)]
    PixelView(leds, 0, 1).nscale8(PixelView(scales, 0, 1))
    assert leds == expected
    leds2 = [CRGB(200, 100, 50)]
    expected2 = leds2[0].scale8(scales[0])
    PixelView(leds2, 0, 0).nscale8(scales[0])
    assert leds2[0] == expected2


def test_or_and_with_value_pixel_and_view():
    leds = [CRGB(10, 100, 200)]
    view = PixelView(leds, 0, 0)
    view |= 50
    assert leds[0] == CRGB(50, 100, 200)
    view &= CRGB(255, 60, 255)
    assert leds[0] == CRGB(50, 60, 200)
    other = [CRGB(70, 0, 0)]
    view |= PixelView(other, 0, 0)
    assert leds[0] == CRGB(70, 60, 200)
    view &= PixelView(other, 0, 0)
    assert leds[0] == CRGB(70, 0, 0)


def test_crgb_array_owns_distinct_black_pixels():
    array = CRGBArray(5)
    assert len(array) == 5
    assert not array
    array[0] = CRGB(1, 2, 3)
    assert array[1] == CRGB()
    assert array.leds[0] == CRGB(1, 2, 3)


def test_crgb_array_negative_size_fails():
    with pytest.raises(ValueError):
        CRGBArray(-1)


@given(st.integers(0, 19), st.integers(0, 19))
def test_view_length_and_double_negation(start, end):
    leds = ramp(20)
    view = PixelView(leds, start, end)
    assert len(view) == abs(end - start) + 1
    assert -(-view) == view
    assert {id(p) for p in view} == {id(p) for p in -view}