import pytest
from hypothesis import given, strategies as st

from pixelstrip.controller import BINARY_DITHER, DISABLE_DITHER, LedController
from pixelstrip.fastled import FastLED
from pixelstrip.pixeltypes import CRGB


class FakeClock:
    def __init__(self):
        self.now = 0
        self.slept = []

    def micros(self):
        return self.now

    def sleep(self, microseconds):
        self.slept.append(microseconds)
        self.now += microseconds


class DitherRecorder(LedController):
    def __init__(self):
        super().__init__()
        self.seen_dither = []

    def _write(self, frame):
        super()._write(frame)
        self.seen_dither.append(self.dither)


def make_strip(n=4):
    return [CRGB(10 * i + 5, 20, 200) for i in range(n)]


def test_add_leds_with_count():
    fl = FastLED(FakeClock())
    data = make_strip(5)
    ctrl = LedController()
    returned = fl.add_leds(ctrl, data, 3)
    assert returned is ctrl
    assert len(fl) == 1
    assert fl.size() == 3
    assert list(fl.leds()) == data[:3]
    assert fl.leds()[0] is data[0]


def test_add_leds_with_offset_writes_through():
    fl = FastLED(FakeClock())
    data = make_strip(6)
    ctrl = fl.add_leds(LedController(), data, 2, 3)
    assert ctrl.size() == 3
    assert ctrl.leds()[0] is data[2]
    ctrl.leds()[1] = CRGB(1, 2, 3)
    assert data[3] == CRGB(1, 2, 3)


def test_add_leds_offset_out_of_range_raises():
    fl = FastLED(FakeClock())
    with pytest.raises((IndexError, ValueError)):
        fl.add_leds(LedController(), make_strip(3), 2, 5)


def test_show_full_brightness_keeps_pixels():
    fl = FastLED(FakeClock())
    data = make_strip(3)
    ctrl = fl.add_leds(LedController(), data, 3)
    fl.show()
    assert ctrl.last_frame == data


def test_show_zero_scale_is_black():
    fl = FastLED(FakeClock())
    ctrl = fl.add_leds(LedController(), make_strip(3), 3)
    fl.show(0)
    assert all(not p for p in ctrl.last_frame)


def test_brightness_property_used_by_show():
    fl = FastLED(FakeClock())
    ctrl = fl.add_leds(LedController(), make_strip(2), 2)
    fl.brightness = 0
    assert fl.brightness == 0
    fl.show()
    assert all(not p for p in ctrl.last_frame)


def test_power_function_receives_scale_and_data():
    fl = FastLED(FakeClock())
    ctrl = fl.add_leds(LedController(), make_strip(2), 2)
    calls = []

    def limiter(scale, data):
        calls.append((scale, data))
        return 0

    fl.set_power_function(limiter, 1234)
    fl.show(77)
    assert calls == [(77, 1234)]
    assert all(not p for p in ctrl.last_frame)


def test_power_function_can_be_removed():
    fl = FastLED(FakeClock())
    data = make_strip(2)
    ctrl = fl.add_leds(LedController(), data, 2)
    fl.set_power_function(lambda s, d: 0)
    fl.set_power_function(None)
    fl.show()
    assert ctrl.last_frame == data


def test_dither_disabled_at_low_fps_and_restored():
    fl = FastLED(FakeClock())
    ctrl = fl.add_leds(DitherRecorder(), make_strip(2), 2)
    assert ctrl.dither == BINARY_DITHER
    fl.show()
    assert ctrl.seen_dither == [DISABLE_DITHER]
    assert ctrl.dither == BINARY_DITHER


def test_dither_kept_at_high_fps():
    clock = FakeClock()
    fl = FastLED(clock)
    ctrl = fl.add_leds(DitherRecorder(), make_strip(2), 2)
    for _ in range(3):
        fl.count_fps(2)
    assert fl.fps >= 100
    fl.show()
    assert ctrl.seen_dither[-1] == BINARY_DITHER


def test_count_fps_measures_rate():
    clock = FakeClock()
    fl = FastLED(clock)
    fl.count_fps(2)
    fl.count_fps(2)
    assert fl.fps == 0
    clock.now = 30_000
    fl.count_fps(2)
    assert fl.fps == 100


def test_show_color_leaves_data_untouched():
    fl = FastLED(FakeClock())
    data = make_strip(3)
    before = [p.copy() for p in data]
    ctrl = fl.add_leds(LedController(), data, 3)
    fl.show_color(CRGB(9, 8, 7))
    assert data == before
    assert ctrl.last_frame == [CRGB(9, 8, 7)] * 3


def test_clear_without_write():
    fl = FastLED(FakeClock())
    data = make_strip(3)
    ctrl = fl.add_leds(LedController(), data, 3)
    fl.clear()
    assert all(not p for p in data)
    assert ctrl.last_frame is None


def test_clear_with_write_shows_black():
    fl = FastLED(FakeClock())
    data = make_strip(3)
    ctrl = fl.add_leds(LedController(), data, 3)
    fl.clear(True)
    assert all(not p for p in data)
    assert ctrl.frames_shown == 1
    assert all(not p for p in ctrl.last_frame)


def test_clear_data_reaches_all_controllers():
    fl = FastLED(FakeClock())
    a, b = make_strip(2), make_strip(2)
    fl.add_leds(LedController(), a, 2)
    fl.add_leds(LedController(), b, 2)
    fl.clear_data()
    assert list(fl[0].leds()) == [CRGB(), CRGB()]
    assert list(fl[1].leds()) == [CRGB(), CRGB()]
    assert a == [CRGB(), CRGB()] and b == [CRGB(), CRGB()]


def test_set_max_refresh_rate_and_constrain():
    fl = FastLED(FakeClock())
    fl.set_max_refresh_rate(100)
    assert fl.min_micros == 10_000
    fl.set_max_refresh_rate(200, True)
    assert fl.min_micros == 10_000
    fl.set_max_refresh_rate(50, True)
    assert fl.min_micros > 10_000
    fl.set_max_refresh_rate(0)
    assert fl.min_micros == 0


@given(st.integers(1, 0xFFFF), st.integers(1, 0xFFFF))
def test_constrained_rate_never_speeds_up(first, second):
    fl = FastLED(FakeClock())
    fl.set_max_refresh_rate(first)
    before = fl.min_micros
    fl.set_max_refresh_rate(second, True)
    assert fl.min_micros >= before


def test_add_leds_constrains_to_controller_rate():
    fl = FastLED(FakeClock())
    ctrl = LedController()
    ctrl.max_refresh_rate = 400
    fl.add_leds(ctrl, make_strip(2), 2)
    other = FastLED(FakeClock())
    other.set_max_refresh_rate(400)
    assert fl.min_micros == other.min_micros


def test_show_waits_for_refresh_cap():
    clock = FakeClock()
    fl = FastLED(clock)
    fl.add_leds(LedController(), make_strip(2), 2)
    fl.set_max_refresh_rate(100)
    clock.now = fl.min_micros
    fl.show()
    start = clock.now
    fl.show()
    assert clock.now - start >= fl.min_micros
    assert clock.slept


def test_delay_shows_until_elapsed():
    clock = FakeClock()
    fl = FastLED(clock)
    ctrl = fl.add_leds(LedController(), make_strip(2), 2)
    fl.delay(5)
    assert clock.now >= 5_000
    assert ctrl.frames_shown >= 5


def test_delay_zero_shows_once():
    fl = FastLED(FakeClock())
    ctrl = fl.add_leds(LedController(), make_strip(2), 2)
    fl.delay(0)
    assert ctrl.frames_shown == 1


def test_set_correction_affects_output():
    fl = FastLED(FakeClock())
    ctrl = fl.add_leds(LedController(), [CRGB(255, 255, 255)], 1)
    fl.set_correction(CRGB(255, 0, 255))
    fl.show()
    assert ctrl.last_frame[0].g == 0
    assert ctrl.last_frame[0].r == 255
    assert ctrl.correction == CRGB(255, 0, 255)


def test_set_temperature_and_dither_propagate():
    fl = FastLED(FakeClock())
    c1 = fl.add_leds(LedController(), make_strip(1), 1)
    c2 = fl.add_leds(LedController(), make_strip(1), 1)
    fl.set_temperature(0x102030)
    fl.set_dither(DISABLE_DITHER)
    assert c1.temperature == CRGB(0x10, 0x20, 0x30)
    assert c2.temperature == CRGB(0x10, 0x20, 0x30)
    assert c1.dither == DISABLE_DITHER and c2.dither == DISABLE_DITHER


def test_getitem_out_of_range_gives_first():
    fl = FastLED(FakeClock())
    first = fl.add_leds(LedController(), make_strip(1), 1)
    second = fl.add_leds(LedController(), make_strip(1), 1)
    assert fl[1] is second
    assert fl[5] is first
    assert fl[-1] is first


def test_getitem_without_controllers_raises():
    fl = FastLED(FakeClock())
    with pytest.raises(IndexError):
        fl[0]
    with pytest.raises(IndexError):
        fl.size()