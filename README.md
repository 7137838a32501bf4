# pixelstrip

This package provides colour types, predefined palettes, pixel views and a
controller registry for addressable LED strips. It is plain Python and has no
runtime dependencies.

## Install

```
pip install pixelstrip
```

To run the test suite:

```
pip install "pixelstrip[test]"
pytest
```

## Modules

- `pixelstrip.colors`
  - `CHSV`, an HSV pixel. Its channels are `h`, `s` and `v`, with the aliases
    `hue`, `saturation`/`sat` and `value`/`val`. Every channel is kept to 8 bits.
  - The enumerations `HSVHue`, `EOrder` and `HTMLColorCode`. `HTMLColorCode`
    holds named 0xRRGGBB codes.
- `pixelstrip.pixeltypes`
  - `CRGB`, an RGB pixel with 8 bits per channel.
  - Arithmetic saturates. `+` and `add_to_rgb` stop at 255. `-` and
    `subtract_from_rgb` stop at 0. `*` also saturates.
  - `|` and `&` take the per-channel maximum and minimum.
  - `%` and `nscale8_video` apply video scaling, and `nscale8` applies plain
    scaling.
  - Further methods: `fade_light_by`, `fade_to_black_by`, `get_luma`,
    `get_average_light`, `maximize_brightness`, `lerp8`, `lerp16`,
    `get_parity` and `set_parity`.
  - Ordering compares the sum of the channels. Equality compares the channels
    themselves.
  - `CRGB.from_code(0xRRGGBB)` builds a pixel from a colour code.
- `pixelstrip.bitswap`
  - 8x8 bit transposition of byte blocks: `transpose8x1`, `transpose8x1_msb`,
    `transpose8`, `swapbits8` and `slowswap`.
  - Each function returns new `bytes`.
- `pixelstrip.colorpalettes`
  - Sixteen-entry palettes of colour codes: `CLOUD_COLORS`, `LAVA_COLORS`,
    `OCEAN_COLORS`, `FOREST_COLORS`, `RAINBOW_COLORS`, `RAINBOW_STRIPE_COLORS`,
    `PARTY_COLORS` and `HEAT_COLORS`.
  - The gradient palette `RAINBOW_GP`.
  - `palette16` and `gradient_stops` (returning `GradientStop` entries) for
    building your own.
- `pixelstrip.pixelset`
  - `PixelView`, a window onto a list of `CRGB` pixels. Writes made through a
    view go to the underlying list.
  - `CRGBArray`, a view that owns a fresh list of black pixels.
- `pixelstrip.chipsets`
  - The chipset enumerations `ESPIChipsets`, `ESM`, `OWS2811` and `SWS2812`.
  - `controller_count_limit`.
- `pixelstrip.controller`
  - `LedController`, the base class for output drivers.
  - `show_leds` builds a frame. The frame is the pixels scaled by brightness,
    `correction` and `temperature`.
  - The frame is handed to `_write`, which by default stores it as
    `last_frame`.
  - Subclasses override `_write` to send frames somewhere.
- `pixelstrip.fastled`
  - `FastLED`, a registry of controllers.
  - It holds the global `brightness`, an optional power function
    (`set_power_function`) and a refresh-rate cap (`set_max_refresh_rate`).
  - It tracks the frame rate (`fps`).
  - It drives every controller through `show`, `show_color`, `clear` and
    `delay`.

## Example

```python
from pixelstrip.pixeltypes import CRGB
from pixelstrip.pixelset import CRGBArray

leds = CRGBArray(10)
leds.fill_solid(CRGB(255, 0, 0))
leds.subset(0, 4).fade_to_black_by(128)
print([tuple(p) for p in leds][:2])   # [(127, 0, 0), (127, 0, 0)]
```

A view can run backwards:

- `-leds` gives the same pixels in reverse order.
- A `subset` whose start is greater than its end also walks backwards.

Register controllers with a `FastLED` instance:

```python
from pixelstrip.controller import LedController
from pixelstrip.fastled import FastLED
from pixelstrip.pixeltypes import CRGB


class PrintController(LedController):
    def _write(self, frame):
        print([tuple(p) for p in frame])


strip = FastLED()
data = [CRGB() for _ in range(8)]
strip.add_leds(PrintController(), data, 8)
data[0].set_rgb(200, 100, 50)
strip.brightness = 128
strip.show()
```

How `add_leds` reads its arguments:

- With three arguments, the third is the pixel count.
- With four arguments, the third is an offset into the data and the fourth is
  the count.

`FastLED` takes an optional clock. It is any object with `micros()` and
`sleep(microseconds)` methods, which makes refresh capping and `delay`
testable without waiting.

## What it does not do

- No hardware output. Controllers only build frames of pixels. Nothing talks
  to pins, SPI buses or LED chips unless a subclass's `_write` does so.
- No HSV-to-RGB conversion. `CHSV` is a plain value type, and a `CRGB` cannot
  be made from one.
- No palette lookup or blending. The palettes are tables of colour codes.
- No built-in power model. The brightness limit comes only from a function
  you pass to `set_power_function`.
- No dithering. The `dither` setting is stored on each controller and
  switched off while the frame rate is below 100, but frames are not dithered.