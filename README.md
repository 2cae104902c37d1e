# accent

A small color space abstraction library. A `Color` keeps the channel layout
(the *model*: RGB, HSL, Lab, CMYK or other) apart from the standard that
gives those channels meaning (the *space*: sRGB, linear RGB, Display P3 and
so on).

## Installation

```
pip install accent
```

## Modules

### `accent.spaces`

- `Model` is an enum of channel layouts: `RGB`, `HSL`, `LAB`, `CMYK`,
  `EXTRA`. `Model.channel_count()` returns 4 for `CMYK` and 3 for the rest.
- `Space` is an enum of named color spaces across the RGB, HSL, Lab, CMYK
  and other families. `Space.model()` returns the model a space is bound to.
  Only these spaces are bound so far:

  | Space                          | Model   |
  |--------------------------------|---------|
  | `SRGB`, `LINEAR`, `DP3`        | `RGB`   |
  | `HSL`, `HSV`                   | `HSL`   |
  | `LAB`, `OKLAB`, `OKLCH`        | `LAB`   |
  | `HEX`, `XYZ`                   | `EXTRA` |

  For every other space, `model()` raises `ValueError`.

### `accent.channels`

`RGBChannels` is a dataclass with `r`, `g` and `b` fields; it iterates over
the three values in that order.

- `RGBChannels.from_tuple(values)` builds channels from an `(r, g, b)` triple.
- `to_linear()` decodes 8-bit sRGB values (integers `0..255`) into
  linear-light floats with the sRGB transfer function. Any other value raises
  `ValueError`.
- `to_srgb()` encodes linear-light floats as 8-bit sRGB integers, clamped to
  `0..255` and rounded half up.
- `to_linear_dp3()` applies the `LRGB_DP3` matrix (linear RGB to Display P3).
- `from_dp3()` applies the `DP3_LRGB` matrix (Display P3 to linear RGB). The
  green coefficients of the red and blue rows enter with their sign reversed,
  so it is not an exact inverse of `to_linear_dp3()`.

The two matrices are available as the module constants `LRGB_DP3` and
`DP3_LRGB`.

### `accent.color`

`Color` is a dataclass of `channels`, `alpha` and `space`. On creation the
channels are checked against the space's model:

- for RGB spaces, an `RGBChannels` is kept as is and a tuple is turned into
  one; anything else raises `TypeError`;
- for other spaces, the channels must be a tuple (`TypeError` otherwise) of
  the model's channel count (`ValueError` otherwise);
- a space with no model binding raises `ValueError`.

Channel and alpha values themselves are not validated. The `model` property
returns the space's model.

- `Color.rgb(r, g, b)` makes an opaque sRGB color (alpha 255).
- `Color.rgba(r, g, b, a)` makes an sRGB color with explicit alpha.

## Example

```python
from accent.channels import RGBChannels
from accent.color import Color
from accent.spaces import Model, Space

red = Color.rgb(255, 0, 0)               # opaque 8-bit sRGB red
faded = Color.rgba(255, 0, 0, 128)       # same red with alpha 128
assert red.model is Model.RGB

linear = red.channels.to_linear()        # RGBChannels(r=1.0, g=0.0, b=0.0)
back = linear.to_srgb()                  # RGBChannels(r=255, g=0, b=0)

p3 = RGBChannels.from_tuple((0.5, 0.25, 0.75)).to_linear_dp3()

lab = Color((50.0, 20.0, -30.0), 1.0, Space.LAB)
```

## What it does not do

The only conversions are between 8-bit sRGB, linear RGB and Display P3 on
`RGBChannels`. There are no conversions into or out of the HSL, Lab, CMYK,
hexadecimal or XYZ families, no alpha handling beyond storing the value, and
many listed spaces (Adobe RGB, Rec.2020, ACEScg, the CMYK print profiles and
others) are names only, with no model binding.

## Running the tests

```
pip install -e ".[test]"
pytest
```