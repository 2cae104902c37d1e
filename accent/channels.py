"""RGB channel triples and the transfers between RGB spaces."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

# Linear RGB -> Display P3
LRGB_DP3: tuple[tuple[float, float, float], ...] = (
    (0.8224621, 0.1775380, 0.0000000),
    (0.0331941, 0.9668058, 0.0000000),
    (0.0170827, 0.0723974, 0.9105199),
)

# Display P3 -> Linear RGB
DP3_LRGB: tuple[tuple[float, float, float], ...] = (
    (1.2249401, -0.2249404, 0.0000000),
    (-0.0420569, 1.0420571, 0.0000000),
    (-0.0196376, -0.0786361, 1.0978731),
)


def _check_byte(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"expected an 8-bit channel value, got {value!r}")
    return value


def _decode(byte: int) -> float:
    channel = _check_byte(byte) / 255.0
    if channel <= 0.04045:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def _encode(channel: float) -> int:
    if channel <= 0.0031308:
        v = channel * 12.92
    else:
        v = 1.055 * channel ** (1.0 / 2.4) - 0.055
    if math.isnan(v):
        return 0
    return math.floor(min(max(v, 0.0), 1.0) * 255.0 + 0.5)


@dataclass
class RGBChannels:
    """Red, green and blue components of a color."""

    r: Any
    g: Any
    b: Any

    @classmethod
    def from_tuple(cls, values: Iterable[Any]) -> RGBChannels:
        """Build channels from an (r, g, b) triple."""
        r, g, b = values
        return cls(r, g, b)

    def __iter__(self) -> Iterator[Any]:
        yield self.r
        yield self.g
        yield self.b

    def to_linear(self) -> RGBChannels:
        """Decode 8-bit sRGB values into linear-light floats."""
        return RGBChannels(*(_decode(c) for c in self))

    def to_srgb(self) -> RGBChannels:
        """Encode linear-light floats as 8-bit sRGB, clamped to [0, 255]."""
        return RGBChannels(*(_encode(c) for c in self))

    def to_linear_dp3(self) -> RGBChannels:
        """Convert linear RGB to Display P3."""
        return RGBChannels(
            *(row[0] * self.r + row[1] * self.g + row[2] * self.b for row in LRGB_DP3)
        )

    def from_dp3(self) -> RGBChannels:
        """Convert Display P3 to linear RGB."""
        m = DP3_LRGB
        r = m[0][0] * self.r - m[0][1] * self.g + m[0][2] * self.b
        g = m[1][0] * self.r + m[1][1] * self.g + m[1][2] * self.b
        b = m[2][0] * self.r - m[2][1] * self.g + m[2][2] * self.b
        return RGBChannels(r, g, b)