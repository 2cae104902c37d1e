"""Color models (channel layouts) and the color spaces that interpret them."""

from __future__ import annotations

from enum import Enum


class Model(Enum):
    """The structural layout of a color's channels."""

    RGB = "RGB"
    HSL = "HSL/HSV"
    LAB = "LAB/LCH"
    CMYK = "CMYK"
    EXTRA = "Other"

    def channel_count(self) -> int:
        """Number of color channels (alpha excluded) this model carries."""
        return 4 if self is Model.CMYK else 3


class Space(Enum):
    """A colorimetric standard giving meaning to a model's channels."""

    # RGB family
    PROPHOTO = "ProPhoto RGB"
    LINEAR = "Linear RGB"
    REC20 = "Rec.2020"
    REC7 = "Rec.709"
    ACES = "ACEScg"
    SRGB = "sRGB"
    DP3 = "Display P3"
    SC = "scRGB"
    WG = "Wide Gamut RGB"
    ADOBE = "Adobe RGB"
    # HSL family
    HSL = "HSL"
    HSV = "HSV"
    HSB = "HSB"
    HSI = "HSI"
    HWB = "HWB"
    HCG = "HCG"
    # LAB family
    OKLAB = "OKLab"
    OKLCH = "OKLCH"
    LCHUV = "LCHuv"
    HLAB = "Hunter Lab"
    LAB = "CIELAB"
    LCH = "LCHab"
    LUV = "CIELUV"
    # CMYK family
    DEVICE = "Device CMYK"
    USWCC = "U.S. Web Coated CMYK"
    FOG39 = "FOGRA39"
    FOG51 = "FOGRA51"
    SWOP = "SWOP CMYK"
    JCC = "Japan Color CMYK"
    GCC = "GRACol CMYK"
    # Other
    HEX = "Hexadecimal"
    XYZ = "XYZ"

    def model(self) -> Model:
        """The model this space is bound to.

        Raises ValueError for spaces that have no model binding yet.
        """
        try:
            return _BINDINGS[self]
        except KeyError:
            raise ValueError(
                f"color space {self.value!r} is not bound to a color model"
            ) from None


_BINDINGS: dict[Space, Model] = {
    Space.DP3: Model.RGB,
    Space.SRGB: Model.RGB,
    Space.LINEAR: Model.RGB,
    Space.HSL: Model.HSL,
    Space.HSV: Model.HSL,
    Space.LAB: Model.LAB,
    Space.OKLAB: Model.LAB,
    Space.OKLCH: Model.LAB,
    Space.HEX: Model.EXTRA,
    Space.XYZ: Model.EXTRA,
}