"""Colors bound to color models and spaces, with sRGB, linear RGB and Display P3 transfers."""

__version__ = "0.0.0"
__all__ = ["channels", "color", "spaces"]