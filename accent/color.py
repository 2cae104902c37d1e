"""A color: channels laid out by a model, interpreted by a space, plus alpha."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from accent.channels import RGBChannels
from accent.spaces import Model, Space


@dataclass
class Color:
    """Channels and alpha bound to a color space.

    The channel layout must match the space's model: ``RGBChannels`` (or an
    (r, g, b) triple) for RGB spaces, a tuple of the model's channel count
    otherwise. Channel values themselves are not validated.
    """

    channels: Any
    alpha: Any
    space: Space

    def __post_init__(self) -> None:
        model = self.space.model()
        if model is Model.RGB:
            if not isinstance(self.channels, RGBChannels):
                if not isinstance(self.channels, tuple):
                    raise TypeError(
                        f"{self.space.value} expects RGB channels, "
                        f"got {type(self.channels).__name__}"
                    )
                self.channels = RGBChannels.from_tuple(self.channels)
            return
        if not isinstance(self.channels, tuple):
            raise TypeError(
                f"{self.space.value} expects a tuple of channels, "
                f"got {type(self.channels).__name__}"
            )
        expected = model.channel_count()
        if len(self.channels) != expected:
            raise ValueError(
                f"{self.space.value} expects {expected} channels, "
                f"got {len(self.channels)}"
            )

    @property
    def model(self) -> Model:
        """The model of this color's space."""
        return self.space.model()

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> Color:
        """An opaque 8-bit sRGB color."""
        return cls(RGBChannels(r, g, b), 255, Space.SRGB)

    @classmethod
    def rgba(cls, r: int, g: int, b: int, a: int) -> Color:
        """An 8-bit sRGB color with explicit alpha."""
        return cls(RGBChannels(r, g, b), a, Space.SRGB)