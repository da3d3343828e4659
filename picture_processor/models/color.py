from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


def _clamp_channel(value) -> int:
    value = int(value)
    if value < 0:
        return 0
    if value > 255:
        return 255
    return value


@dataclass(frozen=True)
class Color:
    """
    Immutable RGB value object, 8 bits per channel, no alpha.
    Channels are clamped to [0, 255] on construction.
    """
    red: int    # [0, 255]
    green: int  # [0, 255]
    blue: int   # [0, 255]

    def __post_init__(self):
        object.__setattr__(self, "red", _clamp_channel(self.red))
        object.__setattr__(self, "green", _clamp_channel(self.green))
        object.__setattr__(self, "blue", _clamp_channel(self.blue))

    @classmethod
    def from_packed(cls, rgb: int) -> "Color":
        return cls((rgb >> 16) & 0xff, (rgb >> 8) & 0xff, rgb & 0xff)

    def packed(self) -> int:
        return (self.red << 16) | (self.green << 8) | self.blue

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.red, self.green, self.blue

    def __str__(self) -> str:
        return f"({self.red},{self.green},{self.blue})"


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
