from __future__ import annotations
from enum import Enum

from .exceptions import UnrecognizedSelectorError


class Rotation(Enum):
    """Clockwise rotation angles. The value is the number of quarter turns."""
    ROTATE_90 = 1
    ROTATE_180 = 2
    ROTATE_270 = 3

    @property
    def degrees(self) -> int:
        return self.value * 90

    @classmethod
    def parse(cls, angle) -> "Rotation":
        """Accepts a Rotation, or an angle given as int or string ("90", 180, ...)."""
        if isinstance(angle, cls):
            return angle
        for rotation in cls:
            if str(angle).strip() == str(rotation.degrees):
                return rotation
        raise UnrecognizedSelectorError("rotation angle", angle, [str(r.degrees) for r in cls])


class FlipAxis(Enum):
    """Mirror axis. The value is the command-line tag."""
    HORIZONTAL = "H"
    VERTICAL = "V"

    @classmethod
    def parse(cls, tag) -> "FlipAxis":
        if isinstance(tag, cls):
            return tag
        for axis in cls:
            if str(tag).strip() == axis.value:
                return axis
        raise UnrecognizedSelectorError("flip axis", tag, [a.value for a in cls])
