from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import numpy as np

from .color import Color
from .exceptions import OutOfBoundsError


@dataclass(eq=False)
class PixelBuffer:
    """
    Mutable 2-D grid of RGB pixels with fixed dimensions.
    Coordinates are (x, y) with the origin at the top-left corner.
    """
    pixels: np.ndarray  # Shape (H, W, 3), dtype uint8, RGB order.
    path: Path | None = field(default=None, compare=False)  # Source file, if decoded from disk.

    def __post_init__(self):
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 3:
            raise ValueError(f"Expected an (H, W, 3) pixel array, got shape {self.pixels.shape}")
        if self.pixels.dtype != np.uint8:
            self.pixels = self.pixels.astype(np.uint8)

    # ── Construction ────────────────────────────────────────────────
    @classmethod
    def blank(cls, width: int, height: int) -> "PixelBuffer":
        """All-black buffer of the given size."""
        if width < 0 or height < 0:
            raise ValueError(f"Buffer dimensions must be non-negative, got {width}x{height}")
        return cls(np.zeros((height, width, 3), dtype=np.uint8))

    @classmethod
    def from_pixels(cls, pixels, path: Optional[Path] = None) -> "PixelBuffer":
        """Copy an (H, W, 3) array-like into a new buffer."""
        arr = np.array(pixels, dtype=np.uint8, copy=True)
        return cls(arr, Path(path) if path is not None else None)

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self.pixels.copy(), self.path)

    # ── Accessors ───────────────────────────────────────────────────
    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check_bounds(self, x: int, y: int) -> None:
        # numpy would silently wrap negative indices
        if not self.contains(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)

    def get(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        r, g, b = self.pixels[y, x]
        return Color(int(r), int(g), int(b))

    def set(self, x: int, y: int, color: Color) -> None:
        self._check_bounds(x, y)
        self.pixels[y, x] = color.as_tuple()

    # ── Structural equality / hashing ───────────────────────────────
    def equals(self, other: Optional["PixelBuffer"]) -> bool:
        if other is None:
            return False
        if self.pixels.shape != other.pixels.shape:
            return False
        return bool(np.array_equal(self.pixels, other.pixels))

    def __eq__(self, other) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self.equals(other)

    def content_hash(self) -> int:
        """
        Rolling hash h = 31*h + packedRGB over the pixels in raster order,
        kept to a signed 32-bit integer.
        """
        packed = (
            (self.pixels[..., 0].astype(np.uint64) << np.uint64(16))
            | (self.pixels[..., 1].astype(np.uint64) << np.uint64(8))
            | self.pixels[..., 2].astype(np.uint64)
        ).ravel()
        n = packed.size
        if n == 0:
            return 0

        # 31**k modulo 2**64; uint64 arithmetic wraps, and 2**32 divides 2**64
        powers = np.ones(n, dtype=np.uint64)
        powers[1:] = np.cumprod(np.full(n - 1, 31, dtype=np.uint64), dtype=np.uint64)
        total = int(np.sum(packed * powers[::-1], dtype=np.uint64)) & 0xFFFFFFFF
        return total - (1 << 32) if total >= (1 << 31) else total

    def __hash__(self) -> int:
        # CPython reserves -1, so hash() reports -2 where content_hash() is -1.
        # Use content_hash() when the exact rolling value matters.
        return self.content_hash()

    def __str__(self) -> str:
        rows = ["".join(f"({r},{g},{b})" for r, g, b in row) for row in self.pixels.tolist()]
        return "".join(row + "\n" for row in rows) + "\n"

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self.width}, height={self.height}, path={self.path!r})"


def buffers_equal(a: Optional[PixelBuffer], b: Optional[PixelBuffer]) -> bool:
    """Structural equality that also accepts absent buffers: two Nones are equal."""
    if a is None or b is None:
        return a is b
    return a.equals(b)
