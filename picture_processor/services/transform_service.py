from __future__ import annotations

from typing import Iterable, Union
import logging

import numpy as np

from ..models.exceptions import EmptyInputSetError
from ..models.pixel_buffer import PixelBuffer
from ..models.selectors import FlipAxis, Rotation

logger = logging.getLogger(__name__)


class TransformService:
    """
    Pixel-level transforms over PixelBuffer objects.
    *   No I/O here, works only with buffers already in memory.
    *   invert / grayscale edit their input in place; every other
        transform leaves its inputs untouched and returns a new buffer.
    *   All averaging truncates towards zero, never rounds.
    """

    # ─── In-place transforms ───────────────────────────────────────
    def invert(self, buffer: PixelBuffer) -> PixelBuffer:
        """Replace every channel c with 255 - c. Returns the same (mutated) buffer."""
        np.subtract(255, buffer.pixels, out=buffer.pixels)
        logger.debug(f"Inverted {buffer.width}x{buffer.height} buffer")
        return buffer

    def grayscale(self, buffer: PixelBuffer) -> PixelBuffer:
        """Set all three channels to floor((r + g + b) / 3). Returns the same (mutated) buffer."""
        avg = buffer.pixels.sum(axis=2, dtype=np.uint16) // 3
        buffer.pixels[...] = avg.astype(np.uint8)[..., np.newaxis]
        logger.debug(f"Converted {buffer.width}x{buffer.height} buffer to grayscale")
        return buffer

    # ─── Allocating transforms ─────────────────────────────────────
    @staticmethod
    def rotate90(buffer: PixelBuffer) -> PixelBuffer:
        """
        Quarter turn clockwise: source (x, y) lands on (height - 1 - y, x)
        of a buffer with swapped dimensions.
        """
        # rot90 returns a view; copy so the result never shares storage with its input
        return PixelBuffer(np.rot90(buffer.pixels, k=-1).copy())

    def rotate(self, buffer: PixelBuffer, rotation: Union[Rotation, int, str]) -> PixelBuffer:
        """
        Rotate clockwise by 90, 180 or 270 degrees.

        Raises:
            UnrecognizedSelectorError: if the angle is not one of 90, 180, 270.
        """
        rotation = Rotation.parse(rotation)
        rotated = buffer
        for _ in range(rotation.value):
            rotated = self.rotate90(rotated)
        logger.debug(f"Rotated {buffer.width}x{buffer.height} buffer by {rotation.degrees} degrees")
        return rotated

    @staticmethod
    def flip_horizontal(buffer: PixelBuffer) -> PixelBuffer:
        """Mirror left-right: source (x, y) lands on (width - 1 - x, y)."""
        return PixelBuffer(buffer.pixels[:, ::-1].copy())

    @staticmethod
    def flip_vertical(buffer: PixelBuffer) -> PixelBuffer:
        """Mirror top-bottom: source (x, y) lands on (x, height - 1 - y)."""
        return PixelBuffer(buffer.pixels[::-1].copy())

    def flip(self, buffer: PixelBuffer, axis: Union[FlipAxis, str]) -> PixelBuffer:
        """
        Raises:
            UnrecognizedSelectorError: if the axis tag is not "H" or "V".
        """
        axis = FlipAxis.parse(axis)
        if axis is FlipAxis.HORIZONTAL:
            return self.flip_horizontal(buffer)
        return self.flip_vertical(buffer)

    def blend(self, buffers: Iterable[PixelBuffer]) -> PixelBuffer:
        """
        Per-channel truncated mean of all buffers. The output is as wide as the
        narrowest input and as tall as the shortest one; larger inputs are cropped.

        Raises:
            EmptyInputSetError: if no buffers are given.
        """
        buffers = list(buffers)
        if not buffers:
            raise EmptyInputSetError()

        width = min(b.width for b in buffers)
        height = min(b.height for b in buffers)

        total = np.zeros((height, width, 3), dtype=np.uint32)
        for b in buffers:
            total += b.pixels[:height, :width]

        logger.debug(f"Blended {len(buffers)} buffers into {width}x{height}")
        return PixelBuffer((total // len(buffers)).astype(np.uint8))

    @staticmethod
    def blur(buffer: PixelBuffer) -> PixelBuffer:
        """
        3x3 box blur. Border pixels are copied unchanged; each interior channel
        becomes the truncated mean of its 9-pixel neighbourhood.
        """
        src = buffer.pixels
        out = src.copy()
        height, width = buffer.height, buffer.width
        if width <= 2 or height <= 2:
            return PixelBuffer(out)

        total = np.zeros((height - 2, width - 2, 3), dtype=np.uint32)
        for dy in range(3):
            for dx in range(3):
                total += src[dy:dy + height - 2, dx:dx + width - 2]
        out[1:-1, 1:-1] = (total // 9).astype(np.uint8)
        return PixelBuffer(out)
