"""
Error taxonomy for picture_processor.
Every error raised on purpose by the package derives from PictureProcessorError.
"""

from typing import Iterable, Optional


class PictureProcessorError(Exception):
    """Base exception for picture_processor."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class OutOfBoundsError(PictureProcessorError, IndexError):
    """Raised when a pixel coordinate lies outside the buffer."""

    def __init__(self, x: int, y: int, width: int, height: int):
        self.x, self.y = x, y
        self.width, self.height = width, height
        super().__init__(
            message=f"Pixel ({x}, {y}) is outside a {width}x{height} buffer",
            details={"x": x, "y": y, "width": width, "height": height},
        )


class EmptyInputSetError(PictureProcessorError, ValueError):
    """Raised when blend is asked to average zero buffers."""

    def __init__(self):
        super().__init__(message="Blend needs at least one input buffer")


class UnrecognizedSelectorError(PictureProcessorError, ValueError):
    """Raised when a rotation angle or flip tag is not one of the accepted values."""

    def __init__(self, kind: str, value, accepted: Iterable[str]):
        self.kind = kind
        self.value = value
        self.accepted = tuple(accepted)
        super().__init__(
            message=f"Unrecognized {kind} {value!r}; expected one of {', '.join(self.accepted)}",
            details={"kind": kind, "value": value, "accepted": list(self.accepted)},
        )


class ImageDecodeError(PictureProcessorError, IOError):
    """Raised when an image file cannot be decoded into a PixelBuffer."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(
            message=f"Image not found or unreadable: {path} ({reason})",
            details={"path": str(path), "reason": reason},
        )
