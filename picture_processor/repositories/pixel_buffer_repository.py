from pathlib import Path
from typing import Iterable, Union
import logging
import signal
import threading

import cv2
import numpy as np
from PIL import Image as PILImage

from ..models.exceptions import ImageDecodeError
from ..models.pixel_buffer import PixelBuffer
from .. import settings

logger = logging.getLogger(__name__)


class PixelBufferRepository:
    """
    Handles file I/O for PixelBuffer entities.
    Decoding goes through OpenCV, encoding through Pillow.
    """
    def __init__(
        self,
        valid_exts: Iterable[str] | None = None,
        timeout: int | None = None,
        output_format: str | None = None,
    ):
        self.VALID_EXTS = {e.lower() for e in (valid_exts or settings.VALID_IMAGE_EXTENSIONS)}
        self.timeout = settings.IMAGE_LOAD_TIMEOUT if timeout is None else timeout
        self.output_format = output_format or settings.OUTPUT_IMG_FORMAT

    def is_supported(self, path: Union[str, Path]) -> bool:
        return Path(path).suffix.lower() in self.VALID_EXTS

    @staticmethod
    def _can_use_alarm() -> bool:
        # SIGALRM only exists on POSIX and only fires in the main thread
        return hasattr(signal, "SIGALRM") and threading.current_thread() is threading.main_thread()

    def _imread(self, path: Path):
        if self.timeout <= 0 or not self._can_use_alarm():
            return cv2.imread(str(path), cv2.IMREAD_COLOR)

        # ─── timeout wrapper ──────────────────────────────────────────────
        def _handler(signum, frame):
            raise TimeoutError(f"cv2.imread timed-out after {self.timeout}s: {path}")

        previous = signal.signal(signal.SIGALRM, _handler)
        signal.alarm(self.timeout)
        try:
            return cv2.imread(str(path), cv2.IMREAD_COLOR)
        finally:
            signal.alarm(0)  # always disarm
            if previous is not None:
                signal.signal(signal.SIGALRM, previous)

    def load(self, path: Union[str, Path]) -> PixelBuffer:
        path = Path(path)
        if not path.is_file():
            raise ImageDecodeError(path, "no such file")
        if not self.is_supported(path):
            raise ImageDecodeError(path, f"unsupported extension {path.suffix or '(none)'}")

        arr_bgr = self._imread(path)
        if arr_bgr is None:
            raise ImageDecodeError(path, "decoder returned no data")

        arr = np.ascontiguousarray(arr_bgr[:, :, ::-1])  # BGR → RGB
        logger.debug(f"Decoded {path}: {arr.shape[1]}x{arr.shape[0]}")
        return PixelBuffer(arr, path)

    def save(self, buffer: PixelBuffer, path: Union[str, Path] = None) -> Path:
        """
        Encode the buffer to disk. Uses the given path, falling back to buffer.path.
        """
        target = Path(path) if path is not None else buffer.path
        if target is None:
            raise ValueError("No output path given and the buffer has no path")
        target.parent.mkdir(parents=True, exist_ok=True)
        PILImage.fromarray(np.ascontiguousarray(buffer.pixels)).save(target, format=self.output_format)
        buffer.path = target
        return target
