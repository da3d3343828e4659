from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Tuple, Union
import logging

from tqdm import tqdm

from ..models.pixel_buffer import PixelBuffer
from ..repositories.pixel_buffer_repository import PixelBufferRepository
from .. import settings

logger = logging.getLogger(__name__)


class PixelBufferService:
    """I/O helpers around PixelBufferRepository. No pixel maths here."""
    def __init__(self, repository: PixelBufferRepository | None = None, show_progress: bool | None = None):
        self.repository = repository or PixelBufferRepository()
        self.show_progress = settings.SHOW_PROGRESS if show_progress is None else show_progress

    def load(self, path: Union[str, Path]) -> PixelBuffer:
        """Decode a single image file into a PixelBuffer."""
        buffer = self.repository.load(path)
        logger.info(f"Loaded {buffer.path} ({buffer.width}x{buffer.height})")
        return buffer

    def load_many(self, paths: Iterable[Union[str, Path]]) -> List[PixelBuffer]:
        """
        Decode every path exactly once, keeping the input order.
        Any decode failure aborts the whole batch.
        """
        paths = list(paths)
        return [
            self.load(p)
            for p in tqdm(paths, desc="decode", ncols=70, disable=not self.show_progress or len(paths) < 2)
        ]

    def save(self, buffer: PixelBuffer, path: Union[str, Path] = None) -> Path:
        """
        Business-level method to save the buffer to a specific path.
        """
        target = self.repository.save(buffer, path)
        logger.info(f"Saved {buffer.width}x{buffer.height} buffer to {target}")
        return target

    @staticmethod
    def get_dimensions(buffer: PixelBuffer) -> Tuple[int, int]:
        """(width, height) of the buffer."""
        return buffer.width, buffer.height
