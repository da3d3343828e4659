"""
Pytest configuration and fixtures for picture_processor tests
"""

import numpy as np
import pytest
from PIL import Image as PILImage

from picture_processor.models.color import Color
from picture_processor.models.pixel_buffer import PixelBuffer
from picture_processor.repositories.pixel_buffer_repository import PixelBufferRepository
from picture_processor.services.pixel_buffer_service import PixelBufferService
from picture_processor.services.transform_service import TransformService


@pytest.fixture
def scenario_buffer():
    """2x2 buffer: red, green on top; blue, white below"""
    buffer = PixelBuffer.blank(2, 2)
    buffer.set(0, 0, Color(255, 0, 0))
    buffer.set(1, 0, Color(0, 255, 0))
    buffer.set(0, 1, Color(0, 0, 255))
    buffer.set(1, 1, Color(255, 255, 255))
    return buffer


@pytest.fixture
def make_buffer():
    """Factory for reproducible random buffers"""
    rng = np.random.default_rng(1234)

    def _make(width, height):
        return PixelBuffer(rng.integers(0, 256, size=(height, width, 3), dtype=np.uint8))

    return _make


@pytest.fixture
def transform_service():
    return TransformService()


@pytest.fixture
def repository():
    return PixelBufferRepository(timeout=5, output_format="PNG")


@pytest.fixture
def buffer_service(repository):
    return PixelBufferService(repository=repository, show_progress=False)


@pytest.fixture
def write_png(tmp_path):
    """Write an (H, W, 3) uint8 array to a PNG under tmp_path and return its path"""

    def _write(name, pixels):
        path = tmp_path / name
        PILImage.fromarray(np.asarray(pixels, dtype=np.uint8)).save(path)
        return path

    return _write


@pytest.fixture
def read_png():
    """Read a PNG back as an (H, W, 3) uint8 array"""

    def _read(path):
        with PILImage.open(path) as img:
            return np.array(img.convert("RGB"))

    return _read
