"""
Command pipeline
One function per CLI command: decode the input(s), apply a single transform,
encode the result. Each invocation touches exactly one output file.
"""

from pathlib import Path
from typing import List, Sequence, Union
import logging

from ..models.selectors import FlipAxis, Rotation
from ..services.pixel_buffer_service import PixelBufferService
from ..services.transform_service import TransformService

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def invert_file(
    src: PathLike,
    dst: PathLike,
    *,
    buffer_service: PixelBufferService = PixelBufferService(),
    transform_service: TransformService = TransformService(),
) -> Path:
    buffer = buffer_service.load(src)
    transform_service.invert(buffer)
    return buffer_service.save(buffer, dst)


def grayscale_file(
    src: PathLike,
    dst: PathLike,
    *,
    buffer_service: PixelBufferService = PixelBufferService(),
    transform_service: TransformService = TransformService(),
) -> Path:
    buffer = buffer_service.load(src)
    transform_service.grayscale(buffer)
    return buffer_service.save(buffer, dst)


def rotate_file(
    rotation: Union[Rotation, int, str],
    src: PathLike,
    dst: PathLike,
    *,
    buffer_service: PixelBufferService = PixelBufferService(),
    transform_service: TransformService = TransformService(),
) -> Path:
    # Validate the selector before touching the file system
    rotation = Rotation.parse(rotation)
    buffer = buffer_service.load(src)
    rotated = transform_service.rotate(buffer, rotation)
    return buffer_service.save(rotated, dst)


def flip_file(
    axis: Union[FlipAxis, str],
    src: PathLike,
    dst: PathLike,
    *,
    buffer_service: PixelBufferService = PixelBufferService(),
    transform_service: TransformService = TransformService(),
) -> Path:
    axis = FlipAxis.parse(axis)
    buffer = buffer_service.load(src)
    flipped = transform_service.flip(buffer, axis)
    return buffer_service.save(flipped, dst)


def blend_files(
    sources: Sequence[PathLike],
    dst: PathLike,
    *,
    buffer_service: PixelBufferService = PixelBufferService(),
    transform_service: TransformService = TransformService(),
) -> Path:
    """
    Average any number of images into one. Each source is decoded once;
    the output size is the per-axis minimum of the inputs.
    """
    buffers: List = buffer_service.load_many(sources)
    blended = transform_service.blend(buffers)
    width, height = buffer_service.get_dimensions(blended)
    logger.info(f"Blended {len(buffers)} images into {width}x{height}")
    return buffer_service.save(blended, dst)


def blur_file(
    src: PathLike,
    dst: PathLike,
    *,
    buffer_service: PixelBufferService = PixelBufferService(),
    transform_service: TransformService = TransformService(),
) -> Path:
    buffer = buffer_service.load(src)
    blurred = transform_service.blur(buffer)
    return buffer_service.save(blurred, dst)
