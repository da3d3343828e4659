"""
Tests for pipeline.process_command
"""

import numpy as np
import pytest

from picture_processor.models.exceptions import (
    EmptyInputSetError,
    ImageDecodeError,
    UnrecognizedSelectorError,
)
from picture_processor.pipeline import process_command


@pytest.fixture
def services(buffer_service, transform_service):
    return {"buffer_service": buffer_service, "transform_service": transform_service}


@pytest.fixture
def source(write_png):
    pixels = np.array(
        [[[255, 0, 0], [0, 255, 0], [1, 2, 3]],
         [[0, 0, 255], [255, 255, 255], [4, 5, 6]]],
        dtype=np.uint8,
    )
    return write_png("source.png", pixels), pixels


class TestSingleInputCommands:
    """Tests for commands that read one file and write one file"""

    def test_invert_file(self, services, source, tmp_path, read_png):
        """Test the inverted image is written"""
        path, pixels = source
        out = process_command.invert_file(path, tmp_path / "inv.png", **services)
        assert np.array_equal(read_png(out), 255 - pixels)

    def test_grayscale_file(self, services, source, tmp_path, read_png):
        """Test the grayscale image is written"""
        path, pixels = source
        out = process_command.grayscale_file(path, tmp_path / "gray.png", **services)

        result = read_png(out)
        assert tuple(result[0, 0]) == (85, 85, 85)
        assert tuple(result[1, 2]) == (5, 5, 5)

    def test_rotate_file(self, services, source, tmp_path, read_png):
        """Test the rotated image is written with swapped dimensions"""
        path, pixels = source
        out = process_command.rotate_file("90", path, tmp_path / "rot.png", **services)
        assert np.array_equal(read_png(out), np.rot90(pixels, k=-1))

    def test_rotate_file_bad_angle_writes_nothing(self, services, source, tmp_path):
        """Test that an invalid angle fails before any output is produced"""
        path, _ = source
        with pytest.raises(UnrecognizedSelectorError):
            process_command.rotate_file("45", path, tmp_path / "rot.png", **services)
        assert not (tmp_path / "rot.png").exists()

    def test_flip_file(self, services, source, tmp_path, read_png):
        """Test the mirrored images are written"""
        path, pixels = source
        h_out = process_command.flip_file("H", path, tmp_path / "h.png", **services)
        v_out = process_command.flip_file("V", path, tmp_path / "v.png", **services)

        assert np.array_equal(read_png(h_out), pixels[:, ::-1])
        assert np.array_equal(read_png(v_out), pixels[::-1])

    def test_flip_file_bad_axis(self, services, source, tmp_path):
        """Test that an invalid axis is reported"""
        path, _ = source
        with pytest.raises(UnrecognizedSelectorError):
            process_command.flip_file("Q", path, tmp_path / "f.png", **services)

    def test_blur_file(self, services, source, tmp_path, read_png):
        """Test that a 3x2 image has no interior and is copied unchanged"""
        path, pixels = source
        out = process_command.blur_file(path, tmp_path / "blur.png", **services)
        assert np.array_equal(read_png(out), pixels)

    def test_missing_input(self, services, tmp_path):
        """Test that decode errors propagate"""
        with pytest.raises(ImageDecodeError):
            process_command.invert_file(tmp_path / "missing.png", tmp_path / "out.png", **services)


class TestBlendFiles:
    """Tests for the multi-input blend command"""

    def test_blend_files(self, services, write_png, tmp_path, read_png):
        """Test averaging two files of different sizes"""
        a = write_png("a.png", np.full((4, 2, 3), 100, dtype=np.uint8))
        b = write_png("b.png", np.full((3, 5, 3), 201, dtype=np.uint8))

        out = process_command.blend_files([a, b], tmp_path / "blend.png", **services)

        result = read_png(out)
        assert result.shape == (3, 2, 3)
        assert np.all(result == 150)

    def test_blend_no_sources(self, services, tmp_path):
        """Test that blending nothing raises EmptyInputSetError"""
        with pytest.raises(EmptyInputSetError):
            process_command.blend_files([], tmp_path / "blend.png", **services)
