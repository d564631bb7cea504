import numpy as np
from PIL import Image

from raytracer.canvas import PPM_MAX_LINE_LENGTH, Canvas, scale_colour
from raytracer.utils.vector_operations import BLACK, colour


class TestScaleColour:
    def test_clamps_and_rounds_up(self):
        result = scale_colour(colour(-0.5, 0.5, 1.5))
        np.testing.assert_array_equal(result, np.array([0, 128, 255], dtype=np.uint8))
        assert result.dtype == np.uint8


class TestCanvas:
    def test_starts_black(self):
        canvas = Canvas(10, 20)
        assert (canvas.width, canvas.height) == (10, 20)
        np.testing.assert_array_equal(canvas.pixel_at(9, 19), BLACK)

    def test_write_and_read(self):
        canvas = Canvas(10, 20)
        canvas.write_pixel(2, 3, colour(1, 0, 0))
        np.testing.assert_array_equal(canvas.pixel_at(2, 3), colour(1, 0, 0))

    def test_out_of_range(self):
        canvas = Canvas(4, 4)
        canvas.write_pixel(4, 0, colour(1, 1, 1))
        canvas.write_pixel(-1, 2, colour(1, 1, 1))
        assert canvas.pixel_at(4, 0) is None
        assert canvas.pixel_at(0, -1) is None
        assert not canvas.pixels.any()


class TestPpm:
    def test_header(self):
        lines = Canvas(5, 3).to_ppm().splitlines()
        assert lines[:3] == ["P3", "5 3", "255"]

    def test_pixel_data(self):
        canvas = Canvas(5, 3)
        canvas.write_pixel(0, 0, colour(1.5, 0, 0))
        canvas.write_pixel(2, 1, colour(0, 0.5, 0))
        canvas.write_pixel(4, 2, colour(-0.5, 0, 1))
        lines = canvas.to_ppm().splitlines()
        assert lines[3] == "255 0 0 0 0 0 0 0 0 0 0 0 0 0 0"
        assert lines[4] == "0 0 0 0 0 0 0 128 0 0 0 0 0 0 0"
        assert lines[5] == "0 0 0 0 0 0 0 0 0 0 0 0 0 0 255"

    def test_long_lines_are_split_between_pixels(self):
        canvas = Canvas(10, 2, fill=colour(1, 0.5, 0.25))
        lines = canvas.to_ppm().splitlines()[3:]
        assert lines == [
            "255 128 64 255 128 64 255 128 64 255 128 64 255 128 64 255 128 64",
            "255 128 64 255 128 64 255 128 64 255 128 64",
        ] * 2
        assert all(len(line) <= PPM_MAX_LINE_LENGTH for line in lines)

    def test_ends_with_newline(self):
        assert Canvas(5, 3).to_ppm().endswith("\n")


class TestSave:
    def test_ppm(self, tmp_path):
        canvas = Canvas(3, 2, fill=colour(0, 0.5, 1))
        path = tmp_path / "out.ppm"
        canvas.save(path)
        assert path.read_text(encoding="ascii") == canvas.to_ppm()

    def test_png(self, tmp_path):
        canvas = Canvas(3, 2)
        canvas.write_pixel(1, 0, colour(1, 0.5, 0))
        path = tmp_path / "out.png"
        canvas.save(path)
        with Image.open(path) as image:
            assert image.size == (3, 2)
            assert image.mode == "RGB"
            assert image.getpixel((1, 0)) == (255, 128, 0)
            assert image.getpixel((0, 0)) == (0, 0, 0)
