import unittest
import numpy as np
import os
from math import floor

# Append src to sys.path to allow direct import of modules from src
import sys
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from gradient_config import ImageDimensions, RASTER_SCALE, TEXT_SCALE
from gradient_generator import channel_from_ratio, gradient_array, pixel_color

class TestImageDimensions(unittest.TestCase):

    def test_valid_dimensions(self):
        dims = ImageDimensions(4, 3)
        self.assertEqual(dims.pixel_count, 12)
        self.assertEqual(dims.shape, (3, 4, 3))

    def test_degenerate_dimensions_rejected(self):
        """A 1-wide or 1-tall axis would divide by zero when computing ratios."""
        for width, height in [(1, 5), (5, 1), (0, 4), (4, -2), (1, 1)]:
            with self.assertRaises(ValueError):
                ImageDimensions(width, height)

    def test_non_integer_dimensions_rejected(self):
        with self.assertRaises(ValueError):
            ImageDimensions(2.5, 4)
        with self.assertRaises(ValueError):
            ImageDimensions(True, 4)

class TestPixelGenerator(unittest.TestCase):

    def setUp(self):
        self.dims = ImageDimensions(256, 256)

    def test_channel_truncates(self):
        self.assertEqual(channel_from_ratio(0.0, TEXT_SCALE), 0)
        self.assertEqual(channel_from_ratio(1.0, TEXT_SCALE), 255)
        self.assertEqual(channel_from_ratio(1.0, RASTER_SCALE), 255)
        self.assertEqual(channel_from_ratio(0.25, TEXT_SCALE), 63)
        self.assertEqual(channel_from_ratio(0.25, RASTER_SCALE), 63)
        # Anything past 1.0 is clamped to the 8-bit range
        self.assertEqual(channel_from_ratio(1.5, RASTER_SCALE), 255)

    def test_channels_match_formula(self):
        """Every pixel equals floor(ratio * scale) for red and green, for both scales."""
        dims = ImageDimensions(7, 5)
        for scale in (TEXT_SCALE, RASTER_SCALE):
            for y in range(dims.height):
                for x in range(dims.width):
                    r, g, b = pixel_color(x, y, dims, scale)
                    self.assertEqual(r, floor(x / (dims.width - 1) * scale))
                    self.assertEqual(g, floor(y / (dims.height - 1) * scale))
                    self.assertEqual(b, floor(0.25 * scale))

    def test_blue_is_constant(self):
        image = gradient_array(self.dims, TEXT_SCALE)
        self.assertTrue(np.all(image[:, :, 2] == 63))

    def test_red_and_green_monotonic(self):
        image = gradient_array(ImageDimensions(100, 37), RASTER_SCALE)
        self.assertTrue(np.all(np.diff(image[:, :, 0].astype(np.int16), axis=1) >= 0))
        self.assertTrue(np.all(np.diff(image[:, :, 1].astype(np.int16), axis=0) >= 0))

    def test_corners(self):
        self.assertEqual(pixel_color(0, 0, self.dims, TEXT_SCALE), (0, 0, 63))
        self.assertEqual(pixel_color(255, 0, self.dims, TEXT_SCALE), (255, 0, 63))
        self.assertEqual(pixel_color(0, 255, self.dims, TEXT_SCALE), (0, 255, 63))
        self.assertEqual(pixel_color(255, 255, self.dims, RASTER_SCALE), (255, 255, 63))

    def test_out_of_range_coordinate(self):
        with self.assertRaises(ValueError):
            pixel_color(256, 0, self.dims)
        with self.assertRaises(ValueError):
            pixel_color(0, -1, self.dims)

    def test_vectorized_matches_per_pixel(self):
        dims = ImageDimensions(13, 9)
        for scale in (TEXT_SCALE, RASTER_SCALE):
            image = gradient_array(dims, scale)
            self.assertEqual(image.shape, (9, 13, 3))
            self.assertEqual(image.dtype, np.uint8)
            for y in range(dims.height):
                for x in range(dims.width):
                    self.assertEqual(tuple(int(c) for c in image[y, x]), pixel_color(x, y, dims, scale))

    def test_flip_vertical(self):
        dims = ImageDimensions(6, 4)
        image = gradient_array(dims)
        flipped = gradient_array(dims, flip_vertical=True)
        np.testing.assert_array_equal(flipped, image[::-1])
        self.assertEqual(int(flipped[0, 0, 1]), 255)

if __name__ == '__main__':
    unittest.main()
