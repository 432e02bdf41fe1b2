"""
Tests for Buffer.

Tests cover:
- Allocation and raw storage
- Construction helpers (from_pixel, from_fn, from_gradient, from_raw)
- Pixel access and bounds checking
- Conversion between channel domains and pixel kinds
- View acquisition and borrow tracking
"""

import unittest

import numpy as np

from Picto_Libs.BufferLib import (
    Area,
    Buffer,
    F32,
    Gradient,
    Luma,
    Lumaa,
    Orientation,
    Rgb,
    Rgba,
    U8,
    U16,
)
from Picto_Libs.errors import BorrowConflict, DimensionMismatch, OutOfBounds


class TestBufferAllocation(unittest.TestCase):
    """Test allocation and raw storage."""

    def test_new_sizes(self):
        self.assertEqual(len(Buffer(1, 1).into_raw()), 3)
        self.assertEqual(len(Buffer(1, 2).into_raw()), 6)
        self.assertEqual(len(Buffer(2, 1).into_raw()), 6)
        self.assertEqual(len(Buffer(2, 2).into_raw()), 12)

    def test_new_is_zeroed(self):
        image = Buffer(3, 2, U16, Rgba)
        self.assertEqual(image.into_raw().dtype, np.uint16)
        self.assertFalse(image.into_raw().any())

    def test_names_accepted(self):
        image = Buffer(2, 2, "f32", "lumaa")
        self.assertIs(image.channel, F32)
        self.assertIs(image.pixel, Lumaa)

    def test_numpy_integer_dimensions(self):
        image = Buffer(np.int64(2), np.int32(3))
        self.assertEqual(image.dimensions, (2, 3))
        self.assertEqual(len(image), 18)
        image.set(np.int64(1), np.int64(2), Rgb(1.0, 1.0, 1.0))
        self.assertEqual(image.get(1, 2), Rgb(1.0, 1.0, 1.0))

    def test_dimensions(self):
        image = Buffer(4, 3)
        self.assertEqual(image.dimensions, (4, 3))
        self.assertEqual(image.area, Area(0, 0, 4, 3))
        self.assertEqual(image.as_array().shape, (3, 4, 3))


class TestBufferFromRaw(unittest.TestCase):
    """Test wrapping existing storage."""

    def test_valid_lengths(self):
        Buffer.from_raw(1, 1, [0, 0, 0])
        Buffer.from_raw(1, 2, [0] * 6)
        Buffer.from_raw(2, 1, [0] * 6)
        Buffer.from_raw(2, 2, [0] * 12)

    def test_dimension_mismatch(self):
        with self.assertRaises(DimensionMismatch) as context:
            Buffer.from_raw(1, 1, [0, 0, 0, 0])
        self.assertEqual(context.exception.length, 4)
        self.assertEqual(context.exception.channels, 3)

    def test_into_raw(self):
        self.assertEqual(Buffer.from_raw(1, 1, [1, 2, 3]).into_raw().tolist(), [1, 2, 3])
        self.assertEqual(Buffer(1, 1).into_raw().tolist(), [0, 0, 0])

    def test_storage_read_only_under_live_writer(self):
        image = Buffer(2, 2)
        with image.writable(Area.new(width=1, height=1)):
            self.assertFalse(image.into_raw().flags.writeable)
            self.assertFalse(image.as_array().flags.writeable)
            with self.assertRaises(ValueError):
                image.as_array()[0, 0, 0] = 255

        self.assertTrue(image.into_raw().flags.writeable)
        image.as_array()[0, 0, 0] = 255
        self.assertEqual(image.get(0, 0), Rgb(1.0, 0.0, 0.0))

    def test_zero_copy(self):
        storage = np.array([1, 2, 3], dtype=np.uint8)
        image = Buffer.from_raw(1, 1, storage)
        image.set(0, 0, Rgb(0.0, 0.0, 0.0))
        self.assertEqual(storage.tolist(), [0, 0, 0])


class TestBufferConstruction(unittest.TestCase):
    """Test the convenience constructors."""

    def test_from_pixel(self):
        image = Buffer.from_pixel(2, 2, Rgba(1.0, 0.0, 0.0, 1.0))
        self.assertIs(image.pixel, Rgba)
        self.assertEqual(image.into_raw().tolist(), [255, 0, 0, 255] * 4)

    def test_from_fn_order(self):
        calls = []

        def generator(x, y):
            calls.append((x, y))
            return Luma(len(calls) / 255.0)

        image = Buffer.from_fn(3, 2, generator, U8, Luma)

        self.assertEqual(calls, [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)])
        self.assertEqual(image.into_raw().tolist(), [1, 2, 3, 4, 5, 6])

    def test_from_gradient_vertical(self):
        gradient = Gradient([Luma(0.0), Luma(1.0)])
        image = Buffer.from_gradient(2, 3, Orientation.VERTICAL, gradient)
        self.assertEqual(image.as_array()[:, :, 0].tolist(), [[0, 0], [128, 128], [255, 255]])

    def test_from_gradient_horizontal(self):
        gradient = Gradient([Luma(0.0), Luma(1.0)])
        image = Buffer.from_gradient(3, 2, Orientation.HORIZONTAL, gradient)
        self.assertEqual(image.as_array()[:, :, 0].tolist(), [[0, 128, 255], [0, 128, 255]])

    def test_from_gradient_leaves_no_borrows(self):
        gradient = Gradient([Rgb(0.0, 0.0, 0.0), Rgb(1.0, 1.0, 1.0)])
        image = Buffer.from_gradient(4, 4, Orientation.VERTICAL, gradient)
        image.fill(Rgb(0.0, 0.0, 0.0))


class TestBufferAccess(unittest.TestCase):
    """Test get/set and bounds."""

    def setUp(self):
        self.image = Buffer(2, 2)

    def test_set_get_round_trip(self):
        self.image.set(0, 0, Rgb(1.0, 0.0, 1.0))
        self.assertEqual(self.image.get(0, 0), Rgb(1.0, 0.0, 1.0))

    def test_set_converts_pixel_kind(self):
        self.image.set(1, 1, Luma(1.0))
        self.assertEqual(self.image.get(1, 1), Rgb(1.0, 1.0, 1.0))

    def test_get_out_of_bounds(self):
        with self.assertRaises(OutOfBounds):
            self.image.get(2, 0)
        with self.assertRaises(OutOfBounds):
            self.image.get(0, 2)

    def test_set_out_of_bounds(self):
        with self.assertRaises(OutOfBounds):
            self.image.set(5, 5, Rgb())

    def test_out_of_bounds_is_index_error(self):
        with self.assertRaises(IndexError):
            self.image.get(-1, 0)

    def test_fill(self):
        self.image.fill(Rgb(1.0, 1.0, 1.0))
        self.assertTrue((self.image.into_raw() == 255).all())

    def test_pixels(self):
        self.image.set(1, 0, Rgb(1.0, 1.0, 1.0))
        pixels = list(self.image.pixels())
        self.assertEqual([(x, y) for x, y, _ in pixels], [(0, 0), (1, 0), (0, 1), (1, 1)])
        self.assertEqual(pixels[1][2], Rgb(1.0, 1.0, 1.0))

    def test_copy_and_eq(self):
        a = Buffer.from_raw(1, 1, [0, 0, 0])
        b = a.copy()
        self.assertEqual(a, b)
        self.assertEqual(a.get(0, 0), b.get(0, 0))
        b.set(0, 0, Rgb(1.0, 1.0, 1.0))
        self.assertNotEqual(a, b)


class TestBufferConvert(unittest.TestCase):
    """Test channel/pixel conversion."""

    def test_rgb_to_rgba(self):
        a = Buffer.from_raw(1, 1, [255, 0, 255])
        b = a.convert(pixel=Rgba)

        self.assertEqual(b.get(0, 0), Rgba(1.0, 0.0, 1.0, 1.0))
        self.assertEqual(b.into_raw().tolist(), [255, 0, 255, 255])

    def test_opaque_alpha_and_exact_colour(self):
        data = np.arange(2 * 3 * 3, dtype=np.uint8) * 13
        a = Buffer.from_raw(3, 2, data)
        b = a.convert(pixel=Rgba).as_array()

        self.assertTrue((b[:, :, 3] == 255).all())
        np.testing.assert_array_equal(b[:, :, :3], a.as_array())

    def test_channel_change(self):
        a = Buffer.from_raw(1, 1, [255, 0, 51])
        b = a.convert(channel=U16)
        self.assertEqual(b.into_raw().tolist(), [65535, 0, 13107])

    def test_same_type_is_copy(self):
        a = Buffer.from_raw(1, 1, [1, 2, 3])
        b = a.convert()
        self.assertEqual(a, b)
        self.assertIsNot(a.into_raw(), b.into_raw())

    def test_rgb_to_luma(self):
        a = Buffer.from_raw(1, 1, [255, 255, 255])
        self.assertEqual(a.convert(pixel=Luma).into_raw().tolist(), [255])


class TestBufferViews(unittest.TestCase):
    """Test view acquisition and borrow tracking."""

    def setUp(self):
        self.image = Buffer(10, 10)

    def test_readable_out_of_bounds(self):
        with self.assertRaises(OutOfBounds):
            self.image.readable(Area.new(x=5, width=6))

    def test_writable_out_of_bounds(self):
        with self.assertRaises(OutOfBounds):
            self.image.writable(Area(0, 8, 2, 3))

    def test_default_view_covers_buffer(self):
        self.assertEqual(self.image.readable().area, Area(0, 0, 10, 10))

    def test_overlapping_writers_conflict(self):
        with self.image.writable(Area.new(x=0, y=0, width=5, height=5)):
            with self.assertRaises(BorrowConflict):
                self.image.view(Area.new(x=4, y=4, width=2, height=2))

    def test_disjoint_writers_allowed(self):
        with self.image.writable(Area.new(width=5)) as left:
            with self.image.writable(Area.new(x=5)) as right:
                left.fill(Rgb(1.0, 1.0, 1.0))
                right.fill(Rgb(0.0, 0.0, 1.0))

        self.assertEqual(self.image.get(4, 0), Rgb(1.0, 1.0, 1.0))
        self.assertEqual(self.image.get(5, 0), Rgb(0.0, 0.0, 1.0))

    def test_readers_coexist_with_writer(self):
        with self.image.writable(Area.new(width=5)):
            self.image.readable()
            self.image.readable(Area.new(width=2))

    def test_release_allows_new_writer(self):
        view = self.image.writable()
        view.release()
        self.image.writable().release()

    def test_set_under_live_writer_conflicts(self):
        with self.image.writable(Area.new(width=1, height=1)):
            with self.assertRaises(BorrowConflict):
                self.image.set(0, 0, Rgb())
            self.image.set(1, 0, Rgb())

    def test_fill_under_live_writer_conflicts(self):
        with self.image.writable(Area.new(width=1, height=1)):
            with self.assertRaises(BorrowConflict):
                self.image.fill(Rgb())
