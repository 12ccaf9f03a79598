"""Tests for the packed ARGB pixel buffer."""

import numpy as np
import pytest

from iEdit.core.pixel_buffer import MAX_PIXEL_VALUE, PixelBuffer
from iEdit.errors import (
    InvalidDimensionError,
    InvalidPixelValueError,
    OutOfRangeError,
    ReadOnlyBufferError,
)


@pytest.mark.parametrize("width,height", [(1, 1), (3, 2), (17, 5)])
def test_create_is_zero_initialised(width, height):
    buffer = PixelBuffer.create(width, height)
    assert buffer.width == width
    assert buffer.height == height
    assert buffer.size == width * height
    assert buffer.pixels.dtype == np.uint32
    assert not buffer.pixels.any()


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3), (3, -2)])
def test_create_rejects_non_positive_dimensions(width, height):
    with pytest.raises(InvalidDimensionError):
        PixelBuffer.create(width, height)


def test_create_rejects_non_integer_dimensions():
    with pytest.raises(InvalidDimensionError):
        PixelBuffer.create(2.5, 3)
    with pytest.raises(InvalidDimensionError):
        PixelBuffer.create(True, 3)


def test_get_and_set_pixel_round_trip():
    buffer = PixelBuffer.create(3, 2)
    buffer.set_pixel(2, 1, 0xFF336699)
    assert buffer.get_pixel(2, 1) == 0xFF336699
    # Row-major storage: (x=2, y=1) is the last element.
    assert int(buffer.pixels.reshape(-1)[-1]) == 0xFF336699


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (3, 0), (0, 2), (10, 10)])
def test_pixel_access_is_bounds_checked(x, y):
    buffer = PixelBuffer.create(3, 2)
    with pytest.raises(OutOfRangeError):
        buffer.get_pixel(x, y)
    with pytest.raises(OutOfRangeError):
        buffer.set_pixel(x, y, 0)


@pytest.mark.parametrize("value", [-1, MAX_PIXEL_VALUE + 1, 1.5])
def test_set_pixel_rejects_values_outside_32_bits(value):
    buffer = PixelBuffer.create(1, 1)
    with pytest.raises(InvalidPixelValueError):
        buffer.set_pixel(0, 0, value)
    assert buffer.get_pixel(0, 0) == 0


def test_set_pixel_accepts_full_range():
    buffer = PixelBuffer.create(2, 1)
    buffer.set_pixel(0, 0, 0)
    buffer.set_pixel(1, 0, MAX_PIXEL_VALUE)
    assert buffer.get_pixel(1, 0) == MAX_PIXEL_VALUE


def test_copy_is_equal_and_independent(sample_buffer):
    duplicate = sample_buffer.copy()
    assert duplicate == sample_buffer
    assert duplicate.pixels is not sample_buffer.pixels

    duplicate.set_pixel(0, 0, 0x12345678)
    assert sample_buffer.get_pixel(0, 0) != 0x12345678
    assert duplicate != sample_buffer


def test_copy_as_class_level_call(sample_buffer):
    assert PixelBuffer.copy(sample_buffer) == sample_buffer


def test_from_array_copies_input():
    source = np.array([[1, 2], [3, 4]], dtype=np.int64)
    buffer = PixelBuffer.from_array(source)
    source[0, 0] = 99
    assert buffer.get_pixel(0, 0) == 1
    assert buffer.get_pixel(1, 1) == 4
    assert buffer.width == 2 and buffer.height == 2


@pytest.mark.parametrize(
    "array",
    [np.zeros((0, 3), dtype=np.uint32), np.zeros(4, dtype=np.uint32), np.zeros((2, 2, 4), dtype=np.uint32)],
)
def test_from_array_rejects_bad_shapes(array):
    with pytest.raises(InvalidDimensionError):
        PixelBuffer.from_array(array)


def test_from_array_rejects_out_of_range_values():
    with pytest.raises(InvalidPixelValueError):
        PixelBuffer.from_array(np.array([[-1]], dtype=np.int64))
    with pytest.raises(InvalidPixelValueError):
        PixelBuffer.from_array(np.array([[0.5]]))


def test_frozen_buffer_rejects_mutation_but_copies_are_writable(sample_buffer):
    sample_buffer.freeze()
    assert sample_buffer.frozen
    with pytest.raises(ReadOnlyBufferError):
        sample_buffer.set_pixel(0, 0, 0)

    duplicate = sample_buffer.copy()
    assert not duplicate.frozen
    duplicate.set_pixel(0, 0, 0)
    assert duplicate.get_pixel(0, 0) == 0


def test_equality_considers_dimensions():
    assert PixelBuffer.create(2, 3) != PixelBuffer.create(3, 2)
    assert PixelBuffer.create(2, 3) == PixelBuffer.create(2, 3)
    assert PixelBuffer.create(1, 1) != "not a buffer"
