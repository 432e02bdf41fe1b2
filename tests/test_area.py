"""
Unit tests for the area module.

Tests rectangle construction, builder completion against an owner
and coordinate iteration.
"""

import numpy as np
import pytest

from Picto_Libs.BufferLib.area import Area, Builder, resolve
from Picto_Libs.errors import InvalidArgument


class TestArea:
    """Tests for the Area value type."""

    def test_fields(self):
        area = Area(1, 2, 3, 4)
        assert (area.x, area.y, area.width, area.height) == (1, 2, 3, 4)
        assert area.dimensions == (3, 4)
        assert area.size == 12

    def test_is_immutable(self):
        area = Area(0, 0, 1, 1)
        with pytest.raises(AttributeError):
            area.width = 5

    def test_rejects_negative(self):
        with pytest.raises(InvalidArgument):
            Area(0, 0, -1, 1)

    def test_accepts_numpy_integers(self):
        area = Area(np.int64(1), np.uint16(2), np.int32(3), np.int64(4))
        assert area == Area(1, 2, 3, 4)
        assert type(area.width) is int
        assert Area.new(x=np.int64(2)).complete(Area(0, 0, 5, 5)) == Area(2, 0, 3, 5)

    def test_rejects_bool(self):
        with pytest.raises(InvalidArgument):
            Area(0, 0, True, 1)

    def test_rejects_non_integer(self):
        with pytest.raises(InvalidArgument):
            Area(0, 0, 1.5, 1)

    def test_absolute_is_owner_space(self):
        area = Area(10, 10, 2, 2)
        assert list(area.absolute()) == [(10, 10), (11, 10), (10, 11), (11, 11)]

    def test_relative_is_window_space(self):
        area = Area(10, 10, 2, 2)
        assert list(area.relative()) == [(0, 0), (1, 0), (0, 1), (1, 1)]

    def test_iteration_is_restartable(self):
        coordinates = Area(0, 0, 3, 1).absolute()
        assert list(coordinates) == list(coordinates)
        assert len(coordinates) == 3

    def test_empty_iteration(self):
        assert list(Area(5, 5, 0, 3).absolute()) == []

    def test_contains(self):
        owner = Area(0, 0, 10, 10)
        assert owner.contains(Area(2, 2, 8, 8))
        assert not owner.contains(Area(2, 2, 9, 8))

    def test_overlaps(self):
        a = Area(0, 0, 4, 4)
        assert a.overlaps(Area(3, 3, 2, 2))
        assert not a.overlaps(Area(4, 0, 2, 2))
        assert not a.overlaps(Area(1, 1, 0, 2))


class TestBuilder:
    """Tests for completing builders against an owner."""

    def test_defaults_to_full_extent(self):
        owner = Area(0, 0, 50, 40)
        assert Area.new().complete(owner) == Area(0, 0, 50, 40)

    def test_remaining_space_from_offset(self):
        owner = Area(0, 0, 50, 40)
        assert Area.new(x=10, y=5).complete(owner) == Area(10, 5, 40, 35)

    def test_explicit_fields(self):
        owner = Area(0, 0, 50, 40)
        assert Area.new(x=1, y=2, width=3, height=4).complete(owner) == Area(1, 2, 3, 4)

    def test_offset_beyond_owner_gives_empty(self):
        owner = Area(0, 0, 5, 5)
        assert Area.new(x=7).complete(owner).width == 0

    def test_negative_offset(self):
        with pytest.raises(InvalidArgument):
            Builder(x=-1).complete(Area(0, 0, 5, 5))

    def test_resolve_accepts_all_forms(self):
        owner = Area(0, 0, 4, 4)
        assert resolve(None, owner) == owner
        assert resolve(Area.new(width=2), owner) == Area(0, 0, 2, 4)
        assert resolve(Area(1, 1, 1, 1), owner) == Area(1, 1, 1, 1)

    def test_resolve_rejects_other_types(self):
        with pytest.raises(InvalidArgument):
            resolve((0, 0, 1, 1), Area(0, 0, 4, 4))
