"""Tests for farm objects and their categories."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from iotcs.core.objects import Object, COWS, BARRIERS


class TestGlyphs:
    def test_glyphs_unique(self):
        glyphs = [obj.glyph for obj in Object]
        assert len(set(glyphs)) == len(Object)

    def test_roundtrip(self):
        for obj in Object:
            assert Object.from_glyph(obj.glyph) is obj

    def test_known_glyphs(self):
        assert Object.from_glyph("U") is Object.UFO
        assert Object.from_glyph("R") is Object.RED_BULL
        assert Object.from_glyph(" ") is Object.EMPTY

    def test_unknown_glyph(self):
        with pytest.raises(KeyError):
            Object.from_glyph("X")


class TestCategories:
    def test_cows(self):
        assert set(COWS) == {obj for obj in Object if obj.is_cow()}
        assert len(COWS) == 4
        assert not Object.RED_BULL.is_cow()

    def test_bull(self):
        assert [obj for obj in Object if obj.is_bull()] == [Object.RED_BULL]

    def test_barriers(self):
        assert BARRIERS == (Object.BARN, Object.CROP, Object.FENCE, Object.HAY)
        assert {obj for obj in Object if obj.is_barrier()} == set(BARRIERS)

    def test_walls_include_template_walls(self):
        walls = {obj for obj in Object if obj.is_wall()}
        assert walls == set(BARRIERS) | {Object.WALL1, Object.WALL2}
        assert not Object.CORNER.is_wall()
        assert not Object.EMPTY.is_wall()

    def test_singletons(self):
        singletons = {obj for obj in Object if obj.is_singleton()}
        assert singletons == set(COWS) | {Object.UFO, Object.RED_BULL, Object.SILO}


class TestCarryLimit:
    def test_graduated_limits(self):
        assert Object.BARN.carry_limit == 0
        assert Object.CROP.carry_limit == 1
        assert Object.FENCE.carry_limit == 2
        assert Object.HAY.carry_limit == 3

    def test_non_barriers_have_no_limit(self):
        for obj in Object:
            if not obj.is_barrier():
                assert obj.carry_limit is None
                assert obj.barrier_strength is None
