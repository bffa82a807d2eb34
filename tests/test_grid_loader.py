"""Tests for the grid loader and grid document schema."""

import pytest
from pydantic import ValidationError

from hexkit.loaders.grid_loader import load_grid, load_grid_from_dict
from hexkit.models.grid_document import format_point, parse_point
from hexkit.models.hex import Point

ARENA = (
    "radius: 2\n"
    "default: plain\n"
    "tiles:\n"
    "  \"1,0\": forest\n"
    "  \"-1,1\": water\n"
    "  \"9,9\": lava\n"
    "obstacles:\n"
    "  - \"0,1\"\n"
    "  - \"5,5\"\n"
)


class TestParsePoint:
    def test_parse(self):
        assert parse_point("3,-2") == Point(3, -2)

    def test_parse_with_spaces(self):
        assert parse_point(" 1, 4") == Point(1, 4)

    def test_round_trip_format(self):
        assert format_point(Point(-7, 2)) == "-7,2"

    @pytest.mark.parametrize("text", ["", "1", "1,2,3", "a,b", "1.5,2"])
    def test_malformed(self, text):
        with pytest.raises(ValueError):
            parse_point(text)


class TestLoadGrid:
    def test_load_from_file(self, tmp_path):
        f = tmp_path / "arena.yaml"
        f.write_text(ARENA)
        loaded = load_grid(f)
        assert loaded.grid.radius == 2
        assert len(loaded.grid) == 19
        assert loaded.grid.value_at(Point(1, 0)) == "forest"
        assert loaded.grid.value_at(Point(-1, 1)) == "water"
        assert loaded.grid.value_at(Point(0, 0)) == "plain"

    def test_out_of_bounds_tiles_dropped(self, tmp_path):
        f = tmp_path / "arena.yaml"
        f.write_text(ARENA)
        assert load_grid(f).grid.value_at(Point(9, 9)) is None

    def test_obstacles_kept_as_given(self, tmp_path):
        f = tmp_path / "arena.yaml"
        f.write_text(ARENA)
        assert load_grid(f).obstacles == frozenset({Point(0, 1), Point(5, 5)})

    def test_minimal_document(self):
        loaded = load_grid_from_dict({"radius": 1})
        assert len(loaded.grid) == 7
        assert loaded.grid.value_at(Point(0, 0)) is None
        assert loaded.obstacles == frozenset()

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_grid(tmp_path / "nonexistent.yaml")

    def test_empty_file_is_invalid(self, tmp_path):
        f = tmp_path / "arena.yaml"
        f.write_text("")
        with pytest.raises(ValidationError):
            load_grid(f)

    def test_negative_radius_is_invalid(self):
        with pytest.raises(ValidationError):
            load_grid_from_dict({"radius": -1})

    def test_bad_tile_key_is_invalid(self):
        with pytest.raises(ValidationError):
            load_grid_from_dict({"radius": 1, "tiles": {"north": "x"}})

    def test_bad_obstacle_is_invalid(self):
        with pytest.raises(ValidationError):
            load_grid_from_dict({"radius": 1, "obstacles": ["0;1"]})
