"""Tests for per-family display ordering."""

from __future__ import annotations

from core.asset_sort import (
    natural_key,
    sort_collection,
    sort_failures,
    sort_field2ds,
    sort_field3ds,
    sort_joysticks,
    sort_robots,
)
from shared.asset_configs import AssetCollection, Config2d, Config3dField, Config3dRobot, ConfigJoystick


def _names(records):
    return [record.name for record in records]


class TestSorting:
    def test_field2d_evergreen_last(self):
        records = [Config2d(name=name, path="") for name in ("Alpha", "Evergreen", "Zeta")]
        assert _names(sort_field2ds(records)) == ["Alpha", "Zeta", "Evergreen"]

    def test_field2d_is_case_sensitive(self):
        records = [Config2d(name=name, path="") for name in ("beta", "Gamma", "Alpha")]
        assert _names(sort_field2ds(records)) == ["Alpha", "Gamma", "beta"]

    def test_field3d_descending(self):
        records = [Config3dField(name=name, path="") for name in ("2023", "2025", "2024")]
        assert _names(sort_field3ds(records)) == ["2025", "2024", "2023"]

    def test_robots_numeric(self):
        records = [Config3dRobot(name=name, path="") for name in ("Robot 2", "Robot 10", "Robot 1")]
        assert _names(sort_robots(records)) == ["Robot 1", "Robot 2", "Robot 10"]

    def test_robots_case_insensitive(self):
        records = [Config3dRobot(name=name, path="") for name in ("zeta", "Alpha", "beta")]
        assert _names(sort_robots(records)) == ["Alpha", "beta", "zeta"]

    def test_joysticks_descending(self):
        records = [ConfigJoystick(name=name, path="") for name in ("Generic", "Xbox", "PS5")]
        assert _names(sort_joysticks(records)) == ["Xbox", "PS5", "Generic"]

    def test_failures_numeric(self):
        assert sort_failures(["Robot_10", "Robot_9", "Field2d_A"]) == ["Field2d_A", "Robot_9", "Robot_10"]

    def test_natural_key_digit_runs(self):
        assert natural_key("a2") < natural_key("a10")
        assert natural_key("A") < natural_key("b")

    def test_sort_collection_returns_new_lists(self):
        collection = AssetCollection(load_failures=["b", "a"])
        ordered = sort_collection(collection)
        assert ordered.load_failures == ["a", "b"]
        assert collection.load_failures == ["b", "a"]
