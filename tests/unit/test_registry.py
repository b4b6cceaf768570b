"""
Tests of epitrack.registry
"""

from __future__ import annotations

import pytest

from epitrack.exceptions import DuplicateRegion, MissingRegion
from epitrack.models import row_from_columns
from epitrack.regions import World
from epitrack.registry import RegionRegistry


def test_continent_for_creates_once():
    reg = RegionRegistry()
    a = reg.continent_for("Europe")
    assert reg.continent_for("Europe") is a
    assert list(reg.continents) == ["Europe"]


def test_country_for_creates_and_reuses(make_row):
    reg = RegionRegistry()
    first = reg.country_for(row_from_columns(make_row(1, 1, "AAA", population=10)))
    again = reg.country_for(row_from_columns(make_row(2, 1, "AAA", population=10)))
    assert first is again
    assert list(reg.countries) == ["AAA"]
    # population counted once, at creation
    assert reg.continent("X").population == 10
    assert reg.world.population == 10


def test_create_country_twice_fails(make_row):
    reg = RegionRegistry()
    row = row_from_columns(make_row(1, 1, "AAA"))
    continent = reg.continent_for(row.continent_name)
    reg.create_country(row, continent)
    with pytest.raises(DuplicateRegion, match="'AAA' already exists"):
        reg.create_country(row, continent)


def test_country_under_second_continent_fails(make_row):
    reg = RegionRegistry()
    reg.country_for(row_from_columns(make_row(1, 1, "AAA", continent="X")))
    with pytest.raises(DuplicateRegion, match="listed under 'X' and 'Y'"):
        reg.country_for(row_from_columns(make_row(2, 1, "AAA", continent="Y")))


def test_lookups_missing():
    reg = RegionRegistry()
    with pytest.raises(MissingRegion, match="no country with code 'ZZZ'"):
        reg.country("ZZZ")
    with pytest.raises(MissingRegion, match="no continent named 'Atlantis'"):
        reg.continent("Atlantis")
    with pytest.raises(KeyError):
        reg.country("ZZZ")


def test_world_is_created_once():
    reg = RegionRegistry()
    assert list(reg.regions()) == []
    world = reg.world
    assert isinstance(world, World)
    assert reg.world is world


def test_regions_order(make_row):
    reg = RegionRegistry()
    reg.country_for(row_from_columns(make_row(1, 1, "AAA", continent="X")))
    reg.country_for(row_from_columns(make_row(1, 1, "BBB", continent="Y")))
    names = [r.name for r in reg.regions()]
    assert names == ["World", "X", "Y", "Country AAA", "Country BBB"]
