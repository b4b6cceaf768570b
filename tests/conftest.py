"""
Re-useable fixtures etc. for tests

See https://docs.pytest.org/en/7.1.x/reference/fixtures.html#conftest-py-sharing-fixtures-across-multiple-files
"""

from __future__ import annotations

import pytest

HEADER = [
    "dateRep",
    "day",
    "month",
    "year",
    "cases",
    "deaths",
    "countriesAndTerritories",
    "geoId",
    "countryterritoryCode",
    "popData2019",
    "continentExp",
]


def feed_row(day, month, code, cases=0, deaths=0, *, year=2020, name=None, population=1000, continent="X"):
    """One positional feed row, as the external parser hands it over."""
    return [
        f"{day:02d}/{month:02d}/{year}",
        str(day),
        str(month),
        str(year),
        str(cases),
        str(deaths),
        name if name is not None else f"Country_{code}",
        code[:2],
        code,
        str(population),
        continent,
    ]


@pytest.fixture
def make_row():
    return feed_row


@pytest.fixture
def small_feed():
    """AAA (days 1 and 2) and BBB (day 1) in continent X."""
    return [
        HEADER,
        feed_row(1, 1, "AAA", cases=0, deaths=0),
        feed_row(2, 1, "AAA", cases=3, deaths=5),
        feed_row(1, 1, "BBB", cases=7, deaths=10),
    ]


@pytest.fixture
def multi_continent_feed():
    return [
        HEADER,
        feed_row(31, 12, "ESP", cases=1, deaths=0, year=2019, continent="Europe", population=47),
        feed_row(3, 1, "ESP", cases=2, deaths=0, continent="Europe", population=47),
        feed_row(1, 1, "ESP", cases=0, deaths=0, continent="Europe", population=47),
        feed_row(5, 1, "ESP", cases=4, deaths=1, continent="Europe", population=47),
        feed_row(3, 1, "FRA", cases=6, deaths=2, continent="Europe", population=67),
        feed_row(4, 1, "FRA", cases=1, deaths=0, continent="Europe", population=67),
        feed_row(2, 1, "JPN", cases=9, deaths=3, continent="Asia", population=126),
        feed_row(4, 1, "JPN", cases=0, deaths=4, continent="Asia", population=126),
    ]
