"""
Tests of epitrack.models
"""

from __future__ import annotations

import math

import pytest

from epitrack.dates import PRIOR_YEAR
from epitrack.exceptions import InvalidDate, InvalidRow
from epitrack.models import (
    UNKNOWN_CONTINENT,
    UNKNOWN_COUNTRY_CODE,
    UNKNOWN_COUNTRY_NAME,
    FeedRow,
    Record,
    SeriesTable,
    row_from_columns,
)


def test_record_from_date():
    rec = Record.from_date(2020, 1, 13, 4, 2)
    assert rec == Record(day_ordinal=13, week=2, new_cases=4, new_deaths=2)


def test_record_prior_year():
    rec = Record.from_date(2019, 12, 31, 1, 0)
    assert rec.day_ordinal == PRIOR_YEAR
    assert rec.week == 0


def test_record_zeroed_and_add():
    rec = Record(10, 1, 5, 3)
    acc = rec.zeroed()
    assert acc == Record(10, 1, 0, 0)
    acc.add(rec)
    acc.add(Record(10, 1, 2, 1))
    assert (acc.new_cases, acc.new_deaths) == (7, 4)
    # the source record is left alone
    assert (rec.new_cases, rec.new_deaths) == (5, 3)


def test_record_value():
    rec = Record(1, 0, 5, 3)
    assert rec.value("cases") == 5
    assert rec.value("deaths") == 3


def test_series_table_empty():
    table = SeriesTable.empty("deaths")
    assert table.is_empty()
    assert len(table) == 0
    assert table.peak_value == 0
    assert table.average_window_width == 7
    assert table.to_dict()["values"] == []


def test_row_from_columns(make_row):
    cols = make_row(3, 2, "ESP", cases=12, deaths=1, name=" Costa_Rica ", population=47, continent=" Europe ")
    row = row_from_columns(cols)
    assert row == FeedRow(
        day=3,
        month=2,
        year=2020,
        new_cases=12,
        new_deaths=1,
        country_name="Costa Rica",
        country_code="ESP",
        population=47,
        continent_name="Europe",
    )


def test_row_from_columns_placeholders(make_row):
    cols = make_row(1, 1, "", name="Cases_on_an_international_conveyance", continent="")
    row = row_from_columns(cols)
    assert row.country_code == UNKNOWN_COUNTRY_CODE
    assert row.country_name == UNKNOWN_COUNTRY_NAME
    assert row.continent_name == UNKNOWN_CONTINENT


def test_row_from_columns_short_row():
    row = row_from_columns(["x", "1", "1", "2020", "2", "0", "Nowhere"])
    assert row.country_code == UNKNOWN_COUNTRY_CODE
    assert row.population == 0
    assert row.continent_name == UNKNOWN_CONTINENT


def test_row_from_columns_spreadsheet_numbers():
    row = row_from_columns(["x", 1.0, "2.0", 2020, "3.0", math.nan, "A", "AA", "AAA", "", "X"])
    assert (row.day, row.month, row.year) == (1, 2, 2020)
    assert (row.new_cases, row.new_deaths, row.population) == (3, 0, 0)


def test_row_from_columns_bad_date(make_row):
    cols = make_row(1, 1, "AAA")
    cols[2] = "jan"
    with pytest.raises(InvalidDate, match="month"):
        row_from_columns(cols)


def test_row_from_columns_bad_count(make_row):
    cols = make_row(1, 1, "AAA")
    cols[5] = "many"
    with pytest.raises(InvalidRow, match="new_deaths"):
        row_from_columns(cols)


@pytest.mark.parametrize("text", ("3.7", "inf", "-inf", "nan", "1e400"))
@pytest.mark.parametrize(
    "index, exp_error",
    (
        pytest.param(1, InvalidDate, id="day"),
        pytest.param(3, InvalidDate, id="year"),
        pytest.param(4, InvalidRow, id="new_cases"),
        pytest.param(9, InvalidRow, id="population"),
    ),
)
def test_row_from_columns_rejects_non_whole_numbers(make_row, text, index, exp_error):
    cols = make_row(1, 1, "AAA")
    cols[index] = text
    with pytest.raises(exp_error, match="Invalid value"):
        row_from_columns(cols)


def test_feed_row_to_record(make_row):
    rec = row_from_columns(make_row(6, 1, "AAA", cases=1, deaths=2)).to_record()
    assert rec == Record(6, 1, 1, 2)
