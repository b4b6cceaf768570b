"""
Data model (Record, SeriesTable, FeedRow)
=========================================

- `FeedRow` is one normalized line of the daily feed (positional columns).
- `Record` is one day of counts. A Country keeps one Record per feed row and
  never touches it again; Continent/World keep one Record per day and sum
  every matching feed row into it.
- `SeriesTable` is the chart-ready output for one region and one variable.
  It is rebuilt from scratch after each batch and never edited.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Sequence, Tuple

import pandas as pd

from .dates import day_ordinal, week_index
from .exceptions import InvalidDate, InvalidRow

UNKNOWN_COUNTRY_CODE = "UUU"
UNKNOWN_COUNTRY_NAME = "Unknown country"
UNKNOWN_CONTINENT = "Unknown continent"

AVERAGE_WIDTH = 7


@dataclass
class Record:
    """Counts for one day ordinal."""
    day_ordinal: int
    week: int
    new_cases: int = 0
    new_deaths: int = 0

    @classmethod
    def from_date(cls, year: int, month: int, day: int, new_cases: int, new_deaths: int) -> "Record":
        ordinal = day_ordinal(year, month, day)
        return cls(ordinal, week_index(ordinal), new_cases, new_deaths)

    def zeroed(self) -> "Record":
        """Same day, zero counts (seed for a per-day accumulator)."""
        return Record(self.day_ordinal, self.week)

    def add(self, other: "Record") -> None:
        self.new_cases += other.new_cases
        self.new_deaths += other.new_deaths

    def value(self, variable: str) -> int:
        return self.new_deaths if variable == "deaths" else self.new_cases


@dataclass(frozen=True)
class SeriesTable:
    """Trimmed daily values plus their rolling average, for one variable."""
    variable_name: str
    start_day_ordinal: int = 0
    peak_value: int = 0
    values: Tuple[int, ...] = ()
    avg_values: Tuple[float, ...] = ()
    week_index_per_entry: Tuple[int, ...] = ()
    average_window_width: int = AVERAGE_WIDTH

    @classmethod
    def empty(cls, variable_name: str) -> "SeriesTable":
        return cls(variable_name=variable_name)

    def __len__(self) -> int:
        return len(self.values)

    def is_empty(self) -> bool:
        return not self.values

    def to_dict(self) -> dict:
        return {
            "variable_name": self.variable_name,
            "start_day_ordinal": self.start_day_ordinal,
            "peak_value": self.peak_value,
            "values": list(self.values),
            "avg_values": list(self.avg_values),
            "week_index_per_entry": list(self.week_index_per_entry),
            "average_window_width": self.average_window_width,
        }


@dataclass(frozen=True)
class FeedRow:
    """One feed line after trimming and placeholder substitution."""
    day: int
    month: int
    year: int
    new_cases: int
    new_deaths: int
    country_name: str
    country_code: str
    population: int
    continent_name: str

    def to_record(self) -> Record:
        return Record.from_date(self.year, self.month, self.day, self.new_cases, self.new_deaths)


# ---------------- Cell conversion ----------------
def _cell(columns: Sequence[Any], i: int) -> str:
    if i >= len(columns): return ""
    x = columns[i]
    if x is None or (not isinstance(x, str) and pd.isna(x)): return ""
    return str(x).strip()

def _whole(text: str) -> int:
    """'12' and '12.0' give 12; fractions, inf and nan raise ValueError."""
    x = float(text)
    if not x.is_integer(): raise ValueError(text)
    return int(x)

def _date_part(columns: Sequence[Any], i: int, label: str) -> int:
    text = _cell(columns, i)
    try: return _whole(text)
    except (ValueError, OverflowError): raise InvalidDate(f"Invalid value: {label} == {text!r}") from None

def _count(columns: Sequence[Any], i: int, label: str) -> int:
    text = _cell(columns, i)
    if not text: return 0
    try: return _whole(text)
    except (ValueError, OverflowError): raise InvalidRow(f"Invalid value: {label} == {text!r}") from None


def row_from_columns(columns: Sequence[Any]) -> FeedRow:
    """Normalize one positional feed row.

    Column layout: [1] day, [2] month, [3] year, [4] new cases, [5] new deaths,
    [6] country name, [8] country code, [9] population, [10] continent.
    """
    code = _cell(columns, 8)
    name = _cell(columns, 6).replace("_", " ")
    if not code:
        code, name = UNKNOWN_COUNTRY_CODE, UNKNOWN_COUNTRY_NAME

    return FeedRow(
        day=_date_part(columns, 1, "day"),
        month=_date_part(columns, 2, "month"),
        year=_date_part(columns, 3, "year"),
        new_cases=_count(columns, 4, "new_cases"),
        new_deaths=_count(columns, 5, "new_deaths"),
        country_name=name,
        country_code=code,
        population=_count(columns, 9, "population"),
        continent_name=_cell(columns, 10) or UNKNOWN_CONTINENT,
    )
