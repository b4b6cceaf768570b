"""
Regions (Country, Continent, World)
===================================

Three kinds of geographic entity share the same outputs (totals and one
SeriesTable per variable) but accumulate records differently:

- `Country` keeps every feed row as its own Record (append only).
- `Continent` and `World` keep one Record per day ordinal and sum every
  contribution for that day into it.

Totals are always bumped by the raw incoming counts, so summing the stored
records must give the same numbers (see `recomputed_totals`).
"""

from __future__ import annotations
from typing import Dict, List, Optional, Tuple

from .dsa import merge_sort
from .models import Record, SeriesTable
from .series import VARIABLES, build_series_table, check_variable_name

WORLD_NAME = "World"


class Region:
    """Shared state: name, population, totals and the two series tables."""

    kind = "region"
    # Continent/World synthesize zero days so their series are contiguous
    fills_gaps = False

    def __init__(self, name: str, population: int = 0) -> None:
        self.name = name
        self.population = population
        self.total_cases = 0
        self.total_deaths = 0
        self.tables: Dict[str, SeriesTable] = {v: SeriesTable.empty(v) for v in VARIABLES}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, cases={self.total_cases}, deaths={self.total_deaths})"

    def _count(self, record: Record) -> None:
        self.total_cases += record.new_cases
        self.total_deaths += record.new_deaths

    def records(self) -> List[Record]:
        raise NotImplementedError

    def recomputed_totals(self) -> Tuple[int, int]:
        recs = self.records()
        return sum(r.new_cases for r in recs), sum(r.new_deaths for r in recs)

    def table(self, variable: str) -> SeriesTable:
        check_variable_name(variable)
        return self.tables[variable]

    @property
    def cases_table(self) -> SeriesTable:
        return self.tables["cases"]

    @property
    def deaths_table(self) -> SeriesTable:
        return self.tables["deaths"]

    def rebuild_tables(self) -> None:
        """Replace both series tables from the current records."""
        self.tables = {v: build_series_table(self.records(), v, fill_gaps=self.fills_gaps) for v in VARIABLES}


class Country(Region):
    kind = "country"

    def __init__(self, code: str, name: str, population: int, continent: "Continent") -> None:
        super().__init__(name, population)
        self.code = code
        self._continent = continent
        self.lines: List[Record] = []
        continent.population += population

    @property
    def continent(self) -> "Continent":
        return self._continent

    def append(self, record: Record) -> None:
        self.lines.append(record)
        self._count(record)

    def records(self) -> List[Record]:
        return merge_sort(self.lines, key=lambda r: r.day_ordinal)

    def display_name(self, width: int = 12) -> str:
        return self.name[:width]


class _DayAccumulator(Region):
    fills_gaps = True

    def __init__(self, name: str, population: int = 0) -> None:
        super().__init__(name, population)
        self.days: Dict[int, Record] = {}

    def accumulate(self, record: Record) -> None:
        slot: Optional[Record] = self.days.get(record.day_ordinal)
        if slot is None:
            slot = record.zeroed()
            self.days[record.day_ordinal] = slot
        slot.add(record)
        self._count(record)

    def records(self) -> List[Record]:
        return [self.days[d] for d in sorted(self.days)]


class Continent(_DayAccumulator):
    kind = "continent"


class World(_DayAccumulator):
    kind = "world"

    def __init__(self, population: int = 0) -> None:
        super().__init__(WORLD_NAME, population)
