"""
Ingestion coordinator
=====================

This is the heart of the project. One call to `ingest` runs a full batch:

1) Build a fresh RegionRegistry (a batch never merges with the previous one)
2) For each feed row: resolve continent and country, build a Record, append
   it to the country and accumulate it into the continent and the world
3) Rank the countries by total deaths
4) Rebuild every region's SeriesTable for both variables
5) Publish a read-only Snapshot

States: IDLE -> INGESTING -> READY, or INGESTING -> FAILED on any error. A
failed batch never replaces the last published snapshot.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple
import logging

from .exceptions import BatchInProgress, MissingRegion
from .models import Record, row_from_columns
from .ranking import rank_countries
from .regions import Continent, Country, Region, World
from .registry import RegionRegistry

logger = logging.getLogger(__name__)


class State(Enum):
    IDLE = "idle"
    INGESTING = "ingesting"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one completed batch (consumers must not mutate regions)."""
    ranking: Tuple[str, ...]
    countries: Mapping[str, Country]
    continents: Mapping[str, Continent]
    world: World
    row_count: int = 0
    loaded_at: Optional[datetime] = None

    @classmethod
    def from_registry(cls, registry: RegionRegistry, ranking: Sequence[str], row_count: int) -> "Snapshot":
        return cls(
            ranking=tuple(ranking),
            countries=MappingProxyType(dict(registry.countries)),
            continents=MappingProxyType(dict(registry.continents)),
            world=registry.world,
            row_count=row_count,
            loaded_at=datetime.now(timezone.utc),
        )

    @classmethod
    def empty(cls) -> "Snapshot":
        return cls(ranking=(), countries=MappingProxyType({}), continents=MappingProxyType({}), world=World())

    def country(self, code: str) -> Country:
        try:
            return self.countries[code]
        except KeyError:
            raise MissingRegion(f"no country with code {code!r}") from None

    def continent(self, name: str) -> Continent:
        try:
            return self.continents[name]
        except KeyError:
            raise MissingRegion(f"no continent named {name!r}") from None

    def region(self, key: str) -> Region:
        """Look a region up by country code, continent name, or 'world'."""
        if key.lower() == "world":
            return self.world
        if key in self.countries:
            return self.countries[key]
        if key in self.continents:
            return self.continents[key]
        raise MissingRegion(f"no region called {key!r}")

    def ranked(self) -> List[Country]:
        return [self.country(code) for code in self.ranking]

    def regions(self) -> List[Region]:
        return [self.world, *self.continents.values(), *self.countries.values()]


@dataclass
class IngestionCoordinator:
    """Runs ingestion batches and publishes the resulting snapshot."""
    state: State = State.IDLE
    snapshot: Snapshot = field(default_factory=Snapshot.empty)
    last_error: Optional[BaseException] = field(default=None, repr=False)

    # ---------------- Batch ----------------
    def ingest(self, rows: Iterable[Sequence[Any]], header: bool = True) -> Snapshot:
        """Run one batch over a parsed row table and publish it.

        With `header=True` the first row is skipped. Raises whatever the rows
        trigger (InvalidDate, InvalidRow, DuplicateRegion, ...) after moving
        to FAILED; the previous snapshot stays in place.
        """
        if self.state is State.INGESTING:
            raise BatchInProgress("a batch is already being ingested")
        self.state = State.INGESTING
        logger.info("Batch started")
        try:
            registry = RegionRegistry()
            count = 0
            for i, columns in enumerate(rows):
                if header and i == 0:
                    continue
                _ingest_row(registry, columns)
                count += 1
            snapshot = self._publish(registry, count)
        except Exception as e:
            self.state = State.FAILED
            self.last_error = e
            logger.error("Batch failed, keeping previous snapshot: %s", e)
            raise
        self.snapshot = snapshot
        self.state = State.READY
        self.last_error = None
        logger.info("Batch done: %d rows, %d countries, %d continents",
                    count, len(snapshot.countries), len(snapshot.continents))
        return snapshot

    def _publish(self, registry: RegionRegistry, row_count: int) -> Snapshot:
        ranking = rank_countries(registry.countries.values())
        world = registry.world
        for region in registry.regions():
            region.rebuild_tables()
        logger.debug("World totals: cases=%d deaths=%d", world.total_cases, world.total_deaths)
        return Snapshot.from_registry(registry, ranking, row_count)

    def recompute(self) -> Snapshot:
        """Rebuild the ranking and every series table of the current snapshot."""
        if self.state is State.INGESTING:
            raise BatchInProgress("cannot recompute while a batch is being ingested")
        snap = self.snapshot
        for region in snap.regions():
            region.rebuild_tables()
        self.snapshot = replace(snap, ranking=tuple(rank_countries(snap.countries.values())))
        return self.snapshot

    # ---------------- Output operations ----------------
    def export_csv(self, path: str) -> None:
        import csv
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["rank", "code", "name", "continent", "population", "total_cases", "total_deaths"])
            for rank, c in enumerate(self.snapshot.ranked(), start=1):
                w.writerow([rank, c.code, c.name, c.continent.name, c.population, c.total_cases, c.total_deaths])

    def export_json(self, path: str) -> None:
        """Export every region with totals and both series tables."""
        import json
        snap = self.snapshot
        payload = {
            "loaded_at": snap.loaded_at.isoformat() if snap.loaded_at else None,
            "ranking": list(snap.ranking),
            "world": _region_payload(snap.world),
            "continents": [_region_payload(c) for c in snap.continents.values()],
            "countries": [_region_payload(snap.country(code)) for code in snap.ranking],
        }
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)


# ---------------- Helpers ----------------
def _ingest_row(registry: RegionRegistry, columns: Sequence[Any]) -> Record:
    row = row_from_columns(columns)
    country = registry.country_for(row)
    record = row.to_record()
    country.append(record)
    country.continent.accumulate(record)
    registry.world.accumulate(record)
    return record

def _region_payload(region: Region) -> dict:
    out = {
        "kind": region.kind,
        "name": region.name,
        "population": region.population,
        "total_cases": region.total_cases,
        "total_deaths": region.total_deaths,
        "tables": {v: t.to_dict() for v, t in region.tables.items()},
    }
    if isinstance(region, Country):
        out["code"] = region.code
        out["continent"] = region.continent.name
    return out
