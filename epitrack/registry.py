"""
Region registry (per-batch context)
===================================

The registry holds every region built during one ingestion batch:

- `countries["ESP"]` gives the Country with that code,
- `continents["Europe"]` gives the Continent with that name,
- `world` is the single World region (created on first use),

A fresh registry is built for each batch and handed to every accumulation
step, so nothing is kept in module-level state.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
from typing import Dict, Iterator, Optional

from .exceptions import DuplicateRegion, MissingRegion
from .models import FeedRow
from .regions import Continent, Country, Region, World

logger = logging.getLogger(__name__)

@dataclass
class RegionRegistry:
    """Countries, continents and the world built so far."""
    countries: Dict[str, Country] = field(default_factory=dict)
    continents: Dict[str, Continent] = field(default_factory=dict)
    _world: Optional[World] = field(default=None, repr=False)

    @property
    def world(self) -> World:
        if self._world is None:
            self._world = World()
        return self._world

    def continent_for(self, name: str) -> Continent:
        """Return the continent called `name`, creating it the first time."""
        continent = self.continents.get(name)
        if continent is None:
            logger.info("new continent, name == %s", name)
            continent = Continent(name)
            self.continents[name] = continent
        return continent

    def create_country(self, row: FeedRow, continent: Continent) -> Country:
        if row.country_code in self.countries:
            raise DuplicateRegion(f"country {row.country_code!r} already exists")
        country = Country(row.country_code, row.country_name, row.population, continent)
        self.countries[row.country_code] = country
        self.world.population += row.population
        logger.debug("new country %s (%s) in %s", row.country_code, row.country_name, continent.name)
        return country

    def country_for(self, row: FeedRow) -> Country:
        """Return the row's country, creating it on its first row.

        A known code showing up under a different continent is an upstream
        inconsistency and raises `DuplicateRegion`.
        """
        continent = self.continent_for(row.continent_name)
        country = self.countries.get(row.country_code)
        if country is None:
            return self.create_country(row, continent)
        if country.continent is not continent:
            raise DuplicateRegion(
                f"country {row.country_code!r} listed under {country.continent.name!r} "
                f"and {continent.name!r}"
            )
        return country

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

    def regions(self) -> Iterator[Region]:
        """World (if any), then continents, then countries, in insertion order."""
        if self._world is not None:
            yield self._world
        yield from self.continents.values()
        yield from self.countries.values()
