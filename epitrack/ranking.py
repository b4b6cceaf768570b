"""
Country ranking
===============

Countries are listed by total deaths, highest first. Ties keep the order in
which the countries first appeared in the feed (stable merge sort).
"""

from __future__ import annotations
from typing import Iterable, List

from .dsa import merge_sort
from .regions import Country


def rank_countries(countries: Iterable[Country]) -> List[str]:
    """Return country codes ordered by descending `total_deaths`."""
    ordered = merge_sort(list(countries), key=lambda c: c.total_deaths, reverse=True)
    return [c.code for c in ordered]
