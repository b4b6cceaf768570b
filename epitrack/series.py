"""
Series builder
==============

Turns a region's records into a `SeriesTable` for one variable:

1) take the records in day order (prior-year records are dropped; Continent
   and World get zero entries for missing days),
2) drop the leading run of zero values,
3) compute a trailing rolling average over the trimmed values.

A region with no nonzero value yields an empty table rather than an error.
"""

from __future__ import annotations
from typing import List, Sequence, Tuple

from .dates import is_plotted, week_index
from .dsa import prefix_sums
from .exceptions import InvalidVariableName
from .models import AVERAGE_WIDTH, Record, SeriesTable

VARIABLES: Tuple[str, ...] = ("cases", "deaths")


def check_variable_name(variable: str) -> None:
    if variable not in VARIABLES:
        raise InvalidVariableName(
            f"Data variable name {variable!r} is invalid, must be one of: {', '.join(VARIABLES)}"
        )


def rolling_average(values: Sequence[int], width: int = AVERAGE_WIDTH) -> List[float]:
    """Trailing mean over `values[max(0, i-width+1) : i+1]` for each i.

    Early positions average over fewer samples instead of padding with zeros.
    """
    if width < 1:
        raise ValueError(f"width must be >= 1, got {width}")
    sums = prefix_sums(values)
    out: List[float] = []
    for i in range(len(values)):
        first = max(0, i - width + 1)
        out.append((sums[i + 1] - sums[first]) / (i + 1 - first))
    return out


def _contiguous(records: List[Record]) -> List[Record]:
    """Insert zero records for every missing day between first and last."""
    if not records:
        return []
    by_day = {r.day_ordinal: r for r in records}
    out: List[Record] = []
    for d in range(records[0].day_ordinal, records[-1].day_ordinal + 1):
        out.append(by_day.get(d) or Record(d, week_index(d)))
    return out


def build_series_table(records: Sequence[Record], variable: str, fill_gaps: bool = False,
                       width: int = AVERAGE_WIDTH) -> SeriesTable:
    """Build the table for `variable` from records already in day order.

    `fill_gaps` is meant for day-keyed records (one record per day ordinal).
    """
    check_variable_name(variable)
    plotted = [r for r in records if is_plotted(r.day_ordinal)]
    if fill_gaps:
        plotted = _contiguous(plotted)

    values = [r.value(variable) for r in plotted]
    first_nz = next((i for i, v in enumerate(values) if v > 0), None)
    if first_nz is None:
        return SeriesTable(variable_name=variable, average_window_width=width)

    trimmed = values[first_nz:]
    return SeriesTable(
        variable_name=variable,
        start_day_ordinal=plotted[first_nz].day_ordinal,
        peak_value=max(trimmed),
        values=tuple(trimmed),
        avg_values=tuple(rolling_average(trimmed, width)),
        week_index_per_entry=tuple(r.week for r in plotted[first_nz:]),
        average_window_width=width,
    )
