"""
epitrack Command Line Interface (CLI)
=====================================

Interactive terminal program you run like:

    python -m epitrack.cli --feed "path/to/casedistribution.csv"

It loads a daily case-distribution feed, aggregates it into countries,
continents and the world, and lets you browse the ranking and the series.
The feed file is only read, never modified.
"""

from __future__ import annotations
import argparse, shlex
from typing import List, Optional

from .config import Settings, load_settings
from .dates import MONTH_DAYS
from .engine import IngestionCoordinator
from .loader import load_feed
from .log import setup_logger
from .regions import Country

HELP = """
Commands:
  help
  load "<path>"                    (re)load a feed file; replaces everything
  stats
  top [n]                          countries by total deaths
  continents
  series <code|continent|world> <cases|deaths> [n]
                                   last n entries of a series (default 14)
  recompute
  export csv "<out.csv>"           ranking table
  export json "<out.json>"         every region with its series
  quit
"""


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the epitrack CLI.

    1) Read settings
    2) Load and ingest the feed (if one is given)
    3) Start an interactive REPL
    """
    settings = load_settings()
    ap = argparse.ArgumentParser()
    ap.add_argument("--feed", default=settings.feed_path, help="Path to the case-distribution CSV/XLSX")
    args = ap.parse_args(argv)

    setup_logger("epitrack", settings.log_level)
    coordinator = IngestionCoordinator()
    if args.feed:
        try:
            _load(coordinator, args.feed)
        except Exception as e:
            print(f"Error: {e}")

    print("Type 'help' for commands.")
    while True:
        try:
            line = input("epitrack> ")
        except EOFError:
            break
        if not line.strip():
            continue
        if line.strip().lower() in ("quit", "exit"):
            break
        try:
            handle(coordinator, line, settings)
        except Exception as e:
            print(f"Error: {e}")


def _load(coordinator: IngestionCoordinator, path: str) -> None:
    print("Loading feed...")
    snap = coordinator.ingest(load_feed(path))
    print(f"Loaded {snap.row_count} rows: {len(snap.countries)} countries, {len(snap.continents)} continents.")


def handle(coordinator: IngestionCoordinator, line: str, settings: Settings = Settings()) -> None:
    """Handle one CLI command line."""
    parts = shlex.split(line)
    cmd = parts[0].lower()
    snap = coordinator.snapshot

    if cmd == "help":
        print(HELP)
        return

    if cmd == "load":
        if len(parts) < 2:
            print('Usage: load "<path>"')
            return
        _load(coordinator, parts[1])
        return

    if cmd == "stats":
        w = snap.world
        print(f"State: {coordinator.state.value} | rows: {snap.row_count} | loaded at: {snap.loaded_at or '-'}")
        print(f"Countries: {len(snap.countries)} | Continents: {len(snap.continents)}")
        print(f"World: population={w.population} cases={w.total_cases} deaths={w.total_deaths}")
        return

    if cmd == "top":
        n = int(parts[1]) if len(parts) >= 2 else settings.top_n
        ranked = snap.ranked()
        _print_countries(ranked[:n])
        if len(ranked) > n:
            print(f"... ({len(ranked)} total, showing {n})")
        return

    if cmd == "continents":
        for c in snap.continents.values():
            print(f"{c.name} | population={c.population} cases={c.total_cases} deaths={c.total_deaths}")
        return

    if cmd == "series":
        if len(parts) < 3:
            print("Usage: series <code|continent|world> <cases|deaths> [n]")
            return
        region = snap.region(parts[1])
        table = region.table(parts[2].lower())
        n = int(parts[3]) if len(parts) >= 4 else 14
        if table.is_empty():
            print(f"{region.name}: no {table.variable_name} recorded.")
            return
        print(f"{region.name} {table.variable_name}: {len(table)} days from {_day_label(table.start_day_ordinal)}, "
              f"peak={table.peak_value}, avg width={table.average_window_width}")
        first = max(0, len(table) - n)
        for i in range(first, len(table)):
            day = table.start_day_ordinal + i if region.fills_gaps else None
            label = _day_label(day) if day is not None else f"#{i + 1}"
            print(f"  {label:>8} w{table.week_index_per_entry[i]:02d} {table.values[i]:>9} avg={table.avg_values[i]:.1f}")
        return

    if cmd == "recompute":
        coordinator.recompute()
        print("Series and ranking recomputed.")
        return

    if cmd == "export":
        if len(parts) < 3:
            print('Usage: export csv "out.csv"  OR  export json "out.json"')
            return
        fmt, out_path = parts[1].lower(), parts[2]
        if fmt == "csv":
            coordinator.export_csv(out_path)
            print(f"Exported CSV to {out_path}")
            return
        if fmt == "json":
            coordinator.export_json(out_path)
            print(f"Exported JSON to {out_path}")
            return
        print("Unknown export format. Use: csv or json")
        return

    print("Unknown command. Type 'help'.")


def _day_label(ordinal: int) -> str:
    """'Mar 01' style label for a day ordinal (same month table as ingestion)."""
    names = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
    for month, days in enumerate(MONTH_DAYS):
        if ordinal <= days:
            return f"{names[month]} {ordinal:02d}"
        ordinal -= days
    return f"day {ordinal}"


def _print_countries(rows: List[Country]) -> None:
    for rank, c in enumerate(rows, start=1):
        print(f"{rank:>3}. {c.display_name():<12} {c.code} | cases={c.total_cases} deaths={c.total_deaths}")


if __name__ == "__main__":
    main()
