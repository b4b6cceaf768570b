"""
epitrack package
================

Regional time-series aggregation for a daily per-country epidemic feed.

- The CLI entry point is in `epitrack/cli.py`.
- The ingestion coordinator (batches, snapshot, exports) is in `epitrack/engine.py`.
- Regions and their accumulation rules are in `epitrack/regions.py`.
- Series tables (trimming, rolling average) are built in `epitrack/series.py`.
- Feed loading is in `epitrack/loader.py`.
"""

from .engine import IngestionCoordinator, Snapshot, State

__version__ = '0.1.0'

__all__ = ["IngestionCoordinator", "Snapshot", "State", "__version__"]
