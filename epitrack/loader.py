"""
Feed loader (CSV / Excel -> row table)
======================================

Reads a daily case-distribution export from disk and returns it as a plain
row table (list of lists of strings), header row included, which is exactly
what `IngestionCoordinator.ingest` consumes.

Key ideas:
- Every cell is read as text; number parsing happens during ingestion so a
  bad cell fails the batch instead of silently turning into NaN.
- `.xlsx` files go through openpyxl; everything else is read as CSV.
"""

from __future__ import annotations
from pathlib import Path
from typing import List
import logging

import pandas as pd

logger = logging.getLogger(__name__)

def _read_frame(path: Path) -> pd.DataFrame:
    if path.suffix.lower() in (".xlsx", ".xlsm"):
        return pd.read_excel(path, engine="openpyxl", header=None, dtype=str, keep_default_na=False)
    return pd.read_csv(path, header=None, dtype=str, keep_default_na=False, skip_blank_lines=True)

def load_feed(path: str) -> List[List[str]]:
    """Load a feed file; the first returned row is its header."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Feed file not found: {p}")
    df = _read_frame(p).fillna("")
    rows = [[str(x) for x in row] for row in df.itertuples(index=False, name=None)]
    logger.info("Loaded %d rows from %s", len(rows), p)
    return rows
