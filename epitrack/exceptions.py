"""
Errors
======

Every failure the aggregation core can raise. All of them abort the current
ingestion batch; the coordinator keeps the last good snapshot published.
"""

from __future__ import annotations


class EpitrackError(Exception):
    """Base class for all epitrack errors."""


class InvalidDate(EpitrackError, ValueError):
    """Date fields outside the accepted calendar range."""


class InvalidRow(EpitrackError, ValueError):
    """A feed row whose count/population cells cannot be parsed."""


class InvalidVariableName(EpitrackError, ValueError):
    """A series variable other than 'cases' or 'deaths' was requested."""


class DuplicateRegion(EpitrackError):
    """A country code was created twice in one batch."""


class MissingRegion(EpitrackError, KeyError):
    """A lookup by country code or continent name found nothing."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep plain messages
        return str(self.args[0]) if self.args else ""


class BatchInProgress(EpitrackError, RuntimeError):
    """A new batch was requested while another one is still running."""
