from __future__ import annotations

from pathlib import Path


class CompendiumDataError(Exception):
    """Base class for failures reading a collection from the data directory."""

    def __init__(self, collection: str, path: Path | str, reason: str) -> None:
        self.collection = collection
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{collection}: {reason} ({self.path})")


class DataUnavailable(CompendiumDataError):
    """The backing file is missing or cannot be read."""


class DataMalformed(CompendiumDataError):
    """The backing file exists but does not parse into the expected records."""
