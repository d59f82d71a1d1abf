"""Custom exceptions for tocnav."""

from __future__ import annotations


class TocNavError(Exception):
    """Base exception for tocnav operations."""


class InvalidTOCDataError(TocNavError):
    """Raw dataset does not match the TOC data shape."""


class CycleDetectedError(TocNavError):
    """Page graph contains a cycle."""

    def __init__(self, path: list[str]) -> None:
        self.path = path
        super().__init__(f"Cycle detected in page graph: {' -> '.join(path)}")


class FetchError(TocNavError):
    """Error during dataset fetching."""


class TOCNotAvailableError(FetchError):
    """TOC endpoint returned 404."""
