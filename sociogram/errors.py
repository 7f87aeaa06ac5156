"""Analysis error classes."""

from __future__ import annotations


class AnalysisError(Exception):
    """Base exception for classroom analysis failures."""

    pass


class EmptyRosterError(AnalysisError):
    """Raised when an analysis is requested for a classroom with no students.

    The global risk index is a mean over the roster, so it has no value
    for an empty one.
    """

    def __init__(self, message: str = "Cannot analyze a classroom with an empty roster"):
        super().__init__(message)
