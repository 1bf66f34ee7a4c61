"""Custom exception hierarchy for tsqlstring.

All public errors inherit from TsqlStringError so callers can catch the base
class for any tsqlstring-specific failure.  Encoding itself never raises;
the only failure path is constructing a raw fragment from a non-string.
"""
from __future__ import annotations

from typing import Any


class TsqlStringError(Exception):
    """Base exception for all tsqlstring errors."""


class InvalidArgumentError(TsqlStringError, TypeError):
    """Raised when a public constructor receives an argument of the wrong type.

    Args:
        message: Human-readable description.
        value: The rejected argument.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value
