"""Immutable argument cursor threaded through a template scan."""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ArgumentCursor:
    """A read position over positional template arguments.

    ``advance()`` returns a new cursor; the scan rebinds its local variable
    instead of mutating shared state.

    Attributes:
        values: The positional arguments.
        position: Zero-based index of the next argument to consume.
    """

    values: Sequence[Any]
    position: int = 0

    @property
    def exhausted(self) -> bool:
        """``True`` once every argument has been consumed."""
        return self.position >= len(self.values)

    @property
    def current(self) -> Any:
        """The argument at :attr:`position`.  Check :attr:`exhausted` first."""
        return self.values[self.position]

    def advance(self) -> ArgumentCursor:
        return ArgumentCursor(self.values, self.position + 1)
