"""Bracket-quoting of T-SQL identifiers."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


def escape_id(value: Any, forbid_qualified: bool = False) -> str:
    """Quote ``value`` as a bracketed, optionally dot-qualified identifier.

    Lists and tuples are flattened (recursively, order preserved) and each
    name is quoted on its own::

        escape_id("users")                 # [users]
        escape_id("dbo.users")             # [dbo].[users]
        escape_id("dbo.users", True)       # [dbo.users]
        escape_id(["a", ["b", "t.c"]])     # [a], [b], [t].[c]

    Args:
        value: A name, or a (possibly nested) list of names.  Non-string
            names are converted with ``str()``.
        forbid_qualified: Treat the whole string as a single name even if
            it contains a ``.``.

    Returns:
        The quoted identifier fragment.
    """
    if isinstance(value, (list, tuple)):
        return ", ".join(escape_id(name, forbid_qualified) for name in _flatten(value))

    name = value if isinstance(value, str) else str(value)
    if forbid_qualified or "." not in name:
        return _quote(name)

    # Only the first dot separates qualifier from name.
    qualifier, _, rest = name.partition(".")
    return f"{_quote(qualifier)}.{_quote(rest)}"


def _quote(segment: str) -> str:
    return "[" + segment.replace("]", "]]") + "]"


def _flatten(values: list | tuple) -> Iterator[Any]:
    for item in values:
        if isinstance(item, (list, tuple)):
            yield from _flatten(item)
        else:
            yield item
