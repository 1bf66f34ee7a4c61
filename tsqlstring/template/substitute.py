"""Placeholder substitution for ``?`` / ``??`` SQL templates.

A template is scanned left to right for runs of ``?``:

- ``??`` is an identifier placeholder, replaced with :func:`escape_id`.
- ``?`` is a value placeholder, replaced with :func:`escape`.
- ``???`` and longer runs are copied unchanged and consume nothing.

Each recognised placeholder consumes the next positional argument.  Once
the arguments run out the remaining placeholders are left as they are, and
arguments beyond the last placeholder are ignored::

    format_sql("SELECT * FROM ?? WHERE id = ?", ["users", 42])
    # SELECT * FROM [users] WHERE id = 42

    format_sql("? and ?", ["a"])
    # 'a' and ?
"""

from __future__ import annotations

import re
from typing import Any

from tsqlstring.encode.identifier import escape_id
from tsqlstring.encode.value import escape
from tsqlstring.schema.options import LOCAL_TIME_ZONE
from tsqlstring.template.cursor import ArgumentCursor

_PLACEHOLDER_RE = re.compile(r"\?+")

_VALUE = "?"
_IDENTIFIER = "??"


def format_sql(
    sql: str,
    values: Any = None,
    stringify_objects: bool = False,
    time_zone: str = LOCAL_TIME_ZONE,
) -> str:
    """Substitute ``values`` into the placeholders of ``sql``.

    Args:
        sql: The template.
        values: Positional arguments as a ``list`` or ``tuple``.  Any other
            non-``None`` value is a single argument that every placeholder
            receives; no cursor is kept in that case.
        stringify_objects: Passed to :func:`escape` for value placeholders.
        time_zone: Passed to :func:`escape` for value placeholders.

    Returns:
        The formatted SQL.  ``sql`` itself when ``values`` is ``None`` or
        an empty sequence.
    """
    if values is None:
        return sql

    if not isinstance(values, (list, tuple)):
        return _substitute_single(sql, values, stringify_objects, time_zone)

    if not values:
        return sql

    chunks: list[str] = []
    last = 0
    cursor = ArgumentCursor(values)

    for match in _PLACEHOLDER_RE.finditer(sql):
        if cursor.exhausted:
            break
        token = match.group()
        if token == _IDENTIFIER:
            replacement = escape_id(cursor.current)
        elif token == _VALUE:
            replacement = escape(cursor.current, stringify_objects, time_zone)
        else:
            continue
        cursor = cursor.advance()
        chunks.append(sql[last:match.start()])
        chunks.append(replacement)
        last = match.end()

    chunks.append(sql[last:])
    return "".join(chunks)


def _substitute_single(
    sql: str,
    value: Any,
    stringify_objects: bool,
    time_zone: str,
) -> str:
    """Replace every placeholder with the same encoding of ``value``."""
    encoded: dict[str, str] = {}

    def replace(match: re.Match[str]) -> str:
        token = match.group()
        if token not in (_VALUE, _IDENTIFIER):
            return token
        if token not in encoded:
            if token == _IDENTIFIER:
                encoded[token] = escape_id(value)
            else:
                encoded[token] = escape(value, stringify_objects, time_zone)
        return encoded[token]

    return _PLACEHOLDER_RE.sub(replace, sql)
