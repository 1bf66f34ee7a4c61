"""tsqlstring – T-SQL literal escaping and ``?`` placeholder formatting.

Public API
----------
``escape_id``
    Quote a name (or list of names) as a ``[bracketed]`` identifier.

``escape``
    Encode a Python value as a SQL literal.

``format``
    Substitute positional arguments into a ``?`` / ``??`` template.

``raw``
    Mark trusted SQL text so it is emitted without escaping.

Example::

    import tsqlstring

    tsqlstring.format(
        "SELECT * FROM ?? WHERE id IN (?) AND created < ?",
        ["dbo.orders", [1, 2, 3], tsqlstring.raw("GETDATE()")],
    )
    # SELECT * FROM [dbo].[orders] WHERE id IN (1, 2, 3) AND created < GETDATE()

Every function is pure and thread-safe.  The only error raised is
``InvalidArgumentError`` from ``raw()`` when given a non-string.
"""

from __future__ import annotations

from tsqlstring.encode.identifier import escape_id
from tsqlstring.encode.timezone import TimeZoneOffset, parse_time_zone
from tsqlstring.encode.value import (
    array_to_list,
    date_to_string,
    escape,
    escape_string,
    object_to_values,
)
from tsqlstring.errors import InvalidArgumentError, TsqlStringError
from tsqlstring.schema.options import LOCAL_TIME_ZONE, FormatOptions
from tsqlstring.schema.values import CustomEncoded, Raw, raw
from tsqlstring.template.cursor import ArgumentCursor
from tsqlstring.template.formatter import SqlFormatter
from tsqlstring.template.substitute import format_sql

#: ``format`` mirrors the name used by other ``?``-placeholder libraries.
format = format_sql  # noqa: A001

__all__ = [
    # Core operations
    "escape_id",
    "escape",
    "format",
    "format_sql",
    "raw",
    # Encoding helpers
    "escape_string",
    "array_to_list",
    "object_to_values",
    "date_to_string",
    "parse_time_zone",
    "TimeZoneOffset",
    # Value variants
    "Raw",
    "CustomEncoded",
    # Configuration
    "FormatOptions",
    "LOCAL_TIME_ZONE",
    "SqlFormatter",
    "ArgumentCursor",
    # Errors
    "TsqlStringError",
    "InvalidArgumentError",
]
