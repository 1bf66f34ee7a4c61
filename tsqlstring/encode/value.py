"""Python value → T-SQL literal encoding.

:func:`escape` dispatches on the kind of value, first match wins:

==========================  =============================================
Value                       Rendering
==========================  =============================================
``None``                    ``NULL``
``CustomEncoded``           result of ``to_sql()``, verbatim
``Raw``                     wrapped fragment, verbatim
``bool``                    ``1`` / ``0``
``int`` / ``float`` /       decimal text; ``NaN``, ``Infinity``,
``Decimal``                 ``-Infinity`` for non-finite floats
``datetime`` / ``date``     ``'YYYY-MM-DD HH:MM:SS.mmm'`` or ``NULL``
``list`` / ``tuple``        ``1, 2, 3`` / ``(1, 2), (3, 4)``
``Mapping``                 ``[key] = value, ...``
``str``                     single-quoted and escaped
anything else               ``str(value)``, quoted and escaped
==========================  =============================================

Encoding is total: nothing here raises for the value kinds above.
Self-referencing lists or mappings are not supported.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from typing import Any

from tsqlstring.encode.identifier import escape_id
from tsqlstring.encode.timezone import parse_time_zone
from tsqlstring.schema.options import LOCAL_TIME_ZONE
from tsqlstring.schema.values import CustomEncoded, Raw

logger = logging.getLogger(__name__)

NULL = "NULL"

_ESCAPES: dict[str, str] = {
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\x1a": "\\Z",
    "/": "\\/",
    "\\": "\\\\",
    "'": "''",
}
_ESCAPE_RE = re.compile(r"[\b\f\n\r\t\x1a/\\']")


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


def escape(
    value: Any,
    stringify_objects: bool = False,
    time_zone: str = LOCAL_TIME_ZONE,
) -> str:
    """Encode ``value`` as a SQL literal fragment.

    Args:
        value: The value to encode.
        stringify_objects: Render a mapping as a quoted ``str()`` instead of
            ``[key] = value`` pairs.
        time_zone: Zone used when formatting dates (see
            :func:`date_to_string`).

    Returns:
        The SQL fragment.
    """
    if value is None:
        return NULL
    if isinstance(value, CustomEncoded):
        return str(value.to_sql())
    if isinstance(value, Raw):
        return value.sql
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (int, float, Decimal)):
        return _number_to_string(value)
    if isinstance(value, date):
        return date_to_string(value, time_zone)
    if isinstance(value, (list, tuple)):
        return array_to_list(value, time_zone)
    if isinstance(value, Mapping) and not stringify_objects:
        return object_to_values(value, time_zone)
    if isinstance(value, str):
        return escape_string(value)
    return escape_string(str(value))


# ---------------------------------------------------------------------------
# Per-kind encoders
# ---------------------------------------------------------------------------


def escape_string(text: str) -> str:
    """Single-quote ``text``, escaping control characters, ``/``, ``\\`` and ``'``.

    The replacement is one pass over the input, so inserted escape
    characters are never escaped again.
    """
    return "'" + _ESCAPE_RE.sub(lambda m: _ESCAPES[m.group()], text) + "'"


def array_to_list(values: list | tuple, time_zone: str = LOCAL_TIME_ZONE) -> str:
    """Render a sequence as a comma-separated list.

    Nested sequences become parenthesised groups, which is the shape of a
    multi-row ``VALUES`` list::

        array_to_list([1, 2, "c"])         # 1, 2, 'c'
        array_to_list([[1, 2], [3, 4]])    # (1, 2), (3, 4)

    Mappings inside the sequence are stringified rather than expanded.
    """
    parts: list[str] = []
    for item in values:
        if isinstance(item, (list, tuple)):
            parts.append(f"({array_to_list(item, time_zone)})")
        else:
            parts.append(escape(item, True, time_zone))
    return ", ".join(parts)


def object_to_values(mapping: Mapping[Any, Any], time_zone: str = LOCAL_TIME_ZONE) -> str:
    """Render a mapping as ``[key] = value`` assignments, e.g. for ``SET``.

    Callable entries are skipped.  Nested mappings are stringified.
    """
    return ", ".join(
        f"{escape_id(key)} = {escape(entry, True, time_zone)}"
        for key, entry in mapping.items()
        if not callable(entry)
    )


def date_to_string(value: date, time_zone: str = LOCAL_TIME_ZONE) -> str:
    """Format a date or datetime as a quoted ``'YYYY-MM-DD HH:MM:SS.mmm'`` literal.

    With ``time_zone='local'`` (or an empty zone) a naive datetime is
    formatted from its own fields and an aware one is first converted to
    the host's local zone.
    Any other ``time_zone`` reads the instant in UTC (naive values are
    interpreted as host-local time) and shifts it by the parsed offset;
    unrecognised zones mean UTC.  A plain ``date`` is midnight of that day.

    Args:
        value: The date to format.
        time_zone: ``'local'``, ``'Z'``, ``'+HH'``, ``'+HHMM'`` or ``'+HH:MM'``.

    Returns:
        The quoted literal, or ``NULL`` if the shifted instant falls outside
        the range ``datetime`` can represent.
    """
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)

    try:
        wall = _wall_clock(value, time_zone)
    except (OverflowError, ValueError, OSError):
        logger.debug("Date %r is not representable in zone %r", value, time_zone)
        return NULL

    text = (
        f"{wall.year:04d}-{wall.month:02d}-{wall.day:02d} "
        f"{wall.hour:02d}:{wall.minute:02d}:{wall.second:02d}."
        f"{wall.microsecond // 1000:03d}"
    )
    return escape_string(text)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _number_to_string(value: int | float | Decimal) -> str:
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return "NaN"
        return "Infinity" if value > 0 else "-Infinity"
    # Base-type text; subclasses (IntEnum, ...) may override __str__.
    if isinstance(value, int):
        return int.__repr__(value)
    if isinstance(value, float):
        return float.__repr__(value)
    return Decimal.__str__(value)


def _wall_clock(value: datetime, time_zone: str) -> datetime:
    if not time_zone or time_zone == LOCAL_TIME_ZONE:
        return value if value.tzinfo is None else value.astimezone()

    instant = value.astimezone(timezone.utc)
    offset = parse_time_zone(time_zone)
    if offset.minutes:
        instant += timedelta(minutes=offset.minutes)
    return instant
