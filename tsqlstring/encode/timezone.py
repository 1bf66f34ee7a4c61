"""Total parser for the time zone strings accepted by the date encoder.

Recognised forms are ``'Z'`` and a sign followed by ``HH``, ``HHMM`` or
``HH:MM``.  Leading whitespace is accepted as a plus sign, since ``+`` often
arrives URL-decoded as a space.  Anything else parses to an unrecognised
zero offset, which the encoder treats as UTC.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

_OFFSET_RE = re.compile(r"([+\-\s])(\d\d):?(\d\d)?", re.ASCII)


@dataclass(frozen=True)
class TimeZoneOffset:
    """Result of parsing a time zone string.

    Attributes:
        minutes: Signed offset from UTC in minutes.
        recognized: ``False`` when the input was not a known form.
    """

    minutes: int = 0
    recognized: bool = False


#: The parse result for ``'Z'``.
UTC = TimeZoneOffset(minutes=0, recognized=True)


def parse_time_zone(text: Any) -> TimeZoneOffset:
    """Parse ``text`` into a :class:`TimeZoneOffset`.  Never raises.

    Args:
        text: ``'Z'``, ``'+01'``, ``'+0200'``, ``'-05:00'``, ...

    Returns:
        The parsed offset; unrecognised input yields
        ``TimeZoneOffset(0, recognized=False)``.
    """
    if text == "Z":
        return UTC

    match = _OFFSET_RE.match(text) if isinstance(text, str) else None
    if match is None:
        logger.debug("Unrecognised time zone %r, using UTC", text)
        return TimeZoneOffset()

    sign, hours, minutes = match.groups()
    total = int(hours) * 60 + int(minutes or 0)
    return TimeZoneOffset(minutes=-total if sign == "-" else total, recognized=True)
