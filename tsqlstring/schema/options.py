"""Pydantic model for the encoding options shared by a formatter.

``FormatOptions`` carries the two knobs every public operation accepts
(``stringify_objects`` and ``time_zone``) so callers can configure them once
and hand the object to :class:`~tsqlstring.template.formatter.SqlFormatter`::

    from tsqlstring import FormatOptions, SqlFormatter

    fmt = SqlFormatter(FormatOptions(time_zone="Z"))
    fmt.format("SELECT * FROM ?? WHERE created > ?", ["orders", since])
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict

#: Time zone value meaning "use the datetime's own wall-clock fields".
LOCAL_TIME_ZONE = "local"


class FormatOptions(BaseModel):
    """Encoding options.

    Attributes:
        stringify_objects: When ``True``, a mapping passed as a value is
            rendered as a quoted string instead of ``[key] = value`` pairs.
        time_zone: ``'local'``, ``'Z'``, or an offset such as ``'+01'``,
            ``'+0200'`` or ``'-05:00'``.  Unrecognised text means UTC.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    stringify_objects: bool = False
    time_zone: str = LOCAL_TIME_ZONE
