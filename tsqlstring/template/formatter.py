"""Options-bound facade over the encoders and the substituter."""

from __future__ import annotations

from typing import Any

from tsqlstring.encode.identifier import escape_id
from tsqlstring.encode.value import escape
from tsqlstring.schema.options import FormatOptions
from tsqlstring.template.substitute import format_sql


class SqlFormatter:
    """Formats SQL with a fixed set of :class:`FormatOptions`.

    Args:
        options: Encoding options; defaults to ``FormatOptions()``
            (mappings expanded, local time zone).

    Example::

        fmt = SqlFormatter(FormatOptions(time_zone="Z"))
        fmt.format("UPDATE ?? SET ? WHERE id = ?", ["users", {"seen": now}, 7])
    """

    def __init__(self, options: FormatOptions | None = None) -> None:
        self._options = options or FormatOptions()

    @property
    def options(self) -> FormatOptions:
        return self._options

    def escape_id(self, value: Any, forbid_qualified: bool = False) -> str:
        """Quote ``value`` as an identifier."""
        return escape_id(value, forbid_qualified)

    def escape(self, value: Any) -> str:
        """Encode ``value`` as a literal using the configured options."""
        return escape(value, self._options.stringify_objects, self._options.time_zone)

    def format(self, sql: str, values: Any = None) -> str:
        """Substitute ``values`` into ``sql`` using the configured options."""
        return format_sql(
            sql,
            values,
            stringify_objects=self._options.stringify_objects,
            time_zone=self._options.time_zone,
        )
