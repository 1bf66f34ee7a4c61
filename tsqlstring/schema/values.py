"""Explicit Value variants that change how the encoder treats an object.

Plain Python values (``None``, ``bool``, numbers, ``str``, dates, lists,
mappings) are encoded by type.  Two wrappers opt a value out of escaping
entirely, and both are tagged when they are built rather than discovered by
probing for methods at encode time:

``Raw``
    Caller-trusted SQL text, emitted verbatim.  Build it with :func:`raw`,
    which rejects non-string input immediately::

        from tsqlstring import escape, raw

        escape(raw("GETDATE()"))      # -> GETDATE()

``CustomEncoded``
    A zero-argument callable producing SQL text on demand::

        escape(CustomEncoded(lambda: "SCOPE_IDENTITY()"))
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictStr
from pydantic import ValidationError as PydanticValidationError

from tsqlstring.errors import InvalidArgumentError


class Raw(BaseModel):
    """A SQL fragment that is never quoted or escaped.

    Attributes:
        sql: The fragment, exactly as it should appear in the statement.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    sql: StrictStr

    def to_sql(self) -> str:
        """Return the wrapped fragment unchanged."""
        return self.sql


@dataclass(frozen=True)
class CustomEncoded:
    """A value that supplies its own SQL text.

    Attributes:
        to_sql: Zero-argument callable returning the SQL text.  Its result
            is emitted verbatim (converted with ``str()`` if needed).
    """

    to_sql: Callable[[], Any]


def raw(sql: Any = None) -> Raw:
    """Wrap ``sql`` so the encoder emits it without quoting.

    Args:
        sql: Trusted SQL text.

    Returns:
        A :class:`Raw` fragment.

    Raises:
        InvalidArgumentError: If ``sql`` is missing or not a ``str``.
    """
    try:
        return Raw(sql=sql)
    except PydanticValidationError as exc:
        raise InvalidArgumentError(
            f"raw() expects a str, got {type(sql).__name__}", value=sql
        ) from exc
