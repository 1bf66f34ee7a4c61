"""tsqlstring template layer: ``?`` / ``??`` placeholder substitution."""
from tsqlstring.template.cursor import ArgumentCursor
from tsqlstring.template.formatter import SqlFormatter
from tsqlstring.template.substitute import format_sql

__all__ = [
    "ArgumentCursor",
    "SqlFormatter",
    "format_sql",
]
