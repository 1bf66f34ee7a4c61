"""tsqlstring encoding layer: Python values → SQL literals and identifiers."""
from tsqlstring.encode.identifier import escape_id
from tsqlstring.encode.timezone import TimeZoneOffset, parse_time_zone
from tsqlstring.encode.value import (
    array_to_list,
    date_to_string,
    escape,
    escape_string,
    object_to_values,
)

__all__ = [
    "escape_id",
    "escape",
    "escape_string",
    "array_to_list",
    "object_to_values",
    "date_to_string",
    "TimeZoneOffset",
    "parse_time_zone",
]
