"""tsqlstring value variants and configuration models."""
from tsqlstring.schema.options import LOCAL_TIME_ZONE, FormatOptions
from tsqlstring.schema.values import CustomEncoded, Raw, raw

__all__ = [
    "LOCAL_TIME_ZONE",
    "FormatOptions",
    "CustomEncoded",
    "Raw",
    "raw",
]
