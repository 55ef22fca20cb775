"""
Binary codec for difference values.
"""

from .binary import (
    BYTE_ORDER,
    LENGTH_PREFIX_BYTES,
    MAX_SEQUENCE_LENGTH,
    SIZE_TYPE_BYTES,
    DecodeError,
    decode,
    encode,
    encoded_size,
    integer_width,
    resolve_layout,
)

__all__ = [
    # Constants
    "BYTE_ORDER",
    "LENGTH_PREFIX_BYTES",
    "MAX_SEQUENCE_LENGTH",
    "SIZE_TYPE_BYTES",
    # Exceptions
    "DecodeError",
    # Functions
    "decode",
    "encode",
    "encoded_size",
    "integer_width",
    "resolve_layout",
]
