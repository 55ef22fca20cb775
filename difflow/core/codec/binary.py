"""
Binary Codec — fixed-width encoding of difference values

Wire format (little-endian throughout):
- integers   natural width, two's complement for signed (I32 → 4 bytes);
             ISize / USize always take 8 bytes, whatever the host pointer width
- Present    zero bytes; decoding consumes no input
- tuples     concatenation of the component encodings
- sequences  u64 element count, then the element encodings

Decoding needs a layout naming the type:
- a difference class                 I64, Present, tuple_of(I64, I64), vec_of(I32)
- a Python tuple of layouts          (I64, I64)        → tuple_of(I64, I64)
- a one-element Python list layout   [I32]             → vec_of(I32)
"""

import logging
from typing import Any, Final

from difflow.core.difference.capabilities import Semigroup
from difflow.core.difference.integers import FixedWidthInt, IntegerOverflowError, ISize, USize
from difflow.core.difference.present import Present
from difflow.core.difference.tuples import DiffTuple, tuple_of
from difflow.core.difference.vector import DiffVec, vec_of
from difflow.core.difference.wrapping import WrappingISize

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

BYTE_ORDER: Final[str] = "little"

# Width of pointer-sized integers on the wire (i64 / u64)
SIZE_TYPE_BYTES: Final[int] = 8

# Size of the sequence length prefix (u64)
LENGTH_PREFIX_BYTES: Final[int] = 8

# Upper bound on a decoded sequence length; zero-size elements (Present)
# cannot be bounded by the remaining input
MAX_SEQUENCE_LENGTH: Final[int] = 1 << 24


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DecodeError(ValueError):
    """Input bytes do not decode to the requested layout."""

    pass


# =============================================================================
# LAYOUTS
# =============================================================================


def resolve_layout(layout: Any) -> type:
    """
    Difference class described by a layout.

    Raises:
        ValueError: layout is not a difference class, tuple or one-element list
    """
    if isinstance(layout, tuple):
        return tuple_of(*(resolve_layout(component) for component in layout))
    if isinstance(layout, list):
        if len(layout) != 1:
            raise ValueError(f"sequence layout takes exactly one element layout: {layout!r}")
        return vec_of(resolve_layout(layout[0]))
    if isinstance(layout, type) and issubclass(layout, Semigroup):
        return layout
    raise ValueError(f"not a difference layout: {layout!r}")


def integer_width(diff_type: type) -> int:
    """Encoded byte width of a fixed-width integer type."""
    if issubclass(diff_type, (ISize, USize, WrappingISize)):
        return SIZE_TYPE_BYTES
    return diff_type.BITS // 8


# =============================================================================
# ENCODE
# =============================================================================


def encode(value: Semigroup) -> bytes:
    """
    Encode a difference value.

    Raises:
        TypeError: value (or a component) has no binary encoding
    """
    out = bytearray()
    _encode_into(value, out)
    return bytes(out)


def _encode_into(value: Any, out: bytearray) -> None:
    if isinstance(value, FixedWidthInt):
        out += value.value.to_bytes(integer_width(type(value)), BYTE_ORDER, signed=value.SIGNED)
    elif isinstance(value, Present):
        pass
    elif isinstance(value, DiffTuple):
        for item in value:
            _encode_into(item, out)
    elif isinstance(value, DiffVec):
        out += len(value).to_bytes(LENGTH_PREFIX_BYTES, BYTE_ORDER, signed=False)
        for item in value:
            _encode_into(item, out)
    else:
        raise TypeError(f"no binary encoding for {type(value).__name__}")


def encoded_size(value: Semigroup) -> int:
    """Number of bytes encode(value) produces."""
    if isinstance(value, FixedWidthInt):
        return integer_width(type(value))
    if isinstance(value, Present):
        return 0
    if isinstance(value, DiffTuple):
        return sum(encoded_size(item) for item in value)
    if isinstance(value, DiffVec):
        return LENGTH_PREFIX_BYTES + sum(encoded_size(item) for item in value)
    raise TypeError(f"no binary encoding for {type(value).__name__}")


# =============================================================================
# DECODE
# =============================================================================


def decode(layout: Any, data: bytes, max_sequence_length: int = MAX_SEQUENCE_LENGTH) -> Semigroup:
    """
    Decode a difference value of the given layout.

    Args:
        layout: Difference class, tuple of layouts or one-element list layout
        data: Encoded bytes, consumed entirely
        max_sequence_length: Reject sequence prefixes above this count

    Returns:
        The decoded value

    Raises:
        DecodeError: truncated input, trailing bytes, or oversized sequence
        ValueError: invalid layout
    """
    diff_type = resolve_layout(layout)
    buffer = memoryview(bytes(data))
    value, offset = _decode_from(diff_type, buffer, 0, max_sequence_length)
    if offset != len(buffer):
        logger.debug("Trailing bytes after %s: %d", diff_type.__name__, len(buffer) - offset)
        raise DecodeError(
            f"{len(buffer) - offset} trailing bytes after {diff_type.__name__}"
        )
    return value


def _take(buffer: memoryview, offset: int, size: int, what: str) -> memoryview:
    end = offset + size
    if end > len(buffer):
        logger.debug("Truncated input for %s at offset %d", what, offset)
        raise DecodeError(
            f"truncated input: {what} needs {size} bytes at offset {offset}, "
            f"{len(buffer) - offset} available"
        )
    return buffer[offset:end]


def _decode_from(
    diff_type: type, buffer: memoryview, offset: int, max_sequence_length: int
) -> tuple[Any, int]:
    if issubclass(diff_type, FixedWidthInt):
        size = integer_width(diff_type)
        raw = _take(buffer, offset, size, diff_type.__name__)
        value = int.from_bytes(raw, BYTE_ORDER, signed=diff_type.SIGNED)
        try:
            return diff_type(value), offset + size
        except IntegerOverflowError as e:
            # Size types narrower than their wire width on this host
            logger.debug("Value %d out of range for %s", value, diff_type.__name__)
            raise DecodeError(f"{diff_type.__name__} out of range: {value}") from e

    if issubclass(diff_type, Present):
        return Present(), offset

    if issubclass(diff_type, DiffTuple):
        items = []
        for component in diff_type.COMPONENTS:
            item, offset = _decode_from(component, buffer, offset, max_sequence_length)
            items.append(item)
        return diff_type(*items), offset

    if issubclass(diff_type, DiffVec):
        raw = _take(buffer, offset, LENGTH_PREFIX_BYTES, "sequence length")
        length = int.from_bytes(raw, BYTE_ORDER, signed=False)
        offset += LENGTH_PREFIX_BYTES
        if length > max_sequence_length:
            logger.debug("Sequence length %d above limit %d", length, max_sequence_length)
            raise DecodeError(
                f"sequence length {length} exceeds limit {max_sequence_length}"
            )
        items = []
        for _ in range(length):
            item, offset = _decode_from(diff_type.ELEMENT, buffer, offset, max_sequence_length)
            items.append(item)
        return diff_type(items), offset

    raise TypeError(f"no binary encoding for {diff_type.__name__}")
