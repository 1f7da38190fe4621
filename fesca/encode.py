"""Encoding of column values into fixed-width bit lists (least significant bit first)."""

from __future__ import annotations

import re
import struct

from fesca.types import Charset, ColumnDescriptor, ColumnKind

_U32_PATTERN = re.compile(r"\+?[0-9]+")
_U32_MAX = 0xFFFFFFFF


def _int_bits(number: int, width: int) -> list[bool]:
    return [bool((number >> i) & 1) for i in range(width)]


def encode_value(value: str, column: ColumnDescriptor) -> list[bool]:
    """Encode a textual value according to the column's type."""
    type_hint = column.type_hint
    if type_hint.kind is ColumnKind.BOOLEAN:
        return [encode_bool(value)]
    if type_hint.kind is ColumnKind.UNSIGNED_INT:
        return encode_unsigned(value)
    if type_hint.kind is ColumnKind.FLOAT:
        return encode_float(value)
    assert type_hint.charset is not None
    return encode_string(value, type_hint.max_chars, type_hint.charset)


def encode_bool(value: str) -> bool:
    """Parse "true"/"1"/"false"/"0", ignoring case and surrounding whitespace."""
    normalized = value.strip().lower()
    if normalized in ("true", "1"):
        return True
    if normalized in ("false", "0"):
        return False
    raise ValueError(f"Invalid boolean value: {value}")


def encode_unsigned(value: str) -> list[bool]:
    """Encode a 32-bit unsigned integer as 32 bits, least significant first."""
    if not _U32_PATTERN.fullmatch(value):
        raise ValueError(f"Invalid u32 value: {value!r}")
    number = int(value)
    if number > _U32_MAX:
        raise ValueError(f"Invalid u32 value: {value!r}")
    return _int_bits(number, 32)


def encode_float(value: str) -> list[bool]:
    """Encode a float as the 64 bits of its IEEE 754 double representation."""
    if not value or not value.isascii() or any(c.isspace() or c == "_" for c in value):
        raise ValueError(f"Invalid f64 value: {value!r}")
    try:
        number = float(value)
    except ValueError:
        raise ValueError(f"Invalid f64 value: {value!r}") from None
    (raw,) = struct.unpack("<Q", struct.pack("<d", number))
    return _int_bits(raw, 64)


def encode_string(value: str, max_chars: int, charset: Charset) -> list[bool]:
    """Encode exactly max_chars characters, padding with NUL and truncating the rest."""
    width = charset.bits_per_char()
    mask = (1 << width) - 1
    padded = value[:max_chars].ljust(max_chars, "\0")
    bits: list[bool] = []
    for char in padded:
        bits.extend(_int_bits(ord(char) & mask, width))
    return bits