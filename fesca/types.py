"""Table schema descriptions and the containers that carry binary shares."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

_U32_MAX = 0xFFFFFFFF
_U64_MAX = 0xFFFFFFFFFFFFFFFF


class SchemaError(ValueError):
    """Raised when JSON data does not describe a valid schema element."""


def _require_uint(value: Any, name: str, maximum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SchemaError(f"{name} must be an unsigned integer, got {value!r}")
    if not 0 <= value <= maximum:
        raise SchemaError(f"{name} out of range: {value}")
    return value


def _require_str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise SchemaError(f"{name} must be a string, got {value!r}")
    return value


def _require_key(data: dict, key: str, owner: str) -> Any:
    if key not in data:
        raise SchemaError(f"missing field '{key}' in {owner}")
    return data[key]


def _require_dict(data: Any, owner: str) -> dict:
    if not isinstance(data, dict):
        raise SchemaError(f"{owner} must be a JSON object, got {data!r}")
    return data


class Charset(enum.Enum):
    """Character encoding used for fixed-length string columns."""

    ASCII = "Ascii"
    UTF8 = "Utf8"

    def bits_per_char(self) -> int:
        """Number of bits each character occupies in the encoding."""
        return 7 if self is Charset.ASCII else 8


class ColumnKind(enum.Enum):
    """The kinds of value a column can hold."""

    BOOLEAN = "Boolean"
    UNSIGNED_INT = "UnsignedInt"
    FLOAT = "Float"
    STRING = "String"


_FIXED_WIDTHS = {
    ColumnKind.BOOLEAN: 1,
    ColumnKind.UNSIGNED_INT: 32,
    ColumnKind.FLOAT: 64,
}


@dataclass(frozen=True)
class ColumnType:
    """Type of a column; string columns also carry a length and a charset."""

    kind: ColumnKind
    max_chars: int = 0
    charset: Charset | None = None

    def __post_init__(self) -> None:
        if self.kind is ColumnKind.STRING:
            if self.charset is None:
                raise ValueError("string columns need a charset")
            if isinstance(self.max_chars, bool) or self.max_chars < 0:
                raise ValueError("max_chars must be a non-negative integer")

    def bit_width(self) -> int:
        """Number of bits one encoded value of this type takes."""
        if self.kind is ColumnKind.STRING:
            assert self.charset is not None
            return self.max_chars * self.charset.bits_per_char()
        return _FIXED_WIDTHS[self.kind]

    @classmethod
    def from_json(cls, data: Any) -> ColumnType:
        """Build a column type from its externally tagged JSON form."""
        if isinstance(data, str):
            try:
                kind = ColumnKind(data)
            except ValueError:
                raise SchemaError(f"unknown column type {data!r}") from None
            if kind is ColumnKind.STRING:
                raise SchemaError("column type 'String' needs max_chars and charset")
            return cls(kind)
        if isinstance(data, dict) and len(data) == 1:
            (tag, body), = data.items()
            if tag != ColumnKind.STRING.value:
                raise SchemaError(f"unknown column type {tag!r}")
            body = _require_dict(body, "String column type")
            max_chars = _require_uint(
                _require_key(body, "max_chars", "String"), "max_chars", _U64_MAX
            )
            charset_name = _require_key(body, "charset", "String")
            try:
                charset = Charset(charset_name)
            except ValueError:
                raise SchemaError(f"unknown charset {charset_name!r}") from None
            return cls(ColumnKind.STRING, max_chars, charset)
        raise SchemaError(f"invalid column type {data!r}")

    def to_json(self) -> Any:
        """Return the externally tagged JSON form of this type."""
        if self.kind is ColumnKind.STRING:
            assert self.charset is not None
            return {
                "String": {"max_chars": self.max_chars, "charset": self.charset.value}
            }
        return self.kind.value


@dataclass(frozen=True)
class ColumnDescriptor:
    """A named column and its type."""

    name: str
    type_hint: ColumnType

    @classmethod
    def from_json(cls, data: Any) -> ColumnDescriptor:
        """Build a column descriptor from a JSON object."""
        data = _require_dict(data, "column")
        name = _require_str(_require_key(data, "name", "column"), "name")
        type_hint = ColumnType.from_json(_require_key(data, "type_hint", "column"))
        return cls(name, type_hint)


@dataclass
class TableSchema:
    """Column layout and metadata of a table."""

    table_name: str
    table_id: int
    columns: list[ColumnDescriptor]
    row_count: int

    @classmethod
    def from_json(cls, data: Any) -> TableSchema:
        """Build a table schema from a JSON object."""
        data = _require_dict(data, "table schema")
        table_name = _require_str(
            _require_key(data, "table_name", "table schema"), "table_name"
        )
        table_id = _require_uint(
            _require_key(data, "table_id", "table schema"), "table_id", _U32_MAX
        )
        raw_columns = _require_key(data, "columns", "table schema")
        if not isinstance(raw_columns, list):
            raise SchemaError("columns must be a list")
        columns = [ColumnDescriptor.from_json(item) for item in raw_columns]
        row_count = _require_uint(
            _require_key(data, "row_count", "table schema"), "row_count", _U64_MAX
        )
        return cls(table_name, table_id, columns, row_count)


@dataclass
class BinaryRow:
    """One row's two share bitstrings plus the bit layout of its columns."""

    bitstring_a: bytes
    bitstring_b: bytes
    column_bit_offsets: list[int]
    column_bit_lengths: list[int]


@dataclass
class BinaryPartyData:
    """All rows of a table held by one party."""

    party_id: int
    table_id: int
    rows: list[BinaryRow] = field(default_factory=list)