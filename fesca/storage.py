"""On-disk storage of binary share data received by a computing node."""

from __future__ import annotations

import json
import struct
from pathlib import Path

from fesca.config import DataOwnerInfo
from fesca.types import BinaryPartyData, BinaryRow, ColumnKind, ColumnType, TableSchema

MAGIC = b"FESCASHR"
_U32 = struct.Struct("<I")


def _pack_u32_list(values: list[int]) -> bytes:
    return _U32.pack(len(values)) + struct.pack(f"<{len(values)}I", *values)


def _pack_bytes(data: bytes) -> bytes:
    return _U32.pack(len(data)) + bytes(data)


def write_binary_data(path: str | Path, party_data: BinaryPartyData) -> None:
    """Write a party's rows: magic, row count, then per row its bitstrings and layout."""
    with open(path, "wb") as handle:
        handle.write(MAGIC)
        handle.write(_U32.pack(len(party_data.rows)))
        for row in party_data.rows:
            handle.write(_pack_bytes(row.bitstring_a))
            handle.write(_pack_bytes(row.bitstring_b))
            handle.write(_pack_u32_list(row.column_bit_offsets))
            handle.write(_pack_u32_list(row.column_bit_lengths))


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = data
        self._pos = 0

    def take(self, count: int) -> bytes:
        end = self._pos + count
        if end > len(self._data):
            raise ValueError("share file is truncated")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def u32(self) -> int:
        (value,) = _U32.unpack(self.take(4))
        return value

    def blob(self) -> bytes:
        return self.take(self.u32())

    def u32_list(self) -> list[int]:
        count = self.u32()
        return list(struct.unpack(f"<{count}I", self.take(4 * count)))

    @property
    def exhausted(self) -> bool:
        return self._pos == len(self._data)


def read_binary_data(path: str | Path) -> list[BinaryRow]:
    """Read the rows written by write_binary_data."""
    reader = _Reader(Path(path).read_bytes())
    if reader.take(len(MAGIC)) != MAGIC:
        raise ValueError("not a share file: bad magic number")
    rows = []
    for _ in range(reader.u32()):
        bitstring_a = reader.blob()
        bitstring_b = reader.blob()
        offsets = reader.u32_list()
        lengths = reader.u32_list()
        rows.append(BinaryRow(bitstring_a, bitstring_b, offsets, lengths))
    if not reader.exhausted:
        raise ValueError("share file has trailing data")
    return rows


def _describe_type(type_hint: ColumnType) -> str:
    if type_hint.kind is ColumnKind.STRING:
        assert type_hint.charset is not None
        return (
            f"String {{ max_chars: {type_hint.max_chars}, "
            f"charset: {type_hint.charset.value} }}"
        )
    return type_hint.kind.value


def write_schema_json(
    path: str | Path, schema: TableSchema, data_owner: DataOwnerInfo
) -> None:
    """Write a readable JSON description of the table and its owner."""
    document = {
        "table_name": schema.table_name,
        "table_id": schema.table_id,
        "row_count": schema.row_count,
        "data_owner": {
            "owner_id": data_owner.owner_id,
            "owner_name": data_owner.owner_name,
        },
        "columns": [
            {"name": column.name, "type_hint": _describe_type(column.type_hint)}
            for column in schema.columns
        ],
    }
    Path(path).write_text(
        json.dumps(document, indent=2, sort_keys=True, ensure_ascii=False),
        encoding="utf-8",
    )


class BinaryShareStorage:
    """Stores received share data under base_path/owner_id/table_name."""

    def __init__(self, base_path: str | Path) -> None:
        self.base_path = str(base_path)

    def storage_path(self, data_owner: DataOwnerInfo, schema: TableSchema) -> str:
        """Directory holding one owner's shares of one table."""
        return f"{self.base_path}/{data_owner.owner_id}/{schema.table_name}"

    def store_binary_shares(
        self,
        party_data: BinaryPartyData,
        schema: TableSchema,
        data_owner: DataOwnerInfo,
    ) -> list[str]:
        """Write the party's data file and the schema file; return their paths."""
        directory = self.storage_path(data_owner, schema)
        Path(directory).mkdir(parents=True, exist_ok=True)

        data_file = f"{directory}/party{party_data.party_id}_data.bin"
        write_binary_data(data_file, party_data)

        schema_file = f"{directory}/schema.json"
        write_schema_json(schema_file, schema, data_owner)
        return [data_file, schema_file]