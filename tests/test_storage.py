import json
import struct
from pathlib import Path

import pytest

from fesca.config import DataOwnerInfo
from fesca.storage import (
    MAGIC,
    BinaryShareStorage,
    read_binary_data,
    write_binary_data,
    write_schema_json,
)
from fesca.types import (
    BinaryPartyData,
    BinaryRow,
    Charset,
    ColumnDescriptor,
    ColumnKind,
    ColumnType,
    TableSchema,
)


@pytest.fixture
def owner():
    return DataOwnerInfo(owner_id="owner-7", owner_name="Example Owner")


@pytest.fixture
def schema():
    return TableSchema(
        table_name="employees",
        table_id=3,
        columns=[
            ColumnDescriptor("active", ColumnType(ColumnKind.BOOLEAN)),
            ColumnDescriptor("name", ColumnType(ColumnKind.STRING, 5, Charset.ASCII)),
        ],
        row_count=2,
    )


@pytest.fixture
def party():
    return BinaryPartyData(
        party_id=1,
        table_id=3,
        rows=[
            BinaryRow(b"\x01\x02", b"\xff", [0, 1], [1, 35]),
            BinaryRow(b"", b"\x10\x20\x30", [0], [8]),
        ],
    )


def test_round_trip(tmp_path, party):
    path = tmp_path / "data.bin"
    write_binary_data(path, party)
    assert read_binary_data(path) == party.rows


def test_header_layout(tmp_path, party):
    path = tmp_path / "data.bin"
    write_binary_data(path, party)
    raw = path.read_bytes()
    assert raw[:8] == MAGIC == b"FESCASHR"
    assert struct.unpack("<I", raw[8:12]) == (len(party.rows),)
    assert struct.unpack("<I", raw[12:16]) == (len(party.rows[0].bitstring_a),)
    assert raw[16:18] == party.rows[0].bitstring_a


def test_empty_party_round_trip(tmp_path):
    path = tmp_path / "empty.bin"
    write_binary_data(path, BinaryPartyData(0, 0))
    assert path.read_bytes() == MAGIC + b"\x00\x00\x00\x00"
    assert read_binary_data(path) == []


def test_bad_magic_rejected(tmp_path):
    path = tmp_path / "bad.bin"
    path.write_bytes(b"NOTMAGIC\x00\x00\x00\x00")
    with pytest.raises(ValueError):
        read_binary_data(path)


def test_truncated_file_rejected(tmp_path, party):
    path = tmp_path / "data.bin"
    write_binary_data(path, party)
    path.write_bytes(path.read_bytes()[:-2])
    with pytest.raises(ValueError):
        read_binary_data(path)


def test_trailing_data_rejected(tmp_path, party):
    path = tmp_path / "data.bin"
    write_binary_data(path, party)
    path.write_bytes(path.read_bytes() + b"\x00")
    with pytest.raises(ValueError):
        read_binary_data(path)


def test_storage_path(tmp_path, owner, schema):
    storage = BinaryShareStorage(str(tmp_path))
    assert storage.storage_path(owner, schema) == f"{tmp_path}/owner-7/employees"


def test_store_binary_shares(tmp_path, owner, schema, party):
    storage = BinaryShareStorage(tmp_path / "shares")
    files = storage.store_binary_shares(party, schema, owner)
    directory = storage.storage_path(owner, schema)
    assert files == [f"{directory}/party1_data.bin", f"{directory}/schema.json"]
    assert all(Path(name).is_file() for name in files)
    assert read_binary_data(files[0]) == party.rows


def test_schema_json_contents(tmp_path, owner, schema):
    path = tmp_path / "schema.json"
    write_schema_json(path, schema, owner)
    document = json.loads(path.read_text(encoding="utf-8"))
    assert document == {
        "table_name": "employees",
        "table_id": 3,
        "row_count": 2,
        "data_owner": {"owner_id": "owner-7", "owner_name": "Example Owner"},
        "columns": [
            {"name": "active", "type_hint": "Boolean"},
            {"name": "name", "type_hint": "String { max_chars: 5, charset: Ascii }"},
        ],
    }


def test_schema_json_keys_sorted(tmp_path, owner, schema):
    path = tmp_path / "schema.json"
    write_schema_json(path, schema, owner)
    text = path.read_text(encoding="utf-8")
    positions = [text.index(f'"{key}"') for key in
                 ("columns", "data_owner", "row_count", "table_id", "table_name")]
    assert positions == sorted(positions)