"""Data owner configuration and table loading."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fesca.types import SchemaError, TableSchema


class ConfigError(ValueError):
    """Raised when a configuration or schema file cannot be used."""


def _field(data: dict, key: str, owner: str) -> str:
    if key not in data:
        raise ConfigError(f"missing field '{key}' in {owner}")
    value = data[key]
    if not isinstance(value, str):
        raise ConfigError(f"field '{key}' in {owner} must be a string")
    return value


def _section(data: Any, key: str) -> dict:
    if not isinstance(data, dict):
        raise ConfigError("configuration must be a JSON object")
    if key not in data:
        raise ConfigError(f"missing field '{key}' in configuration")
    section = data[key]
    if not isinstance(section, dict):
        raise ConfigError(f"field '{key}' must be a JSON object")
    return section


@dataclass(frozen=True)
class ComputingNodes:
    """Addresses of the three computing nodes."""

    node0_url: str
    node1_url: str
    node2_url: str

    def as_list(self) -> list[str]:
        """Node URLs in party order."""
        return [self.node0_url, self.node1_url, self.node2_url]


@dataclass(frozen=True)
class DataOwnerInfo:
    """Identity of the data owner."""

    owner_id: str
    owner_name: str


@dataclass(frozen=True)
class DataOwnerConfig:
    """Complete configuration of a data owner."""

    computing_nodes: ComputingNodes
    data_owner: DataOwnerInfo
    data_path: str


def load_data_owner_config(config_path: str | Path) -> DataOwnerConfig:
    """Read the data owner configuration from a JSON file."""
    with open(config_path, encoding="utf-8") as handle:
        try:
            data = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"invalid configuration JSON: {exc}") from exc
    nodes = _section(data, "computing_nodes")
    owner = _section(data, "data_owner")
    return DataOwnerConfig(
        computing_nodes=ComputingNodes(
            node0_url=_field(nodes, "node0_url", "computing_nodes"),
            node1_url=_field(nodes, "node1_url", "computing_nodes"),
            node2_url=_field(nodes, "node2_url", "computing_nodes"),
        ),
        data_owner=DataOwnerInfo(
            owner_id=_field(owner, "owner_id", "data_owner"),
            owner_name=_field(owner, "owner_name", "data_owner"),
        ),
        data_path=_field(data, "data_path", "configuration"),
    )


def read_tbl(path: str | Path) -> list[list[str]]:
    """Read pipe-separated records, skipping blank lines and a trailing empty field."""
    with open(path, encoding="utf-8", newline="") as handle:
        contents = handle.read()
    records = []
    for line in contents.split("\n"):
        line = line.strip()
        if not line:
            continue
        fields = line.split("|")
        if fields[-1] == "":
            fields.pop()
        records.append(fields)
    return records


def load_data_and_config(
    config_path: str | Path,
) -> tuple[list[list[str]], TableSchema, DataOwnerConfig]:
    """Load the configuration, its table data and the schema next to the data file."""
    config = load_data_owner_config(config_path)
    records = read_tbl(config.data_path)

    schema_path = Path(config.data_path).with_suffix(".json")
    try:
        handle = open(schema_path, encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to open schema file '{schema_path}': {exc}") from exc
    with handle:
        try:
            schema = TableSchema.from_json(json.load(handle))
        except (json.JSONDecodeError, SchemaError, UnicodeDecodeError) as exc:
            raise ConfigError(
                f"Failed to parse schema file '{schema_path}': {exc}"
            ) from exc
    return records, schema, config