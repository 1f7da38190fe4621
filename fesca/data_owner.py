"""Encoding and three-party sharing of a data owner's table."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from pathlib import Path

from fesca.config import load_data_and_config
from fesca.encode import encode_value
from fesca.sharing import share_bits
from fesca.types import BinaryPartyData, BinaryRow, TableSchema

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config_data_owner.json"


def column_bit_sizes(schema: TableSchema) -> list[int]:
    """Encoded bit width of each column, in schema order."""
    return [column.type_hint.bit_width() for column in schema.columns]


def _bytes_per_row(party: BinaryPartyData) -> int:
    if not party.rows:
        return 0
    first = party.rows[0]
    return len(first.bitstring_a) + len(first.bitstring_b)


def build_party_data(
    records: Sequence[Sequence[str]], schema: TableSchema, rng: random.Random
) -> list[BinaryPartyData]:
    """Encode and share every record, returning the data of parties 0, 1 and 2.

    Each column's shares are packed into whole bytes on their own and appended
    to the row's bitstrings.
    """
    sizes = column_bit_sizes(schema)
    parties = [BinaryPartyData(party_id, schema.table_id) for party_id in range(3)]

    for row_idx, record in enumerate(records):
        bitstrings = [(bytearray(), bytearray()) for _ in range(3)]
        offsets: list[int] = []
        offset = 0
        for field, column, size in zip(record, schema.columns, sizes):
            offsets.append(offset)
            shares = share_bits(encode_value(field, column), rng)
            for (out_a, out_b), (share_a, share_b) in zip(bitstrings, shares):
                out_a.extend(share_a)
                out_b.extend(share_b)
            offset += size

        for party, (out_a, out_b) in zip(parties, bitstrings):
            party.rows.append(
                BinaryRow(bytes(out_a), bytes(out_b), list(offsets), list(sizes))
            )

        processed = row_idx + 1
        if processed % 1000 == 0:
            logger.info("Processed %d rows...", processed)
        if row_idx < 2:
            logger.info(
                "Row %d shared: first field = %r", row_idx, record[0] if record else None
            )

    return parties


def run_data_owner(config_path: str | Path = DEFAULT_CONFIG_PATH) -> list[BinaryPartyData]:
    """Load the configured table and return its shares for the three parties."""
    records, schema, config = load_data_and_config(config_path)
    logger.info(
        "Loaded %d records and schema for table '%s'.", len(records), schema.table_name
    )
    logger.info("Loaded data owner configuration")

    logger.info("Encoding, sharing, and converting to binary format...")
    parties = build_party_data(records, schema, random.SystemRandom())
    logger.info(
        "All records encoded, shared, and converted to binary. Total rows processed: %d",
        len(records),
    )
    for party, url in zip(parties, config.computing_nodes.as_list()):
        logger.info(
            "Party %d (node %s): %d rows, %d bytes per row",
            party.party_id,
            url,
            len(party.rows),
            _bytes_per_row(party),
        )
    return parties