# fesca

Tools for three-party replicated secret sharing of tabular data, so that
several parties can work on data that none of them sees in the clear.

The package has no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `fesca.types` – table schemas (`TableSchema`, `ColumnDescriptor`,
  `ColumnType`, `ColumnKind`, `Charset`) read from JSON with `from_json`, and
  the per-party containers `BinaryRow` and `BinaryPartyData`. Invalid schema
  JSON raises `SchemaError`.
- `fesca.encode` – turns textual field values into fixed-width bit lists.
- `fesca.sharing` – `share_bits` splits bits into three replicated shares;
  `pack_bits` packs bits into bytes.
- `fesca.config` – loads a data owner's configuration, its `.tbl` data and
  its schema.
- `fesca.read_config` – looks up `key: value` lines in plain text files.
- `fesca.data_owner` – encodes and shares a whole table for three parties.
- `fesca.hashing`, `fesca.secret_share`, `fesca.operation`, `fesca.node` –
  XOR shares of 64-bit values and the XOR and AND gates computed on them.
- `fesca.storage` – writes and reads the binary share files a computing node
  keeps.
- `fesca.rss` – single-bit replicated sharing and a demonstration command.

## Encoding and sharing data

Each column type has a fixed bit width, and bits are always least significant
first:

| type          | bits                                         |
|---------------|----------------------------------------------|
| `BOOLEAN`     | 1 (`"true"`/`"1"`, `"false"`/`"0"`, any case) |
| `UNSIGNED_INT`| 32                                           |
| `FLOAT`       | 64, the IEEE 754 double pattern              |
| `STRING`      | `max_chars` × 7 (ASCII) or × 8 (UTF-8)        |

Strings are truncated to `max_chars` characters or padded with NUL; each
character keeps only its low 7 or 8 bits. Values that cannot be parsed raise
`ValueError`.

```python
import random

from fesca.encode import encode_unsigned
from fesca.sharing import share_bits

bits = encode_unsigned("5")
(p0, p1, p2) = share_bits(bits, random.Random())
# p0 == (a, b), p1 == (b, c), p2 == (a, c), each packed into bytes;
# a ^ b ^ c gives back the packed bits of 5.
```

`encode_value(value, column)` picks the encoder from a `ColumnDescriptor`.
`fesca.data_owner.build_party_data(records, schema, rng)` does a whole table
and returns one `BinaryPartyData` per party. Every row records the bit offset
and bit length of each column (`column_bit_sizes(schema)` gives the lengths);
each column's shares are packed into whole bytes on their own before being
appended to the row.

## Configuration

A data owner is configured with a JSON file:

```json
{
  "computing_nodes": {
    "node0_url": "http://localhost:50051",
    "node1_url": "http://localhost:50052",
    "node2_url": "http://localhost:50053"
  },
  "data_owner": {"owner_id": "owner-1", "owner_name": "Example Owner"},
  "data_path": "data/employees.tbl"
}
```

`load_data_and_config(config_path)` returns `(records, schema, config)`: the
pipe-separated records of the file named by `data_path` (blank lines and a
trailing empty field dropped, see `read_tbl`), the schema from the file next
to it with a `.json` extension, and the `DataOwnerConfig`. Problems with the
configuration or schema raise `ConfigError`.

A schema file looks like:

```json
{
  "table_name": "employees",
  "table_id": 1,
  "row_count": 2,
  "columns": [
    {"name": "active", "type_hint": "Boolean"},
    {"name": "salary", "type_hint": "UnsignedInt"},
    {"name": "name", "type_hint": {"String": {"max_chars": 10, "charset": "Ascii"}}}
  ]
}
```

`fesca.data_owner.run_data_owner(config_path)` (default
`config_data_owner.json`) loads all of this, shares the table, logs progress
and returns the three parties' `BinaryPartyData`.

`fesca.read_config.read_config(path, name)` returns the trimmed value of the
first `name: value` line of a text file, or `None` if the file or key is
missing.

## Computing on shares

```python
from fesca.node import Node
from fesca.operation import and_operation
from fesca.secret_share import generate_secret_share, reconstruct_secret

a = generate_secret_share(0b101010)
b = generate_secret_share(0b100010)
id_a, id_b = a[0].id, b[0].id

nodes = [Node(), Node(), Node()]
for node, share_a, share_b in zip(nodes, a, b):
    node.add_saved_share(share_a)
    node.add_saved_share(share_b)

# each node passes its unmasked shares to the next node in the ring
for sender, receiver in zip(nodes, nodes[1:] + nodes[:1]):
    for share_id in (id_a, id_b):
        receiver.add_received_share(sender.send_unmasked_share(share_id))

for node in nodes:
    node.add_calculated_share(and_operation(
        node.saved_shares[id_a], node.saved_shares[id_b],
        node.received_shares[id_a], node.received_shares[id_b],
        node.saved_shares[id_a].mask,
    ))

revealed = [node.send_masked_share(id_a ^ id_b) for node in nodes]
assert reconstruct_secret(revealed) == 0b101010 & 0b100010
```

Share ids come from `hash_value`, a SipHash-1-3 of the value under a zero key.
`xor_operation` combines two shares locally.

## Storing received shares

`fesca.storage.BinaryShareStorage(base_path).store_binary_shares(party_data,
schema, data_owner)` writes into `<base>/<owner_id>/<table_name>/` (see
`storage_path`) the file `party<N>_data.bin` – magic `FESCASHR`, row count,
then for each row its length-prefixed bitstrings, offsets and lengths, all
little-endian 32-bit – and a readable `schema.json`, and returns both paths.
`read_binary_data(path)` reads a data file back into `BinaryRow` objects.

## Single-bit demonstration

```
fesca-rss
```

Shares three fixed secret bits, prints the shares, recovers the bits, and
prints a XOR gate and an AND gate evaluated on the shares next to the plain
result.

## What the package does not do

- It does not send shares over the network: `run_data_owner` returns the
  party data and only logs the node URLs it would go to.
- There is no computing node server; `BinaryShareStorage` handles only the
  storing side.
- There is no query language front end for analysts.