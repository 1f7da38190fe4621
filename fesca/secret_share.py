"""XOR secret shares of 64-bit values split among three parties."""

from __future__ import annotations

import secrets
from collections.abc import Sequence
from dataclasses import dataclass

from fesca.hashing import hash_value

_MASK64 = 0xFFFFFFFFFFFFFFFF


@dataclass
class SecretShare:
    """A party's share of a value together with its zero-sharing mask."""

    id: int = 0
    share: int = 0
    mask: int = 0


@dataclass
class SecretShareSend:
    """A share as sent to another party, either masked or unmasked."""

    id: int = 0
    share: int = 0


def _random_u64() -> int:
    return secrets.randbits(64)


def generate_mask() -> list[int]:
    """Return three random 64-bit values whose XOR is zero."""
    first = _random_u64()
    second = _random_u64()
    return [first, second, first ^ second]


def generate_secret_share(value: int) -> list[SecretShare]:
    """Split a 64-bit value into three shares whose XOR equals the value."""
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _MASK64:
        raise ValueError(f"value must be an unsigned 64-bit integer, got {value!r}")
    share_id = hash_value(value)
    masks = generate_mask()
    first = _random_u64()
    second = _random_u64()
    third = first ^ second ^ value
    return [
        SecretShare(share_id, share, mask)
        for share, mask in zip((first, second, third), masks)
    ]


def reconstruct_secret(shares: Sequence[SecretShareSend]) -> int | None:
    """XOR three shares back together; None unless exactly three are given."""
    if len(shares) != 3:
        return None
    result = 0
    for item in shares:
        result ^= item.share
    return result