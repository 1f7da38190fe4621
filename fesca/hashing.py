"""Deterministic 64-bit identifiers derived from 64-bit values."""

from __future__ import annotations

_MASK64 = 0xFFFFFFFFFFFFFFFF


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (64 - shift))) & _MASK64


def _sip_round(v0: int, v1: int, v2: int, v3: int) -> tuple[int, int, int, int]:
    v0 = (v0 + v1) & _MASK64
    v1 = _rotl(v1, 13) ^ v0
    v0 = _rotl(v0, 32)
    v2 = (v2 + v3) & _MASK64
    v3 = _rotl(v3, 16) ^ v2
    v0 = (v0 + v3) & _MASK64
    v3 = _rotl(v3, 21) ^ v0
    v2 = (v2 + v1) & _MASK64
    v1 = _rotl(v1, 17) ^ v2
    v2 = _rotl(v2, 32)
    return v0, v1, v2, v3


def _siphash(
    data: bytes, k0: int = 0, k1: int = 0, c_rounds: int = 1, d_rounds: int = 3
) -> int:
    """SipHash-c-d of data under the 128-bit key (k0, k1)."""
    v0 = k0 ^ 0x736F6D6570736575
    v1 = k1 ^ 0x646F72616E646F6D
    v2 = k0 ^ 0x6C7967656E657261
    v3 = k1 ^ 0x7465646279746573

    full = len(data) - len(data) % 8
    for start in range(0, full, 8):
        word = int.from_bytes(data[start:start + 8], "little")
        v3 ^= word
        for _ in range(c_rounds):
            v0, v1, v2, v3 = _sip_round(v0, v1, v2, v3)
        v0 ^= word

    last = ((len(data) & 0xFF) << 56) | int.from_bytes(data[full:], "little")
    v3 ^= last
    for _ in range(c_rounds):
        v0, v1, v2, v3 = _sip_round(v0, v1, v2, v3)
    v0 ^= last

    v2 ^= 0xFF
    for _ in range(d_rounds):
        v0, v1, v2, v3 = _sip_round(v0, v1, v2, v3)
    return v0 ^ v1 ^ v2 ^ v3


def hash_value(a: int) -> int:
    """Hash an unsigned 64-bit value with SipHash-1-3 under an all-zero key."""
    if isinstance(a, bool) or not isinstance(a, int) or not 0 <= a <= _MASK64:
        raise ValueError(f"value must be an unsigned 64-bit integer, got {a!r}")
    return _siphash(a.to_bytes(8, "little"))