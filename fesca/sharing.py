"""Three-party replicated secret sharing of bit lists."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence

PartyShares = tuple[bytes, bytes]


def pack_bits(bits: Iterable[bool]) -> bytes:
    """Pack bits into bytes, eight per byte, least significant bit first."""
    out = bytearray()
    current = 0
    count = 0
    for bit in bits:
        if bit:
            current |= 1 << count
        count += 1
        if count == 8:
            out.append(current)
            current = 0
            count = 0
    if count:
        out.append(current)
    return bytes(out)


def share_bits(
    bits: Sequence[bool], rng: random.Random
) -> tuple[PartyShares, PartyShares, PartyShares]:
    """Split bits into shares a, b, c with a ^ b ^ c equal to the input.

    Party 0 receives (a, b), party 1 (b, c) and party 2 (a, c), each packed
    into bytes.
    """
    a_bits: list[bool] = []
    b_bits: list[bool] = []
    c_bits: list[bool] = []
    for bit in bits:
        a = bool(rng.getrandbits(1))
        b = bool(rng.getrandbits(1))
        a_bits.append(a)
        b_bits.append(b)
        c_bits.append(bool(bit) ^ a ^ b)
    a_bytes = pack_bits(a_bits)
    b_bytes = pack_bits(b_bits)
    c_bytes = pack_bits(c_bits)
    return (a_bytes, b_bytes), (b_bytes, c_bytes), (a_bytes, c_bytes)