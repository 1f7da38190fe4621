"""Single-bit replicated secret sharing among three parties, with XOR and AND gates."""

from __future__ import annotations

import argparse
import secrets
from dataclasses import dataclass


@dataclass(frozen=True)
class SingleBitShare:
    """One party's pair (x, a) of a shared bit."""

    x: bool
    a: bool

    def __str__(self) -> str:
        return f"SingleBitShare {{ x: {str(self.x).lower()}, a: {str(self.a).lower()} }}"


def _random_bit() -> bool:
    return bool(secrets.randbits(1))


def generate_shares(secret: bool) -> tuple[SingleBitShare, SingleBitShare, SingleBitShare]:
    """Share a bit: party i holds (x_i, x_{i-1} ^ secret) with x1 ^ x2 ^ x3 = 0."""
    x1 = _random_bit()
    x2 = _random_bit()
    x3 = x1 ^ x2
    secret = bool(secret)
    return (
        SingleBitShare(x1, x3 ^ secret),
        SingleBitShare(x2, x1 ^ secret),
        SingleBitShare(x3, x2 ^ secret),
    )


def recover_single_bit(share1: SingleBitShare, share2: SingleBitShare) -> bool:
    """Recover the bit from a party's share and the next party's share."""
    return share2.a ^ share1.x


def xor_gate(share1: SingleBitShare, share2: SingleBitShare) -> SingleBitShare:
    """Local XOR of two shared bits."""
    return SingleBitShare(share1.x ^ share2.x, share1.a ^ share2.a)


def and_gate(share1: SingleBitShare, share2: SingleBitShare, correlated_r: bool) -> bool:
    """A party's 3-out-of-3 share of the AND of two shared bits."""
    return (share1.x & share2.x) ^ (share1.a & share2.a) ^ bool(correlated_r)


def generate_correlated_bit() -> tuple[bool, bool, bool]:
    """Three random bits whose XOR is zero."""
    alpha = _random_bit()
    beta = _random_bit()
    return alpha, beta, alpha ^ beta


def _shares_printed(secret: bool) -> tuple[SingleBitShare, SingleBitShare, SingleBitShare]:
    shares = generate_shares(secret)
    for number, share in enumerate(shares, start=1):
        print(f"share{number}: {share}")
    return shares


def main(argv: list[str] | None = None) -> int:
    """Demonstrate sharing, recovery, XOR and AND on three fixed bits."""
    parser = argparse.ArgumentParser(
        prog="fesca-rss", description="Replicated secret sharing demonstration."
    )
    parser.parse_args(argv)

    print("Replicated Secret Sharing Protocol")
    print("---------------------------------")
    secret1, secret2, secret3 = True, False, True

    x1, x2, x3 = _shares_printed(secret1)
    y1, y2, y3 = _shares_printed(secret2)
    z1, z2, z3 = _shares_printed(secret3)

    print(f"Recovered secret1: {str(recover_single_bit(x1, x2)).lower()}")
    print(f"Recovered secret2: {str(recover_single_bit(y1, y2)).lower()}")
    print(f"Recovered secret3: {str(recover_single_bit(z1, z2)).lower()}")

    xor1 = xor_gate(x1, y1)
    xor2 = xor_gate(x2, y2)
    xor3 = xor_gate(x3, y3)
    print(f"secret1 xor secret2 = {str(secret1 ^ secret2).lower()}")
    print(f"test xor result:{str(recover_single_bit(xor2, xor3)).lower()}")

    alpha, beta, gamma = generate_correlated_bit()
    r1 = and_gate(xor1, z1, alpha)
    r2 = and_gate(xor2, z2, beta)
    r3 = and_gate(xor3, z3, gamma)

    p1 = SingleBitShare(r1 ^ r3, r1)
    p2 = SingleBitShare(r2 ^ r1, r2)

    print(f"secret1 xor secret2 and secret3 = {str(secret1 ^ secret2 & secret3).lower()}")
    print(f"test AND result:{str(recover_single_bit(p1, p2)).lower()}")
    return 0