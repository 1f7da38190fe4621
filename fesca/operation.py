"""Boolean gates on XOR secret shares."""

from __future__ import annotations

from fesca.secret_share import SecretShare, SecretShareSend


def xor_operation(a: SecretShare, b: SecretShare) -> SecretShare:
    """XOR two shares locally; ids, shares and masks combine by XOR."""
    return SecretShare(
        id=a.id ^ b.id,
        share=a.share ^ b.share,
        mask=a.mask ^ b.mask,
    )


def and_operation(
    a1: SecretShare,
    b1: SecretShare,
    a2: SecretShareSend,
    b2: SecretShareSend,
    mask: int,
) -> SecretShare:
    """One party's share of a AND b, given its own shares and a neighbour's.

    a2 and b2 are the unmasked shares received from the neighbouring party.
    """
    share = (a1.share & b1.share) ^ (a1.share & b2.share) ^ (a2.share & b1.share)
    return SecretShare(id=a1.id ^ b1.id, share=share, mask=mask)