"""A computing node holding shares by id."""

from __future__ import annotations

from dataclasses import dataclass, field

from fesca.secret_share import SecretShare, SecretShareSend


@dataclass
class Node:
    """Shares a node stores, receives from its neighbour and computes."""

    saved_shares: dict[int, SecretShare] = field(default_factory=dict)
    received_shares: dict[int, SecretShareSend] = field(default_factory=dict)
    calculated_shares: dict[int, SecretShare] = field(default_factory=dict)

    def add_saved_share(self, share: SecretShare) -> None:
        """Store a share dealt to this node, replacing any with the same id."""
        self.saved_shares[share.id] = share

    def add_received_share(self, share: SecretShareSend) -> None:
        """Store a share received from another node."""
        self.received_shares[share.id] = share

    def add_calculated_share(self, share: SecretShare) -> None:
        """Store the result of a computation."""
        self.calculated_shares[share.id] = share

    def send_masked_share(self, id: int) -> SecretShareSend | None:
        """Share XOR mask for id, preferring computed shares over saved ones."""
        share = self.calculated_shares.get(id) or self.saved_shares.get(id)
        if share is None:
            return None
        return SecretShareSend(id=share.id, share=share.share ^ share.mask)

    def send_unmasked_share(self, id: int) -> SecretShareSend | None:
        """The plain saved share for id, or None if there is none."""
        share = self.saved_shares.get(id)
        if share is None:
            return None
        return SecretShareSend(id=share.id, share=share.share)