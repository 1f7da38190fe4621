from fesca.node import Node
from fesca.operation import and_operation
from fesca.secret_share import SecretShare, SecretShareSend, generate_secret_share


def test_node_creation():
    node = Node()
    assert len(node.saved_shares) == 0
    assert len(node.received_shares) == 0
    assert len(node.calculated_shares) == 0


def _and_on(node, id1, id2):
    return and_operation(
        node.saved_shares[id1],
        node.saved_shares[id2],
        node.received_shares[id1],
        node.received_shares[id2],
        node.saved_shares[id1].mask,
    )


def test_three_nodes_secret_sharing():
    node1, node2, node3 = Node(), Node(), Node()
    assert len(node1.saved_shares) == 0
    assert len(node1.received_shares) == 0
    assert len(node1.calculated_shares) == 0

    secret_share1 = generate_secret_share(0b101010)
    secret_share2 = generate_secret_share(0b100010)
    id1 = secret_share1[0].id
    id2 = secret_share2[0].id

    for node, s1, s2 in zip((node1, node2, node3), secret_share1, secret_share2):
        node.add_saved_share(s1)
        node.add_saved_share(s2)

    assert len(node1.saved_shares) == 2
    assert len(node2.saved_shares) == 2
    assert len(node3.saved_shares) == 2

    for receiver, sender in ((node2, node1), (node3, node2), (node1, node3)):
        receiver.add_received_share(sender.send_unmasked_share(id1) or SecretShareSend())
        receiver.add_received_share(sender.send_unmasked_share(id2) or SecretShareSend())

    for node in (node1, node2, node3):
        node.add_calculated_share(_and_on(node, id1, id2))

    secrets = [
        node.send_masked_share(id1 ^ id2) or SecretShareSend()
        for node in (node1, node2, node3)
    ]
    assert secrets[0].share ^ secrets[1].share ^ secrets[2].share == 0b100010


def test_missing_shares_give_none():
    node = Node()
    assert node.send_masked_share(1) is None
    assert node.send_unmasked_share(1) is None


def test_masked_prefers_calculated_share():
    node = Node()
    node.add_saved_share(SecretShare(id=4, share=0b1111, mask=0b0101))
    assert node.send_masked_share(4) == SecretShareSend(4, 0b1111 ^ 0b0101)
    node.add_calculated_share(SecretShare(id=4, share=0b0011, mask=0b0001))
    assert node.send_masked_share(4) == SecretShareSend(4, 0b0011 ^ 0b0001)
    assert node.send_unmasked_share(4) == SecretShareSend(4, 0b1111)


def test_unmasked_ignores_calculated_share():
    node = Node()
    node.add_calculated_share(SecretShare(id=8, share=3, mask=1))
    assert node.send_unmasked_share(8) is None
    assert node.send_masked_share(8) == SecretShareSend(8, 3 ^ 1)


def test_adding_same_id_replaces():
    node = Node()
    node.add_saved_share(SecretShare(id=2, share=10, mask=0))
    node.add_saved_share(SecretShare(id=2, share=20, mask=0))
    assert len(node.saved_shares) == 1
    assert node.send_unmasked_share(2) == SecretShareSend(2, 20)