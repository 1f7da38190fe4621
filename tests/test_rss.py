import itertools

import pytest

from fesca.rss import (
    SingleBitShare,
    and_gate,
    generate_correlated_bit,
    generate_shares,
    main,
    recover_single_bit,
    xor_gate,
)

BITS = [False, True]


@pytest.mark.parametrize("secret", BITS)
def test_any_adjacent_pair_recovers(secret):
    for _ in range(20):
        p1, p2, p3 = generate_shares(secret)
        assert recover_single_bit(p1, p2) == secret
        assert recover_single_bit(p2, p3) == secret
        assert recover_single_bit(p3, p1) == secret
        assert p1.x ^ p2.x ^ p3.x is False


def test_correlated_bits_xor_to_zero():
    for _ in range(20):
        alpha, beta, gamma = generate_correlated_bit()
        assert alpha ^ beta ^ gamma is False


@pytest.mark.parametrize("s, t", list(itertools.product(BITS, BITS)))
def test_xor_gate(s, t):
    for _ in range(10):
        xs = generate_shares(s)
        ys = generate_shares(t)
        result = [xor_gate(a, b) for a, b in zip(xs, ys)]
        assert recover_single_bit(result[1], result[2]) == s ^ t
        assert recover_single_bit(result[0], result[1]) == s ^ t


@pytest.mark.parametrize("s, t", list(itertools.product(BITS, BITS)))
def test_and_gate_shares_xor_to_product(s, t):
    for _ in range(10):
        xs = generate_shares(s)
        ys = generate_shares(t)
        rs = [and_gate(a, b, r) for a, b, r in zip(xs, ys, generate_correlated_bit())]
        assert rs[0] ^ rs[1] ^ rs[2] == (s and t)
        p1 = SingleBitShare(rs[0] ^ rs[2], rs[0])
        p2 = SingleBitShare(rs[1] ^ rs[0], rs[1])
        assert recover_single_bit(p1, p2) == (s and t)


def test_and_gate_single_party_value():
    share1 = SingleBitShare(True, True)
    share2 = SingleBitShare(True, False)
    assert and_gate(share1, share2, False) is True
    assert and_gate(share1, share2, True) is False


def test_main_prints_recovered_results(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Replicated Secret Sharing Protocol"
    assert "Recovered secret1: true" in lines
    assert "Recovered secret2: false" in lines
    assert "Recovered secret3: true" in lines
    assert "test xor result:true" in lines
    assert lines[-1] == "test AND result:true"
    assert sum(line.startswith("share") for line in lines) == 9


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--bogus"])