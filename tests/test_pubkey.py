import pytest
from nacl.signing import SigningKey

from gravity_core import Pubkey

SEED = bytes.fromhex("a665a45920422f9d417e4867efdc4fb8a04a1f3fff1fa07e998e86f7f7a27ae3")


@pytest.mark.parametrize("size", [0, 31, 33, 64])
def test_rejects_wrong_length(size):
    with pytest.raises(ValueError):
        Pubkey(bytes(size))


def test_raw_and_hex_conversion():
    raw = bytes(range(32))
    pk = Pubkey(bytearray(raw))
    assert bytes(pk) == raw
    assert pk.to_bytes() == raw
    assert str(pk) == raw.hex()
    assert Pubkey.from_hex(raw.hex()) == pk


def test_from_seed_matches_ed25519_verify_key():
    pk = Pubkey.from_seed(SEED)
    assert bytes(pk) == bytes(SigningKey(SEED).verify_key)
    assert Pubkey.from_seed(SEED) == pk


def test_new_unique_keys_differ():
    keys = {Pubkey.new_unique() for _ in range(8)}
    assert len(keys) == 8


def test_ordering_and_equality():
    low = Pubkey(bytes(32))
    high = Pubkey(b"\x01" + bytes(31))
    assert low < high
    assert low == Pubkey.default()
    assert low != bytes(32)
