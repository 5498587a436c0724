"""Gravity Core - 32-byte account identifiers."""
from __future__ import annotations

from functools import total_ordering

from nacl.signing import SigningKey

from gravity_core.protocol import PUBKEY_LEN


@total_ordering
class Pubkey:
    """Opaque 32-byte account identifier, compared by raw bytes."""

    __slots__ = ("_raw",)

    def __init__(self, raw: bytes | bytearray | memoryview):
        raw = bytes(raw)
        if len(raw) != PUBKEY_LEN:
            raise ValueError(f"Pubkey must be {PUBKEY_LEN} bytes, got {len(raw)}")
        self._raw = raw

    @classmethod
    def default(cls) -> Pubkey:
        return cls(bytes(PUBKEY_LEN))

    @classmethod
    def from_hex(cls, text: str) -> Pubkey:
        return cls(bytes.fromhex(text))

    @classmethod
    def from_seed(cls, seed: bytes) -> Pubkey:
        """Derive the ed25519 public key for a 32-byte signing seed."""
        return cls(bytes(SigningKey(seed).verify_key))

    @classmethod
    def new_unique(cls) -> Pubkey:
        return cls(bytes(SigningKey.generate().verify_key))

    def to_bytes(self) -> bytes:
        return self._raw

    def hex(self) -> str:
        return self._raw.hex()

    def __bytes__(self) -> bytes:
        return self._raw

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pubkey):
            return NotImplemented
        return self._raw == other._raw

    def __lt__(self, other: Pubkey) -> bool:
        if not isinstance(other, Pubkey):
            return NotImplemented
        return self._raw < other._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    def __str__(self) -> str:
        return self._raw.hex()

    def __repr__(self) -> str:
        return f"Pubkey({self._raw.hex()!r})"
