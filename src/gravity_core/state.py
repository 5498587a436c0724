"""Gravity contract state record and its fixed 138-byte codec.

Layout (little-endian, no padding), see gravity_core.protocol:

    [Init(1) | Initializer(32) | BFT(1) | Consul0(32) | Consul1(32) | Consul2(32) | LastRound(8)]

Decode rejects buffers of the wrong length and flag bytes other than 0/1.
Every other byte pattern is accepted as-is.
"""
from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Any, ClassVar, Protocol, runtime_checkable

from gravity_core.errors import InvalidInitFlag, SizeMismatch, UninitializedState
from gravity_core.protocol import (
    CONSUL_COUNT,
    CONTRACT_STATE_LEN,
    FLAG_INITIALIZED,
    FLAG_UNINITIALIZED,
    INIT_FLAG_OFFSET,
    MAX_BFT,
    MAX_ROUND,
    PUBKEY_LEN,
    STATE_FMT,
)
from gravity_core.pubkey import Pubkey


@runtime_checkable
class FixedSizeEncoding(Protocol):
    """Types whose encoded form always occupies LEN bytes."""

    LEN: ClassVar[int]


@runtime_checkable
class SupportsInitialized(Protocol):
    """Types that can report whether their stored record was initialized."""

    is_initialized: bool


def _default_consuls() -> tuple[Pubkey, Pubkey, Pubkey]:
    return (Pubkey.default(), Pubkey.default(), Pubkey.default())


@dataclass(frozen=True, order=True)
class ContractState:
    """On-chain state of a Gravity consensus contract.

    Ordering follows declared field order and exists only so that
    comparisons in tests are deterministic.
    """

    LEN: ClassVar[int] = CONTRACT_STATE_LEN

    is_initialized: bool = False
    initializer_pubkey: Pubkey = field(default_factory=Pubkey.default)
    bft: int = 0
    consuls: tuple[Pubkey, Pubkey, Pubkey] = field(default_factory=_default_consuls)
    last_round: int = 0

    def __post_init__(self) -> None:
        consuls = tuple(self.consuls)
        if len(consuls) != CONSUL_COUNT:
            raise ValueError(f"Expected exactly {CONSUL_COUNT} consuls, got {len(consuls)}")
        for i, consul in enumerate(consuls):
            if not isinstance(consul, Pubkey):
                raise ValueError(f"Consul {i} is not a Pubkey: {consul!r}")
        if not isinstance(self.initializer_pubkey, Pubkey):
            raise ValueError(f"initializer_pubkey is not a Pubkey: {self.initializer_pubkey!r}")
        if not isinstance(self.is_initialized, int) or self.is_initialized not in (0, 1):
            raise ValueError(f"is_initialized must be a bool, got {self.is_initialized!r}")
        if not isinstance(self.bft, int) or isinstance(self.bft, bool):
            raise ValueError(f"bft must be an int, got {self.bft!r}")
        if not 0 <= self.bft <= MAX_BFT:
            raise ValueError(f"bft {self.bft} does not fit in one byte")
        if not isinstance(self.last_round, int) or isinstance(self.last_round, bool):
            raise ValueError(f"last_round must be an int, got {self.last_round!r}")
        if not 0 <= self.last_round <= MAX_ROUND:
            raise ValueError(f"last_round {self.last_round} does not fit in 64 bits")
        object.__setattr__(self, "is_initialized", bool(self.is_initialized))
        object.__setattr__(self, "consuls", consuls)

    def __str__(self) -> str:
        return (
            f"is_initialized: {self.is_initialized}; "
            f"initializer_pubkey: {self.initializer_pubkey}; "
            f"bft: {self.bft}; last_round: {self.last_round}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_initialized": self.is_initialized,
            "initializer_pubkey": self.initializer_pubkey.hex(),
            "bft": self.bft,
            "consuls": [c.hex() for c in self.consuls],
            "last_round": self.last_round,
        }

    @classmethod
    def from_dict(cls, obj: dict[str, Any]) -> ContractState:
        return cls(
            is_initialized=obj["is_initialized"],
            initializer_pubkey=Pubkey.from_hex(obj["initializer_pubkey"]),
            bft=obj["bft"],
            consuls=tuple(Pubkey.from_hex(c) for c in obj["consuls"]),
            last_round=obj["last_round"],
        )

    # Host runtime pack vocabulary

    def pack_into(self, dst: bytearray | memoryview) -> None:
        encode_into(self, dst)

    def pack(self) -> bytes:
        return encode(self)

    @classmethod
    def unpack(cls, src: bytes | bytearray | memoryview) -> ContractState:
        return decode_initialized(src)

    @classmethod
    def unpack_unchecked(cls, src: bytes | bytearray | memoryview) -> ContractState:
        return decode(src)


def _byte_view(buf: bytes | bytearray | memoryview) -> memoryview:
    """View buf as unsigned bytes, rejecting any length but CONTRACT_STATE_LEN."""
    view = memoryview(buf).cast("B")
    if view.nbytes != CONTRACT_STATE_LEN:
        raise SizeMismatch(CONTRACT_STATE_LEN, view.nbytes)
    return view


def _read_flag(flag: int) -> bool:
    if flag == FLAG_INITIALIZED:
        return True
    if flag == FLAG_UNINITIALIZED:
        return False
    raise InvalidInitFlag(flag)


def encode_into(state: ContractState, dst: bytearray | memoryview) -> None:
    """Write state into a caller-owned buffer of exactly CONTRACT_STATE_LEN bytes."""
    view = _byte_view(dst)
    struct.pack_into(
        STATE_FMT,
        view,
        0,
        FLAG_INITIALIZED if state.is_initialized else FLAG_UNINITIALIZED,
        state.initializer_pubkey.to_bytes(),
        state.bft,
        b"".join(c.to_bytes() for c in state.consuls),
        state.last_round,
    )


def encode(state: ContractState) -> bytes:
    buf = bytearray(CONTRACT_STATE_LEN)
    encode_into(state, buf)
    return bytes(buf)


def decode(src: bytes | bytearray | memoryview) -> ContractState:
    """Read a ContractState from a stored buffer.

    Raises SizeMismatch when src is not CONTRACT_STATE_LEN bytes and
    InvalidInitFlag when the leading byte is not 0 or 1.
    """
    view = _byte_view(src)
    flag, initializer, bft, consuls, last_round = struct.unpack(STATE_FMT, view)

    return ContractState(
        is_initialized=_read_flag(flag),
        initializer_pubkey=Pubkey(initializer),
        bft=bft,
        consuls=tuple(
            Pubkey(consuls[i : i + PUBKEY_LEN]) for i in range(0, CONSUL_COUNT * PUBKEY_LEN, PUBKEY_LEN)
        ),
        last_round=last_round,
    )


def decode_initialized(src: bytes | bytearray | memoryview) -> ContractState:
    """Like decode, but an uninitialized record raises UninitializedState."""
    state = decode(src)
    if not state.is_initialized:
        raise UninitializedState()
    return state


def is_initialized(src: bytes | bytearray | memoryview) -> bool:
    """Report the stored init flag without decoding the rest of the record."""
    return _read_flag(_byte_view(src)[INIT_FLAG_OFFSET])
