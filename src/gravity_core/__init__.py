"""Gravity Core - contract state record and codec."""
from .errors import DecodeError, InvalidInitFlag, SizeMismatch, UninitializedState
from .protocol import CONTRACT_STATE_LEN
from .pubkey import Pubkey
from .state import (
    ContractState,
    FixedSizeEncoding,
    SupportsInitialized,
    decode,
    decode_initialized,
    encode,
    encode_into,
    is_initialized,
)

__all__ = [
    "CONTRACT_STATE_LEN",
    "ContractState",
    "DecodeError",
    "FixedSizeEncoding",
    "InvalidInitFlag",
    "Pubkey",
    "SizeMismatch",
    "SupportsInitialized",
    "UninitializedState",
    "decode",
    "decode_initialized",
    "encode",
    "encode_into",
    "is_initialized",
]
