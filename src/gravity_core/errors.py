"""Decode failures for stored contract state."""
from __future__ import annotations


class DecodeError(ValueError):
    """Base class for buffers that cannot be read as contract state."""

    code = "E_DECODE"


class SizeMismatch(DecodeError):
    code = "E_SIZE_MISMATCH"

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Buffer length {actual} != expected {expected}")


class InvalidInitFlag(DecodeError):
    code = "E_INIT_FLAG"

    def __init__(self, flag: int):
        self.flag = flag
        super().__init__(f"Invalid is_initialized byte 0x{flag:02x} (expected 0 or 1)")


class UninitializedState(DecodeError):
    code = "E_UNINITIALIZED"

    def __init__(self) -> None:
        super().__init__("Contract state is not initialized")
