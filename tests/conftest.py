import pytest

from gravity_core import ContractState, Pubkey

CONSUL_A = bytes(range(1, 33))
CONSUL_B = bytes([0xBB]) * 32
CONSUL_C = bytes(range(0xE0, 0x100))

# First 138 bytes of an account captured from a deployed Gravity contract.
RAW_ACCOUNT_HEX = (
    "01"
    "130552cdea768b3a63553a978383d007e6e1c4be5c3544cd2a657c31720aef51"
    "a2"
    "a5e31a12722fdbe3e7ac8877467fa0389487c5a4725795506ff8dbcd85910301"
    "000103bfb92919a3a0f16abc73951e82c05592732e5514ffa5cdae5f77a96d04"
    "922c853b243370dff1af837da92b91fc34b6b25bc35c011fdc1061512a3a01ea"
    "324b06be8f3dc36d"
)


@pytest.fixture
def golden_state() -> ContractState:
    return ContractState(
        is_initialized=True,
        initializer_pubkey=Pubkey.default(),
        bft=2,
        consuls=(Pubkey(CONSUL_A), Pubkey(CONSUL_B), Pubkey(CONSUL_C)),
        last_round=42,
    )


@pytest.fixture
def unique_state() -> ContractState:
    return ContractState(
        is_initialized=True,
        initializer_pubkey=Pubkey.new_unique(),
        bft=1,
        consuls=(Pubkey.new_unique(), Pubkey.new_unique(), Pubkey.new_unique()),
        last_round=7,
    )
