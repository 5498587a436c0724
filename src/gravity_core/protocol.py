"""Gravity contract state layout constants.

Single source of truth for the on-chain record layout.
Keep this file stable. Stored accounts must remain decodable.
"""

PUBKEY_LEN = 32
CONSUL_COUNT = 3

# Record: [Init(1) | Initializer(32) | BFT(1) | Consuls(3 * 32) | LastRound(8)] = 138 bytes
STATE_FMT = "<B32sB96sQ"
CONTRACT_STATE_LEN = 138

# Field offsets
INIT_FLAG_OFFSET = 0
INITIALIZER_OFFSET = 1
BFT_OFFSET = 33
CONSULS_OFFSET = 34
LAST_ROUND_OFFSET = 130

# Flag byte values
FLAG_UNINITIALIZED = 0
FLAG_INITIALIZED = 1

MAX_BFT = 0xFF
MAX_ROUND = 0xFFFF_FFFF_FFFF_FFFF
