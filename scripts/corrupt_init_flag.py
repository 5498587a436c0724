import sys
from pathlib import Path

from gravity_core.protocol import CONTRACT_STATE_LEN, INIT_FLAG_OFFSET


def main():
    if len(sys.argv) != 2:
        print("Usage: corrupt_init_flag.py <account.bin>")
        raise SystemExit(2)

    p = Path(sys.argv[1])
    b = bytearray(p.read_bytes())
    if len(b) != CONTRACT_STATE_LEN:
        print(f"Expected a {CONTRACT_STATE_LEN}-byte account dump, got {len(b)} bytes.")
        raise SystemExit(2)

    # Any value other than 0/1 in the flag byte must be rejected on decode.
    b[INIT_FLAG_OFFSET] = 0x02
    p.write_bytes(bytes(b))
    print(f"Corrupted init flag at offset {INIT_FLAG_OFFSET} in {p}")

if __name__ == "__main__":
    main()
