import json
import random
from pathlib import Path

from gravity_core import ContractState, Pubkey, encode
from gravity_inspect.const import HEX_SUFFIX
from gravity_inspect.logic import write_dump

# --- CONFIGURATION ---
DEFAULT_ACCOUNTS = 3
DEFAULT_BFT = 2


def generate_account(output_dir, index, initialized=True, as_hex=False):
    """Write one mock Gravity contract account dump plus its JSON form."""
    state = ContractState(
        is_initialized=initialized,
        initializer_pubkey=Pubkey.new_unique(),
        bft=DEFAULT_BFT,
        consuls=(Pubkey.new_unique(), Pubkey.new_unique(), Pubkey.new_unique()),
        last_round=random.randrange(0, 2**64),
    )

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    dump = out / f"account-{index:03d}{HEX_SUFFIX if as_hex else '.bin'}"
    write_dump(dump, encode(state), as_hex=as_hex)

    (out / f"account-{index:03d}.json").write_text(
        json.dumps(state.to_dict(), indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
    )

    print(f"GENERATED: {dump}")
    return dump


if __name__ == "__main__":
    import sys

    # Usage:
    #   python tools/mock_accounts.py OUT_DIR [--count N] [--hex] [--uninitialized]

    args = [a for a in sys.argv[1:] if a]

    def pop_flag(arg_list: list[str], flag: str) -> tuple[bool, list[str]]:
        """Remove a boolean flag from an argv-style list."""
        if flag in arg_list:
            return True, [a for a in arg_list if a != flag]
        return False, arg_list

    as_hex, args = pop_flag(args, "--hex")
    uninitialized, args = pop_flag(args, "--uninitialized")

    count = DEFAULT_ACCOUNTS
    if "--count" in args:
        i = args.index("--count")
        if i + 1 >= len(args):
            raise SystemExit("--count requires a value")
        count = int(args[i + 1])
        args = args[:i] + args[i + 2:]

    out = args[0] if len(args) > 0 else "mock_accounts"

    for n in range(count):
        generate_account(out, n, initialized=not uninitialized, as_hex=as_hex)
