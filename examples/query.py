"""Query exported contract states - find accounts behind a given round."""
from __future__ import annotations

import sys
from pathlib import Path

import duckdb


def main() -> None:
    if len(sys.argv) < 3:
        print("Usage: python query.py <states.parquet> <min_round>")
        print("Example: python query.py states.parquet 1000")
        sys.exit(1)

    states = Path(sys.argv[1])
    min_round = int(sys.argv[2])

    con = duckdb.connect(":memory:")
    con.execute(f"CREATE VIEW states AS SELECT * FROM '{states}'")

    # Initialized contracts whose last relayed round lags behind min_round
    sql = """
    SELECT
        account,
        bft,
        last_round,
        initializer_pubkey
    FROM states
    WHERE is_initialized
      AND last_round < ?
    ORDER BY last_round
    """

    print(f"--- Contracts behind round {min_round} ---\n")

    df = con.execute(sql, [min_round]).fetchdf()
    if df.empty:
        print("All initialized contracts are up to date.")
    else:
        for _, row in df.iterrows():
            print(f"ACCOUNT: {row['account']}")
            print(f"  BFT: {row['bft']}")
            print(f"  Last round: {row['last_round']}")
            print(f"  Initializer: {row['initializer_pubkey'][:16]}...")
            print()


if __name__ == "__main__":
    main()
