from __future__ import annotations

from pathlib import Path
from warnings import warn

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from gravity_core import DecodeError, decode

from .logic import read_dump

STATES_SCHEMA = pa.schema(
    [
        ("account", pa.string()),
        ("is_initialized", pa.bool_()),
        ("initializer_pubkey", pa.string()),
        ("bft", pa.uint8()),
        ("consul_0", pa.string()),
        ("consul_1", pa.string()),
        ("consul_2", pa.string()),
        ("last_round", pa.uint64()),
    ]
)


def export_states(paths: list[Path], out_path: Path) -> int:
    """Decode every account dump and write one parquet row per account.

    Returns the number of rows written. Any undecodable dump aborts the
    export before the output file is touched.
    """
    rows: list[dict] = []

    for p in paths:
        p = Path(p)
        try:
            state = decode(read_dump(p))
        except DecodeError as e:
            raise ValueError(f"FATAL {p.name}: {e.code} {e}") from e

        c0, c1, c2 = state.consuls
        rows.append(
            {
                "account": p.stem,
                "is_initialized": state.is_initialized,
                "initializer_pubkey": state.initializer_pubkey.hex(),
                "bft": state.bft,
                "consul_0": c0.hex(),
                "consul_1": c1.hex(),
                "consul_2": c2.hex(),
                "last_round": state.last_round,
            }
        )

    if not rows:
        warn("No account dumps given; nothing exported")
        return 0

    df = pd.DataFrame(rows).sort_values("account")
    table = pa.Table.from_pandas(df, schema=STATES_SCHEMA, preserve_index=False)

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    pq.write_table(table, out_path)
    return len(rows)
