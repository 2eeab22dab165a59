"""Per-run parquet report of file outcomes."""
from __future__ import annotations

from pathlib import Path

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from rtstatus_modify.batch import FileOutcome

REPORT_SCHEMA = pa.schema(
    [
        ("file", pa.string()),
        ("source", pa.string()),
        ("status", pa.string()),
        ("matched", pa.bool_()),
        ("fields_rewritten", pa.int32()),
        ("error_code", pa.string()),
        ("error", pa.string()),
        ("content_hash_before", pa.string()),
        ("content_hash_after", pa.string()),
    ]
)


def outcomes_frame(outcomes: list[FileOutcome]) -> pd.DataFrame:
    rows = [
        {
            "file": str(o.path),
            "source": str(o.source) if o.source is not None else None,
            "status": o.status,
            "matched": bool(o.matched),
            "fields_rewritten": int(o.fields_rewritten),
            "error_code": o.error_code,
            "error": o.error,
            "content_hash_before": o.content_hash_before,
            "content_hash_after": o.content_hash_after,
        }
        for o in outcomes
    ]
    return pd.DataFrame(rows, columns=REPORT_SCHEMA.names)


def write_report(outcomes: list[FileOutcome], out_file: Path) -> bool:
    """Write outcomes to out_file. Returns False (and writes nothing) when empty."""
    df = outcomes_frame(outcomes)
    if df.empty:
        return False

    out_file = Path(out_file)
    out_file.parent.mkdir(parents=True, exist_ok=True)
    table = pa.Table.from_pandas(df, schema=REPORT_SCHEMA, preserve_index=False)
    pq.write_table(table, out_file)
    return True
