"""Query a run report - list what a modify run did to each file."""
from __future__ import annotations

import sys
from pathlib import Path

import duckdb


def main() -> None:
    if len(sys.argv) < 2:
        print("Usage: python query_report.py <report.parquet> [status]")
        print("Example: python query_report.py run.parquet FAILED")
        sys.exit(1)

    report = Path(sys.argv[1])
    status = sys.argv[2] if len(sys.argv) > 2 else None

    con = duckdb.connect(":memory:")
    con.execute(f"CREATE VIEW outcomes AS SELECT * FROM '{report}'")

    print(f"--- Report: {report} ---")
    totals = con.execute(
        "SELECT status, count(*) AS files, sum(fields_rewritten) AS fields FROM outcomes GROUP BY status ORDER BY status"
    ).fetchdf()
    for _, row in totals.iterrows():
        print(f"{row['status']:<10} files={row['files']} fields={row['fields']}")
    print()

    sql = "SELECT file, status, fields_rewritten, error FROM outcomes"
    params: list = []
    if status:
        sql += " WHERE status = ?"
        params.append(status.upper())
    sql += " ORDER BY file"

    df = con.execute(sql, params).fetchdf()
    if df.empty:
        print("No files.")
        return
    for _, row in df.iterrows():
        print(f"{row['status']}: {row['file']}")
        if row["error"]:
            print(f"  Error: {row['error']}")


if __name__ == "__main__":
    main()
