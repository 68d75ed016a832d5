"""Query a fixture catalog - list fixtures synthesized for a state."""
from __future__ import annotations

import sys
from pathlib import Path

import duckdb


def main() -> None:
    if len(sys.argv) < 3:
        print("Usage: python query.py <catalog_dir> <state>")
        print("Example: python query.py fixtures/ Delhi")
        sys.exit(1)

    catalog = Path(sys.argv[1])
    state = sys.argv[2]

    con = duckdb.connect(":memory:")
    con.execute(f"CREATE VIEW fixtures AS SELECT * FROM '{catalog}/fixtures.parquet'")

    sql = """
    SELECT
        scenario,
        dob,
        gender,
        pincode,
        photo_randomized,
        record_length,
        qr_data
    FROM fixtures
    WHERE state = ?
    ORDER BY scenario
    """

    print(f"--- Fixtures for state: {state} ---\n")

    df = con.execute(sql, [state]).fetchdf()
    if df.empty:
        print("No fixtures found.")
    else:
        for _, row in df.iterrows():
            print(f"SCENARIO: {row['scenario']}")
            print(f"  DOB: {row['dob']}  Gender: {row['gender']}  PIN: {row['pincode']}")
            print(f"  Photo randomized: {row['photo_randomized']}  Record: {row['record_length']} bytes")
            print(f"  QR: {row['qr_data'][:60]}...")
            print()


if __name__ == "__main__":
    main()
