"""Fixture catalog written as parquet."""
from __future__ import annotations

import hashlib
from datetime import datetime, timezone
from pathlib import Path

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from aqr_core.codec import decode_qr
from aqr_core.framing import read_fields

from .assemble import Signer, split_signed_payload, synthesize_from_qr
from .mutations import Mutations

CATALOG_FILE = "fixtures.parquet"

CATALOG_SCHEMA = pa.schema(
    [
        ("scenario", pa.string()),
        ("dob", pa.string()),
        ("gender", pa.string()),
        ("pincode", pa.string()),
        ("state", pa.string()),
        ("photo_randomized", pa.bool_()),
        ("created", pa.string()),
        ("record_length", pa.int32()),
        ("record_hash", pa.string()),
        ("qr_data", pa.string()),
    ]
)


def build_catalog(
    qr_data: str,
    scenarios: dict[str, Mutations],
    signer: Signer,
    now: datetime | None = None,
) -> list[dict]:
    """Synthesize one fixture per scenario and describe it as a catalog row."""
    if now is None:
        now = datetime.now(timezone.utc)
    created = now.replace(microsecond=0).isoformat().replace("+00:00", "Z")

    rows: list[dict] = []
    for name, mutations in scenarios.items():
        fixture = synthesize_from_qr(qr_data, mutations, signer, now)
        record, _ = split_signed_payload(decode_qr(fixture))
        fields = read_fields(record)
        rows.append(
            {
                "scenario": name,
                "dob": fields["DOB"],
                "gender": fields["Gender"],
                "pincode": fields["PinCode"],
                "state": fields["State"],
                "photo_randomized": bool(mutations.photo),
                "created": created,
                "record_length": int(len(record)),
                "record_hash": hashlib.sha256(record).hexdigest(),
                "qr_data": fixture,
            }
        )
    return rows


def write_catalog(rows: list[dict], out_path: Path) -> Path:
    """Write catalog rows to OUT/fixtures.parquet, sorted by scenario."""
    out_path = Path(out_path)
    out_path.mkdir(parents=True, exist_ok=True)
    target = out_path / CATALOG_FILE

    df = pd.DataFrame(rows, columns=CATALOG_SCHEMA.names)
    if not df.empty:
        df = df.sort_values("scenario")
    table = pa.Table.from_pandas(df, schema=CATALOG_SCHEMA, preserve_index=False)
    pq.write_table(table, target)
    return target
