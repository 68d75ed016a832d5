import json
from pathlib import Path
import click
from aqr_core.codec import decode_qr
from aqr_core.framing import is_v2, read_fields
from aqr_core.protocol import SIGNATURE_LEN
from .logic import verify_fixture

CANONICAL_JSON_KW = {"sort_keys": True, "separators": (",", ":"), "ensure_ascii": False}

@click.group()
def main():
    pass

@main.command("fixture")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--pubkey", type=click.Path(exists=True, dir_okay=False, path_type=Path), default=None,
              help="PEM public key or certificate of the signing key")
def fixture_cmd(path: Path, pubkey: Path | None):
    pem = pubkey.read_bytes() if pubkey is not None else None
    result = verify_fixture(path.read_text(encoding="ascii"), pem)
    click.echo(json.dumps(result, **CANONICAL_JSON_KW))
    if result["status"] != "PASS":
        raise SystemExit(1)

@main.command("fields")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def fields_cmd(path: Path):
    try:
        payload = decode_qr(path.read_text(encoding="ascii"))
    except ValueError as e:
        click.echo(f"FATAL: {e}")
        raise SystemExit(1)
    record = payload[:-SIGNATURE_LEN]
    fields = read_fields(record, v2=is_v2(record))
    click.echo(json.dumps(fields, **CANONICAL_JSON_KW))

if __name__ == "__main__":
    main()
