"""AQR Synth - Aadhaar QR V2 test fixture generator."""
from __future__ import annotations

from pathlib import Path

import click

from aqr_synth.assemble import synthesize_from_qr
from aqr_synth.catalog import build_catalog, write_catalog
from aqr_synth.mutations import Mutations
from aqr_synth.sample import PRESETS, SAMPLE_QR_DATA
from aqr_synth.signer import RsaSigner

key_option = click.option(
    "--key",
    "key_path",
    envvar="AQR_SIGNING_KEY",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="PEM RSA-2048 private key used to re-sign fixtures",
)
data_option = click.option(
    "--data",
    "data_file",
    type=click.File("r"),
    default=None,
    help="File holding a signed legacy QR string (defaults to the UIDAI sample)",
)


def _read_seed(data_file) -> str:
    return data_file.read().strip() if data_file is not None else SAMPLE_QR_DATA


@click.group()
def main():
    pass


@main.command("generate")
@key_option
@data_option
@click.option("--dob", default=None, help="Date of birth, DD-MM-YYYY")
@click.option("--gender", default=None, help="Single-letter gender")
@click.option("--pincode", default=None)
@click.option("--state", default=None)
@click.option("--photo", is_flag=True, help="Replace the photo with random bytes")
@click.option("--out", type=click.Path(dir_okay=False, path_type=Path), default=None)
def generate_cmd(key_path: Path, data_file, dob, gender, pincode, state, photo: bool, out: Path | None):
    """Re-issue a QR payload as a signed V2 fixture."""
    try:
        signer = RsaSigner.from_pem_file(key_path)
        mutations = Mutations(dob=dob, gender=gender, pincode=pincode, state=state, photo=photo)
        fixture = synthesize_from_qr(_read_seed(data_file), mutations, signer)
    except Exception as e:
        # Fail closed with a single-line reason.
        click.echo(f"FATAL: {e}")
        raise SystemExit(1)

    if out is None:
        click.echo(fixture)
    else:
        out.write_text(fixture + "\n", encoding="ascii")
        click.echo(f"PASS: Fixture written to {out}")


@main.command("batch")
@key_option
@data_option
@click.argument("out", type=click.Path(file_okay=False, path_type=Path))
def batch_cmd(key_path: Path, data_file, out: Path):
    """Generate every preset scenario into OUT/fixtures.parquet."""
    try:
        signer = RsaSigner.from_pem_file(key_path)
        rows = build_catalog(_read_seed(data_file), PRESETS, signer)
        target = write_catalog(rows, out)
    except Exception as e:
        click.echo(f"FATAL: {e}")
        raise SystemExit(1)

    click.echo(f"PASS: Catalog generated at {target}")
    for row in rows:
        click.echo(f"  {row['scenario']}: {row['record_length']} bytes, sha256 {row['record_hash'][:16]}")


if __name__ == "__main__":
    main()
