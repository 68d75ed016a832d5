import sys
from pathlib import Path

from aqr_core.codec import decode_qr, encode_qr
from aqr_core.protocol import V2_TIMESTAMP_OFFSET

def main():
    if len(sys.argv) != 2:
        print("Usage: corrupt_fixture.py <fixture file>")
        raise SystemExit(2)

    p = Path(sys.argv[1])
    b = bytearray(decode_qr(p.read_text(encoding="ascii")))
    if len(b) < 512:
        print("Fixture too small to corrupt safely.")
        raise SystemExit(2)

    # Flip the last timestamp digit inside the signed record.
    # V2 marker is 3 bytes, the 17-digit timestamp starts 6 bytes after it.
    idx = V2_TIMESTAMP_OFFSET + 16
    b[idx] ^= 0x01
    p.write_text(encode_qr(bytes(b)) + "\n", encoding="ascii")
    print(f"Corrupted 1 byte at offset {idx} in {p}")

if __name__ == "__main__":
    main()
