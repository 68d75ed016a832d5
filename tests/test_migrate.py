import pytest

from aqr_core.errors import FieldNotFoundError
from aqr_core.fields import IdField
from aqr_core.framing import is_v2, read_field, read_fields
from aqr_core.protocol import V2_MARKER
from aqr_synth.migrate import upgrade_to_v2

from conftest import PHOTO


def test_upgrade_adds_eight_bytes(legacy_record):
    assert len(upgrade_to_v2(legacy_record)) == len(legacy_record) + 8


def test_upgrade_layout(legacy_record):
    out = upgrade_to_v2(legacy_record)
    assert out[:3] == b"V2\xff"
    assert is_v2(out)
    assert not is_v2(legacy_record)
    assert read_field(out, IdField.VTC) == "Bengaluru"
    assert read_field(out, IdField.PHONE_NUMBER_LAST_4) == "1234"
    assert out.endswith(b"1234\xff" + PHOTO)


def test_upgrade_preserves_legacy_fields(legacy_record):
    before = read_fields(legacy_record, v2=False)
    after = read_fields(upgrade_to_v2(legacy_record))
    assert {k: v for k, v in after.items() if k != "PhoneNumberLast4"} == before


def test_upgrade_output_starts_with_marker_even_for_empty_header():
    record = b"\xff" * 16 + b"photo"
    out = upgrade_to_v2(record)
    assert out == V2_MARKER + b"\xff" * 16 + b"1234\xff" + b"photo"


def test_upgrade_short_record():
    with pytest.raises(FieldNotFoundError):
        upgrade_to_v2(b"3\xffref\xffname\xff")
