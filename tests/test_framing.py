import pytest

from aqr_core.errors import FieldNotFoundError
from aqr_core.fields import FIELD_NAMES, IdField, field_slot
from aqr_core.framing import EMPTY_RANGE, end_of_frame, find_field_range, read_field, read_fields, split_fields
from aqr_core.protocol import LEGACY_FRAME_SENTINELS, LEGACY_PHOTO_SENTINELS, METADATA_FIELDS, V2_PHOTO_SENTINELS

from conftest import LEGACY_VALUES, PHOTO


def test_field_table_layout():
    assert METADATA_FIELDS == 17
    assert LEGACY_FRAME_SENTINELS == 16
    assert V2_PHOTO_SENTINELS == 18
    assert LEGACY_PHOTO_SENTINELS == V2_PHOTO_SENTINELS - 2
    assert list(FIELD_NAMES.values())[IdField.PIN_CODE] == "PinCode"
    assert field_slot(IdField.DOB, v2=False) == 3
    assert field_slot(IdField.DOB) == 4


def test_split_stops_after_max_fields():
    fields, delimiters = split_fields(b"a\xffbc\xff\xffd\xff", 3)
    assert fields == [b"a", b"bc", b""]
    assert delimiters == [1, 4, 5]

    fields, delimiters = split_fields(b"a\xffbc\xff\xffd\xff", 2)
    assert fields == [b"a", b"bc"]


def test_split_excludes_photo(legacy_record):
    fields, delimiters = split_fields(legacy_record, LEGACY_FRAME_SENTINELS)
    assert [f.decode() for f in fields] == LEGACY_VALUES
    assert legacy_record[delimiters[-1] + 1:] == PHOTO


def test_find_field_range_matches_split(legacy_record):
    fields, delimiters = split_fields(legacy_record, LEGACY_FRAME_SENTINELS)
    for k in range(LEGACY_FRAME_SENTINELS - 1):
        start, end = find_field_range(legacy_record, k)
        assert (start, end) == (delimiters[k], delimiters[k + 1])
        assert legacy_record[start + 1:end] == fields[k + 1]


def test_find_field_range_missing():
    record = b"a\xffb\xffc"
    assert find_field_range(record, 0) == (1, 3)
    assert find_field_range(record, 1) == EMPTY_RANGE
    assert find_field_range(record, 7) == EMPTY_RANGE
    assert find_field_range(record, -1) == EMPTY_RANGE


def test_end_of_frame(legacy_record):
    _, delimiters = split_fields(legacy_record, LEGACY_FRAME_SENTINELS)
    assert end_of_frame(legacy_record, LEGACY_FRAME_SENTINELS) == delimiters[-1] + 1
    assert end_of_frame(legacy_record, 1) == 2
    assert end_of_frame(legacy_record, 0) == 0


def test_end_of_frame_short_record():
    with pytest.raises(FieldNotFoundError):
        end_of_frame(b"a\xffb\xff", 3)


def test_read_legacy_fields(legacy_record):
    assert read_field(legacy_record, IdField.NAME, v2=False) == "Sample Person"
    assert read_field(legacy_record, IdField.EMAIL_MOBILE_PRESENT_BIT_INDICATOR_VALUE, v2=False) == "3"

    fields = read_fields(legacy_record, v2=False)
    assert fields["State"] == "Karnataka"
    assert fields["Landmark"] == ""
    assert "PhoneNumberLast4" not in fields
    assert list(fields) == list(FIELD_NAMES.values())[:-1]


def test_read_missing_field():
    with pytest.raises(FieldNotFoundError):
        read_field(b"3\xffref\xff", IdField.STATE, v2=False)
