"""Aadhaar QR metadata field table."""
from __future__ import annotations

from enum import IntEnum


class IdField(IntEnum):
    """Ordinal position of each metadata field in a legacy record.

    In a V2 record every field sits one slot later, behind the "V2" marker.
    """

    EMAIL_MOBILE_PRESENT_BIT_INDICATOR_VALUE = 0
    REFERENCE_ID = 1
    NAME = 2
    DOB = 3
    GENDER = 4
    CARE_OF = 5
    DISTRICT = 6
    LANDMARK = 7
    HOUSE = 8
    LOCATION = 9
    PIN_CODE = 10
    POST_OFFICE = 11
    STATE = 12
    STREET = 13
    SUB_DISTRICT = 14
    VTC = 15
    PHONE_NUMBER_LAST_4 = 16


# Checked once at import: ordinals must be dense and start at zero.
if [f.value for f in IdField] != list(range(len(IdField))):
    raise RuntimeError("IdField ordinals must be contiguous from 0")

FIELD_NAMES = {
    IdField.EMAIL_MOBILE_PRESENT_BIT_INDICATOR_VALUE: "Email_mobile_present_bit_indicator_value",
    IdField.REFERENCE_ID: "ReferenceId",
    IdField.NAME: "Name",
    IdField.DOB: "DOB",
    IdField.GENDER: "Gender",
    IdField.CARE_OF: "CareOf",
    IdField.DISTRICT: "District",
    IdField.LANDMARK: "Landmark",
    IdField.HOUSE: "House",
    IdField.LOCATION: "Location",
    IdField.PIN_CODE: "PinCode",
    IdField.POST_OFFICE: "PostOffice",
    IdField.STATE: "State",
    IdField.STREET: "Street",
    IdField.SUB_DISTRICT: "SubDistrict",
    IdField.VTC: "VTC",
    IdField.PHONE_NUMBER_LAST_4: "PhoneNumberLast4",
}

if set(FIELD_NAMES) != set(IdField):
    raise RuntimeError("Every IdField needs a display name")


def field_slot(field: IdField, v2: bool = True) -> int:
    """Return the position of `field` in the split field list of a record."""
    return int(field) + 1 if v2 else int(field)
