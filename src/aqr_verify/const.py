ERRORS = {
  "E_QR_DECODE": "QR data is not a decodable compressed integer",
  "E_PAYLOAD_SHORT": "Payload too short to carry a signature",
  "E_V2_MARKER": "Record does not start with the V2 marker field",
  "E_LAYOUT_FIELDS": "Record has fewer metadata fields than the V2 layout",
  "E_SIG_INVALID": "Record signature invalid",
}
