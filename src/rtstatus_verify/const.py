from rtstatus_core.errors import ERRORS as FIELD_ERRORS

ERRORS = {
  **FIELD_ERRORS,
  "E_READ": "Status file could not be read",
  "E_TRAILER": "Byte after field value is not a valid continuation (wrong length marker)",
  "E_VALUE_UTF8": "Field value is not valid UTF-8",
}
