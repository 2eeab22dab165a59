from __future__ import annotations

ERRORS = {
    "E_NO_SUCH_FIELD": "No length-prefixed field with this key",
    "E_INVALID_LENGTH": "Field length is not a valid non-negative integer",
    "E_MALFORMED_FIELD": "Field value runs past the end of the record",
}


class FieldError(ValueError):
    """Base class for record-level failures. Fatal for the file at hand."""

    code = ""

    def __init__(self, detail: str, offset: int | None = None):
        self.detail = detail
        self.offset = offset
        where = f" at offset {offset}" if offset is not None else ""
        super().__init__(f"{ERRORS[self.code]}{where}: {detail}")


class NoSuchField(FieldError):
    code = "E_NO_SUCH_FIELD"


class InvalidLength(FieldError):
    code = "E_INVALID_LENGTH"


class MalformedField(FieldError):
    code = "E_MALFORMED_FIELD"


def io_error_kind(exc: OSError) -> str:
    """Collapse an OSError into NotFound, PermissionDenied or Other."""
    if isinstance(exc, FileNotFoundError):
        return "NotFound"
    if isinstance(exc, PermissionError):
        return "PermissionDenied"
    return "Other"
