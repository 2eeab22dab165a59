"""rtstatus core - length-prefixed field locate and rewrite."""
from .errors import ERRORS, FieldError, InvalidLength, MalformedField, NoSuchField, io_error_kind
from .fields import Field, RewriteResult, encode_field, rewrite, scan_fields

__all__ = [
    "ERRORS",
    "FieldError",
    "InvalidLength",
    "MalformedField",
    "NoSuchField",
    "io_error_kind",
    "Field",
    "RewriteResult",
    "encode_field",
    "rewrite",
    "scan_fields",
]
