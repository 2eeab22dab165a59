from pathlib import Path

from rtstatus_core.errors import FieldError, io_error_kind
from rtstatus_core.fields import scan_fields
from rtstatus_core.protocol import DEFAULT_KEY, STATUS_SUFFIX, TEXT_ENCODING, TRAILER_BYTES
from .const import ERRORS


def _fail(errors: list) -> dict:
    return {"status": "FAIL", "error_count": len(errors), "errors": errors, "fields": 0}


def verify_file(path: Path, key: str = DEFAULT_KEY) -> dict:
    errors = []
    try:
        content = Path(path).read_bytes()
    except OSError as e:
        errors.append({"code": "E_READ", "message": ERRORS["E_READ"], "kind": io_error_kind(e), "path": str(path)})
        return _fail(errors)

    try:
        fields = scan_fields(content, key)
    except FieldError as e:
        errors.append({"code": e.code, "message": ERRORS[e.code], "detail": e.detail, "offset": e.offset})
        return _fail(errors)

    for f in fields:
        # A wrong length marker lands the cursor in the middle of the old value.
        if f.end < len(content) and content[f.end] not in TRAILER_BYTES:
            errors.append({
                "code": "E_TRAILER",
                "message": ERRORS["E_TRAILER"],
                "offset": f.start,
                "declared_length": f.length,
                "trailer": content[f.end:f.end + 1].hex(),
            })
            return _fail(errors)
        try:
            f.value.decode(TEXT_ENCODING)
        except UnicodeDecodeError as e:
            errors.append({"code": "E_VALUE_UTF8", "message": ERRORS["E_VALUE_UTF8"], "offset": f.start, "detail": str(e)})
            return _fail(errors)

    return {"status": "PASS", "error_count": 0, "errors": [], "fields": len(fields)}


def verify_directory(input_dir: Path, key: str = DEFAULT_KEY) -> dict:
    files = sorted(p for p in Path(input_dir).iterdir() if p.is_file() and p.name.endswith(STATUS_SUFFIX))
    return {str(p): verify_file(p, key) for p in files}
