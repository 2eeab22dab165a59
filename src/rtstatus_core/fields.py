"""Field Locator & Rewriter.

A status record is treated as opaque bytes with embedded fields of shape

    :<key><N>:<N bytes of value>

Only that shape is recognized. The value is delimited by the declared length
N, so payloads may contain colons (``C:\\torrents``). Nothing here performs
I/O or prints; failures are raised as ``FieldError`` subclasses.
"""
from __future__ import annotations

from dataclasses import dataclass

from .errors import FieldError, InvalidLength, MalformedField, NoSuchField
from .protocol import FIELD_MARK, LENGTH_SEP, TEXT_ENCODING

_DIGITS = frozenset(b"0123456789")


@dataclass(frozen=True)
class Field:
    key: bytes
    start: int  # offset of the leading colon
    value_start: int
    end: int  # one past the last value byte
    value: bytes

    @property
    def length(self) -> int:
        return self.end - self.value_start


@dataclass(frozen=True)
class RewriteResult:
    matched: bool
    content: bytes | None = None
    fields_rewritten: int = 0


def _as_bytes(text: str | bytes) -> bytes:
    if isinstance(text, bytes):
        return text
    return text.encode(TEXT_ENCODING)


def _serialize(key: bytes, length: int, value: bytes) -> bytes:
    return FIELD_MARK + key + str(length).encode("ascii") + LENGTH_SEP + value


def encode_field(key: str | bytes, value: str | bytes) -> bytes:
    """Serialize one field with a length marker matching its value."""
    v = _as_bytes(value)
    return _serialize(_as_bytes(key), len(v), v)


def scan_fields(content: bytes, key: str | bytes) -> list[Field]:
    """Return every field keyed by ``key``, left to right, non-overlapping.

    A ``:<key>`` hit not followed by digits and a colon is not a field and is
    skipped. So is a hit whose length has a leading zero or runs past the end
    of the record; such a hit may be text inside another value. The first of
    those problems is raised only when no well-formed field is found, and
    NoSuchField when nothing matched at all.
    """
    k = _as_bytes(key)
    if not k:
        raise ValueError("field key must not be empty")

    needle = FIELD_MARK + k
    size = len(content)
    fields: list[Field] = []
    first_error: FieldError | None = None

    pos = content.find(needle)
    while pos != -1:
        digits_start = pos + len(needle)
        digits_end = digits_start
        while digits_end < size and content[digits_end] in _DIGITS:
            digits_end += 1

        if digits_end == digits_start or content[digits_end:digits_end + 1] != LENGTH_SEP:
            pos = content.find(needle, pos + 1)
            continue

        digits = content[digits_start:digits_end]
        length = int(digits)
        value_start = digits_end + 1
        end = value_start + length

        error: FieldError | None = None
        if len(digits) > 1 and digits.startswith(b"0"):
            error = InvalidLength(f"length {digits.decode('ascii')!r} has a leading zero", offset=pos)
        elif end > size:
            error = MalformedField(f"declared {length} bytes, only {size - value_start} left", offset=pos)
        if error is not None:
            first_error = first_error or error
            pos = content.find(needle, pos + 1)
            continue

        fields.append(Field(k, pos, value_start, end, content[value_start:end]))
        pos = content.find(needle, end)

    if not fields:
        if first_error is not None:
            raise first_error
        raise NoSuchField(f"key {k.decode(TEXT_ENCODING, errors='replace')!r}")
    return fields


def rewrite(content: bytes, key: str, search: str, replace: str) -> RewriteResult:
    """Replace ``search`` with ``replace`` inside every field keyed by ``key``.

    Within one value only the first occurrence of ``search`` is replaced and
    the length marker is recomputed. Edits are spliced from the offsets of a
    single scan, so identical fields are rewritten independently.
    """
    find = _as_bytes(search)
    repl = _as_bytes(replace)
    if not find:
        raise ValueError("search string must not be empty")

    fields = scan_fields(content, key)
    delta = len(repl) - len(find)

    pieces: list[bytes] = []
    cursor = 0
    rewritten = 0
    for field in fields:
        if find not in field.value:
            continue

        new_length = field.length + delta
        if new_length < 0:
            raise InvalidLength(f"rewritten length would be {new_length}", offset=field.start)

        pieces.append(content[cursor:field.start])
        pieces.append(_serialize(field.key, new_length, field.value.replace(find, repl, 1)))
        cursor = field.end
        rewritten += 1

    if not rewritten:
        return RewriteResult(matched=False)

    pieces.append(content[cursor:])
    return RewriteResult(matched=True, content=b"".join(pieces), fields_rewritten=rewritten)
