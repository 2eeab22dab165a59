from __future__ import annotations

import hashlib
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from rtstatus_core.errors import FieldError, io_error_kind
from rtstatus_core.fields import rewrite
from rtstatus_core.protocol import CANDIDATE_SUFFIXES, DEFAULT_KEY, STATUS_SUFFIX
from rtstatus_modify.reporting import NullReporter

IO_ERROR_CODE = "E_IO"


class BatchError(RuntimeError):
    """First failure of a fail-fast run, tagged with the offending file."""

    def __init__(self, path: Path, code: str, kind: str, detail: str):
        self.path = Path(path)
        self.code = code
        self.kind = kind
        self.detail = detail
        super().__init__(f"{path}: {kind}: {detail}")


@dataclass
class FileOutcome:
    path: Path
    status: str  # MODIFIED | UNCHANGED | STAGED | FAILED
    source: Path | None = None
    matched: bool = False
    fields_rewritten: int = 0
    error_code: str | None = None
    error: str | None = None
    content_hash_before: str | None = None
    content_hash_after: str | None = None


@dataclass
class BatchSummary:
    outcomes: list[FileOutcome] = field(default_factory=list)

    @property
    def any_matched(self) -> bool:
        return any(o.matched for o in self.outcomes)

    @property
    def modified(self) -> list[FileOutcome]:
        return [o for o in self.outcomes if o.status == "MODIFIED"]

    @property
    def failed(self) -> list[FileOutcome]:
        return [o for o in self.outcomes if o.status == "FAILED"]


def _sha256(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def _classify(exc: Exception) -> tuple[str, str]:
    if isinstance(exc, FieldError):
        return exc.code, type(exc).__name__
    return IO_ERROR_CODE, io_error_kind(exc)


# --- File source ---

def read_all(path: Path) -> bytes:
    return Path(path).read_bytes()


def write_all_truncating(path: Path, data: bytes) -> None:
    """Overwrite an existing file in place and cut it to len(data)."""
    with open(path, "r+b") as f:
        f.seek(0)
        f.write(data)
        f.truncate()


# --- Directory walker ---

def is_status_file(path: Path) -> bool:
    return Path(path).name.endswith(STATUS_SUFFIX)


def list_candidates(input_dir: Path, suffixes: tuple[str, ...] = CANDIDATE_SUFFIXES) -> list[Path]:
    """Regular files directly under input_dir whose name ends with a suffix."""
    return sorted(
        p for p in Path(input_dir).iterdir()
        if p.is_file() and p.name.endswith(tuple(suffixes))
    )


def stage_files(paths: list[Path], output_dir: Path, reporter=None) -> list[Path]:
    """Copy candidates into output_dir. Originals are left alone."""
    reporter = reporter or NullReporter()
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    staged: list[Path] = []
    for src in paths:
        dst = output_dir / src.name
        shutil.copy2(src, dst)
        reporter.info(f"Copied file: {dst}")
        staged.append(dst)
    return staged


# --- Orchestration ---

def modify_file(path: Path, key: str, search: str, replace: str, source: Path | None = None) -> FileOutcome:
    """Read, rewrite and persist one status file.

    Field and I/O errors propagate; the caller decides the batch policy.
    """
    path = Path(path)
    content = read_all(path)
    before = _sha256(content)

    result = rewrite(content, key, search, replace)
    if not result.matched:
        return FileOutcome(
            path=path,
            status="UNCHANGED",
            source=source,
            content_hash_before=before,
            content_hash_after=before,
        )

    write_all_truncating(path, result.content)
    return FileOutcome(
        path=path,
        status="MODIFIED",
        source=source,
        matched=True,
        fields_rewritten=result.fields_rewritten,
        content_hash_before=before,
        content_hash_after=_sha256(result.content),
    )


def modify_directory(
    input_dir: Path,
    search: str,
    replace: str,
    key: str = DEFAULT_KEY,
    output_dir: Path | None = None,
    fail_fast: bool = True,
    reporter=None,
) -> BatchSummary:
    """Rewrite every status file of input_dir (or of its staged copies).

    With fail_fast the first failing file aborts the run with BatchError.
    Otherwise the failure is recorded and the walk goes on.
    """
    reporter = reporter or NullReporter()
    candidates = list_candidates(input_dir)

    if output_dir is not None:
        staged = stage_files(candidates, output_dir, reporter)
        work = list(zip(staged, candidates))
    else:
        work = [(p, None) for p in candidates]

    summary = BatchSummary()
    for path, source in work:
        if not is_status_file(path):
            if source is not None:
                summary.outcomes.append(FileOutcome(path=path, status="STAGED", source=source))
            continue

        reporter.info(f"Processing file: {path}")
        try:
            outcome = modify_file(path, key, search, replace, source=source)
        except (FieldError, OSError) as e:
            code, kind = _classify(e)
            if fail_fast:
                raise BatchError(path, code, kind, str(e)) from e
            reporter.error(f"{path}: {kind}: {e}")
            summary.outcomes.append(
                FileOutcome(path=path, status="FAILED", source=source, error_code=code, error=f"{kind}: {e}")
            )
            continue

        if outcome.matched:
            reporter.info(f"Rewrote {outcome.fields_rewritten} field(s) in {path}")
        summary.outcomes.append(outcome)

    if not summary.any_matched:
        reporter.warning("No matching found.")
    return summary
