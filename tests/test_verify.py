from pathlib import Path

from rtstatus_modify.batch import modify_directory
from rtstatus_verify.logic import verify_directory, verify_file

GOOD = b"d6:customi0e9:directory13:/old/data/foo5:statei1ee"


def write(tmp_path: Path, name: str, data: bytes) -> Path:
    p = tmp_path / name
    p.write_bytes(data)
    return p


def test_good_file_passes(tmp_path):
    result = verify_file(write(tmp_path, "a.torrent.rtorrent", GOOD))
    assert result == {"status": "PASS", "error_count": 0, "errors": [], "fields": 1}


def test_wrong_length_marker_is_caught(tmp_path):
    # A naive text replace of /old with /mnt/new that forgot the length.
    p = write(tmp_path, "a.torrent.rtorrent", b"d6:customi0e9:directory13:/mnt/new/data/foo5:statei1ee")
    result = verify_file(p)
    assert result["status"] == "FAIL"
    assert result["errors"][0]["code"] == "E_TRAILER"
    assert result["errors"][0]["declared_length"] == 13


def test_missing_field(tmp_path):
    result = verify_file(write(tmp_path, "a.torrent.rtorrent", b"d5:statei1ee"))
    assert result["errors"][0]["code"] == "E_NO_SUCH_FIELD"


def test_truncated_field(tmp_path):
    result = verify_file(write(tmp_path, "a.torrent.rtorrent", b"d9:directory40:/old"))
    assert result["errors"][0]["code"] == "E_MALFORMED_FIELD"
    assert result["errors"][0]["offset"] == 2


def test_non_utf8_value(tmp_path):
    result = verify_file(write(tmp_path, "a.torrent.rtorrent", b"d9:directory3:\xff\xfe\xfde"))
    assert result["errors"][0]["code"] == "E_VALUE_UTF8"


def test_unreadable_file(tmp_path):
    result = verify_file(tmp_path / "missing.torrent.rtorrent")
    assert result["status"] == "FAIL"
    assert result["errors"][0]["code"] == "E_READ"
    assert result["errors"][0]["kind"] == "NotFound"


def test_modified_directory_verifies(tmp_path):
    write(tmp_path, "a.torrent.rtorrent", GOOD)
    write(tmp_path, "b.torrent.rtorrent", GOOD.replace(b"/old/data/foo", b"/old/data/bar"))
    write(tmp_path, "a.torrent", b"d4:infodee")

    modify_directory(tmp_path, "/old/data", "/var/lib/rtorrent/downloads/very/deep")

    results = verify_directory(tmp_path)
    assert sorted(Path(p).name for p in results) == ["a.torrent.rtorrent", "b.torrent.rtorrent"]
    assert all(r["status"] == "PASS" for r in results.values())
