"""Generate a fake rtorrent session directory for demos and manual testing.

    python tools/make_sample_session.py OUT_DIR [--count N] [--base /downloads/old]
"""
import hashlib
import random
import sys
import time
from pathlib import Path

import bencode


def make_torrent(out_dir: Path, base: str, idx: int) -> str:
    name = f"sample-{idx:03d}"
    info = {
        "name": name,
        "piece length": 262144,
        "length": random.randint(1, 50) * 262144,
        "pieces": hashlib.sha1(name.encode()).digest(),
    }
    info_hash = hashlib.sha1(bencode.encode(info)).hexdigest().upper()

    metainfo = {"announce": "http://tracker.invalid/announce", "info": info}
    status = {
        "chunks_done": 0,
        "chunks_wanted": 0,
        "complete": 1,
        "custom1": "",
        "directory": f"{base}/{name}",
        "hashing": 0,
        "state": 1,
        "state_changed": int(time.time()),
        "timestamp.finished": 0,
        "timestamp.started": int(time.time()),
        "total_uploaded": random.randint(0, 10**9),
        "views": [],
    }
    resume = {"bitfield": len(info["pieces"]) // 20, "files": [{"mtime": int(time.time()), "priority": 1}]}

    stem = out_dir / f"{info_hash}.torrent"
    stem.write_bytes(bencode.encode(metainfo))
    Path(f"{stem}.rtorrent").write_bytes(bencode.encode(status))
    Path(f"{stem}.libtorrent_resume").write_bytes(bencode.encode(resume))
    return info_hash


def main(argv: list[str]) -> None:
    if not argv:
        print(__doc__.strip())
        raise SystemExit(2)

    out_dir = Path(argv[0])
    count = 3
    base = "/downloads/old"
    if "--count" in argv:
        count = int(argv[argv.index("--count") + 1])
    if "--base" in argv:
        base = argv[argv.index("--base") + 1]

    out_dir.mkdir(parents=True, exist_ok=True)
    for i in range(count):
        print(f"Generated: {make_torrent(out_dir, base, i)}")


if __name__ == "__main__":
    main(sys.argv[1:])
