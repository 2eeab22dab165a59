import sys
from pathlib import Path

KEY = b":directory"

def main():
    if len(sys.argv) != 2:
        print("Usage: corrupt_length.py <file.torrent.rtorrent>")
        raise SystemExit(2)

    p = Path(sys.argv[1])
    b = bytearray(p.read_bytes())
    pos = b.find(KEY)
    if pos == -1:
        print("No directory field to corrupt.")
        raise SystemExit(2)

    # Bump the last length digit so the declared length no longer fits the value.
    # A trailing 9 wraps to 0, which still changes the length.
    idx = pos + len(KEY)
    while idx < len(b) and chr(b[idx]).isdigit():
        idx += 1
    idx -= 1
    b[idx] = ord("0") + (b[idx] - ord("0") + 1) % 10
    p.write_bytes(bytes(b))
    print(f"Corrupted length digit at offset {idx} in {p}")

if __name__ == "__main__":
    main()
