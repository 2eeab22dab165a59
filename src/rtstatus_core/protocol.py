"""rtorrent session-state constants.

Single source of truth for file suffixes and the field layout.
Keep this file stable. Modifier and verifier must remain synchronized.
"""

# Field layout: b":" + key + ascii-decimal length + b":" + value
FIELD_MARK = b":"
LENGTH_SEP = b":"

# Key holding the download path inside a status file
DEFAULT_KEY = "directory"

# Files worth copying when staging; only STATUS_SUFFIX files are rewritten
CANDIDATE_SUFFIXES = ("rtorrent", "torrent", "libtorrent_resume")
STATUS_SUFFIX = ".torrent.rtorrent"

# Bytes that may legally follow a bencoded string: next string length,
# integer, list, dict or end of container
TRAILER_BYTES = frozenset(b"0123456789ilde")

TEXT_ENCODING = "utf-8"
