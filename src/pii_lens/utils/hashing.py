"""Hashing utilities.

Reports identify the scanned text by the hex SHA-256 of its UTF-8 bytes, so a
report can be joined back to its source without storing the text itself.
"""

import hashlib

def sha256_hex(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8", errors="ignore")).hexdigest()
