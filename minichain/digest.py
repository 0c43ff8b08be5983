"""SHA-256 digests rendered as lower-case hexadecimal text."""

from __future__ import annotations

import hashlib

DIGEST_SIZE = 32


def sha256_hex(text: str | bytes) -> str:
    """Return the SHA-256 digest of ``text`` as 64 lower-case hex characters.

    Strings are hashed as their UTF-8 encoding; bytes are hashed as given.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    return hashlib.sha256(data).hexdigest()