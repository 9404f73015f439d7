from __future__ import annotations

from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

_HASH_PREFIXES = ("scrypt:", "pbkdf2:")


def hash_password(plaintext: str) -> str:
    return generate_password_hash(plaintext)


def verify_password(plaintext: str, digest: Optional[str]) -> bool:
    if not digest or plaintext is None:
        return False
    try:
        return check_password_hash(digest, plaintext)
    except (ValueError, TypeError):
        # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
        return False


def is_password_hash(value: Optional[str]) -> bool:
    return bool(value) and value.startswith(_HASH_PREFIXES) and "$" in value
