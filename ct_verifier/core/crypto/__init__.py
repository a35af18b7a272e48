"""
Digest primitives for CT inclusion verification.

Every hash in this package goes through ``digest``: leaf hashing, node
combination and fingerprint derivation all use SHA-256 rendered as
lower-case hexadecimal.
"""

import hashlib
from typing import Union

DIGEST_ALGORITHM = "sha256"
DIGEST_HEX_LENGTH = 64

# Display prefix used by CT services when echoing fingerprints
FINGERPRINT_PREFIX = "SHA256:"

# Number of hex characters kept by the display form
DISPLAY_LENGTH = 44


def digest(data: Union[str, bytes]) -> str:
    """Compute the SHA-256 digest of data and return it as lower-case hex.

    Text input is encoded as UTF-8 before hashing.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).hexdigest()


def fingerprint_of(data: Union[str, bytes]) -> str:
    """Derive a certificate fingerprint from raw certificate bytes or text."""
    return digest(data)


def looks_like_fingerprint(value: str) -> bool:
    """
    Check whether a string has the shape of a certificate fingerprint.

    A fingerprint either carries the ``SHA256:`` prefix or is exactly as
    long as a bare hex digest. The characters themselves are not checked.
    """
    if not isinstance(value, str):
        return False
    return value.startswith(FINGERPRINT_PREFIX) or len(value) == DIGEST_HEX_LENGTH


def strip_fingerprint_prefix(value: str) -> str:
    """Remove a leading ``SHA256:`` prefix, if present."""
    if value.startswith(FINGERPRINT_PREFIX):
        return value[len(FINGERPRINT_PREFIX):]
    return value


def display_fingerprint(value: str) -> str:
    """Render a digest in the shortened ``SHA256:`` display form."""
    if value.startswith(FINGERPRINT_PREFIX):
        return value
    return f"{FINGERPRINT_PREFIX}{value[:DISPLAY_LENGTH]}"


__all__ = [
    "DIGEST_ALGORITHM",
    "DIGEST_HEX_LENGTH",
    "FINGERPRINT_PREFIX",
    "digest",
    "display_fingerprint",
    "fingerprint_of",
    "looks_like_fingerprint",
    "strip_fingerprint_prefix",
]
