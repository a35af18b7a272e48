"""
CT Verifier - Client-side certificate transparency inclusion checks.

This package verifies that a certificate fingerprint is included in a Merkle
tree identified by a published root hash, without trusting a remote server's
verdict.
"""

from importlib.metadata import version

# Set up version
__version__ = "0.1.0"

try:
    __version__ = version("ct-verifier")
except Exception:
    pass

# Core components
from ct_verifier.api import (
    decode_proof,
    digest_of,
    encode_verdict,
    evaluate_certificate,
    verify_certificate,
    verify_fingerprint_format,
)
from ct_verifier.core.canonicalization import CanonicalizationError, canonicalize, canonical_json_dumps
from ct_verifier.core.crypto import digest, fingerprint_of, looks_like_fingerprint
from ct_verifier.core.merkle import InclusionCheck, check_inclusion, combine, verify_inclusion
from ct_verifier.core.models import InclusionProof, Status, VerificationVerdict

__all__ = [
    # Public operations
    "verify_certificate",
    "verify_fingerprint_format",
    "digest_of",
    "decode_proof",
    "evaluate_certificate",
    "encode_verdict",
    # Core functionality
    "digest",
    "fingerprint_of",
    "looks_like_fingerprint",
    "combine",
    "check_inclusion",
    "verify_inclusion",
    "canonicalize",
    "canonical_json_dumps",
    "CanonicalizationError",
    # Models
    "InclusionCheck",
    "InclusionProof",
    "Status",
    "VerificationVerdict",
]
