"""
Public verification operations.

These functions take and return plain strings so they can sit behind any
host boundary (CLI, HTTP, embedding). Decoding and encoding failures never
propagate: a proof that cannot be decoded yields a 'danger' verdict, and a
verdict that cannot be encoded yields an empty JSON object.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from ct_verifier.core.canonicalization import CanonicalizationError, canonical_json_dumps
from ct_verifier.core.crypto import digest, looks_like_fingerprint
from ct_verifier.core.merkle import verify_inclusion
from ct_verifier.core.models import InclusionProof, ProofPayload, VerificationVerdict

logger = logging.getLogger(__name__)

# Returned when a verdict cannot be encoded; means "unknown", not allow or deny
EMPTY_PAYLOAD = "{}"


def decode_proof(payload: str, max_path_length: Optional[int] = None) -> Optional[InclusionProof]:
    """
    Decode a JSON proof payload into an InclusionProof.

    Args:
        payload: JSON text with ``leaf_hash`` and ``proof_path`` fields.
        max_path_length: Reject proofs with more siblings than this.

    Returns:
        The decoded proof, or None if the payload is malformed.
    """
    try:
        proof = ProofPayload.model_validate_json(payload).to_proof()
    except (ValidationError, ValueError, TypeError) as e:
        logger.debug("Rejecting malformed proof payload: %s", e)
        return None

    if max_path_length is not None and len(proof.path) > max_path_length:
        logger.debug(
            "Rejecting proof with %d siblings (limit %d)", len(proof.path), max_path_length
        )
        return None
    return proof


def evaluate_certificate(
    domain: str,
    fingerprint: str,
    proof_payload: str,
    expected_root: str,
    max_path_length: Optional[int] = None,
) -> VerificationVerdict:
    """Verify a certificate's inclusion proof and return the verdict model."""
    proof = decode_proof(proof_payload, max_path_length=max_path_length)
    try:
        valid = proof is not None and verify_inclusion(proof, fingerprint, expected_root)
    except UnicodeEncodeError as e:
        logger.debug("Fingerprint or proof text cannot be hashed: %s", e)
        valid = False
    logger.debug("Verification for %s: %s", domain, "safe" if valid else "danger")
    return VerificationVerdict.from_result(
        domain=domain,
        fingerprint=fingerprint,
        raw_proof=proof_payload,
        expected_root=expected_root,
        valid=valid,
    )


def encode_verdict(verdict: VerificationVerdict) -> str:
    """Encode a verdict as canonical JSON, or an empty object if that fails."""
    try:
        return canonical_json_dumps(verdict.to_payload())
    except CanonicalizationError as e:
        logger.warning("Could not encode verification result: %s", e)
        return EMPTY_PAYLOAD


def verify_certificate(
    domain: str,
    fingerprint: str,
    proof_payload: str,
    expected_root: str,
) -> str:
    """
    Verify that a certificate fingerprint is included under a Merkle root.

    Args:
        domain: Domain the certificate was presented for.
        fingerprint: Certificate fingerprint claimed to be in the log.
        proof_payload: JSON-encoded inclusion proof.
        expected_root: Published root hash of the log.

    Returns:
        JSON result payload with ``status`` set to 'safe' or 'danger'.
    """
    verdict = evaluate_certificate(domain, fingerprint, proof_payload, expected_root)
    return encode_verdict(verdict)


def verify_fingerprint_format(fingerprint: str) -> bool:
    """Check that a fingerprint has the expected shape."""
    return looks_like_fingerprint(fingerprint)


def digest_of(data: str) -> str:
    """Compute the fingerprint digest of certificate data."""
    return digest(data)


__all__ = [
    "EMPTY_PAYLOAD",
    "decode_proof",
    "digest_of",
    "encode_verdict",
    "evaluate_certificate",
    "verify_certificate",
    "verify_fingerprint_format",
]
