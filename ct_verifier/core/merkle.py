"""
Merkle inclusion proof verification for certificate fingerprints.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from ct_verifier.core.crypto import digest
from ct_verifier.core.models import InclusionProof

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InclusionCheck:
    """Evidence produced by checking one inclusion proof."""
    valid: bool
    leaf_hash: str
    computed_root: str
    expected_root: str
    chain: List[str] = field(default_factory=list)


def combine(a: str, b: str) -> str:
    """
    Hash two node digests into their parent.

    The pair is ordered lexicographically before concatenation, so the
    result does not depend on which side either node sits on.
    """
    if a < b:
        return digest(a + b)
    return digest(b + a)


def fold_path(leaf_hash: str, path: Sequence[str]) -> List[str]:
    """
    Recompute the hash chain from a leaf up to the root.

    Returns every intermediate digest, starting with the leaf hash itself
    and ending with the recomputed root.
    """
    chain = [leaf_hash]
    current = leaf_hash
    for sibling in path:
        current = combine(current, sibling)
        chain.append(current)
    return chain


def compute_root(leaf_hash: str, path: Sequence[str]) -> str:
    """Fold the sibling path into the leaf hash and return the resulting root."""
    return fold_path(leaf_hash, path)[-1]


def check_inclusion(
    proof: InclusionProof,
    fingerprint: str,
    expected_root: str
) -> InclusionCheck:
    """
    Check an inclusion proof and keep the recomputed hash chain.

    With an empty path the tree holds a single leaf: the fingerprint digest
    must equal both the claimed leaf hash and the expected root. Otherwise
    the claimed leaf hash is folded with each sibling in order and the
    result compared to the expected root.

    Args:
        proof: The inclusion proof to check.
        fingerprint: The certificate fingerprint being proven.
        expected_root: The published root hash of the tree.

    Returns:
        An InclusionCheck carrying the verdict and the hash chain.
    """
    if not proof.path:
        fingerprint_hash = digest(fingerprint)
        valid = proof.leaf_hash == fingerprint_hash and fingerprint_hash == expected_root
        if not valid:
            logger.debug("Single-leaf proof does not match fingerprint digest")
        return InclusionCheck(
            valid=valid,
            leaf_hash=proof.leaf_hash,
            computed_root=fingerprint_hash,
            expected_root=expected_root,
            chain=[fingerprint_hash],
        )

    chain = fold_path(proof.leaf_hash, proof.path)
    computed_root = chain[-1]
    valid = computed_root == expected_root
    if not valid:
        logger.debug(
            "Recomputed root %s does not match expected root %s after %d siblings",
            computed_root, expected_root, len(proof.path)
        )
    return InclusionCheck(
        valid=valid,
        leaf_hash=proof.leaf_hash,
        computed_root=computed_root,
        expected_root=expected_root,
        chain=chain,
    )


def verify_inclusion(proof: InclusionProof, fingerprint: str, expected_root: str) -> bool:
    """Return True if the proof places the fingerprint under the expected root."""
    return check_inclusion(proof, fingerprint, expected_root).valid
