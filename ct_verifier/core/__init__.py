"""
Core functionality for CT inclusion verification.

This package contains the digest engine, the Merkle inclusion verifier and the
data models for proofs and verdicts.
"""

from .merkle import InclusionCheck, check_inclusion, combine, compute_root, fold_path, verify_inclusion

__all__ = [
    'InclusionCheck',
    'check_inclusion',
    'combine',
    'compute_root',
    'fold_path',
    'verify_inclusion',
]
