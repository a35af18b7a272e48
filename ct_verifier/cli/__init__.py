"""
CT Verifier Command Line Interface.

This package provides command-line tools for verifying certificate inclusion
proofs and computing certificate fingerprints.
"""

from .main import cli

__all__ = [
    'cli',
]
