import hashlib
import json

import pytest


def _h(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def _parent(a: str, b: str) -> str:
    lo, hi = sorted([a, b])
    return _h(lo + hi)


@pytest.fixture
def four_leaf_tree():
    """A 4-leaf tree built by hand, with the proof for every leaf."""
    fingerprints = [f"SHA256:cert-{i}" for i in range(4)]
    leaves = [_h(fp) for fp in fingerprints]
    n01 = _parent(leaves[0], leaves[1])
    n23 = _parent(leaves[2], leaves[3])
    root = _parent(n01, n23)
    proofs = [
        {"leaf_hash": leaves[0], "proof_path": [leaves[1], n23]},
        {"leaf_hash": leaves[1], "proof_path": [leaves[0], n23]},
        {"leaf_hash": leaves[2], "proof_path": [leaves[3], n01]},
        {"leaf_hash": leaves[3], "proof_path": [leaves[2], n01]},
    ]
    return {
        "fingerprints": fingerprints,
        "leaves": leaves,
        "nodes": [n01, n23],
        "root": root,
        "proofs": proofs,
    }


@pytest.fixture
def two_sibling_proof(four_leaf_tree):
    """JSON proof text, fingerprint and root for the first leaf."""
    return (
        json.dumps(four_leaf_tree["proofs"][0]),
        four_leaf_tree["fingerprints"][0],
        four_leaf_tree["root"],
    )
