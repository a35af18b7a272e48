"""Unit tests for Merkle inclusion verification."""

import pytest

from ct_verifier.core.crypto import digest
from ct_verifier.core.merkle import check_inclusion, combine, compute_root, fold_path, verify_inclusion
from ct_verifier.core.models import InclusionProof


def _proof(leaf_hash, path):
    return InclusionProof(leaf_hash=leaf_hash, path=path)


def test_single_leaf_proof_verifies() -> None:
    fp = "SHA256:" + "a" * 64
    proof = _proof(digest(fp), [])
    assert verify_inclusion(proof, fp, digest(fp))


def test_single_leaf_rejects_mismatched_leaf_hash() -> None:
    fp = "SHA256:" + "a" * 64
    proof = _proof(digest("something else"), [])
    assert not verify_inclusion(proof, fp, digest(fp))
    assert not verify_inclusion(proof, fp, digest("something else"))


def test_single_leaf_rejects_wrong_root() -> None:
    fp = "a" * 64
    proof = _proof(digest(fp), [])
    assert not verify_inclusion(proof, fp, digest("other root"))


def test_single_leaf_chain_is_fingerprint_digest() -> None:
    fp = "a" * 64
    check = check_inclusion(_proof(digest(fp), []), fp, digest(fp))
    assert check.valid
    assert check.chain == [digest(fp)]
    assert check.computed_root == digest(fp)


@pytest.mark.parametrize("index", [0, 1, 2, 3])
def test_every_leaf_of_four_leaf_tree_verifies(four_leaf_tree, index) -> None:
    raw = four_leaf_tree["proofs"][index]
    proof = _proof(raw["leaf_hash"], raw["proof_path"])
    fp = four_leaf_tree["fingerprints"][index]
    assert verify_inclusion(proof, fp, four_leaf_tree["root"])


def test_four_leaf_chain_passes_through_parent(four_leaf_tree) -> None:
    raw = four_leaf_tree["proofs"][2]
    check = check_inclusion(
        _proof(raw["leaf_hash"], raw["proof_path"]),
        four_leaf_tree["fingerprints"][2],
        four_leaf_tree["root"],
    )
    n23 = four_leaf_tree["nodes"][1]
    assert check.chain == [raw["leaf_hash"], n23, four_leaf_tree["root"]]
    assert check.computed_root == four_leaf_tree["root"]


def test_wrong_root_fails(four_leaf_tree) -> None:
    raw = four_leaf_tree["proofs"][0]
    proof = _proof(raw["leaf_hash"], raw["proof_path"])
    assert not verify_inclusion(proof, four_leaf_tree["fingerprints"][0], digest("bogus"))


def test_reordered_path_fails(four_leaf_tree) -> None:
    raw = four_leaf_tree["proofs"][0]
    proof = _proof(raw["leaf_hash"], list(reversed(raw["proof_path"])))
    assert not verify_inclusion(proof, four_leaf_tree["fingerprints"][0], four_leaf_tree["root"])


def test_tampered_sibling_fails(four_leaf_tree) -> None:
    raw = four_leaf_tree["proofs"][1]
    path = [raw["proof_path"][0], digest("tampered")]
    proof = _proof(raw["leaf_hash"], path)
    assert not verify_inclusion(proof, four_leaf_tree["fingerprints"][1], four_leaf_tree["root"])


def test_leaf_hash_is_taken_as_given_with_non_empty_path(four_leaf_tree) -> None:
    """With siblings present the fingerprint is not re-hashed against the leaf."""
    raw = four_leaf_tree["proofs"][0]
    proof = _proof(raw["leaf_hash"], raw["proof_path"])
    assert verify_inclusion(proof, "unrelated fingerprint", four_leaf_tree["root"])


def test_combine_is_commutative() -> None:
    a, b = digest("left"), digest("right")
    assert combine(a, b) == combine(b, a)


def test_combine_orders_lexicographically() -> None:
    a, b = digest("left"), digest("right")
    lo, hi = sorted([a, b])
    assert combine(a, b) == digest(lo + hi)


def test_combine_equal_nodes() -> None:
    a = digest("same")
    assert combine(a, a) == digest(a + a)


def test_fold_path_and_compute_root() -> None:
    leaf = digest("leaf")
    s1, s2 = digest("s1"), digest("s2")
    chain = fold_path(leaf, [s1, s2])
    assert chain[0] == leaf
    assert chain[1] == combine(leaf, s1)
    assert chain[2] == combine(chain[1], s2)
    assert compute_root(leaf, [s1, s2]) == chain[2]
    assert compute_root(leaf, []) == leaf
