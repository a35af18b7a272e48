"""Data models for inclusion proofs and verification verdicts."""

from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


class Status(str, Enum):
    """Trust status reported for a verified certificate."""
    SAFE = "safe"
    DANGER = "danger"


class InclusionProof(BaseModel):
    """A Merkle inclusion proof for a single certificate fingerprint."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    leaf_hash: StrictStr = Field(
        ...,
        description="Hex digest of the leaf being proven."
    )
    path: List[StrictStr] = Field(
        ...,
        alias="proof_path",
        description="Sibling digests ordered from the leaf toward the root."
    )

    def to_payload(self) -> Dict[str, Any]:
        """Render the proof with its wire field names."""
        return {"leaf_hash": self.leaf_hash, "proof_path": list(self.path)}


class ProofPayload(BaseModel):
    """Wire form of an inclusion proof. Only the published field names are accepted."""

    model_config = ConfigDict(frozen=True)

    leaf_hash: StrictStr
    proof_path: List[StrictStr]

    def to_proof(self) -> InclusionProof:
        return InclusionProof(leaf_hash=self.leaf_hash, path=self.proof_path)


class VerificationVerdict(BaseModel):
    """Outcome of one certificate verification, echoing the evidence used."""

    model_config = ConfigDict(frozen=True)

    domain: StrictStr = Field(
        ...,
        description="Domain the certificate was presented for."
    )
    fingerprint: StrictStr = Field(
        ...,
        description="Fingerprint as supplied by the caller."
    )
    merkle_proof: StrictStr = Field(
        ...,
        description="Raw proof payload exactly as received."
    )
    merkle_root: StrictStr = Field(
        ...,
        description="Expected root hash the proof was checked against."
    )
    status: Status = Field(
        Status.DANGER,
        description="'safe' when inclusion was proven, 'danger' otherwise."
    )
    sct_valid: StrictBool = Field(
        False,
        description="Whether inclusion in the log was proven."
    )

    @classmethod
    def from_result(
        cls,
        domain: str,
        fingerprint: str,
        raw_proof: str,
        expected_root: str,
        valid: bool,
    ) -> 'VerificationVerdict':
        """Build a verdict from the boolean outcome of a verification."""
        return cls(
            domain=domain,
            fingerprint=fingerprint,
            merkle_proof=raw_proof,
            merkle_root=expected_root,
            status=Status.SAFE if valid else Status.DANGER,
            sct_valid=valid,
        )

    @property
    def valid(self) -> bool:
        return self.sct_valid

    def to_payload(self) -> Dict[str, Any]:
        """Render the verdict as a plain JSON-compatible dictionary."""
        return self.model_dump(mode="json")


__all__ = ["InclusionProof", "ProofPayload", "Status", "VerificationVerdict"]
