# model/credential.py
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class VerificationProof(BaseModel):
    """
    Verification result produced by the external service.
    Documented here for the OpenAPI schema; proxies relay the upstream body as-is.
    """

    model_config = ConfigDict(extra="allow")

    is_verified_issuer: bool | None = None
    content_integrity: bool | None = None
    sentiment: str | None = None
    notes: str | None = None
    related_vc_ids: list[str] = Field(default_factory=list)
    checked_at: datetime | None = None
    semantic_similarity: float | None = Field(None, ge=0.0, le=1.0)


class VcProof(BaseModel):
    model_config = ConfigDict(extra="allow")

    credential_id: str | None = None
    content_hash: str | None = None


class CredentialDocument(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: str | None = None
    content: str | None = None
    issuer_did: str | None = None
    vc_proof: VcProof | None = None
    vc_type: str | None = None
    vc_status: str | None = None
    issuance_date: str | None = None
    expiration_date: str | None = None
    proof: VerificationProof | None = None
    did_document_url: str | None = None


class CredentialEnvelope(BaseModel):
    """Shape of one related/credential document as returned upstream."""

    model_config = ConfigDict(extra="allow")

    message: str | None = None
    did: str | None = None
    document: CredentialDocument | None = None
