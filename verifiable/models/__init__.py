# Verifiable Models - Data models for decoded credentials

from verifiable.models.credential import (
    Credential,
    CredentialSchema,
    CredentialStatus,
    Issuer,
    Proof,
    RefreshService,
    Subject,
    TypedID,
)

__all__ = [
    "Credential",
    "CredentialSchema",
    "CredentialStatus",
    "Issuer",
    "Proof",
    "RefreshService",
    "Subject",
    "TypedID",
]
