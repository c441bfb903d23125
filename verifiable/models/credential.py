"""Verifiable Credential models.

Per the W3C Verifiable Credentials Data Model 1.0.

All entities are plain values: a decode builds them once, and afterwards
they change only through field assignment by their owner. None of them keep
a reference to the bytes or the schema they were decoded from.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional

# Arbitrary JSON-compatible value (dict, list, str, int, float, bool or None).
# The credential subject is passed through without further structure.
Subject = Any


@dataclass
class Issuer:
    """Issuer of a Verifiable Credential.

    Both wire forms of the issuer field decode to this shape:
    - bare string: "did:example:123" -> Issuer(id="did:example:123", name="")
    - object: {"id": "did:example:123", "name": "Example Corp"}

    Attributes:
        id: Issuer identifier (URI), always populated after decode.
        name: Display name, empty when the wire form was a bare string.
    """
    id: str
    name: str = ""


@dataclass
class TypedID:
    """An {id, type} reference shared by status, schema and refresh service.

    Attributes:
        id: Reference URI.
        type: Type tag of the referenced resource.
    """
    id: str
    type: str


class CredentialStatus(TypedID):
    """Status information of a Verifiable Credential (credentialStatus)."""


class CredentialSchema(TypedID):
    """Link to a data schema enforcing the credential structure (credentialSchema)."""


class RefreshService(TypedID):
    """Service for refreshing an expired credential (refreshService)."""


@dataclass
class Proof:
    """Embedded proof of a Verifiable Credential.

    Only the proof type is modelled; proof verification lives elsewhere.
    """
    type: str = ""


@dataclass
class Credential:
    """Decoded Verifiable Credential.

    Attributes:
        context: Ordered @context entries.
        type: Ordered type entries.
        issuer: Normalized issuer.
        id: Credential identifier (URI), empty when absent.
        subject: The credentialSubject value, passed through as decoded.
        issued: issuanceDate as an aware UTC datetime.
        expired: expirationDate as an aware UTC datetime.
        proof: Proof stub carrying the proof type.
        status: credentialStatus reference.
        schema: credentialSchema reference.
        refresh_service: refreshService reference.
    """
    context: List[str] = field(default_factory=list)
    type: List[str] = field(default_factory=list)
    issuer: Issuer = field(default_factory=lambda: Issuer(id=""))
    id: str = ""
    subject: Optional[Subject] = None
    issued: Optional[datetime] = None
    expired: Optional[datetime] = None
    proof: Optional[Proof] = None
    status: Optional[CredentialStatus] = None
    schema: Optional[CredentialSchema] = None
    refresh_service: Optional[RefreshService] = None

    def to_json_bytes(self) -> bytes:
        """Serialize this credential to JSON bytes.

        Raises:
            EncodeError: If the subject is not JSON-serializable.
        """
        from verifiable.credential.codec import encode_credential

        return encode_credential(self)
