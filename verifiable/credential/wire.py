"""Wire-level shapes of a Verifiable Credential JSON document.

These models map JSON fields one-to-one with no semantic checks; they are
what the raw bytes are parsed into before schema validation and issuer
normalization. Unknown fields are ignored here; the schema validator still
sees them because it works on the original bytes.
"""

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class ProofWire(BaseModel):
    """proof object; only its type is read."""

    model_config = ConfigDict(extra="ignore")

    type: StrictStr = ""


class TypedIDWire(BaseModel):
    """{id, type} object used by credentialStatus, credentialSchema and refreshService."""

    model_config = ConfigDict(extra="ignore")

    id: StrictStr = ""
    type: StrictStr = ""


class CompositeIssuer(BaseModel):
    """Object form of the issuer field: {"id": ..., "name": ...}."""

    model_config = ConfigDict(extra="ignore")

    id: StrictStr = ""
    name: Optional[StrictStr] = None


class IssuerEnvelope(BaseModel):
    """Just the issuer field of a credential document.

    The bare-string form is tried first, then the object form.
    """

    model_config = ConfigDict(extra="ignore")

    issuer: Union[StrictStr, CompositeIssuer, None] = Field(
        default=None, union_mode="left_to_right"
    )


class RawCredential(BaseModel):
    """Credential document as it appears on the wire.

    Timestamps stay strings here; they are only converted once the document
    has passed schema validation.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    context: Optional[List[StrictStr]] = Field(default=None, alias="@context")
    id: Optional[StrictStr] = None
    type: Optional[List[StrictStr]] = None
    credential_subject: Any = Field(default=None, alias="credentialSubject")
    issuer: Any = None
    issuance_date: Optional[StrictStr] = Field(default=None, alias="issuanceDate")
    expiration_date: Optional[StrictStr] = Field(default=None, alias="expirationDate")
    proof: Optional[ProofWire] = None
    credential_status: Optional[TypedIDWire] = Field(default=None, alias="credentialStatus")
    credential_schema: Optional[TypedIDWire] = Field(default=None, alias="credentialSchema")
    refresh_service: Optional[TypedIDWire] = Field(default=None, alias="refreshService")
