"""Verifiable - decode, validate and encode W3C Verifiable Credentials.

This package provides structural handling of Verifiable Credential documents:
- Decoding JSON bytes into a typed Credential
- JSON Schema validation against the bundled default schema, or a custom
  schema downloaded from the credential's credentialSchema reference
- Issuer normalization (bare identifier or {id, name} object)
- Encoding a Credential back to JSON bytes

Proof verification, DID resolution and revocation checks are out of scope.

Usage:
    from verifiable import decode_credential, encode_credential
    credential = decode_credential(data, disable_custom_schema=True)
"""

from verifiable.core import (
    CredentialError,
    CredentialOptions,
    DecodeError,
    EncodeError,
    InvalidSchemaError,
    IssuerFormatError,
    MalformedDocumentError,
    SchemaFetchError,
    SchemaValidationError,
)
from verifiable.credential import (
    decode_credential,
    decode_issuer,
    encode_credential,
    encode_issuer,
)
from verifiable.models import (
    Credential,
    CredentialSchema,
    CredentialStatus,
    Issuer,
    Proof,
    RefreshService,
    TypedID,
)
from verifiable.schema import SchemaCache, SchemaCacheConfig

__version__ = "0.1.0"

__all__ = [
    # Codec
    "decode_credential",
    "encode_credential",
    "decode_issuer",
    "encode_issuer",
    # Models
    "Credential",
    "CredentialSchema",
    "CredentialStatus",
    "Issuer",
    "Proof",
    "RefreshService",
    "TypedID",
    # Options
    "CredentialOptions",
    "SchemaCache",
    "SchemaCacheConfig",
    # Errors
    "CredentialError",
    "DecodeError",
    "EncodeError",
    "InvalidSchemaError",
    "IssuerFormatError",
    "MalformedDocumentError",
    "SchemaFetchError",
    "SchemaValidationError",
]
