# Verifiable core - Shared configuration, exceptions, and logging

from verifiable.core.config import CredentialOptions
from verifiable.core.exceptions import (
    CredentialError,
    DecodeError,
    EncodeError,
    InvalidSchemaError,
    IssuerFormatError,
    MalformedDocumentError,
    SchemaFetchError,
    SchemaValidationError,
)
from verifiable.core.logging import configure_logging, JsonFormatter

__all__ = [
    "CredentialOptions",
    "CredentialError",
    "DecodeError",
    "EncodeError",
    "InvalidSchemaError",
    "IssuerFormatError",
    "MalformedDocumentError",
    "SchemaFetchError",
    "SchemaValidationError",
    "configure_logging",
    "JsonFormatter",
]
