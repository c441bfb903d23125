"""Exception classes for credential decoding and encoding.

Every error raised by this package derives from CredentialError:
- DecodeError hierarchy for failures while turning bytes into a Credential
- EncodeError for failures while turning a Credential back into bytes
"""

from typing import List, Optional


class CredentialError(Exception):
    """Base exception for all verifiable credential errors."""
    pass


# =============================================================================
# Decode Exceptions
# =============================================================================

class DecodeError(CredentialError):
    """Base exception for verifiable credential decoding errors."""
    pass


class MalformedDocumentError(DecodeError):
    """Input is not JSON or does not fit the raw credential shape.

    Also raised when a timestamp accepted by the schema cannot be read
    as an RFC 3339 instant.
    """
    pass


class SchemaFetchError(DecodeError):
    """Downloading a custom credential schema failed.

    Covers transport errors and any non-200 response. The underlying
    cause is chained as __cause__.
    """

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class SchemaValidationError(DecodeError):
    """Credential does not conform to the resolved schema.

    Attributes:
        violations: Every violation found, in validation order.
    """

    def __init__(self, violations: List[str]):
        self.violations = list(violations)
        super().__init__(self.describe(self.violations))

    @staticmethod
    def describe(violations: List[str]) -> str:
        """Render violations as one human-readable message, one per line."""
        message = "verifiable credential is not valid:\n"
        for violation in violations:
            message += f"- {violation}\n"
        return message


class InvalidSchemaError(SchemaValidationError):
    """The resolved schema itself cannot be used for validation.

    Raised when a downloaded schema is not JSON, is not a valid JSON
    Schema, or contains a $ref that cannot be resolved.
    """
    pass


class IssuerFormatError(DecodeError):
    """Issuer is neither a non-empty string nor an object with an id."""
    pass


# =============================================================================
# Encode Exceptions
# =============================================================================

class EncodeError(CredentialError):
    """Serializing a credential to JSON failed."""
    pass
