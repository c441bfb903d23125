"""Default Verifiable Credential JSON Schema.

Structural schema for the W3C Verifiable Credentials Data Model 1.0
serialization, used whenever a credential declares no custom schema or
custom schemas are disabled.

Normative Source: https://www.w3.org/TR/vc-data-model/

Required top-level fields: @context, type, credentialSubject, issuer,
issuanceDate. Optional: id, proof, expirationDate, credentialStatus,
credentialSchema, refreshService.

The document is shared process-wide and must be treated as read-only.
"""

from typing import Any, Dict

from verifiable.core.config import CREDENTIALS_V1_CONTEXT, VERIFIABLE_CREDENTIAL_TYPE

# UTC instant without fractional seconds, e.g. 2010-01-01T19:23:24Z
TIMESTAMP_PATTERN = r"\d{4}-[01]\d-[0-3]\dT[0-2]\d:[0-5]\d:[0-5]\dZ"

DEFAULT_SCHEMA: Dict[str, Any] = {
    "required": [
        "@context",
        "type",
        "credentialSubject",
        "issuer",
        "issuanceDate",
    ],
    "properties": {
        "@context": {
            "type": "array",
            "items": [
                {
                    "type": "string",
                    "pattern": f"^{CREDENTIALS_V1_CONTEXT}$",
                },
            ],
            "additionalItems": {"type": "string"},
        },
        "id": {
            "type": "string",
            "format": "uri",
        },
        "type": {
            "type": "array",
            "items": [
                {
                    "type": "string",
                    "pattern": f"^{VERIFIABLE_CREDENTIAL_TYPE}$",
                },
            ],
            "additionalItems": {"type": "string"},
            "minItems": 2,
        },
        "credentialSubject": {
            "anyOf": [
                {"type": "array"},
                {"type": "object"},
            ],
        },
        "issuer": {
            "anyOf": [
                {"type": "string"},
                {
                    "type": "object",
                    "required": ["id"],
                    "properties": {
                        "id": {"type": "string"},
                    },
                },
            ],
        },
        "issuanceDate": {"$ref": "#/definitions/timestamp"},
        "proof": {
            "type": "object",
            "required": ["type"],
            "properties": {
                "type": {"type": "string"},
            },
        },
        "expirationDate": {"$ref": "#/definitions/timestamp"},
        "credentialStatus": {"$ref": "#/definitions/typedID"},
        "credentialSchema": {"$ref": "#/definitions/typedID"},
        "refreshService": {"$ref": "#/definitions/typedID"},
    },
    "definitions": {
        "timestamp": {
            "type": "string",
            "pattern": TIMESTAMP_PATTERN,
        },
        "typedID": {
            "type": "object",
            "required": ["id", "type"],
            "properties": {
                "id": {
                    "type": "string",
                    "format": "uri",
                },
                "type": {"type": "string"},
            },
        },
    },
}
