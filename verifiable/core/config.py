"""
Verifiable credential decoding configuration.

Constants are organized into:
- NORMATIVE: Fixed by the credential data model, not meant to be changed
- OPERATIONAL: Deployment-specific settings (env vars)

CredentialOptions carries the per-call settings for decoding.
"""

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

import httpx

if TYPE_CHECKING:
    from verifiable.schema.cache import SchemaCache

# =============================================================================
# NORMATIVE CONSTANTS
# =============================================================================

# First @context entry required by the default schema
CREDENTIALS_V1_CONTEXT: str = "https://www.w3.org/2018/credentials/v1"

# First type entry required by the default schema
VERIFIABLE_CREDENTIAL_TYPE: str = "VerifiableCredential"

# credentialSchema.type that triggers download of a custom schema
JSON_SCHEMA_2018_TYPE: str = "JsonSchemaValidator2018"

# =============================================================================
# OPERATIONAL CONFIGURATION (env vars)
# =============================================================================

# Timeout of the HTTP client created when the caller injects none
SCHEMA_FETCH_TIMEOUT_SECONDS: float = float(
    os.getenv("VERIFIABLE_SCHEMA_FETCH_TIMEOUT", "10.0")
)

# Process-wide default for ignoring declared custom schemas
DISABLE_CUSTOM_SCHEMA: bool = (
    os.getenv("VERIFIABLE_DISABLE_CUSTOM_SCHEMA", "false").lower() == "true"
)

# Schema cache defaults
SCHEMA_CACHE_TTL_SECONDS: int = int(os.getenv("VERIFIABLE_SCHEMA_CACHE_TTL", "3600"))
SCHEMA_CACHE_MAX_ENTRIES: int = int(os.getenv("VERIFIABLE_SCHEMA_CACHE_MAX_ENTRIES", "100"))


@dataclass
class CredentialOptions:
    """Options for verifiable credential decoding.

    Attributes:
        schema_download_client: HTTP client used to download a custom
            credential schema. When None, a short-lived client with
            SCHEMA_FETCH_TIMEOUT_SECONDS is opened per download. An injected
            client is never closed here; its timeouts are the caller's concern.
        disable_custom_schema: Validate against the default schema even when
            the credential declares a custom one.
        schema_cache: Optional cache of downloaded schemas, shared by every
            decode that receives the same instance.
    """

    schema_download_client: Optional[httpx.Client] = None
    disable_custom_schema: bool = DISABLE_CUSTOM_SCHEMA
    schema_cache: Optional["SchemaCache"] = None
