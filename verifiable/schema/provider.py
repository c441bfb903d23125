"""Credential schema resolution.

Decides which schema a credential is validated against:
- the bundled default schema when the credential declares no
  credentialSchema, or custom schemas are disabled
- a schema downloaded from credentialSchema.id when credentialSchema.type
  is JsonSchemaValidator2018
- the default schema, with a warning, for any other credentialSchema.type

A failed download is fatal: a declared custom schema that cannot be
fetched is never silently replaced by the default one.
"""

import logging
from typing import Any, Mapping, Optional, Union

import httpx

from verifiable.core.config import (
    JSON_SCHEMA_2018_TYPE,
    SCHEMA_FETCH_TIMEOUT_SECONDS,
    CredentialOptions,
)
from verifiable.core.exceptions import SchemaFetchError
from verifiable.models.credential import TypedID

from .default import DEFAULT_SCHEMA

log = logging.getLogger(__name__)

# Parsed schema (the bundled default) or raw downloaded schema bytes
SchemaDocument = Union[Mapping[str, Any], bytes]


def resolve_credential_schema(
    schema_ref: Optional[TypedID],
    options: Optional[CredentialOptions] = None,
) -> SchemaDocument:
    """Resolve the schema to validate a credential against.

    Args:
        schema_ref: The credential's credentialSchema reference, if any.
        options: Decoding options. Defaults apply when None.

    Returns:
        DEFAULT_SCHEMA, or the downloaded custom schema bytes.

    Raises:
        SchemaFetchError: If a JsonSchemaValidator2018 schema cannot be downloaded.
    """
    options = options or CredentialOptions()

    if schema_ref is None or options.disable_custom_schema:
        return DEFAULT_SCHEMA

    if schema_ref.type == JSON_SCHEMA_2018_TYPE:
        return _load_custom_schema(schema_ref.id, options)

    log.warning(
        f"unsupported credential schema: {schema_ref.type}. "
        f"Using default schema for validation",
        extra={"schema_type": schema_ref.type},
    )
    return DEFAULT_SCHEMA


def _load_custom_schema(url: str, options: CredentialOptions) -> bytes:
    """Get a custom schema from the cache, or download and cache it."""
    cache = options.schema_cache
    if cache is not None:
        cached = cache.get(url)
        if cached is not None:
            return cached

    schema_bytes = load_credential_schema(url, options.schema_download_client)

    if cache is not None:
        cache.put(url, schema_bytes)
    return schema_bytes


def load_credential_schema(url: str, client: Optional[httpx.Client] = None) -> bytes:
    """Download a credential schema document.

    A single GET without retries. When no client is given, one is opened
    for this request with SCHEMA_FETCH_TIMEOUT_SECONDS and closed afterwards.

    Args:
        url: Schema URL (the credentialSchema id).
        client: HTTP client to use. Left open when provided.

    Returns:
        The response body as bytes.

    Raises:
        SchemaFetchError: On transport errors or any status other than 200.
    """
    if client is None:
        with httpx.Client(
            timeout=SCHEMA_FETCH_TIMEOUT_SECONDS,
            follow_redirects=True,
        ) as owned_client:
            return _download(url, owned_client)
    return _download(url, client)


def _download(url: str, client: httpx.Client) -> bytes:
    log.debug(f"Fetching credential schema from {url}", extra={"schema_url": url})

    try:
        response = client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise SchemaFetchError(
            f"loading custom credential schema from {url} failed: "
            f"HTTP request failed: {e}",
            url=url,
        ) from e

    if response.status_code != 200:
        raise SchemaFetchError(
            f"loading custom credential schema from {url} failed: "
            f"credential schema endpoint HTTP failure [{response.status_code}]",
            url=url,
        )

    log.info(f"Fetched credential schema from {url}", extra={"schema_url": url})
    return response.content
