"""Verifiable Credential decoding and encoding.

Decoding turns JSON bytes into a Credential:
1. Parse the bytes into the raw wire shape (MalformedDocumentError)
2. Resolve the schema and validate the original bytes against it
   (SchemaFetchError, SchemaValidationError)
3. Normalize the issuer from the original bytes (IssuerFormatError)
4. Assemble the Credential; the subject is passed through untouched

Encoding is the inverse assembly and does not re-validate.
"""

import json
import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Type, TypeVar, Union

import httpx
from pydantic import ValidationError

from verifiable.core.config import CredentialOptions
from verifiable.core.exceptions import EncodeError, MalformedDocumentError
from verifiable.models.credential import (
    Credential,
    CredentialSchema,
    CredentialStatus,
    Proof,
    RefreshService,
    TypedID,
)
from verifiable.schema.cache import SchemaCache
from verifiable.schema.provider import resolve_credential_schema
from verifiable.schema.validator import validate_document

from .issuer import decode_issuer, encode_issuer
from .wire import RawCredential, TypedIDWire

log = logging.getLogger(__name__)

T = TypeVar("T", bound=TypedID)


def decode_credential(
    data: Union[bytes, str],
    options: Optional[CredentialOptions] = None,
    *,
    schema_download_client: Optional[httpx.Client] = None,
    disable_custom_schema: Optional[bool] = None,
    schema_cache: Optional[SchemaCache] = None,
) -> Credential:
    """Decode and validate a Verifiable Credential JSON document.

    Keyword arguments that are given override the matching field of
    options; the others keep the value from options (or the defaults).

    Args:
        data: The credential JSON document.
        options: Base decoding options.
        schema_download_client: HTTP client for custom schema download.
        disable_custom_schema: Always validate against the default schema.
        schema_cache: Cache of downloaded custom schemas.

    Returns:
        The decoded Credential.

    Raises:
        MalformedDocumentError: If data is not a JSON object of the credential shape.
        SchemaFetchError: If a declared custom schema cannot be downloaded.
        SchemaValidationError: If the document violates the resolved schema.
        IssuerFormatError: If the issuer matches neither accepted form.
    """
    options = _merge_options(
        options,
        schema_download_client=schema_download_client,
        disable_custom_schema=disable_custom_schema,
        schema_cache=schema_cache,
    )

    raw = _parse_raw(data)

    schema = resolve_credential_schema(
        _typed_id(CredentialSchema, raw.credential_schema), options
    )
    validate_document(data, schema)

    issuer = decode_issuer(data)

    credential = Credential(
        context=list(raw.context or []),
        id=raw.id or "",
        type=list(raw.type or []),
        subject=raw.credential_subject,
        issuer=issuer,
        issued=parse_timestamp(raw.issuance_date, "issuanceDate"),
        expired=parse_timestamp(raw.expiration_date, "expirationDate"),
        proof=Proof(type=raw.proof.type) if raw.proof is not None else None,
        status=_typed_id(CredentialStatus, raw.credential_status),
        schema=_typed_id(CredentialSchema, raw.credential_schema),
        refresh_service=_typed_id(RefreshService, raw.refresh_service),
    )
    log.debug(
        f"Decoded verifiable credential {credential.id or '(no id)'} "
        f"issued by {issuer.id}",
        extra={"credential_id": credential.id},
    )
    return credential


def encode_credential(credential: Credential) -> bytes:
    """Serialize a Credential to compact JSON bytes.

    Empty and absent optional fields are omitted. The issuer is always
    written, in its wire form (see encode_issuer). Proof and typed references
    are written with all their members, empty or not. No schema validation is applied.

    Raises:
        EncodeError: If the subject is not JSON-serializable (including
            cyclic data and non-finite floats).
    """
    raw: Dict[str, Any] = {}

    if credential.context:
        raw["@context"] = list(credential.context)
    if credential.id:
        raw["id"] = credential.id
    if credential.type:
        raw["type"] = list(credential.type)
    if credential.subject is not None:
        raw["credentialSubject"] = credential.subject
    raw["issuer"] = encode_issuer(credential.issuer)
    if credential.issued is not None:
        raw["issuanceDate"] = format_timestamp(credential.issued)
    if credential.expired is not None:
        raw["expirationDate"] = format_timestamp(credential.expired)
    if credential.proof is not None:
        raw["proof"] = {"type": credential.proof.type}
    if credential.status is not None:
        raw["credentialStatus"] = _typed_id_to_wire(credential.status)
    if credential.schema is not None:
        raw["credentialSchema"] = _typed_id_to_wire(credential.schema)
    if credential.refresh_service is not None:
        raw["refreshService"] = _typed_id_to_wire(credential.refresh_service)

    try:
        return json.dumps(
            raw, separators=(",", ":"), ensure_ascii=False, allow_nan=False
        ).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise EncodeError(f"JSON marshalling of verifiable credential failed: {e}") from e


def parse_timestamp(value: Optional[str], field_name: str) -> Optional[datetime]:
    """Parse an RFC 3339 timestamp into an aware UTC datetime.

    Raises:
        MalformedDocumentError: If the value is not an RFC 3339 instant
            with a UTC designator or offset.
    """
    if value is None:
        return None

    iso_value = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        parsed = datetime.fromisoformat(iso_value)
    except ValueError as e:
        raise MalformedDocumentError(
            f"{field_name} is not a valid timestamp: {value!r}"
        ) from e

    if parsed.tzinfo is None:
        raise MalformedDocumentError(f"{field_name} has no UTC offset: {value!r}")
    return parsed.astimezone(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """Format a datetime as a UTC timestamp, e.g. 2010-01-01T19:23:24Z.

    Naive datetimes are taken to be UTC. Fractional seconds are kept only
    when present.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    timespec = "seconds" if value.microsecond == 0 else "microseconds"
    return value.isoformat(timespec=timespec).replace("+00:00", "Z")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _merge_options(
    options: Optional[CredentialOptions], **overrides: Any
) -> CredentialOptions:
    options = options or CredentialOptions()
    given = {name: value for name, value in overrides.items() if value is not None}
    return replace(options, **given) if given else options


def _parse_raw(data: Union[bytes, str]) -> RawCredential:
    try:
        return RawCredential.model_validate_json(data)
    except ValidationError as e:
        raise MalformedDocumentError(
            f"JSON unmarshalling of verifiable credential failed: {e}"
        ) from e


def _typed_id(cls: Type[T], wire: Optional[TypedIDWire]) -> Optional[T]:
    if wire is None:
        return None
    return cls(id=wire.id, type=wire.type)


def _typed_id_to_wire(typed_id: TypedID) -> Dict[str, str]:
    return {"id": typed_id.id, "type": typed_id.type}
