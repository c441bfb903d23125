"""Verifiable Credential validation against JSON Schema.

Validation always runs on the document exactly as received, so unknown
fields are still checked and nothing is lost to a re-serialization.

Draft selection follows the schema's $schema keyword; schemas without one
(including the default schema) get Draft 4 semantics. The format keyword
is enforced, e.g. "uri" for credential and reference ids.
"""

import json
import logging
from functools import lru_cache
from typing import Any, List, Mapping, Union

from jsonschema import Draft4Validator, SchemaError
from jsonschema.validators import validator_for
from referencing.exceptions import Unresolvable

from verifiable.core.exceptions import (
    InvalidSchemaError,
    MalformedDocumentError,
    SchemaValidationError,
)

from .default import DEFAULT_SCHEMA

log = logging.getLogger(__name__)


def validate_document(
    data: Union[bytes, str],
    schema: Union[Mapping[str, Any], bytes, str],
) -> None:
    """Validate a JSON document against a schema.

    Args:
        data: The document bytes as received.
        schema: Parsed schema, or schema bytes (e.g. a downloaded schema).

    Raises:
        SchemaValidationError: If the document violates the schema. All
            violations are reported, not just the first.
        InvalidSchemaError: If the schema itself is unusable.
        MalformedDocumentError: If the document is not JSON.
    """
    violations = collect_violations(data, schema)
    if violations:
        log.debug(f"Credential failed schema validation with {len(violations)} violation(s)")
        raise SchemaValidationError(violations)


def collect_violations(
    data: Union[bytes, str],
    schema: Union[Mapping[str, Any], bytes, str],
) -> List[str]:
    """Validate a JSON document and return its violations.

    Returns:
        One "<path>: <message>" description per violation, in validation
        order; empty if the document is valid.
    """
    validator = _get_validator(schema)

    try:
        instance = json.loads(data, parse_constant=_reject_constant)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedDocumentError(f"credential is not valid JSON: {e}") from e

    try:
        return [_describe(error) for error in validator.iter_errors(instance)]
    except Unresolvable as e:
        raise InvalidSchemaError([f"unresolvable schema reference: {e}"]) from e


def _reject_constant(token: str):
    # NaN, Infinity and -Infinity are accepted by json.loads but are not JSON
    raise MalformedDocumentError(f"credential is not valid JSON: {token} is not a JSON value")


def _get_validator(schema: Union[Mapping[str, Any], bytes, str]):
    if schema is DEFAULT_SCHEMA:
        return _default_validator()

    if isinstance(schema, (bytes, str)):
        try:
            schema = json.loads(schema)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidSchemaError([f"schema is not valid JSON: {e}"]) from e

    return _build_validator(schema)


@lru_cache(maxsize=1)
def _default_validator():
    """Compiled validator for the default schema, built once per process."""
    return _build_validator(DEFAULT_SCHEMA)


def _build_validator(schema: Any):
    if not isinstance(schema, (Mapping, bool)):
        raise InvalidSchemaError(
            [f"invalid schema: expected a JSON object, got {type(schema).__name__}"]
        )

    cls = validator_for(schema, default=Draft4Validator)
    try:
        cls.check_schema(schema)
    except SchemaError as e:
        raise InvalidSchemaError([f"invalid schema: {e.message}"]) from e
    return cls(schema, format_checker=cls.FORMAT_CHECKER)


def _describe(error) -> str:
    path = ".".join(str(p) for p in error.absolute_path) if error.absolute_path else "(root)"
    return f"{path}: {error.message}"
