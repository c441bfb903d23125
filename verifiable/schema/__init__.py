# Verifiable Schema - Default schema, custom schema resolution, and validation

from verifiable.schema.cache import SchemaCache, SchemaCacheConfig, SchemaCacheMetrics
from verifiable.schema.default import DEFAULT_SCHEMA, TIMESTAMP_PATTERN
from verifiable.schema.provider import (
    SchemaDocument,
    load_credential_schema,
    resolve_credential_schema,
)
from verifiable.schema.validator import collect_violations, validate_document

__all__ = [
    "DEFAULT_SCHEMA",
    "TIMESTAMP_PATTERN",
    "SchemaCache",
    "SchemaCacheConfig",
    "SchemaCacheMetrics",
    "SchemaDocument",
    "collect_violations",
    "load_credential_schema",
    "resolve_credential_schema",
    "validate_document",
]
