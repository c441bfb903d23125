"""Credential validation commands.

Commands:
    verifiable validate <source>   Decode and validate a credential
    verifiable normalize <source>  Decode, then print the re-encoded credential
    verifiable issuer <source>     Print the normalized issuer
"""

import json
from pathlib import Path
from typing import Any, Optional

import httpx
import typer

from verifiable.core.exceptions import (
    DecodeError,
    IssuerFormatError,
    SchemaFetchError,
    SchemaValidationError,
)
from verifiable.core.logging import configure_logging
from verifiable.credential import decode_credential, decode_issuer, encode_credential
from verifiable.models.credential import Credential

EXIT_VALIDATION_FAILURE = 1
EXIT_PARSE_ERROR = 2
EXIT_SCHEMA_FETCH_ERROR = 3

app = typer.Typer(
    name="verifiable",
    help="Decode and validate W3C Verifiable Credentials.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        help="Log level for JSON logs written to stderr",
    ),
) -> None:
    configure_logging(log_level=log_level)


def read_input(source: str) -> bytes:
    """Read a credential from a file path, or from stdin when source is '-'."""
    if source == "-":
        return typer.get_binary_stream("stdin").read()
    try:
        return Path(source).read_bytes()
    except OSError as e:
        output_error("INPUT_READ_FAILED", str(e), EXIT_PARSE_ERROR)


def output(result: Any) -> None:
    typer.echo(json.dumps(result, indent=2, ensure_ascii=False))


def output_error(code: str, message: str, exit_code: int) -> None:
    """Write an error object to stderr and exit."""
    typer.echo(
        json.dumps({"error": {"code": code, "message": message}}, ensure_ascii=False),
        err=True,
    )
    raise typer.Exit(exit_code)


def _decode(data: bytes, no_custom_schema: bool, timeout: Optional[float]) -> Credential:
    # False means "not set" so the VERIFIABLE_DISABLE_CUSTOM_SCHEMA default applies
    disable = True if no_custom_schema else None
    if timeout is None:
        return decode_credential(data, disable_custom_schema=disable)
    with httpx.Client(timeout=timeout, follow_redirects=True) as client:
        return decode_credential(
            data, schema_download_client=client, disable_custom_schema=disable
        )


@app.command("validate")
def validate_cmd(
    source: str = typer.Argument(..., help="Credential file path, or '-' for stdin"),
    no_custom_schema: bool = typer.Option(
        False,
        "--no-custom-schema",
        help="Validate against the default schema even if a custom one is declared",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Timeout in seconds for custom schema download",
    ),
) -> None:
    """Decode a credential and report whether it is valid.

    Examples:
        verifiable validate credential.json
        cat credential.json | verifiable validate - --no-custom-schema
    """
    data = read_input(source)

    try:
        credential = _decode(data, no_custom_schema, timeout)
    except SchemaValidationError as e:
        output({"valid": False, "errors": e.violations})
        raise typer.Exit(EXIT_VALIDATION_FAILURE)
    except SchemaFetchError as e:
        output({"valid": False, "errors": [str(e)]})
        raise typer.Exit(EXIT_SCHEMA_FETCH_ERROR)
    except DecodeError as e:
        output({"valid": False, "errors": [str(e)]})
        raise typer.Exit(EXIT_PARSE_ERROR)

    output({
        "valid": True,
        "errors": [],
        "id": credential.id or None,
        "type": credential.type,
        "issuer": {"id": credential.issuer.id, "name": credential.issuer.name},
    })


@app.command("normalize")
def normalize_cmd(
    source: str = typer.Argument(..., help="Credential file path, or '-' for stdin"),
    no_custom_schema: bool = typer.Option(
        False,
        "--no-custom-schema",
        help="Validate against the default schema even if a custom one is declared",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Timeout in seconds for custom schema download",
    ),
) -> None:
    """Decode a credential and print it re-encoded in normalized form."""
    data = read_input(source)

    try:
        credential = _decode(data, no_custom_schema, timeout)
    except SchemaFetchError as e:
        output_error("SCHEMA_FETCH_FAILED", str(e), EXIT_SCHEMA_FETCH_ERROR)
        return
    except SchemaValidationError as e:
        output_error("CREDENTIAL_INVALID", str(e), EXIT_VALIDATION_FAILURE)
        return
    except DecodeError as e:
        output_error("CREDENTIAL_PARSE_FAILED", str(e), EXIT_PARSE_ERROR)
        return

    typer.echo(encode_credential(credential).decode("utf-8"))


@app.command("issuer")
def issuer_cmd(
    source: str = typer.Argument(..., help="Credential file path, or '-' for stdin"),
) -> None:
    """Print the normalized issuer of a credential, without schema validation."""
    data = read_input(source)

    try:
        issuer = decode_issuer(data)
    except IssuerFormatError as e:
        output_error("ISSUER_INVALID", str(e), EXIT_PARSE_ERROR)
        return

    output({"id": issuer.id, "name": issuer.name})


if __name__ == "__main__":
    app()
