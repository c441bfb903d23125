# Verifiable CLI - typer application

from verifiable.cli.main import app

__all__ = ["app"]
