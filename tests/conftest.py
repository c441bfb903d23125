"""Shared fixtures for verifiable credential tests.

No test touches the network: schema downloads go through httpx clients
backed by httpx.MockTransport.
"""

import copy
import logging
from typing import Any, Callable, Dict, List

import httpx
import pytest

from credential_samples import (
    CUSTOM_SCHEMA_URL,
    MINIMAL_CREDENTIAL,
    SAMPLE_CREDENTIAL,
    to_bytes,
)


@pytest.fixture
def sample_credential() -> Dict[str, Any]:
    """A fresh copy of the fully populated sample credential."""
    return copy.deepcopy(SAMPLE_CREDENTIAL)


@pytest.fixture
def minimal_credential() -> Dict[str, Any]:
    """A fresh copy of the minimal valid credential."""
    return copy.deepcopy(MINIMAL_CREDENTIAL)


@pytest.fixture
def custom_schema_credential(sample_credential) -> Dict[str, Any]:
    """Sample credential declaring a downloadable custom schema."""
    sample_credential["credentialSchema"] = {
        "id": CUSTOM_SCHEMA_URL,
        "type": "JsonSchemaValidator2018",
    }
    return sample_credential


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it handled."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)


@pytest.fixture
def make_schema_client():
    """Factory for httpx clients whose requests go to a handler function.

    Returns (client, transport); transport.requests lists handled requests.
    """
    clients = []

    def factory(handler: Callable[[httpx.Request], httpx.Response]):
        transport = RecordingTransport(handler)
        client = httpx.Client(transport=transport)
        clients.append(client)
        return client, transport

    yield factory

    for client in clients:
        client.close()


@pytest.fixture
def serve_schema(make_schema_client):
    """Client that serves a schema document with HTTP 200 for any URL."""

    def factory(schema: Any):
        body = schema if isinstance(schema, bytes) else to_bytes(schema)
        return make_schema_client(lambda request: httpx.Response(200, content=body))

    return factory


@pytest.fixture
def unreachable_client(make_schema_client):
    """Client whose every request fails with a connection error."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return make_schema_client(handler)


@pytest.fixture
def restore_logging():
    """Restore root logger handlers and level changed by configure_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
