"""Issuer normalization.

The issuer field of a credential comes in two forms:
- a bare identifier string: "did:example:123"
- an object with an identifier and optional display name:
  {"id": "did:example:123", "name": "Example Corp"}

Both decode to one Issuer. Encoding picks the bare string unless there is
a name to carry.
"""

from typing import Dict, Union

from pydantic import ValidationError

from verifiable.core.exceptions import IssuerFormatError
from verifiable.models.credential import Issuer

from .wire import CompositeIssuer, IssuerEnvelope

ISSUER_NOT_VALID = "verifiable credential issuer is not valid"


def decode_issuer(data: Union[bytes, str]) -> Issuer:
    """Extract and normalize the issuer of a credential document.

    Reads the issuer field straight from the document bytes, independently
    of how the rest of the document was parsed. The bare-string form wins
    over the object form.

    Args:
        data: The credential document bytes.

    Returns:
        Issuer with a non-empty id; name is "" for the bare-string form.

    Raises:
        IssuerFormatError: If the issuer is missing, empty, or matches
            neither form.
    """
    try:
        envelope = IssuerEnvelope.model_validate_json(data)
    except ValidationError as e:
        raise IssuerFormatError(ISSUER_NOT_VALID) from e

    wire = envelope.issuer
    if isinstance(wire, str) and wire:
        return Issuer(id=wire)
    if isinstance(wire, CompositeIssuer) and wire.id:
        return Issuer(id=wire.id, name=wire.name or "")

    raise IssuerFormatError(ISSUER_NOT_VALID)


def encode_issuer(issuer: Issuer) -> Union[str, Dict[str, str]]:
    """Wire form of an issuer.

    Returns:
        {"id": ..., "name": ...} when the issuer has a name, else the bare id.
    """
    if issuer.name:
        return {"id": issuer.id, "name": issuer.name}
    return issuer.id
