# Verifiable Credential - Decoding, encoding, and issuer normalization

from verifiable.credential.codec import (
    decode_credential,
    encode_credential,
    format_timestamp,
    parse_timestamp,
)
from verifiable.credential.issuer import decode_issuer, encode_issuer

__all__ = [
    "decode_credential",
    "encode_credential",
    "format_timestamp",
    "parse_timestamp",
    "decode_issuer",
    "encode_issuer",
]
