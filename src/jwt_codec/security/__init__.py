"""
JWT encoding and verification with HMAC (HS256/HS384/HS512) signing.

Example usage:
    from jwt_codec.security import Algorithm, KeyManager, TokenOperations

    token_ops = TokenOperations()

    # Sign a token
    token = token_ops.encode({"sub": "user123"}, Algorithm.hs256(b"secret"))

    # Verify and decode a token, accepting only HS256 with this key
    try:
        payload = token_ops.decode(token, KeyManager({"HS256": b"secret"}))
        print(f"User ID: {payload['sub']}")
    except SignatureMismatchError:
        print("Token signature is invalid")
"""

from .exceptions import (
    JWTError,
    SigningFailureError,
    InvalidClaimsError,
    DecodeError,
    MalformedTokenError,
    MalformedHeaderError,
    MalformedPayloadError,
    UnsupportedAlgorithmError,
    SignatureMismatchError,
)
from .algorithms import Algorithm, AlgorithmKind
from .base64url import b64url_decode, b64url_encode
from .key_manager import KeyManager
from .token_operations import KeyResolver, TokenOperations

__all__ = [
    "JWTError",
    "SigningFailureError",
    "InvalidClaimsError",
    "DecodeError",
    "MalformedTokenError",
    "MalformedHeaderError",
    "MalformedPayloadError",
    "UnsupportedAlgorithmError",
    "SignatureMismatchError",
    "Algorithm",
    "AlgorithmKind",
    "b64url_decode",
    "b64url_encode",
    "KeyManager",
    "KeyResolver",
    "TokenOperations",
]
