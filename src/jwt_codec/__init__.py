"""
Compact, HMAC-signed JSON Web Tokens.

    import jwt_codec
    from jwt_codec import Algorithm, KeyManager

    token = jwt_codec.encode({"sub": "1234567890"}, Algorithm.hs256(b"secret"))
    claims = jwt_codec.decode(token, KeyManager({"HS256": b"secret"}))
"""
from .claims import ClaimSet
from .security import (
    JWTError,
    SigningFailureError,
    InvalidClaimsError,
    DecodeError,
    MalformedTokenError,
    MalformedHeaderError,
    MalformedPayloadError,
    UnsupportedAlgorithmError,
    SignatureMismatchError,
    Algorithm,
    AlgorithmKind,
    KeyManager,
    TokenOperations,
)
from .api import (
    encode,
    encode_claims,
    encode_with,
    decode,
    get_unverified_header,
    decode_unverified,
    get_token_operations,
)

__all__ = [
    "ClaimSet",
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
    "KeyManager",
    "TokenOperations",
    "encode",
    "encode_claims",
    "encode_with",
    "decode",
    "get_unverified_header",
    "decode_unverified",
    "get_token_operations",
]
