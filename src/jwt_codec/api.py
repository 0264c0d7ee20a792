"""
Module-level token functions bound to a shared, configured TokenOperations.
"""
from functools import lru_cache
from typing import Any, Callable, Dict, Mapping, Optional

from jwt_codec.claims import ClaimSet
from jwt_codec.config.codec_config import get_codec_config
from jwt_codec.security.algorithms import Algorithm
from jwt_codec.security.token_operations import KeyResolver, TokenOperations


@lru_cache()
def get_token_operations() -> TokenOperations:
    """
    Get a cached TokenOperations instance configured from jwt_codec.yaml.
    """
    config = get_codec_config()
    return TokenOperations(
        sort_keys=config.sort_keys,
        ensure_ascii=config.ensure_ascii,
        allow_none=config.allow_none_algorithm,
    )


def encode(payload: Mapping[str, Any], algorithm: Algorithm) -> str:
    """Encode and sign a claims mapping with the shared TokenOperations."""
    return get_token_operations().encode(payload, algorithm)


def encode_claims(claims: ClaimSet, algorithm: Algorithm) -> str:
    """Encode and sign a ClaimSet."""
    return get_token_operations().encode_claims(claims, algorithm)


def encode_with(algorithm: Algorithm, build: Callable[[ClaimSet], None]) -> str:
    """Encode claims populated by a builder callable."""
    return get_token_operations().encode_with(algorithm, build)


def decode(
    token: str, key_resolver: KeyResolver, allow_none: Optional[bool] = None
) -> Dict[str, Any]:
    """Verify a token and return its claims."""
    return get_token_operations().decode(token, key_resolver, allow_none=allow_none)


def get_unverified_header(token: str) -> Dict[str, Any]:
    """Read a token header WITHOUT verification."""
    return get_token_operations().get_unverified_header(token)


def decode_unverified(token: str) -> Dict[str, Any]:
    """Read token claims WITHOUT verification. Debugging only."""
    return get_token_operations().decode_unverified(token)
