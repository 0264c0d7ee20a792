"""
JWT token operations for encoding, verification, and decoding.
"""
import json
import logging
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

from ..claims import ClaimSet
from .algorithms import Algorithm
from .base64url import b64url_decode, b64url_encode
from .exceptions import (
    DecodeError,
    InvalidClaimsError,
    MalformedHeaderError,
    MalformedPayloadError,
    MalformedTokenError,
    SignatureMismatchError,
    UnsupportedAlgorithmError,
)
from .key_manager import KeyManager

logger = logging.getLogger(__name__)

Resolver = Callable[[str], Optional[Algorithm]]
KeyResolver = Union[Algorithm, KeyManager, Resolver]


class TokenOperations:
    """
    Encodes claims into signed tokens and decodes tokens back into claims.

    Instances hold only serialization options and are safe to share.
    """

    HEADER_TYPE = "JWT"

    def __init__(
        self,
        sort_keys: bool = True,
        ensure_ascii: bool = False,
        allow_none: bool = False,
    ):
        """
        Initialize token operations.

        Args:
            sort_keys: Serialize JSON with lexicographically sorted keys
            ensure_ascii: Escape non-ASCII characters in serialized JSON
            allow_none: Default for accepting unsigned ``none`` tokens on decode
        """
        self.sort_keys = sort_keys
        self.ensure_ascii = ensure_ascii
        self.allow_none = allow_none

    @classmethod
    def _check_names(cls, value: Any) -> None:
        # json.dumps would silently stringify non-str keys at any depth
        if isinstance(value, Mapping):
            for name, item in value.items():
                if not isinstance(name, str):
                    raise InvalidClaimsError(f"Claim names must be strings, got {name!r}")
                cls._check_names(item)
        elif isinstance(value, (list, tuple)):
            for item in value:
                cls._check_names(item)

    @staticmethod
    def _reject_constant(name: str) -> Any:
        raise ValueError(f"{name} is not valid JSON")

    @classmethod
    def _loads(cls, raw: bytes) -> Any:
        return json.loads(raw, parse_constant=cls._reject_constant)

    def _serialize(self, obj: Mapping[str, Any]) -> bytes:
        return json.dumps(
            obj,
            separators=(",", ":"),
            sort_keys=self.sort_keys,
            ensure_ascii=self.ensure_ascii,
            allow_nan=False,
        ).encode("utf-8")

    def encode(self, payload: Mapping[str, Any], algorithm: Algorithm) -> str:
        """
        Encode and sign a payload.

        Args:
            payload: Claims mapping with string keys and JSON values
            algorithm: The algorithm to sign the payload with

        Returns:
            The JSON web token as a string

        Raises:
            InvalidClaimsError: If the payload is not JSON-serializable
            SigningFailureError: If the signature cannot be computed
        """
        if not isinstance(payload, Mapping):
            raise InvalidClaimsError(
                f"Claims must be a mapping, got {type(payload).__name__}"
            )
        if not algorithm.is_secure:
            logger.warning("Encoding an unsigned token with alg 'none'")

        header = {"typ": self.HEADER_TYPE, "alg": algorithm.descriptor}
        try:
            self._check_names(payload)
            body = self._serialize(dict(payload))
        except RecursionError as e:
            raise InvalidClaimsError("Claims are nested too deeply") from e
        except (TypeError, ValueError) as e:
            raise InvalidClaimsError(f"Claims are not JSON-serializable: {e}") from e

        signing_input = f"{b64url_encode(self._serialize(header))}.{b64url_encode(body)}"
        signature = algorithm.sign(signing_input)

        logger.debug("Encoded token with alg %s", algorithm.descriptor)
        return f"{signing_input}.{b64url_encode(signature)}"

    def encode_claims(self, claims: ClaimSet, algorithm: Algorithm) -> str:
        """Encode a ClaimSet."""
        return self.encode(claims, algorithm)

    def encode_with(
        self, algorithm: Algorithm, build: Callable[[ClaimSet], None]
    ) -> str:
        """
        Encode claims assembled by a builder callable.

        Args:
            algorithm: The algorithm to sign the claims with
            build: Called with a fresh ClaimSet to populate

        Returns:
            The JSON web token as a string
        """
        claims = ClaimSet()
        build(claims)
        return self.encode(claims, algorithm)

    @staticmethod
    def _split(token: str) -> Tuple[str, str, str, bytes, bytes, bytes]:
        if not isinstance(token, str):
            raise MalformedTokenError("Token must be a string")

        parts = token.split(".")
        if len(parts) != 3:
            raise MalformedTokenError(
                f"Token must have 3 segments, got {len(parts)}"
            )

        header_b64, payload_b64, signature_b64 = parts
        return (
            header_b64,
            payload_b64,
            signature_b64,
            b64url_decode(header_b64),
            b64url_decode(payload_b64),
            b64url_decode(signature_b64),
        )

    @classmethod
    def _parse_header(cls, raw: bytes) -> Dict[str, Any]:
        try:
            header = cls._loads(raw)
        except (ValueError, RecursionError) as e:
            raise MalformedHeaderError("Token header is not valid JSON") from e
        if not isinstance(header, dict):
            raise MalformedHeaderError("Token header is not a JSON object")
        if not isinstance(header.get("alg"), str):
            raise MalformedHeaderError("Token header missing 'alg'")
        return header

    @classmethod
    def _parse_payload(cls, raw: bytes) -> Dict[str, Any]:
        try:
            payload = cls._loads(raw)
        except (ValueError, RecursionError) as e:
            raise MalformedPayloadError("Token payload is not valid JSON") from e
        if not isinstance(payload, dict):
            raise MalformedPayloadError("Token payload is not a JSON object")
        return payload

    def _resolve(
        self, descriptor: str, key_resolver: KeyResolver, allow_none: bool
    ) -> Algorithm:
        if isinstance(key_resolver, Algorithm):
            algorithm = key_resolver
        elif isinstance(key_resolver, KeyManager):
            algorithm = key_resolver.resolve(descriptor)
        else:
            algorithm = key_resolver(descriptor)

        if algorithm is None:
            raise UnsupportedAlgorithmError(f"No key available for algorithm: {descriptor}")

        # The header may only confirm the caller's algorithm, never pick another
        if algorithm.descriptor != descriptor:
            raise UnsupportedAlgorithmError(
                f"Token algorithm {descriptor} does not match expected "
                f"{algorithm.descriptor}"
            )

        if not algorithm.is_secure:
            if not allow_none:
                raise UnsupportedAlgorithmError(
                    "Unsigned tokens require allow_none=True"
                )
            logger.warning("Accepting an unsigned token with alg 'none'")

        return algorithm

    def decode(
        self,
        token: str,
        key_resolver: KeyResolver,
        allow_none: Optional[bool] = None,
    ) -> Dict[str, Any]:
        """
        Verify and decode a JWT token.

        Args:
            token: JWT token string to verify
            key_resolver: The expected Algorithm, a KeyManager, or a callable
                mapping the header's ``alg`` to an Algorithm (or None)
            allow_none: Accept unsigned ``none`` tokens; defaults to the
                instance setting

        Returns:
            Decoded token payload as dictionary

        Raises:
            MalformedTokenError: If the token is not three base64url segments
            MalformedHeaderError: If the header is not a JSON object with 'alg'
            UnsupportedAlgorithmError: If the resolver rejects the algorithm
            SignatureMismatchError: If the signature is invalid
            MalformedPayloadError: If the payload is not a JSON object
        """
        if allow_none is None:
            allow_none = self.allow_none

        try:
            header_b64, payload_b64, _, raw_header, raw_payload, signature = self._split(token)
            header = self._parse_header(raw_header)
            algorithm = self._resolve(header["alg"], key_resolver, allow_none)

            if not algorithm.verify(f"{header_b64}.{payload_b64}", signature):
                raise SignatureMismatchError()

            payload = self._parse_payload(raw_payload)
        except DecodeError as e:
            logger.debug("Token rejected: %s (%s)", e.error_code, e.message)
            raise

        logger.debug("Decoded token with alg %s", algorithm.descriptor)
        return payload

    def get_unverified_header(self, token: str) -> Dict[str, Any]:
        """
        Decode a token header WITHOUT verification.

        Raises:
            MalformedTokenError: If the token cannot be split or decoded
            MalformedHeaderError: If the header is not a JSON object with 'alg'
        """
        _, _, _, raw_header, _, _ = self._split(token)
        return self._parse_header(raw_header)

    def decode_unverified(self, token: str) -> Dict[str, Any]:
        """
        Decode a JWT token WITHOUT verification.

        WARNING: This method does NOT verify the token signature.
        Use only for debugging and troubleshooting purposes.

        Raises:
            MalformedTokenError: If the token cannot be split or decoded
            MalformedHeaderError: If the header is not a JSON object with 'alg'
            MalformedPayloadError: If the payload is not a JSON object
        """
        _, _, _, raw_header, raw_payload, _ = self._split(token)
        self._parse_header(raw_header)
        return self._parse_payload(raw_payload)
