"""
Signing algorithms supported by the token codec.

The set of algorithms is closed: ``none`` and HMAC over SHA-256, SHA-384 and
SHA-512. Each ``Algorithm`` carries its variant tag and, for the HMAC
variants, the symmetric key.
"""
import logging
from enum import Enum
from typing import Dict, Optional, Union

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import constant_time, hashes, hmac
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .exceptions import SigningFailureError, UnsupportedAlgorithmError

logger = logging.getLogger(__name__)

KeyMaterial = Union[bytes, str]


class AlgorithmKind(str, Enum):
    """Algorithm descriptors as written into the token header."""
    NONE = "none"
    HS256 = "HS256"
    HS384 = "HS384"
    HS512 = "HS512"


_HASHES: Dict[AlgorithmKind, type] = {
    AlgorithmKind.HS256: hashes.SHA256,
    AlgorithmKind.HS384: hashes.SHA384,
    AlgorithmKind.HS512: hashes.SHA512,
}


def _to_bytes(message: KeyMaterial) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    return bytes(message)


class Algorithm(BaseModel):
    """
    A signing algorithm bound to its key material.

    Use the named constructors rather than building instances directly:

        Algorithm.none()
        Algorithm.hs256(b"secret")
        Algorithm.from_descriptor("HS512", "secret")
    """
    model_config = ConfigDict(frozen=True)

    kind: AlgorithmKind
    key: bytes = Field(default=b"", repr=False)

    @model_validator(mode="after")
    def check_key(self) -> "Algorithm":
        if self.kind is AlgorithmKind.NONE and self.key:
            raise ValueError("The 'none' algorithm does not take a key")
        if self.kind is not AlgorithmKind.NONE and not self.key:
            raise ValueError(f"{self.kind.value} requires a non-empty key")
        return self

    @classmethod
    def none(cls) -> "Algorithm":
        """Unsigned tokens. Insecure, for interop and testing only."""
        return cls(kind=AlgorithmKind.NONE)

    @classmethod
    def hs256(cls, key: KeyMaterial) -> "Algorithm":
        """HMAC using SHA-256."""
        return cls(kind=AlgorithmKind.HS256, key=_to_bytes(key))

    @classmethod
    def hs384(cls, key: KeyMaterial) -> "Algorithm":
        """HMAC using SHA-384."""
        return cls(kind=AlgorithmKind.HS384, key=_to_bytes(key))

    @classmethod
    def hs512(cls, key: KeyMaterial) -> "Algorithm":
        """HMAC using SHA-512."""
        return cls(kind=AlgorithmKind.HS512, key=_to_bytes(key))

    @classmethod
    def from_descriptor(
        cls, descriptor: str, key: Optional[KeyMaterial] = None
    ) -> "Algorithm":
        """
        Build an algorithm from its header descriptor.

        Args:
            descriptor: One of "none", "HS256", "HS384", "HS512"
            key: Key material, required for the HMAC variants

        Returns:
            The matching Algorithm

        Raises:
            UnsupportedAlgorithmError: If the descriptor is unknown
            ValueError: If the key does not fit the variant
        """
        try:
            kind = AlgorithmKind(descriptor)
        except ValueError as e:
            raise UnsupportedAlgorithmError(
                f"Unsupported algorithm: {descriptor!r}"
            ) from e
        return cls(kind=kind, key=_to_bytes(key) if key is not None else b"")

    @property
    def descriptor(self) -> str:
        return self.kind.value

    @property
    def is_secure(self) -> bool:
        return self.kind is not AlgorithmKind.NONE

    def sign(self, message: KeyMaterial) -> bytes:
        """
        Sign a message.

        Args:
            message: The signing input; text is encoded as UTF-8

        Returns:
            The raw signature bytes (empty for ``none``)

        Raises:
            SigningFailureError: If the MAC primitive fails
        """
        if self.kind is AlgorithmKind.NONE:
            return b""

        data = _to_bytes(message)
        try:
            mac = hmac.HMAC(self.key, _HASHES[self.kind]())
            mac.update(data)
            return mac.finalize()
        except (UnsupportedAlgorithm, TypeError, ValueError) as e:
            logger.error("HMAC computation failed for %s: %s", self.descriptor, e)
            raise SigningFailureError(
                f"{self.descriptor} signing failed: {e}"
            ) from e

    def verify(self, message: KeyMaterial, signature: bytes) -> bool:
        """
        Check a signature against a message in constant time.

        Args:
            message: The signing input
            signature: The raw signature bytes

        Returns:
            True if the signature matches, False otherwise
        """
        expected = self.sign(message)
        if len(expected) != len(signature):
            return False
        return constant_time.bytes_eq(expected, bytes(signature))

    def __str__(self) -> str:
        return self.descriptor
