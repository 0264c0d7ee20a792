"""
Key manager resolving header algorithm descriptors to caller-supplied keys.
"""
import logging
from typing import Dict, List, Mapping, Optional

from .algorithms import Algorithm, AlgorithmKind, KeyMaterial
from .exceptions import UnsupportedAlgorithmError

logger = logging.getLogger(__name__)


class KeyManager:
    """
    Maps algorithm descriptors to the keys a verifier is willing to accept.

    Only descriptors registered here can ever be selected by a token header,
    so a token cannot switch the verifier to an algorithm or key it did not
    configure.
    """

    def __init__(self, keys: Mapping[str, KeyMaterial], allow_none: bool = False):
        """
        Initialize the key manager.

        Args:
            keys: Dictionary mapping descriptor (e.g. "HS256") -> key material
            allow_none: Whether unsigned ``none`` tokens are resolvable
        """
        self.allow_none = allow_none
        self._algorithms: Dict[str, Algorithm] = {}
        for descriptor, key in keys.items():
            if descriptor == AlgorithmKind.NONE.value:
                raise ValueError("Register 'none' with allow_none, not with a key")
            self._algorithms[descriptor] = Algorithm.from_descriptor(descriptor, key)
        if allow_none:
            self._algorithms[AlgorithmKind.NONE.value] = Algorithm.none()

    @classmethod
    def for_algorithm(cls, algorithm: Algorithm) -> "KeyManager":
        """Build a key manager accepting exactly one algorithm."""
        if not algorithm.is_secure:
            return cls({}, allow_none=True)
        return cls({algorithm.descriptor: algorithm.key})

    @property
    def algorithms(self) -> List[str]:
        """Descriptors this manager accepts."""
        return list(self._algorithms)

    def resolve(self, descriptor: str) -> Algorithm:
        """
        Get the algorithm for a header descriptor.

        Args:
            descriptor: The ``alg`` value from the token header

        Returns:
            The configured Algorithm

        Raises:
            UnsupportedAlgorithmError: If the descriptor is not registered
        """
        if descriptor not in self._algorithms:
            raise UnsupportedAlgorithmError(
                f"Invalid algorithm: {descriptor}. Only {self.algorithms} allowed."
            )
        return self._algorithms[descriptor]

    def __call__(self, descriptor: str) -> Optional[Algorithm]:
        try:
            return self.resolve(descriptor)
        except UnsupportedAlgorithmError:
            logger.debug("No key registered for algorithm %s", descriptor)
            return None

    def __repr__(self) -> str:
        return f"KeyManager(algorithms={self.algorithms!r})"
