"""
Tests for the key manager.
"""
import pytest

from jwt_codec.security.algorithms import Algorithm
from jwt_codec.security.exceptions import UnsupportedAlgorithmError
from jwt_codec.security.key_manager import KeyManager


class TestKeyManager:
    """Tests for KeyManager class."""

    def test_resolve_registered(self, secret):
        """Test resolving a registered descriptor."""
        km = KeyManager({"HS256": secret})
        assert km.resolve("HS256") == Algorithm.hs256(secret)

    def test_resolve_unregistered(self, secret):
        """Test error on a descriptor with no key."""
        km = KeyManager({"HS256": secret})
        with pytest.raises(UnsupportedAlgorithmError):
            km.resolve("HS512")

    def test_none_not_resolvable_by_default(self, secret):
        """Test none is rejected unless allowed."""
        km = KeyManager({"HS256": secret})
        with pytest.raises(UnsupportedAlgorithmError):
            km.resolve("none")

    def test_none_resolvable_when_allowed(self):
        """Test allow_none registers the none algorithm."""
        km = KeyManager({}, allow_none=True)
        assert km.resolve("none") == Algorithm.none()
        assert km.algorithms == ["none"]

    def test_none_with_key_rejected(self):
        """Test a key cannot be registered for none."""
        with pytest.raises(ValueError):
            KeyManager({"none": b"secret"})

    def test_unknown_descriptor_rejected(self):
        """Test unknown descriptors fail at construction."""
        with pytest.raises(UnsupportedAlgorithmError):
            KeyManager({"RS256": b"secret"})

    def test_call_returns_none_for_unregistered(self, secret):
        """Test the callable form returns None instead of raising."""
        km = KeyManager({"HS256": secret})
        assert km("HS384") is None
        assert km("HS256") == Algorithm.hs256(secret)

    def test_algorithms(self, key_manager):
        """Test listing registered descriptors."""
        assert sorted(key_manager.algorithms) == ["HS256", "HS384", "HS512"]

    def test_for_algorithm(self, secret):
        """Test building a manager for exactly one algorithm."""
        km = KeyManager.for_algorithm(Algorithm.hs384(secret))
        assert km.algorithms == ["HS384"]
        assert km.resolve("HS384").key == secret

    def test_for_none_algorithm(self):
        """Test building a manager for the none algorithm."""
        km = KeyManager.for_algorithm(Algorithm.none())
        assert km.algorithms == ["none"]

    def test_repr_hides_keys(self, secret):
        """Test keys never appear in repr."""
        km = KeyManager({"HS256": secret})
        assert secret.decode() not in repr(km)
        assert "HS256" in repr(km)
