"""
Pytest configuration and fixtures for testing.
"""
import pytest

from jwt_codec.api import get_token_operations
from jwt_codec.config.codec_config import get_codec_config
from jwt_codec.config.jwt_config import get_jwt_config
from jwt_codec.security.algorithms import Algorithm
from jwt_codec.security.key_manager import KeyManager
from jwt_codec.security.token_operations import TokenOperations


@pytest.fixture
def secret():
    """Shared HMAC secret used across tests."""
    return b"super-secret-test-key"


@pytest.fixture(params=["HS256", "HS384", "HS512"])
def hmac_algorithm(request, secret):
    """Each HMAC algorithm bound to the test secret."""
    return Algorithm.from_descriptor(request.param, secret)


@pytest.fixture
def key_manager(secret):
    """Key manager accepting every HMAC algorithm with the test secret."""
    return KeyManager({"HS256": secret, "HS384": secret, "HS512": secret})


@pytest.fixture
def token_ops():
    """Token operations with default serialization options."""
    return TokenOperations()


@pytest.fixture
def sample_claims():
    """A claims mapping exercising every JSON value type."""
    return {
        "sub": "1234567890",
        "name": "John Doe",
        "admin": True,
        "iat": 1516239022,
        "score": 9.5,
        "nickname": None,
        "roles": ["reader", "writer"],
        "profile": {"locale": "zh-CN", "city": "上海"},
    }


@pytest.fixture(autouse=True)
def clear_cached_config():
    """Clear cached configuration so env/YAML changes apply per test."""
    get_codec_config.cache_clear()
    get_jwt_config.cache_clear()
    get_token_operations.cache_clear()
    yield
    get_codec_config.cache_clear()
    get_jwt_config.cache_clear()
    get_token_operations.cache_clear()
