import os
from functools import lru_cache

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

from jwt_codec.security.algorithms import Algorithm, AlgorithmKind
from jwt_codec.security.key_manager import KeyManager


class JWTConfig(BaseModel):
    """
    JWT key configuration used to sign and verify tokens.
    """
    algorithm: str = Field(default="HS256", description="Signing algorithm descriptor")
    secret: str = Field(default="", repr=False, description="Shared HMAC secret")

    @classmethod
    def from_env(cls) -> "JWTConfig":
        """
        Load JWT configuration from environment variables.

        Environment variables:
            JWT_ALGORITHM: Algorithm descriptor (default: HS256)
            JWT_SECRET: Shared HMAC secret

        Returns:
            JWTConfig instance
        """
        algorithm = os.getenv("JWT_ALGORITHM", "HS256")
        secret = os.getenv("JWT_SECRET", "")

        if algorithm != AlgorithmKind.NONE.value and not secret:
            raise ValueError("JWT_SECRET environment variable is required")

        return cls(algorithm=algorithm, secret=secret)

    def to_algorithm(self) -> Algorithm:
        """Build the signing algorithm."""
        if self.algorithm == AlgorithmKind.NONE.value:
            return Algorithm.none()
        return Algorithm.from_descriptor(self.algorithm, self.secret)

    def to_key_manager(self) -> KeyManager:
        """Build a key manager that accepts only the configured algorithm."""
        return KeyManager.for_algorithm(self.to_algorithm())


@lru_cache()
def get_jwt_config() -> JWTConfig:
    """
    Get cached JWT configuration loaded from the environment and .env file.
    """
    load_dotenv(find_dotenv(usecwd=True))
    return JWTConfig.from_env()
