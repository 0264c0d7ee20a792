"""Codec configuration from YAML file."""
import logging
import os
from functools import lru_cache
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class CodecConfig(BaseModel):
    """Token codec options from jwt_codec.yaml."""

    sort_keys: bool = Field(
        default=True,
        description="Serialize header and payload with lexicographically sorted keys"
    )
    ensure_ascii: bool = Field(
        default=False,
        description="Escape non-ASCII characters in serialized JSON"
    )
    allow_none_algorithm: bool = Field(
        default=False,
        description="Whether decoding accepts unsigned 'none' tokens"
    )

    @classmethod
    def from_yaml(cls, config_path: Optional[str] = None) -> "CodecConfig":
        """
        Load codec configuration from YAML file.

        Args:
            config_path: Path to the YAML file. If None, uses JWT_CODEC_CONFIG
                        env var or defaults to ./jwt_codec.yaml

        Returns:
            CodecConfig instance
        """
        if config_path is None:
            config_path = os.getenv("JWT_CODEC_CONFIG", "jwt_codec.yaml")

        # If file doesn't exist, return default config
        if not os.path.exists(config_path):
            logger.info("Codec config %s not found, using defaults", config_path)
            return cls()

        try:
            with open(config_path, "r") as f:
                config_data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Could not read codec config %s: %s", config_path, e)
            return cls()

        if not isinstance(config_data, dict):
            logger.warning("Codec config %s is not a mapping, using defaults", config_path)
            return cls()

        try:
            return cls(
                sort_keys=config_data.get("SORT_KEYS", True),
                ensure_ascii=config_data.get("ENSURE_ASCII", False),
                allow_none_algorithm=config_data.get("ALLOW_NONE_ALGORITHM", False),
            )
        except ValidationError as e:
            logger.warning("Invalid codec config %s, using defaults: %s", config_path, e)
            return cls()


@lru_cache()
def get_codec_config() -> CodecConfig:
    """
    Get cached codec configuration.

    Returns:
        CodecConfig instance
    """
    return CodecConfig.from_yaml()
