from .codec_config import CodecConfig, get_codec_config
from .jwt_config import JWTConfig, get_jwt_config

__all__ = [
    "CodecConfig",
    "get_codec_config",
    "JWTConfig",
    "get_jwt_config",
]
