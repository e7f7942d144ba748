"""
Configuration settings for the visualizer server.
Environment variables override defaults.
"""
import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Server and playback configuration"""

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 5000
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Playback
    DEFAULT_INTERVAL_MS: int = 600
    AUTO_PLAY: bool = True

    # Random insert range (inclusive)
    RANDOM_MIN: int = 0
    RANDOM_MAX: int = 99
    RANDOM_SEED: Optional[int] = None

    def __post_init__(self):
        """Load from environment variables"""
        for key in self.__dataclass_fields__:
            env_value = os.getenv(key)
            if env_value is not None:
                field_type = self.__dataclass_fields__[key].type
                if field_type == bool:
                    setattr(self, key, env_value.lower() in ("true", "1", "yes"))
                elif field_type in (int, Optional[int]):
                    setattr(self, key, int(env_value))
                else:
                    setattr(self, key, env_value)


# Global settings instance
settings = Settings()
