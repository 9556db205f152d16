"""
Grantha - Configuration

Centralized configuration for the CLI and the collaborator adapters.
Uses environment variables (optionally from a .env file) with sensible
defaults. The reference and reshaping cores need no configuration.
"""
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from core.errors import GranthaConfigError

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Deployment environments."""
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


def _env_int(key: str, default: str) -> int:
    raw = os.getenv(key, default)
    try:
        return int(raw)
    except ValueError as e:
        raise GranthaConfigError(
            f"{key} must be an integer, got {raw!r}",
            config_key=key, expected_type=int, actual_value=raw, cause=e,
        ) from e


def _env_float(key: str, default: str) -> float:
    raw = os.getenv(key, default)
    try:
        return float(raw)
    except ValueError as e:
        raise GranthaConfigError(
            f"{key} must be a number, got {raw!r}",
            config_key=key, expected_type=float, actual_value=raw, cause=e,
        ) from e


def _env_environment() -> Environment:
    raw = os.getenv("ENVIRONMENT", "development").lower()
    try:
        return Environment(raw)
    except ValueError as e:
        raise GranthaConfigError(
            f"Unknown ENVIRONMENT {raw!r}",
            config_key="ENVIRONMENT", actual_value=raw, cause=e,
            suggestions=[env.value for env in Environment],
        ) from e


@dataclass
class GenerationConfig:
    """Text generation (LLM) configuration."""
    model: str = field(default_factory=lambda: os.getenv("GENERATION_MODEL", "gemini-2.5-flash-lite"))

    # Pacing
    min_gap_seconds: float = field(default_factory=lambda: _env_float("GENERATION_MIN_GAP_SECONDS", "1.5"))
    cooldown_seconds: float = field(default_factory=lambda: _env_float("GENERATION_COOLDOWN_SECONDS", "4.0"))
    max_attempts: int = field(default_factory=lambda: _env_int("GENERATION_MAX_ATTEMPTS", "2"))


@dataclass
class BibleApiConfig:
    """Verse text service configuration."""
    base_url: str = field(default_factory=lambda: os.getenv("BIBLE_API_BASE_URL", "https://bible-api.com"))
    timeout: float = field(default_factory=lambda: _env_float("BIBLE_API_TIMEOUT", "15"))
    telugu_bible_path: Optional[Path] = field(
        default_factory=lambda: Path(os.environ["TELUGU_BIBLE_PATH"]) if os.getenv("TELUGU_BIBLE_PATH") else None
    )


@dataclass
class CacheConfig:
    """Analysis result cache configuration."""
    max_size: int = field(default_factory=lambda: _env_int("ANALYSIS_CACHE_MAX_SIZE", "512"))
    ttl_seconds: Optional[float] = field(
        default_factory=lambda: _env_float("ANALYSIS_CACHE_TTL_SECONDS", "0") or None
    )


@dataclass
class Config:
    """Main configuration class combining all sub-configs."""
    env: Environment = field(default_factory=_env_environment)
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")

    generation: GenerationConfig = field(default_factory=GenerationConfig)
    bible_api: BibleApiConfig = field(default_factory=BibleApiConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)

    def __post_init__(self):
        if self.cache.max_size < 1:
            raise GranthaConfigError(
                "ANALYSIS_CACHE_MAX_SIZE must be at least 1",
                config_key="ANALYSIS_CACHE_MAX_SIZE",
                actual_value=self.cache.max_size,
            )
        if self.generation.max_attempts < 1:
            raise GranthaConfigError(
                "GENERATION_MAX_ATTEMPTS must be at least 1",
                config_key="GENERATION_MAX_ATTEMPTS",
                actual_value=self.generation.max_attempts,
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "env": self.env.value,
            "debug": self.debug,
            "generation": {
                "model": self.generation.model,
                "min_gap_seconds": self.generation.min_gap_seconds,
                "cooldown_seconds": self.generation.cooldown_seconds,
            },
            "bible_api": {
                "base_url": self.bible_api.base_url,
                "timeout": self.bible_api.timeout,
                "telugu_bible_path": str(self.bible_api.telugu_bible_path or ""),
            },
            "cache": {
                "max_size": self.cache.max_size,
                "ttl_seconds": self.cache.ttl_seconds,
            },
        }


# Singleton configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create configuration singleton."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reload_config() -> Config:
    """Reload configuration from environment."""
    global _config
    load_dotenv(override=True)
    _config = Config()
    return _config
