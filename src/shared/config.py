"""
Centralized configuration module for the Science Report function app.

Provides:
- Strict loading of the required YIELD_SCIENCE setting (no defaults)
- A load-once, thread-safe cache whose result is shared by every request
- Singleton access to ambient settings and startup validation
"""

import os
import re
import logging
import threading
from typing import Literal, Mapping, Optional, Self
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

logger = logging.getLogger(__name__)

YIELD_SCIENCE_KEY = "YIELD_SCIENCE"
DEFAULT_LOG_LEVEL = "INFO"

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


# =============================================================================
# RESULT TYPES
# =============================================================================


class ScienceSettings(BaseModel):
    """Validated science settings. Immutable once loaded."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    yield_science: int = Field(..., alias=YIELD_SCIENCE_KEY, description="Current science yield")

    @field_validator("yield_science", mode="before")
    @classmethod
    def validate_integer_text(cls, v: object) -> object:
        """Accept only plain decimal integers (no decimals, exponents or separators)"""
        if isinstance(v, str) and not _INTEGER_PATTERN.fullmatch(v):
            raise ValueError("must be a whole number such as 10 or -3")
        return v


class ConfigError(BaseModel):
    """Describes why a required setting could not be loaded."""

    model_config = ConfigDict(frozen=True)

    setting: str = Field(..., description="Environment variable name")
    reason: Literal["missing", "invalid"] = Field(..., description="Failure category")
    detail: str = Field(default="", description="Validation detail for server-side logs")

    @property
    def message(self) -> str:
        return f"Missing or invalid configuration for {self.setting}"


class MissingConfigError(Exception):
    """Raised by ConfigResult.unwrap() when configuration failed to load."""

    def __init__(self, error: ConfigError):
        super().__init__(error.message)
        self.error = error


class ConfigResult(BaseModel):
    """
    Outcome of a configuration load: settings on success, error on failure.

    Exactly one of the two fields is set.
    """

    model_config = ConfigDict(frozen=True)

    settings: Optional[ScienceSettings] = None
    error: Optional[ConfigError] = None

    @model_validator(mode="after")
    def validate_exclusive(self) -> Self:
        """Ensure a result is either a success or a failure, never both"""
        if (self.settings is None) == (self.error is None):
            raise ValueError("ConfigResult requires exactly one of settings or error")
        return self

    @property
    def ok(self) -> bool:
        return self.settings is not None

    def unwrap(self) -> ScienceSettings:
        """Return the settings or raise MissingConfigError."""
        if self.settings is None:
            raise MissingConfigError(self.error)
        return self.settings


# =============================================================================
# LOADER
# =============================================================================


def load_science_settings(env: Optional[Mapping[str, str]] = None) -> ConfigResult:
    """
    Read and validate YIELD_SCIENCE from an environment mapping.

    The key is looked up exactly once. Absence, a blank value, or a value
    that is not an integer all produce a failed result; nothing is defaulted.

    Args:
        env: Key-value source (default: os.environ)

    Returns:
        ConfigResult holding either ScienceSettings or ConfigError
    """
    if env is None:
        env = os.environ

    raw = env.get(YIELD_SCIENCE_KEY)
    if raw is None or not str(raw).strip():
        return ConfigResult(error=ConfigError(setting=YIELD_SCIENCE_KEY, reason="missing"))

    try:
        settings = ScienceSettings.model_validate({YIELD_SCIENCE_KEY: str(raw).strip()})
    except ValidationError as e:
        detail = "; ".join(err["msg"] for err in e.errors())
        return ConfigResult(error=ConfigError(setting=YIELD_SCIENCE_KEY, reason="invalid", detail=detail))

    return ConfigResult(settings=settings)


class ScienceConfigSource:
    """
    Load-once handle for the science settings.

    The first get() performs the load under a lock; all later calls (from
    any thread) return the same cached ConfigResult, success or failure.
    A failed load is never retried.
    """

    def __init__(self, env: Optional[Mapping[str, str]] = None):
        self._env = env if env is not None else os.environ
        self._lock = threading.Lock()
        self._result: Optional[ConfigResult] = None

    @property
    def loaded(self) -> bool:
        return self._result is not None

    def get(self) -> ConfigResult:
        if self._result is None:
            with self._lock:
                if self._result is None:
                    result = load_science_settings(self._env)
                    if result.ok:
                        logger.debug(f"{YIELD_SCIENCE_KEY} loaded: {result.settings.yield_science}")
                    else:
                        logger.error(f"Configuration load failed: {result.error.message} ({result.error.reason})")
                    self._result = result
        return self._result


# =============================================================================
# PROCESS CONFIG
# =============================================================================


class Config:
    """
    Centralized configuration with lazy loading and validation.

    Usage:
        from shared.config import config
        result = config.science.get()
        if result.ok:
            value = result.settings.yield_science
    """

    _instance: Optional["Config"] = None
    _initialized: bool = False

    def __new__(cls) -> "Config":
        """Singleton pattern - only one Config instance per process."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self) -> None:
        """Initialize config (only runs once due to singleton)."""
        if self._initialized:
            return

        self._initialized = True
        self.science = ScienceConfigSource()

        logger.debug("Config singleton initialized")

    @classmethod
    def reset(cls) -> "Config":
        """
        Reinitialize the process singleton in place.

        Every module holding `config` sees the fresh ScienceConfigSource, so
        the next request reloads YIELD_SCIENCE from the environment.
        """
        if cls._instance is None:
            return cls()
        cls._instance._initialized = False
        cls._instance.__init__()
        return cls._instance

    # =========================================================================
    # ENVIRONMENT
    # =========================================================================

    @property
    def environment(self) -> str:
        """Current environment (local, dev, staging, prod)."""
        return os.environ.get("ENVIRONMENT", "local")

    @property
    def log_level(self) -> str:
        """
        Logging level name, upper-cased.

        Unknown names fall back to INFO so a typo in LOG_LEVEL cannot break
        request handling.
        """
        raw = os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        if raw not in logging.getLevelNamesMapping():
            logger.warning(f"Unknown LOG_LEVEL {raw!r}, using {DEFAULT_LOG_LEVEL}")
            return DEFAULT_LOG_LEVEL
        return raw

    # =========================================================================
    # VALIDATION
    # =========================================================================

    def validate_required(self) -> list[str]:
        """
        Validate that all required configuration is present.

        Returns:
            List of missing or invalid configuration keys (empty if all present)
        """
        missing = []

        result = self.science.get()
        if not result.ok:
            missing.append(result.error.setting)

        if missing:
            logger.error(f"Missing required configuration: {missing}")

        return missing


# Global singleton instance
config = Config()
