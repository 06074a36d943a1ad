"""
Runtime configuration for naver-maps-mcp.

Settings are read from the environment once and passed explicitly to the
Naver client; changing credentials means building a new ``Settings`` and
calling ``NaverMapsClient.reload``.
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from .constants import EnvVar, ErrorMessages, NaverApiConfig, ServerConfig
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent

_TRUE_VALUES = {"1", "true", "yes", "on"}


def find_env_file() -> Path | None:
    """Locate a .env file: working directory and its parents first, then the project root."""
    found = find_dotenv(usecwd=True)
    if found:
        return Path(found)
    candidate = PROJECT_ROOT / ".env"
    if candidate.exists():
        return candidate
    return None


def load_env_file() -> Path | None:
    """Load the nearest .env file into the process environment, if any."""
    env_path = find_env_file()
    if env_path is None:
        logger.debug(".env file not found, using process environment only")
        return None
    load_dotenv(env_path)
    logger.debug("Loaded environment from %s", env_path)
    return env_path


def _flag(value: str | None) -> bool:
    return value is not None and value.strip().lower() in _TRUE_VALUES


class Settings(BaseModel):
    """Process configuration for the Naver Maps client and server."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    client_id: str | None = Field(None, description="NCP API Gateway client id")
    client_secret: str | None = Field(None, description="NCP API Gateway client secret")
    base_url: str = Field(NaverApiConfig.BASE_URL, description="Naver Maps API base URL")
    port: int = Field(ServerConfig.DEFAULT_PORT, description="HTTP transport port", ge=1, le=65535)
    log_level: str = Field("info", description="Logging level name")
    debug: bool = Field(False, description="Verbose request logging")
    timeout_seconds: float = Field(
        NaverApiConfig.TIMEOUT_MS / 1000, description="Per-request timeout in seconds", gt=0
    )
    retries: int = Field(
        NaverApiConfig.RETRIES, description="Configured retry count (not applied)", ge=0
    )
    use_dummy_data_when_error: bool = Field(
        False, description="Return synthetic geocoding data when the API call fails"
    )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            Settings with documented defaults for anything unset
        """
        env = os.environ if environ is None else environ
        timeout_ms = int(env.get(EnvVar.API_TIMEOUT) or NaverApiConfig.TIMEOUT_MS)
        return cls(
            client_id=env.get(EnvVar.NAVER_CLIENT_ID) or None,
            client_secret=env.get(EnvVar.NAVER_CLIENT_SECRET) or None,
            base_url=env.get(EnvVar.NAVER_API_BASE_URL) or NaverApiConfig.BASE_URL,
            port=int(env.get(EnvVar.PORT) or ServerConfig.DEFAULT_PORT),
            log_level=(env.get(EnvVar.LOG_LEVEL) or "info").lower(),
            debug=_flag(env.get(EnvVar.DEBUG)),
            timeout_seconds=timeout_ms / 1000,
            retries=int(env.get(EnvVar.API_RETRIES) or NaverApiConfig.RETRIES),
            use_dummy_data_when_error=_flag(env.get(EnvVar.USE_DUMMY_DATA_WHEN_ERROR)),
        )

    @property
    def missing_credentials(self) -> list[str]:
        """Names of the credential variables that are not set."""
        missing = []
        if not self.client_id:
            missing.append(EnvVar.NAVER_CLIENT_ID)
        if not self.client_secret:
            missing.append(EnvVar.NAVER_CLIENT_SECRET)
        return missing

    @property
    def has_credentials(self) -> bool:
        return not self.missing_credentials

    def require_credentials(self) -> None:
        """Raise ConfigurationError when either credential is missing."""
        missing = self.missing_credentials
        if missing:
            raise ConfigurationError(ErrorMessages.MISSING_CREDENTIALS.format(", ".join(missing)))

    @property
    def logging_level(self) -> int:
        """Numeric logging level; ``debug`` forces DEBUG."""
        if self.debug:
            return logging.DEBUG
        return getattr(logging, self.log_level.upper(), logging.INFO)
