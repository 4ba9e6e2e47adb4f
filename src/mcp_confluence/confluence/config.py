"""Configuration module for the Confluence API client."""

import logging
import os
from dataclasses import dataclass

from ..exceptions import ConfigurationError
from ..models.constants import (
    DEFAULT_LOG_FILE,
    DEFAULT_LOG_MAX_SIZE_MB,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_SPACE_CACHE_TTL,
)
from ..utils.env import get_env_int, is_env_truthy
from .utils import is_space_allowed

logger = logging.getLogger("mcp-confluence.confluence.config")

REQUIRED_ENV_VARS = (
    "CONFLUENCE_BASE_URL",
    "CONFLUENCE_USERNAME",
    "CONFLUENCE_API_TOKEN",
    "ALLOWED_SPACES",
)


def parse_allowed_spaces(raw: str) -> list[str]:
    """Split a comma-separated allowlist, keeping order and dropping blanks."""
    return [space.strip() for space in raw.split(",") if space.strip()]


@dataclass(frozen=True)
class ConfluenceConfig:
    """Confluence API configuration.

    Holds the site URL, basic-auth credentials and the allowlist of space
    keys every tool is restricted to. Immutable for the process lifetime.
    """

    base_url: str  # Site URL without the /wiki suffix
    username: str
    api_token: str
    allowed_spaces: tuple[str, ...] = ()
    debug: bool = False
    log_file: str = DEFAULT_LOG_FILE
    log_max_size_mb: int = DEFAULT_LOG_MAX_SIZE_MB
    space_cache_ttl: int = DEFAULT_SPACE_CACHE_TTL
    timeout: int = DEFAULT_REQUEST_TIMEOUT
    ssl_verify: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        object.__setattr__(self, "allowed_spaces", tuple(self.allowed_spaces))

    @property
    def wiki_url(self) -> str:
        """Root both API versions are addressed from."""
        return f"{self.base_url}/wiki"

    @property
    def log_max_size_bytes(self) -> int:
        return self.log_max_size_mb * 1024 * 1024

    def is_space_allowed(self, space_key: str | None) -> bool:
        return is_space_allowed(space_key, self.allowed_spaces)

    @classmethod
    def from_env(cls) -> "ConfluenceConfig":
        """Create configuration from environment variables.

        Returns:
            ConfluenceConfig with values from environment variables

        Raises:
            ConfigurationError: If any required environment variable is missing
        """
        for env_var in REQUIRED_ENV_VARS:
            if not os.getenv(env_var, "").strip():
                raise ConfigurationError(
                    f"{env_var} environment variable is required"
                )

        allowed_spaces = parse_allowed_spaces(os.environ["ALLOWED_SPACES"])
        if not allowed_spaces:
            raise ConfigurationError(
                "ALLOWED_SPACES must list at least one space key"
            )

        try:
            log_max_size_mb = get_env_int(
                "CONFLUENCE_LOG_MAX_SIZE_MB", DEFAULT_LOG_MAX_SIZE_MB
            )
            space_cache_ttl = get_env_int(
                "CONFLUENCE_SPACE_CACHE_TTL", DEFAULT_SPACE_CACHE_TTL
            )
            timeout = get_env_int("CONFLUENCE_TIMEOUT", DEFAULT_REQUEST_TIMEOUT)
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric setting: {e}") from e

        config = cls(
            base_url=os.environ["CONFLUENCE_BASE_URL"].strip(),
            username=os.environ["CONFLUENCE_USERNAME"].strip(),
            api_token=os.environ["CONFLUENCE_API_TOKEN"].strip(),
            allowed_spaces=allowed_spaces,
            debug=is_env_truthy("DEBUG"),
            log_file=os.getenv("CONFLUENCE_LOG_FILE", DEFAULT_LOG_FILE),
            log_max_size_mb=log_max_size_mb,
            space_cache_ttl=space_cache_ttl,
            timeout=timeout,
            ssl_verify=is_env_truthy("CONFLUENCE_SSL_VERIFY", "true"),
        )
        logger.debug(
            f"Loaded Confluence config for {config.base_url} "
            f"(allowed spaces: {', '.join(config.allowed_spaces)})"
        )
        return config
