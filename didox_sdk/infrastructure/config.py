"""
SDK configuration.

Centralizes partner credentials, target environment and request
timeout in one validated object. Values can be given explicitly or
read from the environment (a .env file is honored via python-dotenv).
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from didox_sdk.shared import (
    DEFAULT_ENVIRONMENT,
    DEFAULT_TIMEOUT_SECONDS,
    DEVELOPMENT_BASE_URL,
    PRODUCTION_BASE_URL,
    SUPPORTED_ENVIRONMENTS,
)
from didox_sdk.shared.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Environment variable names
ENV_PARTNER_TOKEN = "DIDOX_PARTNER_TOKEN"
ENV_ENVIRONMENT = "DIDOX_ENVIRONMENT"
ENV_TIMEOUT = "DIDOX_TIMEOUT"


@dataclass
class DidoxConfig:
    """
    Configuration for DidoxClient.

    Attributes:
        partner_token: Partner token issued by Didox
        environment: "development" (stage) or "production"
        timeout: Request timeout in seconds
    """

    partner_token: str
    environment: str = DEFAULT_ENVIRONMENT
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not self.partner_token or not isinstance(self.partner_token, str):
            raise ConfigurationError(
                message="partner_token is required and must be a non-empty string",
                config_key="partner_token",
                expected_type="non-empty str",
            )

        if self.environment not in SUPPORTED_ENVIRONMENTS:
            raise ConfigurationError(
                message=f"Unsupported environment: {self.environment}",
                config_key="environment",
                config_value=self.environment,
                expected_type=f"One of: {', '.join(SUPPORTED_ENVIRONMENTS)}",
            )

        if (
            isinstance(self.timeout, bool)
            or not isinstance(self.timeout, (int, float))
            or self.timeout <= 0
        ):
            raise ConfigurationError(
                message="timeout must be a positive number of seconds",
                config_key="timeout",
                config_value=self.timeout,
                expected_type="positive number",
            )

    @property
    def base_url(self) -> str:
        """API base URL for the configured environment."""
        if self.environment == "production":
            return PRODUCTION_BASE_URL
        return DEVELOPMENT_BASE_URL

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "DidoxConfig":
        """
        Build configuration from environment variables.

        Reads DIDOX_PARTNER_TOKEN, DIDOX_ENVIRONMENT and DIDOX_TIMEOUT,
        loading a .env file first. Variables already set in the process
        environment take precedence over the .env file.

        Args:
            dotenv_path: Optional explicit path to a .env file

        Returns:
            Validated configuration

        Raises:
            ConfigurationError: If a value is missing or invalid
        """
        load_dotenv(dotenv_path)

        timeout_raw = os.getenv(ENV_TIMEOUT)
        timeout = DEFAULT_TIMEOUT_SECONDS
        if timeout_raw:
            try:
                timeout = float(timeout_raw)
            except ValueError as e:
                raise ConfigurationError(
                    message=f"{ENV_TIMEOUT} must be a number",
                    config_key=ENV_TIMEOUT,
                    config_value=timeout_raw,
                    expected_type="float",
                    cause=e,
                )

        config = cls(
            partner_token=os.getenv(ENV_PARTNER_TOKEN, ""),
            environment=os.getenv(ENV_ENVIRONMENT, DEFAULT_ENVIRONMENT),
            timeout=timeout,
        )
        logger.info(f"Loaded Didox configuration from environment ({config.environment})")
        return config
