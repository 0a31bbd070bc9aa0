"""
Configuration for Messenger Send Methods SDK.

Holds the immutable client configuration and loads it from environment
variables (or a .env file) for applications that prefer that.
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .constants import DEFAULT_API_VERSION, EnvVars, LogConfig
from .models import ProxyData


@dataclass(frozen=True)
class MessengerConfig:
    """
    Client configuration.

    Attributes:
        token: Page access token
        api_version: Graph API version, without the leading "v"
        proxy: Optional proxy host/port
        timeout: Request timeout in seconds (None leaves the transport default)
        log_level: Log level applied by setup_logging (the caller passes it, or
            MessengerClient.from_config(config, configure_logging=True) does)
    """
    token: str
    api_version: str = DEFAULT_API_VERSION
    proxy: Optional[ProxyData] = None
    timeout: Optional[float] = None
    log_level: str = LogConfig.DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "MessengerConfig":
        """
        Build the configuration from environment variables.

        Args:
            dotenv_path: Optional .env file to load first

        Raises:
            ValueError: If the page token is missing
        """
        load_dotenv(dotenv_path)

        token = os.getenv(EnvVars.PAGE_TOKEN, "")
        if not token:
            raise ValueError(
                f"Missing required environment variable: {EnvVars.PAGE_TOKEN}. "
                f"Please check your .env file or environment configuration."
            )

        proxy = None
        proxy_host = os.getenv(EnvVars.PROXY_HOST)
        proxy_port = os.getenv(EnvVars.PROXY_PORT)
        if proxy_host and proxy_port:
            proxy = ProxyData(hostname=proxy_host, port=proxy_port)

        timeout = os.getenv(EnvVars.TIMEOUT)

        return cls(
            token=token,
            api_version=os.getenv(EnvVars.API_VERSION, DEFAULT_API_VERSION),
            proxy=proxy,
            timeout=float(timeout) if timeout else None,
            log_level=os.getenv(EnvVars.LOG_LEVEL, LogConfig.DEFAULT_LOG_LEVEL),
        )


def setup_logging(level: str = LogConfig.DEFAULT_LOG_LEVEL) -> None:
    """Setup logging for applications using the SDK directly."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LogConfig.DEFAULT_LOG_FORMAT,
    )
