"""
Unit tests for messenger_send_methods.config module.
"""

import logging
import pytest
from unittest.mock import patch
import sys
import os

# Add the parent directory to the path so we can import the module
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from messenger_send_methods.config import MessengerConfig, setup_logging
from messenger_send_methods.models import ProxyData


class TestMessengerConfig:
    """Test configuration loading."""

    def test_defaults(self):
        """Test default values."""
        config = MessengerConfig(token="t")
        assert config.api_version == "3.1"
        assert config.proxy is None
        assert config.timeout is None

    @patch('messenger_send_methods.config.load_dotenv')
    @patch.dict(os.environ, {
        "MESSENGER_PAGE_TOKEN": "env_token",
        "MESSENGER_API_VERSION": "2.12",
        "MESSENGER_PROXY_HOST": "proxy.local",
        "MESSENGER_PROXY_PORT": "3128",
        "MESSENGER_TIMEOUT": "7.5",
        "MESSENGER_LOG_LEVEL": "DEBUG"
    }, clear=True)
    def test_from_env(self, mock_load_dotenv):
        """Test loading every variable."""
        config = MessengerConfig.from_env()

        assert config.token == "env_token"
        assert config.api_version == "2.12"
        assert config.proxy == ProxyData(hostname="proxy.local", port="3128")
        assert config.timeout == 7.5
        assert config.log_level == "DEBUG"
        mock_load_dotenv.assert_called_once_with(None)

    @patch('messenger_send_methods.config.load_dotenv')
    @patch.dict(os.environ, {"MESSENGER_PAGE_TOKEN": "env_token", "MESSENGER_PROXY_HOST": "proxy.local"}, clear=True)
    def test_from_env_partial_proxy(self, mock_load_dotenv):
        """Test that a host without port leaves the proxy unset."""
        config = MessengerConfig.from_env()
        assert config.proxy is None
        assert config.api_version == "3.1"

    @patch('messenger_send_methods.config.load_dotenv')
    @patch.dict(os.environ, {}, clear=True)
    def test_from_env_missing_token(self, mock_load_dotenv):
        """Test that the token is required."""
        with pytest.raises(ValueError):
            MessengerConfig.from_env()


class TestSetupLogging:
    """Test logging setup."""

    @patch('messenger_send_methods.config.logging.basicConfig')
    def test_setup_logging(self, mock_basic_config):
        """Test that the level and format are passed on."""
        setup_logging("debug")

        call_kwargs = mock_basic_config.call_args[1]
        assert call_kwargs["level"] == logging.DEBUG
        assert "%(name)s" in call_kwargs["format"]
