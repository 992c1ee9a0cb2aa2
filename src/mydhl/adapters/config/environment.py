"""
Environment Config Provider - Load configuration from environment variables.

Supports:
- Environment variables (MYDHL_USERNAME, MYDHL_PASSWORD, MYDHL_TEST_MODE, ...)
- .env files
- Command line argument overrides
"""

import os
from pathlib import Path
from typing import Any, Optional

from ...core.exceptions import ConfigurationError
from ...core.ports.config_provider import (
    ConfigProviderPort,
    AppConfig,
    ApiConfig,
)


class EnvironmentConfigProvider(ConfigProviderPort):
    """
    Configuration provider that loads from environment variables and .env files.

    Precedence (lowest to highest): .env file, environment, CLI overrides.
    """

    ENV_MAPPING = {
        "MYDHL_USERNAME": "username",
        "MYDHL_PASSWORD": "password",
        "MYDHL_TEST_MODE": "test_mode",
        "MYDHL_BASE_URL": "base_url",
        "MYDHL_TIMEOUT": "timeout",
        "MYDHL_VERBOSE": "verbose",
    }

    CLI_MAPPING = {
        "shipment": "shipment_path",
        "execute": "execute",
        "test_mode": "test_mode",
        "base_url": "base_url",
        "label_output": "label_output",
        "verbose": "verbose",
    }

    def __init__(
        self,
        env_file: Optional[Path] = None,
        cli_overrides: Optional[dict[str, Any]] = None,
        environ: Optional[dict[str, str]] = None,
    ):
        """
        Initialize the config provider.

        Args:
            env_file: Path to .env file (auto-detected if not specified)
            cli_overrides: Command line argument overrides
            environ: Environment mapping (defaults to os.environ)
        """
        self._values: dict[str, Any] = {}
        self._env_file = Path(env_file) if env_file else None
        self._cli_overrides = cli_overrides or {}
        self._environ = os.environ if environ is None else environ

        self._load_env_file()
        self._load_environment()
        self._apply_cli_overrides()

    # -------------------------------------------------------------------------
    # ConfigProviderPort Implementation
    # -------------------------------------------------------------------------

    @property
    def name(self) -> str:
        return "Environment"

    def load(self) -> AppConfig:
        """
        Load complete configuration.

        Raises:
            ConfigurationError: If MYDHL_TIMEOUT is not a number
        """
        api = ApiConfig(
            username=self.get("username", ""),
            password=self.get("password", ""),
            test_mode=self._as_bool(self.get("test_mode", True)),
            base_url=self.get("base_url") or None,
            timeout=self._timeout(),
        )

        shipment_path = self.get("shipment_path")
        label_output = self.get("label_output")

        return AppConfig(
            api=api,
            shipment_path=Path(shipment_path) if shipment_path else None,
            execute=self._as_bool(self.get("execute", False)),
            verbose=self._as_bool(self.get("verbose", False)),
            label_output=Path(label_output) if label_output else None,
        )

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        key = key.lower().replace("-", "_")
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value."""
        key = key.lower().replace("-", "_")
        self._values[key] = value

    def validate(self) -> list[str]:
        """Validate configuration."""
        errors = []

        if not self.get("username"):
            errors.append("Missing MYDHL_USERNAME - set in environment or .env file")
        if not self.get("password"):
            errors.append("Missing MYDHL_PASSWORD - set in environment or .env file")

        timeout = self.get("timeout")
        if timeout is not None:
            try:
                if float(timeout) <= 0:
                    errors.append(f"MYDHL_TIMEOUT must be positive, got {timeout}")
            except (TypeError, ValueError):
                errors.append(f"MYDHL_TIMEOUT must be a number, got {timeout!r}")

        return errors

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------

    def _load_env_file(self) -> None:
        """Load values from .env file."""
        env_file = self._find_env_file()
        if not env_file:
            return

        for line in env_file.read_text().splitlines():
            line = line.strip()

            # Skip empty lines and comments
            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")

            config_key = self.ENV_MAPPING.get(key)
            if config_key:
                self._values[config_key] = self._convert(value)

    def _find_env_file(self) -> Optional[Path]:
        """Find .env file."""
        if self._env_file:
            return self._env_file if self._env_file.exists() else None

        cwd_env = Path.cwd() / ".env"
        if cwd_env.exists():
            return cwd_env

        return None

    def _load_environment(self) -> None:
        """Load values from environment variables."""
        for env_key, config_key in self.ENV_MAPPING.items():
            raw_value = self._environ.get(env_key)
            if raw_value is not None:
                self._values[config_key] = self._convert(raw_value)

    def _apply_cli_overrides(self) -> None:
        """Apply CLI argument overrides."""
        for cli_key, config_key in self.CLI_MAPPING.items():
            if self._cli_overrides.get(cli_key) is not None:
                self._values[config_key] = self._cli_overrides[cli_key]

    def _timeout(self) -> float:
        value = self.get("timeout", 30.0)
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"MYDHL_TIMEOUT must be a number, got {value!r}", cause=e)

    @staticmethod
    def _convert(raw_value: str) -> Any:
        """Convert boolean-ish values."""
        if raw_value.lower() in ("true", "1", "yes"):
            return True
        if raw_value.lower() in ("false", "0", "no"):
            return False
        return raw_value

    @staticmethod
    def _as_bool(value: Any) -> bool:
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value)
