"""Configuration manager for SPECKIT.

This module provides the ConfigManager class for loading configuration
values with a three-level hierarchy:

    1. Environment Variables (highest priority)
    2. Global Config (~/.speckit-config)
    3. Built-in Defaults (lowest priority)
"""

import os
import re
from pathlib import Path

from speckit.config.settings import CONFIG_FILE, Settings
from speckit.utils.console import console, print_header, print_info
from speckit.utils.logging import log_message

_LINE_PATTERN = re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)=(.*)$")


class ConfigManager:
    """Loads configuration with cascading precedence.

    Security features:
    - Safe line-by-line parsing (no eval/exec)
    - Only known keys are read from the environment

    Attributes:
        settings: Current settings instance
        global_config_path: Path to global ~/.speckit-config file
    """

    def __init__(self, global_config_path: Path | None = None) -> None:
        """Initialize the configuration manager.

        Args:
            global_config_path: Optional custom path to global config file.
                                Defaults to ~/.speckit-config.
        """
        self.global_config_path = global_config_path or CONFIG_FILE
        self.settings = Settings()
        self._raw_values: dict[str, str] = {}
        self._config_sources: dict[str, str] = {}

    def load(self) -> Settings:
        """Load configuration from all sources.

        Each call starts from clean defaults, so repeated loads never keep
        stale values.

        Returns:
            Settings instance with loaded values
        """
        self.settings = Settings()
        self._raw_values = {}
        self._config_sources = {}

        if self.global_config_path.exists():
            log_message(f"Loading global configuration from {self.global_config_path}")
            self._load_file(self.global_config_path, source="global")

        self._load_environment()

        for key, value in self._raw_values.items():
            self._apply_value_to_settings(key, value)

        log_message(f"Configuration loaded successfully ({len(self._raw_values)} keys)")
        return self.settings

    def _load_file(self, path: Path, source: str = "file") -> None:
        """Load key=value pairs from a config file.

        Args:
            path: Path to the config file
            source: Source identifier for debugging
        """
        with path.open() as f:
            for line in f:
                line = line.strip()

                if not line or line.startswith("#"):
                    continue

                match = _LINE_PATTERN.match(line)
                if match:
                    key, value = match.groups()

                    # Only double-quoted values are unescaped; single quotes are literal
                    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
                        value = self._unescape_value(value[1:-1])
                    elif len(value) >= 2 and value.startswith("'") and value.endswith("'"):
                        value = value[1:-1]

                    self._raw_values[key] = value
                    self._config_sources[key] = source

    def _load_environment(self) -> None:
        """Override config with environment variables for known keys."""
        for key in Settings.get_config_keys():
            env_value = os.environ.get(key)
            if env_value is not None:
                self._raw_values[key] = env_value
                self._config_sources[key] = "environment"

    def _apply_value_to_settings(self, key: str, value: str) -> None:
        """Apply a raw config value to the settings object.

        Args:
            key: Configuration key
            value: Raw string value from file or environment
        """
        attr = self.settings.get_attribute_for_key(key)
        if attr is None:
            return  # Unknown key, ignore

        current_value = getattr(self.settings, attr)
        if isinstance(current_value, bool):
            setattr(self.settings, attr, value.strip().lower() in ("true", "1", "yes"))
        else:
            setattr(self.settings, attr, value.strip())

    @staticmethod
    def _unescape_value(value: str) -> str:
        """Unescape a double-quoted value read from a config file.

        Args:
            value: The escaped value without its surrounding quotes

        Returns:
            Original unescaped value
        """
        result = value.replace("\\\\", "\\")
        result = result.replace('\\"', '"')
        return result

    def get_config_source(self, key: str) -> str:
        """Report where the effective value of a key came from.

        Returns:
            "environment", "global", or "default"
        """
        return self._config_sources.get(key, "default")

    def show(self) -> None:
        """Display current configuration using Rich formatting."""
        print_header("Current Configuration")

        print_info(f"Global config: {self.global_config_path}")
        console.print()

        s = self.settings
        console.print("  [bold]Init Defaults:[/bold]")
        console.print(
            f"    Default AI Assistant: {s.default_ai or '(prompt)'}"
            f"  [dim]({self.get_config_source('SPECKIT_DEFAULT_AI')})[/dim]"
        )
        console.print(
            f"    Skip Git: {s.no_git}  [dim]({self.get_config_source('SPECKIT_NO_GIT')})[/dim]"
        )
        console.print(
            f"    Skip TLS: {s.skip_tls}  [dim]({self.get_config_source('SPECKIT_SKIP_TLS')})[/dim]"
        )
        console.print()


__all__ = [
    "ConfigManager",
]
