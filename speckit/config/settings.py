"""Settings dataclass for SPECKIT configuration.

This module defines the Settings dataclass that holds the user-level
defaults applied by `speckit init`.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    """Configuration settings for SPECKIT.

    All settings have defaults and can be loaded from the configuration
    file (~/.speckit-config) or the environment.

    Attributes:
        default_ai: Assistant used by init when --ai is not given (empty = prompt)
        no_git: Skip git repository initialization by default
        skip_tls: Recorded default for --skip-tls
    """

    default_ai: str = ""
    no_git: bool = False
    skip_tls: bool = False

    # Config key to attribute mapping
    _key_mapping: dict[str, str] = field(
        default_factory=lambda: {
            "SPECKIT_DEFAULT_AI": "default_ai",
            "SPECKIT_NO_GIT": "no_git",
            "SPECKIT_SKIP_TLS": "skip_tls",
        },
        repr=False,
    )

    def get_attribute_for_key(self, key: str) -> str | None:
        """Get the attribute name for a config key.

        Args:
            key: Configuration key (e.g., "SPECKIT_DEFAULT_AI")

        Returns:
            Attribute name or None if key is unknown
        """
        return self._key_mapping.get(key)

    @classmethod
    def get_config_keys(cls) -> list[str]:
        """Get list of all valid configuration keys.

        Returns:
            List of configuration key names
        """
        temp = cls()
        return list(temp._key_mapping.keys())


# Default configuration file path
CONFIG_FILE = Path.home() / ".speckit-config"
