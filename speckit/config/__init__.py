"""Configuration management for SPECKIT.

This package contains:
- settings: Settings dataclass with user-level defaults
- manager: ConfigManager class for loading configuration
- project: The JSON config file written into new projects

Configuration Format
====================
The user configuration is flat KEY=VALUE (environment variable style):

    SPECKIT_DEFAULT_AI=claude
    SPECKIT_NO_GIT=false
"""

from speckit.config.manager import ConfigManager
from speckit.config.project import load_project_config, write_project_config
from speckit.config.settings import Settings

__all__ = [
    "ConfigManager",
    "Settings",
    "load_project_config",
    "write_project_config",
]
