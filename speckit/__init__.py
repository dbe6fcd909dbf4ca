"""SPECKIT - Spec-driven development toolkit.

This package provides the speckit command-line interface: environment
checks for the external tools a spec-driven workflow relies on, and
project initialization, both reported through a step tracker.
"""

__version__ = "0.1.0"
SCRIPT_NAME = "SPECKIT"
PROJECT_CONFIG_VERSION = "1.0.0"

__all__ = [
    "__version__",
    "SCRIPT_NAME",
    "PROJECT_CONFIG_VERSION",
]
