"""Project configuration written by `speckit init`.

The file is a placeholder: it records the chosen assistant and empty
collections for specifications and test cases, to be filled by later
tooling.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from speckit import PROJECT_CONFIG_VERSION
from speckit.utils.logging import log_message

PROJECT_DIR_NAME = ".speckit"
PROJECT_CONFIG_NAME = "config.json"


def project_config_path(project_path: Path) -> Path:
    return project_path / PROJECT_DIR_NAME / PROJECT_CONFIG_NAME


def build_project_config(ai_assistant: str, now: datetime | None = None) -> dict[str, Any]:
    """Build the initial project config document.

    Args:
        ai_assistant: Assistant key chosen during init
        now: Timestamp to record (default: current UTC time)

    Returns:
        JSON-serializable config dict
    """
    timestamp = (now or datetime.now(timezone.utc)).isoformat()
    return {
        "version": PROJECT_CONFIG_VERSION,
        "aiAssistant": ai_assistant,
        "specifications": [],
        "testCases": [],
        "createdAt": timestamp,
        "updatedAt": timestamp,
    }


def write_project_config(project_path: Path, ai_assistant: str) -> Path:
    """Write .speckit/config.json under the project directory.

    Args:
        project_path: Project root, created beforehand
        ai_assistant: Assistant key chosen during init

    Returns:
        Path of the written file

    Raises:
        OSError: If the directory or file cannot be written
    """
    path = project_config_path(project_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(build_project_config(ai_assistant), indent=2) + "\n")
    log_message(f"Project config written to {path}")
    return path


def load_project_config(project_path: Path) -> dict[str, Any] | None:
    """Read the project config if present.

    Returns:
        Parsed document, or None when the project has no config file
    """
    path = project_config_path(project_path)
    if not path.exists():
        return None
    return json.loads(path.read_text())


__all__ = [
    "PROJECT_CONFIG_NAME",
    "PROJECT_DIR_NAME",
    "build_project_config",
    "load_project_config",
    "project_config_path",
    "write_project_config",
]
