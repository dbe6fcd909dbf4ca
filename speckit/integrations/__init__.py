"""External integrations for SPECKIT.

This package contains:
- tools: PATH probing for developer tools, reported through a StepTracker
- assistants: AI assistants a project can be initialized for
- git: Repository checks and initialization
"""

from speckit.integrations.assistants import AI_CHOICES, assistant_tool, is_known_assistant
from speckit.integrations.git import init_git_repo, is_git_repo
from speckit.integrations.tools import (
    DEFAULT_TOOLS,
    ToolCheckReport,
    ToolRequirement,
    check_tool_for_tracker,
    check_tools,
)

__all__ = [
    # Assistants
    "AI_CHOICES",
    "assistant_tool",
    "is_known_assistant",
    # Git
    "init_git_repo",
    "is_git_repo",
    # Tools
    "DEFAULT_TOOLS",
    "ToolCheckReport",
    "ToolRequirement",
    "check_tool_for_tracker",
    "check_tools",
]
