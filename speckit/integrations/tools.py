"""External tool detection for SPECKIT.

This module probes the system PATH for the developer tools a spec-driven
workflow uses and reports each result through a StepTracker.
"""

import asyncio
import logging
import shutil
from collections.abc import Iterable
from dataclasses import dataclass, field

from speckit.core.step_tracker import StepTracker
from speckit.utils.logging import log_command, log_message

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolRequirement:
    """An executable to look for.

    Attributes:
        name: Executable name, also used as the tracker key
        label: Human-readable name shown in the tracker
        install_hint: Where to get the tool when it is missing
        assistant: Whether the tool is an AI assistant CLI
    """

    name: str
    label: str
    install_hint: str
    assistant: bool = False


GIT = ToolRequirement("git", "Git version control", "https://git-scm.com/downloads")
VSCODE = ToolRequirement("code", "VS Code (for GitHub Copilot)", "https://code.visualstudio.com/")
VSCODE_INSIDERS = ToolRequirement(
    "code-insiders", "VS Code Insiders", "https://code.visualstudio.com/insiders/"
)

# Probed by `speckit check`, in order
DEFAULT_TOOLS: tuple[ToolRequirement, ...] = (
    GIT,
    ToolRequirement(
        "claude",
        "Claude Code CLI",
        "https://docs.anthropic.com/en/docs/claude-code/setup",
        assistant=True,
    ),
    ToolRequirement(
        "gemini", "Gemini CLI", "https://github.com/google-gemini/gemini-cli", assistant=True
    ),
    ToolRequirement("qwen", "Qwen Code CLI", "https://github.com/QwenLM/qwen-code", assistant=True),
    VSCODE,
    ToolRequirement(
        "cursor-agent", "Cursor IDE agent (optional)", "https://cursor.sh/", assistant=True
    ),
    ToolRequirement("windsurf", "Windsurf IDE (optional)", "https://windsurf.com/", assistant=True),
    ToolRequirement("opencode", "opencode", "https://opencode.ai/", assistant=True),
    ToolRequirement("codex", "Codex CLI", "https://github.com/openai/codex", assistant=True),
)

# Tried under its own step only when the primary name is missing
FALLBACK_TOOLS: dict[str, ToolRequirement] = {
    VSCODE.name: VSCODE_INSIDERS,
}


@dataclass
class ToolCheckReport:
    """Outcome of a batch of tool probes.

    Attributes:
        results: Availability per probed executable name, in probe order
        assistants: Names of the probed tools that are AI assistant CLIs
    """

    results: dict[str, bool] = field(default_factory=dict)
    assistants: set[str] = field(default_factory=set)

    @property
    def git_ok(self) -> bool:
        return self.results.get(GIT.name, False)

    @property
    def any_assistant_ok(self) -> bool:
        return any(self.results.get(name, False) for name in self.assistants)

    def is_available(self, name: str) -> bool:
        """Check availability, following the fallback name if there is one."""
        if self.results.get(name, False):
            return True
        fallback = FALLBACK_TOOLS.get(name)
        return fallback is not None and self.results.get(fallback.name, False)


def find_executable(tool_name: str) -> str | None:
    """Resolve an executable on PATH.

    Args:
        tool_name: Executable name

    Returns:
        Absolute path of the executable, or None if it is not on PATH
    """
    path = shutil.which(tool_name)
    log_command(f"which {tool_name}", 0 if path else 1)
    return path


async def check_tool_for_tracker(
    tool_name: str,
    install_hint: str,
    tracker: StepTracker,
    key: str | None = None,
) -> bool:
    """Check if a tool is installed and update the tracker.

    The step is created if the tracker does not have it yet.
    Lookup failures never propagate; they end as an error step.

    Args:
        tool_name: Executable to look for
        install_hint: Shown next to the step when the tool is missing
        tracker: Tracker holding the step
        key: Step key (default: tool_name)

    Returns:
        True if the tool is on PATH
    """
    key = key or tool_name
    tracker.start(key, "checking")

    try:
        path = await asyncio.to_thread(find_executable, tool_name)
    except Exception as e:
        logger.debug("Lookup for %s failed", tool_name, exc_info=True)
        log_message(f"Lookup for {tool_name} failed: {e}")
        path = None

    if path:
        tracker.complete(key, "found")
        return True

    tracker.error(key, f"not found - {install_hint}")
    return False


async def check_tools(
    requirements: Iterable[ToolRequirement],
    tracker: StepTracker,
) -> ToolCheckReport:
    """Probe tools one after another.

    Every requirement is registered as a pending step before probing starts.
    A tool with an entry in FALLBACK_TOOLS gets its fallback probed, as a
    separate step, only when the tool itself is missing.

    Args:
        requirements: Tools to probe, in order
        tracker: Tracker receiving one step per probe

    Returns:
        Availability of every probed name
    """
    requirements = list(requirements)
    for requirement in requirements:
        tracker.add(requirement.name, requirement.label)

    report = ToolCheckReport()
    for requirement in requirements:
        ok = await check_tool_for_tracker(requirement.name, requirement.install_hint, tracker)
        report.results[requirement.name] = ok
        if requirement.assistant:
            report.assistants.add(requirement.name)

        fallback = FALLBACK_TOOLS.get(requirement.name)
        if not ok and fallback is not None:
            report.results[fallback.name] = await check_tool_for_tracker(
                fallback.name, fallback.install_hint, tracker
            )

    log_message(f"Tool check finished: {report.results}")
    return report


__all__ = [
    "DEFAULT_TOOLS",
    "FALLBACK_TOOLS",
    "GIT",
    "VSCODE",
    "VSCODE_INSIDERS",
    "ToolCheckReport",
    "ToolRequirement",
    "check_tool_for_tracker",
    "check_tools",
    "find_executable",
]
