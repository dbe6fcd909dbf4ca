"""AI assistants a project can be initialized for."""

from speckit.integrations.tools import DEFAULT_TOOLS, ToolRequirement

# Assistant key -> display name, in prompt order
AI_CHOICES: dict[str, str] = {
    "claude": "Claude Code",
    "gemini": "Gemini CLI",
    "copilot": "GitHub Copilot",
    "cursor": "Cursor",
    "qwen": "Qwen Code",
    "opencode": "opencode",
    "codex": "Codex CLI",
    "windsurf": "Windsurf",
}

# Assistants that ship a CLI worth probing; IDE-only ones are absent
_ASSISTANT_EXECUTABLES: dict[str, str] = {
    "claude": "claude",
    "gemini": "gemini",
    "qwen": "qwen",
    "opencode": "opencode",
    "codex": "codex",
}


def is_known_assistant(key: str) -> bool:
    return key in AI_CHOICES


def assistant_tool(key: str) -> ToolRequirement | None:
    """Get the CLI requirement for an assistant.

    Args:
        key: Assistant key from AI_CHOICES

    Returns:
        The requirement probed during init, or None for IDE-based assistants
    """
    executable = _ASSISTANT_EXECUTABLES.get(key)
    if executable is None:
        return None
    for tool in DEFAULT_TOOLS:
        if tool.name == executable:
            return tool
    return None


__all__ = [
    "AI_CHOICES",
    "assistant_tool",
    "is_known_assistant",
]
