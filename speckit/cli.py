"""CLI interface for SPECKIT.

This module provides the Typer-based command-line interface:

    speckit check                 Probe PATH for the tools speckit works with
    speckit init NAME | --here    Scaffold a new spec-driven project
    speckit config                Show the effective user configuration
"""

import asyncio
import os
import shutil
from collections.abc import Callable, Coroutine
from pathlib import Path
from typing import Annotated, TypeVar

import typer

from speckit.config.manager import ConfigManager
from speckit.config.project import PROJECT_CONFIG_NAME, PROJECT_DIR_NAME, write_project_config
from speckit.core.step_tracker import StepTracker
from speckit.integrations.assistants import AI_CHOICES, assistant_tool, is_known_assistant
from speckit.integrations.git import init_git_repo, is_git_repo
from speckit.integrations.tools import (
    DEFAULT_TOOLS,
    GIT,
    ToolRequirement,
    check_tool_for_tracker,
    check_tools,
    find_executable,
)
from speckit.ui.live_tracker import LiveTrackerView
from speckit.utils.console import (
    console,
    console_err,
    print_error,
    print_info,
    print_success,
    print_warning,
    show_banner,
    show_version,
)
from speckit.utils.errors import (
    ExitCode,
    GitOperationError,
    InvalidArgumentsError,
    ProjectExistsError,
    SpeckitError,
    UserCancelledError,
)
from speckit.utils.logging import enable_debug_logging, log_message, setup_logging

# Type variable for async helper
T = TypeVar("T")

DEFAULT_ASSISTANT = "claude"
ASSISTANT_TOOL_STEP = "assistant-tool"

app = typer.Typer(
    name="speckit",
    help="SPECKIT - Spec-Driven Development Toolkit",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        show_version()
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version information",
        ),
    ] = None,
) -> None:
    """SPECKIT - Spec-Driven Development Toolkit."""
    setup_logging()


class AsyncLoopAlreadyRunningError(SpeckitError):
    """Raised when trying to run async code in an existing event loop.

    This occurs in environments like Jupyter notebooks or when already
    running inside an async context.
    """

    _default_exit_code = ExitCode.GENERAL_ERROR


def run_async(coro_factory: Callable[[], Coroutine[None, None, T]]) -> T:
    """Run an async coroutine safely, handling existing event loops.

    Takes a factory instead of a coroutine object so that the running-loop
    check happens before the coroutine is created.

    Args:
        coro_factory: A callable that returns the coroutine to run.
            Example: lambda: check_tools(DEFAULT_TOOLS, tracker)

    Returns:
        The result of the coroutine

    Raises:
        AsyncLoopAlreadyRunningError: If an event loop is already running.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        loop = None

    if loop is not None:
        raise AsyncLoopAlreadyRunningError(
            "Cannot run async operation: an event loop is already running. "
            "Consider using 'await' directly or running from a synchronous environment."
        )

    return asyncio.run(coro_factory())


def _github_token(cli_token: str | None = None) -> str | None:
    """Return the GitHub token (CLI value first, then GH_TOKEN, then GITHUB_TOKEN).

    Whitespace-only values count as unset.
    """
    token = cli_token or os.getenv("GH_TOKEN") or os.getenv("GITHUB_TOKEN") or ""
    return token.strip() or None


# =============================================================================
# check
# =============================================================================


@app.command()
def check() -> None:
    """Check that the development tools speckit works with are installed."""
    show_banner()
    console.print("[bold]Checking for installed tools...[/bold]")

    tracker = StepTracker("Check Available Tools")
    try:
        report = run_async(lambda: check_tools(DEFAULT_TOOLS, tracker))
    except SpeckitError as e:
        print_error(str(e))
        raise typer.Exit(e.exit_code) from e

    tracker.display()

    stats = tracker.get_statistics()
    console.print(f"{stats['done']} done, {stats['error']} errors")
    console.print()
    console.print("[bold green]Speckit CLI is ready to use![/bold green]")

    if not report.git_ok:
        console.print("[dim]Tip: Install git for repository management[/dim]")
    if not report.any_assistant_ok:
        console.print("[dim]Tip: Install an AI assistant for the best experience[/dim]")


# =============================================================================
# config
# =============================================================================


@app.command("config")
def show_config() -> None:
    """Show the effective user configuration."""
    config = ConfigManager()
    config.load()
    config.show()


# =============================================================================
# init
# =============================================================================


def _resolve_project_path(project_name: str | None, here: bool) -> tuple[Path, bool]:
    """Work out where to initialize.

    Args:
        project_name: Positional project name; "." means the current directory
        here: Value of --here

    Returns:
        (project path, whether it is the current directory)

    Raises:
        InvalidArgumentsError: If both or neither of name and --here are given
        ProjectExistsError: If the named directory already exists
    """
    if project_name == ".":
        if here:
            raise InvalidArgumentsError("Cannot specify both '.' and --here")
        project_name = None
        here = True

    if here and project_name:
        raise InvalidArgumentsError("Cannot specify both project name and --here flag")
    if not here and not project_name:
        raise InvalidArgumentsError("Must specify either a project name or use --here flag")

    if here:
        return Path.cwd(), True

    project_path = Path(project_name).resolve()
    if project_path.exists():
        raise ProjectExistsError(project_path)
    return project_path, False


def _resolve_assistant(ai: str | None, config: ConfigManager) -> str:
    """Pick the AI assistant from --ai, then configuration, then a prompt.

    Raises:
        InvalidArgumentsError: If --ai names an unknown assistant
        UserCancelledError: If the selection prompt is cancelled
    """
    if ai is not None:
        key = ai.strip().lower()
        if not is_known_assistant(key):
            raise InvalidArgumentsError(
                f"Invalid AI assistant '{ai}'. Choose from: {', '.join(AI_CHOICES)}"
            )
        return key

    default = config.settings.default_ai.strip().lower()
    if default:
        if is_known_assistant(default):
            return default
        print_warning(f"Ignoring unknown SPECKIT_DEFAULT_AI value '{config.settings.default_ai}'")

    from speckit.ui.prompts import prompt_select

    return prompt_select("Choose your AI assistant:", AI_CHOICES, default=DEFAULT_ASSISTANT)


def _confirm_non_empty_here(project_path: Path) -> None:
    """Ask before initializing into a directory that already has files.

    Raises:
        UserCancelledError: If the user declines
    """
    existing = list(project_path.iterdir())
    if not existing:
        return

    from speckit.ui.prompts import prompt_confirm

    print_warning(f"Current directory is not empty ({len(existing)} items)")
    if not prompt_confirm("Continue and initialize here?", default=False):
        raise UserCancelledError("Initialization cancelled")


def _init_steps(tool: ToolRequirement | None) -> list[tuple[str, str]]:
    steps = [
        ("precheck", "Check required tools"),
        ("ai-select", "Select AI assistant"),
    ]
    if tool is not None:
        steps.append((ASSISTANT_TOOL_STEP, tool.label))
    steps += [
        ("fetch", "Fetch project template"),
        ("project-dir", "Create project directory"),
        ("config", "Write project config"),
        ("git", "Initialize git repository"),
        ("final", "Finalize"),
    ]
    return steps


async def _init_project(
    tracker: StepTracker,
    project_path: Path,
    here: bool,
    assistant: str,
    skip_git: bool,
) -> bool:
    """Run the init steps, reporting each through the tracker.

    Returns:
        True if the project was created. Git failures and a missing
        assistant CLI are reported but do not fail the init.
    """
    tool = assistant_tool(assistant)
    for key, label in _init_steps(tool):
        tracker.add(key, label)

    tracker.start("precheck")
    git_available = await asyncio.to_thread(find_executable, GIT.name) is not None
    tracker.complete("precheck", "git found" if git_available else "git not found")

    tracker.complete("ai-select", AI_CHOICES[assistant])

    if tool is not None:
        await check_tool_for_tracker(
            tool.name, tool.install_hint, tracker, key=ASSISTANT_TOOL_STEP
        )

    tracker.skip("fetch", "template download not available")

    tracker.start("project-dir")
    try:
        if not here:
            await asyncio.to_thread(project_path.mkdir, parents=True)
    except OSError as e:
        tracker.error("project-dir", str(e))
        return False
    tracker.complete("project-dir", str(project_path))

    tracker.start("config")
    try:
        await asyncio.to_thread(write_project_config, project_path, assistant)
    except OSError as e:
        tracker.error("config", str(e))
        if not here:
            await asyncio.to_thread(shutil.rmtree, project_path, ignore_errors=True)
        return False
    tracker.complete("config", f"{PROJECT_DIR_NAME}/{PROJECT_CONFIG_NAME}")

    if skip_git:
        tracker.skip("git", "--no-git flag")
    elif not git_available:
        tracker.skip("git", f"git not installed - {GIT.install_hint}")
    elif await asyncio.to_thread(is_git_repo, project_path):
        tracker.skip("git", "existing repo detected")
    else:
        tracker.start("git", "initializing")
        try:
            await asyncio.to_thread(init_git_repo, project_path)
            tracker.complete("git", "initialized")
        except GitOperationError as e:
            tracker.error("git", str(e))

    tracker.complete("final", "project ready")
    return True


@app.command()
def init(
    project_name: Annotated[
        str | None,
        typer.Argument(help="Name of the new project directory ('.' for the current directory)"),
    ] = None,
    here: Annotated[
        bool,
        typer.Option("--here", help="Initialize the project in the current directory"),
    ] = False,
    ai: Annotated[
        str | None,
        typer.Option("--ai", help=f"AI assistant to use: {', '.join(AI_CHOICES)}"),
    ] = None,
    no_git: Annotated[
        bool,
        typer.Option("--no-git", help="Skip git repository initialization"),
    ] = False,
    skip_tls: Annotated[
        bool,
        typer.Option("--skip-tls", help="Skip SSL/TLS verification (not recommended)"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Show debug logging and tracebacks"),
    ] = False,
    github_token: Annotated[
        str | None,
        typer.Option(
            "--github-token",
            help="GitHub token for API requests (default: GH_TOKEN or GITHUB_TOKEN)",
        ),
    ] = None,
) -> None:
    """Initialize a new spec-driven project."""
    if debug:
        enable_debug_logging()

    try:
        show_banner()

        config = ConfigManager()
        config.load()

        project_path, is_here = _resolve_project_path(project_name, here)
        if is_here:
            _confirm_non_empty_here(project_path)

        assistant = _resolve_assistant(ai, config)
        token = _github_token(github_token)
        if skip_tls or config.settings.skip_tls:
            log_message("TLS verification disabled by request")

        print_info(f"Project: {project_path.name}")
        print_info(f"Path: {project_path}")
        print_info(f"AI assistant: {AI_CHOICES[assistant]}")
        print_info(f"GitHub token: {'provided' if token else 'none'}")

        tracker = StepTracker("Initialize SpecKit Project")
        with LiveTrackerView(tracker):
            ok = run_async(
                lambda: _init_project(
                    tracker,
                    project_path,
                    is_here,
                    assistant,
                    skip_git=no_git or config.settings.no_git,
                )
            )
        tracker.display()

    except UserCancelledError as e:
        print_info(str(e))
        raise typer.Exit(ExitCode.USER_CANCELLED) from e

    except SpeckitError as e:
        if debug:
            console_err.print_exception()
        print_error(str(e))
        raise typer.Exit(e.exit_code) from e

    except KeyboardInterrupt as e:
        print_info("\nOperation cancelled by user")
        raise typer.Exit(ExitCode.USER_CANCELLED) from e

    if not ok:
        print_error("Project initialization failed")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    print_success("Project ready.")
    console.print()
    console.print("[bold]Next steps:[/bold]")
    next_steps = [] if is_here else [f"cd {project_path.name}"]
    next_steps.append(f"Start {AI_CHOICES[assistant]} in the project directory")
    for number, step in enumerate(next_steps, start=1):
        console.print(f"  {number}. {step}")


if __name__ == "__main__":
    app()
