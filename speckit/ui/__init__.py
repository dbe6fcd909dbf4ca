"""User interface components for SPECKIT.

This package contains:
- prompts: Questionary-based interactive prompts
- live_tracker: Rich Live display bound to a StepTracker
"""

from speckit.ui.live_tracker import LiveTrackerView
from speckit.ui.prompts import prompt_confirm, prompt_select

__all__ = [
    "LiveTrackerView",
    "prompt_confirm",
    "prompt_select",
]
