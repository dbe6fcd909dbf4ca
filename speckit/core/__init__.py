"""Core components for SPECKIT.

This package contains:
- step_tracker: Ordered step list with status rendering and refresh hook
"""

from speckit.core.step_tracker import Step, StepStatus, StepTracker

__all__ = [
    "Step",
    "StepStatus",
    "StepTracker",
]
