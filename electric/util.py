"""Utility functions."""

from pathlib import Path

PROGRESS_WIDTH = 76


def render_progress_bar(current: int, total: int, width: int = PROGRESS_WIDTH) -> str:
    """Render a fixed-width progress bar.

    Args:
        current: Completed steps.
        total: Total steps.
        width: Number of cells inside the brackets.

    Returns:
        Bar string such as `` [=====     ]``.
    """
    if current <= 0:
        filled = 1
    elif current >= total:
        filled = width
    else:
        filled = round(current / total * width)
    return f" [{'=' * filled}{' ' * (width - filled)}]"


def print_step(step: int, total: int, message: str):
    """Print a ``Step N/M)`` header, its message and the bar for the step before it."""
    print()
    print(f" Step {step}/{total})")
    print(f"    {message}")
    print(render_progress_bar(step - 1, total))


def ensure_dir(path: Path) -> Path:
    """Ensure directory exists, creating if needed.

    Args:
        path: Directory path.

    Returns:
        The same path.
    """
    path.mkdir(parents=True, exist_ok=True)
    return path
