"""Windows-safe Console wrapper for Rich library.

Also hosts the stderr console used for per-file scan diagnostics, so a
batch run can report a bad file without interrupting stdout output.
"""
from rich.console import Console
from rich.markup import escape
from typing import Any
from .logger import sanitize_for_terminal, is_utf8_capable


class SafeConsole(Console):
    """Console that sanitizes Unicode output for non-UTF-8 terminals."""

    def __init__(self, *args, **kwargs):
        """Initialize SafeConsole with UTF-8 capability detection.

        All arguments are passed through to Rich's Console.
        """
        self._needs_sanitization = not is_utf8_capable()

        if self._needs_sanitization:
            kwargs['legacy_windows'] = True

        super().__init__(*args, **kwargs)

    def print(self, *objects: Any, **kwargs) -> None:
        """Print with automatic Unicode sanitization.

        Args:
            *objects: Objects to print (same as Rich Console.print)
            **kwargs: Keyword arguments (same as Rich Console.print)
        """
        if self._needs_sanitization:
            objects = tuple(
                sanitize_for_terminal(obj) if isinstance(obj, str) else obj
                for obj in objects
            )
        super().print(*objects, **kwargs)


# Diagnostics never go to stdout: stdout may carry the JSON report
error_console = SafeConsole(stderr=True, highlight=False)


def report_diagnostic(message: str) -> None:
    """Print a one-line diagnostic to stderr; markup characters are escaped."""
    error_console.print(escape(message), soft_wrap=True)
