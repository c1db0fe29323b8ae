"""Logger Protocol Interface.

This module defines the logging collaborator accepted when the model is loaded.
"""

from typing import Any, Protocol


class ILogger(Protocol):
    """Protocol for the injected message logger."""

    def log(self, *messages: Any) -> None:
        """Log informational messages."""
        ...

    def error(self, *messages: Any) -> None:
        """Log error messages."""
        ...

    def warn(self, *messages: Any) -> None:
        """Log warning messages."""
        ...

    def debug(self, *messages: Any) -> None:
        """Log debug messages."""
        ...

    def error_with_trace(self, error: BaseException, *messages: Any) -> None:
        """Log error messages followed by the trace of ``error``.

        Args:
            error: The error whose trace is logged
            *messages: Messages logged before the trace
        """
        ...
