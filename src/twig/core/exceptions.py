"""
Custom exceptions for twig.

Modified: 2026-10-18
"""

from typing import Optional


class TwigError(Exception):
    """Base exception for all twig errors."""

    pass


class ExternalToolError(TwigError):
    """Raised when a git invocation exits with a non-zero status."""

    def __init__(self, message: str, stderr: str = "", returncode: Optional[int] = None):
        super().__init__(message)
        self.stderr = stderr
        self.returncode = returncode


class EncodingError(TwigError):
    """Raised when git output is not valid UTF-8 text."""

    pass


class TerminalError(TwigError):
    """Raised when the terminal backend fails."""

    pass
