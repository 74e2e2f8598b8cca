"""
Core logic for twig.

Branch models, git access and the session state machine. Nothing in
here depends on the terminal UI.

Modified: 2026-10-18
"""

from twig.core.exceptions import (
    TwigError,
    ExternalToolError,
    EncodingError,
    TerminalError,
)

__all__ = [
    "TwigError",
    "ExternalToolError",
    "EncodingError",
    "TerminalError",
]
