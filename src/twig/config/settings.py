"""
Configuration for twig.

twig reads no config files or environment variables; these dataclasses
hold the in-code defaults and are passed to the components that need them.

Modified: 2026-10-18
"""

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class GitSettings:
    """git invocation settings."""

    executable: str = "git"
    field_delimiter: str = "|"
    head_marker: str = "*"
    not_merged_marker: str = "not fully merged"


@dataclass
class UISettings:
    """Terminal UI settings."""

    poll_interval: float = 0.25  # seconds between re-renders
    popup_width_percent: int = 60
    popup_height: int = 5
    help_height: int = 5
    margin: int = 1


@dataclass
class Settings:
    """Main settings container."""

    git: GitSettings = field(default_factory=GitSettings)
    ui: UISettings = field(default_factory=UISettings)

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            "git": {
                "executable": self.git.executable,
                "field_delimiter": self.git.field_delimiter,
                "head_marker": self.git.head_marker,
                "not_merged_marker": self.git.not_merged_marker,
            },
            "ui": {
                "poll_interval": self.ui.poll_interval,
                "popup_width_percent": self.ui.popup_width_percent,
                "popup_height": self.ui.popup_height,
                "help_height": self.ui.help_height,
                "margin": self.ui.margin,
            },
        }
