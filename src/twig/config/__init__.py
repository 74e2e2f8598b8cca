"""
Configuration for twig.

Modified: 2026-10-18
"""

from twig.config.settings import (
    Settings,
    GitSettings,
    UISettings,
)

__all__ = [
    "Settings",
    "GitSettings",
    "UISettings",
]
