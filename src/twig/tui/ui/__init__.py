"""
UI components for twig TUI.

Modified: 2026-10-18
"""

__all__ = [
    "branch_list",
    "keybind_panel",
    "modals",
]
