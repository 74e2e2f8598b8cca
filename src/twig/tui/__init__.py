"""
TUI (Terminal User Interface) for twig.

Textual-based branch picker: list panel, keybinds panel and a
confirmation dialog.

Modified: 2026-10-18
"""

__all__ = ["app", "keybindings"]
