"""Keybinds panel for twig.

Shows the keys that act in the current mode.

Modified: 2026-10-18
"""

from typing import Optional

from rich.text import Text
from textual.reactive import reactive
from textual.widgets import Static

from ...core.models import AppMode
from ..keybindings import KeybindingRegistry, registry as default_registry


def render_hints(mode: AppMode, registry: Optional[KeybindingRegistry] = None) -> Text:
    """Render the hint lines for a mode."""
    registry = registry or default_registry
    lines = []
    for row in registry.get_hint_rows(mode):
        line = Text()
        for i, hint in enumerate(row):
            line.append(hint.label, style=f"bold {hint.color}")
            trailing = "  " if i < len(row) - 1 else ""
            line.append(f" {hint.description}{trailing}")
        lines.append(line)
    return Text("\n").join(lines)


class KeybindPanel(Static):
    """Bordered help panel docked under the branch list."""

    DEFAULT_CSS = """
    KeybindPanel {
        height: 5;
        border: solid $accent;
        border-title-align: left;
        content-align: center middle;
        text-align: center;
    }
    """

    mode = reactive(AppMode.NORMAL)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.border_title = "keybinds"

    def on_mount(self) -> None:
        """Initialize with the normal-mode hints."""
        self.update(render_hints(self.mode))

    def watch_mode(self, mode: AppMode) -> None:
        self.update(render_hints(mode))
