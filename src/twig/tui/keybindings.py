"""Central keybinding registry for twig.

Single source of truth for which key does what in each mode, and for
the hints shown in the keybinds panel.

Modified: 2026-10-18
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..core.models import Action, AppMode


@dataclass
class Keybinding:
    """Represents a single keybinding."""
    key: str  # Textual key name
    description: str  # Human-readable description
    action: Action  # Session action the key triggers
    mode: AppMode = AppMode.NORMAL  # Where this binding is active


@dataclass
class HelpHint:
    """One entry of the keybinds panel."""
    label: str  # Key label as shown, e.g. "j/↓"
    description: str
    color: str  # Rich colour for the label
    row: int = 0  # Line of the panel the hint sits on


class KeybindingRegistry:
    """Central registry for all keybindings and their hints."""

    def __init__(self):
        self.keybindings: Dict[Tuple[AppMode, str], Keybinding] = {}
        self.hints: Dict[AppMode, List[HelpHint]] = {mode: [] for mode in AppMode}
        self._initialize_default_bindings()
        self._initialize_default_hints()

    def _initialize_default_bindings(self):
        """Initialize default keybindings."""

        # Navigation
        self.register("j", "Move down", Action.MOVE_DOWN)
        self.register("down", "Move down", Action.MOVE_DOWN)
        self.register("k", "Move up", Action.MOVE_UP)
        self.register("up", "Move up", Action.MOVE_UP)

        # Branch operations
        self.register("enter", "Switch to branch", Action.SELECT)
        self.register("D", "Delete branch", Action.REQUEST_DELETE)

        # Application
        self.register("q", "Quit", Action.QUIT)
        self.register("escape", "Quit", Action.QUIT)

        # Delete confirmation
        confirm = AppMode.CONFIRM_DELETE
        self.register("y", "Confirm delete", Action.CONFIRM_DELETE, confirm)
        self.register("Y", "Confirm delete", Action.CONFIRM_DELETE, confirm)
        self.register("n", "Cancel delete", Action.CANCEL_DELETE, confirm)
        self.register("N", "Cancel delete", Action.CANCEL_DELETE, confirm)
        self.register("escape", "Cancel delete", Action.CANCEL_DELETE, confirm)

    def _initialize_default_hints(self):
        """Initialize the keybinds panel content."""
        self.register_hint(AppMode.NORMAL, "j/↓", "down", "cyan", row=0)
        self.register_hint(AppMode.NORMAL, "k/↑", "up", "cyan", row=0)
        self.register_hint(AppMode.NORMAL, "Enter", "switch", "green", row=0)
        self.register_hint(AppMode.NORMAL, "D", "delete", "red", row=1)
        self.register_hint(AppMode.NORMAL, "q/Esc", "quit", "yellow", row=1)

        self.register_hint(AppMode.CONFIRM_DELETE, "y", "confirm", "green")
        self.register_hint(AppMode.CONFIRM_DELETE, "n/Esc", "cancel", "red")

    def register(self, key: str, description: str, action: Action,
                 mode: AppMode = AppMode.NORMAL) -> None:
        """Register a keybinding."""
        self.keybindings[(mode, key)] = Keybinding(
            key=key,
            description=description,
            action=action,
            mode=mode,
        )

    def register_hint(self, mode: AppMode, label: str, description: str,
                      color: str, row: int = 0) -> None:
        """Register a keybinds panel hint."""
        self.hints[mode].append(HelpHint(label, description, color, row))

    def action_for(self, mode: AppMode, key: str) -> Optional[Action]:
        """Resolve a key press in the given mode. Unbound keys give None."""
        binding = self.keybindings.get((mode, key))
        return binding.action if binding else None

    def keys(self) -> List[str]:
        """Every bound key, across all modes, without duplicates."""
        return list(dict.fromkeys(key for _, key in self.keybindings))

    def get_hint_rows(self, mode: AppMode) -> List[List[HelpHint]]:
        """Hints for a mode, grouped into panel lines."""
        rows: Dict[int, List[HelpHint]] = {}
        for hint in self.hints[mode]:
            rows.setdefault(hint.row, []).append(hint)
        return [rows[row] for row in sorted(rows)]


# Global registry instance
registry = KeybindingRegistry()
