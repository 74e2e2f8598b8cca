"""
Core data models for twig.

Modified: 2026-10-18
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class AppMode(Enum):
    """Interaction mode of the session."""

    NORMAL = "normal"
    CONFIRM_DELETE = "confirm_delete"


class Action(Enum):
    """Session actions produced by key presses."""

    MOVE_DOWN = "move_down"
    MOVE_UP = "move_up"
    SELECT = "select"
    QUIT = "quit"
    REQUEST_DELETE = "request_delete"
    CONFIRM_DELETE = "confirm_delete"
    CANCEL_DELETE = "cancel_delete"


@dataclass(frozen=True)
class Branch:
    """
    A local git branch as listed by ``git for-each-ref``.

    Instances are never mutated; the whole list is replaced on reload.
    """

    name: str
    short_revision: str = ""
    is_current: bool = False


@dataclass
class AppState:
    """
    The single mutable session object.

    ``selected_index`` stays within ``[0, len(branches) - 1]`` while
    ``branches`` is non-empty.
    """

    branches: List[Branch] = field(default_factory=list)
    selected_index: int = 0
    mode: AppMode = AppMode.NORMAL

    @property
    def selected_branch(self) -> Optional[Branch]:
        """Branch under the cursor, or None for an empty list."""
        if 0 <= self.selected_index < len(self.branches):
            return self.branches[self.selected_index]
        return None

    @property
    def is_empty(self) -> bool:
        return not self.branches

    def move_down(self) -> None:
        """Move the cursor down, stopping at the last branch."""
        if self.selected_index + 1 < len(self.branches):
            self.selected_index += 1

    def move_up(self) -> None:
        """Move the cursor up, stopping at the first branch."""
        if self.selected_index > 0:
            self.selected_index -= 1

    def can_request_delete(self) -> bool:
        """The checked-out branch may never be deleted."""
        branch = self.selected_branch
        return branch is not None and not branch.is_current

    def replace_branches(self, branches: List[Branch]) -> None:
        """Swap in a freshly loaded branch list and clamp the cursor."""
        self.branches = list(branches)
        if self.selected_index >= len(self.branches) and self.selected_index > 0:
            self.selected_index = max(len(self.branches) - 1, 0)


@dataclass(frozen=True)
class LoopSignal:
    """
    Result of applying one action to the session.

    ``done`` ends the interactive loop; ``selected_index`` is set only
    when the user picked a branch to switch to.
    """

    done: bool = False
    selected_index: Optional[int] = None

    @classmethod
    def keep_going(cls) -> "LoopSignal":
        return cls()

    @classmethod
    def switch(cls, index: int) -> "LoopSignal":
        return cls(done=True, selected_index=index)

    @classmethod
    def quit(cls) -> "LoopSignal":
        return cls(done=True)
