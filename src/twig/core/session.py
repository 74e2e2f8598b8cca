"""
Session state machine for twig.

Applies user actions to the AppState and calls into the branch
repository for deletes. Interface-agnostic: the TUI feeds actions in and
acts on the returned LoopSignal.

Modified: 2026-10-18
"""

import logging
from typing import List, Optional

from twig.core.exceptions import TwigError
from twig.core.git import BranchRepository
from twig.core.models import Action, AppMode, AppState, Branch, LoopSignal


logger = logging.getLogger(__name__)


class BranchSession:
    """Owns the AppState for the lifetime of the interactive loop."""

    def __init__(self, repository: BranchRepository, branches: List[Branch]):
        """
        Args:
            repository: Branch lister/mutator
            branches: Initially loaded branches
        """
        self.repository = repository
        self.state = AppState(branches=list(branches))

    @property
    def mode(self) -> AppMode:
        return self.state.mode

    @property
    def selected_branch(self) -> Optional[Branch]:
        return self.state.selected_branch

    def handle(self, action: Optional[Action]) -> LoopSignal:
        """
        Apply one action.

        Actions that do not belong to the current mode are ignored.

        Raises:
            TwigError: A confirmed delete failed; the session must end
        """
        if action is None:
            return LoopSignal.keep_going()

        if self.state.mode == AppMode.CONFIRM_DELETE:
            if action == Action.CONFIRM_DELETE:
                return self.confirm_delete()
            if action == Action.CANCEL_DELETE:
                self.state.mode = AppMode.NORMAL
            return LoopSignal.keep_going()

        if action == Action.MOVE_DOWN:
            self.state.move_down()
        elif action == Action.MOVE_UP:
            self.state.move_up()
        elif action == Action.SELECT:
            return LoopSignal.switch(self.state.selected_index)
        elif action == Action.QUIT:
            return LoopSignal.quit()
        elif action == Action.REQUEST_DELETE:
            self.request_delete()
        return LoopSignal.keep_going()

    def request_delete(self) -> bool:
        """Enter CONFIRM_DELETE unless the selected branch is checked out."""
        if not self.state.can_request_delete():
            logger.debug("Ignoring delete request for the current branch")
            return False
        self.state.mode = AppMode.CONFIRM_DELETE
        return True

    def confirm_delete(self) -> LoopSignal:
        """
        Delete the selected branch and reload the list.

        Returns:
            quit() when no branches remain, keep_going() otherwise

        Raises:
            TwigError: Delete or reload failed
        """
        branch = self.state.selected_branch
        if branch is None:
            self.state.mode = AppMode.NORMAL
            return LoopSignal.keep_going()

        try:
            self.repository.delete(branch.name)
        except TwigError as e:
            self.state.mode = AppMode.NORMAL
            raise TwigError(f"Failed to delete branch: {e}") from e

        try:
            branches = self.repository.load_branches()
        except Exception:
            self.state.mode = AppMode.NORMAL
            raise

        self.state.replace_branches(branches)
        if self.state.is_empty:
            logger.info("No branches left after delete")
            return LoopSignal.quit()

        self.state.mode = AppMode.NORMAL
        return LoopSignal.keep_going()
