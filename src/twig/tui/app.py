"""Main twig TUI application.

Renders the session state and feeds key presses into it. The result of
``run()`` is the selected branch index, or None when the user quit.

Modified: 2026-10-18
"""

import logging
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.reactive import reactive

from ..config.settings import Settings
from ..core.models import AppMode
from ..core.session import BranchSession

from .keybindings import registry
from .ui.branch_list import BranchList
from .ui.keybind_panel import KeybindPanel
from .ui.modals import ConfirmDeleteModal


logger = logging.getLogger(__name__)


class TwigApp(App[Optional[int]]):
    """Branch picker application."""

    TITLE = "twig"

    CSS = """
    #frame {
        margin: 1;
    }
    """

    # Every registered key is routed through the session, whatever screen is on top
    BINDINGS = [
        Binding(key, f"handle_key({key!r})", show=False, priority=True)
        for key in registry.keys()
    ]

    view_mode = reactive(AppMode.NORMAL)

    def __init__(self, session: BranchSession, settings: Optional[Settings] = None):
        """Initialize the application.

        Args:
            session: Session owning the branch list and mode
            settings: UI settings (default: built-in defaults)
        """
        super().__init__()
        self.session = session
        self.settings = settings or Settings()

        # Set when the session ended on an error; reported by the caller
        self.error: Optional[Exception] = None

        self.branch_list: Optional[BranchList] = None
        self.keybind_panel: Optional[KeybindPanel] = None

    def compose(self) -> ComposeResult:
        """Create the application layout."""
        with Vertical(id="frame"):
            self.branch_list = BranchList(id="branch-list")
            yield self.branch_list
            self.keybind_panel = KeybindPanel(id="keybind-panel")
            yield self.keybind_panel

    def on_mount(self) -> None:
        """Apply layout settings and start the redraw cadence."""
        ui = self.settings.ui
        self.query_one("#frame").styles.margin = ui.margin
        if self.keybind_panel:
            self.keybind_panel.styles.height = ui.help_height
        self.refresh_view()
        self.set_interval(ui.poll_interval, self.refresh_view)

    def refresh_view(self) -> None:
        """Redraw everything from the session state."""
        state = self.session.state
        if self.branch_list:
            self.branch_list.show(state.branches, state.selected_index)
        self.view_mode = state.mode

    def watch_view_mode(self, old_mode: AppMode, new_mode: AppMode) -> None:
        """Show or hide the confirmation dialog."""
        if self.keybind_panel:
            self.keybind_panel.mode = new_mode

        if new_mode == AppMode.CONFIRM_DELETE:
            branch = self.session.selected_branch
            if branch is not None:
                self.push_screen(ConfirmDeleteModal(
                    branch.name,
                    width_percent=self.settings.ui.popup_width_percent,
                    height=self.settings.ui.popup_height,
                ))
        elif old_mode == AppMode.CONFIRM_DELETE and isinstance(self.screen, ConfirmDeleteModal):
            self.pop_screen()

    def action_handle_key(self, key: str) -> None:
        """Resolve a key for the current mode and apply it."""
        action = registry.action_for(self.session.mode, key)
        if action is None:
            return

        try:
            signal = self.session.handle(action)
        except Exception as e:
            logger.error(f"Session ended: {e}", exc_info=True)
            self.error = e
            self.exit(None, return_code=1)
            return

        if signal.done:
            self.exit(signal.selected_index)
            return

        self.refresh_view()
