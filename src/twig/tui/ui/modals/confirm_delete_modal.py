"""Modal dialog asking whether to delete a branch.

Display only: y/n and escape are resolved by the app's keybindings so
the session stays the single owner of the mode.

Modified: 2026-10-18
"""

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static


def render_confirm_prompt(branch_name: str) -> Text:
    """Render the dialog body for a branch."""
    return Text("\n").join([
        Text(""),
        Text.assemble("Delete branch ", (branch_name, "bold yellow"), "?"),
        Text("(y/n)", style="bright_black"),
    ])


class ConfirmDeleteModal(ModalScreen):
    """Centered confirmation dialog drawn over the branch list."""

    DEFAULT_CSS = """
    ConfirmDeleteModal {
        align: center middle;
    }

    ConfirmDeleteModal > Container {
        width: 60%;
        height: 5;
        border: solid $error;
        border-title-align: left;
        background: $surface;
    }

    ConfirmDeleteModal Static#prompt {
        width: 100%;
        text-align: center;
    }
    """

    def __init__(self, branch_name: str, width_percent: int = 60, height: int = 5,
                 *args, **kwargs):
        """Initialize the dialog.

        Args:
            branch_name: Branch the user is about to delete
            width_percent: Dialog width as a share of the terminal width
            height: Dialog height in rows
        """
        super().__init__(*args, **kwargs)
        self.branch_name = branch_name
        self.width_percent = width_percent
        self.dialog_height = height

    def compose(self) -> ComposeResult:
        """Compose the modal layout."""
        with Container() as dialog:
            dialog.border_title = "Confirm Delete"
            yield Static(render_confirm_prompt(self.branch_name), id="prompt")

    def on_mount(self) -> None:
        """Size the dialog."""
        dialog = self.query_one(Container)
        dialog.styles.width = f"{self.width_percent}%"
        dialog.styles.height = self.dialog_height
