"""Branch list panel for twig.

Modified: 2026-10-18
"""

from typing import List, Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.geometry import Region
from textual.widgets import Static

from ...core.models import Branch


def render_branch_row(branch: Branch, selected: bool) -> Text:
    """Format one row as ``<sel><cur> <name>  <revision>``."""
    prefix = ">" if selected else " "
    marker = "*" if branch.is_current else " "
    return Text.assemble(
        f"{prefix}{marker} ",
        (branch.name, "bold" if selected else ""),
        f"  {branch.short_revision}",
    )


def render_branch_rows(branches: List[Branch], selected_index: int) -> Text:
    """Render the whole list. Pure: same input, same Text."""
    rows = [
        render_branch_row(branch, i == selected_index)
        for i, branch in enumerate(branches)
    ]
    return Text("\n").join(rows)


class BranchList(VerticalScroll):
    """Bordered panel listing every local branch."""

    DEFAULT_CSS = """
    BranchList {
        height: 1fr;
        border: solid $accent;
        border-title-align: left;
    }

    BranchList > #branch-rows {
        width: 100%;
    }
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.border_title = "branches"
        self.rows_view: Optional[Static] = None

    def compose(self) -> ComposeResult:
        self.rows_view = Static("", id="branch-rows")
        yield self.rows_view

    def show(self, branches: List[Branch], selected_index: int) -> None:
        """Redraw the rows and keep the selected one in view."""
        if self.rows_view is None:
            return
        self.rows_view.update(render_branch_rows(branches, selected_index))
        if branches:
            self.scroll_to_region(Region(0, selected_index, 1, 1), animate=False)
