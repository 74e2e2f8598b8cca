"""Test utilities and helper functions.

Modified: 2026-10-18
"""

import shutil
from typing import List, Optional, Set

import pytest

from twig.core.exceptions import ExternalToolError
from twig.core.models import Branch


requires_git = pytest.mark.skipif(
    shutil.which("git") is None, reason="git executable not available"
)


def create_test_branch(name: str, **overrides) -> Branch:
    """Factory for creating test branches with sensible defaults.

    Args:
        name: Branch name
        **overrides: Override any default fields

    Returns:
        Branch instance

    Example:
        branch = create_test_branch("main", is_current=True)
    """
    defaults = {
        "name": name,
        "short_revision": "abc1234",
        "is_current": False,
    }

    # Merge overrides
    defaults.update(overrides)

    return Branch(**defaults)


def create_batch_branches(count: int, current: Optional[int] = 0) -> List[Branch]:
    """Create ``count`` branches named branch-0..branch-N, one of them current."""
    return [
        create_test_branch(f"branch-{i}", is_current=i == current)
        for i in range(count)
    ]


class FakeBranchRepository:
    """In-memory stand-in for GitBranchRepository.

    Records every call so tests can assert on what the session asked for.
    """

    def __init__(
        self,
        branches: List[Branch],
        fail_delete: Optional[Set[str]] = None,
        switch_returncode: int = 0,
    ):
        self.branches = list(branches)
        self.fail_delete = fail_delete or set()
        self.switch_returncode = switch_returncode
        self.load_calls = 0
        self.deleted: List[str] = []
        self.switched: List[str] = []

    def load_branches(self) -> List[Branch]:
        self.load_calls += 1
        return list(self.branches)

    def delete(self, name: str) -> None:
        if name in self.fail_delete:
            raise ExternalToolError(
                f"git branch -d failed: error: cannot delete branch '{name}'",
                stderr=f"error: cannot delete branch '{name}'",
                returncode=1,
            )
        self.deleted.append(name)
        self.branches = [b for b in self.branches if b.name != name]

    def switch_to(self, name: str) -> str:
        self.switched.append(name)
        if self.switch_returncode:
            raise ExternalToolError(
                "git switch failed: error: your local changes would be overwritten",
                stderr="error: your local changes would be overwritten",
                returncode=self.switch_returncode,
            )
        return f"Switched to branch '{name}'"
