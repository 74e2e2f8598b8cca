"""
git access for twig.

Lists, switches and deletes local branches by running the git executable
through GitPython's command wrapper. The session only sees the
``BranchRepository`` protocol, so tests can swap in an in-memory fake.

Modified: 2026-10-18
"""

import logging
from pathlib import Path
from typing import List, Optional, Protocol, Tuple, Union

from git import Git
from git.exc import GitCommandNotFound

from twig.config.settings import GitSettings
from twig.core.exceptions import EncodingError, ExternalToolError
from twig.core.models import Branch


logger = logging.getLogger(__name__)

REF_FIELDS = ("%(refname:short)", "%(objectname:short)", "%(HEAD)")


class BranchRepository(Protocol):
    """What the session needs from the version-control backend."""

    def load_branches(self) -> List[Branch]:
        ...

    def delete(self, name: str) -> None:
        ...

    def switch_to(self, name: str) -> str:
        ...


def parse_branch_lines(
    output: str,
    delimiter: str = "|",
    head_marker: str = "*",
) -> List[Branch]:
    """
    Parse ``git for-each-ref`` output into branches.

    Every non-blank line yields one branch, in input order. Fields beyond
    the third are ignored; missing trailing fields default to "".

    Args:
        output: Raw stdout text
        delimiter: Field separator used in the --format string
        head_marker: Value of %(HEAD) for the checked-out branch

    Returns:
        List of Branch instances
    """
    branches = []
    for line in output.splitlines():
        if not line.strip():
            continue
        parts = line.split(delimiter)
        name, revision, head = (parts + ["", "", ""])[:3]
        branches.append(
            Branch(name=name, short_revision=revision, is_current=head == head_marker)
        )
    return branches


class GitBranchRepository:
    """Branch lister and mutator backed by the git executable."""

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        settings: Optional[GitSettings] = None,
    ):
        """
        Args:
            path: Working directory for git (default: current directory)
            settings: git invocation settings
        """
        self.settings = settings or GitSettings()
        self.git = Git(str(path) if path is not None else None)

    def _run(self, *args: str) -> Tuple[int, bytes, str]:
        """Run git and return (status, raw stdout, stderr text)."""
        command = [self.settings.executable, *args]
        logger.debug(f"Running {' '.join(command)}")
        try:
            status, stdout, stderr = self.git.execute(
                command,
                with_extended_output=True,
                with_exceptions=False,
                stdout_as_string=False,
            )
        except GitCommandNotFound as e:
            raise ExternalToolError(f"{command[0]} could not be executed: {e}") from e
        logger.debug(f"{' '.join(command[:3])} exited with {status}")
        return status, stdout, stderr

    def load_branches(self) -> List[Branch]:
        """
        List local branches, most recently committed first.

        Raises:
            ExternalToolError: git for-each-ref exited non-zero
            EncodingError: Output is not valid UTF-8
        """
        status, stdout, stderr = self._run(
            "for-each-ref",
            "--sort=-committerdate",
            f"--format={self.settings.field_delimiter.join(REF_FIELDS)}",
            "refs/heads",
        )
        if status != 0:
            raise ExternalToolError(
                f"git for-each-ref failed: {stderr}", stderr=stderr, returncode=status
            )

        try:
            text = stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise EncodingError(f"git for-each-ref output is not valid UTF-8: {e}") from e

        branches = parse_branch_lines(
            text,
            delimiter=self.settings.field_delimiter,
            head_marker=self.settings.head_marker,
        )
        logger.info(f"Loaded {len(branches)} branches")
        return branches

    def delete(self, name: str) -> None:
        """
        Delete a branch, forcing it when git reports it as not fully merged.

        Raises:
            ExternalToolError: Deletion failed
        """
        status, _, stderr = self._run("branch", "-d", name)
        if status == 0:
            logger.info(f"Deleted branch {name}")
            return

        if self.settings.not_merged_marker not in stderr:
            raise ExternalToolError(
                f"git branch -d failed: {stderr}", stderr=stderr, returncode=status
            )

        logger.info(f"Branch {name} is not fully merged, forcing deletion")
        status, _, stderr = self._run("branch", "-D", name)
        if status != 0:
            raise ExternalToolError(
                f"git branch -D failed: {stderr}", stderr=stderr, returncode=status
            )
        logger.info(f"Force-deleted branch {name}")

    def switch_to(self, name: str) -> str:
        """
        Check out a branch.

        Returns:
            Whatever git printed, for relaying to the user

        Raises:
            ExternalToolError: git switch exited non-zero; ``returncode``
                holds its exit status
        """
        status, stdout, stderr = self._run("switch", name)
        output = "\n".join(
            part for part in (stdout.decode("utf-8", errors="replace"), stderr) if part
        )
        if status != 0:
            raise ExternalToolError(
                f"git switch failed: {stderr}", stderr=output, returncode=status
            )
        logger.info(f"Switched to branch {name}")
        return output
