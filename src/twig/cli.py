"""
CLI entry point for twig.

Takes no arguments: lists local branches, runs the picker, then switches
to the chosen branch once the terminal has been handed back.

Modified: 2026-10-18
"""

import logging
import sys
from typing import Optional

import click

from twig.config.settings import Settings
from twig.core.exceptions import ExternalToolError, TerminalError, TwigError
from twig.core.git import BranchRepository, GitBranchRepository
from twig.core.session import BranchSession


logger = logging.getLogger(__name__)


def run(repository: BranchRepository, settings: Optional[Settings] = None) -> int:
    """
    Run one picker session against a repository.

    Returns:
        Process exit code
    """
    from twig.tui.app import TwigApp

    settings = settings or Settings()

    try:
        branches = repository.load_branches()
    except TwigError as e:
        click.echo(f"error: {e}", err=True)
        return 1
    except Exception as e:
        logger.error("Listing branches failed", exc_info=True)
        click.echo(f"error: {e}", err=True)
        return 1

    if not branches:
        click.echo("no local branches found", err=True)
        return 0

    session = BranchSession(repository, branches)
    app = TwigApp(session, settings=settings)

    # The terminal is restored by the time run() returns or raises
    try:
        selected = app.run()
    except OSError as e:
        error = TerminalError(f"terminal error: {e}")
        click.echo(f"error: {error}", err=True)
        return 1

    if app.error is not None:
        click.echo(f"error: {app.error}", err=True)
        return 1
    if app.return_code:
        return app.return_code
    if selected is None:
        return 0

    branch = session.state.branches[selected]
    try:
        output = repository.switch_to(branch.name)
    except ExternalToolError as e:
        logger.error(f"Switch to {branch.name} failed", exc_info=True)
        if e.stderr:
            click.echo(e.stderr, err=True)
        else:
            click.echo(f"error: {e}", err=True)
        return e.returncode or 1
    except TwigError as e:
        click.echo(f"error: {e}", err=True)
        return 1
    except Exception as e:
        logger.error(f"Switch to {branch.name} failed", exc_info=True)
        click.echo(f"error: {e}", err=True)
        return 1

    if output:
        click.echo(output, err=True)
    return 0


@click.command(context_settings={"help_option_names": []})
def main():
    """twig - pick a local git branch to switch to."""
    settings = Settings()
    sys.exit(run(GitBranchRepository(settings=settings.git), settings))


if __name__ == "__main__":
    main()
