"""
Tests for the CLI entry point and exit-code policy.

Modified: 2026-10-18
"""

from unittest.mock import patch

from click.testing import CliRunner

from twig.cli import main, run
from twig.config.settings import GitSettings
from twig.core.exceptions import EncodingError, ExternalToolError, TwigError
from twig.tui.app import TwigApp
from tests.utils import FakeBranchRepository


class BrokenRepository(FakeBranchRepository):
    """Repository whose initial listing fails."""

    def __init__(self, error):
        super().__init__([])
        self.error = error

    def load_branches(self):
        raise self.error


class TestRun:
    """Test run() against a fake repository with the TUI stubbed out."""

    def test_no_branches(self, capsys):
        with patch.object(TwigApp, "run") as mock_run:
            code = run(FakeBranchRepository([]))

        assert code == 0
        assert "no local branches found" in capsys.readouterr().err
        mock_run.assert_not_called()

    def test_list_failure(self, capsys):
        error = ExternalToolError("git for-each-ref failed: fatal: not a git repository")

        with patch.object(TwigApp, "run") as mock_run:
            code = run(BrokenRepository(error))

        assert code == 1
        assert "error: git for-each-ref failed" in capsys.readouterr().err
        mock_run.assert_not_called()

    def test_encoding_failure(self, capsys):
        code = run(BrokenRepository(EncodingError("not valid UTF-8")))

        assert code == 1
        assert "not valid UTF-8" in capsys.readouterr().err

    def test_quit(self, fake_repository):
        with patch.object(TwigApp, "run", return_value=None):
            code = run(fake_repository)

        assert code == 0
        assert fake_repository.switched == []

    def test_switch(self, fake_repository, capsys):
        with patch.object(TwigApp, "run", return_value=1):
            code = run(fake_repository)

        assert code == 0
        assert fake_repository.switched == ["feature"]
        assert "Switched to branch 'feature'" in capsys.readouterr().err

    def test_switch_failure_propagates_git_exit_code(self, sample_branches, capsys):
        repository = FakeBranchRepository(sample_branches, switch_returncode=128)

        with patch.object(TwigApp, "run", return_value=1):
            code = run(repository)

        assert code == 128
        assert "local changes" in capsys.readouterr().err

    def test_session_error_reported_after_run(self, fake_repository, capsys):
        def failing_run(app):
            app.error = TwigError("Failed to delete branch: git branch -d failed: boom")
            return None

        with patch.object(TwigApp, "run", autospec=True, side_effect=failing_run):
            code = run(fake_repository)

        assert code == 1
        assert "error: Failed to delete branch" in capsys.readouterr().err
        assert fake_repository.switched == []

    def test_unexpected_list_error(self, capsys):
        error = PermissionError(13, "Permission denied", "git")

        with patch.object(TwigApp, "run") as mock_run:
            code = run(BrokenRepository(error))

        assert code == 1
        err = capsys.readouterr().err
        assert err.startswith("error: ")
        assert "Permission denied" in err
        assert "Traceback" not in err
        mock_run.assert_not_called()

    def test_unexpected_switch_error(self, sample_branches, capsys):
        class SwitchCrashRepository(FakeBranchRepository):
            def switch_to(self, name):
                raise NotADirectoryError(20, "Not a directory", "git")

        with patch.object(TwigApp, "run", return_value=1):
            code = run(SwitchCrashRepository(sample_branches))

        assert code == 1
        assert "error: " in capsys.readouterr().err

    def test_terminal_failure(self, fake_repository, capsys):
        with patch.object(TwigApp, "run", side_effect=OSError("not a terminal")):
            code = run(fake_repository)

        assert code == 1
        assert "terminal error" in capsys.readouterr().err


class TestMain:
    """Test the click command."""

    def test_exit_code_from_run(self, fake_repository):
        runner = CliRunner()

        with patch("twig.cli.GitBranchRepository", return_value=fake_repository), \
                patch.object(TwigApp, "run", return_value=None):
            result = runner.invoke(main, [])

        assert result.exit_code == 0

    def test_no_branches_message(self):
        runner = CliRunner()

        with patch("twig.cli.GitBranchRepository", return_value=FakeBranchRepository([])):
            result = runner.invoke(main, [])

        assert result.exit_code == 0
        assert "no local branches found" in result.output

    def test_rejects_arguments(self):
        runner = CliRunner()

        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 2

    def test_os_error_from_listing(self):
        runner = CliRunner()
        repository = BrokenRepository(PermissionError(13, "Permission denied", "git"))

        with patch("twig.cli.GitBranchRepository", return_value=repository):
            result = runner.invoke(main, [])

        assert result.exit_code == 1
        assert "error: " in result.output
        assert "Permission denied" in result.output
        assert not isinstance(result.exception, PermissionError)

    def test_git_settings_from_container(self):
        runner = CliRunner()

        with patch("twig.cli.GitBranchRepository",
                   return_value=FakeBranchRepository([])) as repository_class:
            runner.invoke(main, [])

        settings = repository_class.call_args.kwargs["settings"]
        assert settings == GitSettings()
