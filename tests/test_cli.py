"""
Tests for the click command line entry points
"""

from unittest.mock import patch

from click.testing import CliRunner

from membergraph import __version__
from membergraph.cli import cli
from membergraph.database.cli import main


def test_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_serve_runs_uvicorn_with_memory_store():
    with patch("membergraph.cli.uvicorn.run") as mock_run:
        result = CliRunner().invoke(cli, ["serve", "--port", "9000", "--store", "memory"])

    assert result.exit_code == 0, result.output
    kwargs = mock_run.call_args.kwargs
    assert kwargs["port"] == 9000
    assert not isinstance(mock_run.call_args.args[0], str)


def test_serve_builds_exactly_one_app():
    import membergraph.api.app as app_module

    with (
        patch("membergraph.cli.uvicorn.run"),
        patch.object(app_module, "create_app", wraps=app_module.create_app) as mock_create,
    ):
        result = CliRunner().invoke(cli, ["serve", "--store", "memory"])

    assert result.exit_code == 0, result.output
    mock_create.assert_called_once()
    assert not hasattr(app_module, "app")


def test_serve_with_reload_uses_import_string():
    with patch("membergraph.cli.uvicorn.run") as mock_run:
        result = CliRunner().invoke(cli, ["serve", "--reload"])

    assert result.exit_code == 0, result.output
    assert mock_run.call_args.args[0] == "membergraph.api.app:create_app"
    assert mock_run.call_args.kwargs["factory"] is True
    assert mock_run.call_args.kwargs["workers"] == 1


def test_migrate_commands_listed():
    result = CliRunner().invoke(main, ["--help"])

    assert result.exit_code == 0
    for command in ("upgrade", "downgrade", "revision", "current", "history", "seed"):
        assert command in result.output


def test_upgrade_failure_exits_nonzero():
    with patch("membergraph.database.cli.command.upgrade", side_effect=RuntimeError("boom")):
        result = CliRunner().invoke(main, ["upgrade"])

    assert result.exit_code == 1
