from typer.testing import CliRunner

import unicode_cli
from unicode_cli.ui.cli import app


def test_get_version_matches_public_api() -> None:
    assert unicode_cli.get_version() == unicode_cli.__version__
    assert isinstance(unicode_cli.__version__, str)


def test_cli_version_flag() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0, result.stdout
    assert result.stdout.strip() == unicode_cli.get_version()
