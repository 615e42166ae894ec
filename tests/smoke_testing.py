"""
:Description: Collection of smoke tests.
"""

from click import Command
from click.testing import CliRunner


def assert_cli_usage(command: Command, requires_args: bool = True) -> None:
    """
    Smoke test that ensures rendering of the help menu

    :param command: The `click` CLI `Command`.
    :param requires_args: (Optional) Set if invoking the command without arguments is a usage error.
    """
    runner = CliRunner()
    if requires_args:
        result = runner.invoke(command, [])
        assert result.exit_code != 0
        assert "Usage:" in result.output
    # Help is specified
    result = runner.invoke(command, ["--help"])
    assert result.exit_code == 0
    assert result.output.startswith("Usage:")
