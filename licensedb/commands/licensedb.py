"""
:Description: Base CLI for all `licensedb` commands
"""

from __future__ import annotations

import logging

import click

from licensedb.commands.expression import extract, files, forms, match, normalize, short
from licensedb.commands.fetch import fetch


@click.group()
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    show_default=True,
    help="Enables verbose logging (for commands that use the logger).",
)
@click.version_option(package_name="licensedb")
def licensedb(verbose: bool) -> None:
    """
    Command line interface for normalizing and matching SPDX license expressions.
    """
    # Initialize the logger, available to all licensedb commands.
    logging.basicConfig(
        format="%(asctime)s[%(levelname)s][%(name)s]: %(message)s",
        level=logging.DEBUG if verbose else logging.INFO,
    )


licensedb.add_command(normalize)
licensedb.add_command(short)
licensedb.add_command(forms)
licensedb.add_command(extract)
licensedb.add_command(match)
licensedb.add_command(files)
licensedb.add_command(fetch)


if __name__ == "__main__":
    licensedb()
