"""
:Description: CLIs that normalize, shorten, inspect and compare license expressions.
"""

from __future__ import annotations

import sys
from typing import Final, Optional

import click

from licensedb.commands.utils.loading import archive_option, load_db_or_exit
from licensedb.commands.utils.print import print_json, print_out
from licensedb.commands.utils.types import ExitCode
from licensedb.license_db import LicenseDb
from licensedb.types import ExtractedTokens, LicenseFiles


@click.command(short_help="Prints the canonical spelling of a license expression.")
@click.argument("expression")
@archive_option
def normalize(expression: str, archive_path: Optional[str]) -> None:
    """
    Prints the canonical spelling of a license expression.

    EXPRESSION: License expression, like `gpl3+ or asl20`
    """
    print_out(load_db_or_exit(archive_path).normalize(expression))


@click.command(short_help="Prints the shortest unambiguous spelling of a license expression.")
@click.argument("expression")
@archive_option
def short(expression: str, archive_path: Optional[str]) -> None:
    """
    Prints the shortest spelling of a license expression that keeps every license distinguishable.

    EXPRESSION: License expression, like `GPL-3.0-or-later OR MIT`
    """
    print_out(load_db_or_exit(archive_path).to_short_text(expression))


@click.command(short_help="Lists the abbreviations of a license identifier.")
@click.argument("identifier")
@archive_option
def forms(identifier: str, archive_path: Optional[str]) -> None:
    """
    Lists the abbreviations of a single license identifier, one per line.

    IDENTIFIER: License identifier, in any spelling
    """
    for short_form in load_db_or_exit(archive_path).to_short_forms(identifier):
        print_out(short_form)


@click.command(short_help="Classifies the tokens of a license expression.")
@click.argument("expression")
@click.option("--json", "as_json", is_flag=True, help="Prints the results as a JSON object.")
@archive_option
def extract(expression: str, as_json: bool, archive_path: Optional[str]) -> None:
    """
    Classifies the tokens of a license expression as licenses, exceptions, ambiguous globs or unknown tokens.

    EXPRESSION: License expression
    """
    extracted: Final[ExtractedTokens] = load_db_or_exit(archive_path).extract(expression)
    if as_json:
        print_json(dict(extracted._asdict()))  # type: ignore[arg-type]
        return
    for field, tokens in extracted._asdict().items():
        print_out(f"{field}: {' '.join(tokens)}")


@click.command(short_help="Checks if two license expressions are equivalent.")
@click.argument("expression_a")
@click.argument("expression_b")
@archive_option
def match(expression_a: str, expression_b: str, archive_path: Optional[str]) -> None:
    """
    Checks if two license expressions name the same licenses and exceptions, regardless of spelling. Exits with a
    non-zero code if they do not.

    EXPRESSION_A: License expression

    EXPRESSION_B: License expression
    """
    db: Final[LicenseDb] = load_db_or_exit(archive_path)
    if db.are_matching(expression_a, expression_b):
        print_out("Expressions match.")
        sys.exit(ExitCode.SUCCESS)
    print_out("Expressions do not match.")
    sys.exit(ExitCode.NO_MATCH)


@click.command(short_help="Prints the texts of the licenses in an expression.")
@click.argument("expression")
@click.option("--json", "as_json", is_flag=True, help="Prints the results as a JSON object.")
@archive_option
def files(expression: str, as_json: bool, archive_path: Optional[str]) -> None:
    """
    Prints the text of every license and exception named by a license expression. Ambiguous globs are resolved to
    the first license they match.

    EXPRESSION: License expression
    """
    license_files: Final[LicenseFiles] = load_db_or_exit(archive_path).get_files(expression)
    if as_json:
        print_json(
            {
                "licenses": {k: v._asdict() for k, v in license_files.licenses.items()},  # type: ignore[misc]
                "exceptions": {k: v._asdict() for k, v in license_files.exceptions.items()},  # type: ignore[misc]
                "unknown": license_files.unknown,  # type: ignore[dict-item]
            }
        )
        return
    for identifier, license_file in (license_files.licenses | license_files.exceptions).items():
        print_out(f"== {identifier} ({license_file.short_name}) ==")
        print_out(license_file.text)
    if license_files.unknown:
        print_out(f"Unknown: {' '.join(license_files.unknown)}")
