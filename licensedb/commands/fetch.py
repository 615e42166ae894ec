"""
:Description: CLI for downloading the license text archive.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Final, Optional

import click

from licensedb.archive.archive_fetcher import ArchiveFetcher
from licensedb.archive.license_archive import DEFAULT_ARCHIVE_URL, get_default_archive_path
from licensedb.commands.utils.print import print_err, print_out
from licensedb.commands.utils.types import ExitCode
from licensedb.exceptions import ArchiveLoadError, FetchError
from licensedb.license_db import LicenseDb

log = logging.getLogger(__name__.rsplit(".", maxsplit=1)[-1])


@click.command(short_help="Downloads the license text archive.")
@click.option(
    "-u",
    "--url",
    default=DEFAULT_ARCHIVE_URL,
    show_default=True,
    help="URL of the zip archive to download.",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=str),
    default=None,
    help="Where to store the archive. Defaults to `$LICENSEDB_ARCHIVE`, then to the user's cache directory.",
)
def fetch(url: str, output: Optional[str]) -> None:
    """
    Downloads a license text archive (an SPDX license-list-data release by default) and checks that it can be used.
    """
    destination: Final[Path] = get_default_archive_path() if output is None else Path(output)
    fetcher: Final[ArchiveFetcher] = ArchiveFetcher(url)
    log.info("Fetching `%s` into `%s`", fetcher, destination)
    try:
        fetcher.fetch(destination)
    except FetchError as e:
        print_err(e.message)
        sys.exit(ExitCode.HTTP_ERROR)

    try:
        db = LicenseDb.from_archive(destination)
    except ArchiveLoadError as e:
        print_err(e.message)
        sys.exit(ExitCode.ARCHIVE_ERROR)

    log.debug("Archive SHA-256: %s", ArchiveFetcher.get_archive_sha256(destination))
    print_out(f"Stored {len(db.list_identifiers())} license texts in {destination}")
    sys.exit(ExitCode.SUCCESS)
