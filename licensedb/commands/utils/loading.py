"""
:Description: Shared option and loader used by every CLI command that queries the license database.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from licensedb.archive.license_archive import ARCHIVE_PATH_ENV_VAR
from licensedb.commands.utils.print import print_err
from licensedb.commands.utils.types import ExitCode
from licensedb.exceptions import ArchiveLoadError
from licensedb.license_db import LicenseDb, load_license_db
from licensedb.types import MessageCategory

log = logging.getLogger(__name__.rsplit(".", maxsplit=1)[-1])

# NOTE: In order for `click` to play nice with `pyfakefs`, we set `path_type=str` and delay converting to a `Path`.
archive_option = click.option(
    "-a",
    "--archive",
    "archive_path",
    type=click.Path(dir_okay=False, path_type=str),
    envvar=ARCHIVE_PATH_ENV_VAR,
    default=None,
    help=f"License text archive to use. Defaults to `${ARCHIVE_PATH_ENV_VAR}`, then to the user's cache directory.",
)


def load_db_or_exit(archive_path: Optional[str]) -> LicenseDb:
    """
    Loads the license database, exiting the program if the archive is unusable.

    :param archive_path: Path provided on the command line, if any
    :returns: The license database
    """
    try:
        db = load_license_db(archive_path)
    except ArchiveLoadError as e:
        print_err(e.message)
        print_err("Use the `fetch` command to download the license archive.")
        sys.exit(ExitCode.ARCHIVE_ERROR)

    for msg in db.messages.get_messages(MessageCategory.WARNING):
        log.debug(msg)
    return db
