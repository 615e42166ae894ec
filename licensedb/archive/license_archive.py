"""
:Description: Provides read-only access to a license text archive.

                The archive is a zip file laid out like the SPDX license-list-data releases (freely available for use):
                  - https://github.com/spdx/license-list-data/tree/main/text

                Every `text/<ID>.txt` member (or `<ID>.txt` member at the archive root) holds the text of the license
                or exception `<ID>`. Deprecated identifiers are prefixed with `deprecated_`.
"""

from __future__ import annotations

import os
import zipfile
from pathlib import Path, PurePosixPath
from typing import Final, Optional

from licensedb.exceptions import ArchiveLoadError

# Environment variable that may point to the archive to use
ARCHIVE_PATH_ENV_VAR: Final[str] = "LICENSEDB_ARCHIVE"

# Release of the SPDX license list that the built-in tables were written against
SPDX_LICENSE_LIST_VERSION: Final[str] = "3.27.0"

DEFAULT_ARCHIVE_URL: Final[str] = (
    f"https://github.com/spdx/license-list-data/archive/refs/tags/v{SPDX_LICENSE_LIST_VERSION}.zip"
)

# Name of the directory, inside the archive, that contains the license texts
_TEXT_DIR_NAME: Final[str] = "text"
_TEXT_FILE_EXT: Final[str] = ".txt"


def get_default_archive_path() -> Path:
    """
    Returns the location the archive is read from when no path is provided: the path in `LICENSEDB_ARCHIVE` if it is
    set, otherwise a file in the user's cache directory.

    :returns: Path to the default archive location
    """
    env_path: Final[str] = os.environ.get(ARCHIVE_PATH_ENV_VAR, "")
    if env_path:
        return Path(env_path)
    return Path.home() / ".cache" / "licensedb" / "license-list-data.zip"


class LicenseArchive:
    """
    Read-only, in-memory copy of the license texts stored in a zip archive.
    """

    def __init__(self, path: Path | str) -> None:
        """
        Reads every license text in an archive.

        :param path: Path to the zip archive
        :raises ArchiveLoadError: If the archive is missing, corrupt or does not contain any license text.
        """
        self._path: Final[Path] = Path(path)
        self._texts: Final[dict[str, str]] = {}
        try:
            with zipfile.ZipFile(self._path) as zip_file:
                for info in zip_file.infolist():
                    identifier = LicenseArchive._member_to_identifier(info)
                    if identifier is None:
                        continue
                    self._texts[identifier] = zip_file.read(info).decode("utf-8", errors="replace")
        except (zipfile.BadZipFile, zipfile.LargeZipFile) as e:
            raise ArchiveLoadError(f"The license archive is corrupt: {self._path}") from e
        except IOError as e:
            raise ArchiveLoadError(f"The license archive could not be read: {self._path}") from e

        if not self._texts:
            raise ArchiveLoadError(f"The license archive does not contain any license texts: {self._path}")

        self._identifiers: Final[tuple[str, ...]] = tuple(sorted(self._texts))

    @staticmethod
    def _member_to_identifier(info: zipfile.ZipInfo) -> Optional[str]:
        """
        Derives the identifier of a license text member.

        :param info: Zip member to examine
        :returns: The identifier, or `None` if the member is not a license text.
        """
        if info.is_dir():
            return None
        member: Final[PurePosixPath] = PurePosixPath(info.filename)
        if member.suffix != _TEXT_FILE_EXT:
            return None
        if len(member.parts) > 1 and member.parent.name != _TEXT_DIR_NAME:
            return None
        return member.name.removesuffix(_TEXT_FILE_EXT)

    def __str__(self) -> str:
        """
        Returns the location of the archive.

        :returns: The archive's path, as a string
        """
        return str(self._path)

    def list_identifiers(self) -> list[str]:
        """
        Returns the closed set of identifiers found in the archive.

        :returns: Sorted list of identifiers
        """
        return list(self._identifiers)

    def get_text(self, identifier: str) -> Optional[str]:
        """
        Returns the text of a license or exception.

        :param identifier: Exact identifier to look up
        :returns: The text, or `None` if the archive does not contain the identifier.
        """
        return self._texts.get(identifier)
