"""
:Description: Downloads a license text archive (by default, an SPDX license-list-data release) from an HTTP/HTTPS
    source.
"""

from __future__ import annotations

import hashlib
import os
import tempfile
import zipfile
from pathlib import Path
from typing import Final, Iterator, Optional, cast

import requests

from licensedb.archive.license_archive import DEFAULT_ARCHIVE_URL
from licensedb.exceptions import FetchError

# Default download timeout for archives
_DOWNLOAD_TIMEOUT: Final[int] = 5 * 60  # 5 minutes

_CHUNK_SIZE: Final[int] = 1024


class ArchiveFetcher:
    """
    Fetches a license text archive from a remote HTTP/HTTPS host.
    """

    def __init__(self, archive_url: str = DEFAULT_ARCHIVE_URL):
        """
        Constructs an `ArchiveFetcher` instance.

        :param archive_url: (Optional) URL that points to the zip archive. Defaults to the supported SPDX release.
        """
        self._archive_url = archive_url

    def __str__(self) -> str:
        """
        Returns the URL the archive is fetched from.

        :returns: The archive URL
        """
        return self._archive_url

    def fetch(self, destination: Path) -> Path:
        """
        Downloads the archive, replacing any file already stored at the destination. The download is staged in a
        temporary file next to the destination, so a failed download leaves a previous archive untouched.

        :param destination: Path to store the archive at. Parent directories are created as needed.
        :raises FetchError: If an issue occurred while downloading the archive or if the download is not a zip file.
        :returns: The path the archive was written to
        """
        staged_path: Optional[Path] = None
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                dir=destination.parent, prefix=f".{destination.name}.", suffix=".part", delete=False
            ) as archive:
                staged_path = Path(archive.name)
                # Buffered download approach
                response = requests.get(self._archive_url, stream=True, timeout=_DOWNLOAD_TIMEOUT)
                response.raise_for_status()
                for chunk in cast(Iterator[bytes], response.iter_content(chunk_size=_CHUNK_SIZE)):
                    if not chunk:
                        break
                    archive.write(chunk)

            if not zipfile.is_zipfile(staged_path):
                raise FetchError(f"The file downloaded from {self._archive_url} is not a zip archive.")
            os.replace(staged_path, destination)
        except requests.exceptions.RequestException as e:  # type: ignore[misc]
            raise FetchError("An HTTP error occurred while fetching the archive.") from e
        except IOError as e:
            raise FetchError("A file system error occurred while fetching the archive.") from e
        finally:
            if staged_path is not None and staged_path.exists():
                staged_path.unlink()

        return destination

    @staticmethod
    def get_archive_sha256(archive: Path) -> str:
        """
        Calculates a SHA-256 hash on a downloaded archive.

        :param archive: Path to the archive
        :returns: The hash of the file, as a hexadecimal string.
        """
        with open(archive, "rb") as fptr:
            return hashlib.file_digest(fptr, "sha256").hexdigest()
