"""
:Description: Utilities used for creating license archives in tests.
"""

from __future__ import annotations

import io
import zipfile
from pathlib import Path
from typing import Iterable

from tests.constants import TEST_ARCHIVE_ROOT, TEST_IDENTIFIERS


def get_license_text(identifier: str) -> str:
    """
    Returns the placeholder text stored in test archives for an identifier.

    :param identifier: License identifier
    :returns: Text of the "license"
    """
    return f"Full text of {identifier}.\n"


def build_archive_bytes(identifiers: Iterable[str] = TEST_IDENTIFIERS) -> bytes:
    """
    Builds an in-memory zip archive laid out like an SPDX license-list-data release.

    :param identifiers: (Optional) Identifiers to include. Defaults to the curated test set.
    :returns: The zip file contents
    """
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as zip_file:
        zip_file.writestr(f"{TEST_ARCHIVE_ROOT}/", "")
        zip_file.writestr(f"{TEST_ARCHIVE_ROOT}/text/", "")
        zip_file.writestr(f"{TEST_ARCHIVE_ROOT}/README.md", "Not a license.\n")
        zip_file.writestr(f"{TEST_ARCHIVE_ROOT}/json/licenses.json", "{}")
        for identifier in identifiers:
            zip_file.writestr(f"{TEST_ARCHIVE_ROOT}/text/{identifier}.txt", get_license_text(identifier))
    return buffer.getvalue()


def write_archive(path: Path, identifiers: Iterable[str] = TEST_IDENTIFIERS) -> Path:
    """
    Writes a test archive to disk (real or fake).

    :param path: Where to write the archive. Parent directories are created as needed.
    :param identifiers: (Optional) Identifiers to include. Defaults to the curated test set.
    :returns: The path the archive was written to
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(build_archive_bytes(identifiers))
    return path
