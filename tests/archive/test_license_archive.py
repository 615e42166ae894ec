"""
:Description: Unit tests for the `LicenseArchive` class. NOTE: All tests in this file should use `pyfakefs` to
    prevent writing to disk.
"""

from __future__ import annotations

import io
import zipfile
from pathlib import Path
from typing import Final

import pytest
from pyfakefs.fake_filesystem import FakeFilesystem

from licensedb.archive.license_archive import LicenseArchive, get_default_archive_path
from licensedb.exceptions import ArchiveLoadError
from tests.file_loading import get_license_text, write_archive

_ARCHIVE_PATH: Final[Path] = Path("/archives/license-list-data.zip")


def _write_zip(path: Path, members: dict[str, str]) -> Path:
    """
    Writes a zip file with arbitrary members.

    :param path: Where to write the zip file
    :param members: Member names mapped to their contents
    :returns: The path the zip file was written to
    """
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as zip_file:
        for name, content in members.items():
            zip_file.writestr(name, content)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(buffer.getvalue())
    return path


def test_load_release_layout(fs: FakeFilesystem) -> None:  # pylint: disable=unused-argument
    """
    Validates that texts are read from the `text/` directory of a release archive.

    :param fs: pyfakefs fixture used to replace the file system
    """
    archive = LicenseArchive(write_archive(_ARCHIVE_PATH, ["MIT", "GPL-3.0-only", "deprecated_GPL-3.0"]))
    assert archive.list_identifiers() == ["GPL-3.0-only", "MIT", "deprecated_GPL-3.0"]
    assert archive.get_text("MIT") == get_license_text("MIT")
    assert archive.get_text("deprecated_GPL-3.0") == get_license_text("deprecated_GPL-3.0")
    assert str(archive) == str(_ARCHIVE_PATH)


def test_load_flat_layout(fs: FakeFilesystem) -> None:  # pylint: disable=unused-argument
    """
    Validates that texts stored at the root of the archive are read, and that other members are skipped.

    :param fs: pyfakefs fixture used to replace the file system
    """
    archive = LicenseArchive(
        _write_zip(
            _ARCHIVE_PATH,
            {
                "MIT.txt": "MIT text",
                "Apache-2.0.txt": "Apache text",
                "notes/README.txt": "Not a license",
                "json/licenses.json": "{}",
                "LICENSE": "Not a license either",
            },
        )
    )
    assert archive.list_identifiers() == ["Apache-2.0", "MIT"]
    assert archive.get_text("Apache-2.0") == "Apache text"
    assert archive.get_text("README") is None


def test_get_text_is_exact(fs: FakeFilesystem) -> None:  # pylint: disable=unused-argument
    """
    Ensures text look-ups are case-sensitive and never resolve spellings.

    :param fs: pyfakefs fixture used to replace the file system
    """
    archive = LicenseArchive(write_archive(_ARCHIVE_PATH, ["MIT"]))
    assert archive.get_text("mit") is None
    assert archive.get_text("MIT+") is None


def test_load_missing_archive(fs: FakeFilesystem) -> None:  # pylint: disable=unused-argument
    """
    Ensures a missing archive raises the correct exception.

    :param fs: pyfakefs fixture used to replace the file system
    """
    with pytest.raises(ArchiveLoadError) as e:
        LicenseArchive(_ARCHIVE_PATH)
    assert str(e.value) == f"The license archive could not be read: {_ARCHIVE_PATH}"


def test_load_corrupt_archive(fs: FakeFilesystem) -> None:
    """
    Ensures a file that is not a zip archive raises the correct exception.

    :param fs: pyfakefs fixture used to replace the file system
    """
    fs.create_file(_ARCHIVE_PATH, contents="<html>Not Found</html>")
    with pytest.raises(ArchiveLoadError) as e:
        LicenseArchive(_ARCHIVE_PATH)
    assert str(e.value) == f"The license archive is corrupt: {_ARCHIVE_PATH}"


def test_load_archive_without_texts(fs: FakeFilesystem) -> None:  # pylint: disable=unused-argument
    """
    Ensures an archive without any license text is rejected.

    :param fs: pyfakefs fixture used to replace the file system
    """
    _write_zip(_ARCHIVE_PATH, {"license-list-data-3.27.0/README.md": "Not a license"})
    with pytest.raises(ArchiveLoadError) as e:
        LicenseArchive(_ARCHIVE_PATH)
    assert str(e.value) == f"The license archive does not contain any license texts: {_ARCHIVE_PATH}"


def test_get_default_archive_path_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Ensures the environment variable takes precedence over the cache directory.

    :param monkeypatch: Pytest fixture used to set the environment
    """
    monkeypatch.setenv("LICENSEDB_ARCHIVE", "/opt/licenses/archive.zip")
    assert get_default_archive_path() == Path("/opt/licenses/archive.zip")


@pytest.mark.parametrize("env_value", [None, ""])
def test_get_default_archive_path_fallback(env_value: str | None, monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Ensures the archive defaults to the user's cache directory when the environment variable is unset or blank.

    :param env_value: Value of the environment variable, `None` to unset it
    :param monkeypatch: Pytest fixture used to set the environment
    """
    if env_value is None:
        monkeypatch.delenv("LICENSEDB_ARCHIVE", raising=False)
    else:
        monkeypatch.setenv("LICENSEDB_ARCHIVE", env_value)
    assert get_default_archive_path() == Path.home() / ".cache" / "licensedb" / "license-list-data.zip"
