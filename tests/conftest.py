"""
:Description: Fixtures shared by all test modules.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from licensedb.license_db import LicenseDb
from licensedb.registry.license_registry import LicenseRegistry
from tests.constants import TEST_IDENTIFIERS
from tests.file_loading import write_archive


@pytest.fixture(name="archive_path", scope="session")
def fixture_archive_path(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """
    Path to a (real) test archive containing the curated identifiers.
    """
    return write_archive(tmp_path_factory.mktemp("archive") / "license-list-data.zip")


@pytest.fixture(name="license_db", scope="session")
def fixture_license_db(archive_path: Path) -> LicenseDb:
    """
    License database built from the test archive. Immutable, so it is shared by every test.
    """
    return LicenseDb.from_archive(archive_path)


@pytest.fixture(name="registry", scope="session")
def fixture_registry() -> LicenseRegistry:
    """
    Registry built directly from the curated identifiers.
    """
    return LicenseRegistry(TEST_IDENTIFIERS)
