"""
:Description: Contains general test constants
"""

from __future__ import annotations

from typing import Final

# Curated subset of the SPDX license-list-data release, including the `deprecated_` entries the built-in tables refer
# to. Listed in archive (sorted) order.
TEST_IDENTIFIERS: Final[tuple[str, ...]] = (
    "0BSD",
    "AGPL-3.0-only",
    "AGPL-3.0-or-later",
    "Apache-1.0",
    "Apache-1.1",
    "Apache-2.0",
    "Autoconf-exception-2.0",
    "Autoconf-exception-3.0",
    "Autoconf-exception-generic",
    "Autoconf-exception-generic-3.0",
    "Autoconf-exception-macro",
    "BSD-2-Clause",
    "BSD-3-Clause",
    "BSD-3-Clause-Clear",
    "GCC-exception-2.0",
    "GCC-exception-2.0-note",
    "GCC-exception-3.1",
    "GNOME-examples-exception",
    "GNU-compiler-exception",
    "GPL-1.0-only",
    "GPL-1.0-or-later",
    "GPL-2.0-only",
    "GPL-2.0-or-later",
    "GPL-3.0-389-ds-base-exception",
    "GPL-3.0-interface-exception",
    "GPL-3.0-linking-exception",
    "GPL-3.0-only",
    "GPL-3.0-or-later",
    "LGPL-2.1-only",
    "LGPL-2.1-or-later",
    "LGPL-3.0-only",
    "LGPL-3.0-or-later",
    "MIT",
    "MIT-0",
    "MPL-2.0",
    "Unlicense",
    "deprecated_GPL-1.0",
    "deprecated_GPL-1.0+",
    "deprecated_GPL-2.0",
    "deprecated_GPL-2.0+",
    "deprecated_GPL-3.0",
    "deprecated_GPL-3.0+",
    "deprecated_GPL-3.0-with-GCC-exception",
    "deprecated_GPL-3.0-with-autoconf-exception",
    "deprecated_LGPL-2.1",
    "deprecated_Nunit",
)

# Top-level directory of the archive, as found in SPDX release zips
TEST_ARCHIVE_ROOT: Final[str] = "license-list-data-3.27.0"
