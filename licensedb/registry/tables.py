"""
:Description: Static tables that complement the identifiers found in the license archive: expression keywords,
    hand-maintained aliases, deprecated spellings and the list of identifiers that are license exceptions.
"""

from __future__ import annotations

from typing import Final, NamedTuple

# Prefix the SPDX license-list-data archive puts in front of deprecated identifiers.
DEPRECATION_MARKER: Final[str] = "deprecated_"

# SPDX expression operators, in their canonical spelling
KEYWORDS: Final[tuple[str, ...]] = ("WITH", "AND", "OR")


class Alias(NamedTuple):
    """
    A non-standard (lower case) spelling and the identifier it stands for.
    """

    spelling: str
    identifier: str


ALIASES: Final[tuple[Alias, ...]] = (
    Alias("gpl3", "GPL-3.0"),
    Alias("gpl-3", "GPL-3.0"),
    Alias("gpl2", "GPL-2.0"),
    Alias("gpl-2", "GPL-2.0"),
    # nixpkgs
    Alias("asl20", "Apache-2.0"),
    Alias("asl11", "Apache-1.1"),
)

# Deprecated spellings (lower case) mapped to the tokens that replace them. Replacements may be whole expressions.
# Identifiers carrying the `DEPRECATION_MARKER` get an implicit entry at registry build time, unless listed here.
DEPRECATED: Final[dict[str, tuple[str, ...]]] = {
    "gpl-3.0+": ("gpl-3.0-or-later",),
    "gpl-2.0+": ("gpl-2.0-or-later",),
    "gpl-3.0-with-autoconf-exception": ("gpl-3.0-or-later", "with", "autoconf-exception-3.0"),
    "gpl-3.0-with-gcc-exception": ("gpl-3.0-or-later", "with", "gcc-exception-3.1"),
}

EXCEPTIONS: Final[frozenset[str]] = frozenset(
    {
        "GNU-compiler-exception",
        "GNOME-examples-exception",
        "Autoconf-exception-generic",
        "Autoconf-exception-generic-3.0",
        "Autoconf-exception-macro",
        "Autoconf-exception-2.0",
        "Autoconf-exception-3.0",
        "GCC-exception-2.0-note",
        "GCC-exception-2.0",
        "GCC-exception-3.1",
    }
)
