"""
:Description: Generates the alternate spellings ("forms") and truncated partial spellings ("globs") of a canonical
    license identifier.

    Forms are unambiguous: every form maps back to exactly one identifier. Globs are not: `GPL` is a glob of every
    GPL variant. Both generators are recursive and every recursive call receives a strictly shorter string than its
    caller, which guarantees termination.

    Half-version suffixes (`1.5` through `9.5`) get a compact form with the hyphen dropped, like the whole versions
    do. This changes canonical output: `cc-by2.5` resolves to `CC-BY-2.5`.
"""

from __future__ import annotations

from typing import Final, Iterable

from licensedb.registry.tables import DEPRECATION_MARKER

# Suffixes that may be dropped to get a looser match of an identifier
_GLOB_SUFFIXES: Final[tuple[str, ...]] = ("-only", "-or-later", "-exception", "-note")

_DIGITS: Final[tuple[str, ...]] = tuple(str(i) for i in range(10))

# Half versions, `1.5` through `9.5`
_HALF_VERSIONS: Final[tuple[str, ...]] = tuple(f"{i / 10:g}" for i in range(15, 100, 10))

_OR_LATER: Final[str] = "-or-later"


def dedup(items: Iterable[str]) -> list[str]:
    """
    Removes duplicates while preserving the order of first occurrence.

    :param items: Strings to deduplicate
    :returns: A new list containing every distinct string exactly once
    """
    return list(dict.fromkeys(items))


def hyphen_prefixes(s: str) -> list[str]:
    """
    Returns the cumulative hyphen-delimited prefixes of a string, excluding the full string. A leading hyphen never
    produces an empty prefix.

    Example: `a-b-c-d` -> `["a", "a-b", "a-b-c"]`

    :param s: Target string
    :returns: List of prefixes, shortest first
    """
    return [s[:i] for i, c in enumerate(s) if c == "-" and i > 0]


def canonical_to_forms(canonical: str) -> list[str]:
    """
    Produces every lower-cased spelling that should resolve back to a canonical identifier, starting with the
    identifier itself.

    Example: `GPL-3.0-or-later` -> `gpl-3.0-or-later, gpl-3.0+, gpl-3+, gpl3+, gpl-3.00+`

    :param canonical: Canonical identifier
    :returns: Deduplicated list of forms
    """
    canonical = canonical.lower()
    forms: list[str] = [canonical]

    if f"{_OR_LATER}-" in canonical:
        forms.append(canonical.replace(f"{_OR_LATER}-", "+"))
    elif canonical.endswith(_OR_LATER):
        forms.extend(f"{form}+" for form in canonical_to_forms(canonical.removesuffix(_OR_LATER)))

    if canonical.endswith(".0"):
        forms.extend(canonical_to_forms(canonical.removesuffix(".0")))

    for digit in _DIGITS:
        if canonical.endswith(digit):
            forms.append(canonical.removesuffix(f"-{digit}") + digit)

    for version in _HALF_VERSIONS:
        if canonical.endswith(version):
            forms.append(canonical.removesuffix(f"-{version}") + version)

    return dedup(forms)


def canonical_to_globs(canonical: str) -> list[str]:
    """
    Produces every truncated spelling of an identifier that should be treated as a partial (possibly ambiguous)
    match for it. Case is preserved.

    Example: `GPL-3.0-only` -> `GPL, GPL-3.0, GPL-3., GPL-3.0.0, GPL-3, GPL-, GPL3, GPL3.0`

    :param canonical: Canonical identifier, or any shorter string derived from one
    :returns: Deduplicated list of globs. The empty string is never a glob.
    """
    globs: list[str] = hyphen_prefixes(canonical)

    def _add_trimmed(trimmed: str) -> None:
        globs.append(trimmed)
        globs.extend(canonical_to_globs(trimmed))

    if "-with" in canonical:
        globs.extend(canonical_to_globs(canonical.partition("-with")[0]))

    for suffix in _GLOB_SUFFIXES:
        if canonical.endswith(suffix):
            _add_trimmed(canonical.removesuffix(suffix))

    if canonical.startswith(DEPRECATION_MARKER):
        _add_trimmed(canonical.removeprefix(DEPRECATION_MARKER))

    for digit in _DIGITS:
        if canonical.endswith(f"-{digit}.0"):
            _add_trimmed(canonical.removesuffix(f"-{digit}.0"))

        if canonical.endswith(digit):
            trimmed = canonical.removesuffix(digit)
            globs.append(trimmed)
            # The reverse direction: `GPL-3` also stands for `GPL-3.0`
            globs.append(f"{canonical}.0")
            globs.extend(canonical_to_globs(trimmed))

        if f"-{digit}" in canonical:
            _add_trimmed(canonical.partition(f"-{digit}")[0])
        elif digit in canonical:
            _add_trimmed(canonical.partition(digit)[0])

        if canonical.endswith(f".{digit}"):
            _add_trimmed(canonical.removesuffix(f".{digit}"))

        if canonical.endswith(f"-{digit}"):
            _add_trimmed(canonical.removesuffix(f"-{digit}") + digit)
            _add_trimmed(canonical.removesuffix(f"-{digit}"))

    return dedup(glob for glob in globs if glob)
