"""
:Description: Provides the public interface of the license database: normalization, shortening, extraction and
    matching of license expressions, plus access to license texts.
"""

from __future__ import annotations

import functools
import re
from pathlib import Path
from typing import Final, Optional

from licensedb.archive.license_archive import LicenseArchive, get_default_archive_path
from licensedb.registry.license_registry import LicenseRegistry
from licensedb.types import ExtractedTokens, LicenseFile, LicenseFiles, MessageTable

# Matches a three-part dotted version, like the `3.0.0` in the `GPL-3.0.0` glob
_DOTTED_TRIPLE_RE: Final[re.Pattern[str]] = re.compile(r"\d+\.\d+\.\d+")


def _is_displayable_glob(glob: str) -> bool:
    """
    Indicates if a glob reads like something a person would write.

    :param glob: Target glob
    :returns: True if the glob is suitable for display
    """
    if glob.endswith(("-", ".")):
        return False
    return _DOTTED_TRIPLE_RE.search(glob) is None


class LicenseDb:
    """
    Answers questions about license expressions using the identifiers and texts of a license archive. Instances are
    immutable once constructed.
    """

    def __init__(self, archive: LicenseArchive) -> None:
        """
        Builds the lookup tables for an archive.

        :param archive: Source of identifiers and license texts
        :raises ArchiveLoadError: If the archive does not provide any identifiers.
        """
        self._archive: Final[LicenseArchive] = archive
        self._registry: Final[LicenseRegistry] = LicenseRegistry(archive.list_identifiers())

    @staticmethod
    def from_archive(path: Path | str) -> LicenseDb:
        """
        Convenience constructor that loads an archive from disk.

        :param path: Path to the zip archive
        :raises ArchiveLoadError: If the archive is missing or unusable.
        :returns: A new database instance
        """
        return LicenseDb(LicenseArchive(path))

    @property
    def registry(self) -> LicenseRegistry:
        """
        Lookup tables backing this database.
        """
        return self._registry

    @property
    def messages(self) -> MessageTable:
        """
        Warnings collected while building the lookup tables.
        """
        return self._registry.messages

    def list_identifiers(self) -> list[str]:
        """
        :returns: Every identifier with a known text, sorted.
        """
        return self._archive.list_identifiers()

    def get_text(self, identifier: str) -> Optional[str]:
        """
        :param identifier: Exact identifier to look up
        :returns: The text of the license or exception, or `None` if it is not known.
        """
        return self._archive.get_text(identifier)

    def normalize(self, text: str) -> str:
        """
        Rewrites a license expression using the canonical spelling of every token.

        Example: `asl20 oR gPl-3.0-wIth-autOconf-excEption` ->
            `Apache-2.0 OR GPL-3.0-or-later WITH Autoconf-exception-3.0`

        :param text: License expression
        :returns: Normalized expression, whitespace collapsed
        """
        return " ".join(self._registry.tokenize(text))

    def to_short_text(self, text: str) -> str:
        """
        Rewrites a license expression using the shortest spelling of every identifier that is not ambiguous within
        the expression.

        Example: `GPL-3.0-or-later GPL-2.0-only or mIt` -> `GPL3 GPL2 OR MIT`

        :param text: License expression
        :returns: Shortened expression
        """
        return self._registry.to_short_text(text)

    def to_short_forms(self, identifier: str) -> list[str]:
        """
        Lists the abbreviations of a single identifier that are worth displaying.

        :param identifier: Identifier, in any spelling
        :returns: Sorted list of abbreviations. Empty if the identifier is unknown.
        """
        canonical: Final[str] = self._registry.canonicalize_token(identifier)
        return sorted(
            glob
            for glob in self._registry.get_identifier_globs(canonical)
            if glob != canonical and _is_displayable_glob(glob)
        )

    def extract(self, text: str) -> ExtractedTokens:
        """
        Partitions the tokens of a license expression by how well they resolve. A trailing `+` does not affect the
        classification of a token. Every bucket is deduplicated and keeps the order tokens first appear in.

        :param text: License expression
        :returns: Licenses and exceptions with known texts, ambiguous globs, and unknown tokens
        """
        result: Final[ExtractedTokens] = ExtractedTokens([], [], [], [])
        for token in self._registry.tokenize(text):
            if self._registry.is_keyword(token):
                continue
            base = token.removesuffix("+")
            bucket: list[str]
            if self._archive.get_text(base) is not None:
                bucket = result.exceptions if self._registry.is_exception(base) else result.licenses
            elif self._registry.is_glob(base):
                bucket = result.ambiguous
            else:
                bucket = result.unknown
            if token not in bucket:
                bucket.append(token)
        return result

    def are_matching(self, a: str, b: str) -> bool:
        """
        Indicates if two license expressions name equivalent sets of licenses and exceptions, regardless of spelling.
        Exceptions are only compared if both expressions contain some. The relation is symmetric.

        :param a: License expression
        :param b: License expression
        :returns: True if the expressions are equivalent
        """
        return self._registry.token_lists_equivalent(self._registry.tokenize(a), self._registry.tokenize(b))

    def get_files(self, text: str) -> LicenseFiles:
        """
        Resolves every license and exception in an expression to its text. Ambiguous globs resolve to the first
        identifier they match.

        :param text: License expression
        :returns: Texts keyed by identifier, and the tokens that could not be resolved
        """
        tokens: Final[list[str]] = self._registry.tokenize(text)
        short_names: Final[dict[str, str]] = self._registry.tokens_to_short(tokens)
        files: Final[LicenseFiles] = LicenseFiles({}, {}, [])
        for token in tokens:
            if self._registry.is_keyword(token):
                continue
            identifier = self._registry.resolve_glob(token.removesuffix("+"))
            license_text = self._archive.get_text(identifier)
            if license_text is None:
                if token not in files.unknown:
                    files.unknown.append(token)
                continue
            target = files.exceptions if self._registry.is_exception(identifier) else files.licenses
            target[identifier] = LicenseFile(license_text, short_names[token])
        return files


@functools.cache
def _load_cached(path: Path) -> LicenseDb:
    return LicenseDb.from_archive(path)


def load_license_db(path: Optional[Path | str] = None) -> LicenseDb:
    """
    Returns the process-wide database for an archive. The archive is read and the lookup tables are built on the first
    call for a given path only.

    :param path: (Optional) Path to the archive. Defaults to `LICENSEDB_ARCHIVE`, then to the user's cache directory.
    :raises ArchiveLoadError: If the archive is missing or unusable.
    :returns: The shared database instance
    """
    resolved: Final[Path] = get_default_archive_path() if path is None else Path(path)
    return _load_cached(resolved.expanduser().resolve())
