"""
:Description: Provides the lookup tables that canonicalize, shorten and match license identifiers. The tables are
    built once, from the closed set of identifiers provided by the license archive, and are never modified afterwards.
"""

from __future__ import annotations

from typing import Final, Iterable, Optional

from licensedb.exceptions import ArchiveLoadError
from licensedb.registry.forms import canonical_to_forms, canonical_to_globs
from licensedb.registry.tables import ALIASES, DEPRECATED, DEPRECATION_MARKER, EXCEPTIONS, KEYWORDS, Alias
from licensedb.types import MessageCategory, MessageTable

# Characters that separate tokens, in addition to the space character
_WHITESPACE_SEPARATORS: Final[tuple[str, ...]] = ("\t", "\n", "\r")

# Deprecated spellings expand into other spellings, which may in turn be deprecated. This bounds the chain.
MAX_DEPRECATION_DEPTH: Final[int] = 8


class LicenseRegistry:
    """
    Immutable set of look-up tables over a closed set of canonical license identifiers:

      - `Canonical`: form (lower case) -> canonical identifier. Never ambiguous.
      - `Globs`: glob -> identifiers the glob may stand for, in identifier order. Source of all ambiguity.

    Every query method is a pure function of these tables, so a registry may be shared freely across threads.
    """

    def __init__(
        self,
        identifiers: Iterable[str],
        aliases: Iterable[Alias] = ALIASES,
        deprecated: Optional[dict[str, tuple[str, ...]]] = None,
    ) -> None:
        """
        Constructs the registry tables.

        :param identifiers: Canonical identifiers, in the order they should be matched by ambiguous globs
        :param aliases: (Optional) Hand-maintained non-standard spellings. Defaults to the built-in table.
        :param deprecated: (Optional) Deprecated spellings and their replacements. Defaults to the built-in table.
        :raises ArchiveLoadError: If no identifiers are provided.
        """
        self._identifiers: Final[tuple[str, ...]] = tuple(dict.fromkeys(identifiers))
        if not self._identifiers:
            raise ArchiveLoadError("No license identifiers were provided to build the registry from.")
        self._identifier_set: Final[frozenset[str]] = frozenset(self._identifiers)
        self._messages: Final[MessageTable] = MessageTable()

        self._deprecated: Final[dict[str, tuple[str, ...]]] = dict(DEPRECATED if deprecated is None else deprecated)
        self._init_deprecated()

        self._globs: Final[dict[str, list[str]]] = {}
        self._identifier_globs: Final[dict[str, tuple[str, ...]]] = {}
        self._init_globs()

        self._canonical: Final[dict[str, str]] = {}
        self._init_canonical(aliases)

    def _init_deprecated(self) -> None:
        """
        Registers an implicit deprecated entry for every identifier carrying the deprecation marker.
        """
        for identifier in self._identifiers:
            if not identifier.startswith(DEPRECATION_MARKER):
                continue
            clean = identifier.removeprefix(DEPRECATION_MARKER)
            # Explicit entries may expand into whole expressions, so they take priority.
            self._deprecated.setdefault(clean.lower(), (clean,))

    def _init_globs(self) -> None:
        """
        Builds the glob table and the inverse index used to shorten identifiers.
        """
        for identifier in self._identifiers:
            globs = canonical_to_globs(identifier)
            self._identifier_globs[identifier] = tuple(globs)
            for glob in globs:
                matches = self._globs.setdefault(glob, [])
                # Identifiers are unique and generated globs are deduplicated, so this never repeats an entry.
                matches.append(identifier)

    def _init_canonical(self, aliases: Iterable[Alias]) -> None:
        """
        Builds the canonical table. Keywords and aliases are seeded first, so that forms generated from the
        archive's own identifiers take precedence.

        :param aliases: Hand-maintained non-standard spellings
        """
        for keyword in KEYWORDS:
            self._canonical[keyword.lower()] = keyword
        for alias in aliases:
            if alias.identifier not in self._identifier_set and alias.identifier not in self._globs:
                self._messages.add_message(
                    MessageCategory.WARNING,
                    f"Alias `{alias.spelling}` points to an unknown identifier: {alias.identifier}",
                )
            self._canonical[alias.spelling] = alias.identifier
        form_owners: dict[str, str] = {}
        for identifier in self._identifiers:
            for form in canonical_to_forms(identifier):
                previous = form_owners.get(form)
                if previous is not None and previous != identifier:
                    self._messages.add_message(
                        MessageCategory.WARNING,
                        f"Form `{form}` of `{previous}` is overridden by `{identifier}`",
                    )
                form_owners[form] = identifier
                self._canonical[form] = identifier

    @property
    def messages(self) -> MessageTable:
        """
        Warnings collected while the tables were built.
        """
        return self._messages

    def is_identifier(self, token: str) -> bool:
        """
        Indicates if a token is spelled exactly like a canonical identifier.

        :param token: Token to check
        :returns: True if the token is a canonical identifier
        """
        return token in self._identifier_set

    def is_glob(self, token: str) -> bool:
        """
        Indicates if a token is a known (possibly ambiguous) partial identifier.

        :param token: Token to check
        :returns: True if the token is a key of the glob table
        """
        return token in self._globs

    def get_glob_matches(self, glob: str) -> list[str]:
        """
        Returns the identifiers a glob stands for.

        :param glob: Target glob
        :returns: A copy of the glob's match list. Empty for unknown globs.
        """
        return list(self._globs.get(glob, []))

    def get_identifier_globs(self, identifier: str) -> list[str]:
        """
        Returns the globs generated for an identifier.

        :param identifier: Canonical identifier
        :returns: List of globs, in generation order. Empty for unknown identifiers.
        """
        return list(self._identifier_globs.get(identifier, ()))

    @staticmethod
    def is_keyword(token: str) -> bool:
        """
        Indicates if a token is an expression keyword (`AND`, `OR`, `WITH`), regardless of case.

        :param token: Token to check
        :returns: True if the token is a keyword
        """
        return token.upper() in KEYWORDS

    @staticmethod
    def is_exception(token: str) -> bool:
        """
        Indicates if a token is a license exception identifier.

        :param token: Token to check
        :returns: True if the token is on the exception list
        """
        return token in EXCEPTIONS

    ## Tokenizer / canonicalizer ##

    def canonicalize_token(self, token: str) -> str:
        """
        Resolves a single token to its canonical spelling. In order:
          1. A known form, with any deprecation marker removed.
          2. The upper-cased token, if it is a known glob.
          3. Steps 1 and 2 on the token without a trailing `+`, with the `+` re-appended.
          4. The token itself. Unknown tokens are not an error.

        :param token: Token to resolve
        :returns: Canonical spelling of the token
        """
        lower = token.lower()
        if lower in self._canonical:
            return self._canonical[lower].removeprefix(DEPRECATION_MARKER)
        upper = token.upper()
        if upper in self._globs:
            return upper

        trimmed = lower.removesuffix("+")
        if trimmed in self._canonical:
            return self._canonical[trimmed].removeprefix(DEPRECATION_MARKER) + "+"
        upper = trimmed.upper()
        if upper in self._globs:
            return upper + "+"
        return token

    def canonicalize_tokens(self, tokens: Iterable[str], _depth: int = 0) -> list[str]:
        """
        Canonicalizes a sequence of tokens. Blank tokens are dropped and deprecated spellings are replaced by their
        (canonicalized) replacement tokens.

        :param tokens: Tokens to canonicalize
        :returns: Canonical tokens
        """
        canon: list[str] = []
        for token in tokens:
            if not token.strip():
                continue
            replacement = self._deprecated.get(token.lower())
            if replacement is not None and _depth < MAX_DEPRECATION_DEPTH:
                if len(replacement) == 1 and replacement[0].lower() == token.lower():
                    # Implicit entries only restore the un-marked spelling of a deprecated identifier.
                    canon.append(self.canonicalize_token(replacement[0]))
                else:
                    canon.extend(self.canonicalize_tokens(replacement, _depth + 1))
                continue
            canon.append(self.canonicalize_token(token))
        return canon

    def tokenize(self, text: str) -> list[str]:
        """
        Splits a license expression into canonical tokens.

        :param text: License expression
        :returns: Canonical tokens, keywords included
        """
        for separator in _WHITESPACE_SEPARATORS:
            text = text.replace(separator, " ")
        return self.canonicalize_tokens(text.split(" "))

    ## Short-form resolver ##

    def tokens_to_short(self, tokens: list[str]) -> dict[str, str]:
        """
        Picks, for every non-keyword token, the shortest glob that stands for it and for no other token of the same
        list. A glob may be ambiguous globally, as long as it is not ambiguous within this list. Ties are broken
        lexicographically.

        :param tokens: Canonical tokens
        :returns: Mapping of token -> short form. Tokens without a usable glob map to themselves.
        """
        names: Final[set[str]] = {token for token in tokens if not self.is_keyword(token)}
        mapping: dict[str, str] = {}
        for token in names:
            others = names - {token}
            candidates = [
                glob
                for glob in self._identifier_globs.get(token, ())
                if len(glob) < len(token) and others.isdisjoint(self._globs[glob])
            ]
            mapping[token] = min(candidates, key=lambda glob: (len(glob), glob), default=token)
        return mapping

    def to_short_text(self, text: str) -> str:
        """
        Rewrites a license expression using the shortest unambiguous spelling of each identifier.

        :param text: License expression
        :returns: Shortened expression, whitespace collapsed
        """
        tokens: Final[list[str]] = self.tokenize(text)
        mapping: Final[dict[str, str]] = self.tokens_to_short(tokens)
        shortened = [token if self.is_keyword(token) else mapping[token] for token in tokens]
        return " ".join(" ".join(shortened).split())

    ## Matcher ##

    def separate_tokens(self, tokens: Iterable[str]) -> tuple[list[str], list[str]]:
        """
        Splits tokens into licenses and exceptions. Keywords and blank tokens are dropped.

        :param tokens: Canonical tokens
        :returns: Tuple of (licenses, exceptions)
        """
        licenses: list[str] = []
        exceptions: list[str] = []
        for token in tokens:
            if not token.strip() or self.is_keyword(token):
                continue
            if self.is_exception(token):
                exceptions.append(token)
                continue
            licenses.append(token)
        return licenses, exceptions

    def _glob_closure(self, token: str) -> set[str]:
        closure = {token}
        closure.update(self._globs.get(token, ()))
        return closure

    def tokens_match(self, a: str, b: str) -> bool:
        """
        Indicates if two canonical tokens may refer to the same license. `X` and `X+` match each other, and globs
        match every identifier they stand for.

        :param a: Canonical token
        :param b: Canonical token
        :returns: True if the tokens match
        """
        if a == b:
            return True
        if f"{a}+" == b or a == f"{b}+":
            return True
        return not self._glob_closure(a).isdisjoint(self._glob_closure(b))

    def lists_match(self, a: Iterable[str], b: list[str]) -> bool:
        """
        One-way list match: every token of `a` matches some token of `b`.

        :param a: Canonical tokens
        :param b: Canonical tokens
        :returns: True if every token of `a` is matched
        """
        return all(any(self.tokens_match(ea, eb) for eb in b) for ea in a)

    def _token_lists_match_one_way(self, a: list[str], b: list[str]) -> bool:
        a_licenses, a_exceptions = self.separate_tokens(a)
        b_licenses, b_exceptions = self.separate_tokens(b)
        # Exceptions are only compared when both sides name some.
        if a_exceptions and b_exceptions and not self.lists_match(a_exceptions, b_exceptions):
            return False
        return self.lists_match(a_licenses, b_licenses)

    def token_lists_equivalent(self, a: list[str], b: list[str]) -> bool:
        """
        Indicates if two canonical token lists denote the same set of licenses and exceptions. The relation is
        symmetric but not transitive, as one glob may match several distinct identifiers.

        :param a: Canonical tokens
        :param b: Canonical tokens
        :returns: True if the lists are equivalent
        """
        return self._token_lists_match_one_way(a, b) and self._token_lists_match_one_way(b, a)

    ## Glob resolver ##

    def resolve_glob(self, glob: str) -> str:
        """
        Picks one concrete identifier for a glob: the first identifier of its match list, in registry order.

        :param glob: Glob (or identifier) to resolve
        :returns: A canonical identifier, or the glob itself if it cannot be resolved
        """
        return self._resolve_glob(glob, set())

    def _resolve_glob(self, glob: str, visited: set[str]) -> str:
        if self.is_identifier(glob):
            return glob
        visited.add(glob)
        for candidate in self._globs.get(glob, ()):
            if candidate in visited:
                continue
            resolved = self._resolve_glob(candidate, visited)
            if resolved != glob:
                return resolved
        return glob
