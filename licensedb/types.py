"""
:Description: Provides public types, type aliases, constants, and small classes used by all modules.
"""

from __future__ import annotations

from enum import StrEnum, auto
from typing import NamedTuple, Union

# Base types that can store value
Primitives = Union[str, int, float, bool, None]

# Type that represents a JSON-like type
JsonType = Union[dict[str, "JsonType"], list["JsonType"], Primitives]


class LicenseFile(NamedTuple):
    """
    License (or exception) text paired with the shortest name that identifies it within an expression.
    """

    text: str
    short_name: str


class ExtractedTokens(NamedTuple):
    """
    Tokens of a license expression, partitioned by how well they resolve.
    """

    # Tokens that name an identifier with known text
    licenses: list[str]
    # Same as `licenses`, but for identifiers on the exception list
    exceptions: list[str]
    # Globs that match more than one identifier
    ambiguous: list[str]
    # Tokens that could not be resolved at all
    unknown: list[str]


class LicenseFiles(NamedTuple):
    """
    Texts of every license and exception referenced by an expression, keyed by the resolved identifier.
    """

    licenses: dict[str, LicenseFile]
    exceptions: dict[str, LicenseFile]
    unknown: list[str]


class MessageCategory(StrEnum):
    """
    Categories to classify messages into.
    """

    WARNING = auto()


class MessageTable:
    """
    Stores and tags messages that may come up during library operations. It is up to the client program to handle the
    logging of these messages. In other words, this class aims to keep logging out of the library code by providing
    an object that can track debugging information.
    """

    def __init__(self) -> None:
        """
        Constructs an empty message table
        """
        self._tbl: dict[MessageCategory, list[str]] = {}

    def add_message(self, category: MessageCategory, message: str) -> None:
        """
        Adds a message to the table

        :param category: Category to file the message under
        :param message: Message to store
        """
        if category not in self._tbl:
            self._tbl[category] = []
        self._tbl[category].append(message)

    def get_messages(self, category: MessageCategory) -> list[str]:
        """
        Returns all the messages stored in a given category

        :param category: Category to target
        :returns: A list containing all the messages stored in a category.
        """
        if category not in self._tbl:
            return []
        return list(self._tbl[category])

    def get_message_count(self, category: MessageCategory) -> int:
        """
        Returns how many messages are stored in a given category

        :param category: Category to target
        :returns: The number of messages stored in a category.
        """
        if category not in self._tbl:
            return 0
        return len(self._tbl[category])
