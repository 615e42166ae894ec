"""
:Description: Provides exceptions for the license database.
"""

from __future__ import annotations


class LicenseDbException(Exception):
    """
    Base exception for all other license database exceptions. Should not be raised directly.
    """


class ArchiveLoadError(LicenseDbException):
    """
    The license text archive could not be loaded. Every lookup table is derived from the archive, so this is not
    recoverable.
    """

    def __init__(self, message: str):
        """
        Constructs an ArchiveLoadError Exception.

        :param message: String description of the issue encountered.
        """
        self.message = message if len(message) else "The license archive could not be loaded."
        super().__init__(self.message)


class FetchError(LicenseDbException):
    """
    General exception to be thrown when there is a failure to download a license archive.
    """

    def __init__(self, message: str):
        """
        Constructs a FetchError Exception.

        :param message: String description of the issue encountered.
        """
        self.message = message if len(message) else "An unknown error occurred while trying to fetch the archive."
        super().__init__(self.message)
