"""
:Description: Contains types and constants used by CLI commands.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """
    Error codes to return upon script completion.

    All commands define their error codes here, so that they can interop with unique codes for errors without overlap.
    """

    ## All Scripts ##
    SUCCESS = 0
    CLICK_ERROR = 1  # Controlled by the `click` library
    CLICK_USAGE = 2  # Controlled by the `click` library
    # The license archive is missing or corrupt
    ARCHIVE_ERROR = 6

    ## match ##
    NO_MATCH = 10

    ## fetch ##
    HTTP_ERROR = 20
