"""
:Description: Provides print utility functions
"""

from __future__ import annotations

import json
import sys

from licensedb.types import JsonType


def print_out(*args, **kwargs) -> None:  # type: ignore
    """
    Convenience wrapper that prints to STDOUT
    """
    print(*args, file=sys.stdout, **kwargs)  # type: ignore


def print_err(*args, **kwargs) -> None:  # type: ignore
    """
    Convenience wrapper that prints to STDERR
    """
    print(*args, file=sys.stderr, **kwargs)  # type: ignore


def print_json(data: JsonType) -> None:
    """
    Prints a JSON document to STDOUT, with stable key ordering.

    :param data: JSON-serializable data
    """
    print_out(json.dumps(data, indent=2, sort_keys=True))
