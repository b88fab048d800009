"""
Utilities package for the roster manager.

This package provides utility functions used by the command-line interface.
"""
from .helpers import (
    ensure_directory,
    save_json,
    load_json,
    rosters_from_document,
    rosters_to_document
)

__all__ = [
    "ensure_directory",
    "save_json",
    "load_json",
    "rosters_from_document",
    "rosters_to_document"
]
