from __future__ import annotations

from enum import Enum


class ErrorCategory(str, Enum):
    """Classification for error logging."""

    ARGUMENT = "argument"
    STORAGE = "storage"
    CONFIG = "config"
    API = "api"


class MindPalaceError(Exception):
    """Base class for errors surfaced to the interactive loop."""

    category: ErrorCategory = ErrorCategory.API


class InvalidArgumentError(MindPalaceError, ValueError):
    """A room, description or keyword list was missing or malformed."""

    category = ErrorCategory.ARGUMENT


class StoreWriteError(MindPalaceError):
    """The palace document could not be written."""

    category = ErrorCategory.STORAGE


class ConfigurationError(MindPalaceError):
    """Required settings such as credentials are missing."""

    category = ErrorCategory.CONFIG


class DocumentFormatError(MindPalaceError):
    """The palace document holds entries that do not fit the schema.

    Raised instead of rewriting the file, so hand edits are never dropped.
    """

    category = ErrorCategory.STORAGE
