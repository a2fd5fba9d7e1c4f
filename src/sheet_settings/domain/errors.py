"""Domain errors — custom exceptions for the sheet settings engine.

Only storage failures surface to callers. Content problems (bad enum
values, missing sub-documents, stale derived flags) are repaired in place
by the validity rules and are never reported.
"""


class SheetSettingsError(Exception):
    """Base exception for all sheet settings errors."""


class StorageError(SheetSettingsError):
    """Base class for persistence failures."""

    def __init__(self, path: object, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


class StorageReadError(StorageError):
    """Raised when a settings file is missing, unreadable or not valid JSON."""


class StorageWriteError(StorageError):
    """Raised when a settings file cannot be written."""


class UnknownSettingError(SheetSettingsError):
    """Raised when an editor addresses a field that does not exist."""
