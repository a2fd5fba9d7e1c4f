"""Port: File provider — path-addressed byte streams."""

from abc import ABC, abstractmethod
from pathlib import Path


class FileProviderPort(ABC):
    """Contract for reading and writing whole files."""

    @abstractmethod
    def read_bytes(self, path: Path) -> bytes:
        """Return the full content of *path*.

        Raises:
            OSError: If the file is missing or cannot be read.
        """
        ...

    @abstractmethod
    def write_bytes(self, path: Path, data: bytes) -> None:
        """Replace the content of *path* with *data*.

        Raises:
            OSError: If the file cannot be written.
        """
        ...
