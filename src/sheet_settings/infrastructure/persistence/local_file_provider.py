"""Local file provider — implements FileProviderPort on the local disk."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from sheet_settings.domain.ports.file_provider import FileProviderPort


class LocalFileProvider(FileProviderPort):
    """Read files directly; write them atomically (temp file, then rename)."""

    def read_bytes(self, path: Path) -> bytes:
        return Path(path).read_bytes()

    def write_bytes(self, path: Path, data: bytes) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
        try:
            with os.fdopen(tmp_fd, "wb") as fh:
                fh.write(data)
            Path(tmp_path).replace(path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise
