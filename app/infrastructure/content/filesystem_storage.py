"""
Adapter: Filesystem asset storage.

Implements ContentFileStorage port. Files are laid out as
``<media_root>/<store_code>/<FileContentType>/<relative path>``.
"""

import logging
import mimetypes
from pathlib import Path, PurePosixPath
from typing import Optional

from app.domain.content.entities import FileContentType, StoredFile
from app.domain.content.errors import InvalidContentError
from app.domain.content.ports import ContentFileStorage

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"


def _safe_parts(relative: Optional[str]) -> tuple[str, ...]:
    """Split a relative path, refusing anything that escapes the root."""
    if relative is None or not relative.strip():
        return ()
    parts = tuple(
        p for p in PurePosixPath(relative.replace("\\", "/")).parts if p not in ("/", ".")
    )
    if ".." in parts:
        raise InvalidContentError(f"path must not contain '..': {relative}")
    return parts


class FilesystemContentStorage(ContentFileStorage):
    """Stores asset bytes on the local filesystem."""

    def __init__(self, media_root: Path) -> None:
        self._media_root = Path(media_root)

    def _type_root(self, store_code: str, file_type: FileContentType) -> Path:
        return self._media_root.joinpath(*_safe_parts(store_code), file_type.value)

    def write(
        self,
        store_code: str,
        file_type: FileContentType,
        name: str,
        data: bytes,
    ) -> StoredFile:
        parts = _safe_parts(name)
        if not parts:
            raise InvalidContentError("file name must not be empty")

        target = self._type_root(store_code, file_type).joinpath(*parts)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
        logger.debug("Wrote %d bytes to %s", len(data), target)
        return self._describe(target, "/".join(parts))

    def list_folder(
        self, store_code: str, file_type: FileContentType, path: Optional[str]
    ) -> list[StoredFile]:
        parts = _safe_parts(path)
        folder = self._type_root(store_code, file_type).joinpath(*parts)
        if not folder.is_dir():
            return []

        prefix = "/".join(parts)
        return [
            self._describe(entry, f"{prefix}/{entry.name}" if prefix else entry.name)
            for entry in sorted(folder.iterdir(), key=lambda p: p.name)
            if entry.is_file()
        ]

    def remove(
        self, store_code: str, file_type: FileContentType, name: str
    ) -> bool:
        parts = _safe_parts(name)
        if not parts:
            return False
        target = self._type_root(store_code, file_type).joinpath(*parts)
        if not target.is_file():
            return False
        target.unlink()
        return True

    @staticmethod
    def _describe(path: Path, relative_path: str) -> StoredFile:
        mime_type, _ = mimetypes.guess_type(path.name)
        return StoredFile(
            name=path.name,
            size=path.stat().st_size,
            content_type=mime_type or DEFAULT_MIME_TYPE,
            relative_path=relative_path,
        )
