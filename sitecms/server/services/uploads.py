"""
Upload Manager.

Accepts a single file per request, validates it against the policy of its
content category, and writes it under ``<UPLOAD_DIR>/<category>/`` with a
generated unique name. Stored files are served back under
``/uploads/<category>/<filename>``.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path, PurePosixPath
from typing import Dict, FrozenSet, List, Optional, Tuple

from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool

from sitecms.core.logging_config import get_logger
from sitecms.server.core.config import settings
from sitecms.server.core.constant import UPLOADS_URL_PREFIX
from sitecms.server.exception_handlers.errors import (
    InvalidFilePathError,
    UploadRejectedError,
)

logger = get_logger(__name__)

MB = 1024 * 1024


class UploadCategory(str, Enum):
    """Content categories, one upload directory each."""

    PRODUCTS = "products"
    CASES = "cases"
    NEWS = "news"
    DOCUMENTS = "documents"
    GALLERY = "gallery"
    HERO = "hero"


IMAGE_MIME_TYPES = frozenset({"image/jpeg", "image/png", "image/gif", "image/webp"})
IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif", ".webp"})
IMAGE_ERROR = "Only image files are allowed (jpeg, png, gif, webp)"

DOCUMENT_MIME_TYPES = frozenset(
    {
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "application/vnd.ms-excel",
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        "application/vnd.ms-powerpoint",
        "application/vnd.openxmlformats-officedocument.presentationml.presentation",
        "text/plain",
        "text/csv",
        "application/zip",
        "application/x-rar-compressed",
        "application/x-7z-compressed",
        "application/x-tar",
        "application/gzip",
        "application/x-gzip",
    }
)
DOCUMENT_EXTENSIONS = frozenset(
    {".pdf", ".doc", ".docx", ".xls", ".xlsx", ".ppt", ".pptx", ".txt", ".csv", ".zip", ".rar", ".7z", ".tar", ".gz", ".tgz"}
)
DOCUMENT_ERROR = "Only document files are allowed (PDF, Word, Excel, PowerPoint, Text, CSV, ZIP, RAR, 7Z, TAR, GZ)"


@dataclass(frozen=True)
class UploadPolicy:
    """Validation rules for one upload category.

    Images must match on MIME type. Documents are accepted when either the
    MIME type or the file extension is allowed, since browsers report many
    office and archive formats as ``application/octet-stream``.
    """

    category: UploadCategory
    max_bytes: int
    mime_types: FrozenSet[str]
    extensions: FrozenSet[str]
    error_message: str
    extension_fallback: bool = False

    def accepts(self, content_type: Optional[str], filename: str) -> bool:
        mime = (content_type or "").split(";")[0].strip().lower()
        if mime in self.mime_types:
            return True
        if self.extension_fallback:
            return PurePosixPath(filename).suffix.lower() in self.extensions
        return False


def _image_policy(category: UploadCategory, max_mb: int) -> UploadPolicy:
    return UploadPolicy(category, max_mb * MB, IMAGE_MIME_TYPES, IMAGE_EXTENSIONS, IMAGE_ERROR)


UPLOAD_POLICIES: Dict[UploadCategory, UploadPolicy] = {
    UploadCategory.PRODUCTS: _image_policy(UploadCategory.PRODUCTS, 50),
    UploadCategory.CASES: _image_policy(UploadCategory.CASES, 50),
    UploadCategory.NEWS: _image_policy(UploadCategory.NEWS, 50),
    UploadCategory.HERO: _image_policy(UploadCategory.HERO, 50),
    UploadCategory.GALLERY: _image_policy(UploadCategory.GALLERY, 10),
    UploadCategory.DOCUMENTS: UploadPolicy(
        UploadCategory.DOCUMENTS,
        50 * MB,
        DOCUMENT_MIME_TYPES,
        DOCUMENT_EXTENSIONS,
        DOCUMENT_ERROR,
        extension_fallback=True,
    ),
}


def policy_for(category: UploadCategory) -> UploadPolicy:
    return UPLOAD_POLICIES[UploadCategory(category)]


@dataclass(frozen=True)
class StoredFile:
    """Result of a successful upload."""

    category: UploadCategory
    filename: str
    size: int

    @property
    def url(self) -> str:
        return f"{UPLOADS_URL_PREFIX}/{self.category.value}/{self.filename}"


@dataclass(frozen=True)
class FileEntry:
    """A file found in an upload directory."""

    filename: str
    url: str
    size: int
    uploaded_at: datetime


class UploadManager:
    """Owns the upload directory tree."""

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)

    def ensure_upload_dirs(self) -> List[Path]:
        """Create one directory per category (idempotent).

        Returns:
            The category directories
        """
        created = []
        for category in UploadCategory:
            directory = self.directory_for(category)
            directory.mkdir(parents=True, exist_ok=True)
            created.append(directory)
        logger.info(f"Upload directories ready under {self.root.resolve()}")
        return created

    def directory_for(self, category: UploadCategory) -> Path:
        return self.root / UploadCategory(category).value

    @staticmethod
    def generate_filename(category: UploadCategory, original_name: Optional[str]) -> str:
        """Build ``{category}-{timestamp_ms}-{random}{ext}``."""
        ext = PurePosixPath(original_name or "").suffix.lower()
        return f"{UploadCategory(category).value}-{int(time.time() * 1000)}-{random.randint(0, 999_999_999)}{ext}"

    async def save(self, category: UploadCategory, upload: UploadFile) -> StoredFile:
        """Validate and persist one uploaded file.

        Args:
            category: Destination category
            upload: The multipart file part

        Returns:
            Descriptor of the written file

        Raises:
            UploadRejectedError: Wrong type, empty body or over the size cap. Nothing is written.
        """
        category = UploadCategory(category)
        policy = policy_for(category)
        original_name = upload.filename or ""

        if not policy.accepts(upload.content_type, original_name):
            logger.info(f"Rejected {category.value} upload {original_name!r} ({upload.content_type})")
            raise UploadRejectedError(policy.error_message)

        payload = await upload.read(policy.max_bytes + 1)
        if len(payload) > policy.max_bytes:
            raise UploadRejectedError(f"File too large (max {policy.max_bytes // MB}MB)")
        if not payload:
            raise UploadRejectedError("Uploaded file is empty")

        filename = self.generate_filename(category, original_name)
        target = self.directory_for(category) / filename
        target.parent.mkdir(parents=True, exist_ok=True)
        await run_in_threadpool(target.write_bytes, payload)

        logger.info(f"Stored {category.value} upload {filename} ({len(payload)} bytes)")
        return StoredFile(category=category, filename=filename, size=len(payload))

    def resolve(self, category: UploadCategory, filename: str) -> Path:
        """Resolve a file name inside its category directory.

        Raises:
            InvalidFilePathError: The name escapes the category directory.
        """
        directory = self.directory_for(category).resolve()
        candidate = (directory / filename).resolve()
        if candidate == directory or not candidate.is_relative_to(directory):
            logger.warning(f"Rejected path outside {directory}: {filename!r}")
            raise InvalidFilePathError("Invalid filename")
        return candidate

    async def delete(self, category: UploadCategory, filename: str) -> bool:
        """Remove a stored file.

        Returns:
            True if the file was removed, False if it did not exist

        Raises:
            InvalidFilePathError: The name escapes the category directory.
        """
        path = self.resolve(category, filename)
        if not path.is_file():
            return False
        await run_in_threadpool(path.unlink)
        logger.info(f"Deleted {category.value} file {path.name}")
        return True

    @staticmethod
    def parse_url(url: Optional[str]) -> Optional[Tuple[UploadCategory, str]]:
        """Split ``/uploads/<category>/<filename>`` into its parts, or None."""
        if not url:
            return None
        parts = PurePosixPath(url).parts
        if len(parts) != 4 or parts[0] != "/" or f"/{parts[1]}" != UPLOADS_URL_PREFIX:
            return None
        try:
            return UploadCategory(parts[2]), parts[3]
        except ValueError:
            return None

    async def delete_url(self, url: Optional[str]) -> bool:
        """Best-effort removal of a stored file referenced by its public URL.

        Used when a record's file is replaced or the record is deleted; a
        missing file or a foreign URL is logged and ignored.
        """
        parsed = self.parse_url(url)
        if parsed is None:
            if url:
                logger.debug(f"Not an upload URL, leaving as is: {url}")
            return False
        category, filename = parsed
        try:
            removed = await self.delete(category, filename)
        except (InvalidFilePathError, OSError) as e:
            logger.warning(f"Could not delete {url}: {e}")
            return False
        if not removed:
            logger.debug(f"File already gone: {url}")
        return removed

    def list_files(self, category: UploadCategory, offset: int = 0, limit: int = 50) -> Tuple[List[FileEntry], int]:
        """List stored files newest first.

        Returns:
            The requested slice and the total number of files
        """
        category = UploadCategory(category)
        directory = self.directory_for(category)
        if not directory.is_dir():
            return [], 0

        entries = []
        for path in directory.iterdir():
            if not path.is_file():
                continue
            stat = path.stat()
            entries.append(
                FileEntry(
                    filename=path.name,
                    url=f"{UPLOADS_URL_PREFIX}/{category.value}/{path.name}",
                    size=stat.st_size,
                    uploaded_at=datetime.fromtimestamp(stat.st_mtime),
                )
            )
        entries.sort(key=lambda entry: entry.uploaded_at, reverse=True)
        return entries[offset : offset + limit], len(entries)


upload_manager = UploadManager(settings.upload_dir)


def get_upload_manager() -> UploadManager:
    """Dependency provider for the process-wide upload manager."""
    return upload_manager
