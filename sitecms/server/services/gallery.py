"""
Gallery services: titled gallery records plus the raw file browser over the
gallery upload directory.
"""

from __future__ import annotations

from fastapi import UploadFile

from sitecms.core.database.entities.gallery import Gallery
from sitecms.core.database.repositories.gallery import GalleryRepository
from sitecms.core.models.io.gallery import GalleryFileList, GalleryFileRead
from sitecms.server.exception_handlers.errors import NotFoundError

from .base import EntityService
from .uploads import StoredFile, UploadCategory, UploadManager


class GalleryService(EntityService[Gallery]):
    """Gallery records reference images uploaded beforehand; deleting a record keeps the file."""

    label = "Gallery item"

    def __init__(self, repository: GalleryRepository, uploads: UploadManager) -> None:
        super().__init__(repository, uploads)

    async def upload_image(self, upload: UploadFile) -> StoredFile:
        return await self.uploads.save(UploadCategory.GALLERY, upload)

    def list_files(self, offset: int, limit: int) -> GalleryFileList:
        entries, total = self.uploads.list_files(UploadCategory.GALLERY, offset, limit)
        return GalleryFileList(
            files=[
                GalleryFileRead(filename=e.filename, url=e.url, size=e.size, uploaded_at=e.uploaded_at)
                for e in entries
            ],
            total=total,
            offset=offset,
            limit=limit,
        )

    async def delete_file(self, filename: str) -> None:
        """Delete a gallery file by name.

        Raises:
            InvalidFilePathError: The name escapes the gallery directory.
            NotFoundError: No such file.
        """
        if not await self.uploads.delete(UploadCategory.GALLERY, filename):
            raise NotFoundError("Image not found")
