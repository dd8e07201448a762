"""
Gallery Endpoints.

Two resources live under the admin gallery:

- gallery *records* (title + image URL) shown on the public gallery page, and
- the *file browser* over ``/uploads/gallery`` used to upload and prune images.

The file browser routes sit under ``/admin/gallery/files`` and
``/admin/gallery/upload`` so that they never collide with record ids.
"""

from typing import List

from fastapi import APIRouter, File, Query, UploadFile, status

from sitecms.core.models.io.common import ApiResponse
from sitecms.core.models.io.gallery import GalleryCreate, GalleryFileList, GalleryRead, GalleryUpdate
from sitecms.core.models.io.uploads import StoredFileRead
from sitecms.server.core.constant import GALLERY_PAGE_SIZE, MAX_PAGE_SIZE
from sitecms.server.services.deps import AdminDep, GalleryServiceDep

from .params import PageDep

router = APIRouter(tags=["gallery"])


@router.get(
    "/gallery",
    response_model=ApiResponse[List[GalleryRead]],
    summary="List Gallery",
    description="Paginated gallery records, newest first (12 per page by default).",
)
async def list_gallery(
    service: GalleryServiceDep,
    page: int = Query(1, ge=1),
    page_size: int = Query(GALLERY_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, alias="pageSize"),
) -> ApiResponse[List[GalleryRead]]:
    items, pagination = await service.list_page(page, page_size)
    return ApiResponse[List[GalleryRead]](data=[GalleryRead.model_validate(g) for g in items], pagination=pagination)


# =====================================================================
# Admin: file browser
# =====================================================================


@router.get(
    "/admin/gallery/files",
    response_model=ApiResponse[GalleryFileList],
    summary="List Gallery Files",
    description="Files in the gallery upload directory, newest first.",
)
async def list_gallery_files(
    _: AdminDep,
    service: GalleryServiceDep,
    offset: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=MAX_PAGE_SIZE),
) -> ApiResponse[GalleryFileList]:
    return ApiResponse[GalleryFileList](data=service.list_files(offset, limit))


@router.post(
    "/admin/gallery/upload",
    response_model=ApiResponse[StoredFileRead],
    status_code=status.HTTP_201_CREATED,
    summary="Upload Gallery Image",
    description="Upload one image (max 10MB) to the gallery directory.",
    responses={400: {"description": "Not an image, empty or too large"}},
)
async def upload_gallery_image(
    _: AdminDep, service: GalleryServiceDep, image: UploadFile = File(...)
) -> ApiResponse[StoredFileRead]:
    stored = await service.upload_image(image)
    return ApiResponse[StoredFileRead](
        code=status.HTTP_201_CREATED,
        message="Image uploaded successfully",
        data=StoredFileRead(path=stored.url, filename=stored.filename, size=stored.size),
    )


@router.delete(
    "/admin/gallery/files/{filename}",
    response_model=ApiResponse[None],
    summary="Delete Gallery Image",
    responses={
        400: {"description": "Invalid filename"},
        404: {"description": "Image not found"},
    },
)
async def delete_gallery_file(filename: str, _: AdminDep, service: GalleryServiceDep) -> ApiResponse[None]:
    await service.delete_file(filename)
    return ApiResponse[None](message="Image deleted successfully")


# =====================================================================
# Admin: records
# =====================================================================


@router.get("/admin/gallery", response_model=ApiResponse[List[GalleryRead]], summary="Admin List Gallery")
async def admin_list_gallery(
    _: AdminDep, service: GalleryServiceDep, paging: PageDep
) -> ApiResponse[List[GalleryRead]]:
    items, pagination = await service.list_page(paging.page, paging.page_size)
    return ApiResponse[List[GalleryRead]](data=[GalleryRead.model_validate(g) for g in items], pagination=pagination)


@router.post(
    "/admin/gallery",
    response_model=ApiResponse[GalleryRead],
    status_code=status.HTTP_201_CREATED,
    summary="Create Gallery Record",
)
async def create_gallery_item(body: GalleryCreate, _: AdminDep, service: GalleryServiceDep) -> ApiResponse[GalleryRead]:
    item = await service.create(body)
    return ApiResponse[GalleryRead](
        code=status.HTTP_201_CREATED,
        message="Gallery item created successfully",
        data=GalleryRead.model_validate(item),
    )


@router.get(
    "/admin/gallery/{item_id}",
    response_model=ApiResponse[GalleryRead],
    summary="Get Gallery Record",
    responses={404: {"description": "Gallery item not found"}},
)
async def get_gallery_item(item_id: str, _: AdminDep, service: GalleryServiceDep) -> ApiResponse[GalleryRead]:
    return ApiResponse[GalleryRead](data=GalleryRead.model_validate(await service.get(item_id)))


@router.put(
    "/admin/gallery/{item_id}",
    response_model=ApiResponse[GalleryRead],
    summary="Update Gallery Record",
    responses={404: {"description": "Gallery item not found"}},
)
async def update_gallery_item(
    item_id: str, body: GalleryUpdate, _: AdminDep, service: GalleryServiceDep
) -> ApiResponse[GalleryRead]:
    item = await service.update(item_id, body)
    return ApiResponse[GalleryRead](message="Gallery item updated successfully", data=GalleryRead.model_validate(item))


@router.delete(
    "/admin/gallery/{item_id}",
    response_model=ApiResponse[None],
    summary="Delete Gallery Record",
    description="Delete a gallery record. The image file itself stays in the file browser.",
    responses={404: {"description": "Gallery item not found"}},
)
async def delete_gallery_item(item_id: str, _: AdminDep, service: GalleryServiceDep) -> ApiResponse[None]:
    await service.delete(item_id)
    return ApiResponse[None](message="Gallery item deleted successfully")
