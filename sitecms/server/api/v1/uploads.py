"""
Generic Upload Endpoint.

Stores one file in the directory of the requested category and returns its
public path. Used by editors to embed images in markdown content.
"""

from fastapi import APIRouter, File, UploadFile

from sitecms.core.models.io.common import ApiResponse
from sitecms.core.models.io.uploads import StoredFileRead
from sitecms.server.services.deps import AdminDep, UploadManagerDep
from sitecms.server.services.uploads import UploadCategory

router = APIRouter(prefix="/uploads", tags=["uploads"])


@router.post(
    "/{upload_type}",
    response_model=ApiResponse[StoredFileRead],
    summary="Upload File",
    description=(
        "Upload a single file (multipart field `file`) into one of the upload categories: "
        "products, cases, news, documents, gallery, hero."
    ),
    responses={
        200: {"description": "File stored"},
        400: {"description": "Wrong file type, empty file or over the size limit"},
        401: {"description": "Not authenticated"},
    },
)
async def upload_file(
    upload_type: UploadCategory,
    _: AdminDep,
    uploads: UploadManagerDep,
    file: UploadFile = File(...),
) -> ApiResponse[StoredFileRead]:
    stored = await uploads.save(upload_type, file)
    return ApiResponse[StoredFileRead](
        message="File uploaded successfully",
        data=StoredFileRead(path=stored.url, filename=stored.filename, size=stored.size),
    )
