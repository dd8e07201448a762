"""
Downloadable Document Endpoints.

Documents are a title plus an uploaded file (PDF, office formats, archives).
"""

from typing import List, Optional

from fastapi import APIRouter, File, Form, UploadFile, status

from sitecms.core.models.io.common import ApiResponse
from sitecms.core.models.io.content import DocumentCreate, DocumentRead, DocumentUpdate
from sitecms.server.services.deps import AdminDep, DocumentServiceDep

from .params import PageDep, form_values

router = APIRouter(tags=["documents"])


@router.get(
    "/documents",
    response_model=ApiResponse[List[DocumentRead]],
    summary="List Documents",
    description="Paginated downloadable documents, newest first.",
)
async def list_documents(service: DocumentServiceDep, paging: PageDep) -> ApiResponse[List[DocumentRead]]:
    items, pagination = await service.list_page(paging.page, paging.page_size)
    return ApiResponse[List[DocumentRead]](
        data=[DocumentRead.model_validate(d) for d in items],
        pagination=pagination,
    )


@router.get(
    "/documents/{document_id}",
    response_model=ApiResponse[DocumentRead],
    summary="Get Document",
    responses={404: {"description": "Document not found"}},
)
async def get_document(document_id: str, service: DocumentServiceDep) -> ApiResponse[DocumentRead]:
    return ApiResponse[DocumentRead](data=DocumentRead.model_validate(await service.get(document_id)))


@router.get("/admin/documents", response_model=ApiResponse[List[DocumentRead]], summary="Admin List Documents")
async def admin_list_documents(
    _: AdminDep, service: DocumentServiceDep, paging: PageDep
) -> ApiResponse[List[DocumentRead]]:
    return await list_documents(service, paging)


@router.get("/admin/documents/{document_id}", response_model=ApiResponse[DocumentRead], summary="Admin Get Document")
async def admin_get_document(document_id: str, _: AdminDep, service: DocumentServiceDep) -> ApiResponse[DocumentRead]:
    return await get_document(document_id, service)


@router.post(
    "/admin/documents",
    response_model=ApiResponse[DocumentRead],
    status_code=status.HTTP_201_CREATED,
    summary="Create Document",
    description="Upload a document. Both `title` and the `file` part are required.",
    responses={400: {"description": "Missing title, missing file or rejected file type"}},
)
async def create_document(
    _: AdminDep,
    service: DocumentServiceDep,
    title: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
) -> ApiResponse[DocumentRead]:
    payload = DocumentCreate.model_validate(form_values(title=title))
    document = await service.create(payload, file)
    return ApiResponse[DocumentRead](
        code=status.HTTP_201_CREATED,
        message="Document created successfully",
        data=DocumentRead.model_validate(document),
    )


@router.put(
    "/admin/documents/{document_id}",
    response_model=ApiResponse[DocumentRead],
    summary="Update Document",
    description="Rename a document and/or replace its file; the replaced file is deleted.",
    responses={404: {"description": "Document not found"}},
)
async def update_document(
    document_id: str,
    _: AdminDep,
    service: DocumentServiceDep,
    title: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
) -> ApiResponse[DocumentRead]:
    payload = DocumentUpdate.model_validate(form_values(title=title))
    document = await service.update(document_id, payload, file)
    return ApiResponse[DocumentRead](message="Document updated successfully", data=DocumentRead.model_validate(document))


@router.delete(
    "/admin/documents/{document_id}",
    response_model=ApiResponse[None],
    summary="Delete Document",
    responses={404: {"description": "Document not found"}},
)
async def delete_document(document_id: str, _: AdminDep, service: DocumentServiceDep) -> ApiResponse[None]:
    await service.delete(document_id)
    return ApiResponse[None](message="Document deleted successfully")
