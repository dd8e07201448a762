"""
Case Study Endpoints.

Public listing of customer cases and admin CRUD. Admin writes are multipart
forms carrying an optional `image` file.
"""

from typing import List, Optional

from fastapi import APIRouter, File, Form, UploadFile, status

from sitecms.core.models.io.common import ApiResponse
from sitecms.core.models.io.content import CaseCreate, CaseRead, CaseUpdate
from sitecms.server.core.constant import FEATURED_LIMIT
from sitecms.server.services.deps import AdminDep, CaseServiceDep

from .params import PageDep, form_values

router = APIRouter(tags=["cases"])


@router.get(
    "/cases",
    response_model=ApiResponse[List[CaseRead]],
    summary="List Cases",
    description="Paginated case studies, newest first.",
)
async def list_cases(service: CaseServiceDep, paging: PageDep) -> ApiResponse[List[CaseRead]]:
    items, pagination = await service.list_page(paging.page, paging.page_size)
    return ApiResponse[List[CaseRead]](data=[CaseRead.model_validate(c) for c in items], pagination=pagination)


@router.get(
    "/cases/featured",
    response_model=ApiResponse[List[CaseRead]],
    summary="Featured Cases",
)
async def list_featured_cases(service: CaseServiceDep) -> ApiResponse[List[CaseRead]]:
    items = await service.list_featured(FEATURED_LIMIT)
    return ApiResponse[List[CaseRead]](data=[CaseRead.model_validate(c) for c in items])


@router.get(
    "/cases/{case_id}",
    response_model=ApiResponse[CaseRead],
    summary="Get Case",
    responses={404: {"description": "Case not found"}},
)
async def get_case(case_id: str, service: CaseServiceDep) -> ApiResponse[CaseRead]:
    return ApiResponse[CaseRead](data=CaseRead.model_validate(await service.get(case_id)))


@router.get("/admin/cases", response_model=ApiResponse[List[CaseRead]], summary="Admin List Cases")
async def admin_list_cases(_: AdminDep, service: CaseServiceDep, paging: PageDep) -> ApiResponse[List[CaseRead]]:
    return await list_cases(service, paging)


@router.get("/admin/cases/{case_id}", response_model=ApiResponse[CaseRead], summary="Admin Get Case")
async def admin_get_case(case_id: str, _: AdminDep, service: CaseServiceDep) -> ApiResponse[CaseRead]:
    return await get_case(case_id, service)


@router.post(
    "/admin/cases",
    response_model=ApiResponse[CaseRead],
    status_code=status.HTTP_201_CREATED,
    summary="Create Case",
    responses={400: {"description": "Missing title or rejected image"}},
)
async def create_case(
    _: AdminDep,
    service: CaseServiceDep,
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    content: Optional[str] = Form(None),
    company: Optional[str] = Form(None),
    location: Optional[str] = Form(None),
    industry: Optional[str] = Form(None),
    featured: Optional[str] = Form(None),
    display_order: Optional[str] = Form(None, alias="displayOrder"),
    image: Optional[UploadFile] = File(None),
) -> ApiResponse[CaseRead]:
    payload = CaseCreate.model_validate(
        form_values(
            title=title,
            description=description,
            content=content,
            company=company,
            location=location,
            industry=industry,
            featured=featured,
            display_order=display_order,
        )
    )
    case = await service.create(payload, image)
    return ApiResponse[CaseRead](
        code=status.HTTP_201_CREATED, message="Case created successfully", data=CaseRead.model_validate(case)
    )


@router.put(
    "/admin/cases/{case_id}",
    response_model=ApiResponse[CaseRead],
    summary="Update Case",
    responses={404: {"description": "Case not found"}},
)
async def update_case(
    case_id: str,
    _: AdminDep,
    service: CaseServiceDep,
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    content: Optional[str] = Form(None),
    company: Optional[str] = Form(None),
    location: Optional[str] = Form(None),
    industry: Optional[str] = Form(None),
    featured: Optional[str] = Form(None),
    display_order: Optional[str] = Form(None, alias="displayOrder"),
    image: Optional[UploadFile] = File(None),
) -> ApiResponse[CaseRead]:
    payload = CaseUpdate.model_validate(
        form_values(
            title=title,
            description=description,
            content=content,
            company=company,
            location=location,
            industry=industry,
            featured=featured,
            display_order=display_order,
        )
    )
    case = await service.update(case_id, payload, image)
    return ApiResponse[CaseRead](message="Case updated successfully", data=CaseRead.model_validate(case))


@router.delete(
    "/admin/cases/{case_id}",
    response_model=ApiResponse[None],
    summary="Delete Case",
    responses={404: {"description": "Case not found"}},
)
async def delete_case(case_id: str, _: AdminDep, service: CaseServiceDep) -> ApiResponse[None]:
    await service.delete(case_id)
    return ApiResponse[None](message="Case deleted successfully")
