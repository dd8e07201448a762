"""
Static Page Endpoints (about page).
"""

from fastapi import APIRouter

from sitecms.core.models.io.common import ApiResponse
from sitecms.core.models.io.home import PageAboutRead, PageAboutUpdate
from sitecms.server.services.deps import AdminDep, PageContentServiceDep

router = APIRouter(tags=["pages"])


@router.get(
    "/page/about",
    response_model=ApiResponse[PageAboutRead],
    summary="Get About Page",
    description="Markdown body of the about page (empty until an admin writes it).",
)
async def get_about_page(service: PageContentServiceDep) -> ApiResponse[PageAboutRead]:
    return ApiResponse[PageAboutRead](data=PageAboutRead.model_validate(await service.get_page_about()))


@router.get("/admin/page/about", response_model=ApiResponse[PageAboutRead], summary="Admin Get About Page")
async def admin_get_about_page(_: AdminDep, service: PageContentServiceDep) -> ApiResponse[PageAboutRead]:
    return await get_about_page(service)


@router.put("/admin/page/about", response_model=ApiResponse[PageAboutRead], summary="Update About Page")
async def update_about_page(
    body: PageAboutUpdate, _: AdminDep, service: PageContentServiceDep
) -> ApiResponse[PageAboutRead]:
    page = await service.update_page_about(body.content)
    return ApiResponse[PageAboutRead](message="About page updated successfully", data=PageAboutRead.model_validate(page))
