"""
Homepage Endpoints.

Hero slides accept their id either as a path segment or as ``?id=`` so that
both URL shapes used by the admin dashboard keep working.
"""

from typing import List, Optional, Union

from fastapi import APIRouter, File, Form, Query, UploadFile, status

from sitecms.core.models.io.common import ApiResponse
from sitecms.core.models.io.home import (
    HeroSlideCreate,
    HeroSlideRead,
    HeroSlideUpdate,
    HomeAboutRead,
    HomeAboutUpdate,
)
from sitecms.server.exception_handlers.errors import BadRequestError
from sitecms.server.services.deps import AdminDep, HeroSlideServiceDep, PageContentServiceDep
from sitecms.server.services.home import HeroSlideService

from .params import form_values

router = APIRouter(prefix="/home", tags=["home"])


def _require_id(slide_id: Optional[str]) -> str:
    if not slide_id:
        raise BadRequestError("Slide id is required")
    return slide_id


# =====================================================================
# Hero slides
# =====================================================================


@router.get(
    "/hero-slides",
    response_model=Union[ApiResponse[List[HeroSlideRead]], ApiResponse[HeroSlideRead]],
    summary="Get Hero Slides",
    description="All slides in carousel order, or a single slide when `?id=` is given.",
    responses={404: {"description": "Hero slide not found"}},
)
async def get_hero_slides(
    service: HeroSlideServiceDep,
    slide_id: Optional[str] = Query(None, alias="id"),
    active: bool = Query(False, description="Only slides marked active"),
):
    if slide_id:
        return ApiResponse[HeroSlideRead](data=HeroSlideRead.model_validate(await service.get(slide_id)))
    slides = await service.list_slides(active_only=active)
    return ApiResponse[List[HeroSlideRead]](data=[HeroSlideRead.model_validate(s) for s in slides])


@router.get("/hero-slides/{slide_id}", response_model=ApiResponse[HeroSlideRead], summary="Get Hero Slide")
async def get_hero_slide(slide_id: str, service: HeroSlideServiceDep) -> ApiResponse[HeroSlideRead]:
    return ApiResponse[HeroSlideRead](data=HeroSlideRead.model_validate(await service.get(slide_id)))


@router.post(
    "/hero-slides",
    response_model=ApiResponse[HeroSlideRead],
    status_code=status.HTTP_201_CREATED,
    summary="Create Hero Slide",
    description="Create a slide from a multipart form; `title`, `subtitle` and `link` are required.",
    responses={400: {"description": "Missing required fields or rejected image"}},
)
async def create_hero_slide(
    _: AdminDep,
    service: HeroSlideServiceDep,
    title: Optional[str] = Form(None),
    subtitle: Optional[str] = Form(None),
    link: Optional[str] = Form(None),
    order: Optional[str] = Form(None),
    active: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
) -> ApiResponse[HeroSlideRead]:
    payload = HeroSlideCreate.model_validate(
        form_values(title=title, subtitle=subtitle, link=link, order=order, active=active)
    )
    slide = await service.create(payload, image)
    return ApiResponse[HeroSlideRead](
        code=status.HTTP_201_CREATED,
        message="Hero slide created successfully",
        data=HeroSlideRead.model_validate(slide),
    )


async def _update_slide(
    slide_id: str,
    service: HeroSlideService,
    values: dict,
    image: Optional[UploadFile],
) -> ApiResponse[HeroSlideRead]:
    payload = HeroSlideUpdate.model_validate(form_values(**values))
    slide = await service.update(slide_id, payload, image)
    return ApiResponse[HeroSlideRead](message="Hero slide updated successfully", data=HeroSlideRead.model_validate(slide))


@router.put(
    "/hero-slides",
    response_model=ApiResponse[HeroSlideRead],
    summary="Update Hero Slide (query id)",
    responses={400: {"description": "Missing id"}, 404: {"description": "Hero slide not found"}},
)
async def update_hero_slide_by_query(
    _: AdminDep,
    service: HeroSlideServiceDep,
    slide_id: Optional[str] = Query(None, alias="id"),
    title: Optional[str] = Form(None),
    subtitle: Optional[str] = Form(None),
    link: Optional[str] = Form(None),
    order: Optional[str] = Form(None),
    active: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
) -> ApiResponse[HeroSlideRead]:
    values = {"title": title, "subtitle": subtitle, "link": link, "order": order, "active": active}
    return await _update_slide(_require_id(slide_id), service, values, image)


@router.put(
    "/hero-slides/{slide_id}",
    response_model=ApiResponse[HeroSlideRead],
    summary="Update Hero Slide",
    responses={404: {"description": "Hero slide not found"}},
)
async def update_hero_slide(
    slide_id: str,
    _: AdminDep,
    service: HeroSlideServiceDep,
    title: Optional[str] = Form(None),
    subtitle: Optional[str] = Form(None),
    link: Optional[str] = Form(None),
    order: Optional[str] = Form(None),
    active: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
) -> ApiResponse[HeroSlideRead]:
    values = {"title": title, "subtitle": subtitle, "link": link, "order": order, "active": active}
    return await _update_slide(slide_id, service, values, image)


@router.delete(
    "/hero-slides",
    response_model=ApiResponse[None],
    summary="Delete Hero Slide (query id)",
    responses={400: {"description": "Missing id"}, 404: {"description": "Hero slide not found"}},
)
async def delete_hero_slide_by_query(
    _: AdminDep,
    service: HeroSlideServiceDep,
    slide_id: Optional[str] = Query(None, alias="id"),
) -> ApiResponse[None]:
    await service.delete(_require_id(slide_id))
    return ApiResponse[None](message="Hero slide deleted successfully")


@router.delete(
    "/hero-slides/{slide_id}",
    response_model=ApiResponse[None],
    summary="Delete Hero Slide",
    responses={404: {"description": "Hero slide not found"}},
)
async def delete_hero_slide(slide_id: str, _: AdminDep, service: HeroSlideServiceDep) -> ApiResponse[None]:
    await service.delete(slide_id)
    return ApiResponse[None](message="Hero slide deleted successfully")


# =====================================================================
# Home about block
# =====================================================================


@router.get("/about", response_model=ApiResponse[HomeAboutRead], summary="Get Home About Block")
async def get_home_about(service: PageContentServiceDep) -> ApiResponse[HomeAboutRead]:
    return ApiResponse[HomeAboutRead](data=HomeAboutRead.model_validate(await service.get_home_about()))


@router.put(
    "/about",
    response_model=ApiResponse[HomeAboutRead],
    summary="Update Home About Block",
    description="Multipart form with optional `title`, `content` and `image`; a new image replaces the old one.",
)
async def update_home_about(
    _: AdminDep,
    service: PageContentServiceDep,
    title: Optional[str] = Form(None),
    content: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
) -> ApiResponse[HomeAboutRead]:
    payload = HomeAboutUpdate.model_validate(form_values(title=title, content=content))
    about = await service.update_home_about(payload, image)
    return ApiResponse[HomeAboutRead](message="About section updated successfully", data=HomeAboutRead.model_validate(about))
