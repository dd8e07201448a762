"""
Site Settings Endpoints.

Public read-only views (contact, social, company, meta) derived from the
SiteInfo and SiteMeta singletons, plus the admin editors for both.
"""

from fastapi import APIRouter

from sitecms.core.models.io.common import ApiResponse
from sitecms.core.models.io.site_settings import (
    CompanyInfo,
    ContactInfo,
    SiteInfoRead,
    SiteInfoUpdate,
    SiteMetaRead,
    SiteMetaUpdate,
    SocialMedia,
)
from sitecms.server.services.deps import AdminDep, SiteSettingsServiceDep

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/info", response_model=ApiResponse[SiteInfoRead], summary="Get Site Info")
async def get_site_info(service: SiteSettingsServiceDep) -> ApiResponse[SiteInfoRead]:
    return ApiResponse[SiteInfoRead](data=SiteInfoRead.model_validate(await service.get_info()))


@router.get("/contact", response_model=ApiResponse[ContactInfo], summary="Get Contact Info")
async def get_contact(service: SiteSettingsServiceDep) -> ApiResponse[ContactInfo]:
    return ApiResponse[ContactInfo](data=await service.get_contact())


@router.get("/social", response_model=ApiResponse[SocialMedia], summary="Get Social Media Links")
async def get_social(service: SiteSettingsServiceDep) -> ApiResponse[SocialMedia]:
    return ApiResponse[SocialMedia](data=await service.get_social())


@router.get("/company", response_model=ApiResponse[CompanyInfo], summary="Get Company Info")
async def get_company(service: SiteSettingsServiceDep) -> ApiResponse[CompanyInfo]:
    return ApiResponse[CompanyInfo](data=await service.get_company())


@router.get("/meta", response_model=ApiResponse[SiteMetaRead], summary="Get Site Meta")
async def get_site_meta(service: SiteSettingsServiceDep) -> ApiResponse[SiteMetaRead]:
    return ApiResponse[SiteMetaRead](data=SiteMetaRead.model_validate(await service.get_meta()))


@router.get("/admin/info", response_model=ApiResponse[SiteInfoRead], summary="Admin Get Site Info")
async def admin_get_site_info(_: AdminDep, service: SiteSettingsServiceDep) -> ApiResponse[SiteInfoRead]:
    return await get_site_info(service)


@router.put(
    "/admin/info",
    response_model=ApiResponse[SiteInfoRead],
    summary="Update Site Info",
    description="Partial update: only fields present in the body are written. Concurrent edits are last-write-wins.",
)
async def update_site_info(
    body: SiteInfoUpdate, _: AdminDep, service: SiteSettingsServiceDep
) -> ApiResponse[SiteInfoRead]:
    info = await service.update_info(body)
    return ApiResponse[SiteInfoRead](message="Site info updated successfully", data=SiteInfoRead.model_validate(info))


@router.get("/admin/meta", response_model=ApiResponse[SiteMetaRead], summary="Admin Get Site Meta")
async def admin_get_site_meta(_: AdminDep, service: SiteSettingsServiceDep) -> ApiResponse[SiteMetaRead]:
    return await get_site_meta(service)


@router.put("/admin/meta", response_model=ApiResponse[SiteMetaRead], summary="Update Site Meta")
async def update_site_meta(
    body: SiteMetaUpdate, _: AdminDep, service: SiteSettingsServiceDep
) -> ApiResponse[SiteMetaRead]:
    meta = await service.update_meta(body)
    return ApiResponse[SiteMetaRead](message="Site meta updated successfully", data=SiteMetaRead.model_validate(meta))
