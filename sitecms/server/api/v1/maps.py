"""
Map Widget Endpoints.
"""

from typing import List

from fastapi import APIRouter

from sitecms.core.models.io.common import ApiResponse
from sitecms.core.models.io.site_settings import MapConfig, MapLocation
from sitecms.server.services.deps import SiteSettingsServiceDep

router = APIRouter(prefix="/map", tags=["map"])


@router.get(
    "/config",
    response_model=ApiResponse[MapConfig],
    summary="Get Map Config",
    description="Baidu Map key and the default map center (the office location when set).",
)
async def get_map_config(service: SiteSettingsServiceDep) -> ApiResponse[MapConfig]:
    return ApiResponse[MapConfig](data=await service.get_map_config())


@router.get(
    "/locations",
    response_model=ApiResponse[List[MapLocation]],
    summary="Get Map Locations",
    description="Markers for the contact page map; empty until an office address is configured.",
)
async def get_map_locations(service: SiteSettingsServiceDep) -> ApiResponse[List[MapLocation]]:
    return ApiResponse[List[MapLocation]](data=await service.get_map_locations())
