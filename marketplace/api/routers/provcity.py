"""
지역(주/도시) 조회 API
"""

from fastapi import APIRouter, Depends, Request

from marketplace.api.responses import success
from marketplace.monitoring import get_logger
from marketplace.services.region import RegionClient

logger = get_logger(__name__)

router = APIRouter()


def get_region_client() -> RegionClient:
    return RegionClient()


@router.get("/listprovincies")
async def list_provinces(request: Request, client: RegionClient = Depends(get_region_client)):
    """주 목록"""
    return success(request, await client.list_provinces())


@router.get("/listcities/{prov_id}")
async def list_cities(
    request: Request, prov_id: str, client: RegionClient = Depends(get_region_client)
):
    """주에 속한 도시 목록"""
    return success(request, await client.list_cities(prov_id))


@router.get("/detailprovince/{prov_id}")
async def get_province(
    request: Request, prov_id: str, client: RegionClient = Depends(get_region_client)
):
    return success(request, await client.get_province(prov_id))


@router.get("/detailcity/{city_id}")
async def get_city(request: Request, city_id: str, client: RegionClient = Depends(get_region_client)):
    return success(request, await client.get_city(city_id))
