"""
지역(주/도시) API 클라이언트
https://emsifa.github.io/api-wilayah-indonesia 의 정적 JSON 을 조회한다.
"""

from typing import Any, Dict, List, Optional

import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from marketplace.config import settings
from marketplace.monitoring import get_logger
from marketplace.services.exceptions import UpstreamError

logger = get_logger(__name__)


class RegionClient:
    """주(province) / 도시(regency) 조회"""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.base_url = (base_url or settings.region_api_url).rstrip("/")
        self.timeout = timeout or settings.region_api_timeout

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.2, max=2),
        retry=retry_if_exception_type(httpx.TransportError),
        reraise=True,
    )
    async def _get(self, url: str) -> httpx.Response:
        """GET 요청 (연결 오류는 재시도)"""
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.get(url)

    async def _request(self, path: str) -> Any:
        """
        API 요청 공통 메서드

        Raises:
            UpstreamError: 연결 실패 또는 200 이외의 응답
        """
        url = f"{self.base_url}/{path}"

        try:
            response = await self._get(url)
        except httpx.HTTPError as e:
            logger.error(f"지역 API 요청 실패: {url} - {e}")
            raise UpstreamError(f"region api request failed: {e}") from e

        if response.status_code != 200:
            logger.error(f"지역 API 응답 오류: {url} - {response.status_code}")
            raise UpstreamError(f"unexpected status code: {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError("invalid region api response") from e

    async def list_provinces(self) -> List[Dict[str, Any]]:
        return await self._request("provinces.json")

    async def list_cities(self, prov_id: str) -> List[Dict[str, Any]]:
        return await self._request(f"regencies/{prov_id}.json")

    async def get_province(self, prov_id: str) -> Dict[str, Any]:
        return await self._request(f"province/{prov_id}.json")

    async def get_city(self, city_id: str) -> Dict[str, Any]:
        return await self._request(f"regency/{city_id}.json")
