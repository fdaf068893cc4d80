"""GitHub 검색 API 소스."""

from typing import Any

import httpx

from java_pulse.config import settings
from java_pulse.sources.base import fetch_json, require_positive

JAVA_QUERY = "language:java"


class GitHubSource:
    """GitHub 검색 API에서 Java 저장소 데이터를 가져온다."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """GitHubSource 인스턴스를 초기화한다.

        Args:
            base_url: API 주소. None이면 설정값 사용.
            timeout: HTTP 요청 타임아웃 (초). None이면 제한 없음.
            transport: 테스트 등에서 주입하는 HTTP transport
        """
        self.base_url = (base_url or settings.github_api_url).rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def _search(self, params: dict[str, str | int]) -> Any:
        """저장소 검색 엔드포인트를 호출한다."""
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self.transport
        ) as client:
            return await fetch_json(
                client, f"{self.base_url}/search/repositories", params=params
            )

    async def fetch_repositories(self, page: int = 1, per_page: int = 10) -> Any:
        """스타 순으로 정렬된 Java 저장소 검색 결과를 가져온다.

        Args:
            page: 페이지 번호 (1부터 시작)
            per_page: 페이지당 결과 수

        Returns:
            검색 API 응답 JSON (total_count, items 포함)
        """
        require_positive("page", page)
        require_positive("per_page", per_page)
        return await self._search(
            {
                "q": JAVA_QUERY,
                "sort": "stars",
                "order": "desc",
                "page": page,
                "per_page": per_page,
            }
        )

    async def fetch_trends(self, per_page: int = 5) -> Any:
        """최근 업데이트된 Java 저장소 검색 결과를 가져온다."""
        require_positive("per_page", per_page)
        return await self._search(
            {
                "q": JAVA_QUERY,
                "sort": "updated",
                "order": "desc",
                "per_page": per_page,
            }
        )
