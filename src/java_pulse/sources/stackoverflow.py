"""StackExchange API 소스."""

from typing import Any

import httpx

from java_pulse.config import settings
from java_pulse.sources.base import fetch_json, require_positive

SITE = "stackoverflow"
TAG = "java"


class StackOverflowSource:
    """StackOverflow의 Java 태그 통계와 질문을 가져온다."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """StackOverflowSource 인스턴스를 초기화한다.

        Args:
            base_url: API 주소. None이면 설정값 사용.
            timeout: HTTP 요청 타임아웃 (초). None이면 제한 없음.
            transport: 테스트 등에서 주입하는 HTTP transport
        """
        self.base_url = (base_url or settings.stackexchange_api_url).rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def _get(self, path: str, params: dict[str, str | int]) -> Any:
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self.transport
        ) as client:
            return await fetch_json(client, f"{self.base_url}{path}", params=params)

    async def fetch_tag_info(self) -> Any:
        """Java 태그 정보를 가져온다 (items[0].count가 전체 질문 수)."""
        return await self._get(f"/tags/{TAG}/info", {"site": SITE})

    async def fetch_questions(self, page: int = 1, pagesize: int = 10) -> Any:
        """최근 활동 순으로 Java 질문 목록을 가져온다.

        Args:
            page: 페이지 번호 (1부터 시작)
            pagesize: 페이지당 질문 수
        """
        require_positive("page", page)
        require_positive("pagesize", pagesize)
        return await self._get(
            "/questions",
            {
                "order": "desc",
                "sort": "activity",
                "tagged": TAG,
                "site": SITE,
                "page": page,
                "pagesize": pagesize,
            },
        )
