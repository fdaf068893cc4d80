"""채용 공고 소스 모듈 (Remotive 기본, Arbeitnow 대체)."""

import logging
from typing import Any

import httpx

from java_pulse.config import settings
from java_pulse.sources.base import DecodeError, fetch_json, require_positive

logger = logging.getLogger(__name__)

KEYWORD = "java"
MAX_FALLBACK_JOBS = 10


class RemotiveJobsSource:
    """Remotive API에서 Java 채용 공고를 가져온다."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """RemotiveJobsSource 인스턴스를 초기화한다.

        Args:
            base_url: API 주소. None이면 설정값 사용.
            timeout: HTTP 요청 타임아웃 (초). None이면 제한 없음.
            transport: 테스트 등에서 주입하는 HTTP transport
        """
        self.url = base_url or settings.remotive_api_url
        self.timeout = timeout
        self.transport = transport

    async def fetch(self, limit: int = 10) -> Any:
        """소프트웨어 개발 카테고리의 Java 공고를 가져온다.

        Args:
            limit: 최대 공고 수

        Returns:
            API 응답 JSON (jobs 리스트 포함)
        """
        require_positive("limit", limit)
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self.transport
        ) as client:
            return await fetch_json(
                client,
                self.url,
                params={"category": "software-dev", "search": KEYWORD, "limit": limit},
            )


def _mentions_java(job: dict[str, Any]) -> bool:
    """제목이나 설명에 'java'가 포함되어 있는지 확인한다 (대소문자 무시)."""
    title = str(job.get("title") or "").lower()
    description = str(job.get("description") or "").lower()
    return KEYWORD in title or KEYWORD in description


class ArbeitnowJobsSource:
    """Arbeitnow 채용 보드에서 Java 공고만 골라낸다.

    이 API는 검색 파라미터를 지원하지 않으므로 전체 목록을 받아
    클라이언트에서 필터링한다.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """ArbeitnowJobsSource 인스턴스를 초기화한다.

        Args:
            base_url: API 주소. None이면 설정값 사용.
            timeout: HTTP 요청 타임아웃 (초). None이면 제한 없음.
            transport: 테스트 등에서 주입하는 HTTP transport
        """
        self.url = base_url or settings.arbeitnow_api_url
        self.timeout = timeout
        self.transport = transport

    async def fetch(self) -> dict[str, list[dict[str, Any]]]:
        """Java 관련 공고를 최대 10개까지 반환한다.

        Returns:
            {"jobs": [...]} 형태로 기본 소스와 같은 모양의 딕셔너리

        Raises:
            DecodeError: 응답에 data 리스트가 없을 때
        """
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self.transport
        ) as client:
            payload = await fetch_json(client, self.url)

        board = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(board, list):
            raise DecodeError(self.url, "Missing 'data' list in job board payload")

        java_jobs = [
            job for job in board if isinstance(job, dict) and _mentions_java(job)
        ]
        logger.debug(f"Arbeitnow: {len(java_jobs)}/{len(board)} jobs mention java")
        return {"jobs": java_jobs[:MAX_FALLBACK_JOBS]}
