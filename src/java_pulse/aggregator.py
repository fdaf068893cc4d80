"""여러 외부 소스를 병렬로 호출하고 하나의 MarketData로 합치는 모듈."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime
from typing import Any

import httpx

from java_pulse import fallbacks
from java_pulse.config import settings
from java_pulse.models import JobListing, MarketData, TrendingRepository
from java_pulse.sources import (
    ArbeitnowJobsSource,
    Failure,
    FetchResult,
    GitHubSource,
    RemotiveJobsSource,
    Source,
    SourceError,
    SourceKind,
    StackOverflowSource,
    Success,
)

logger = logging.getLogger(__name__)

REPOSITORIES_PAGE = 1
REPOSITORIES_PER_PAGE = 5


def _utcnow() -> datetime:
    return datetime.now(UTC)


async def settle(source: SourceKind, call: Awaitable[Any]) -> FetchResult:
    """소스 호출을 기다려 성공/실패를 FetchResult로 기록한다.

    SourceError만 실패로 기록하고, 그 외 예외는 프로그래밍 오류로 보고 전파한다.
    """
    try:
        return Success(await call)
    except SourceError as e:
        logger.warning(f"{source.value} fetch failed ({e.kind.value}): {e}")
        return Failure(source=source, reason=e.kind, message=str(e))


def _payload(result: FetchResult) -> Any:
    return result.value if isinstance(result, Success) else None


def _field(data: Any, key: str) -> Any:
    return data.get(key) if isinstance(data, dict) else None


def _items(data: Any, key: str) -> list[dict[str, Any]] | None:
    """응답에서 객체 리스트를 꺼낸다. 없거나 비어 있으면 None."""
    items = _field(data, key)
    if not items:
        return None
    if not isinstance(items, list):
        raise TypeError(f"Expected '{key}' to be a list, got {type(items).__name__}")
    for item in items:
        if not isinstance(item, dict):
            raise TypeError(f"Expected objects in '{key}', got {type(item).__name__}")
    return items


def _first_tag_count(data: Any) -> Any:
    """태그 정보의 첫 항목 count만 읽는다. 모양이 다르면 None."""
    items = _field(data, "items")
    if isinstance(items, list) and items and isinstance(items[0], dict):
        return items[0].get("count")
    return None


def _to_repository(item: dict[str, Any]) -> TrendingRepository:
    return TrendingRepository(
        name=item.get("name") or "",
        stars=item.get("stargazers_count") or 0,
        forks=item.get("forks_count") or 0,
        description=item.get("description"),
        url=item.get("html_url"),
        language=item.get("language"),
    )


def _to_job(item: dict[str, Any]) -> JobListing:
    return JobListing(
        title=item.get("title") or "",
        company=item.get("company_name") or item.get("company"),
        category=item.get("category"),
        url=item.get("url"),
        remote=bool(item.get("remote")),
        location=item.get("candidate_required_location")
        or item.get("location")
        or "Remote",
    )


def build_market_data(
    repositories: FetchResult,
    tags: FetchResult,
    jobs: FetchResult,
    trends: FetchResult,
    last_updated: datetime,
) -> MarketData:
    """네 소스의 결과를 필드 단위 대체값 규칙에 따라 MarketData로 합친다.

    실패한 소스나 응답에 없는 필드는 fallbacks의 고정값으로 채운다.
    응답 모양이 예상과 다르면 TypeError 또는 ValidationError가 발생한다.
    """
    github_repos = (
        _field(_payload(repositories), "total_count") or fallbacks.GITHUB_REPOS
    )

    stack_overflow_questions = (
        _first_tag_count(_payload(tags)) or fallbacks.STACK_OVERFLOW_QUESTIONS
    )

    job_items = _items(_payload(jobs), "jobs")
    total_jobs = len(job_items) if job_items else fallbacks.TOTAL_JOBS
    recent_jobs = (
        [_to_job(item) for item in job_items] if job_items else fallbacks.sample_jobs()
    )

    trend_items = _items(_payload(trends), "items")
    trending_repos = (
        [_to_repository(item) for item in trend_items]
        if trend_items
        else fallbacks.sample_trending_repos()
    )

    return fallbacks.compose_market_data(
        github_repos=github_repos,
        stack_overflow_questions=stack_overflow_questions,
        total_jobs=total_jobs,
        trending_repos=trending_repos,
        recent_jobs=recent_jobs,
        last_updated=last_updated,
    )


class MarketDataAggregator:
    """GitHub, StackOverflow, 채용 API를 한 번에 집계한다.

    인스턴스는 상태를 갖지 않으며 aggregate()를 호출할 때마다 모든 소스를
    처음부터 다시 호출한다.
    """

    def __init__(
        self,
        github: GitHubSource | None = None,
        stackoverflow: StackOverflowSource | None = None,
        jobs: Source | None = None,
        fallback_jobs: Source | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """MarketDataAggregator 인스턴스를 초기화한다.

        Args:
            github: GitHub 소스. None이면 기본 설정으로 생성.
            stackoverflow: StackOverflow 소스
            jobs: 기본 채용 소스 (Remotive)
            fallback_jobs: 기본 채용 소스 실패 시 사용할 대체 소스 (Arbeitnow)
            timeout: 기본 소스 생성 시 사용할 타임아웃. None이면 설정값 사용.
            transport: 기본 소스 생성 시 주입할 HTTP transport
            clock: last_updated에 사용할 시계
        """
        timeout = timeout if timeout is not None else settings.request_timeout
        self.github = github or GitHubSource(timeout=timeout, transport=transport)
        self.stackoverflow = stackoverflow or StackOverflowSource(
            timeout=timeout, transport=transport
        )
        self.jobs = jobs or RemotiveJobsSource(timeout=timeout, transport=transport)
        self.fallback_jobs = fallback_jobs or ArbeitnowJobsSource(
            timeout=timeout, transport=transport
        )
        self.clock = clock

    async def _fetch_jobs(self) -> Any:
        """기본 채용 소스를 호출하고, 실패하면 대체 소스를 호출한다."""
        try:
            return await self.jobs.fetch()
        except SourceError as e:
            logger.warning(f"Primary jobs source failed, trying fallback: {e}")
            return await self.fallback_jobs.fetch()

    async def aggregate(self) -> MarketData:
        """모든 소스를 병렬로 호출하고 MarketData를 만든다."""
        repositories, tags, jobs, trends = await asyncio.gather(
            settle(
                SourceKind.repositories,
                self.github.fetch_repositories(
                    page=REPOSITORIES_PAGE, per_page=REPOSITORIES_PER_PAGE
                ),
            ),
            settle(SourceKind.tags, self.stackoverflow.fetch_tag_info()),
            settle(SourceKind.jobs, self._fetch_jobs()),
            settle(SourceKind.trends, self.github.fetch_trends()),
        )

        failed = [
            r.source.value
            for r in (repositories, tags, jobs, trends)
            if isinstance(r, Failure)
        ]
        if failed:
            logger.info(f"Using fallback values for: {', '.join(failed)}")

        return build_market_data(
            repositories, tags, jobs, trends, last_updated=self.clock()
        )
