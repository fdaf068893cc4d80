"""CLI 엔트리포인트."""

import asyncio
import logging
from enum import Enum
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from java_pulse.config import settings
from java_pulse.fallbacks import (
    DATA_SOURCES,
    JAVA_VERSIONS,
    MARKET_SHARE,
    MARKET_SHARE_SOURCE,
    QUARTERLY_TREND,
    TECHNOLOGIES,
)
from java_pulse.models import MarketData, MarketDataState
from java_pulse.scheduler import RefreshScheduler
from java_pulse.sources import StackOverflowSource
from java_pulse.store import MarketDataStore

console = Console()

# 대시보드 목록은 상위 5개만 표시한다.
LIST_LIMIT = 5


class Period(str, Enum):
    """추이 기간 옵션."""

    yearly = "yearly"
    quarterly = "quarterly"


app = typer.Typer(
    name="java-pulse",
    help="GitHub, StackOverflow, 채용 API로 Java 생태계 지표를 집계합니다.",
    no_args_is_help=False,
)


def _millions(value: int) -> str:
    return f"{value / 1_000_000:.1f}M"


def _render_cards(data: MarketData) -> None:
    """주요 지표 카드를 렌더링한다."""
    stats = data.current_stats
    cards = [
        ("🏆 순위", f"#{stats.global_rank}", f"+{stats.yoy_growth}%", "tiobe"),
        ("📦 GitHub 저장소", _millions(stats.github_repos), "Java 프로젝트", "github"),
        (
            "❓ StackOverflow 질문",
            _millions(stats.stack_overflow_questions),
            "Java 질문 수",
            "stackoverflow",
        ),
        ("💼 채용 공고", f"{data.jobs_data.total_jobs}+", "활성 공고", "remotive"),
    ]

    table = Table(show_header=True, header_style="bold cyan", expand=True)
    table.add_column("지표", style="bold")
    table.add_column("값", justify="right")
    table.add_column("설명")
    table.add_column("출처", style="dim")
    for title, value, description, source in cards:
        name, url = DATA_SOURCES[source]
        table.add_row(title, value, description, f"[link={url}]{name}[/link]")
    console.print(table)


def _render_trend(data: MarketData, period: Period) -> None:
    """기간별 추이 테이블을 렌더링한다."""
    if period is Period.quarterly:
        table = Table(title="분기별 성장률", header_style="bold cyan")
        table.add_column("분기")
        table.add_column("성장률 (%)", justify="right")
        for quarter, growth in QUARTERLY_TREND:
            table.add_row(quarter, f"{growth}")
    else:
        table = Table(title="연도별 추이 (TIOBE / 공고 / 연봉)", header_style="bold cyan")
        table.add_column("연도")
        table.add_column("인기도 (%)", justify="right")
        table.add_column("공고 (k)", justify="right")
        table.add_column("연봉 (k USD)", justify="right")
        for point in data.yearly_trend:
            table.add_row(
                point.year, f"{point.popularity}", f"{point.jobs}", f"{point.salary}"
            )
    console.print(table)


def _render_lists(data: MarketData) -> None:
    """트렌드 저장소와 최근 공고를 렌더링한다."""
    repos = Table(title="🔥 최근 업데이트된 Java 저장소", header_style="bold cyan", expand=True)
    repos.add_column("저장소", style="bold")
    repos.add_column("⭐ Stars", justify="right")
    repos.add_column("Forks", justify="right")
    repos.add_column("설명")
    for repo in data.github_data.trending_repos[:LIST_LIMIT]:
        name = f"[link={repo.url}]{repo.name}[/link]" if repo.url else repo.name
        repos.add_row(name, f"{repo.stars:,}", f"{repo.forks:,}", repo.description or "-")
    console.print(repos)

    jobs = Table(title="💼 최근 채용 공고", header_style="bold cyan", expand=True)
    jobs.add_column("제목", style="bold")
    jobs.add_column("회사")
    jobs.add_column("카테고리")
    jobs.add_column("지역")
    for job in data.jobs_data.recent_jobs[:LIST_LIMIT]:
        location = f"{job.location} [green](remote)[/green]" if job.remote else job.location
        jobs.add_row(job.title, job.company or "-", job.category or "-", location)
    console.print(jobs)


def _render_reference() -> None:
    """정적 참고 자료 (언어 점유율, 생태계, 버전 도입률)를 렌더링한다."""
    share = Table(
        title=f"Market Share - 언어 ({MARKET_SHARE_SOURCE})", header_style="bold cyan"
    )
    share.add_column("언어")
    share.add_column("점유율 (%)", justify="right")
    share.add_column("추세")
    for language, percent, trend in MARKET_SHARE:
        style = "bold yellow" if language == "Java" else ""
        share.add_row(language, f"{percent}", trend, style=style)
    console.print(share)

    ecosystem = Table(title="Java 생태계", header_style="bold cyan")
    ecosystem.add_column("기술")
    ecosystem.add_column("분류")
    ecosystem.add_column("도입률 (%)", justify="right")
    ecosystem.add_column("추세")
    for technology, adoption, trend, category in TECHNOLOGIES:
        ecosystem.add_row(technology, category, f"{adoption}", trend)
    console.print(ecosystem)

    versions = Table(title="Java 버전 도입률", header_style="bold cyan")
    versions.add_column("버전")
    versions.add_column("출시")
    versions.add_column("도입률 (%)", justify="right")
    versions.add_column("LTS", justify="center")
    versions.add_column("주요 기능")
    for version, release, adoption, lts, features in JAVA_VERSIONS:
        versions.add_row(
            version, release, f"{adoption}", "✓" if lts else "-", ", ".join(features)
        )
    console.print(versions)


def _render_state(state: MarketDataState, period: Period) -> None:
    """게시된 상태 전체를 렌더링한다."""
    if state.error:
        console.print(Panel(state.error, border_style="yellow"))
    if state.data is None:
        console.print("[dim]데이터를 불러오는 중...[/dim]")
        return

    updated = state.data.current_stats.last_updated.strftime("%Y-%m-%d %H:%M:%S UTC")
    console.print()
    console.rule(f"[bold blue]☕ Java 시장 지표[/bold blue] [dim]({updated})[/dim]")
    _render_cards(state.data)
    _render_trend(state.data, period)
    _render_lists(state.data)
    _render_reference()


async def _snapshot() -> MarketDataState:
    """집계 패스를 한 번 실행한다."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task("실시간 데이터 수집 중...", total=None)
        return await MarketDataStore().refresh()


async def _watch(interval: float, period: Period, count: int | None = None) -> None:
    """주기적으로 집계하고 렌더링한다.

    count가 주어지면 그만큼 렌더링한 뒤 종료하고, 없으면 중단될 때까지 반복한다.
    """
    done = asyncio.Event()
    rendered = 0

    def on_publish(state: MarketDataState) -> None:
        nonlocal rendered
        if state.loading:
            return
        _render_state(state, period)
        rendered += 1
        if count is not None and rendered >= count:
            done.set()

    store = MarketDataStore(on_publish=on_publish)
    async with RefreshScheduler(store, interval=interval):
        await done.wait()


async def _questions(page: int, pagesize: int) -> list[dict[str, Any]]:
    payload = await StackOverflowSource(timeout=settings.request_timeout).fetch_questions(
        page=page, pagesize=pagesize
    )
    items = payload.get("items") if isinstance(payload, dict) else None
    if not isinstance(items, list):
        return []
    return [item for item in items if isinstance(item, dict)]


def _run(coro: Any) -> Any:
    """코루틴을 실행하고 공통 오류를 CLI 종료 코드로 바꾼다."""
    try:
        return asyncio.run(coro)
    except KeyboardInterrupt:
        console.print("\n[dim]중단됨[/dim]")
        raise typer.Exit(0) from None
    except Exception as e:
        console.print(f"[red]오류 발생: {e}[/red]")
        raise typer.Exit(1) from e


@app.callback()
def configure_logging() -> None:
    """GitHub, StackOverflow, 채용 API로 Java 생태계 지표를 집계합니다."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.command()
def snapshot(
    as_json: Annotated[
        bool,
        typer.Option("--json", help="MarketData를 JSON으로 출력"),
    ] = False,
    period: Annotated[
        Period,
        typer.Option("--period", "-p", help="추이 기간"),
    ] = Period.yearly,
) -> None:
    """집계 패스를 한 번 실행하고 결과를 출력합니다."""
    state = _run(_snapshot())
    if as_json:
        if state.data is not None:
            console.print_json(state.data.model_dump_json())
        return
    _render_state(state, period)


@app.command()
def watch(
    interval: Annotated[
        float,
        typer.Option("--interval", "-i", min=1, help="갱신 주기 (초)"),
    ] = settings.refresh_interval,
    period: Annotated[
        Period,
        typer.Option("--period", "-p", help="추이 기간"),
    ] = Period.yearly,
    count: Annotated[
        int | None,
        typer.Option("--count", "-n", min=1, help="지정한 횟수만큼 갱신한 뒤 종료"),
    ] = None,
) -> None:
    """주기적으로 집계하고 결과를 다시 출력합니다."""
    _run(_watch(interval, period, count))


@app.command()
def questions(
    page: Annotated[int, typer.Option("--page", min=1, help="페이지 번호")] = 1,
    pagesize: Annotated[
        int, typer.Option("--pagesize", min=1, max=100, help="페이지당 질문 수")
    ] = 10,
) -> None:
    """최근 활동이 있는 Java 질문을 출력합니다."""
    items = _run(_questions(page, pagesize))

    table = Table(title="StackOverflow Java 질문", header_style="bold cyan", expand=True)
    table.add_column("제목", style="bold")
    table.add_column("답변", justify="right", width=6)
    table.add_column("점수", justify="right", width=6)
    for item in items:
        title = item.get("title", "")
        link = item.get("link")
        table.add_row(
            f"[link={link}]{title}[/link]" if link else title,
            str(item.get("answer_count", 0)),
            str(item.get("score", 0)),
        )
    console.print(table)


if __name__ == "__main__":
    app()
