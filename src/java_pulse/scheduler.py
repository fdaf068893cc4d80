"""주기적 갱신 스케줄러."""

import asyncio
import logging
from types import TracebackType
from typing import Any

from java_pulse.config import settings
from java_pulse.store import MarketDataStore

logger = logging.getLogger(__name__)


class RefreshScheduler:
    """시작 즉시, 그리고 일정 주기마다 집계 패스를 실행한다.

    새 패스는 이전 패스가 끝나기를 기다리지 않는다. stop()은 타이머와
    진행 중인 패스를 모두 취소한다.
    """

    def __init__(
        self,
        store: MarketDataStore,
        interval: float | None = None,
    ) -> None:
        """RefreshScheduler 인스턴스를 초기화한다.

        Args:
            store: 패스를 실행할 스토어
            interval: 갱신 주기 (초). None이면 설정값 사용.
        """
        self.store = store
        self.interval = interval or settings.refresh_interval
        self._timer: asyncio.Task[None] | None = None
        self._passes: set[asyncio.Task[Any]] = set()

    @property
    def is_running(self) -> bool:
        """타이머가 동작 중인지 확인한다."""
        return self._timer is not None and not self._timer.done()

    def _spawn_pass(self) -> None:
        task = asyncio.create_task(self.store.refresh())
        self._passes.add(task)
        task.add_done_callback(self._on_pass_done)

    def _on_pass_done(self, task: asyncio.Task[Any]) -> None:
        """끝난 패스를 정리하고 실패했다면 로그로 남긴다."""
        self._passes.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Refresh pass failed", exc_info=exc)

    async def _tick(self) -> None:
        while True:
            self._spawn_pass()
            await asyncio.sleep(self.interval)

    def start(self) -> None:
        """타이머를 시작한다. 이미 동작 중이면 아무것도 하지 않는다."""
        if self.is_running:
            return
        logger.info(f"Starting refresh scheduler (every {self.interval}s)")
        self._timer = asyncio.create_task(self._tick())

    async def stop(self) -> None:
        """타이머와 진행 중인 패스를 취소하고 종료를 기다린다."""
        tasks: list[asyncio.Task[Any]] = list(self._passes)
        if self._timer is not None:
            tasks.append(self._timer)
            self._timer = None
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        logger.info("Refresh scheduler stopped")

    async def __aenter__(self) -> "RefreshScheduler":
        self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.stop()
