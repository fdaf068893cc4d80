"""스케줄러 테스트."""

import asyncio
import logging

import pytest

from java_pulse.models import MarketDataState
from java_pulse.scheduler import RefreshScheduler


class _CountingStore:
    """refresh 호출 횟수를 세는 스토어."""

    def __init__(self, block: bool = False) -> None:
        self.calls = 0
        self.cancelled = 0
        self.block = block

    async def refresh(self) -> MarketDataState:
        self.calls += 1
        if self.block:
            try:
                await asyncio.Event().wait()
            except asyncio.CancelledError:
                self.cancelled += 1
                raise
        return MarketDataState(loading=False)


class _FailingStore:
    """refresh가 항상 예외로 끝나는 스토어."""

    def __init__(self) -> None:
        self.calls = 0

    async def refresh(self) -> MarketDataState:
        self.calls += 1
        raise RuntimeError("publish callback failed")


class TestRefreshScheduler:
    """RefreshScheduler 테스트."""

    @pytest.mark.asyncio
    async def test_runs_immediately_and_periodically(self) -> None:
        """시작 즉시 한 번, 이후 주기마다 패스를 실행한다."""
        store = _CountingStore()
        scheduler = RefreshScheduler(store, interval=0.01)

        scheduler.start()
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        assert store.calls == 1

        await asyncio.sleep(0.05)
        await scheduler.stop()

        assert store.calls >= 2
        assert scheduler.is_running is False

    @pytest.mark.asyncio
    async def test_does_not_wait_for_in_flight_pass(self) -> None:
        """이전 패스가 끝나지 않아도 다음 패스를 시작하고, stop()이 모두 취소한다."""
        store = _CountingStore(block=True)
        scheduler = RefreshScheduler(store, interval=0.01)

        scheduler.start()
        await asyncio.sleep(0.05)
        started = store.calls
        await scheduler.stop()

        assert started >= 2
        assert store.cancelled == started

    @pytest.mark.asyncio
    async def test_start_is_idempotent(self) -> None:
        """이미 동작 중이면 start()는 새 타이머를 만들지 않는다."""
        store = _CountingStore()
        scheduler = RefreshScheduler(store, interval=10)

        scheduler.start()
        scheduler.start()
        await asyncio.sleep(0.01)
        await scheduler.stop()

        assert store.calls == 1

    @pytest.mark.asyncio
    async def test_context_manager(self) -> None:
        """async with 블록을 벗어나면 타이머가 멈춘다."""
        store = _CountingStore()

        async with RefreshScheduler(store, interval=10) as scheduler:
            await asyncio.sleep(0.01)
            assert scheduler.is_running is True

        assert scheduler.is_running is False
        assert store.calls == 1

    @pytest.mark.asyncio
    async def test_failed_pass_is_logged(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """예외로 끝난 패스는 로그로 남기고 다음 패스는 계속 실행한다."""
        store = _FailingStore()
        scheduler = RefreshScheduler(store, interval=0.01)

        with caplog.at_level(logging.ERROR, logger="java_pulse.scheduler"):
            scheduler.start()
            await asyncio.sleep(0.05)
            await scheduler.stop()

        assert store.calls >= 2
        failures = [
            r for r in caplog.records if r.getMessage() == "Refresh pass failed"
        ]
        assert len(failures) == store.calls
        assert isinstance(failures[0].exc_info[1], RuntimeError)
