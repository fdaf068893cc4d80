"""집계 결과와 loading/error 상태를 보관하는 모듈."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from java_pulse.aggregator import MarketDataAggregator
from java_pulse.fallbacks import FALLBACK_MESSAGE, default_market_data
from java_pulse.models import MarketDataState

logger = logging.getLogger(__name__)


class MarketDataStore:
    """집계 패스를 실행하고 그 결과를 소비자에게 게시한다.

    패스가 겹쳐 실행되면 마지막으로 끝난 패스의 결과가 남는다.
    """

    def __init__(
        self,
        aggregator: MarketDataAggregator | None = None,
        on_publish: Callable[[MarketDataState], None] | None = None,
    ) -> None:
        """MarketDataStore 인스턴스를 초기화한다.

        Args:
            aggregator: 사용할 집계기. None이면 기본 설정으로 생성.
            on_publish: 상태가 게시될 때마다 호출되는 콜백
        """
        self.aggregator = aggregator or MarketDataAggregator()
        self.on_publish = on_publish
        self._state = MarketDataState()
        self._in_flight = 0

    @property
    def state(self) -> MarketDataState:
        """현재 게시된 상태."""
        return self._state

    def _publish(self, state: MarketDataState) -> None:
        self._state = state
        if self.on_publish:
            self.on_publish(state)

    async def refresh(self) -> MarketDataState:
        """집계 패스를 한 번 실행하고 결과 상태를 반환한다.

        집계 자체가 예외로 끝나면 전부 대체값으로 채운 데이터와 안내 메시지를 게시한다.
        """
        self._in_flight += 1
        try:
            self._publish(self._state.model_copy(update={"loading": True}))
            try:
                data = await self.aggregator.aggregate()
                error = None
            except Exception:
                logger.exception("Error fetching market data")
                data = default_market_data(last_updated=datetime.now(UTC))
                error = FALLBACK_MESSAGE
        finally:
            self._in_flight -= 1

        state = MarketDataState(loading=self._in_flight > 0, error=error, data=data)
        self._publish(state)
        return state
