"""공개 클래스 문서 테스트."""

import pytest

from java_pulse.aggregator import MarketDataAggregator
from java_pulse.scheduler import RefreshScheduler
from java_pulse.sources import (
    ArbeitnowJobsSource,
    GitHubSource,
    RemotiveJobsSource,
    StackOverflowSource,
)
from java_pulse.store import MarketDataStore


class TestInitDocstrings:
    """생성자 docstring 테스트."""

    @pytest.mark.parametrize(
        "cls",
        [
            GitHubSource,
            StackOverflowSource,
            RemotiveJobsSource,
            ArbeitnowJobsSource,
            MarketDataAggregator,
            MarketDataStore,
            RefreshScheduler,
        ],
    )
    def test_summary_line_names_class(self, cls: type) -> None:
        """첫 줄은 클래스 이름으로 시작하는 요약이고 Args 섹션이 있다."""
        doc = cls.__init__.__doc__ or ""

        assert doc.splitlines()[0] == f"{cls.__name__} 인스턴스를 초기화한다."
        assert "Args:" in doc
