"""GitHub 소스 테스트."""

import httpx
import pytest

from java_pulse.sources.base import DecodeError, NetworkError, TransportError
from java_pulse.sources.github import GitHubSource


def _source(handler) -> GitHubSource:
    return GitHubSource(
        base_url="https://api.github.test",
        transport=httpx.MockTransport(handler),
    )


class TestGitHubSource:
    """GitHubSource 테스트."""

    @pytest.mark.asyncio
    async def test_fetch_repositories_sends_search_params(self) -> None:
        """스타 순 검색 파라미터로 요청하고 JSON을 그대로 반환한다."""
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"total_count": 42, "items": []})

        payload = await _source(handler).fetch_repositories(page=2, per_page=5)

        assert payload == {"total_count": 42, "items": []}
        url = requests[0].url
        assert url.path == "/search/repositories"
        assert url.params["q"] == "language:java"
        assert url.params["sort"] == "stars"
        assert url.params["order"] == "desc"
        assert url.params["page"] == "2"
        assert url.params["per_page"] == "5"

    @pytest.mark.asyncio
    async def test_fetch_trends_sorts_by_updated(self) -> None:
        """트렌드 요청은 updated 정렬과 per_page=5를 사용한다."""
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"items": []})

        await _source(handler).fetch_trends()

        params = requests[0].url.params
        assert params["sort"] == "updated"
        assert params["per_page"] == "5"
        assert "page" not in params

    @pytest.mark.asyncio
    async def test_non_2xx_raises_transport_error(self) -> None:
        """2xx가 아닌 응답은 상태 코드를 담은 TransportError가 된다."""
        source = _source(lambda request: httpx.Response(403, json={"message": "rate"}))

        with pytest.raises(TransportError) as exc_info:
            await source.fetch_repositories()

        assert exc_info.value.status_code == 403

    @pytest.mark.asyncio
    async def test_invalid_json_raises_decode_error(self) -> None:
        """JSON이 아닌 본문은 DecodeError가 된다."""
        source = _source(lambda request: httpx.Response(200, content=b"<html>"))

        with pytest.raises(DecodeError):
            await source.fetch_trends()

    @pytest.mark.asyncio
    async def test_connection_failure_raises_network_error(self) -> None:
        """연결 실패는 NetworkError가 된다."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(NetworkError):
            await _source(handler).fetch_repositories()

    @pytest.mark.asyncio
    async def test_rejects_non_positive_page(self) -> None:
        """0 이하의 페이지 번호는 요청 전에 거부한다."""
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={})

        with pytest.raises(ValueError):
            await _source(handler).fetch_repositories(page=0)
        assert requests == []
