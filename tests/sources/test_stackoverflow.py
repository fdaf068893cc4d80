"""StackOverflow 소스 테스트."""

import httpx
import pytest

from java_pulse.sources.base import TransportError
from java_pulse.sources.stackoverflow import StackOverflowSource


@pytest.fixture
def requests() -> list[httpx.Request]:
    """가로챈 요청 목록."""
    return []


@pytest.fixture
def source(requests: list[httpx.Request]) -> StackOverflowSource:
    """요청을 기록하는 StackOverflowSource를 반환한다."""

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"items": [{"name": "java", "count": 1917000}]})

    return StackOverflowSource(
        base_url="https://api.stackexchange.test/2.3",
        transport=httpx.MockTransport(handler),
    )


class TestStackOverflowSource:
    """StackOverflowSource 테스트."""

    @pytest.mark.asyncio
    async def test_fetch_tag_info(
        self, source: StackOverflowSource, requests: list[httpx.Request]
    ) -> None:
        """태그 정보 엔드포인트를 site=stackoverflow로 호출한다."""
        payload = await source.fetch_tag_info()

        assert payload["items"][0]["count"] == 1917000
        url = requests[0].url
        assert url.path == "/2.3/tags/java/info"
        assert dict(url.params) == {"site": "stackoverflow"}

    @pytest.mark.asyncio
    async def test_fetch_questions_params(
        self, source: StackOverflowSource, requests: list[httpx.Request]
    ) -> None:
        """질문 목록은 활동 순 정렬과 페이지 파라미터를 사용한다."""
        await source.fetch_questions(page=3, pagesize=20)

        url = requests[0].url
        assert url.path == "/2.3/questions"
        assert url.params["tagged"] == "java"
        assert url.params["sort"] == "activity"
        assert url.params["page"] == "3"
        assert url.params["pagesize"] == "20"

    @pytest.mark.asyncio
    async def test_server_error(self) -> None:
        """5xx 응답은 TransportError가 된다."""
        source = StackOverflowSource(
            transport=httpx.MockTransport(lambda request: httpx.Response(502)),
        )

        with pytest.raises(TransportError) as exc_info:
            await source.fetch_tag_info()
        assert exc_info.value.status_code == 502
