"""소스 공통 정의: 오류 타입, 결과 타입, JSON 요청 헬퍼."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Protocol, TypeVar

import httpx

T = TypeVar("T")


class SourceKind(str, Enum):
    """집계 대상 데이터 소스 종류."""

    repositories = "repositories"
    trends = "trends"
    tags = "tags"
    jobs = "jobs"


class ErrorKind(str, Enum):
    """소스 호출 실패 유형."""

    network = "network"
    transport = "transport"
    decode = "decode"


class SourceError(Exception):
    """외부 소스 호출 실패의 기반 예외."""

    kind: ErrorKind

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"{message} ({url})")
        self.url = url


class NetworkError(SourceError):
    """DNS, 타임아웃, 연결 끊김 등 네트워크 수준 실패."""

    kind = ErrorKind.network


class TransportError(SourceError):
    """2xx 범위를 벗어난 HTTP 응답."""

    kind = ErrorKind.transport

    def __init__(self, url: str, status_code: int) -> None:
        super().__init__(url, f"HTTP {status_code}")
        self.status_code = status_code


class DecodeError(SourceError):
    """JSON으로 해석할 수 없는 응답 본문."""

    kind = ErrorKind.decode


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """성공적으로 끝난 소스 호출 결과."""

    value: T


@dataclass(frozen=True, slots=True)
class Failure:
    """실패한 소스 호출 결과."""

    source: SourceKind
    reason: ErrorKind
    message: str


FetchResult = Success[Any] | Failure


class Source(Protocol):
    """데이터 소스 프로토콜."""

    async def fetch(self) -> Any:
        """데이터를 가져온다."""
        ...


def require_positive(name: str, value: int) -> int:
    """페이지 관련 파라미터가 양의 정수인지 확인한다."""
    if value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value}")
    return value


async def fetch_json(
    client: httpx.AsyncClient,
    url: str,
    params: dict[str, str | int] | None = None,
) -> Any:
    """GET 요청을 보내고 JSON 본문을 그대로 반환한다.

    Args:
        client: HTTP 클라이언트
        url: 요청 URL
        params: 쿼리 파라미터

    Raises:
        NetworkError: 네트워크 수준 실패
        TransportError: 2xx가 아닌 응답
        DecodeError: JSON 파싱 실패
    """
    try:
        response = await client.get(url, params=params)
    except httpx.RequestError as e:
        raise NetworkError(url, f"{type(e).__name__}: {e}") from e

    if not response.is_success:
        raise TransportError(url, response.status_code)

    try:
        return response.json()
    except ValueError as e:
        raise DecodeError(url, "Invalid JSON body") from e
