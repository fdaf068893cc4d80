"""설정 관리 모듈."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # 외부 API
    github_api_url: str = Field(
        default="https://api.github.com",
        description="GitHub REST API 주소",
    )
    stackexchange_api_url: str = Field(
        default="https://api.stackexchange.com/2.3",
        description="StackExchange API 주소",
    )
    remotive_api_url: str = Field(
        default="https://remotive.com/api/remote-jobs",
        description="Remotive 채용 API 주소 (기본 채용 소스)",
    )
    arbeitnow_api_url: str = Field(
        default="https://www.arbeitnow.com/api/job-board-api",
        description="Arbeitnow 채용 API 주소 (대체 채용 소스)",
    )

    request_timeout: float | None = Field(
        default=None,
        gt=0,
        description="HTTP 요청 타임아웃 (초). None이면 타임아웃 없음.",
    )
    refresh_interval: float = Field(
        default=300.0,
        ge=1,
        description="대시보드 갱신 주기 (초)",
    )

    log_level: str = Field(default="WARNING", description="로그 레벨")


settings = Settings()
