"""데이터 모델 정의."""

from datetime import datetime

from pydantic import BaseModel, Field


class TrendingRepository(BaseModel):
    """최근 업데이트된 Java 저장소 정보."""

    name: str = Field(description="저장소 이름")
    stars: int = Field(default=0, description="총 스타 수")
    forks: int = Field(default=0, description="포크 수")
    description: str | None = Field(default=None, description="저장소 설명")
    url: str | None = Field(default=None, description="저장소 URL")
    language: str | None = Field(default=None, description="주 프로그래밍 언어")


class JobListing(BaseModel):
    """채용 공고 정보."""

    title: str = Field(description="공고 제목")
    company: str | None = Field(default=None, description="회사명")
    category: str | None = Field(default=None, description="직무 카테고리")
    url: str | None = Field(default=None, description="공고 URL")
    remote: bool = Field(default=False, description="원격 근무 여부")
    location: str = Field(default="Remote", description="근무 지역")


class CurrentStats(BaseModel):
    """대시보드 상단 지표."""

    global_rank: int = Field(description="TIOBE 순위")
    tiobe_index: float = Field(description="TIOBE 지수 (%)")
    job_postings: int = Field(description="채용 공고 수 추정치")
    average_salary: int = Field(description="평균 연봉 (USD)")
    yoy_growth: float = Field(description="전년 대비 성장률 (%)")
    enterprise_adoption: int = Field(description="기업 도입률 (%)")
    github_repos: int = Field(description="GitHub Java 저장소 수")
    stack_overflow_questions: int = Field(description="StackOverflow Java 질문 수")
    last_updated: datetime = Field(description="집계 시각 (UTC)")


class GitHubData(BaseModel):
    """GitHub 관련 집계 결과."""

    total_repositories: int = Field(description="GitHub Java 저장소 수")
    trending_repos: list[TrendingRepository] = Field(
        description="최근 업데이트된 저장소 목록"
    )


class StackOverflowData(BaseModel):
    """StackOverflow 관련 집계 결과."""

    total_questions: int = Field(description="Java 질문 수")
    recent_questions: list[dict[str, object]] = Field(
        default_factory=list, description="최근 질문 목록"
    )


class JobsData(BaseModel):
    """채용 관련 집계 결과."""

    total_jobs: int = Field(description="수집된 공고 수 (없으면 기본값)")
    recent_jobs: list[JobListing] = Field(description="최근 공고 목록")


class YearlyTrendPoint(BaseModel):
    """연도별 추이."""

    year: str = Field(description="연도")
    popularity: float = Field(description="TIOBE 지수 (%)")
    jobs: int = Field(description="채용 공고 수 (천 건)")
    salary: int = Field(description="평균 연봉 (천 USD)")


class MarketData(BaseModel):
    """한 번의 집계 패스가 만드는 대시보드 뷰모델."""

    current_stats: CurrentStats
    github_data: GitHubData
    stack_overflow_data: StackOverflowData
    jobs_data: JobsData
    yearly_trend: list[YearlyTrendPoint]


class MarketDataState(BaseModel):
    """소비자에게 노출되는 상태 (loading / error / data)."""

    loading: bool = Field(default=True, description="집계 진행 중 여부")
    error: str | None = Field(default=None, description="사용자용 안내 메시지")
    data: MarketData | None = Field(
        default=None, description="가장 최근에 완료된 집계 결과"
    )
