"""대체값(fallback)과 정적 데이터.

외부 API 호출이 실패하거나 응답에 필드가 없을 때 사용하는 고정값이다.
리스트는 호출할 때마다 새로 만들어 패스 간에 공유되지 않게 한다.
"""

from datetime import datetime

from java_pulse.models import (
    CurrentStats,
    GitHubData,
    JobListing,
    JobsData,
    MarketData,
    StackOverflowData,
    TrendingRepository,
    YearlyTrendPoint,
)

GITHUB_REPOS = 7_000_000
STACK_OVERFLOW_QUESTIONS = 1_900_000
TOTAL_JOBS = 125
JOBS_MULTIPLIER = 1000
JOBS_PER_TREND_UNIT = 2400

# TIOBE 등 정적 지표
GLOBAL_RANK = 3
TIOBE_INDEX = 11.5
AVERAGE_SALARY = 95_000
YOY_GROWTH = 8.7
ENTERPRISE_ADOPTION = 76

FALLBACK_MESSAGE = "Failed to load real-time data. Using sample data."

# (year, popularity, jobs, salary); 2024년 jobs는 집계 시 계산된다.
_YEARLY_HISTORY = [
    ("2020", 17.5, 38, 75),
    ("2021", 11.5, 42, 78),
    ("2022", 11.8, 45, 82),
    ("2023", 12.5, 48, 85),
]
_CURRENT_YEAR = ("2024", 11.5, 88)

QUARTERLY_TREND = [
    ("Q1 2023", 2.1),
    ("Q2 2023", 1.8),
    ("Q3 2023", 2.4),
    ("Q4 2023", 2.7),
    ("Q1 2024", 3.2),
]

# (language, share %, trend) - Stack Overflow Survey 2023
MARKET_SHARE = [
    ("JavaScript", 63.6, "stable"),
    ("HTML/CSS", 52.8, "stable"),
    ("Python", 49.3, "up"),
    ("SQL", 48.9, "stable"),
    ("Java", 30.6, "stable"),
    ("C#", 27.9, "stable"),
    ("TypeScript", 38.9, "up"),
]
MARKET_SHARE_SOURCE = "Stack Overflow Survey 2023"

# (technology, adoption %, trend, category)
TECHNOLOGIES = [
    ("Spring Boot", 78, "up", "Framework"),
    ("Hibernate", 65, "stable", "ORM"),
    ("Maven", 72, "stable", "Build Tool"),
    ("JUnit 5", 68, "up", "Testing"),
    ("Mockito", 58, "stable", "Testing"),
    ("Gradle", 45, "up", "Build Tool"),
    ("Lombok", 52, "up", "Library"),
]

# (version, release year, adoption %, LTS, features)
JAVA_VERSIONS = [
    ("Java 21", "2023", 15, True, ("Virtual Threads", "Record Patterns")),
    ("Java 17", "2021", 45, True, ("Sealed Classes", "Pattern Matching")),
    ("Java 11", "2018", 65, True, ("HTTP Client", "Local-Variable Syntax")),
    ("Java 8", "2014", 85, True, ("Lambda Expressions", "Stream API")),
    ("Java 23", "2024", 5, False, ("Vector API", "Structured Concurrency")),
]

DATA_SOURCES = {
    "github": ("GitHub API", "https://api.github.com/"),
    "stackoverflow": ("StackExchange API", "https://api.stackexchange.com/"),
    "remotive": ("Remotive Jobs API", "https://remotive.com/api/"),
    "tiobe": ("TIOBE Index", "https://www.tiobe.com/tiobe-index/"),
}


def sample_trending_repos() -> list[TrendingRepository]:
    """샘플 트렌드 저장소 목록을 반환한다."""
    return [
        TrendingRepository(
            name="spring-projects/spring-boot",
            stars=70000,
            forks=40000,
            description="Spring Boot",
            url="https://github.com/spring-projects/spring-boot",
            language="Java",
        ),
        TrendingRepository(
            name="iluwatar/java-design-patterns",
            stars=85000,
            forks=26000,
            description="Design patterns implemented in Java",
            url="https://github.com/iluwatar/java-design-patterns",
            language="Java",
        ),
    ]


def sample_jobs() -> list[JobListing]:
    """샘플 채용 공고 목록을 반환한다."""
    return [
        JobListing(
            title="Senior Java Developer",
            company="Tech Company",
            category="Software Development",
            url="#",
            remote=True,
            location="Remote",
        ),
        JobListing(
            title="Java Backend Engineer",
            company="Startup Inc",
            category="Backend Development",
            url="#",
            remote=False,
            location="New York, NY",
        ),
    ]


def round_half_up(value: float) -> int:
    """0.5를 항상 올림하는 반올림 (round()의 은행가 반올림과 다름)."""
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)


def yearly_trend(job_postings: int) -> list[YearlyTrendPoint]:
    """연도별 추이를 만든다. 2024년 jobs는 채용 공고 수에서 계산한다."""
    points = [
        YearlyTrendPoint(year=year, popularity=popularity, jobs=jobs, salary=salary)
        for year, popularity, jobs, salary in _YEARLY_HISTORY
    ]
    year, popularity, salary = _CURRENT_YEAR
    points.append(
        YearlyTrendPoint(
            year=year,
            popularity=popularity,
            jobs=round_half_up(job_postings / JOBS_PER_TREND_UNIT),
            salary=salary,
        )
    )
    return points


def compose_market_data(
    *,
    github_repos: int,
    stack_overflow_questions: int,
    total_jobs: int,
    trending_repos: list[TrendingRepository],
    recent_jobs: list[JobListing],
    last_updated: datetime,
) -> MarketData:
    """필드 값으로 MarketData를 조립한다."""
    job_postings = total_jobs * JOBS_MULTIPLIER
    return MarketData(
        current_stats=CurrentStats(
            global_rank=GLOBAL_RANK,
            tiobe_index=TIOBE_INDEX,
            job_postings=job_postings,
            average_salary=AVERAGE_SALARY,
            yoy_growth=YOY_GROWTH,
            enterprise_adoption=ENTERPRISE_ADOPTION,
            github_repos=github_repos,
            stack_overflow_questions=stack_overflow_questions,
            last_updated=last_updated,
        ),
        github_data=GitHubData(
            total_repositories=github_repos,
            trending_repos=trending_repos,
        ),
        stack_overflow_data=StackOverflowData(
            total_questions=stack_overflow_questions,
            recent_questions=[],
        ),
        jobs_data=JobsData(total_jobs=total_jobs, recent_jobs=recent_jobs),
        yearly_trend=yearly_trend(job_postings),
    )


def default_market_data(last_updated: datetime) -> MarketData:
    """모든 필드가 대체값으로 채워진 MarketData를 반환한다."""
    return compose_market_data(
        github_repos=GITHUB_REPOS,
        stack_overflow_questions=STACK_OVERFLOW_QUESTIONS,
        total_jobs=TOTAL_JOBS,
        trending_repos=sample_trending_repos(),
        recent_jobs=sample_jobs(),
        last_updated=last_updated,
    )
