"""데이터 소스 모듈."""

from java_pulse.sources.base import (
    DecodeError,
    ErrorKind,
    Failure,
    FetchResult,
    NetworkError,
    Source,
    SourceError,
    SourceKind,
    Success,
    TransportError,
)
from java_pulse.sources.github import GitHubSource
from java_pulse.sources.jobs import ArbeitnowJobsSource, RemotiveJobsSource
from java_pulse.sources.stackoverflow import StackOverflowSource

__all__ = [
    "ArbeitnowJobsSource",
    "DecodeError",
    "ErrorKind",
    "Failure",
    "FetchResult",
    "GitHubSource",
    "NetworkError",
    "RemotiveJobsSource",
    "Source",
    "SourceError",
    "SourceKind",
    "StackOverflowSource",
    "Success",
    "TransportError",
]
