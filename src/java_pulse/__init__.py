"""Java 생태계 지표 집계 패키지."""
