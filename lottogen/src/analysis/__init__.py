"""
당첨 번호 통계 모듈

이 패키지는 과거 당첨 회차를 집계하는 통계 엔진을 제공합니다.
"""

from .statistics_engine import (
    EvenOddCount,
    Statistics,
    StatisticsEngine,
    StatisticsSummary,
    compute_statistics,
    summarize_statistics,
)

__all__ = [
    'EvenOddCount', 'Statistics', 'StatisticsEngine', 'StatisticsSummary',
    'compute_statistics', 'summarize_statistics'
]
