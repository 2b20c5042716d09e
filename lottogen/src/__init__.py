"""
복권 통계 및 조합 생성 시스템 - 소스 코드

이 패키지는 통계 엔진과 조합 생성기의 핵심 기능을 구현합니다.
"""

from .analysis.statistics_engine import StatisticsEngine, compute_statistics
from .generation.combination_generator import CombinationGenerator, generate
from .utils.data_loader import DataManager

__all__ = ['StatisticsEngine', 'compute_statistics', 'CombinationGenerator', 'generate', 'DataManager']
