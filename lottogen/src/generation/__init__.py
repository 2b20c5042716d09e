"""
조합 생성 모듈

이 패키지는 전략/필터 제약과 기각 샘플링 조합 생성기를 제공합니다.
"""

from .constraints import (
    EvenOddParams,
    FilterConstraint,
    FilterType,
    LatenessParams,
    MultiplesParams,
    PrimesParams,
    QuadrantBounds,
    QuadrantsParams,
    StrategyConstraint,
    StrategyType,
    SumTotalParams,
    is_valid_combination,
    is_valid_filter,
    is_valid_strategy,
)
from .combination_generator import (
    CombinationGenerator,
    GenerationRequest,
    GenerationResult,
    generate,
)
from .schemas import load_filters, load_strategies

__all__ = [
    'EvenOddParams', 'FilterConstraint', 'FilterType', 'LatenessParams',
    'MultiplesParams', 'PrimesParams', 'QuadrantBounds', 'QuadrantsParams',
    'StrategyConstraint', 'StrategyType', 'SumTotalParams',
    'is_valid_combination', 'is_valid_filter', 'is_valid_strategy',
    'CombinationGenerator', 'GenerationRequest', 'GenerationResult', 'generate',
    'load_filters', 'load_strategies'
]
