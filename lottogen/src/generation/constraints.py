"""
전략/필터 제약 조건 모듈

전략은 조합 번호 자체의 성질(짝홀, 소수, 배수, 미출현)을 제한하고,
필터는 조합 전체의 집계값(합계, 사분면 분포)을 제한합니다.
설정되지 않은 경계값은 제약 없음으로 취급합니다.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Sequence, Tuple, Union

from lottogen.src.analysis.statistics_engine import Statistics
from lottogen.src.utils.game_rules import (
    GameRuleset,
    PRIMES,
    QUADRANT_COUNT,
    count_quadrants,
)


class StrategyType(Enum):
    """전략 종류 (값은 원래 화면에 표시되던 이름)"""
    LATENESS = 'Números Atrasados'
    EVEN_ODD = 'Quantidade de Pares/Ímpares'
    PRIMES = 'Quantidade de Números Primos'
    MULTIPLES = 'Números Múltiplos'


class FilterType(Enum):
    """필터 종류"""
    QUADRANTS = 'Quadrantes'
    SUM_TOTAL = 'Soma Total de Números'


@dataclass(frozen=True)
class LatenessParams:
    """min_delay 회 이상 미출현한 번호를 정확히 required_late_count개 포함"""
    required_late_count: int
    min_delay: int


@dataclass(frozen=True)
class EvenOddParams:
    even: int
    odd: int


@dataclass(frozen=True)
class PrimesParams:
    min: Optional[int] = None
    max: Optional[int] = None


@dataclass(frozen=True)
class MultiplesParams:
    """약수 → 정확한 배수 개수. 없는 약수는 제한하지 않음"""
    targets: Dict[int, int] = field(default_factory=dict)


@dataclass(frozen=True)
class QuadrantBounds:
    min: Optional[int] = None
    max: Optional[int] = None


@dataclass(frozen=True)
class QuadrantsParams:
    """사분면별 (최소, 최대) 개수

    zero_max_unbounded가 True이면 최대값 0을 제약 없음으로 취급합니다
    (기존 데이터와 동일한 동작).
    """
    bounds: Tuple[QuadrantBounds, ...] = tuple(QuadrantBounds() for _ in range(QUADRANT_COUNT))
    zero_max_unbounded: bool = True

    def __post_init__(self):
        bounds = tuple(self.bounds)
        if len(bounds) != QUADRANT_COUNT:
            raise ValueError(f"사분면 경계는 {QUADRANT_COUNT}개여야 합니다: {len(bounds)}")
        object.__setattr__(self, 'bounds', bounds)


@dataclass(frozen=True)
class SumTotalParams:
    min: Optional[int] = None
    max: Optional[int] = None


StrategyParams = Union[LatenessParams, EvenOddParams, PrimesParams, MultiplesParams]
FilterParams = Union[QuadrantsParams, SumTotalParams]

_STRATEGY_PARAM_TYPES = {
    StrategyType.LATENESS: LatenessParams,
    StrategyType.EVEN_ODD: EvenOddParams,
    StrategyType.PRIMES: PrimesParams,
    StrategyType.MULTIPLES: MultiplesParams,
}

_FILTER_PARAM_TYPES = {
    FilterType.QUADRANTS: QuadrantsParams,
    FilterType.SUM_TOTAL: SumTotalParams,
}


@dataclass(frozen=True)
class StrategyConstraint:
    type: StrategyType
    params: StrategyParams

    def __post_init__(self):
        expected = _STRATEGY_PARAM_TYPES[self.type]
        if not isinstance(self.params, expected):
            raise TypeError(f"{self.type.name} 전략에는 {expected.__name__}가 필요합니다")

    @classmethod
    def lateness(cls, required_late_count: int, min_delay: int) -> 'StrategyConstraint':
        return cls(StrategyType.LATENESS, LatenessParams(required_late_count, min_delay))

    @classmethod
    def even_odd(cls, even: int, odd: int) -> 'StrategyConstraint':
        return cls(StrategyType.EVEN_ODD, EvenOddParams(even, odd))

    @classmethod
    def primes(cls, min: Optional[int] = None, max: Optional[int] = None) -> 'StrategyConstraint':
        return cls(StrategyType.PRIMES, PrimesParams(min, max))

    @classmethod
    def multiples(cls, targets: Dict[int, int]) -> 'StrategyConstraint':
        return cls(StrategyType.MULTIPLES, MultiplesParams(dict(targets)))


@dataclass(frozen=True)
class FilterConstraint:
    type: FilterType
    params: FilterParams

    def __post_init__(self):
        expected = _FILTER_PARAM_TYPES[self.type]
        if not isinstance(self.params, expected):
            raise TypeError(f"{self.type.name} 필터에는 {expected.__name__}가 필요합니다")

    @classmethod
    def sum_total(cls, min: Optional[int] = None, max: Optional[int] = None) -> 'FilterConstraint':
        return cls(FilterType.SUM_TOTAL, SumTotalParams(min, max))

    @classmethod
    def quadrants(
        cls,
        bounds: Sequence[Tuple[Optional[int], Optional[int]]],
        zero_max_unbounded: bool = True
    ) -> 'FilterConstraint':
        return cls(
            FilterType.QUADRANTS,
            QuadrantsParams(
                bounds=tuple(QuadrantBounds(lo, hi) for lo, hi in bounds),
                zero_max_unbounded=zero_max_unbounded,
            ),
        )


def _is_number(value) -> bool:
    """설정된 숫자 경계인지 (None, NaN, 문자열 등은 False)"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


def _bound(value, default):
    return value if _is_number(value) else default


def is_valid_strategy(
    combination: Sequence[int],
    strategy: StrategyConstraint,
    stats: Statistics
) -> bool:
    """
    전략 검증

    Args:
        combination: 오름차순 조합
        strategy: 전략 제약
        stats: 미출현 정보를 담은 통계

    Returns:
        통과 여부
    """
    params = strategy.params

    if strategy.type is StrategyType.LATENESS:
        late = sum(1 for n in combination if stats.lateness.get(n, 0) >= params.min_delay)
        return late == params.required_late_count

    if strategy.type is StrategyType.EVEN_ODD:
        even = sum(1 for n in combination if n % 2 == 0)
        return even == params.even and len(combination) - even == params.odd

    if strategy.type is StrategyType.PRIMES:
        primes = sum(1 for n in combination if n in PRIMES)
        return _bound(params.min, 0) <= primes <= _bound(params.max, len(combination))

    if strategy.type is StrategyType.MULTIPLES:
        for divisor, expected in params.targets.items():
            if sum(1 for n in combination if n % divisor == 0) != expected:
                return False
        return True

    return True


def is_valid_filter(
    combination: Sequence[int],
    filter_: FilterConstraint,
    ruleset: GameRuleset
) -> bool:
    """
    필터 검증

    Args:
        combination: 오름차순 조합
        filter_: 필터 제약
        ruleset: 게임 규칙 (합계 기본 상한과 사분면 폭 계산용)

    Returns:
        통과 여부
    """
    params = filter_.params

    if filter_.type is FilterType.SUM_TOTAL:
        total = sum(combination)
        upper = _bound(params.max, ruleset.max_number * len(combination))
        return _bound(params.min, 0) <= total <= upper

    if filter_.type is FilterType.QUADRANTS:
        counts = count_quadrants(combination, ruleset.max_number)
        for count, bounds in zip(counts, params.bounds):
            if _is_number(bounds.min) and count < bounds.min:
                return False
            if not _is_number(bounds.max):
                continue
            if bounds.max == 0 and params.zero_max_unbounded:
                continue
            if count > bounds.max:
                return False
        return True

    return True


def is_valid_combination(
    combination: Sequence[int],
    strategies: Sequence[StrategyConstraint],
    filters: Sequence[FilterConstraint],
    stats: Statistics,
    ruleset: GameRuleset
) -> bool:
    """전략을 먼저, 필터를 나중에 검사하며 첫 실패에서 중단"""
    for strategy in strategies:
        if not is_valid_strategy(combination, strategy, stats):
            return False
    for filter_ in filters:
        if not is_valid_filter(combination, filter_, ruleset):
            return False
    return True
