"""
과거 당첨 번호 통계 모듈

이 모듈은 당첨 회차 목록을 한 번 순회하여 다음 통계를 계산합니다:
- 회차별 짝수/홀수 개수
- 회차별 소수 개수
- 회차별 2~6의 배수 개수
- 회차별 사분면 분포
- 회차별 번호 합계
- 번호별 미출현 회차 수 (lateness)

통계는 가져오기마다 전체를 다시 계산하며 부분 갱신하지 않습니다.
"""

from collections import Counter
from dataclasses import dataclass, asdict
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from lottogen.src.utils.game_rules import (
    Draw,
    GameRuleset,
    MULTIPLE_DIVISORS,
    PRIMES,
    QUADRANT_COUNT,
    count_quadrants,
)
from shared.error_handler import get_logger, log_performance

# 로거 설정
logger = get_logger(__name__)

NO_DATE = 'N/A'


@dataclass(frozen=True)
class EvenOddCount:
    """회차 하나의 짝수/홀수 개수"""
    even: int
    odd: int


@dataclass(frozen=True)
class Statistics:
    """당첨 회차 목록에 대한 읽기 전용 통계 스냅샷

    회차별 목록은 모두 회차 순서(오래된 것 → 최신)를 따릅니다.
    생성 시 목록은 튜플로, 딕셔너리는 읽기 전용 매핑으로 고정됩니다.
    """
    last_update_date: str
    draw_count: int
    even_odd_per_draw: Tuple[EvenOddCount, ...]
    prime_count_per_draw: Tuple[int, ...]
    multiple_counts_per_draw: Mapping[int, Tuple[int, ...]]
    quadrant_counts_per_draw: Tuple[Tuple[int, ...], ...]
    sum_per_draw: Tuple[int, ...]
    lateness: Mapping[int, int]

    def __post_init__(self):
        object.__setattr__(self, 'even_odd_per_draw', tuple(self.even_odd_per_draw))
        object.__setattr__(self, 'prime_count_per_draw', tuple(self.prime_count_per_draw))
        object.__setattr__(self, 'multiple_counts_per_draw', MappingProxyType(
            {m: tuple(counts) for m, counts in self.multiple_counts_per_draw.items()}
        ))
        object.__setattr__(
            self, 'quadrant_counts_per_draw', tuple(tuple(q) for q in self.quadrant_counts_per_draw)
        )
        object.__setattr__(self, 'sum_per_draw', tuple(self.sum_per_draw))
        object.__setattr__(self, 'lateness', MappingProxyType(dict(self.lateness)))

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON 직렬화 가능한 딕셔너리로 변환

        Returns:
            통계 딕셔너리 (목록은 list, 매핑은 dict)
        """
        return {
            'last_update_date': self.last_update_date,
            'draw_count': self.draw_count,
            'even_odd_per_draw': [asdict(eo) for eo in self.even_odd_per_draw],
            'prime_count_per_draw': list(self.prime_count_per_draw),
            'multiple_counts_per_draw': {m: list(c) for m, c in self.multiple_counts_per_draw.items()},
            'quadrant_counts_per_draw': [list(q) for q in self.quadrant_counts_per_draw],
            'sum_per_draw': list(self.sum_per_draw),
            'lateness': dict(self.lateness),
        }


class StatisticsEngine:
    """게임 규칙 하나에 대한 통계 계산기"""

    def __init__(self, ruleset: GameRuleset):
        """
        통계 엔진 초기화

        Args:
            ruleset: 게임 규칙
        """
        self.ruleset = ruleset

    @log_performance
    def compute(self, draws: Sequence[Draw]) -> Statistics:
        """
        통계 계산

        Args:
            draws: 오래된 것부터 최신 순으로 정렬된 당첨 회차 목록 (비어 있어도 됨)

        Returns:
            통계 스냅샷
        """
        ruleset = self.ruleset

        even_odd: List[EvenOddCount] = []
        primes: List[int] = []
        multiples: Dict[int, List[int]] = {m: [] for m in MULTIPLE_DIVISORS}
        quadrants: List[List[int]] = [[] for _ in range(QUADRANT_COUNT)]
        sums: List[int] = []
        lateness: Dict[int, int] = {n: 0 for n in ruleset.universe}

        for draw in draws:
            numbers = draw.sorted_numbers()

            even = sum(1 for n in numbers if n % 2 == 0)
            even_odd.append(EvenOddCount(even=even, odd=len(numbers) - even))

            primes.append(sum(1 for n in numbers if n in PRIMES))

            for m in MULTIPLE_DIVISORS:
                multiples[m].append(sum(1 for n in numbers if n % m == 0))

            sums.append(sum(numbers))

            for idx, count in enumerate(count_quadrants(numbers, ruleset.max_number)):
                quadrants[idx].append(count)

            # 출현 번호는 0으로 초기화, 나머지는 1 증가
            for n in ruleset.universe:
                if n in draw.numbers:
                    lateness[n] = 0
                else:
                    lateness[n] += 1

        last_update_date = NO_DATE
        if draws and draws[-1].date:
            last_update_date = draws[-1].date

        logger.info(f"통계 계산 완료: {ruleset.name}, {len(draws)}회차")

        return Statistics(
            last_update_date=last_update_date,
            draw_count=len(draws),
            even_odd_per_draw=even_odd,
            prime_count_per_draw=primes,
            multiple_counts_per_draw=multiples,
            quadrant_counts_per_draw=quadrants,
            sum_per_draw=sums,
            lateness=lateness,
        )


def compute_statistics(draws: Sequence[Draw], ruleset: GameRuleset) -> Statistics:
    """StatisticsEngine(ruleset).compute(draws)의 함수형 진입점"""
    return StatisticsEngine(ruleset).compute(draws)


@dataclass(frozen=True)
class StatisticsSummary:
    """표시용 통계 요약"""
    even_odd_distribution: Dict[Tuple[int, int], int]
    prime_distribution: Dict[int, int]
    recent_sums: List[int]
    sum_min: Optional[int]
    sum_mean: Optional[float]
    sum_max: Optional[int]
    quadrant_averages: List[float]
    most_late: List[Tuple[int, int]]


def summarize_statistics(
    stats: Statistics,
    top_late: int = 20,
    recent_sums: int = 50
) -> StatisticsSummary:
    """
    통계 요약

    Args:
        stats: 통계 스냅샷
        top_late: 미출현 순위에 포함할 번호 개수
        recent_sums: 최근 합계 목록에 포함할 회차 수

    Returns:
        짝홀 패턴 분포, 소수 개수 분포, 합계 범위, 사분면 평균, 미출현 순위
    """
    even_odd_distribution = Counter((eo.even, eo.odd) for eo in stats.even_odd_per_draw)
    prime_distribution = Counter(stats.prime_count_per_draw)

    sums = np.asarray(stats.sum_per_draw, dtype=float)
    if sums.size:
        sum_min: Optional[int] = int(sums.min())
        sum_mean: Optional[float] = float(sums.mean())
        sum_max: Optional[int] = int(sums.max())
    else:
        sum_min = sum_mean = sum_max = None

    quadrant_averages = [
        float(np.mean(counts)) if counts else 0.0
        for counts in stats.quadrant_counts_per_draw
    ]

    # 미출현 회차 수 내림차순, 같으면 번호 오름차순
    ranking = sorted(stats.lateness.items(), key=lambda kv: (-kv[1], kv[0]))

    return StatisticsSummary(
        even_odd_distribution=dict(even_odd_distribution),
        prime_distribution=dict(prime_distribution),
        recent_sums=list(stats.sum_per_draw[-recent_sums:]) if recent_sums > 0 else [],
        sum_min=sum_min,
        sum_mean=sum_mean,
        sum_max=sum_max,
        quadrant_averages=quadrant_averages,
        most_late=ranking[:top_late],
    )
