"""
조합 생성 모듈

통계 스냅샷과 전략/필터 제약을 받아 제한된 시도 횟수 안에서
기각 샘플링으로 유효한 조합을 생성합니다.

- 시도 예산을 다 쓰면 요청보다 적은(0개 포함) 조합을 반환하며 예외는 없습니다.
- 미출현 전략이 있으면 후보 번호를 미출현 풀과 전체 풀로 나눠 뽑습니다.
- 서로 다른 시도에서 같은 조합이 나와도 제거하지 않습니다.
"""

import random
from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence, Tuple

from lottogen.src.analysis.statistics_engine import Statistics
from lottogen.src.generation.constraints import (
    FilterConstraint,
    StrategyConstraint,
    StrategyType,
    is_valid_combination,
)
from lottogen.src.utils.config import GeneratorConfig
from lottogen.src.utils.game_rules import GameMode, GameRuleset, get_ruleset
from shared.error_handler import get_logger, log_performance

# 로거 설정
logger = get_logger(__name__)

Combination = Tuple[int, ...]


@dataclass(frozen=True)
class GenerationRequest:
    """생성 요청 (게임 종류, 조합 수, 조합당 번호 수)"""
    mode: GameMode
    count: int
    pick_count: int

    @property
    def ruleset(self) -> GameRuleset:
        return get_ruleset(self.mode)

    def clamped(self, max_count: int = 100) -> 'GenerationRequest':
        """
        요청값을 허용 범위로 보정

        생성기는 범위를 다시 검사하지 않으므로 호출 측에서 사용합니다.

        Args:
            max_count: 최대 조합 수

        Returns:
            count는 [1, max_count], pick_count는 [min_picks, max_picks]로 보정된 요청
        """
        rules = self.ruleset
        return replace(
            self,
            count=min(max_count, max(1, self.count)),
            pick_count=min(rules.max_picks, max(rules.min_picks, self.pick_count)),
        )


@dataclass(frozen=True)
class GenerationResult:
    """생성 결과"""
    combinations: List[Combination] = field(default_factory=list)
    attempts: int = 0
    requested: int = 0

    @property
    def exhausted(self) -> bool:
        """요청 수를 채우지 못하고 시도 예산을 소진했는지"""
        return len(self.combinations) < self.requested


class CombinationGenerator:
    """기각 샘플링 조합 생성기"""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """
        조합 생성기 초기화

        Args:
            config: 생성 설정 (시도 예산, 시드)
        """
        self.config = config or GeneratorConfig()

    @log_performance
    def run(
        self,
        count: int,
        pick_count: int,
        ruleset: GameRuleset,
        strategies: Sequence[StrategyConstraint],
        filters: Sequence[FilterConstraint],
        stats: Statistics
    ) -> GenerationResult:
        """
        조합 생성

        Args:
            count: 생성할 조합 수
            pick_count: 조합당 번호 수 ([min_picks, max_picks] 범위로 보정된 값)
            ruleset: 게임 규칙
            strategies: 전략 제약 목록
            filters: 필터 제약 목록
            stats: 통계 스냅샷

        Returns:
            생성된 조합과 사용한 시도 횟수
        """
        # 호출마다 독립된 난수 생성기 사용
        rng = random.Random(self.config.seed)
        universe = list(ruleset.universe)
        max_attempts = self.config.max_attempts

        late_pool, quota = self._late_split(universe, pick_count, strategies, stats)

        combinations: List[Combination] = []
        attempts = 0

        while len(combinations) < count and attempts < max_attempts:
            attempts += 1

            if late_pool is not None:
                current = set(rng.sample(late_pool, quota))
                while len(current) < pick_count:
                    current.add(rng.choice(universe))
            else:
                current = rng.sample(universe, pick_count)

            candidate = tuple(sorted(current))

            if is_valid_combination(candidate, strategies, filters, stats, ruleset):
                combinations.append(candidate)

        result = GenerationResult(combinations=combinations, attempts=attempts, requested=count)

        logger.info(
            f"조합 생성 완료: {ruleset.name}, {len(combinations)}/{count}개, 시도 {attempts}회"
        )
        if result.exhausted:
            logger.warning(
                f"시도 예산({max_attempts}회) 소진: 조건이 너무 엄격하거나 불가능합니다 "
                f"({len(combinations)}/{count}개)"
            )

        return result

    def generate(
        self,
        count: int,
        pick_count: int,
        ruleset: GameRuleset,
        strategies: Sequence[StrategyConstraint],
        filters: Sequence[FilterConstraint],
        stats: Statistics
    ) -> List[Combination]:
        """run()과 같지만 조합 목록만 반환"""
        return self.run(count, pick_count, ruleset, strategies, filters, stats).combinations

    def run_request(
        self,
        request: GenerationRequest,
        strategies: Sequence[StrategyConstraint],
        filters: Sequence[FilterConstraint],
        stats: Statistics
    ) -> GenerationResult:
        """보정된 요청으로 생성"""
        request = request.clamped(self.config.max_games)
        return self.run(
            request.count, request.pick_count, request.ruleset, strategies, filters, stats
        )

    @staticmethod
    def _late_split(
        universe: List[int],
        pick_count: int,
        strategies: Sequence[StrategyConstraint],
        stats: Statistics
    ) -> Tuple[Optional[List[int]], int]:
        """
        미출현 풀 계산

        첫 번째 미출현 전략 기준으로 풀을 만들며, 풀이 할당량보다 작거나
        할당량이 pick_count를 벗어나면 (None, 0)을 반환해 균등 샘플링으로 돌아갑니다.
        """
        lateness = next((s for s in strategies if s.type is StrategyType.LATENESS), None)
        if lateness is None:
            return None, 0

        quota = lateness.params.required_late_count
        late_pool = [n for n in universe if stats.lateness.get(n, 0) >= lateness.params.min_delay]

        if not 0 <= quota <= pick_count or len(late_pool) < quota:
            return None, 0
        return late_pool, quota


def generate(
    count: int,
    pick_count: int,
    ruleset: GameRuleset,
    strategies: Sequence[StrategyConstraint],
    filters: Sequence[FilterConstraint],
    stats: Statistics,
    config: Optional[GeneratorConfig] = None
) -> List[Combination]:
    """CombinationGenerator(config).generate(...)의 함수형 진입점"""
    return CombinationGenerator(config).generate(count, pick_count, ruleset, strategies, filters, stats)
