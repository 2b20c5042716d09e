"""
조합 생성기 테스트 모듈

이 모듈은 기각 샘플링 조합 생성기를 테스트합니다.
"""

import unittest
from dataclasses import replace
from pathlib import Path
import sys

# 프로젝트 루트 디렉토리를 Python 경로에 추가
project_root = str(Path(__file__).parent.parent.parent)
if project_root not in sys.path:
    sys.path.append(project_root)

from lottogen.src.utils.config import GeneratorConfig
from lottogen.src.utils.game_rules import GAME_RULES, Draw, GameMode
from lottogen.src.analysis.statistics_engine import compute_statistics
from lottogen.src.generation.constraints import (
    FilterConstraint,
    StrategyConstraint,
    is_valid_combination,
)
from lottogen.src.generation.combination_generator import (
    CombinationGenerator,
    GenerationRequest,
    GenerationResult,
    generate,
)

MEGASENA = GAME_RULES[GameMode.MEGASENA]
LOTOFACIL = GAME_RULES[GameMode.LOTOFACIL]


class TestCombinationGenerator(unittest.TestCase):
    """조합 생성기 테스트"""

    @classmethod
    def setUpClass(cls):
        """테스트 데이터 생성"""
        cls.mega_stats = compute_statistics(
            [Draw(1, '01/01/2020', [4, 5, 30, 33, 41, 52]), Draw(2, '08/01/2020', [9, 37, 39, 41, 43, 49])],
            MEGASENA
        )
        cls.lotofacil_stats = compute_statistics([Draw(1, '01/01/2020', range(1, 16))], LOTOFACIL)
        cls.generator = CombinationGenerator(GeneratorConfig(max_attempts=20000, seed=7))

    def assert_well_formed(self, combinations, pick_count, ruleset):
        """조합 형식 검사: 정렬, 중복 없음, 범위 내"""
        for combination in combinations:
            self.assertEqual(len(combination), pick_count)
            self.assertEqual(list(combination), sorted(set(combination)))
            self.assertTrue(all(1 <= n <= ruleset.max_number for n in combination))

    def test_lotofacil_even_odd(self):
        """로또파실 짝수 8개, 홀수 7개 생성 테스트"""
        strategies = [StrategyConstraint.even_odd(8, 7)]
        combinations = self.generator.generate(5, 15, LOTOFACIL, strategies, [], self.lotofacil_stats)

        self.assertEqual(len(combinations), 5)
        self.assert_well_formed(combinations, 15, LOTOFACIL)
        for combination in combinations:
            self.assertEqual(sum(1 for n in combination if n % 2 == 0), 8)

    def test_megasena_sum_filter(self):
        """메가세나 합계 100~120 필터 테스트"""
        filters = [FilterConstraint.sum_total(100, 120)]
        combinations = self.generator.generate(5, 6, MEGASENA, [], filters, self.mega_stats)

        self.assertEqual(len(combinations), 5)
        self.assert_well_formed(combinations, 6, MEGASENA)
        for combination in combinations:
            self.assertTrue(100 <= sum(combination) <= 120)

    def test_infeasible_returns_empty(self):
        """불가능한 조건은 예산 소진 후 빈 결과"""
        generator = CombinationGenerator(GeneratorConfig(max_attempts=500, seed=1))
        result = generator.run(3, 6, MEGASENA, [StrategyConstraint.even_odd(20, 0)], [], self.mega_stats)

        self.assertEqual(result.combinations, [])
        self.assertEqual(result.attempts, 500)
        self.assertTrue(result.exhausted)

    def test_exhausted_is_logged(self):
        """예산 소진 경고 로그 테스트"""
        generator = CombinationGenerator(GeneratorConfig(max_attempts=50, seed=1))
        with self.assertLogs('lottogen.src.generation.combination_generator', level='WARNING'):
            generator.run(1, 6, MEGASENA, [StrategyConstraint.even_odd(0, 0)], [], self.mega_stats)

    def test_every_result_satisfies_constraints(self):
        """결과 재검증 테스트"""
        strategies = [StrategyConstraint.even_odd(3, 3), StrategyConstraint.primes(1, 2)]
        filters = [
            FilterConstraint.sum_total(120, 220),
            FilterConstraint.quadrants([(1, None), (1, None), (None, None), (None, None)]),
        ]
        result = self.generator.run(10, 6, MEGASENA, strategies, filters, self.mega_stats)

        self.assertLessEqual(len(result.combinations), 10)
        self.assertGreater(len(result.combinations), 0)
        self.assert_well_formed(result.combinations, 6, MEGASENA)
        for combination in result.combinations:
            self.assertTrue(is_valid_combination(combination, strategies, filters, self.mega_stats, MEGASENA))

    def test_without_constraints_fills_request_quickly(self):
        """제약이 없으면 시도 횟수 = 요청 수"""
        result = self.generator.run(20, 10, MEGASENA, [], [], self.mega_stats)

        self.assertEqual(len(result.combinations), 20)
        self.assertEqual(result.attempts, 20)
        self.assertFalse(result.exhausted)
        self.assert_well_formed(result.combinations, 10, MEGASENA)

    def test_zero_count(self):
        """요청 수 0 테스트"""
        result = self.generator.run(0, 6, MEGASENA, [], [], self.mega_stats)
        self.assertEqual(result.combinations, [])
        self.assertEqual(result.attempts, 0)
        self.assertFalse(result.exhausted)

    def test_seed_reproducibility(self):
        """같은 시드는 같은 결과"""
        first = CombinationGenerator(GeneratorConfig(seed=123)).generate(5, 6, MEGASENA, [], [], self.mega_stats)
        second = CombinationGenerator(GeneratorConfig(seed=123)).generate(5, 6, MEGASENA, [], [], self.mega_stats)
        self.assertEqual(first, second)

    def test_duplicates_across_attempts_are_kept(self):
        """서로 다른 시도에서 나온 같은 조합을 제거하지 않음"""
        # 로또파실 20개 중 짝수 12개(전부), 홀수 8개: 가능한 조합 1287개
        generator = CombinationGenerator(GeneratorConfig(max_attempts=100000, seed=19))
        strategies = [StrategyConstraint.even_odd(12, 8)]
        combinations = generator.generate(300, 20, LOTOFACIL, strategies, [], self.lotofacil_stats)

        self.assertEqual(len(combinations), 300)
        self.assertLess(len(set(combinations)), len(combinations))
        for combination in combinations:
            self.assertTrue(is_valid_combination(combination, strategies, [], self.lotofacil_stats, LOTOFACIL))

    def test_functional_entry_point(self):
        """함수형 진입점 테스트"""
        combinations = generate(
            2, 6, MEGASENA, [StrategyConstraint.even_odd(6, 0)], [], self.mega_stats,
            config=GeneratorConfig(max_attempts=20000, seed=3)
        )
        self.assertEqual(len(combinations), 2)
        for combination in combinations:
            self.assertTrue(all(n % 2 == 0 for n in combination))


class TestLatenessSampling(unittest.TestCase):
    """미출현 풀 분할 샘플링 테스트"""

    @classmethod
    def setUpClass(cls):
        """4개 번호만 12회 미출현인 통계"""
        late_numbers = {5, 17, 33, 48}
        base = compute_statistics([], MEGASENA)
        cls.late_numbers = late_numbers
        cls.stats = replace(
            base,
            lateness={n: (12 if n in late_numbers else 0) for n in MEGASENA.universe}
        )

    def test_exact_late_count(self):
        """미출현 번호 정확히 2개 포함"""
        generator = CombinationGenerator(GeneratorConfig(max_attempts=5000, seed=11))
        combinations = generator.generate(
            10, 6, MEGASENA, [StrategyConstraint.lateness(2, 10)], [], self.stats
        )

        self.assertEqual(len(combinations), 10)
        for combination in combinations:
            self.assertEqual(len(set(combination) & self.late_numbers), 2)

    def test_pool_smaller_than_quota_falls_back(self):
        """풀이 할당량보다 작으면 균등 샘플링 후 모두 기각"""
        generator = CombinationGenerator(GeneratorConfig(max_attempts=300, seed=11))
        result = generator.run(3, 6, MEGASENA, [StrategyConstraint.lateness(5, 10)], [], self.stats)

        self.assertEqual(result.combinations, [])
        self.assertEqual(result.attempts, 300)

    def test_quota_larger_than_pick_count(self):
        """할당량이 번호 수보다 크면 결과 없음"""
        generator = CombinationGenerator(GeneratorConfig(max_attempts=300, seed=11))
        result = generator.run(3, 6, MEGASENA, [StrategyConstraint.lateness(7, 0)], [], self.stats)

        self.assertEqual(result.combinations, [])

    def test_late_split_pool(self):
        """미출현 풀 계산 테스트"""
        pool, quota = CombinationGenerator._late_split(
            list(MEGASENA.universe), 6, [StrategyConstraint.lateness(2, 10)], self.stats
        )
        self.assertEqual(sorted(pool), sorted(self.late_numbers))
        self.assertEqual(quota, 2)

        self.assertEqual(
            CombinationGenerator._late_split(list(MEGASENA.universe), 6, [], self.stats),
            (None, 0)
        )


class TestGenerationRequest(unittest.TestCase):
    """생성 요청 보정 테스트"""

    def test_clamp_lotofacil(self):
        """로또파실 요청 보정"""
        request = GenerationRequest(GameMode.LOTOFACIL, count=500, pick_count=3).clamped()
        self.assertEqual(request.count, 100)
        self.assertEqual(request.pick_count, 15)

    def test_clamp_megasena(self):
        """메가세나 요청 보정"""
        request = GenerationRequest(GameMode.MEGASENA, count=0, pick_count=25).clamped(max_count=10)
        self.assertEqual(request.count, 1)
        self.assertEqual(request.pick_count, 20)

    def test_valid_request_unchanged(self):
        """범위 내 요청은 그대로"""
        request = GenerationRequest(GameMode.MEGASENA, count=5, pick_count=8)
        self.assertEqual(request.clamped(), request)

    def test_run_request(self):
        """보정된 요청으로 생성"""
        generator = CombinationGenerator(GeneratorConfig(seed=5, max_games=3))
        stats = compute_statistics([], LOTOFACIL)
        result = generator.run_request(GenerationRequest(GameMode.LOTOFACIL, 50, 30), [], [], stats)

        self.assertIsInstance(result, GenerationResult)
        self.assertEqual(result.requested, 3)
        self.assertEqual(len(result.combinations), 3)
        self.assertTrue(all(len(c) == 20 for c in result.combinations))


if __name__ == '__main__':
    unittest.main()
