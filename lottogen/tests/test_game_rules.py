"""
게임 규칙 테스트 모듈

이 모듈은 게임 규칙, 사분면 계산, Draw 레코드를 테스트합니다.
"""

import unittest
from pathlib import Path
import sys

# 프로젝트 루트 디렉토리를 Python 경로에 추가
project_root = str(Path(__file__).parent.parent.parent)
if project_root not in sys.path:
    sys.path.append(project_root)

from lottogen.src.utils.game_rules import (
    GAME_RULES,
    PRIMES,
    Draw,
    GameMode,
    count_quadrants,
    get_ruleset,
    quadrant_index,
)


class TestGameRules(unittest.TestCase):
    """게임 규칙 테스트"""

    def test_rulesets(self):
        """두 게임 규칙 값 테스트"""
        mega = GAME_RULES[GameMode.MEGASENA]
        self.assertEqual(mega.max_number, 60)
        self.assertEqual((mega.min_picks, mega.max_picks), (6, 20))
        self.assertEqual(mega.universe, tuple(range(1, 61)))

        lotofacil = GAME_RULES[GameMode.LOTOFACIL]
        self.assertEqual(lotofacil.max_number, 25)
        self.assertEqual((lotofacil.min_picks, lotofacil.max_picks), (15, 20))
        self.assertEqual(len(lotofacil.universe), 25)

    def test_ruleset_is_immutable(self):
        """규칙 불변성 테스트"""
        with self.assertRaises(Exception):
            GAME_RULES[GameMode.MEGASENA].max_number = 99

    def test_get_ruleset_by_name(self):
        """이름으로 규칙 조회 테스트"""
        self.assertIs(get_ruleset('lotofacil'), GAME_RULES[GameMode.LOTOFACIL])
        self.assertIs(get_ruleset(GameMode.MEGASENA), GAME_RULES[GameMode.MEGASENA])
        with self.assertRaises(KeyError):
            get_ruleset('quina')

    def test_primes(self):
        """59 이하 소수 집합 테스트"""
        expected = {n for n in range(2, 60) if all(n % d for d in range(2, n))}
        self.assertEqual(PRIMES, expected)

    def test_quadrant_index_lotofacil(self):
        """로또파실 사분면 경계 테스트 (폭 6.25, 상한 포함)"""
        expected = {1: 0, 6: 0, 7: 1, 12: 1, 13: 2, 18: 2, 19: 3, 25: 3}
        for number, quadrant in expected.items():
            self.assertEqual(quadrant_index(number, 25), quadrant, f"번호 {number}")

    def test_quadrant_index_megasena(self):
        """메가세나 사분면 경계 테스트"""
        expected = {1: 0, 15: 0, 16: 1, 30: 1, 31: 2, 45: 2, 46: 3, 60: 3}
        for number, quadrant in expected.items():
            self.assertEqual(quadrant_index(number, 60), quadrant, f"번호 {number}")

    def test_every_number_in_one_quadrant(self):
        """모든 번호가 정확히 한 사분면에 속하는지 테스트"""
        for ruleset in GAME_RULES.values():
            counts = count_quadrants(ruleset.universe, ruleset.max_number)
            self.assertEqual(sum(counts), ruleset.max_number)
            self.assertTrue(all(c > 0 for c in counts))


class TestDraw(unittest.TestCase):
    """Draw 레코드 테스트"""

    def test_numbers_are_frozen_and_sorted_on_demand(self):
        """번호 정규화 테스트"""
        draw = Draw(sequence_id='7', date='01/02/2020', numbers=[30, 4, 15, 4, 8])
        self.assertEqual(draw.sequence_id, 7)
        self.assertIsInstance(draw.numbers, frozenset)
        self.assertEqual(draw.sorted_numbers(), (4, 8, 15, 30))

    def test_draw_is_immutable(self):
        """Draw 불변성 테스트"""
        draw = Draw(1, '01/01/2020', [1, 2, 3, 4, 5, 6])
        with self.assertRaises(Exception):
            draw.date = '02/01/2020'


if __name__ == '__main__':
    unittest.main()
