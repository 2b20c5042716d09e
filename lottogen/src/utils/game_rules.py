"""
게임 규칙 모듈

지원하는 복권 종류(메가세나, 로또파실)의 규칙과 당첨 회차 레코드를 정의합니다.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, Tuple, Union


class GameMode(Enum):
    """복권 종류"""
    MEGASENA = 'MEGASENA'
    LOTOFACIL = 'LOTOFACIL'


@dataclass(frozen=True)
class GameRuleset:
    """게임 규칙

    Attributes:
        name: 표시 이름
        max_number: 추첨 가능한 가장 큰 번호
        min_picks: 조합당 최소 번호 개수
        max_picks: 조합당 최대 번호 개수
        universe: 1..max_number 번호 튜플
    """
    name: str
    max_number: int
    min_picks: int
    max_picks: int
    universe: Tuple[int, ...] = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, 'universe', tuple(range(1, self.max_number + 1)))


@dataclass(frozen=True)
class Draw:
    """과거 당첨 회차 하나"""
    sequence_id: int
    date: str
    numbers: FrozenSet[int]

    def __post_init__(self):
        object.__setattr__(self, 'sequence_id', int(self.sequence_id))
        object.__setattr__(self, 'numbers', frozenset(int(n) for n in self.numbers))

    def sorted_numbers(self) -> Tuple[int, ...]:
        return tuple(sorted(self.numbers))


GAME_RULES = {
    GameMode.MEGASENA: GameRuleset(name='Mega-Sena', max_number=60, min_picks=6, max_picks=20),
    GameMode.LOTOFACIL: GameRuleset(name='Lotofácil', max_number=25, min_picks=15, max_picks=20),
}

# 지원 게임의 최대 번호가 60이므로 59 이하 소수로 충분
PRIMES = frozenset([2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59])

MULTIPLE_DIVISORS = (2, 3, 4, 5, 6)

QUADRANT_COUNT = 4


def get_ruleset(mode: Union[GameMode, str]) -> GameRuleset:
    """
    게임 규칙 조회

    Args:
        mode: GameMode 또는 그 이름 ('MEGASENA', 'lotofacil' 등)

    Returns:
        해당 게임 규칙
    """
    if not isinstance(mode, GameMode):
        mode = GameMode[str(mode).strip().upper()]
    return GAME_RULES[mode]


def quadrant_size(max_number: int) -> float:
    """사분면 폭 (max_number / 4, 실수)"""
    return max_number / QUADRANT_COUNT


def quadrant_index(number: int, max_number: int) -> int:
    """
    번호가 속한 사분면 인덱스 (0~3)

    각 사분면의 상한은 포함되며 마지막 사분면이 나머지를 모두 흡수합니다.
    로또파실(폭 6.25)은 1-6, 7-12, 13-18, 19-25로 나뉩니다.
    """
    size = quadrant_size(max_number)
    for idx in range(QUADRANT_COUNT - 1):
        if number <= size * (idx + 1):
            return idx
    return QUADRANT_COUNT - 1


def count_quadrants(numbers: Iterable[int], max_number: int) -> Tuple[int, ...]:
    """사분면별 번호 개수"""
    counts = [0] * QUADRANT_COUNT
    for n in numbers:
        counts[quadrant_index(n, max_number)] += 1
    return tuple(counts)
