"""
설정, 게임 규칙, 데이터 로더 유틸리티
"""

from .config import Config, DataConfig, GeneratorConfig, LoggingConfig
from .errors import ConfigError, ConstraintConfigError, DataImportError, LottoGenError
from .game_rules import GAME_RULES, PRIMES, Draw, GameMode, GameRuleset, get_ruleset

__all__ = [
    'Config', 'DataConfig', 'GeneratorConfig', 'LoggingConfig',
    'ConfigError', 'ConstraintConfigError', 'DataImportError', 'LottoGenError',
    'GAME_RULES', 'PRIMES', 'Draw', 'GameMode', 'GameRuleset', 'get_ruleset'
]
