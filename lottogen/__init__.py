"""
복권 통계 및 조합 생성 시스템

이 패키지는 과거 당첨 번호 통계와 제약 조건 기반 번호 조합 생성 기능을 제공합니다.
"""

import logging
from pathlib import Path
from typing import Optional

from shared.error_handler import setup_logger
from .src.utils.config import Config
from .src.utils.game_rules import GameMode, GAME_RULES, get_ruleset
from .src.analysis.statistics_engine import StatisticsEngine, compute_statistics, summarize_statistics
from .src.generation.combination_generator import CombinationGenerator, GenerationRequest, generate
from .src.generation.constraints import StrategyConstraint, FilterConstraint
from .src.utils.data_loader import DataManager

# 프로젝트 루트 디렉토리
ROOT_DIR = Path(__file__).parent

# 버전
__version__ = "1.0.0"


def configure_logging(config: Optional[Config] = None) -> logging.Logger:
    """
    패키지 로거 설정

    Args:
        config: 설정 객체 (logging 섹션 사용)

    Returns:
        'lottogen' 로거
    """
    log_config = (config or Config()).logging
    return setup_logger(
        'lottogen',
        level=log_config.level,
        log_dir=log_config.log_dir,
        console=log_config.console
    )


__all__ = [
    'configure_logging', 'Config', 'GameMode', 'GAME_RULES', 'get_ruleset',
    'StatisticsEngine', 'compute_statistics', 'summarize_statistics',
    'CombinationGenerator', 'GenerationRequest', 'generate',
    'StrategyConstraint', 'FilterConstraint', 'DataManager'
]
