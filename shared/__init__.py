"""
공용 유틸리티 패키지

로깅과 성능 측정 데코레이터를 제공합니다.
"""

from .error_handler import get_logger, setup_logger, log_performance, ColoredFormatter

__all__ = ['get_logger', 'setup_logger', 'log_performance', 'ColoredFormatter']
