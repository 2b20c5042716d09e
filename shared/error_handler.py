"""
오류 처리 및 로깅 유틸리티

콘솔 로그는 색상으로 구분해 표시하고, 로그 디렉토리가 지정되면 파일에도 기록합니다.
"""

import logging
import functools
import sys
import time
from pathlib import Path
from typing import Callable, Optional, Union

# ANSI 컬러 코드
COLORS = {
    'DEBUG': '\033[94m',  # 파란색
    'INFO': '\033[92m',   # 녹색
    'WARNING': '\033[93m', # 노란색
    'ERROR': '\033[91m',  # 빨간색
    'CRITICAL': '\033[41m\033[97m', # 배경 빨간색, 글자 흰색
    'RESET': '\033[0m'    # 리셋
}

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

class ColoredFormatter(logging.Formatter):
    """컬러 로그 포매터"""

    def format(self, record):
        levelname = record.levelname
        message = super().format(record)

        if levelname in COLORS:
            return f"{COLORS[levelname]}{message}{COLORS['RESET']}"
        return message

def get_logger(name: str) -> logging.Logger:
    """모듈별 로거 생성"""
    return logging.getLogger(name)

def setup_logger(
    name: str,
    level: Union[int, str] = logging.INFO,
    log_dir: Optional[Union[str, Path]] = None,
    console: bool = True
) -> logging.Logger:
    """로거 설정

    핸들러는 한 번만 추가되므로 여러 번 호출해도 로그가 중복되지 않습니다.

    Args:
        name: 로거 이름
        level: 로그 레벨 (정수 또는 'INFO' 같은 이름)
        log_dir: 로그 파일 디렉토리 (None이면 파일 기록 안 함)
        console: 콘솔 출력 여부

    Returns:
        설정된 로거
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(ColoredFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(console_handler)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        # 파일에는 호출 위치까지 기록
        file_handler = logging.FileHandler(log_dir / f"{name}.log", encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(
            LOG_FORMAT + ' - [%(filename)s:%(lineno)d]',
            datefmt=DATE_FORMAT
        ))
        logger.addHandler(file_handler)

    return logger

def log_performance(func: Callable) -> Callable:
    """
    성능 측정 데코레이터

    실행 시간을 DEBUG 레벨로 기록하고, 예외가 발생하면 소요 시간과 함께
    ERROR로 기록한 뒤 다시 발생시킵니다.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger(func.__module__)
        start_time = time.perf_counter()

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            execution_time = time.perf_counter() - start_time
            logger.error(
                f"함수 {func.__name__} 실행 실패: "
                f"시간={execution_time:.3f}초, "
                f"오류={str(e)}"
            )
            raise

        execution_time = time.perf_counter() - start_time
        logger.debug(f"함수 {func.__name__} 실행 완료: 시간={execution_time:.3f}초")
        return result

    return wrapper
