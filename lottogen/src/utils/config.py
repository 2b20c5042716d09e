"""
설정 관리 모듈

이 모듈은 프로젝트의 설정을 관리하는 Config 클래스를 제공합니다.
"""

from typing import Any, Dict, Optional
from dataclasses import dataclass, asdict
from pathlib import Path
import logging
import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

# 조합 생성 기본 시도 예산
DEFAULT_MAX_ATTEMPTS = 200000

@dataclass
class GeneratorConfig:
    """조합 생성 설정"""
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    seed: Optional[int] = None
    max_games: int = 100

@dataclass
class DataConfig:
    """데이터 설정"""
    historical_data_path: str = 'lottogen/data/raw/megasena.csv'
    default_mode: str = 'MEGASENA'
    csv_separator: Optional[str] = None

@dataclass
class LoggingConfig:
    """로깅 설정"""
    level: str = 'INFO'
    log_dir: Optional[str] = None
    console: bool = True

class Config:
    """설정 관리 클래스"""

    def __init__(self, config_dict: Dict[str, Any] = None):
        """
        설정 객체 초기화

        Args:
            config_dict: 설정 딕셔너리
        """
        self._apply(config_dict or {})

    def _apply(self, config_dict: Dict[str, Any]) -> None:
        """섹션을 모두 검증한 뒤에만 반영 (실패 시 기존 상태 유지)"""
        try:
            generator = GeneratorConfig(**(config_dict.get('generator') or {}))
            data = DataConfig(**(config_dict.get('data') or {}))
            logging_config = LoggingConfig(**(config_dict.get('logging') or {}))
        except TypeError as e:
            raise ConfigError(f'알 수 없는 설정 항목: {str(e)}') from e

        if generator.max_attempts <= 0:
            raise ConfigError(f'max_attempts는 양수여야 합니다: {generator.max_attempts}')

        self._config = config_dict
        self.generator = generator
        self.data = data
        self.logging = logging_config

    def get(self, key: str, default: Any = None) -> Any:
        """
        설정값 조회

        Args:
            key: 설정 키
            default: 기본값

        Returns:
            설정값
        """
        return self._config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """
        설정값 설정

        Args:
            key: 설정 키
            value: 설정값
        """
        self._config[key] = value

    def update(self, config_dict: Dict[str, Any]) -> None:
        """
        설정 업데이트 후 섹션 재구성

        Args:
            config_dict: 업데이트할 설정 딕셔너리
        """
        merged = dict(self._config)
        merged.update(config_dict)
        self._apply(merged)

    def save(self, filepath: str) -> None:
        """
        설정 저장

        Args:
            filepath: 저장할 파일 경로
        """
        try:
            save_dir = Path(filepath).parent
            save_dir.mkdir(parents=True, exist_ok=True)

            # YAML 형식으로 저장
            with open(filepath, 'w', encoding='utf-8') as f:
                yaml.safe_dump(self.to_dict(), f, allow_unicode=True, default_flow_style=False, sort_keys=False)
            logger.info(f'설정 저장 완료: {filepath}')
        except OSError as e:
            logger.error(f'설정 저장 실패: {str(e)}')
            raise

    def load(self, filepath: str) -> None:
        """
        설정 로드

        Args:
            filepath: 로드할 파일 경로
        """
        if not Path(filepath).exists():
            raise ConfigError(f'설정 파일을 찾을 수 없습니다: {filepath}')

        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.error(f'설정 로드 실패: {str(e)}')
            raise ConfigError(f'설정 파일 형식 오류: {filepath}') from e

        if not isinstance(loaded, dict):
            raise ConfigError(f'설정 파일 최상위는 매핑이어야 합니다: {filepath}')

        # 설정 객체 재구성
        self._apply(loaded)
        logger.info(f'설정 로드 완료: {filepath}')

    @classmethod
    def from_file(cls, filepath: str) -> 'Config':
        config = cls()
        config.load(filepath)
        return config

    def to_dict(self) -> Dict[str, Any]:
        """
        설정을 딕셔너리로 변환

        Returns:
            설정 딕셔너리
        """
        return {
            'generator': asdict(self.generator),
            'data': asdict(self.data),
            'logging': asdict(self.logging)
        }

    def __str__(self) -> str:
        """문자열 표현"""
        return str(self.to_dict())

    def __repr__(self) -> str:
        """표현식 문자열"""
        return f'Config({self.to_dict()})'
