"""
예외 정의 모듈

핵심 계산(통계 엔진, 조합 생성기)은 예외를 발생시키지 않습니다.
여기 정의된 예외는 설정 로드, 데이터 가져오기, 제약 조건 파싱 단계에서만 사용됩니다.
"""

from typing import Any, Optional


class LottoGenError(Exception):
    """패키지 기본 예외"""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ConfigError(LottoGenError):
    """설정 파일 오류"""


class DataImportError(LottoGenError):
    """당첨 번호 데이터 가져오기 오류"""


class ConstraintConfigError(LottoGenError):
    """전략/필터 매개변수 오류

    details에는 marshmallow의 필드별 오류 메시지가 담깁니다.
    """

    @property
    def messages(self) -> Any:
        return self.details
