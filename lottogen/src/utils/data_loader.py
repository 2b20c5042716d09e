"""
당첨 번호 데이터 로더

이 모듈은 CSV 파일이나 데이터프레임에서 당첨 회차를 읽어 검증된 Draw 목록으로 변환하고,
게임 종류별 이력을 보관하면서 가져올 때마다 통계를 전체 재계산합니다.

CSV 형식: 회차; 날짜; 번호1; 번호2; ... (구분자는 ';' 또는 ',', 첫 줄은 헤더)
"""

import pandas as pd
from pathlib import Path
from typing import Dict, List, Optional, Union

from .config import Config
from .errors import DataImportError
from .game_rules import Draw, GameMode, GameRuleset, get_ruleset
from lottogen.src.analysis.statistics_engine import Statistics, compute_statistics
from shared.error_handler import get_logger

# 로거 설정
logger = get_logger(__name__)

# 회차, 날짜, 최소 6개 번호
MIN_COLUMNS = 8
DEFAULT_DATE = '01/01/2024'

class DataManager:
    """데이터 관리자"""

    def __init__(self, config: Optional[Config] = None):
        """
        데이터 관리자 초기화

        Args:
            config: 설정 객체
        """
        self.config = config or Config()
        self.data_config = self.config.data
        self._draws: Dict[GameMode, List[Draw]] = {}
        self._statistics: Dict[GameMode, Statistics] = {}

    def load_csv(
        self,
        path: Optional[Union[str, Path]] = None,
        mode: Optional[Union[GameMode, str]] = None
    ) -> List[Draw]:
        """
        CSV 파일 로드 후 가져오기

        Args:
            path: CSV 경로 (없으면 설정의 historical_data_path)
            mode: 게임 종류 (없으면 설정의 default_mode)

        Returns:
            가져온 회차 목록
        """
        data_path = Path(path or self.data_config.historical_data_path)
        mode = self._resolve_mode(mode)

        if not data_path.exists():
            raise DataImportError(f"데이터 파일을 찾을 수 없습니다: {data_path}")

        ruleset = get_ruleset(mode)

        try:
            df = pd.read_csv(
                data_path,
                sep=self.data_config.csv_separator or r'[;,]',
                header=None,
                names=list(range(2 + ruleset.max_picks)),
                skiprows=1,
                dtype=str,
                engine='python',
                skip_blank_lines=True,
                on_bad_lines='skip',
            )
        except pd.errors.EmptyDataError:
            df = pd.DataFrame()
        except (pd.errors.ParserError, UnicodeDecodeError) as e:
            logger.error(f"데이터 로드 실패: {str(e)}")
            raise DataImportError(f"CSV 형식 오류: {data_path}", details=str(e)) from e

        draws = self.parse_frame(df, mode)
        self.import_draws(mode, draws)
        return draws

    def parse_frame(self, df: pd.DataFrame, mode: Union[GameMode, str]) -> List[Draw]:
        """
        데이터프레임을 Draw 목록으로 변환

        열 순서는 회차, 날짜, 번호들입니다. 형식이 잘못된 행은 건너뜁니다.

        Args:
            df: 헤더를 제외한 원본 데이터프레임
            mode: 게임 종류

        Returns:
            검증된 회차 목록 (파일 순서 유지)
        """
        ruleset = get_ruleset(mode)
        draws = []

        for idx, row in enumerate(df.itertuples(index=False)):
            cells = ['' if pd.isna(v) else str(v).strip() for v in row]
            while cells and cells[-1] == '':
                cells.pop()
            if len(cells) < MIN_COLUMNS:
                continue

            draw = self._parse_row(cells, idx, ruleset)
            if draw is not None:
                draws.append(draw)

        skipped = len(df) - len(draws)
        if skipped:
            logger.warning(f"잘못된 행 {skipped}개를 건너뛰었습니다 ({ruleset.name})")

        return draws

    def import_draws(self, mode: Union[GameMode, str], draws: List[Draw]) -> Statistics:
        """
        회차 목록 저장 및 통계 재계산

        Args:
            mode: 게임 종류
            draws: 오래된 것부터 정렬된 회차 목록

        Returns:
            새로 계산된 통계
        """
        mode = self._resolve_mode(mode)
        if not draws:
            raise DataImportError("오류: CSV 형식이 잘못되었거나 파일이 비어 있습니다.")

        self._draws[mode] = list(draws)
        self._statistics[mode] = compute_statistics(self._draws[mode], get_ruleset(mode))
        logger.info(f"데이터 가져오기 완료: {mode.value}, {len(draws)}회차")
        return self._statistics[mode]

    def has_data(self, mode: Union[GameMode, str]) -> bool:
        return self._resolve_mode(mode) in self._draws

    def get_draws(self, mode: Union[GameMode, str]) -> List[Draw]:
        """
        저장된 회차 목록 반환

        Args:
            mode: 게임 종류

        Returns:
            회차 목록 복사본
        """
        mode = self._resolve_mode(mode)
        if mode not in self._draws:
            raise DataImportError(f"{mode.value} 데이터가 없습니다. 먼저 가져오기를 실행하세요.")
        return list(self._draws[mode])

    def get_statistics(self, mode: Union[GameMode, str]) -> Statistics:
        """
        마지막 가져오기 기준 통계 반환

        Args:
            mode: 게임 종류

        Returns:
            통계 스냅샷
        """
        mode = self._resolve_mode(mode)
        if mode not in self._statistics:
            raise DataImportError(f"{mode.value} 데이터가 없습니다. 먼저 가져오기를 실행하세요.")
        return self._statistics[mode]

    def _resolve_mode(self, mode: Optional[Union[GameMode, str]]) -> GameMode:
        if mode is None:
            mode = self.data_config.default_mode
        if isinstance(mode, GameMode):
            return mode
        try:
            return GameMode[str(mode).strip().upper()]
        except KeyError as e:
            raise DataImportError(f"알 수 없는 게임 종류: {mode}") from e

    @staticmethod
    def _parse_row(cells: List[str], idx: int, ruleset: GameRuleset) -> Optional[Draw]:
        """
        행 하나를 Draw로 변환

        Args:
            cells: 문자열 셀 목록
            idx: 헤더 제외 행 인덱스
            ruleset: 게임 규칙

        Returns:
            Draw 또는 잘못된 행이면 None
        """
        numbers = [_to_int(c) for c in cells[2:] if c != '']
        if any(n is None for n in numbers):
            return None

        if len(set(numbers)) != len(numbers):
            return None
        if not ruleset.min_picks <= len(numbers) <= ruleset.max_picks:
            return None
        if any(n < 1 or n > ruleset.max_number for n in numbers):
            return None

        sequence_id = _to_int(cells[0])

        return Draw(
            sequence_id=sequence_id or idx + 1,
            date=cells[1] or DEFAULT_DATE,
            numbers=numbers,
        )


def _to_int(cell: str) -> Optional[int]:
    """정수 문자열('7', '7.0')만 변환, 소수부가 있거나 숫자가 아니면 None"""
    try:
        value = float(cell)
    except ValueError:
        return None
    if not value.is_integer():
        return None
    return int(value)
