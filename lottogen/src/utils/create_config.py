"""
YAML 설정 파일 생성 스크립트
"""

import sys
from pathlib import Path
from typing import Any, Dict, Union

import yaml

# 스크립트로 직접 실행할 때 프로젝트 루트를 Python 경로에 추가
if not __package__:
    project_root = str(Path(__file__).resolve().parents[3])
    if project_root not in sys.path:
        sys.path.append(project_root)

from lottogen.src.utils.config import DEFAULT_MAX_ATTEMPTS

# 설정 파일 기본 경로
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / 'config' / 'generator_config.yaml'


def build_default_config() -> Dict[str, Any]:
    """기본 설정 딕셔너리 생성"""
    return {
        'generator': {
            'max_attempts': DEFAULT_MAX_ATTEMPTS,
            'seed': None,
            'max_games': 100
        },
        'data': {
            'historical_data_path': 'lottogen/data/raw/megasena.csv',
            'default_mode': 'MEGASENA',
            'csv_separator': None
        },
        'logging': {
            'level': 'INFO',
            'log_dir': 'logs',
            'console': True
        }
    }


def write_default_config(config_path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> Path:
    """
    기본 설정을 YAML 파일로 저장

    Args:
        config_path: 저장할 경로

    Returns:
        저장된 경로
    """
    config_path = Path(config_path)

    # 디렉토리 생성
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w', encoding='utf-8') as f:
        yaml.safe_dump(build_default_config(), f, default_flow_style=False, allow_unicode=True, sort_keys=False)

    return config_path


if __name__ == '__main__':
    target = write_default_config(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_CONFIG_PATH)
    print(f"설정 파일이 생성되었습니다: {target}")
