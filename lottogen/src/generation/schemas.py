"""
전략/필터 매개변수 스키마

화면이나 설정 파일에서 온 매개변수 딕셔너리(minDelay, q1Min 등 기존 키)를
marshmallow로 검증해 타입이 있는 제약 객체로 변환합니다.
숫자가 아니거나 비어 있는 경계값은 오류 대신 제약 없음(None)으로 읽습니다.
"""

import math
from typing import Any, Dict, Iterable, List

from marshmallow import (
    EXCLUDE,
    Schema,
    ValidationError,
    fields,
    post_load,
    pre_load,
    validate,
)

from lottogen.src.generation.constraints import (
    EvenOddParams,
    FilterConstraint,
    FilterType,
    LatenessParams,
    MultiplesParams,
    PrimesParams,
    QuadrantBounds,
    QuadrantsParams,
    StrategyConstraint,
    StrategyType,
    SumTotalParams,
)
from lottogen.src.utils.errors import ConstraintConfigError
from shared.error_handler import get_logger

logger = get_logger(__name__)


class OptionalBound(fields.Field):
    """비어 있거나 NaN, 숫자가 아닌 입력을 None으로 읽는 정수 경계 필드"""

    def __init__(self, **kwargs):
        kwargs.setdefault("load_default", None)
        kwargs.setdefault("allow_none", True)
        super().__init__(**kwargs)

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, bool):
            return None
        try:
            number = float(value)
        except (TypeError, ValueError):
            return None
        if math.isnan(number) or math.isinf(number):
            return None
        return int(number)


class _ParamsSchema(Schema):
    class Meta:
        unknown = EXCLUDE


class LatenessParamsSchema(_ParamsSchema):
    required_late_count = fields.Integer(data_key="count", load_default=0, validate=validate.Range(min=0))
    min_delay = fields.Integer(data_key="minDelay", load_default=0, validate=validate.Range(min=0))

    @post_load
    def _make(self, data, **kwargs):
        return LatenessParams(**data)


class EvenOddParamsSchema(_ParamsSchema):
    even = fields.Integer(load_default=0, validate=validate.Range(min=0))
    odd = fields.Integer(load_default=0, validate=validate.Range(min=0))

    @post_load
    def _make(self, data, **kwargs):
        return EvenOddParams(**data)


class PrimesParamsSchema(_ParamsSchema):
    min = OptionalBound()
    max = OptionalBound()

    @post_load
    def _make(self, data, **kwargs):
        return PrimesParams(**data)


class MultiplesParamsSchema(_ParamsSchema):
    targets = fields.Dict(
        keys=fields.Integer(validate=validate.Range(min=1)),
        values=fields.Integer(validate=validate.Range(min=0)),
        load_default=dict,
    )

    @pre_load
    def _wrap_flat(self, data, **kwargs):
        # {"3": 2, "5": 1} 형태의 평면 매핑도 허용
        if isinstance(data, dict) and "targets" not in data:
            return {"targets": data}
        return data

    @post_load
    def _make(self, data, **kwargs):
        return MultiplesParams(targets=data["targets"])


class SumTotalParamsSchema(_ParamsSchema):
    min = OptionalBound()
    max = OptionalBound()

    @post_load
    def _make(self, data, **kwargs):
        return SumTotalParams(**data)


class QuadrantsParamsSchema(_ParamsSchema):
    q1_min = OptionalBound(data_key="q1Min")
    q1_max = OptionalBound(data_key="q1Max")
    q2_min = OptionalBound(data_key="q2Min")
    q2_max = OptionalBound(data_key="q2Max")
    q3_min = OptionalBound(data_key="q3Min")
    q3_max = OptionalBound(data_key="q3Max")
    q4_min = OptionalBound(data_key="q4Min")
    q4_max = OptionalBound(data_key="q4Max")
    zero_max_unbounded = fields.Boolean(data_key="zeroMaxUnbounded", load_default=True)

    @post_load
    def _make(self, data, **kwargs):
        bounds = tuple(
            QuadrantBounds(min=data[f"q{i}_min"], max=data[f"q{i}_max"])
            for i in range(1, 5)
        )
        return QuadrantsParams(bounds=bounds, zero_max_unbounded=data["zero_max_unbounded"])


STRATEGY_PARAM_SCHEMAS = {
    StrategyType.LATENESS: LatenessParamsSchema,
    StrategyType.EVEN_ODD: EvenOddParamsSchema,
    StrategyType.PRIMES: PrimesParamsSchema,
    StrategyType.MULTIPLES: MultiplesParamsSchema,
}

FILTER_PARAM_SCHEMAS = {
    FilterType.QUADRANTS: QuadrantsParamsSchema,
    FilterType.SUM_TOTAL: SumTotalParamsSchema,
}


def _resolve_type(enum_cls, raw: str):
    """열거형 이름('EVEN_ODD') 또는 기존 표시 이름을 허용"""
    key = str(raw).strip()
    if key.upper() in enum_cls.__members__:
        return enum_cls[key.upper()]
    for member in enum_cls:
        if member.value == key:
            return member
    choices = ", ".join(enum_cls.__members__)
    raise ValidationError({"type": [f"알 수 없는 종류: {raw!r} (허용: {choices})"]})


def _load_params(schema_cls, params: Dict[str, Any]):
    try:
        return schema_cls().load(params)
    except ValidationError as exc:
        raise ValidationError({"params": exc.messages}) from exc


class StrategyConfigSchema(Schema):
    type = fields.String(required=True)
    params = fields.Dict(load_default=dict)

    @post_load
    def _make(self, data, **kwargs):
        strategy_type = _resolve_type(StrategyType, data["type"])
        params = _load_params(STRATEGY_PARAM_SCHEMAS[strategy_type], data["params"])
        return StrategyConstraint(strategy_type, params)


class FilterConfigSchema(Schema):
    type = fields.String(required=True)
    params = fields.Dict(load_default=dict)

    @post_load
    def _make(self, data, **kwargs):
        filter_type = _resolve_type(FilterType, data["type"])
        params = _load_params(FILTER_PARAM_SCHEMAS[filter_type], data["params"])
        return FilterConstraint(filter_type, params)


def load_strategies(items: Iterable[Dict[str, Any]]) -> List[StrategyConstraint]:
    """
    전략 설정 목록 로드

    Args:
        items: {"type": ..., "params": {...}} 딕셔너리 목록

    Returns:
        전략 제약 목록
    """
    try:
        return StrategyConfigSchema(many=True).load(list(items))
    except ValidationError as exc:
        logger.error(f"전략 설정 오류: {exc.messages}")
        raise ConstraintConfigError("전략 설정 오류", details=exc.messages) from exc


def load_filters(items: Iterable[Dict[str, Any]]) -> List[FilterConstraint]:
    """필터 설정 목록 로드 (형식은 load_strategies와 동일)"""
    try:
        return FilterConfigSchema(many=True).load(list(items))
    except ValidationError as exc:
        logger.error(f"필터 설정 오류: {exc.messages}")
        raise ConstraintConfigError("필터 설정 오류", details=exc.messages) from exc
