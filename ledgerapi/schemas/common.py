from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

CENTS = Decimal("0.01")


def to_money(value: Any) -> Decimal:
    """소수점 둘째 자리로 정규화한 Decimal 반환

    숫자가 아니거나 유한하지 않은 값은 ValueError 로 거부합니다.
    """
    if isinstance(value, float):
        value = str(value)
    try:
        amount = Decimal(value)
        if not amount.is_finite():
            raise ValueError(f"money amount must be finite: {value!r}")
        return amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    except (InvalidOperation, TypeError) as exc:
        raise ValueError(f"invalid money amount: {value!r}") from exc


# 내부적으로는 Decimal, JSON 응답에서는 숫자로 직렬화
Money = Annotated[
    Decimal,
    BeforeValidator(to_money),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class CamelModel(BaseModel):
    """Schemas exchanged over HTTP use camelCase keys on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
