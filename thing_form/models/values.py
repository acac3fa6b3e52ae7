"""결과 레코드와 타입별 값 모델."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from thing_form.errors import CoercionError


@dataclass(frozen=True)
class StringValue:
    value: str

    def to_data(self) -> Any:
        return self.value


@dataclass(frozen=True)
class BoolValue:
    value: bool

    def to_data(self) -> Any:
        return self.value


@dataclass(frozen=True)
class IntegerValue:
    value: int

    def to_data(self) -> Any:
        return self.value


@dataclass(frozen=True)
class ArrayValue:
    value: tuple

    def to_data(self) -> Any:
        return list(self.value)


@dataclass(frozen=True)
class ObjectValue:
    """예약된 object 타입의 값.

    현재 object 필드 변환은 항상 CoercionError를 돌려주므로 coerce_value가
    이 값을 만드는 일은 없습니다. 변환이 구현될 때를 위해 형태만 고정해 둡니다.
    """

    value: Dict[str, Any]

    def to_data(self) -> Any:
        return dict(self.value)


FieldValue = Union[StringValue, BoolValue, IntegerValue, ArrayValue, ObjectValue]


@dataclass(frozen=True)
class CoercionResult:
    """값 또는 오류 중 하나만 담는 변환 결과."""

    value: Optional[FieldValue] = None
    error: Optional[CoercionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> FieldValue:
        if self.error is not None:
            raise self.error
        assert self.value is not None
        return self.value


@dataclass
class OutputRecord:
    """완료된 세션에서 만들어지는 타입이 지정된 레코드.

    ``values`` 는 필드 선언 순서를 유지하며, 변환에 실패한 필드는
    ``rejected`` 에만 남습니다.
    """

    values: Dict[str, FieldValue] = field(default_factory=dict)
    rejected: List[CoercionError] = field(default_factory=list)

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def to_data(self) -> Dict[str, Any]:
        """JSON 직렬화 가능한 사전을 반환합니다."""

        return {key: value.to_data() for key, value in self.values.items()}

    def to_json(self) -> str:
        return json.dumps(self.to_data(), indent=2, ensure_ascii=False)
