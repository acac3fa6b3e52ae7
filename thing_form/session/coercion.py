"""원시 텍스트 답변을 선언된 타입의 값으로 변환합니다."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional, Union

from thing_form.errors import CoercionError
from thing_form.models import (
    ArrayValue,
    BoolValue,
    CoercionResult,
    FieldSpec,
    FieldType,
    IntegerValue,
    OutputRecord,
    StringValue,
)


LOGGER = logging.getLogger("thing_form.session.coercion")


def _fail(spec: FieldSpec, raw: str, reason: str) -> CoercionResult:
    return CoercionResult(error=CoercionError(spec.key, raw, spec.type.value, reason))


def coerce_value(spec: FieldSpec, raw: str) -> CoercionResult:
    """단일 답변을 변환합니다. 실패는 예외가 아니라 결과 값으로 돌려줍니다."""

    if spec.type is FieldType.STRING:
        return CoercionResult(value=StringValue(raw))
    if spec.type is FieldType.BOOLEAN:
        if raw == "true":
            return CoercionResult(value=BoolValue(True))
        if raw == "false":
            return CoercionResult(value=BoolValue(False))
        return _fail(spec, raw, 'expected "true" or "false"')
    if spec.type is FieldType.ARRAY:
        return CoercionResult(value=ArrayValue(tuple(raw.split(","))))
    if spec.type is FieldType.INTEGER:
        try:
            return CoercionResult(value=IntegerValue(int(raw, 10)))
        except ValueError:
            return _fail(spec, raw, "not a base-10 integer")
    if spec.type is FieldType.OBJECT:
        return _fail(spec, raw, "object fields are not supported")
    raise AssertionError(f"unhandled field type: {spec.type!r}")


def build_output_record(
    fields: Iterable[FieldSpec],
    answers: Mapping[str, str],
    *,
    strict: bool = False,
    logger: Optional[Union[logging.Logger, logging.LoggerAdapter]] = None,
) -> OutputRecord:
    """필드 선언 순서대로 결과 레코드를 만듭니다.

    Args:
        fields: 변환할 필드 정의 (확인 필드는 포함하지 않습니다)
        answers: 필드 키별 원시 텍스트 답변
        strict: True이면 첫 번째 변환 오류를 예외로 발생시킵니다.
            False이면 해당 키를 레코드에서 제외하고 ``rejected`` 에 기록합니다.

    Returns:
        OutputRecord
    """
    log = logger or LOGGER
    record = OutputRecord()

    for spec in fields:
        raw = answers.get(spec.key, "")
        log.debug("레코드 구성 | 키=%s | 값=%r", spec.key, raw)
        if raw == "":
            continue

        result = coerce_value(spec, raw)
        if result.ok:
            record.values[spec.key] = result.unwrap()
            continue

        if strict:
            raise result.error  # type: ignore[misc]
        log.warning("변환 실패로 필드 제외 | %s", result.error)
        record.rejected.append(result.error)  # type: ignore[arg-type]

    return record
