"""thing_form 전용 예외 계층."""

from __future__ import annotations


class ThingFormError(Exception):
    """thing_form 예외의 기본 클래스."""


class FieldValidationError(ThingFormError):
    """필드 입력값이 검증 규칙을 통과하지 못했을 때 발생합니다."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(message)
        self.key = key
        self.message = message


class CoercionError(ThingFormError):
    """원시 텍스트를 선언된 타입으로 변환하지 못했을 때 발생합니다."""

    def __init__(self, key: str, raw: str, type_name: str, reason: str) -> None:
        super().__init__(f"{key}: cannot coerce {raw!r} to {type_name} ({reason})")
        self.key = key
        self.raw = raw
        self.type_name = type_name
        self.reason = reason


class SessionClosedError(ThingFormError):
    """완료되었거나 중단된 세션을 변경하려 할 때 발생합니다."""


class SessionNotCompletedError(ThingFormError):
    """완료되지 않은 세션에서 결과 레코드를 요청할 때 발생합니다."""


class StartupError(ThingFormError):
    """진단 로그 파일을 열 수 없을 때 발생합니다."""
