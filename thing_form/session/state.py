from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union

from thing_form.models import BOOLEAN_OPTIONS, ConfirmSpec, FieldSpec


class SessionStatus(Enum):
    """폼 세션 상태."""

    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ABORTED = "aborted"


@dataclass(frozen=True)
class InputControl:
    """자유 텍스트 입력 컨트롤."""

    spec: FieldSpec

    @property
    def key(self) -> str:
        return self.spec.key


@dataclass(frozen=True)
class SelectControl:
    """두 개의 리터럴 옵션 중 하나를 고르는 선택 컨트롤."""

    spec: FieldSpec
    options: tuple = BOOLEAN_OPTIONS

    @property
    def key(self) -> str:
        return self.spec.key

    @property
    def default(self) -> str:
        return self.options[0]


@dataclass(frozen=True)
class ConfirmControl:
    """완료 여부를 묻는 예/아니오 컨트롤."""

    spec: ConfirmSpec

    @property
    def key(self) -> str:
        return self.spec.key


Control = Union[InputControl, SelectControl, ConfirmControl]


def build_control(spec: FieldSpec) -> Control:
    """필드 정의에 맞는 입력 컨트롤을 만듭니다."""

    if spec.is_selector:
        return SelectControl(spec)
    return InputControl(spec)


@dataclass
class FormState:
    """세션 하나의 변경 가능한 상태를 보관합니다."""

    controls: List[Control]
    index: int = 0
    status: SessionStatus = SessionStatus.IN_PROGRESS
    answers: Dict[str, str] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for control in self.controls:
            self.answers.setdefault(control.key, "")

    @property
    def current(self) -> Optional[Control]:
        if self.status is not SessionStatus.IN_PROGRESS:
            return None
        return self.controls[self.index]

    def error_messages(self) -> List[str]:
        """필드 순서대로 현재 오류 메시지를 반환합니다."""

        return [
            self.errors[control.key]
            for control in self.controls
            if control.key in self.errors
        ]
