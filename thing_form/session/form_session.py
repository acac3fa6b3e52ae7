"""폼 세션: 필드 순회, 검증, 결과 레코드 생성을 담당합니다."""

from __future__ import annotations

import uuid
from typing import Dict, List, Optional

from thing_form.errors import (
    FieldValidationError,
    SessionClosedError,
    SessionNotCompletedError,
)
from thing_form.models import DEFAULT_FORM, FormDefinition, OutputRecord
from thing_form.utils.logging import get_session_logger

from .coercion import build_output_record
from .state import (
    ConfirmControl,
    Control,
    FormState,
    SelectControl,
    SessionStatus,
    build_control,
)


class FormSession:
    """고정된 필드 목록을 따라 사용자를 안내하는 상태 기계.

    상태 전이는 ``IN_PROGRESS`` 에서 ``COMPLETED`` 또는 ``ABORTED`` 로만
    일어나며, 두 종료 상태에서는 어떤 변경도 허용되지 않습니다.
    """

    def __init__(
        self,
        definition: FormDefinition = DEFAULT_FORM,
        *,
        strict_coercion: bool = False,
        session_id: Optional[str] = None,
    ) -> None:
        self.definition = definition
        self.strict_coercion = strict_coercion
        self.session_id = session_id or uuid.uuid4().hex[:8]
        self.logger = get_session_logger("session", self.session_id)

        controls: List[Control] = [build_control(spec) for spec in definition.fields]
        controls.append(ConfirmControl(definition.confirm))
        self._state = FormState(controls=controls)
        self._record: Optional[OutputRecord] = None

        self.logger.debug(
            "세션 초기화 완료 | 필드=%s", [control.key for control in controls]
        )

    # ------------------------------------------------------------------
    # 조회
    # ------------------------------------------------------------------

    @property
    def status(self) -> SessionStatus:
        return self._state.status

    @property
    def index(self) -> int:
        return self._state.index

    @property
    def controls(self) -> List[Control]:
        return list(self._state.controls)

    @property
    def current(self) -> Optional[Control]:
        return self._state.current

    @property
    def answers(self) -> Dict[str, str]:
        return dict(self._state.answers)

    def errors(self) -> List[str]:
        return self._state.error_messages()

    def error_for(self, key: str) -> Optional[str]:
        return self._state.errors.get(key)

    # ------------------------------------------------------------------
    # 상태 전이
    # ------------------------------------------------------------------

    def _ensure_open(self) -> Control:
        control = self._state.current
        if control is None:
            raise SessionClosedError(f"session is {self.status.value}")
        return control

    def _validate(self, control: Control, raw: str) -> None:
        if isinstance(control, ConfirmControl):
            if raw != "true":
                raise FieldValidationError(control.key, control.spec.decline_message)
            return
        message = control.spec.validate_answer(raw)
        if message:
            raise FieldValidationError(control.key, message)

    def _store(self, control: Control, raw: str) -> bool:
        self._state.answers[control.key] = raw
        try:
            self._validate(control, raw)
        except FieldValidationError as exc:
            self._state.errors[control.key] = exc.message
            self.logger.debug("검증 실패 | 키=%s | 오류=%s", control.key, exc.message)
            return False
        self._state.errors.pop(control.key, None)
        return True

    def submit(self, raw: str) -> bool:
        """현재 필드에 원시 텍스트를 저장하고 검증합니다.

        유효하면 다음 필드로 이동하고 True를 반환합니다. 확인 필드에서는
        ``confirm`` 과 같이 동작합니다 (``"true"`` 만 수락으로 간주).
        """
        control = self._ensure_open()
        if isinstance(control, ConfirmControl):
            return self.confirm(raw == "true")
        if not self._store(control, raw):
            return False
        self._state.index += 1
        return True

    def select(self, option: str) -> bool:
        """선택 필드에서 옵션 하나를 고릅니다."""

        control = self._ensure_open()
        if not isinstance(control, SelectControl):
            raise TypeError(f"{control.key} is not a selector field")
        return self.submit(option)

    def confirm(self, accepted: bool) -> bool:
        """완료 확인에 답합니다. 모든 필드가 유효할 때만 세션이 완료됩니다."""

        control = self._ensure_open()
        if not isinstance(control, ConfirmControl):
            raise TypeError(f"{control.key} is not the confirmation field")
        if not self._store(control, "true" if accepted else "false"):
            return False

        # 폼 제출 시점의 전체 재검증
        for position, other in enumerate(self._state.controls[:-1]):
            if not self._store(other, self._state.answers[other.key]):
                self._state.index = position
                self.logger.info("제출 차단 | 첫 오류 필드=%s", other.key)
                return False

        self._state.status = SessionStatus.COMPLETED
        self.logger.info("세션 완료")
        return True

    def back(self) -> None:
        """검증 없이 이전 필드로 이동합니다."""

        self._ensure_open()
        if self._state.index > 0:
            self._state.index -= 1

    def quit(self) -> None:
        """세션을 중단하고 입력된 상태를 모두 버립니다."""

        self._ensure_open()
        self._state.status = SessionStatus.ABORTED
        self._state.answers.clear()
        self._state.errors.clear()
        self.logger.info("세션 중단")

    # ------------------------------------------------------------------
    # 결과
    # ------------------------------------------------------------------

    def output_record(self) -> OutputRecord:
        """완료된 세션의 결과 레코드를 반환합니다."""

        if self.status is not SessionStatus.COMPLETED:
            raise SessionNotCompletedError(f"session is {self.status.value}")
        if self._record is None:
            self._record = build_output_record(
                self.definition.fields,
                self._state.answers,
                strict=self.strict_coercion,
                logger=self.logger,
            )
        return self._record
