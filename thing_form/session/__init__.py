"""폼 세션 패키지."""

from .coercion import build_output_record, coerce_value
from .form_session import FormSession
from .state import (
    ConfirmControl,
    Control,
    FormState,
    InputControl,
    SelectControl,
    SessionStatus,
)

__all__ = [
    "build_output_record",
    "coerce_value",
    "FormSession",
    "ConfirmControl",
    "Control",
    "FormState",
    "InputControl",
    "SelectControl",
    "SessionStatus",
]
