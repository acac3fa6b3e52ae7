"""
터미널 대화형 폼.

고정된 필드 목록(key, name, description, includeInSnippet)을 순서대로 입력받아
검증하고, 완료되면 타입이 지정된 레코드를 JSON으로 출력합니다.
"""

from .models import DEFAULT_FORM, FieldSpec, FieldType, FormDefinition, OutputRecord
from .session import FormSession, SessionStatus

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_FORM",
    "FieldSpec",
    "FieldType",
    "FormDefinition",
    "OutputRecord",
    "FormSession",
    "SessionStatus",
]
