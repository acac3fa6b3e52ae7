"""모델 패키지."""

from .field_spec import (
    BOOLEAN_OPTIONS,
    DEFAULT_FORM,
    ConfirmSpec,
    FieldSpec,
    FieldType,
    FormDefinition,
)
from .values import (
    ArrayValue,
    BoolValue,
    CoercionResult,
    FieldValue,
    IntegerValue,
    ObjectValue,
    OutputRecord,
    StringValue,
)

__all__ = [
    "BOOLEAN_OPTIONS",
    "DEFAULT_FORM",
    "ConfirmSpec",
    "FieldSpec",
    "FieldType",
    "FormDefinition",
    "ArrayValue",
    "BoolValue",
    "CoercionResult",
    "FieldValue",
    "IntegerValue",
    "ObjectValue",
    "OutputRecord",
    "StringValue",
]
