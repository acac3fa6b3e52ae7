from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from thing_form.errors import SessionClosedError, SessionNotCompletedError
from thing_form.models import DEFAULT_FORM, FieldSpec, FieldType, FormDefinition
from thing_form.session import (
    ConfirmControl,
    FormSession,
    InputControl,
    SelectControl,
    SessionStatus,
)


# ---------------------------------------------------------------------------
# Helper builders
# ---------------------------------------------------------------------------


def fill_default_form(session: FormSession, description: str = "") -> None:
    assert session.submit("abc")
    assert session.submit("Thing")
    assert session.submit(description)
    assert session.select("true")


# ---------------------------------------------------------------------------
# Field construction
# ---------------------------------------------------------------------------


def test_controls_follow_declaration_order_with_trailing_confirm():
    session = FormSession()

    keys = [control.key for control in session.controls]
    assert keys == ["key", "name", "description", "includeInSnippet", "done"]
    assert isinstance(session.controls[0], InputControl)
    assert isinstance(session.controls[3], SelectControl)
    assert session.controls[3].options == ("true", "false")
    assert isinstance(session.controls[4], ConfirmControl)


def test_new_session_starts_in_progress_with_empty_answers():
    session = FormSession()

    assert session.status is SessionStatus.IN_PROGRESS
    assert session.index == 0
    assert set(session.answers.values()) == {""}
    assert session.errors() == []


def test_definition_rejects_duplicate_keys():
    with pytest.raises(ValueError):
        FormDefinition(
            fields=(
                FieldSpec(key="key", required=True),
                FieldSpec(key="key"),
            )
        )


def test_definition_rejects_field_named_like_confirm():
    with pytest.raises(ValueError):
        FormDefinition(fields=(FieldSpec(key="done"),))


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "spec", [spec for spec in DEFAULT_FORM.fields if spec.required]
)
def test_required_fields_reject_empty_answer(spec):
    session = FormSession()
    while session.current.key != spec.key:
        assert session.submit("filled")

    assert session.submit("") is False

    assert session.status is SessionStatus.IN_PROGRESS
    assert session.current.key == spec.key
    assert f"{spec.key} is a required field" in session.errors()


def test_empty_key_blocks_advancement():
    session = FormSession()

    session.submit("")

    assert session.index == 0
    assert session.errors() == ["key is a required field"]


def test_error_clears_once_field_is_valid():
    session = FormSession()
    session.submit("")

    assert session.submit("abc")

    assert session.errors() == []
    assert session.current.key == "name"


def test_optional_description_accepts_empty_answer():
    session = FormSession()
    session.submit("abc")
    session.submit("Thing")

    assert session.submit("")
    assert session.current.key == "includeInSnippet"


def test_selector_rejects_unknown_option():
    session = FormSession()
    session.submit("abc")
    session.submit("Thing")
    session.submit("")

    assert session.select("maybe") is False
    assert session.current.key == "includeInSnippet"
    assert session.error_for("includeInSnippet") == (
        "includeInSnippet must be one of: true, false"
    )


def test_select_on_text_field_is_a_type_error():
    session = FormSession()

    with pytest.raises(TypeError):
        session.select("true")


def test_confirm_on_text_field_is_a_type_error():
    session = FormSession()

    with pytest.raises(TypeError):
        session.confirm(True)


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------


def test_back_moves_to_previous_field_without_validation():
    session = FormSession()
    session.submit("abc")

    session.back()

    assert session.current.key == "key"
    assert session.answers["key"] == "abc"
    assert session.errors() == []


def test_back_on_first_field_is_noop():
    session = FormSession()

    session.back()

    assert session.index == 0


def test_confirm_revalidates_fields_changed_after_leaving_them():
    session = FormSession()
    fill_default_form(session)

    # 공개 API는 필드를 떠날 때마다 검증하므로 잘못된 답변을 안고 확인 필드에
    # 도달할 수 없습니다. 제출 시점의 전체 재검증만 따로 확인하기 위해
    # 상태를 직접 설정합니다.
    session._state.answers["key"] = ""

    assert session.confirm(True) is False
    assert session.status is SessionStatus.IN_PROGRESS
    assert session.current.key == "key"
    assert "key is a required field" in session.errors()


def test_going_back_cannot_skip_past_an_emptied_required_field():
    session = FormSession()
    fill_default_form(session)
    for _ in range(4):
        session.back()

    assert session.submit("") is False

    assert session.current.key == "key"
    assert "key is a required field" in session.errors()
    with pytest.raises(TypeError):
        session.confirm(True)


# ---------------------------------------------------------------------------
# Completion and abort
# ---------------------------------------------------------------------------


def test_scenario_complete_form_produces_record_without_description():
    session = FormSession()
    fill_default_form(session)

    assert session.confirm(True)

    assert session.status is SessionStatus.COMPLETED
    assert session.output_record().to_data() == {
        "key": "abc",
        "name": "Thing",
        "includeInSnippet": True,
    }
    assert list(session.output_record().to_data()) == ["key", "name", "includeInSnippet"]


def test_scenario_declined_confirm_keeps_session_open():
    session = FormSession()
    fill_default_form(session, description="A thing")

    assert session.confirm(False) is False

    assert session.status is SessionStatus.IN_PROGRESS
    assert session.current.key == "done"
    assert session.errors() == ["Welp, finish up then"]
    with pytest.raises(SessionNotCompletedError):
        session.output_record()


def test_declined_confirm_can_be_affirmed_afterwards():
    session = FormSession()
    fill_default_form(session)
    session.confirm(False)

    assert session.confirm(True)
    assert session.errors() == []
    assert session.status is SessionStatus.COMPLETED


def test_submit_on_confirm_field_only_accepts_true_literal():
    session = FormSession()
    fill_default_form(session)

    assert session.submit("Yep") is False
    assert session.status is SessionStatus.IN_PROGRESS
    assert session.submit("true")
    assert session.status is SessionStatus.COMPLETED


def test_completed_session_is_read_only():
    session = FormSession()
    fill_default_form(session)
    session.confirm(True)

    with pytest.raises(SessionClosedError):
        session.submit("more")
    with pytest.raises(SessionClosedError):
        session.back()
    with pytest.raises(SessionClosedError):
        session.quit()
    assert session.current is None


def test_quit_discards_state_and_never_produces_record():
    session = FormSession()
    session.submit("abc")

    session.quit()

    assert session.status is SessionStatus.ABORTED
    assert session.answers == {}
    with pytest.raises(SessionNotCompletedError):
        session.output_record()
    with pytest.raises(SessionClosedError):
        session.submit("again")


def test_output_record_is_stable_across_calls():
    session = FormSession()
    fill_default_form(session, description="A thing")
    session.confirm(True)

    first = session.output_record().to_data()
    second = session.output_record().to_data()

    assert first == second
    assert first["description"] == "A thing"


def test_record_never_contains_empty_answers():
    definition = FormDefinition(
        fields=(
            FieldSpec(key="key", required=True),
            FieldSpec(key="tags", type=FieldType.ARRAY),
            FieldSpec(key="count", type=FieldType.INTEGER),
            FieldSpec(key="flag", type=FieldType.BOOLEAN),
        )
    )
    session = FormSession(definition)
    session.submit("abc")
    session.submit("")
    session.submit("")
    session.select("")
    session.confirm(True)

    record = session.output_record()
    assert record.to_data() == {"key": "abc"}
    for key, raw in session.answers.items():
        if raw == "":
            assert key not in record
