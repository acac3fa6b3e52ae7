"""세션 상태로부터 화면 문자열을 만드는 순수 함수들."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from thing_form.config import Config
from thing_form.session import (
    ConfirmControl,
    Control,
    FormSession,
    SelectControl,
    SessionStatus,
)

from .styles import Styles, visible_width

HELP_TEXT = "enter submit • :b back • :q quit"
ERROR_SEPARATOR = "; "

# Base 스타일의 좌우 여백 (왼쪽 1, 오른쪽 4)
BASE_PAD_LEFT = 1
BASE_PAD_RIGHT = 4
STATUS_WIDTH = 48


@dataclass(frozen=True)
class ViewOptions:
    """렌더링에 필요한 화면 설정."""

    width: int = 80
    form_width: int = 45
    title: str = "{Create} a {thing}"

    @classmethod
    def from_config(cls, config: Config, terminal_width: int) -> "ViewOptions":
        width = min(terminal_width, config.max_width) - (BASE_PAD_LEFT + BASE_PAD_RIGHT)
        return cls(width=max(width, 1), form_width=config.form_width, title=config.title)


def boundary_view(text: str, width: int, text_style, fill_style) -> str:
    """텍스트를 왼쪽에 두고 남은 폭을 ``/`` 로 채운 경계선을 만듭니다."""

    label = text_style(f"  {text} ") if text else ""
    remaining = width - visible_width(label)
    return label + (fill_style("/" * remaining) if remaining > 0 else "")


def _control_line(control: Control, value: str, active: bool, styles: Styles) -> str:
    marker = styles.highlight("┃ ") if active else "  "

    if isinstance(control, ConfirmControl):
        spec = control.spec
        title = styles.highlight(spec.title) if active else spec.title
        if active:
            buttons = f"[ {spec.affirmative} ]  [ {spec.negative} ]"
        elif value == "true":
            buttons = spec.affirmative
        else:
            buttons = ""
        return f"{marker}{title} {buttons}".rstrip()

    label = f"{control.spec.label} "
    if active:
        label = styles.highlight(label)

    if isinstance(control, SelectControl) and active:
        chosen = value or control.default
        options = [
            styles.highlight(f"> {option}") if option == chosen else f"  {option}"
            for option in control.options
        ]
        return f"{marker}{label}{' '.join(options)}"

    return f"{marker}{label}{value}"


def form_view(session: FormSession, options: ViewOptions, styles: Styles) -> str:
    """필드 목록을 그립니다."""

    answers = session.answers
    lines: List[str] = []
    for position, control in enumerate(session.controls):
        value = answers.get(control.key, "")
        if not isinstance(control, ConfirmControl):
            limit = options.form_width - len(control.spec.label) - 3
            if 0 < limit < len(value):
                value = value[: limit - 1] + "…"
        lines.append(_control_line(control, value, position == session.index, styles))
    return "\n".join(lines)


def status_view(session: FormSession, styles: Styles) -> str:
    """완료 시 결과 레코드를 둥근 테두리 패널 안에 그립니다."""

    body = session.output_record().to_json().splitlines()
    inner = max([STATUS_WIDTH - 4] + [visible_width(line) for line in body])
    border = styles.status_border

    rows = [border("╭" + "─" * (inner + 4) + "╮")]
    padding_row = border("│") + " " * (inner + 4) + border("│")
    rows.append(padding_row)
    for line in body:
        fill = " " * (inner - visible_width(line))
        rows.append(border("│") + f"  {line}{fill}  " + border("│"))
    rows.append(padding_row)
    rows.append(border("╰" + "─" * (inner + 4) + "╯"))
    return "\n".join(" " + row for row in rows) + "\n\n"


def render_view(session: FormSession, options: ViewOptions, styles: Styles) -> str:
    """세션 상태에 해당하는 전체 화면을 반환합니다."""

    if session.status is SessionStatus.COMPLETED:
        return status_view(session, styles)
    if session.status is SessionStatus.ABORTED:
        return ""

    errors = session.errors()
    if errors:
        header = boundary_view(
            ERROR_SEPARATOR.join(errors),
            options.width,
            styles.error_header_text,
            styles.error_header_fill,
        )
        footer = boundary_view(
            "", options.width, styles.error_header_text, styles.error_header_fill
        )
    else:
        header = boundary_view(
            options.title, options.width, styles.header_text, styles.header_fill
        )
        footer = boundary_view(HELP_TEXT, options.width, styles.help, styles.header_fill)

    body = "\n" + form_view(session, options, styles) + "\n"
    screen = header + "\n" + body + "\n\n" + footer
    pad = " " * BASE_PAD_LEFT
    return "\n" + "\n".join(pad + line if line else line for line in screen.split("\n"))
