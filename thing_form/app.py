"""터미널 입력 루프: 화면 그리기, 한 줄 읽기, 세션에 전달하기를 반복합니다."""

from __future__ import annotations

import shutil
import sys
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

import click

from thing_form.config import Config
from thing_form.render import Styles, ViewOptions, render_view
from thing_form.session import (
    ConfirmControl,
    FormSession,
    SelectControl,
    SessionStatus,
)
from thing_form.utils.logging import get_session_logger

ENTER_ALT_SCREEN = "\x1b[?1049h"
EXIT_ALT_SCREEN = "\x1b[?1049l"

QUIT_COMMAND = ":q"
BACK_COMMAND = ":b"

Reader = Callable[[str, Optional[str]], str]
Writer = Callable[[str], None]


def prompt_line(text: str, default: Optional[str]) -> str:
    """click.prompt로 한 줄을 읽습니다. EOF와 Ctrl-C는 click.Abort로 전달됩니다."""

    return click.prompt(
        text,
        default=default,
        show_default=bool(default),
        prompt_suffix=" ",
    )


def echo_screen(text: str) -> None:
    click.echo(text)


def parse_confirm(answer: str, affirmative: str, negative: str) -> bool:
    """확인 필드 답변을 해석합니다. 해석할 수 없는 답변은 거절로 취급합니다."""

    normalized = answer.strip().lower()
    if normalized == affirmative.lower():
        return True
    if normalized == negative.lower():
        return False
    try:
        return click.BOOL.convert(normalized, None, None)
    except click.BadParameter:
        return False


class FormApp:
    """FormSession을 터미널에서 실행하는 얇은 루프."""

    def __init__(
        self,
        session: FormSession,
        config: Optional[Config] = None,
        *,
        reader: Optional[Reader] = None,
        writer: Optional[Writer] = None,
        styles: Optional[Styles] = None,
        terminal_width: Optional[int] = None,
    ) -> None:
        self.session = session
        self.config = config or Config.from_env()
        self._interactive = reader is None and writer is None
        self.reader = reader or prompt_line
        self.writer = writer or echo_screen
        self.styles = styles or Styles.default()
        width = terminal_width or shutil.get_terminal_size((self.config.max_width, 24)).columns
        self.options = ViewOptions.from_config(self.config, width)
        self.logger = get_session_logger("app", session.session_id)

    @contextmanager
    def _screen(self) -> Iterator[None]:
        use_alt = (
            self._interactive
            and self.config.alt_screen
            and sys.stdout.isatty()
        )
        if use_alt:
            click.echo(ENTER_ALT_SCREEN, nl=False)
        try:
            yield
        finally:
            if use_alt:
                click.echo(EXIT_ALT_SCREEN, nl=False)

    def _draw(self) -> None:
        if self._interactive:
            click.clear()
        self.writer(render_view(self.session, self.options, self.styles))

    def _prompt(self) -> tuple:
        control = self.session.current
        answer = self.session.answers.get(control.key, "")
        if isinstance(control, ConfirmControl):
            spec = control.spec
            return f"{spec.title} ({spec.affirmative}/{spec.negative})", None
        if isinstance(control, SelectControl):
            return (
                f"{control.spec.label} ({'/'.join(control.options)})",
                answer or control.default,
            )
        # 빈 줄은 항상 빈 답변으로 제출되므로 이전 값은 라벨에만 보여줍니다.
        if answer:
            return f"{control.spec.label} (was: {answer})", ""
        return control.spec.label, ""

    def dispatch(self, line: str) -> None:
        """입력 한 줄을 세션 동작으로 변환합니다."""

        command = line.strip()
        control = self.session.current
        self.logger.debug("입력 처리 | 필드=%s | 입력=%r", control.key, line)

        if command == QUIT_COMMAND:
            self.session.quit()
        elif command == BACK_COMMAND:
            self.session.back()
        elif isinstance(control, ConfirmControl):
            spec = control.spec
            self.session.confirm(parse_confirm(command, spec.affirmative, spec.negative))
        elif isinstance(control, SelectControl):
            self.session.select(command)
        else:
            self.session.submit(line)

    def run(self) -> SessionStatus:
        """세션이 완료되거나 중단될 때까지 루프를 실행합니다."""

        self.logger.info("폼 루프 시작")
        with self._screen():
            while self.session.status is SessionStatus.IN_PROGRESS:
                self._draw()
                text, default = self._prompt()
                try:
                    line = self.reader(text, default)
                except (click.Abort, EOFError, KeyboardInterrupt):
                    self.session.quit()
                    break
                self.dispatch(line)

        # 대체 화면을 벗어난 뒤 그려야 결과가 터미널에 남습니다.
        if self.session.status is SessionStatus.COMPLETED:
            self.writer(render_view(self.session, self.options, self.styles))

        self.logger.info("폼 루프 종료 | 상태=%s", self.session.status.value)
        return self.session.status
