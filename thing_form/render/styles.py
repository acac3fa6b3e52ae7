"""터미널 스타일 정의 (click.style 기반)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict

import click

RED = (254, 95, 134)
INDIGO = (117, 113, 249)
GREEN = (2, 191, 135)
HIGHLIGHT = 212
MUTED = 240

StyleFn = Callable[[str], str]


def _style(**kwargs: Any) -> StyleFn:
    def apply(text: str) -> str:
        return click.style(text, **kwargs)

    return apply


def _plain(text: str) -> str:
    return text


@dataclass(frozen=True)
class Styles:
    """화면 요소별 스타일 함수 모음."""

    header_text: StyleFn
    error_header_text: StyleFn
    header_fill: StyleFn
    error_header_fill: StyleFn
    status_border: StyleFn
    status_header: StyleFn
    highlight: StyleFn
    help: StyleFn

    @classmethod
    def default(cls) -> "Styles":
        return cls(
            header_text=_style(fg=INDIGO, bold=True),
            error_header_text=_style(fg=RED, bold=True),
            header_fill=_style(fg=INDIGO),
            error_header_fill=_style(fg=RED),
            status_border=_style(fg=INDIGO),
            status_header=_style(fg=GREEN, bold=True),
            highlight=_style(fg=HIGHLIGHT),
            help=_style(fg=MUTED),
        )

    @classmethod
    def plain(cls) -> "Styles":
        """색상 없이 렌더링할 때 사용하는 스타일 (테스트, 파이프 출력)."""

        fields: Dict[str, StyleFn] = {name: _plain for name in cls.__dataclass_fields__}
        return cls(**fields)


def visible_width(text: str) -> int:
    """ANSI 스타일 코드를 제외한 표시 폭을 반환합니다."""

    return len(click.unstyle(text))
