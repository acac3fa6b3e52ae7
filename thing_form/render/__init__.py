"""세션 상태를 문자열 화면으로 그리는 렌더링 패키지."""

from .styles import Styles, visible_width
from .view import ViewOptions, render_view

__all__ = ["Styles", "visible_width", "ViewOptions", "render_view"]
