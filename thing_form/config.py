"""thing_form의 설정 관리."""

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# 환경 변수 로드
load_dotenv()


def _env_str(name: str, default: str):
    return lambda: os.getenv(name, default)


def _env_int(name: str, default: str):
    # 파싱은 Config 생성 시점에 일어나므로 잘못된 값은 from_env()에서 ValueError가 됩니다.
    return lambda: int(os.getenv(name, default))


def _env_bool(name: str, default: str):
    return lambda: os.getenv(name, default).lower() == "true"


class Config(BaseModel):
    """thing_form 실행 설정."""

    # 로그 설정
    log_file: str = Field(default_factory=_env_str("THING_FORM_LOG_FILE", "debug.log"))
    log_level: str = Field(default_factory=_env_str("THING_FORM_LOG_LEVEL", "DEBUG"))

    # 화면 설정
    max_width: int = Field(default_factory=_env_int("THING_FORM_MAX_WIDTH", "80"))
    form_width: int = Field(default_factory=_env_int("THING_FORM_FORM_WIDTH", "45"))
    title: str = Field(
        default_factory=_env_str("THING_FORM_TITLE", "{Create} a {thing}")
    )
    alt_screen: bool = Field(default_factory=_env_bool("THING_FORM_ALT_SCREEN", "true"))

    # 변환 설정
    strict_coercion: bool = Field(
        default_factory=_env_bool("THING_FORM_STRICT_COERCION", "false")
    )

    @classmethod
    def from_env(cls) -> "Config":
        """환경 변수로부터 설정 생성."""
        return cls()

    def validate(self) -> bool:
        """필수 설정 검증."""
        if self.max_width <= 0 or self.form_width <= 0:
            raise ValueError("THING_FORM_MAX_WIDTH and THING_FORM_FORM_WIDTH must be positive")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        if not self.log_file:
            raise ValueError("THING_FORM_LOG_FILE is required")
        return True
