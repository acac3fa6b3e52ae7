"""
thing_form 대화형 폼의 명령줄 인터페이스.
"""

import sys

import click

from .app import FormApp
from .config import Config
from .errors import StartupError
from .models import DEFAULT_FORM
from .session import FormSession
from .utils.logging import log_to_file


@click.command()
def main():
    """
    터미널에서 새 항목(key, name, description, includeInSnippet)을 입력받아
    완료 시 JSON 레코드로 출력합니다.
    """
    try:
        config = Config.from_env()
        config.validate()
    except Exception as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    try:
        with log_to_file(config.log_file, config.log_level):
            session = FormSession(DEFAULT_FORM, strict_coercion=config.strict_coercion)
            try:
                FormApp(session, config).run()
            except Exception as e:
                click.echo(f"Oh no: {e}", err=True)
                sys.exit(1)
    except StartupError as e:
        click.echo(str(e), err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
