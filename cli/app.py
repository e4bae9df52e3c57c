"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.
옵션 없이 실행하면 즉시 스택 선택부터 시작합니다.

명령어 구조:
    cfnav                   # 스택 → 리소스 선택 후 콘솔 경로 출력
    cfnav -p dev -r us-east-1
    cfnav --url             # 전체 콘솔 URL 출력
    cfnav --open            # 브라우저로 열기
    cfnav --version

출력 규칙:
    - stdout: 콘솔 경로(또는 URL)만, 후행 개행 없음
    - stderr: 안내, 선택 화면, 에러 메시지

Usage:
    $ open "https://console.aws.amazon.com/$(cfnav)"
"""

import logging
import webbrowser

import click
from botocore.exceptions import BotoCoreError

from cli.i18n import SUPPORTED_LANGS, set_lang, t
from cli.ui.console import get_logger, print_error, print_info, print_warning
from core.config import get_default_region, get_version, settings
from core.exceptions import CfnavError, SelectionAbortedError, format_error_for_user

# WARNING 레벨로 설정하여 INFO 로그가 선택 화면에 섞이지 않도록 함
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

VERSION = get_version()

EXIT_ERROR = 1
EXIT_ABORTED = 130

# --debug 시 DEBUG로 낮출 logger
APP_LOGGERS = ("cli", "core")


def _enable_debug_logging() -> None:
    for name in APP_LOGGERS:
        get_logger(name).setLevel(logging.DEBUG)


@click.command(context_settings={"help_option_names": ["-h", "--help"]}, help=t("cli.help_intro"))
@click.option("-p", "--profile", "profile", default=None, help=t("cli.help_profile"))
@click.option("-r", "--region", "region", default=None, help=t("cli.help_region"))
@click.option("--url", "as_url", is_flag=True, help=t("cli.help_url"))
@click.option("--open", "open_browser", is_flag=True, help=t("cli.help_open"))
@click.option("--lang", type=click.Choice(SUPPORTED_LANGS), default=None, help=t("cli.help_lang"))
@click.option("--debug", is_flag=True, help=t("cli.help_debug"))
@click.version_option(version=VERSION, prog_name="cfnav")
def cli(
    profile: str | None,
    region: str | None,
    as_url: bool,
    open_browser: bool,
    lang: str | None,
    debug: bool,
) -> None:
    """스택/리소스를 선택하고 콘솔 경로를 출력"""
    from cli.flow import create_flow_runner
    from core.aws import create_session
    from core.stacks import build_console_url
    from core.stacks.inventory import CloudFormationInventory

    set_lang(lang or settings.lang)
    if debug:
        _enable_debug_logging()

    try:
        session = create_session(profile or settings.profile, region)
        region_name = session.region_name or get_default_region()
        runner = create_flow_runner(CloudFormationInventory(session, region_name=region_name), region=region_name)
        path = runner.run()
    except SelectionAbortedError:
        print_warning(t("cli.aborted"))
        raise SystemExit(EXIT_ABORTED) from None
    except CfnavError as e:
        print_error(format_error_for_user(e))
        raise SystemExit(EXIT_ERROR) from None
    except BotoCoreError as e:
        # 프로파일 없음, 자격 증명 없음 등
        print_error(str(e))
        raise SystemExit(EXIT_ERROR) from None

    url = build_console_url(path, region_name)
    click.echo(url if as_url else path, nl=False)

    if open_browser:
        print_info(t("cli.opening_browser", url=url))
        webbrowser.open(url)


if __name__ == "__main__":
    cli()
