"""
cli/ui/picker.py - questionary 기반 단일 항목 선택기

개행 구분 블록을 받아 한 줄을 선택하고, 선택한 라인을 그대로 반환합니다.
취소(Ctrl-C)하거나 선택 화면을 시작할 수 없으면 None을 반환합니다.

프롬프트는 stderr에 그려지므로 `$(cfnav)` 같은 명령 치환에서도
stdout에는 결과만 남습니다.
"""

from __future__ import annotations

import logging
import sys
from typing import Protocol

import questionary
from prompt_toolkit.output import create_output

from cli.i18n import t

logger = logging.getLogger(__name__)


class Picker(Protocol):
    """선택 플로우가 사용하는 선택기 인터페이스"""

    def __call__(self, block: str, title: str) -> str | None: ...


def pick_option(block: str, title: str) -> str | None:
    """블록의 라인 중 하나를 대화형으로 선택

    Args:
        block: 개행 구분 항목 블록 (비어 있지 않아야 함)
        title: 프롬프트 제목

    Returns:
        선택한 라인 (입력 그대로), 취소 시 None
    """
    choices = block.split("\n")

    question = questionary.select(
        title,
        choices=choices,
        use_search_filter=True,
        use_jk_keys=False,
        instruction=t("flow.picker_instruction"),
        output=create_output(stdout=sys.stderr),
    )

    try:
        return question.unsafe_ask()
    except KeyboardInterrupt:
        logger.debug("선택 취소: %s", title)
        return None
    except (OSError, EOFError) as e:
        # TTY가 없는 환경 등
        logger.warning(t("flow.picker_unavailable", error=e))
        return None
