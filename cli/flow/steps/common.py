# cli/flow/steps/common.py
"""
Step 공통 처리 - 목록 조회 후 선택

두 Step(스택, 리소스)은 같은 순서로 동작합니다:
    1. 목록 조회 (실패 시 FetchFailedError)
    2. 블록 인코딩 (비어 있으면 NoOptionsError, 선택기 호출 안 함)
    3. 선택기 호출 (취소 시 SelectionAbortedError)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from cli.ui.console import console
from cli.ui.picker import Picker
from core.exceptions import CfnavError, FetchFailedError, NoOptionsError, SelectionAbortedError

T = TypeVar("T")


def fetch_options(lister: Callable[[], list[T]], operation: str, status: str) -> list[T]:
    """목록 조회

    CfnavError는 그대로 전파하고, 그 외 예외는 FetchFailedError로 감쌉니다.
    """
    try:
        with console.status(status):
            return lister()
    except CfnavError:
        raise
    except Exception as e:
        raise FetchFailedError(
            service="inventory",
            operation=operation,
            error_message=str(e),
            cause=e,
        ) from e


def pick_line(block: str, picker: Picker, title: str, step_name: str) -> str:
    """인코딩된 블록에서 한 줄 선택

    Raises:
        NoOptionsError: 블록이 비어 있는 경우
        SelectionAbortedError: 사용자가 취소했거나 선택기를 시작할 수 없는 경우
    """
    if not block:
        raise NoOptionsError(step_name)

    line = picker(block, title)
    if line is None:
        raise SelectionAbortedError(step_name)
    return line
