# cli/ui - TUI 컴포넌트 (questionary, rich)
"""
TUI 컴포넌트 모듈

CLI 전용 UI 컴포넌트들 (대화형 선택, stderr 콘솔 출력)
"""

from .console import (
    SYMBOL_ERROR,
    SYMBOL_INFO,
    SYMBOL_WARNING,
    console,
    get_console,
    get_logger,
    print_error,
    print_info,
    print_warning,
)
from .picker import Picker, pick_option

__all__: list[str] = [
    "console",
    "get_console",
    "get_logger",
    # 표준 출력 심볼
    "SYMBOL_ERROR",
    "SYMBOL_WARNING",
    "SYMBOL_INFO",
    # 메시지 출력
    "print_error",
    "print_warning",
    "print_info",
    # 선택기
    "Picker",
    "pick_option",
]
