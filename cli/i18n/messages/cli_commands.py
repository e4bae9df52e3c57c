"""
cli/i18n/messages/cli_commands.py - CLI Command Messages

Contains translations for the Click command, help text, and result output.
"""

from __future__ import annotations

CLI_MESSAGES = {
    # =========================================================================
    # Help Text
    # =========================================================================
    "help_intro": {
        "ko": "CloudFormation 스택과 리소스를 대화형으로 선택하고\nAWS 콘솔 경로를 출력합니다.",
        "en": "Interactively pick a CloudFormation stack and resource,\nthen print its AWS console path.",
    },
    "help_profile": {
        "ko": "AWS 프로파일",
        "en": "AWS profile",
    },
    "help_region": {
        "ko": "리전 (기본: 프로파일/환경 변수)",
        "en": "Region (default: profile/environment)",
    },
    "help_url": {
        "ko": "상대 경로 대신 전체 콘솔 URL 출력",
        "en": "Print the full console URL instead of the path",
    },
    "help_open": {
        "ko": "콘솔 URL을 브라우저로 열기",
        "en": "Open the console URL in a browser",
    },
    "help_lang": {
        "ko": "메시지 언어",
        "en": "Message language",
    },
    "help_debug": {
        "ko": "디버그 로그 출력",
        "en": "Show debug logs",
    },
    # =========================================================================
    # Result
    # =========================================================================
    "aborted": {
        "ko": "선택이 취소되었습니다.",
        "en": "Selection cancelled.",
    },
    "opening_browser": {
        "ko": "브라우저 여는 중: {url}",
        "en": "Opening browser: {url}",
    },
}
