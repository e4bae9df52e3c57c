"""
cli/i18n/messages/flow.py - Selection Flow Messages

Contains translations for the stack/resource selection steps.
"""

from __future__ import annotations

FLOW_MESSAGES = {
    # =========================================================================
    # Stack Selection
    # =========================================================================
    "fetching_stacks": {
        "ko": "스택 목록 조회 중...",
        "en": "Fetching stacks...",
    },
    "stacks_found": {
        "ko": "스택 {count}개",
        "en": "Found {count} stacks",
    },
    "pick_stack": {
        "ko": "스택을 선택하세요",
        "en": "Pick a stack",
    },
    # =========================================================================
    # Resource Selection
    # =========================================================================
    "fetching_resources": {
        "ko": "{stack} 리소스 조회 중...",
        "en": "Fetching resources of {stack}...",
    },
    "resources_found": {
        "ko": "리소스 {count}개 (콘솔 매핑 {mapped}개)",
        "en": "Found {count} resources ({mapped} with console mapping)",
    },
    "pick_resource": {
        "ko": "리소스를 선택하세요",
        "en": "Pick a resource",
    },
    # =========================================================================
    # Picker
    # =========================================================================
    "picker_instruction": {
        "ko": "(입력하여 검색, Enter 선택, Ctrl-C 취소)",
        "en": "(type to filter, Enter to pick, Ctrl-C to cancel)",
    },
    "picker_unavailable": {
        "ko": "선택 화면을 시작할 수 없습니다: {error}",
        "en": "Could not start the picker: {error}",
    },
}
