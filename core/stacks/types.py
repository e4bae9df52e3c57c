"""
core/stacks/types.py - 스택/리소스 값 타입
"""

from __future__ import annotations

from dataclasses import dataclass

from core.exceptions import ValidationError

# 배포 단위 이름 (구조 없음)
StackName = str

# 콘솔 상대 경로 (예: "lambda/home#/functions/my-func?tab=code")
ConsolePath = str


@dataclass(frozen=True)
class Resource:
    """스택 내 관리 리소스

    두 필드 모두 비어 있을 수 없습니다.
    """

    physical_id: str
    resource_type: str

    def __post_init__(self) -> None:
        if not self.physical_id:
            raise ValidationError("physical_id", self.physical_id, "non-empty string")
        if not self.resource_type:
            raise ValidationError("resource_type", self.resource_type, "non-empty string")
