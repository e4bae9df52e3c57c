"""
core/config.py - 중앙 설정 관리

환경 변수 기반 설정과 버전 정보를 제공합니다.

환경 변수:
    CFNAV_LANG            - 메시지 언어 (ko, en)
    CFNAV_DEFAULT_REGION  - 세션에 리전이 없을 때 사용할 기본 리전
    AWS_PROFILE           - 기본 AWS 프로파일

Usage:
    from core.config import settings, get_default_region
    region = get_default_region()  # "ap-northeast-2"
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

PACKAGE_NAME = "cfnav"
VERSION_FILE = Path(__file__).resolve().parent.parent / "version.txt"

# 안정 상태의 스택만 선택 대상
STABLE_STACK_STATUSES = ("CREATE_COMPLETE", "UPDATE_COMPLETE")

# 콘솔 호스트 (리전 접두사 포함/미포함)
CONSOLE_HOST = "console.aws.amazon.com"


@dataclass(frozen=True)
class Settings:
    """런타임 설정"""

    lang: str = "ko"
    default_region: str = "ap-northeast-2"
    profile: str | None = None
    stack_statuses: tuple[str, ...] = field(default=STABLE_STACK_STATUSES)

    @classmethod
    def from_env(cls) -> Settings:
        """환경 변수에서 설정 로드"""
        return cls(
            lang=os.environ.get("CFNAV_LANG", "ko"),
            default_region=os.environ.get("CFNAV_DEFAULT_REGION", "ap-northeast-2"),
            profile=os.environ.get("AWS_PROFILE") or None,
        )


settings = Settings.from_env()


def get_version() -> str:
    """버전 문자열 반환

    설치된 패키지 메타데이터를 우선 사용하고, 없으면 version.txt를 읽습니다.
    """
    try:
        return version(PACKAGE_NAME)
    except PackageNotFoundError:
        pass

    if VERSION_FILE.exists():
        return VERSION_FILE.read_text(encoding="utf-8").strip()
    return "0.0.0"


def get_default_region() -> str:
    """기본 리전 반환 (AWS 환경 변수 > 설정값)"""
    return os.environ.get("AWS_REGION") or os.environ.get("AWS_DEFAULT_REGION") or settings.default_region
