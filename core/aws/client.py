"""
core/aws/client.py - boto3 세션/클라이언트 생성 헬퍼

Retry(standard 모드) + 타임아웃이 설정된 boto3 client를 생성합니다.
재시도는 botocore 레벨에서만 수행되며, 선택 플로우는 재시도하지 않습니다.

Example:
    from core.aws.client import create_session, get_client

    session = create_session(profile="dev")
    cfn = get_client(session, "cloudformation", region_name="ap-northeast-2")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal, cast

if TYPE_CHECKING:
    import boto3

# Retry mode 타입 (botocore TypedDict와 호환)
RetryMode = Literal["legacy", "standard", "adaptive"]

# 기본 retry 설정 (대화형 도구이므로 짧게)
DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_RETRY_MODE: RetryMode = "standard"
DEFAULT_CONNECT_TIMEOUT = 5  # 초
DEFAULT_READ_TIMEOUT = 30  # 초


def create_session(profile: str | None = None, region: str | None = None) -> boto3.Session:
    """boto3 Session 생성

    Args:
        profile: AWS 프로파일 이름 (None이면 기본 자격 증명 체인)
        region: 리전 (None이면 프로파일/환경 변수 기본값)
    """
    import boto3

    return boto3.Session(profile_name=profile, region_name=region)


def get_client(
    session: boto3.Session,
    service_name: str,
    region_name: str | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    retry_mode: RetryMode = DEFAULT_RETRY_MODE,
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT,
    read_timeout: int = DEFAULT_READ_TIMEOUT,
    **kwargs: Any,
) -> Any:
    """Retry가 적용된 boto3 client 생성

    Args:
        session: boto3 Session
        service_name: AWS 서비스 이름 (cloudformation 등)
        region_name: 리전 (None이면 세션 기본값)
        max_attempts: 최대 시도 횟수 (기본: 3)
        retry_mode: 재시도 모드
        connect_timeout: 연결 타임아웃 (초)
        read_timeout: 읽기 타임아웃 (초)
        **kwargs: session.client()에 전달할 추가 인자

    Returns:
        boto3 client
    """
    from botocore.config import Config

    config = Config(
        retries={"max_attempts": max_attempts, "mode": retry_mode},  # pyright: ignore[reportArgumentType]
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
    )

    # 기존 config가 있으면 병합
    if "config" in kwargs:
        existing = kwargs.pop("config")
        config = config.merge(existing)

    return session.client(  # pyright: ignore[reportCallIssue]
        cast(Any, service_name),
        region_name=region_name,
        config=config,
        **kwargs,
    )
