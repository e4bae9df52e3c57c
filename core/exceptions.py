"""
core/exceptions.py - 통합 예외 계층 구조

애플리케이션 전체에서 사용되는 예외 클래스들을 정의합니다.
모든 예외는 한 줄 메시지로 사용자에게 표시됩니다.

예외 계층 구조:
    CfnavError (베이스)
    ├── FetchFailedError (CloudFormation 목록 조회 실패)
    ├── FlowError (선택 플로우)
    │   ├── NoOptionsError
    │   └── SelectionAbortedError
    ├── MalformedRecordError (선택된 라인 파싱 실패)
    ├── UnmappedResourceTypeError (콘솔 경로 매핑 없음)
    └── ValidationError (값 객체 검증)

Usage:
    from core.exceptions import FetchFailedError

    try:
        cfn.list_stacks()
    except ClientError as e:
        raise FetchFailedError.from_client_error(
            service="cloudformation",
            operation="list_stacks",
            client_error=e,
        ) from e
"""

from typing import Any, Dict, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class CfnavError(Exception):
    """cfnav 기본 예외 클래스

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# 목록 조회 관련 예외
# =============================================================================


class FetchFailedError(CfnavError):
    """원격 목록 조회 실패

    boto3/botocore 예외를 래핑합니다. cause는 메시지에 이미 반영되어 있으므로
    __str__에서 다시 붙이지 않습니다.
    """

    def __init__(
        self,
        service: str,
        operation: str,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        message = f"{service}.{operation} 조회 실패"
        if error_code:
            message = f"{message} ({error_code})"
        if error_message:
            message = f"{message}: {error_message}"

        super().__init__(message, cause)
        self.service = service
        self.operation = operation
        self.error_code = error_code
        self.error_message = error_message
        self.details.update(
            {
                "service": service,
                "operation": operation,
                "error_code": error_code,
            }
        )

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_client_error(
        cls,
        service: str,
        operation: str,
        client_error: Exception,
    ) -> "FetchFailedError":
        """botocore 예외로부터 생성

        Args:
            service: AWS 서비스 이름
            operation: API 작업 이름
            client_error: ClientError 또는 BotoCoreError

        Returns:
            FetchFailedError 인스턴스
        """
        error_code = None
        error_message = None

        # ClientError 형식 파싱
        if hasattr(client_error, "response"):
            error_info = client_error.response.get("Error", {})
            error_code = error_info.get("Code")
            error_message = error_info.get("Message")
        else:
            error_message = str(client_error)

        return cls(
            service=service,
            operation=operation,
            error_code=error_code,
            error_message=error_message,
            cause=client_error,
        )


# =============================================================================
# 선택 플로우 관련 예외
# =============================================================================


class FlowError(CfnavError):
    """선택 플로우 관련 예외"""

    def __init__(
        self,
        step_name: str,
        message: str,
        cause: Optional[Exception] = None,
    ):
        full_message = f"{message} [{step_name}]"
        super().__init__(full_message, cause)
        self.step_name = step_name
        self.details["step_name"] = step_name


class NoOptionsError(FlowError):
    """선택할 항목이 없는 경우"""

    def __init__(self, step_name: str):
        super().__init__(step_name, "선택할 항목이 없습니다")


class SelectionAbortedError(FlowError):
    """사용자가 선택을 취소한 경우 (정상 종료 경로)"""

    def __init__(self, step_name: str = "unknown"):
        super().__init__(step_name, "선택이 취소되었습니다")


# =============================================================================
# 레코드/매핑 관련 예외
# =============================================================================


class MalformedRecordError(CfnavError):
    """선택된 라인을 리소스로 변환할 수 없는 경우"""

    def __init__(self, line: str, cause: Optional[Exception] = None):
        super().__init__(f"잘못된 리소스 라인: {line!r}", cause)
        self.line = line
        self.details["line"] = line


class UnmappedResourceTypeError(CfnavError):
    """콘솔 경로 템플릿이 없는 리소스 타입"""

    def __init__(self, resource_type: str):
        super().__init__(f"콘솔 경로가 매핑되지 않은 리소스 타입입니다: {resource_type}")
        self.resource_type = resource_type
        self.details["resource_type"] = resource_type


class ValidationError(CfnavError):
    """입력 검증 오류"""

    def __init__(
        self,
        field: str,
        value: Any,
        expected: str,
        cause: Optional[Exception] = None,
    ):
        message = f"검증 오류 [{field}]: 예상값 '{expected}', 실제값 '{value}'"
        super().__init__(message, cause)
        self.field = field
        self.value = value
        self.expected = expected
        self.details.update(
            {
                "field": field,
                "value": str(value),
                "expected": expected,
            }
        )


# =============================================================================
# 예외 유틸리티 함수
# =============================================================================

_FRIENDLY_MESSAGES = {
    "AccessDenied": "권한이 없습니다. IAM 정책을 확인하세요.",
    "AccessDeniedException": "권한이 없습니다. IAM 정책을 확인하세요.",
    "ExpiredToken": "인증 토큰이 만료되었습니다. 다시 로그인하세요.",
    "ExpiredTokenException": "인증 토큰이 만료되었습니다. 다시 로그인하세요.",
    "InvalidClientTokenId": "잘못된 자격 증명입니다.",
    "Throttling": "요청이 너무 많습니다. 잠시 후 다시 시도하세요.",
}


def is_access_denied(error: Exception) -> bool:
    """액세스 거부 오류인지 확인

    Args:
        error: 확인할 예외

    Returns:
        액세스 거부 오류이면 True
    """
    codes = ("AccessDenied", "AccessDeniedException", "UnauthorizedAccess")

    if isinstance(error, FetchFailedError):
        return error.error_code in codes

    # botocore ClientError 직접 확인
    if hasattr(error, "response"):
        return error.response.get("Error", {}).get("Code", "") in codes

    return False


def format_error_for_user(error: Exception) -> str:
    """사용자에게 표시할 한 줄 에러 메시지 포맷팅

    Args:
        error: 예외

    Returns:
        사용자 친화적인 에러 메시지
    """
    if isinstance(error, FetchFailedError) and error.error_code in _FRIENDLY_MESSAGES:
        return f"{error.service}.{error.operation}: {_FRIENDLY_MESSAGES[error.error_code]}"

    if isinstance(error, CfnavError):
        # 커스텀 예외는 이미 포맷팅됨
        return str(error)

    # boto3 ClientError
    if hasattr(error, "response"):
        error_info = error.response.get("Error", {})
        code = error_info.get("Code", "UnknownError")
        message = error_info.get("Message", str(error))
        return _FRIENDLY_MESSAGES.get(code, f"{code}: {message}")

    return str(error)
