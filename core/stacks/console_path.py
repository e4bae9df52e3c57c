"""
core/stacks/console_path.py - 리소스 타입별 AWS 콘솔 경로 매핑

리소스 타입 문자열을 경로 템플릿 함수에 매핑합니다.
매핑은 정확한 문자열 일치로만 조회하며, 없으면 UnmappedResourceTypeError를
발생시킵니다. 새 타입 지원은 CONSOLE_PATH_TEMPLATES에 항목을 추가하면 됩니다.

Example:
    >>> resolve_console_path(Resource("my-func", "AWS::Lambda::Function"))
    'lambda/home#/functions/my-func?tab=code'
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from urllib.parse import quote

from core.config import CONSOLE_HOST
from core.exceptions import UnmappedResourceTypeError

from .types import ConsolePath, Resource, StackName


@dataclass(frozen=True)
class ConsolePathContext:
    """경로 템플릿 입력

    현재 템플릿은 physical_id만 사용합니다.
    """

    physical_id: str
    stack_name: StackName | None = None
    region: str | None = None


PathTemplate = Callable[[ConsolePathContext], ConsolePath]


def _log_group_path(ctx: ConsolePathContext) -> ConsolePath:
    # CloudWatch 콘솔은 이중 인코딩 후 '%'를 '$'로 치환한 형식을 사용
    encoded = quote(quote(ctx.physical_id, safe=""), safe="").replace("%", "$")
    return f"cloudwatch/home#logsV2:log-groups/log-group/{encoded}"


CONSOLE_PATH_TEMPLATES: dict[str, PathTemplate] = {
    "AWS::Lambda::Function": lambda ctx: f"lambda/home#/functions/{ctx.physical_id}?tab=code",
    "AWS::S3::Bucket": lambda ctx: f"s3/buckets/{ctx.physical_id}?tab=objects",
    "AWS::DynamoDB::Table": lambda ctx: f"dynamodbv2/home#table?name={ctx.physical_id}",
    "AWS::IAM::Role": lambda ctx: f"iam/home#/roles/details/{ctx.physical_id}",
    # physical_id = 큐 URL
    "AWS::SQS::Queue": lambda ctx: f"sqs/v3/home#/queues/{quote(ctx.physical_id, safe='')}",
    # physical_id = 토픽 ARN
    "AWS::SNS::Topic": lambda ctx: f"sns/v3/home#/topic/{ctx.physical_id}",
    "AWS::Logs::LogGroup": _log_group_path,
    "AWS::StepFunctions::StateMachine": lambda ctx: f"states/home#/statemachines/view/{ctx.physical_id}",
    "AWS::EC2::Instance": lambda ctx: f"ec2/home#InstanceDetails:instanceId={ctx.physical_id}",
    "AWS::ApiGateway::RestApi": lambda ctx: f"apigateway/main/apis/{ctx.physical_id}/resources",
}

# 리전 구분 없는 콘솔 서비스 (경로 첫 세그먼트 기준)
GLOBAL_CONSOLE_SERVICES = frozenset({"s3", "iam"})


def is_mapped(resource_type: str) -> bool:
    """콘솔 경로 매핑이 있는 타입인지 확인"""
    return resource_type in CONSOLE_PATH_TEMPLATES


def resolve_console_path(
    resource: Resource,
    stack_name: StackName | None = None,
    region: str | None = None,
) -> ConsolePath:
    """리소스를 콘솔 상대 경로로 변환

    Args:
        resource: 디코딩된 리소스
        stack_name: 스택 이름 (현재 템플릿에서는 미사용)
        region: 리전 (현재 템플릿에서는 미사용)

    Raises:
        UnmappedResourceTypeError: 매핑되지 않은 리소스 타입
    """
    template = CONSOLE_PATH_TEMPLATES.get(resource.resource_type)
    if template is None:
        raise UnmappedResourceTypeError(resource.resource_type)

    return template(ConsolePathContext(resource.physical_id, stack_name, region))


def build_console_url(path: ConsolePath, region: str | None = None) -> str:
    """콘솔 상대 경로를 절대 URL로 변환

    S3, IAM 같은 글로벌 콘솔이거나 리전이 없으면 리전 접두사를 붙이지 않습니다.
    """
    service = path.split("/", 1)[0]
    if region and service not in GLOBAL_CONSOLE_SERVICES:
        return f"https://{region}.{CONSOLE_HOST}/{path}"
    return f"https://{CONSOLE_HOST}/{path}"
