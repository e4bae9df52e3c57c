"""
core/stacks/inventory.py - CloudFormation 스택/리소스 목록 조회

안정 상태(CREATE_COMPLETE, UPDATE_COMPLETE)의 스택과
스택별 리소스 목록을 paginator로 수집합니다.
"""

from __future__ import annotations

import logging
from typing import Protocol

from botocore.exceptions import BotoCoreError, ClientError

from core.aws import get_client
from core.config import settings
from core.exceptions import FetchFailedError, ValidationError

from .types import Resource, StackName

logger = logging.getLogger(__name__)

SERVICE_NAME = "cloudformation"


class InventoryProvider(Protocol):
    """선택 플로우가 사용하는 목록 조회 인터페이스"""

    def list_stacks(self) -> list[StackName]: ...

    def list_resources(self, stack_name: StackName) -> list[Resource]: ...


class CloudFormationInventory:
    """boto3 CloudFormation 클라이언트 기반 InventoryProvider"""

    def __init__(self, session, region_name: str | None = None, stack_statuses: tuple[str, ...] | None = None):
        self.region_name = region_name or session.region_name
        self.stack_statuses = stack_statuses or settings.stack_statuses
        self._client = get_client(session, SERVICE_NAME, region_name=self.region_name)

    def list_stacks(self) -> list[StackName]:
        """안정 상태 스택 이름 목록 (조회 순서 유지)"""
        stack_names: list[StackName] = []

        try:
            paginator = self._client.get_paginator("list_stacks")
            for page in paginator.paginate(StackStatusFilter=list(self.stack_statuses)):
                for summary in page.get("StackSummaries", []):
                    name = summary.get("StackName")
                    if name:
                        stack_names.append(name)
        except (ClientError, BotoCoreError) as e:
            raise FetchFailedError.from_client_error(SERVICE_NAME, "list_stacks", e) from e

        logger.debug("스택 %d개 조회 (region=%s)", len(stack_names), self.region_name)
        return stack_names

    def list_resources(self, stack_name: StackName) -> list[Resource]:
        """스택 리소스 목록 (조회 순서 유지)

        physical id나 타입이 없는 항목은 건너뜁니다.
        """
        resources: list[Resource] = []

        try:
            paginator = self._client.get_paginator("list_stack_resources")
            for page in paginator.paginate(StackName=stack_name):
                for summary in page.get("StackResourceSummaries", []):
                    try:
                        resources.append(
                            Resource(
                                physical_id=summary.get("PhysicalResourceId", ""),
                                resource_type=summary.get("ResourceType", ""),
                            )
                        )
                    except ValidationError as e:
                        logger.debug("리소스 건너뜀 [%s]: %s", summary.get("LogicalResourceId"), e)
        except (ClientError, BotoCoreError) as e:
            raise FetchFailedError.from_client_error(SERVICE_NAME, "list_stack_resources", e) from e

        logger.debug("스택 %s 리소스 %d개 조회", stack_name, len(resources))
        return resources
