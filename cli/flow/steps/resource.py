# cli/flow/steps/resource.py
"""
리소스 선택 Step

선택된 스택의 리소스 중 하나를 선택하고, 선택한 라인을 Resource로 디코딩.
"""

import logging

from cli.i18n import t
from cli.ui.picker import Picker
from core.stacks import decode_resource, encode_resources, is_mapped
from core.stacks.inventory import InventoryProvider

from ..context import ExecutionContext, PipelineState
from .common import fetch_options, pick_line

logger = logging.getLogger(__name__)


class ResourceStep:
    """리소스 선택 Step

    ctx.stack_name이 설정된 뒤에만 실행됩니다.
    """

    name = "resource"

    def __init__(self, inventory: InventoryProvider, picker: Picker):
        self.inventory = inventory
        self.picker = picker

    def execute(self, ctx: ExecutionContext) -> ExecutionContext:
        """리소스 선택 실행

        Args:
            ctx: 실행 컨텍스트 (stack_name이 선택되어 있어야 함)

        Returns:
            업데이트된 컨텍스트 (resource 설정)

        Raises:
            MalformedRecordError: 선택기가 인코딩하지 않은 라인을 반환한 경우
        """
        if ctx.stack_name is None:
            raise RuntimeError("stack_name must be picked before listing resources")
        stack_name = ctx.stack_name

        ctx.transition(PipelineState.FETCHING_RESOURCES)
        resources = fetch_options(
            lambda: self.inventory.list_resources(stack_name),
            "list_stack_resources",
            t("flow.fetching_resources", stack=stack_name),
        )
        mapped = sum(1 for r in resources if is_mapped(r.resource_type))
        logger.debug(t("flow.resources_found", count=len(resources), mapped=mapped))

        ctx.transition(PipelineState.PICKING_RESOURCE)
        line = pick_line(encode_resources(resources), self.picker, t("flow.pick_resource"), self.name)
        ctx.resource = decode_resource(line)
        return ctx
