# cli/flow/steps/stack.py
"""
스택 선택 Step

안정 상태의 CloudFormation 스택 중 하나를 선택.
"""

import logging

from cli.i18n import t
from cli.ui.picker import Picker
from core.stacks import encode_stacks
from core.stacks.inventory import InventoryProvider

from ..context import ExecutionContext, PipelineState
from .common import fetch_options, pick_line

logger = logging.getLogger(__name__)


class StackStep:
    """스택 선택 Step"""

    name = "stack"

    def __init__(self, inventory: InventoryProvider, picker: Picker):
        self.inventory = inventory
        self.picker = picker

    def execute(self, ctx: ExecutionContext) -> ExecutionContext:
        """스택 선택 실행

        Returns:
            업데이트된 컨텍스트 (stack_name 설정)
        """
        ctx.transition(PipelineState.FETCHING_STACKS)
        stack_names = fetch_options(self.inventory.list_stacks, "list_stacks", t("flow.fetching_stacks"))
        logger.debug(t("flow.stacks_found", count=len(stack_names)))

        ctx.transition(PipelineState.PICKING_STACK)
        ctx.stack_name = pick_line(encode_stacks(stack_names), self.picker, t("flow.pick_stack"), self.name)
        return ctx
