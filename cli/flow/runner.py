# cli/flow/runner.py
"""
FlowRunner - 스택 → 리소스 → 콘솔 경로 선택 플로우

각 단계는 순차적으로 실행되며, 어느 단계든 실패하면 전체 플로우가
즉시 중단됩니다 (부분 출력, 재시도 없음).
"""

from __future__ import annotations

import logging

from cli.ui.picker import Picker, pick_option
from core.exceptions import CfnavError
from core.stacks import ConsolePath, resolve_console_path
from core.stacks.inventory import InventoryProvider

from .context import ExecutionContext, PipelineState
from .steps.resource import ResourceStep
from .steps.stack import StackStep

logger = logging.getLogger(__name__)


class FlowRunner:
    """선택 플로우 실행기

    Args:
        inventory: 스택/리소스 목록 조회 Provider
        picker: 대화형 선택기 (기본: questionary 선택기)
        region: 콘솔 경로 템플릿에 전달할 리전
    """

    def __init__(
        self,
        inventory: InventoryProvider,
        picker: Picker = pick_option,
        region: str | None = None,
    ):
        self.inventory = inventory
        self.picker = picker
        self.region = region
        self.steps = [
            StackStep(inventory, picker),
            ResourceStep(inventory, picker),
        ]
        self.context: ExecutionContext | None = None

    def run(self) -> ConsolePath:
        """플로우 실행

        Returns:
            선택한 리소스의 콘솔 상대 경로

        Raises:
            CfnavError: 각 단계의 실패 (FetchFailedError, NoOptionsError,
                SelectionAbortedError, MalformedRecordError,
                UnmappedResourceTypeError)
        """
        ctx = ExecutionContext(region=self.region)
        self.context = ctx

        try:
            for step in self.steps:
                step.execute(ctx)

            assert ctx.resource is not None
            ctx.transition(PipelineState.RESOLVING)
            ctx.console_path = resolve_console_path(ctx.resource, ctx.stack_name, ctx.region)
            ctx.transition(PipelineState.DONE)
        except CfnavError as e:
            ctx.fail(e)
            logger.debug("플로우 실패 (%s): %s", ctx.failed_at.value if ctx.failed_at else "-", e)
            raise

        return ctx.console_path


def create_flow_runner(
    inventory: InventoryProvider,
    picker: Picker = pick_option,
    region: str | None = None,
) -> FlowRunner:
    """FlowRunner 생성"""
    return FlowRunner(inventory, picker=picker, region=region)
