# cli/flow/context.py
"""
실행 컨텍스트 - 선택 플로우 상태 관리

상태 전이:
    FETCHING_STACKS → PICKING_STACK → FETCHING_RESOURCES
    → PICKING_RESOURCE → RESOLVING → DONE

어느 상태에서든 FAILED로 전이할 수 있으며, failed_at에 실패 직전 상태가 남습니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from core.stacks import ConsolePath, Resource, StackName

logger = logging.getLogger(__name__)


class PipelineState(Enum):
    """선택 플로우 상태"""

    FETCHING_STACKS = "fetching_stacks"
    PICKING_STACK = "picking_stack"
    FETCHING_RESOURCES = "fetching_resources"
    PICKING_RESOURCE = "picking_resource"
    RESOLVING = "resolving"
    DONE = "done"
    FAILED = "failed"


@dataclass
class ExecutionContext:
    """선택 플로우 실행 컨텍스트 (실행 1회용)"""

    region: str | None = None
    state: PipelineState = PipelineState.FETCHING_STACKS
    stack_name: StackName | None = None
    resource: Resource | None = None
    console_path: ConsolePath | None = None
    failed_at: PipelineState | None = None
    error: Exception | None = None

    def transition(self, state: PipelineState) -> None:
        logger.debug("상태 전이: %s -> %s", self.state.value, state.value)
        self.state = state

    def fail(self, error: Exception) -> None:
        """FAILED로 전이하고 실패 위치를 기록"""
        self.failed_at = self.state
        self.error = error
        self.transition(PipelineState.FAILED)

    @property
    def is_done(self) -> bool:
        return self.state is PipelineState.DONE
