# cli/flow/__init__.py
"""
CLI Flow Module - 스택/리소스 선택 플로우

questionary 기반 대화형 선택기를 사용하므로 CLI 전용입니다.

구조:
    context.py      - ExecutionContext, PipelineState
    runner.py       - FlowRunner, 전체 흐름 관리
    steps/          - 개별 Step 구현
        common.py   - 목록 조회/선택 공통 처리
        stack.py    - 스택 선택
        resource.py - 리소스 선택 + 디코딩

사용법:
    from cli.flow import create_flow_runner
    from core.stacks.inventory import CloudFormationInventory

    runner = create_flow_runner(CloudFormationInventory(session))
    path = runner.run()  # "lambda/home#/functions/my-func?tab=code"

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.
"""

__all__ = [
    # Core
    "FlowRunner",
    "create_flow_runner",
    "ExecutionContext",
    "PipelineState",
    # Steps
    "StackStep",
    "ResourceStep",
]

# Lazy import 매핑 테이블
_IMPORT_MAPPING = {
    # Context
    "ExecutionContext": (".context", "ExecutionContext"),
    "PipelineState": (".context", "PipelineState"),
    # Runner
    "FlowRunner": (".runner", "FlowRunner"),
    "create_flow_runner": (".runner", "create_flow_runner"),
    # Steps
    "StackStep": (".steps", "StackStep"),
    "ResourceStep": (".steps", "ResourceStep"),
}


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name in _IMPORT_MAPPING:
        module_name, attr_name = _IMPORT_MAPPING[name]
        import importlib

        module = importlib.import_module(module_name, __name__)
        return getattr(module, attr_name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
