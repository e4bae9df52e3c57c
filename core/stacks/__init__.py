"""
core/stacks - CloudFormation 스택/리소스 선택 코어

구조:
    types.py         - Resource, StackName, ConsolePath
    codec.py         - 선택기용 라인 인코딩/디코딩
    console_path.py  - 리소스 타입 → 콘솔 경로 매핑
    inventory.py     - CloudFormation 목록 조회 (boto3)
"""

from .codec import (
    decode_collection,
    decode_resource,
    encode_collection,
    encode_resource,
    encode_resources,
    encode_stacks,
)
from .console_path import (
    CONSOLE_PATH_TEMPLATES,
    ConsolePathContext,
    build_console_url,
    is_mapped,
    resolve_console_path,
)
from .types import ConsolePath, Resource, StackName

__all__ = [
    # Types
    "Resource",
    "StackName",
    "ConsolePath",
    # Codec
    "encode_resource",
    "decode_resource",
    "encode_collection",
    "encode_stacks",
    "encode_resources",
    "decode_collection",
    # Console path
    "CONSOLE_PATH_TEMPLATES",
    "ConsolePathContext",
    "resolve_console_path",
    "build_console_url",
    "is_mapped",
]
