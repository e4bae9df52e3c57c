"""
core/stacks/codec.py - 선택기용 레코드 인코딩/디코딩

리소스는 "<physical_id> (<resource_type>)" 한 줄로, 스택은 이름 그대로
표시됩니다. 컬렉션은 개행으로 연결되며 순서를 유지합니다.

Example:
    >>> encode_resource(Resource("my-func", "AWS::Lambda::Function"))
    'my-func (AWS::Lambda::Function)'
    >>> decode_resource("my-func (AWS::Lambda::Function)")
    Resource(physical_id='my-func', resource_type='AWS::Lambda::Function')

Note:
    괄호나 공백이 포함된 식별자는 표현할 수 없습니다 (포맷 한계).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from core.exceptions import MalformedRecordError, ValidationError

from .types import Resource, StackName

T = TypeVar("T")

LINE_SEPARATOR = "\n"


def encode_resource(resource: Resource) -> str:
    """리소스를 표시 라인으로 변환"""
    return f"{resource.physical_id} ({resource.resource_type})"


def decode_resource(line: str) -> Resource:
    """표시 라인을 리소스로 변환

    괄호를 모두 제거한 뒤 단일 공백 기준으로 나눕니다.
    토큰 0은 physical_id, 토큰 1은 resource_type이며 나머지는 무시합니다.

    Raises:
        MalformedRecordError: 토큰이 2개 미만이거나 빈 토큰인 경우
    """
    tokens = line.replace("(", "").replace(")", "").split(" ")
    if len(tokens) < 2:
        raise MalformedRecordError(line)

    try:
        return Resource(physical_id=tokens[0], resource_type=tokens[1])
    except ValidationError as e:
        raise MalformedRecordError(line, cause=e) from e


def encode_collection(items: Iterable[T], formatter: Callable[[T], str] = str) -> str:
    """항목들을 개행 구분 블록으로 변환 (입력 순서 유지, 후행 개행 없음)"""
    return LINE_SEPARATOR.join(formatter(item) for item in items)


def encode_stacks(stack_names: Iterable[StackName]) -> str:
    return encode_collection(stack_names)


def encode_resources(resources: Iterable[Resource]) -> str:
    return encode_collection(resources, encode_resource)


def decode_collection(block: str) -> list[Resource]:
    """리소스 블록을 라인 단위로 디코딩 (빈 블록은 빈 리스트)"""
    if not block:
        return []
    return [decode_resource(line) for line in block.split(LINE_SEPARATOR)]
