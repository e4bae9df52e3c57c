"""
tests/conftest.py - pytest 공통 픽스처

AWS API 모킹, 가짜 Inventory/선택기, 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(fake_inventory, scripted_picker):
        runner = FlowRunner(fake_inventory, picker=scripted_picker)
"""

import os
import sys
from pathlib import Path
from typing import Dict, List, Optional
from unittest.mock import MagicMock, patch

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from cli.i18n import set_lang  # noqa: E402
from core.stacks import Resource  # noqa: E402

# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment():
    """테스트 환경 설정 (가짜 자격 증명, 한국어 메시지)"""
    os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-2")
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
    set_lang("ko")

    yield


# =============================================================================
# AWS 모킹 픽스처
# =============================================================================


@pytest.fixture
def mock_boto3_session():
    """boto3.Session 모킹"""
    with patch("boto3.Session") as mock_session_class:
        mock_session = MagicMock()
        mock_session_class.return_value = mock_session
        mock_session.client.return_value = MagicMock()
        mock_session.region_name = "ap-northeast-2"

        yield mock_session


@pytest.fixture
def mock_cfn_client():
    """CloudFormation 클라이언트 모킹

    mock_client.pages[operation_name]을 바꾸면 paginator 응답이 바뀝니다.
    """
    mock_client = MagicMock()
    pages: Dict[str, list] = {
        "list_stacks": [
            {
                "StackSummaries": [
                    {"StackName": "prod-api", "StackStatus": "CREATE_COMPLETE"},
                    {"StackName": "prod-web", "StackStatus": "UPDATE_COMPLETE"},
                ]
            }
        ],
        "list_stack_resources": [
            {
                "StackResourceSummaries": [
                    {
                        "LogicalResourceId": "PutFunctionRole",
                        "PhysicalResourceId": "PutFunctionRole",
                        "ResourceType": "AWS::IAM::Role",
                    },
                    {
                        "LogicalResourceId": "PutFunction",
                        "PhysicalResourceId": "my-func",
                        "ResourceType": "AWS::Lambda::Function",
                    },
                ]
            }
        ],
    }

    def get_paginator(operation_name):
        paginator = MagicMock()
        paginator.paginate.return_value = pages[operation_name]
        return paginator

    mock_client.get_paginator.side_effect = get_paginator
    mock_client.pages = pages

    yield mock_client


# =============================================================================
# Inventory / 선택기 픽스처
# =============================================================================


class FakeInventory:
    """테스트용 InventoryProvider (호출 기록 포함)"""

    def __init__(
        self,
        stacks: Optional[List[str]] = None,
        resources: Optional[Dict[str, List[Resource]]] = None,
    ):
        self.stacks = stacks if stacks is not None else ["prod-api"]
        if resources is None:
            resources = {
                "prod-api": [
                    Resource("PutFunctionRole", "AWS::IAM::Role"),
                    Resource("my-func", "AWS::Lambda::Function"),
                ]
            }
        self.resources = resources
        self.calls: List[tuple] = []

    def list_stacks(self) -> List[str]:
        self.calls.append(("list_stacks",))
        return list(self.stacks)

    def list_resources(self, stack_name: str) -> List[Resource]:
        self.calls.append(("list_resources", stack_name))
        return list(self.resources.get(stack_name, []))


class ScriptedPicker:
    """미리 정한 응답을 순서대로 반환하는 선택기

    응답이 int이면 해당 인덱스의 라인, str이면 그대로, None이면 취소.
    """

    def __init__(self, *answers):
        self.answers = list(answers)
        self.calls: List[tuple] = []

    def __call__(self, block: str, title: str) -> Optional[str]:
        self.calls.append((block, title))
        answer = self.answers.pop(0)
        if isinstance(answer, int):
            return block.split("\n")[answer]
        return answer


@pytest.fixture
def fake_inventory():
    """기본 데이터가 채워진 FakeInventory"""
    return FakeInventory()


@pytest.fixture
def scripted_picker():
    """첫 스택, 두 번째 리소스를 고르는 선택기"""
    return ScriptedPicker(0, 1)


@pytest.fixture
def make_inventory():
    """FakeInventory 팩토리"""
    return FakeInventory


@pytest.fixture
def make_picker():
    """ScriptedPicker 팩토리"""
    return ScriptedPicker


# =============================================================================
# 유틸리티
# =============================================================================


def create_mock_client_error(
    error_code: str,
    error_message: str = "Test error",
    operation_name: str = "TestOperation",
) -> Exception:
    """ClientError 생성 헬퍼"""
    from botocore.exceptions import ClientError

    return ClientError(
        {
            "Error": {
                "Code": error_code,
                "Message": error_message,
            }
        },
        operation_name,
    )


@pytest.fixture
def make_client_error():
    """ClientError 팩토리"""
    return create_mock_client_error


# =============================================================================
# moto 통합 (선택적)
# =============================================================================

try:
    import moto

    @pytest.fixture
    def aws_credentials():
        """moto 사용 시 AWS 자격 증명 설정"""
        os.environ["AWS_ACCESS_KEY_ID"] = "testing"
        os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
        os.environ["AWS_SECURITY_TOKEN"] = "testing"
        os.environ["AWS_SESSION_TOKEN"] = "testing"
        os.environ["AWS_DEFAULT_REGION"] = "ap-northeast-2"

    @pytest.fixture
    def moto_session(aws_credentials):
        """moto를 사용한 boto3 Session"""
        with moto.mock_aws():
            import boto3

            yield boto3.Session(region_name="ap-northeast-2")

except ImportError:
    # moto가 설치되지 않은 경우 더미 픽스처
    @pytest.fixture
    def moto_session():
        pytest.skip("moto not installed")
