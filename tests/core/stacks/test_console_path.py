"""
tests/core/stacks/test_console_path.py - 콘솔 경로 매핑 테스트
"""

import pytest

from core.exceptions import UnmappedResourceTypeError
from core.stacks import (
    CONSOLE_PATH_TEMPLATES,
    ConsolePathContext,
    Resource,
    build_console_url,
    is_mapped,
    resolve_console_path,
)


class TestResolveConsolePath:
    """resolve_console_path 매핑"""

    @pytest.mark.parametrize(
        "resource,expected",
        [
            (Resource("fn1", "AWS::Lambda::Function"), "lambda/home#/functions/fn1?tab=code"),
            (Resource("my-bucket", "AWS::S3::Bucket"), "s3/buckets/my-bucket?tab=objects"),
            (Resource("orders", "AWS::DynamoDB::Table"), "dynamodbv2/home#table?name=orders"),
            (Resource("PutFunctionRole", "AWS::IAM::Role"), "iam/home#/roles/details/PutFunctionRole"),
            (Resource("i-0abc", "AWS::EC2::Instance"), "ec2/home#InstanceDetails:instanceId=i-0abc"),
            (Resource("a1b2c3", "AWS::ApiGateway::RestApi"), "apigateway/main/apis/a1b2c3/resources"),
            (
                Resource("arn:aws:sns:ap-northeast-2:123456789012:alerts", "AWS::SNS::Topic"),
                "sns/v3/home#/topic/arn:aws:sns:ap-northeast-2:123456789012:alerts",
            ),
            (
                Resource("arn:aws:states:ap-northeast-2:123456789012:stateMachine:sm", "AWS::StepFunctions::StateMachine"),
                "states/home#/statemachines/view/arn:aws:states:ap-northeast-2:123456789012:stateMachine:sm",
            ),
        ],
    )
    def test_mapped_types(self, resource, expected):
        assert resolve_console_path(resource) == expected

    def test_sqs_queue_url_is_encoded(self):
        resource = Resource("https://sqs.ap-northeast-2.amazonaws.com/123456789012/jobs", "AWS::SQS::Queue")

        assert resolve_console_path(resource) == (
            "sqs/v3/home#/queues/https%3A%2F%2Fsqs.ap-northeast-2.amazonaws.com%2F123456789012%2Fjobs"
        )

    def test_log_group_uses_dollar_encoding(self):
        resource = Resource("/aws/lambda/my-func", "AWS::Logs::LogGroup")

        assert resolve_console_path(resource) == (
            "cloudwatch/home#logsV2:log-groups/log-group/$252Faws$252Flambda$252Fmy-func"
        )

    def test_unmapped_type(self):
        with pytest.raises(UnmappedResourceTypeError) as exc_info:
            resolve_console_path(Resource("fn1", "some.unknown.Type"))

        assert exc_info.value.resource_type == "some.unknown.Type"
        assert "some.unknown.Type" in str(exc_info.value)

    def test_exact_match_only(self):
        """접두사/대소문자가 다르면 매핑되지 않음"""
        for resource_type in ("Lambda::Function", "aws::lambda::function", "AWS::Lambda::Function::Version"):
            with pytest.raises(UnmappedResourceTypeError):
                resolve_console_path(Resource("fn1", resource_type))

    def test_stack_name_and_region_do_not_change_path(self):
        resource = Resource("fn1", "AWS::Lambda::Function")

        assert resolve_console_path(resource, "prod-api", "us-east-1") == resolve_console_path(resource)


class TestTemplateTable:
    """CONSOLE_PATH_TEMPLATES 확장성"""

    def test_new_entry_is_resolved(self, monkeypatch):
        monkeypatch.setitem(
            CONSOLE_PATH_TEMPLATES,
            "AWS::ECS::Cluster",
            lambda ctx: f"ecs/v2/clusters/{ctx.physical_id}",
        )

        assert resolve_console_path(Resource("main", "AWS::ECS::Cluster")) == "ecs/v2/clusters/main"

    def test_templates_receive_context(self, monkeypatch):
        received = []

        def template(ctx: ConsolePathContext) -> str:
            received.append(ctx)
            return "x"

        monkeypatch.setitem(CONSOLE_PATH_TEMPLATES, "Custom::Thing", template)
        resolve_console_path(Resource("id1", "Custom::Thing"), stack_name="prod-api", region="eu-west-1")

        assert received == [ConsolePathContext("id1", "prod-api", "eu-west-1")]

    def test_is_mapped(self):
        assert is_mapped("AWS::S3::Bucket") is True
        assert is_mapped("AWS::CDK::Metadata") is False


class TestBuildConsoleUrl:
    def test_regional_service(self):
        url = build_console_url("lambda/home#/functions/fn1?tab=code", "ap-northeast-2")
        assert url == "https://ap-northeast-2.console.aws.amazon.com/lambda/home#/functions/fn1?tab=code"

    @pytest.mark.parametrize("path", ["s3/buckets/b?tab=objects", "iam/home#/roles/details/r"])
    def test_global_service(self, path):
        assert build_console_url(path, "ap-northeast-2") == f"https://console.aws.amazon.com/{path}"

    def test_no_region(self):
        assert build_console_url("ec2/home", None) == "https://console.aws.amazon.com/ec2/home"
