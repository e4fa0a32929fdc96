"""Shared Test Fixtures"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

import pytest

from src.application.ports.gateways import (
    ICompletionNotifier,
    INetworkGateway,
    SubnetRecord,
    VpcRecord,
)

RESPONSE_URL = "https://cloudformation-custom-resource-response-useast1.s3.amazonaws.com/signed"
STACK_ID = "arn:aws:cloudformation:us-east-1:123456789012:stack/GetAttFromParam/guid"


@dataclass
class FakeNetworkGateway(INetworkGateway):
    """テスト用のインメモリ EC2 ゲートウェイ"""

    vpcs: list[VpcRecord] = field(default_factory=list)
    subnets: list[SubnetRecord] = field(default_factory=list)
    error: Exception | None = None
    calls: list[tuple[str, str]] = field(default_factory=list)

    def describe_vpcs(self, vpc_id: str) -> list[VpcRecord]:
        self.calls.append(("describe_vpcs", vpc_id))
        if self.error:
            raise self.error
        return list(self.vpcs)

    def describe_subnets(self, subnet_id: str) -> list[SubnetRecord]:
        self.calls.append(("describe_subnets", subnet_id))
        if self.error:
            raise self.error
        return list(self.subnets)


@dataclass
class RecordingNotifier(ICompletionNotifier):
    """送信された完了シグナルを記録する"""

    sent: list[tuple[Any, Any, str | None]] = field(default_factory=list)

    def send(self, event, result, log_stream_name=None) -> bool:
        self.sent.append((event, result, log_stream_name))
        return True


@dataclass
class FakeLambdaContext:
    log_stream_name: str = "2026/10/19/[$LATEST]abcdef0123456789"
    aws_request_id: str = "lambda-request-id"


@pytest.fixture
def make_event() -> Callable[..., dict]:
    """CloudFormation カスタムリソースイベントを生成"""

    def _make_event(
        request_type: str = "Create",
        name_filter: str | None = "vpc-0a1b2c3d",
        **overrides: Any,
    ) -> dict:
        event: dict[str, Any] = {
            "RequestType": request_type,
            "ResponseURL": RESPONSE_URL,
            "StackId": STACK_ID,
            "RequestId": "req-0001",
            "ResourceType": "Custom::VpcInfo",
            "LogicalResourceId": "VpcInfo",
            "ResourceProperties": {"ServiceToken": "arn:aws:lambda:fn"},
        }
        if name_filter is not None:
            event["ResourceProperties"]["NameFilter"] = name_filter
        event.update(overrides)
        return event

    return _make_event


@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    return FakeLambdaContext()


@pytest.fixture
def fake_gateway() -> FakeNetworkGateway:
    return FakeNetworkGateway()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()
