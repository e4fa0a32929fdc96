"""
Network Lookup Lambda Handler

CloudFormation カスタムリソース (Custom::VpcInfo / Custom::SubnetInfo) のエントリポイント。
ユーザー指定の VPC / サブネット ID から属性を取得し、GetAtt で参照できるよう返す。

- VPC: CidrBlock
- Subnet: AvailabilityZone, CidrBlock, VpcId

完了シグナルはこのモジュールで 1 回だけ送信する。
"""
from __future__ import annotations

import logging
from typing import Any

import structlog

from src.application.ports.gateways import ICompletionNotifier
from src.application.use_cases.network import LookupNetworkAttributesUseCase
from src.domain.network import InvalidEventError, LifecycleEvent, LookupResult
from src.infrastructure.config import Settings, get_settings
from src.infrastructure.gateways.cloudformation import CfnResponseGateway
from src.infrastructure.gateways.ec2 import Ec2NetworkGateway

logger = structlog.get_logger()


def configure_logging(log_level: str = "INFO") -> None:
    """構造化ログを設定"""
    level = getattr(logging, log_level.upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
    )


def build_use_case(settings: Settings) -> LookupNetworkAttributesUseCase:
    """呼び出しごとに EC2 クライアントを生成するユースケースを組み立てる"""

    def gateway_factory() -> Ec2NetworkGateway:
        return Ec2NetworkGateway(
            region=settings.aws_region,
            endpoint_url=settings.ec2_endpoint_url or None,
        )

    return LookupNetworkAttributesUseCase(gateway_factory=gateway_factory)


def handle(
    event: dict,
    context: Any,
    use_case: LookupNetworkAttributesUseCase,
    notifier: ICompletionNotifier,
) -> dict:
    """
    イベントを処理し、完了シグナルを 1 回だけ送信する

    ルーティング情報が欠けたイベントは返信先が無いため例外を送出する。
    """
    structlog.contextvars.clear_contextvars()
    logger.info("event_received", payload=event)

    try:
        lifecycle_event = LifecycleEvent.from_dict(event)
    except InvalidEventError as e:
        logger.error("invalid_event", error=str(e))
        raise

    structlog.contextvars.bind_contextvars(
        request_id=lifecycle_event.request_id,
        logical_resource_id=lifecycle_event.logical_resource_id,
        stack_id=lifecycle_event.stack_id,
    )

    try:
        result = use_case.execute(lifecycle_event)
    except Exception as e:
        logger.exception("lookup_unexpected_error")
        result = LookupResult.failed(f"Unexpected error: {e}")

    log_stream_name = getattr(context, "log_stream_name", None)
    delivered = notifier.send(lifecycle_event, result, log_stream_name)

    logger.info(
        "invocation_completed",
        status=result.status.value,
        delivered=delivered,
    )

    return {
        "Status": result.status.value,
        "Data": dict(result.data),
    }


def lambda_handler(event: dict, context: Any) -> dict:
    """Lambda エントリポイント"""
    settings = get_settings()
    configure_logging(settings.log_level)

    return handle(
        event,
        context,
        use_case=build_use_case(settings),
        notifier=CfnResponseGateway(timeout=settings.callback_timeout_seconds),
    )
