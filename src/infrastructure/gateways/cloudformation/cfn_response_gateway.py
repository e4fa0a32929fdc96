"""CloudFormation Custom Resource Response Gateway"""
from __future__ import annotations

import json
from typing import Any

import httpx
import structlog

from src.application.ports.gateways import ICompletionNotifier
from src.domain.network import LifecycleEvent, LookupResult

logger = structlog.get_logger()

REASON_TEMPLATE = "See the details in CloudWatch Log Stream: {log_stream_name}"


class CfnResponseGateway(ICompletionNotifier):
    """
    CloudFormation Response Gateway

    ResponseURL（署名付き S3 URL）へ完了シグナルを PUT する。
    送信失敗はログに記録するのみで、例外は送出しない。
    """

    def __init__(
        self,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ):
        self._timeout = timeout
        self._client = client

    def build_body(
        self,
        event: LifecycleEvent,
        result: LookupResult,
        log_stream_name: str | None = None,
    ) -> dict[str, Any]:
        """CloudFormation に返すレスポンスボディを生成"""
        reason = REASON_TEMPLATE.format(log_stream_name=log_stream_name or "").rstrip()
        physical_resource_id = (
            event.physical_resource_id or log_stream_name or event.request_id
        )

        return {
            "Status": result.status.value,
            "Reason": reason,
            "PhysicalResourceId": physical_resource_id,
            "StackId": event.stack_id,
            "RequestId": event.request_id,
            "LogicalResourceId": event.logical_resource_id,
            "NoEcho": False,
            "Data": dict(result.data),
        }

    def send(
        self,
        event: LifecycleEvent,
        result: LookupResult,
        log_stream_name: str | None = None,
    ) -> bool:
        """完了シグナルを送信"""
        body = json.dumps(self.build_body(event, result, log_stream_name))
        log = logger.bind(status=result.status.value)
        log.info("sending_cfn_response", body=body)

        # 署名付き URL のため content-type は空にする
        headers = {"content-type": ""}

        try:
            if self._client is not None:
                response = self._client.put(
                    event.response_url, content=body, headers=headers
                )
            else:
                with httpx.Client(timeout=self._timeout) as client:
                    response = client.put(
                        event.response_url, content=body, headers=headers
                    )
            response.raise_for_status()
        except httpx.HTTPError as e:
            log.error("cfn_response_failed", error=str(e))
            return False

        log.info("cfn_response_sent", status_code=response.status_code)
        return True
