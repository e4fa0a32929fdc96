"""CloudFormation Custom Resource Lifecycle Event"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

REQUIRED_ROUTING_FIELDS = ("ResponseURL", "StackId", "RequestId", "LogicalResourceId")


class InvalidEventError(Exception):
    """完了シグナルを送信できないイベント"""

    pass


class RequestType(str, Enum):
    """ライフサイクルイベントの種別"""

    CREATE = "Create"
    UPDATE = "Update"
    DELETE = "Delete"


@dataclass(frozen=True)
class LifecycleEvent:
    """
    カスタムリソースのライフサイクルイベント

    CloudFormation がスタック操作ごとに 1 回だけ送信する。
    ResponseURL などのルーティング情報は完了シグナルの宛先として使う。
    未知の RequestType は request_type=None として保持する。
    """

    request_type: RequestType | None
    response_url: str
    stack_id: str
    request_id: str
    logical_resource_id: str
    name_filter: str | None = None
    physical_resource_id: str | None = None
    resource_type: str = ""
    raw_request_type: str | None = None
    resource_properties: dict[str, Any] = field(default_factory=dict)

    @property
    def is_delete(self) -> bool:
        return self.request_type == RequestType.DELETE

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> LifecycleEvent:
        """Lambda に渡された生のイベントから生成"""
        if not isinstance(payload, dict):
            raise InvalidEventError("Event payload must be a mapping")

        missing = [name for name in REQUIRED_ROUTING_FIELDS if not payload.get(name)]
        if missing:
            raise InvalidEventError(f"Missing routing fields: {', '.join(missing)}")

        raw_request_type = payload.get("RequestType")
        try:
            request_type = RequestType(raw_request_type)
        except ValueError:
            # 未知の種別はユースケースで FAILED になる
            request_type = None

        properties = payload.get("ResourceProperties") or {}
        if not isinstance(properties, dict):
            properties = {}

        return cls(
            request_type=request_type,
            raw_request_type=raw_request_type if isinstance(raw_request_type, str) else None,
            response_url=payload["ResponseURL"],
            stack_id=payload["StackId"],
            request_id=payload["RequestId"],
            logical_resource_id=payload["LogicalResourceId"],
            name_filter=properties.get("NameFilter"),
            physical_resource_id=payload.get("PhysicalResourceId"),
            resource_type=payload.get("ResourceType", ""),
            resource_properties=dict(properties),
        )
