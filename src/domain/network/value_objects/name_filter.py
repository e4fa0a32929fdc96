"""Name Filter Value Object"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

FILTER_SEPARATOR = "-"


class NetworkResourceType(str, Enum):
    """ルックアップ対象のリソース種別"""

    VPC = "vpc"
    SUBNET = "subnet"


@dataclass(frozen=True)
class VpcFilter:
    """VPC を一意に指定するフィルタ（例: vpc-0a1b2c3d）"""

    resource_id: str

    @property
    def resource_type(self) -> NetworkResourceType:
        return NetworkResourceType.VPC


@dataclass(frozen=True)
class SubnetFilter:
    """サブネットを一意に指定するフィルタ（例: subnet-0a1b2c3d）"""

    resource_id: str

    @property
    def resource_type(self) -> NetworkResourceType:
        return NetworkResourceType.SUBNET


@dataclass(frozen=True)
class InvalidFilter:
    """
    解釈できないフィルタ

    プレフィックスが vpc / subnet 以外、または NameFilter 自体が無い場合。
    """

    raw: str | None

    @property
    def prefix(self) -> str | None:
        if self.raw is None:
            return None
        return self.raw.split(FILTER_SEPARATOR, 1)[0]


NameFilter = Union[VpcFilter, SubnetFilter, InvalidFilter]


def parse_name_filter(raw: object) -> NameFilter:
    """
    NameFilter 文字列を解析する

    最初の "-" より前をリソース種別として扱い、フィルタ全体を
    完全一致の識別子として保持する。
    """
    if not isinstance(raw, str) or not raw:
        return InvalidFilter(raw=raw if isinstance(raw, str) else None)

    prefix = raw.split(FILTER_SEPARATOR, 1)[0]
    if prefix == NetworkResourceType.VPC.value:
        return VpcFilter(resource_id=raw)
    if prefix == NetworkResourceType.SUBNET.value:
        return SubnetFilter(resource_id=raw)
    return InvalidFilter(raw=raw)
