"""Gateway Interfaces (Ports)"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.network import LifecycleEvent, LookupResult


@dataclass(frozen=True)
class VpcRecord:
    """DescribeVpcs の結果DTO"""

    vpc_id: str
    cidr_block: str


@dataclass(frozen=True)
class SubnetRecord:
    """DescribeSubnets の結果DTO"""

    subnet_id: str
    availability_zone: str
    cidr_block: str
    vpc_id: str


class INetworkGateway(ABC):
    """
    Network Gateway Interface

    EC2 の参照系 API（DescribeVpcs / DescribeSubnets）を抽象化する。
    識別子の完全一致で検索し、0 件以上のレコードを返す。
    """

    @abstractmethod
    def describe_vpcs(self, vpc_id: str) -> list[VpcRecord]:
        """VPC を識別子で検索"""
        pass

    @abstractmethod
    def describe_subnets(self, subnet_id: str) -> list[SubnetRecord]:
        """サブネットを識別子で検索"""
        pass


class ICompletionNotifier(ABC):
    """
    Completion Notifier Interface

    カスタムリソースの完了シグナルを CloudFormation に届ける。
    """

    @abstractmethod
    def send(
        self,
        event: LifecycleEvent,
        result: LookupResult,
        log_stream_name: str | None = None,
    ) -> bool:
        """完了シグナルを送信し、配信できたかを返す"""
        pass
