"""Lookup Network Attributes Use Case"""
from __future__ import annotations

from typing import Callable

import structlog

from src.application.ports.gateways import INetworkGateway
from src.domain.network import (
    InvalidFilter,
    LifecycleEvent,
    LookupResult,
    SubnetFilter,
    VpcFilter,
    parse_name_filter,
)

logger = structlog.get_logger()


class NetworkLookupError(Exception):
    """ルックアップ失敗の基底クラス"""

    pass


class ClientInitError(NetworkLookupError):
    """EC2 クライアントの生成に失敗"""

    pass


class QueryError(NetworkLookupError):
    """EC2 API 呼び出しが例外を送出した（権限不足、不正なID、スロットリング等）"""

    pass


class NoMatchError(NetworkLookupError):
    """一致するリソースが 0 件"""

    pass


class AmbiguousMatchError(NetworkLookupError):
    """一致するリソースが複数件"""

    pass


class InvalidTypeError(NetworkLookupError):
    """vpc / subnet 以外のリソース種別"""

    pass


class InvalidRequestTypeError(NetworkLookupError):
    """Create / Update / Delete 以外の RequestType"""

    pass


GatewayFactory = Callable[[], INetworkGateway]


class LookupNetworkAttributesUseCase:
    """
    ネットワーク属性ルックアップ ユースケース

    1. 未知の RequestType は EC2 を呼ばずに失敗
    2. Delete は EC2 を呼ばずに即座に成功
    3. EC2 クライアントを生成
    4. NameFilter を解析してリソース種別を判定
    5. DescribeVpcs / DescribeSubnets を 1 回だけ実行
    6. 1 件一致なら属性を返し、それ以外は失敗

    完了シグナルの送信は行わない。結果は常に LookupResult として返す。
    """

    def __init__(self, gateway_factory: GatewayFactory):
        self._gateway_factory = gateway_factory

    def execute(self, event: LifecycleEvent) -> LookupResult:
        """ユースケースを実行"""
        log = logger.bind(
            request_type=event.raw_request_type,
            name_filter=event.name_filter,
        )

        if event.request_type is None:
            error = InvalidRequestTypeError(
                f"Unsupported RequestType {event.raw_request_type!r}"
            )
            log.warning("lookup_failed", error_type=type(error).__name__, error=str(error))
            return LookupResult.failed(str(error))

        if event.is_delete:
            log.info("delete_acknowledged")
            return LookupResult.success()

        try:
            data = self._lookup(event)
        except NetworkLookupError as e:
            log.warning("lookup_failed", error_type=type(e).__name__, error=str(e))
            return LookupResult.failed(str(e))

        log.info("lookup_completed", **data)
        return LookupResult.success(data)

    def _lookup(self, event: LifecycleEvent) -> dict[str, str]:
        gateway = self._create_gateway()
        name_filter = parse_name_filter(event.name_filter)

        match name_filter:
            case VpcFilter(resource_id=vpc_id):
                return self._lookup_vpc(gateway, vpc_id)
            case SubnetFilter(resource_id=subnet_id):
                return self._lookup_subnet(gateway, subnet_id)
            case InvalidFilter():
                raise InvalidTypeError(
                    f"Invalid resource type for filter {name_filter.raw!r}; "
                    "expected a vpc-* or subnet-* identifier"
                )

    def _create_gateway(self) -> INetworkGateway:
        try:
            return self._gateway_factory()
        except Exception as e:
            raise ClientInitError(f"EC2 client initialization failed: {e}") from e

    def _lookup_vpc(self, gateway: INetworkGateway, vpc_id: str) -> dict[str, str]:
        """VPC の CidrBlock を取得"""
        try:
            vpcs = gateway.describe_vpcs(vpc_id)
        except Exception as e:
            raise QueryError(f"DescribeVpcs failed for {vpc_id}: {e}") from e

        logger.info("vpcs_returned", vpc_id=vpc_id, count=len(vpcs))

        if not vpcs:
            raise NoMatchError(f"No matching VPC for filter {vpc_id}")
        if len(vpcs) > 1:
            raise AmbiguousMatchError(
                f"Multiple matching VPCs for filter {vpc_id}: {len(vpcs)}"
            )

        return {"CidrBlock": vpcs[0].cidr_block}

    def _lookup_subnet(self, gateway: INetworkGateway, subnet_id: str) -> dict[str, str]:
        """サブネットの AvailabilityZone / CidrBlock / VpcId を取得"""
        try:
            subnets = gateway.describe_subnets(subnet_id)
        except Exception as e:
            raise QueryError(f"DescribeSubnets failed for {subnet_id}: {e}") from e

        logger.info("subnets_returned", subnet_id=subnet_id, count=len(subnets))

        if not subnets:
            raise NoMatchError(f"No matching subnet for filter {subnet_id}")
        if len(subnets) > 1:
            raise AmbiguousMatchError(
                f"Multiple matching subnets for filter {subnet_id}: {len(subnets)}"
            )

        subnet = subnets[0]
        return {
            "AvailabilityZone": subnet.availability_zone,
            "CidrBlock": subnet.cidr_block,
            "VpcId": subnet.vpc_id,
        }
