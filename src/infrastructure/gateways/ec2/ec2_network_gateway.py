"""EC2 Network Gateway Implementation"""
from __future__ import annotations

from typing import Any

import boto3
import structlog
from botocore.exceptions import ClientError

from src.application.ports.gateways import INetworkGateway, SubnetRecord, VpcRecord

logger = structlog.get_logger()


class Ec2NetworkGateway(INetworkGateway):
    """
    EC2 Network Gateway

    DescribeVpcs / DescribeSubnets を識別子の完全一致で呼び出す。
    リトライやキャッシュは行わず、例外はそのまま呼び出し元に伝播する。
    """

    def __init__(
        self,
        region: str = "us-east-1",
        endpoint_url: str | None = None,
        client: Any = None,
    ):
        self.region = region
        if client is not None:
            self._client = client
        else:
            kwargs: dict[str, Any] = {"region_name": region}
            if endpoint_url:
                kwargs["endpoint_url"] = endpoint_url
            self._client = boto3.client("ec2", **kwargs)

    def describe_vpcs(self, vpc_id: str) -> list[VpcRecord]:
        """VPC を識別子で検索"""
        log = logger.bind(vpc_id=vpc_id)
        try:
            response = self._client.describe_vpcs(VpcIds=[vpc_id])
        except ClientError as e:
            log.error("describe_vpcs_failed", error=e.response.get("Error", {}))
            raise

        return [
            VpcRecord(vpc_id=vpc["VpcId"], cidr_block=vpc["CidrBlock"])
            for vpc in response.get("Vpcs", [])
        ]

    def describe_subnets(self, subnet_id: str) -> list[SubnetRecord]:
        """サブネットを識別子で検索"""
        log = logger.bind(subnet_id=subnet_id)
        try:
            response = self._client.describe_subnets(SubnetIds=[subnet_id])
        except ClientError as e:
            log.error("describe_subnets_failed", error=e.response.get("Error", {}))
            raise

        return [
            SubnetRecord(
                subnet_id=subnet["SubnetId"],
                availability_zone=subnet["AvailabilityZone"],
                cidr_block=subnet["CidrBlock"],
                vpc_id=subnet["VpcId"],
            )
            for subnet in response.get("Subnets", [])
        ]
