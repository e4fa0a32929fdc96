"""NameFilter Parse Unit Tests"""
import pytest

from src.domain.network import (
    InvalidFilter,
    NetworkResourceType,
    SubnetFilter,
    VpcFilter,
    parse_name_filter,
)


class TestParseNameFilter:
    """NameFilter 解析のテスト"""

    def test_vpc_prefix(self):
        """正常: vpc- で始まるフィルタは VpcFilter"""
        result = parse_name_filter("vpc-0a1b2c3d")

        assert result == VpcFilter(resource_id="vpc-0a1b2c3d")
        assert result.resource_type == NetworkResourceType.VPC

    def test_subnet_prefix(self):
        """正常: subnet- で始まるフィルタは SubnetFilter"""
        result = parse_name_filter("subnet-0a1b2c3d")

        assert result == SubnetFilter(resource_id="subnet-0a1b2c3d")
        assert result.resource_type == NetworkResourceType.SUBNET

    def test_full_filter_is_kept_as_identifier(self):
        """正常: 最初の '-' で分割しても識別子はフィルタ全体"""
        result = parse_name_filter("vpc-abc-def")

        assert isinstance(result, VpcFilter)
        assert result.resource_id == "vpc-abc-def"

    @pytest.mark.parametrize("raw", ["igw-0a1b2c3d", "sg-1234", "vpcx-1234", "VPC-1234", "-vpc-1234"])
    def test_unknown_prefix_is_invalid(self, raw):
        """異常: vpc / subnet 以外のプレフィックスは InvalidFilter"""
        result = parse_name_filter(raw)

        assert result == InvalidFilter(raw=raw)

    @pytest.mark.parametrize("raw", [None, "", 42, ["vpc-1234"]])
    def test_missing_or_non_string_is_invalid(self, raw):
        """異常: 文字列でない NameFilter は InvalidFilter"""
        result = parse_name_filter(raw)

        assert isinstance(result, InvalidFilter)

    def test_invalid_filter_prefix(self):
        """正常: InvalidFilter はログ用にプレフィックスを返す"""
        assert InvalidFilter(raw="igw-0a1b").prefix == "igw"
        assert InvalidFilter(raw=None).prefix is None
