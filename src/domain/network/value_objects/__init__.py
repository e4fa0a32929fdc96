"""Network Value Objects"""
from .lookup_result import CompletionStatus, LookupResult
from .name_filter import (
    InvalidFilter,
    NameFilter,
    NetworkResourceType,
    SubnetFilter,
    VpcFilter,
    parse_name_filter,
)

__all__ = [
    "CompletionStatus",
    "LookupResult",
    "InvalidFilter",
    "NameFilter",
    "NetworkResourceType",
    "SubnetFilter",
    "VpcFilter",
    "parse_name_filter",
]
