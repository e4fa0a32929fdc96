"""Network Domain Module"""
from .events.lifecycle_event import InvalidEventError, LifecycleEvent, RequestType
from .value_objects.lookup_result import CompletionStatus, LookupResult
from .value_objects.name_filter import (
    InvalidFilter,
    NameFilter,
    NetworkResourceType,
    SubnetFilter,
    VpcFilter,
    parse_name_filter,
)

__all__ = [
    "InvalidEventError",
    "LifecycleEvent",
    "RequestType",
    "CompletionStatus",
    "LookupResult",
    "InvalidFilter",
    "NameFilter",
    "NetworkResourceType",
    "SubnetFilter",
    "VpcFilter",
    "parse_name_filter",
]
