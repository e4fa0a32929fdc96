"""Network Use Cases"""
from .lookup_network_attributes import (
    AmbiguousMatchError,
    ClientInitError,
    GatewayFactory,
    InvalidRequestTypeError,
    InvalidTypeError,
    LookupNetworkAttributesUseCase,
    NetworkLookupError,
    NoMatchError,
    QueryError,
)

__all__ = [
    "AmbiguousMatchError",
    "ClientInitError",
    "GatewayFactory",
    "InvalidRequestTypeError",
    "InvalidTypeError",
    "LookupNetworkAttributesUseCase",
    "NetworkLookupError",
    "NoMatchError",
    "QueryError",
]
