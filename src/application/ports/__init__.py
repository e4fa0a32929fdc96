"""Application Ports (Interfaces)"""
from .gateways import ICompletionNotifier, INetworkGateway, SubnetRecord, VpcRecord

__all__ = [
    "ICompletionNotifier",
    "INetworkGateway",
    "SubnetRecord",
    "VpcRecord",
]
