"""Network Lifecycle Events"""
from .lifecycle_event import InvalidEventError, LifecycleEvent, RequestType

__all__ = ["InvalidEventError", "LifecycleEvent", "RequestType"]
