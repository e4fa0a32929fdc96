"""Network Lookup Handler"""
from .handler import handle, lambda_handler

__all__ = ["handle", "lambda_handler"]
