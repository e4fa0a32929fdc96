"""CloudFormation Gateways"""
from .cfn_response_gateway import CfnResponseGateway

__all__ = ["CfnResponseGateway"]
