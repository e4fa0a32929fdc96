"""EC2 Gateways"""
from .ec2_network_gateway import Ec2NetworkGateway

__all__ = ["Ec2NetworkGateway"]
