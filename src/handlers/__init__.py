"""
Lambda Handlers for Network Lookup

CloudFormation カスタムリソースのエントリポイント:
- Lookup (VPC / Subnet 属性の参照)
"""
