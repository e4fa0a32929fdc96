#!/usr/bin/env python3
"""
CDK Application Entry Point

Network Lookup - VPC / サブネット ID から属性を参照するカスタムリソースをデプロイ。
"""
import os
import aws_cdk as cdk

from infra.stacks.network_lookup_stack import NetworkLookupStack

app = cdk.App()

# 環境設定
env = cdk.Environment(
    account=os.environ.get('CDK_DEFAULT_ACCOUNT'),
    region=os.environ.get('CDK_DEFAULT_REGION', 'us-east-1'),
)

NetworkLookupStack(
    app,
    'GetAttFromParam',
    env=env,
    description='Get info from an Amazon VPC or subnet',
)

app.synth()
