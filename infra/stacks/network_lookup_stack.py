"""
Network Lookup Stack

ユーザー指定の VPC / サブネット ID から属性を参照するカスタムリソース:
- Parameters (VpcName, SubnetName)
- Lambda Execution Role (CloudWatch Logs, ec2:Describe*)
- Lookup Lambda Function
- Custom Resources (VpcInfo, SubnetInfo)
- Outputs
"""
from aws_cdk import (
    BundlingOptions,
    CfnOutput,
    CfnParameter,
    CustomResource,
    Duration,
    Stack,
    aws_iam as iam,
    aws_lambda as lambda_,
)
from constructs import Construct

LOOKUP_HANDLER = 'src.handlers.lookup.handler.lambda_handler'


def bundled_lookup_code(project_root: str = '.') -> lambda_.Code:
    """依存ライブラリと src パッケージを同梱したアセット"""
    return lambda_.Code.from_asset(
        project_root,
        bundling=BundlingOptions(
            image=lambda_.Runtime.PYTHON_3_12.bundling_image,
            command=[
                'bash', '-c',
                'pip install . -t /asset-output',
            ],
        ),
        exclude=['cdk.out', '.git', 'tests', '**/__pycache__'],
    )


class NetworkLookupStack(Stack):
    """VPC / サブネット属性ルックアップのスタック。"""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        code: lambda_.Code | None = None,
        **kwargs
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # =================================================================
        # Parameters
        # =================================================================

        subnet_name = CfnParameter(
            self, 'SubnetName',
            type='AWS::EC2::Subnet::Id',
            description='Subnet Identifier',
        )

        vpc_name = CfnParameter(
            self, 'VpcName',
            type='AWS::EC2::VPC::Id',
            description='VPC Identifier',
        )

        # =================================================================
        # Lambda Execution Role
        # =================================================================

        self.execution_role = iam.Role(
            self, 'LambdaExecutionRole',
            assumed_by=iam.ServicePrincipal('lambda.amazonaws.com'),
            path='/',
            inline_policies={
                'root': iam.PolicyDocument(
                    statements=[
                        iam.PolicyStatement(
                            actions=[
                                'logs:CreateLogGroup',
                                'logs:CreateLogStream',
                                'logs:PutLogEvents',
                            ],
                            resources=['arn:aws:logs:*:*:*'],
                        ),
                        iam.PolicyStatement(
                            actions=[
                                'ec2:DescribeSubnets',
                                'ec2:DescribeVpcs',
                            ],
                            resources=['*'],
                        ),
                    ]
                ),
            },
        )

        # =================================================================
        # Lookup Lambda
        # =================================================================

        self.lookup_fn = lambda_.Function(
            self, 'GetAttFromParam',
            description='Look up info from a VPC or subnet ID',
            runtime=lambda_.Runtime.PYTHON_3_12,
            handler=LOOKUP_HANDLER,
            code=code or bundled_lookup_code(),
            memory_size=128,
            timeout=Duration.seconds(30),
            role=self.execution_role,
            environment={
                'NETLOOKUP_ENVIRONMENT': 'production',
                'NETLOOKUP_LOG_LEVEL': 'INFO',
            },
        )

        # =================================================================
        # Custom Resources
        # =================================================================

        vpc_info = CustomResource(
            self, 'VpcInfo',
            service_token=self.lookup_fn.function_arn,
            resource_type='Custom::VpcInfo',
            properties={'NameFilter': vpc_name.value_as_string},
        )

        subnet_info = CustomResource(
            self, 'SubnetInfo',
            service_token=self.lookup_fn.function_arn,
            resource_type='Custom::SubnetInfo',
            properties={'NameFilter': subnet_name.value_as_string},
        )

        # =================================================================
        # Outputs
        # =================================================================

        CfnOutput(
            self, 'VPCCidrBlock',
            description='VPC CidrBlock',
            value=vpc_info.get_att_string('CidrBlock'),
        )
        CfnOutput(
            self, 'SubnetAvailabilityZone',
            description='Subnet AvailabilityZone',
            value=subnet_info.get_att_string('AvailabilityZone'),
        )
        CfnOutput(
            self, 'SubnetCidrBlock',
            description='Subnet CidrBlock',
            value=subnet_info.get_att_string('CidrBlock'),
        )
        CfnOutput(
            self, 'SubnetVpcId',
            description='Subnet VpcId',
            value=subnet_info.get_att_string('VpcId'),
        )
