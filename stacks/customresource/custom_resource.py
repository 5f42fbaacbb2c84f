#!/usr/bin/env python

"""
    custom_resource.py:
    CDK stack which:
    * deploys the Hello World lambda function
    * deploys the custom resource provider lambda function that serves
      Custom::HelloWorldResource requests
    * declares a Custom::HelloWorldResource instance backed by the provider
"""

import os

import aws_cdk as cdk
from aws_cdk import aws_iam as iam
from aws_cdk import aws_lambda
from constructs import Construct
from utils.CdkConstants import CdkConstants
from utils.CdkUtils import CdkUtils

LAMBDA_DIR = f"{os.path.dirname(__file__)}/resources/lambda"


class CustomResourceStack(cdk.Stack):
    """
        CDK stack with a Hello World lambda function and a lambda backed
        CloudFormation custom resource.
    """

    def __init__(self, scope: Construct, id: str, **kwargs) -> None:
        super().__init__(scope, id, **kwargs)

        config = CdkUtils.get_project_settings()['customResource']

        timeout = cdk.Duration.seconds(int(config['lambdaTimeoutSeconds']))

        ##########################################################
        # <START> Hello World lambda function
        ##########################################################

        hello_world_lambda_role = iam.Role(
            scope=self,
            id="HelloWorldLmbRole",
            assumed_by=iam.ServicePrincipal("lambda.amazonaws.com"),
            managed_policies=[
                iam.ManagedPolicy.from_aws_managed_policy_name(
                    "service-role/AWSLambdaBasicExecutionRole"
                )
            ]
        )

        hello_world_lambda = aws_lambda.Function(
            scope=self,
            id="HelloWorldLmb",
            description="Hello World",
            code=aws_lambda.Code.from_asset(f"{LAMBDA_DIR}/hello_world"),
            handler=CdkConstants.HELLO_WORLD_HANDLER,
            role=hello_world_lambda_role,
            timeout=timeout,
            runtime=aws_lambda.Runtime.PYTHON_3_12,
            environment={
                'LOG_LEVEL': config['logLevel']
            }
        )

        ##########################################################
        # </END> Hello World lambda function
        ##########################################################

        ##########################################################
        # <START> Custom resource provider lambda function
        ##########################################################

        provider_asset_dir = f"{LAMBDA_DIR}/custom_resource_provider"

        # The provider only writes logs; it needs no access to other AWS resources
        provider_lambda_role = iam.Role(
            scope=self,
            id="CusResProviderLmbRole",
            assumed_by=iam.ServicePrincipal("lambda.amazonaws.com"),
            managed_policies=[
                iam.ManagedPolicy.from_aws_managed_policy_name(
                    "service-role/AWSLambdaBasicExecutionRole"
                )
            ]
        )

        provider_lambda = aws_lambda.Function(
            scope=self,
            id="CusResProviderLmb",
            description=f"Custom resource provider for {CdkConstants.HELLO_WORLD_RESOURCE_TYPE}",
            code=aws_lambda.Code.from_asset(provider_asset_dir),
            handler=CdkConstants.CUSTOM_RESOURCE_PROVIDER_HANDLER,
            role=provider_lambda_role,
            timeout=timeout,
            runtime=aws_lambda.Runtime.PYTHON_3_12,
            environment={
                'LOG_LEVEL': config['logLevel']
            }
        )

        ##########################################################
        # </END> Custom resource provider lambda function
        ##########################################################

        ##########################################################
        # <START> Hello World custom resource
        ##########################################################

        # The lambda function is the service token; it answers CloudFormation
        # directly through the ResponseURL of each request.
        hello_world_resource = cdk.CustomResource(
            self,
            "HelloWorldCusRes",
            service_token=provider_lambda.function_arn,
            resource_type=CdkConstants.HELLO_WORLD_RESOURCE_TYPE,
            properties={
                'Message': config['message'],
                # a new provider code bundle triggers an Update of the resource
                'CodeHash': CdkUtils.directory_hash(provider_asset_dir)
            }
        )

        ##########################################################
        # </END> Hello World custom resource
        ##########################################################

        # outputs
        cdk.CfnOutput(
            self,
            "hello-world-function-arn-output",
            value=hello_world_lambda.function_arn,
            description="ARN of the Hello World lambda function",
        ).override_logical_id(CdkConstants.HELLO_WORLD_FUNCTION_ARN)

        cdk.CfnOutput(
            self,
            "custom-resource-provider-function-arn-output",
            value=provider_lambda.function_arn,
            description="ARN of the custom resource provider lambda function",
        ).override_logical_id(CdkConstants.CUSTOM_RESOURCE_PROVIDER_FUNCTION_ARN)

        cdk.CfnOutput(
            self,
            "hello-world-resource-output",
            value=hello_world_resource.get_att_string("Resource"),
            description="Resource attribute returned by the Hello World custom resource",
        ).override_logical_id(CdkConstants.HELLO_WORLD_RESOURCE_OUTPUT)

        ##################################################
        ## <START> Export values for consumption
        ## by other stacks
        ##################################################

        self.hello_world_function_arn = hello_world_lambda.function_arn
        self.provider_function_arn = provider_lambda.function_arn

        ##################################################
        ## </END> Export values for consumption
        ## by other stacks
        ##################################################
