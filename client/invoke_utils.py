#!/usr/bin/env python

"""
    invoke_utils.py:
    Provides common utility functions for invoking the deployed
    lambda functions and for dispatching custom resource events locally.
"""

import json
import logging
import os
import sys

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

logger = logging.getLogger()
logger.setLevel(logging.DEBUG)

config = Config(
    retries=dict(
        max_attempts=1
    )
)

PROVIDER_DIR = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    "stacks", "customresource", "resources", "lambda", "custom_resource_provider"
)


class InvokeUtils:
    """Common utility functions for the invoke CLI."""

    @staticmethod
    def get_cloudformation_outputs(
            stack_name: str,
            region: str
        ) -> dict:

        cfn_resource = boto3.resource("cloudformation", region_name=region, config=config)

        # get stack outputs
        try:
            _stack_outputs = cfn_resource.Stack(stack_name).outputs or []
            return {output["OutputKey"]: output["OutputValue"] for output in _stack_outputs}
        except ClientError as e:
            if e.response['Error']['Code'] == 'ValidationError':
                logger.debug(f"Stack: {stack_name}, not found.")
            raise

    @staticmethod
    def invoke_function(
            function_arn: str,
            region: str,
            payload: dict = None
        ) -> str:

        lambda_client = boto3.client("lambda", region_name=region, config=config)

        response = lambda_client.invoke(
            FunctionName=function_arn,
            InvocationType="RequestResponse",
            Payload=json.dumps(payload or {}).encode("utf-8")
        )

        result = response['Payload'].read().decode("utf-8")

        if 'FunctionError' in response:
            raise ValueError(f"Function {function_arn} failed: {result}")

        return json.loads(result)

    @staticmethod
    def dispatch_local_event(event: dict) -> dict:
        """Dispatch an event through the provider registry without sending a response."""
        if PROVIDER_DIR not in sys.path:
            sys.path.insert(0, PROVIDER_DIR)

        from runtime.entry_point import dispatcher_service, request_logger
        from runtime.models import LifecycleEvent

        lifecycle_event = LifecycleEvent.from_dict(event)
        response = dispatcher_service.dispatch(lifecycle_event, None, request_logger(None))
        return response.to_dict(lifecycle_event)
