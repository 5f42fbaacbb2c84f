#!/usr/bin/env python

"""
    cli_invoke.py: A CLI utility that allows for:
        * invoking the deployed Hello World lambda function (default behaviour)
        * dispatching a CloudFormation custom resource event file locally through
          the custom resource provider, without sending a response to CloudFormation

    See the README.md for further information.
"""

import argparse
import json
import logging
import os
import sys
import traceback

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from client.invoke_utils import InvokeUtils
from utils.CdkConstants import CdkConstants
from utils.CdkUtils import CdkUtils

# set logging
logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=logging.INFO
)
logger = logging.getLogger()


def invoke_hello_world(args) -> None:
    stack_name = args.stack_name
    if stack_name is None:
        config = CdkUtils.get_project_settings()['customResource']
        stack_name = CdkUtils.user_account_scoped_stack_name(config['stackBaseName'])

    outputs = InvokeUtils.get_cloudformation_outputs(stack_name, args.region)
    function_arn = outputs[CdkConstants.HELLO_WORLD_FUNCTION_ARN]

    result = InvokeUtils.invoke_function(function_arn, args.region)

    print("")
    print("#############################################")
    print(f"{stack_name} Hello World response == {result}")
    print(f"{stack_name} custom resource output == {outputs.get(CdkConstants.HELLO_WORLD_RESOURCE_OUTPUT)}")
    print("#############################################")
    print("")


def dispatch_event(args) -> None:
    with open(args.event, 'r') as event_file:
        event = json.loads(event_file.read())

    print(json.dumps(InvokeUtils.dispatch_local_event(event), indent=2))


def main(args) -> None:

    try:
        if args.event is not None:
            dispatch_event(args)
        else:
            invoke_hello_world(args)

    except Exception as e:
        traceback.print_exception(type(e), value=e, tb=e.__traceback__)
        logger.error(f"ERROR attempting to invoke: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(prog='python3 cli_invoke.py')

    parser.add_argument(
        '--stack_name',
        help='deployed stack name, defaults to the user scoped stack name',
        type=str,
        default=None,
        required=False
    )

    parser.add_argument(
        '--region',
        help='AWS Region',
        type=str,
        default="us-east-1",
        required=False
    )

    parser.add_argument(
        '--event',
        help='path to a CloudFormation custom resource event JSON file to dispatch locally',
        type=str,
        default=None,
        required=False
    )

    args = parser.parse_args()

    main(args)
