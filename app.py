#!/usr/bin/env python3
import os

import aws_cdk as cdk

from stacks.customresource.custom_resource import CustomResourceStack
from utils.CdkUtils import CdkUtils

app = cdk.App()

config = CdkUtils.get_project_settings()['customResource']

# The stack name is scoped to the current user so several developers can
# deploy into the same account without collisions.
stack_name = CdkUtils.user_account_scoped_stack_name(config['stackBaseName'])

CustomResourceStack(
    app,
    stack_name,
    description=config['description'],

    # If you don't specify 'env', this stack will be environment-agnostic.
    env=cdk.Environment(account=os.getenv('CDK_DEFAULT_ACCOUNT'), region=os.getenv('CDK_DEFAULT_REGION')),
)

app.synth()
