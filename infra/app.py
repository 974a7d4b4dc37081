#!/usr/bin/env python3
import os
import aws_cdk as cdk
from stacks.discovery_stack import DiscoveryStack

app = cdk.App()

env = cdk.Environment(
    account=os.getenv("CDK_DEFAULT_ACCOUNT"),
    region=os.getenv("CDK_DEFAULT_REGION", "eu-central-1"),
)

# Stack id follows the stackName context so several copies can share an account
stack_id = app.node.try_get_context("stackName") or "ServiceDiscoveryExample"
DiscoveryStack(app, stack_id, env=env)

app.synth()
