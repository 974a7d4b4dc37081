# infra/stacks/discovery_stack.py

from pathlib import Path

from aws_cdk import (
    Stack,
    Duration,
    CfnOutput,
    aws_lambda as _lambda,
    aws_apigateway as apigw,
    aws_servicediscovery as servicediscovery,
)
from constructs import Construct

HANDLER_DIR = Path(__file__).resolve().parents[2] / "backend" / "handler"
STAGE_NAME = "prod"


class DiscoveryStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # =========
        # Context
        # =========
        stack_name_ctx = self.node.try_get_context("stackName") or "ServiceDiscoveryExample"
        service_name = self.node.try_get_context("serviceName") or "api-service"
        namespace_name = self.node.try_get_context("namespaceName") or "discovery.example"

        # =============
        # Lambda (API)
        # =============
        api_lambda = _lambda.Function(
            self,
            "ApiLambda",
            runtime=_lambda.Runtime.PYTHON_3_12,
            handler="app.handler",
            code=_lambda.Code.from_asset(str(HANDLER_DIR)),
            memory_size=128,
            timeout=Duration.seconds(10),
            environment={
                "SERVICE_NAME": service_name,
                "LOG_LEVEL": "INFO",
            },
        )

        # ===========
        # API Gateway
        # ===========
        # CORS preflight matches the headers the handler sends back
        api = apigw.LambdaRestApi(
            self,
            "Api",
            handler=api_lambda,
            proxy=True,
            deploy_options=apigw.StageOptions(stage_name=STAGE_NAME),
            default_cors_preflight_options=apigw.CorsOptions(
                allow_origins=apigw.Cors.ALL_ORIGINS,
                allow_methods=["GET", "POST", "OPTIONS"],
                allow_headers=["Content-Type"],
            ),
        )

        # =========
        # Cloud Map
        # =========
        namespace = servicediscovery.HttpNamespace(
            self,
            "Namespace",
            name=namespace_name,
            description="HTTP namespace for the service discovery example",
        )

        service = namespace.create_service(
            "ApiService",
            name=service_name,
            description="Lambda-backed API registered for discovery",
        )

        # Clients resolve the endpoint with DiscoverInstances
        service.register_non_ip_instance(
            "ApiInstance",
            instance_id="api",
            custom_attributes={
                "url": api.url,
                "stage": STAGE_NAME,
                "function": api_lambda.function_name,
            },
        )

        # =======
        # Outputs
        # =======
        CfnOutput(self, "StackName", value=stack_name_ctx)
        CfnOutput(self, "ApiUrl", value=api.url)
        CfnOutput(self, "FunctionName", value=api_lambda.function_name)
        CfnOutput(self, "NamespaceName", value=namespace.namespace_name)
        CfnOutput(self, "NamespaceId", value=namespace.namespace_id)
        CfnOutput(self, "ServiceId", value=service.service_id)
