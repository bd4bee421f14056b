"""HTTP API Gateway backed by a Lambda handler."""

from aws_cdk import Duration
from aws_cdk import aws_apigatewayv2 as apigwv2
from aws_cdk import aws_apigatewayv2_integrations as integrations
from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_lambda as lambda_
from constructs import Construct


class HttpApiGateway(Construct):
  """HTTP API on a custom domain (e.g. api.example.com).

  The API answers CORS requests from the website's own origins.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    api_domain: str,
    certificate: acm.ICertificate,
    allowed_origins: list[str],
    resource_prefix: str = "",
  ) -> None:
    super().__init__(scope, id)

    self.handler = lambda_.Function(
      self,
      f"{resource_prefix}-api-lambda" if resource_prefix else "Handler",
      runtime=lambda_.Runtime.PYTHON_3_12,
      handler="index.handler",
      code=lambda_.Code.from_inline(self._get_handler_code()),
      timeout=Duration.seconds(10),
    )

    self.domain_name = apigwv2.DomainName(
      self,
      f"{resource_prefix}-api-domain" if resource_prefix else "DomainName",
      domain_name=api_domain,
      certificate=certificate,
    )

    self.http_api = apigwv2.HttpApi(
      self,
      f"{resource_prefix}-http-api" if resource_prefix else "HttpApi",
      api_name=f"{resource_prefix}-api" if resource_prefix else None,
      default_integration=integrations.HttpLambdaIntegration(
        "DefaultIntegration", self.handler
      ),
      default_domain_mapping=apigwv2.DomainMappingOptions(
        domain_name=self.domain_name,
      ),
      cors_preflight=apigwv2.CorsPreflightOptions(
        allow_origins=allowed_origins,
        allow_methods=[apigwv2.CorsHttpMethod.ANY],
        allow_headers=["Content-Type", "Authorization"],
        max_age=Duration.hours(1),
      ),
    )

  @property
  def api_endpoint(self) -> str:
    return self.http_api.api_endpoint

  def _get_handler_code(self) -> str:
    return """
import json

def handler(event, context):
    path = event.get("rawPath", "/")
    print(f"Request: {event.get('requestContext', {}).get('http', {}).get('method')} {path}")

    if path == "/health":
        body = {"status": "ok"}
    else:
        body = {"message": "Not found", "path": path}

    return {
        "statusCode": 200 if path == "/health" else 404,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }
"""
