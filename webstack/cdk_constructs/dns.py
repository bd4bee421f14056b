"""Route 53 DNS constructs."""

from aws_cdk import aws_apigatewayv2 as apigwv2
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_route53 as route53
from aws_cdk import aws_route53_targets as targets
from constructs import Construct


class DnsRecords(Construct):
  """Route 53 hosted zone and alias records for the site and API."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    resource_prefix: str = "",
  ) -> None:
    super().__init__(scope, id)

    self.domain_name = domain_name
    self._resource_prefix = resource_prefix

    self.hosted_zone = route53.HostedZone(
      self,
      f"{resource_prefix}-hosted-zone" if resource_prefix else "HostedZone",
      zone_name=domain_name,
    )

  def create_cloudfront_records(
    self,
    distribution: cloudfront.IDistribution,
    include_www: bool = True,
  ) -> None:
    """Create A and AAAA records pointing to CloudFront distribution."""
    prefix = self._resource_prefix
    target = route53.RecordTarget.from_alias(targets.CloudFrontTarget(distribution))

    record_names = [self.domain_name]
    if include_www:
      record_names.append(f"www.{self.domain_name}")

    for record_name in record_names:
      label = "www" if record_name.startswith("www.") else "apex"
      route53.ARecord(
        self,
        f"{prefix}-{label}-a-record" if prefix else f"{label.title()}ARecord",
        zone=self.hosted_zone,
        record_name=record_name,
        target=target,
      )
      route53.AaaaRecord(
        self,
        f"{prefix}-{label}-aaaa-record" if prefix else f"{label.title()}AAAARecord",
        zone=self.hosted_zone,
        record_name=record_name,
        target=target,
      )

  def create_api_record(
    self,
    api_domain: apigwv2.IDomainName,
    record_name: str,
  ) -> None:
    """Create an A record for record_name pointing at the API Gateway domain."""
    prefix = self._resource_prefix
    route53.ARecord(
      self,
      f"{prefix}-api-a-record" if prefix else "ApiARecord",
      zone=self.hosted_zone,
      record_name=record_name,
      target=route53.RecordTarget.from_alias(
        targets.ApiGatewayv2DomainProperties(
          api_domain.regional_domain_name,
          api_domain.regional_hosted_zone_id,
        )
      ),
    )
