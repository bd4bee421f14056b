"""Composite construct for a static website with an API."""

from aws_cdk import CfnOutput, Fn, RemovalPolicy, Stack
from constructs import Construct

from webstack.outputs import OUTPUT_BINDINGS, ResourceTopology, derive_outputs

from .api import HttpApiGateway
from .certificate import DnsValidatedCertificate
from .distribution import CloudFrontDistribution
from .dns import DnsRecords
from .storage import StorageBucket


class WebsiteApiConstruct(Construct):
  """Complete static website + API infrastructure.

  Creates:
  - Private S3 bucket for client files
  - CloudFront distribution with HTTPS and origin access control
  - ACM certificate (DNS validated) covering site and API domains
  - Route 53 hosted zone with alias records
  - HTTP API Gateway with a Lambda handler on the API subdomain
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    api_domain_prefix: str = "api",
    include_www: bool = True,
    removal_policy: RemovalPolicy = RemovalPolicy.RETAIN,
  ) -> None:
    super().__init__(scope, id)

    stack_name = Stack.of(self).stack_name
    api_domain = f"{api_domain_prefix}.{domain_name}"

    self.bucket = StorageBucket(
      self,
      f"{stack_name}-bucket",
      removal_policy=removal_policy,
    )

    self.dns = DnsRecords(
      self,
      f"{stack_name}-dns",
      domain_name=domain_name,
      resource_prefix=stack_name,
    )

    self.certificate = DnsValidatedCertificate(
      self,
      f"{stack_name}-certificate",
      domain_name=domain_name,
      api_domain=api_domain,
      hosted_zone=self.dns.hosted_zone,
      include_www=include_www,
    )

    self.distribution = CloudFrontDistribution(
      self,
      f"{stack_name}-distribution",
      bucket=self.bucket.bucket,
      certificate=self.certificate.certificate,
      domain_name=domain_name,
      include_www=include_www,
    )

    self.dns.create_cloudfront_records(
      distribution=self.distribution.distribution,
      include_www=include_www,
    )

    site_origins = [f"https://{domain_name}"]
    if include_www:
      site_origins.append(f"https://www.{domain_name}")

    self.api = HttpApiGateway(
      self,
      f"{stack_name}-api",
      api_domain=api_domain,
      certificate=self.certificate.certificate,
      allowed_origins=site_origins,
      resource_prefix=stack_name,
    )

    self.dns.create_api_record(self.api.domain_name, record_name=api_domain)

    self.topology = ResourceTopology(
      domain_name=domain_name,
      bucket_name=self.bucket.bucket.bucket_name,
      distribution_id=self.distribution.distribution.distribution_id,
      distribution_domain_name=self.distribution.distribution.distribution_domain_name,
      api_endpoint=self.api.api_endpoint,
      zone_nameservers={domain_name: self.dns.hosted_zone.hosted_zone_name_servers},
    )

    # Outputs
    outputs = derive_outputs(self.topology)
    for binding in OUTPUT_BINDINGS:
      value = outputs[binding.name]
      if isinstance(value, list):
        value = Fn.join(",", value)
      output = CfnOutput(
        self,
        binding.output_key,
        value=value,
        description=binding.description,
      )
      output.override_logical_id(binding.output_key)
