"""CDK stack for a single website + API deployment."""

from typing import Any

import aws_cdk as cdk
from constructs import Construct

from webstack.cdk_constructs import WebsiteApiConstruct
from webstack.config import DeploymentConfig
from webstack.validation import ensure_valid

# CloudFront only accepts ACM certificates issued in us-east-1
CLOUDFRONT_CERTIFICATE_REGION = "us-east-1"


class WebsiteApiStack(cdk.Stack):
  """Stack for a single website + API deployment."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    deployment_config: DeploymentConfig,
    **kwargs: Any,
  ) -> None:
    ensure_valid(deployment_config.config_values())

    super().__init__(scope, id, **kwargs)

    self.site = WebsiteApiConstruct(
      self,
      "Site",
      domain_name=deployment_config.domain_name,
      api_domain_prefix=deployment_config.api_domain_prefix,
      include_www=deployment_config.include_www,
      removal_policy=deployment_config.removal_policy,
    )

    if deployment_config.region != CLOUDFRONT_CERTIFICATE_REGION:
      cdk.Annotations.of(self).add_warning(
        f"Region {deployment_config.region} is not {CLOUDFRONT_CERTIFICATE_REGION}; "
        "CloudFront will reject the site certificate"
      )

    # Tag resources with owner info
    cdk.Tags.of(self).add("Owner", deployment_config.owner)
    cdk.Tags.of(self).add("OwnerEmail", deployment_config.email)
    cdk.Tags.of(self).add("Project", "website-api")
    cdk.Tags.of(self).add("Environment", deployment_config.environment)
    cdk.Tags.of(self).add("Domain", deployment_config.domain_name)
