"""ACM certificate with DNS validation."""

from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_route53 as route53
from constructs import Construct


class DnsValidatedCertificate(Construct):
  """ACM certificate for the site and API domains (no email approval needed)."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    api_domain: str,
    hosted_zone: route53.IHostedZone,
    include_www: bool = True,
  ) -> None:
    super().__init__(scope, id)

    subject_alternative_names = [api_domain]
    if include_www:
      subject_alternative_names.insert(0, f"www.{domain_name}")

    self.certificate = acm.Certificate(
      self,
      "Certificate",
      domain_name=domain_name,
      subject_alternative_names=subject_alternative_names,
      validation=acm.CertificateValidation.from_dns(hosted_zone),
    )
