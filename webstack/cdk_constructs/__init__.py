"""CDK constructs for website + API infrastructure."""

from .api import HttpApiGateway
from .certificate import DnsValidatedCertificate
from .distribution import CloudFrontDistribution
from .dns import DnsRecords
from .storage import StorageBucket
from .website_api import WebsiteApiConstruct

__all__ = [
  "CloudFrontDistribution",
  "DnsRecords",
  "DnsValidatedCertificate",
  "HttpApiGateway",
  "StorageBucket",
  "WebsiteApiConstruct",
]
