"""Pytest fixtures for configuration and CDK construct tests."""

from typing import Any

import aws_cdk as cdk
import pytest

from webstack.outputs import ResourceTopology


@pytest.fixture
def app() -> cdk.App:
  """Create a CDK App for testing."""
  return cdk.App()


@pytest.fixture
def stack(app: cdk.App) -> cdk.Stack:
  """Create a CDK Stack for testing."""
  return cdk.Stack(app, "TestStack", env=cdk.Environment(region="us-east-1"))


@pytest.fixture
def valid_values() -> dict[str, Any]:
  """Config values that pass every rule."""
  return {
    "region": "us-east-1",
    "domain_name": "example.com",
    "api_domain_prefix": "api",
  }


@pytest.fixture
def topology() -> ResourceTopology:
  """A fully populated topology for example.com."""
  return ResourceTopology(
    domain_name="example.com",
    bucket_name="example-com-client-files",
    distribution_id="E2QWRUHAPOMQZL",
    distribution_domain_name="d111111abcdef8.cloudfront.net",
    api_endpoint="https://a1b2c3d4e5.execute-api.us-east-1.amazonaws.com",
    zone_nameservers={
      "example.com": [
        "ns-2048.awsdns-64.com",
        "ns-2049.awsdns-65.net",
        "ns-2050.awsdns-66.org",
        "ns-2051.awsdns-67.co.uk",
      ]
    },
  )
