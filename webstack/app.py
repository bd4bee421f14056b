#!/usr/bin/env python3
"""CDK application entry point for website + API infrastructure."""

import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk
import boto3
import yaml

from webstack.config import Config
from webstack.stacks import WebsiteApiStack


def get_account_id() -> str:
  """Get AWS account ID from current credentials."""
  sts = boto3.client("sts")
  return str(sts.get_caller_identity()["Account"])


def report_failures(config: Config) -> bool:
  """Print every validation error and duplicate stack name to stderr.

  Returns:
    True if the configuration must not be synthesized.
  """
  failures = config.validate()
  for index, errors in failures.items():
    deployment = config.deployments[index]
    print(f"deployments[{index}] ({deployment.stack_name}):", file=sys.stderr)
    for error in errors:
      print(f"  - {error}", file=sys.stderr)

  duplicates = config.duplicate_stack_names()
  for stack_name in duplicates:
    print(
      f"Duplicate stack name {stack_name}: domain_name must be unique",
      file=sys.stderr,
    )

  return bool(failures or duplicates)


def main() -> None:
  """Create CDK app with a stack for each configured deployment."""
  app = cdk.App()

  # Load configuration
  config_path = app.node.try_get_context("config") or "deployments.yaml"
  try:
    config = Config.from_yaml(Path(config_path))
  except (OSError, KeyError, yaml.YAMLError) as e:
    print(f"Error loading {config_path}: {e}", file=sys.stderr)
    sys.exit(1)

  # Refuse to synthesize anything while any input is invalid
  if report_failures(config):
    sys.exit(1)

  # Get account ID from credentials
  account_id = get_account_id()

  for deployment in config.deployments:
    WebsiteApiStack(
      app,
      deployment.stack_name,
      deployment_config=deployment,
      env=cdk.Environment(
        account=account_id,
        region=deployment.region,
      ),
      description=(
        f"Static website and API infrastructure for {deployment.domain_name}"
      ),
    )

  app.synth()


if __name__ == "__main__":
  main()
