#!/usr/bin/env python3
"""Print the published outputs of a deployed website + API stack."""

import argparse
import json
import sys
from pathlib import Path

import boto3
from botocore.exceptions import ClientError

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from webstack.outputs import (  # noqa: E402
  MissingFieldError,
  derive_outputs,
  topology_from_stack_outputs,
)


def get_stack_outputs(stack_name: str, region: str = "us-east-1") -> dict[str, str]:
  """Read the outputs of a CloudFormation stack.

  Args:
    stack_name: The CDK stack name (e.g., 'WebsiteApi-example-com')
    region: AWS region

  Returns:
    Dictionary of OutputKey to OutputValue
  """
  cloudformation = boto3.client("cloudformation", region_name=region)
  response = cloudformation.describe_stacks(StackName=stack_name)
  stack = response["Stacks"][0]
  return {
    output["OutputKey"]: output["OutputValue"] for output in stack.get("Outputs", [])
  }


def main() -> None:
  """Main entry point."""
  parser = argparse.ArgumentParser(
    description="Show the published outputs of a website + API stack"
  )
  parser.add_argument(
    "stack_name",
    help="CDK stack name (e.g., WebsiteApi-example-com)",
  )
  parser.add_argument(
    "domain_name",
    help="Domain the stack serves (e.g., example.com)",
  )
  parser.add_argument(
    "--region",
    default="us-east-1",
    help="AWS region (default: us-east-1)",
  )
  parser.add_argument(
    "--format",
    choices=["env", "json"],
    default="env",
    help="Output format (default: env)",
  )

  args = parser.parse_args()

  try:
    stack_outputs = get_stack_outputs(args.stack_name, args.region)
    outputs = derive_outputs(topology_from_stack_outputs(args.domain_name, stack_outputs))
  except ClientError as e:
    print(f"Error reading stack {args.stack_name}: {e}", file=sys.stderr)
    sys.exit(1)
  except MissingFieldError as e:
    print(f"Error: {e}", file=sys.stderr)
    sys.exit(1)

  if args.format == "json":
    print(json.dumps(outputs, indent=2))
  else:  # env format
    for name, value in outputs.items():
      if isinstance(value, list):
        value = ",".join(value)
      print(f"{name}={value}")


if __name__ == "__main__":
  main()
