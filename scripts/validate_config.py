#!/usr/bin/env python3
"""Validate a deployments configuration file without synthesizing."""

import argparse
import sys
from pathlib import Path

import yaml

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from webstack.config import Config  # noqa: E402


def main() -> None:
  """Validate every deployment in the config file."""
  parser = argparse.ArgumentParser(description="Validate deployment configuration")
  parser.add_argument(
    "config",
    nargs="?",
    default="deployments.yaml",
    help="Path to the YAML config (default: deployments.yaml)",
  )
  args = parser.parse_args()

  try:
    config = Config.from_yaml(Path(args.config))
  except (OSError, KeyError, yaml.YAMLError) as e:
    print(f"Error loading {args.config}: {e}", file=sys.stderr)
    sys.exit(1)

  failures = config.validate()
  for index, deployment in enumerate(config.deployments):
    errors = failures.get(index)
    if not errors:
      print(f"✓ {deployment.domain_name} (api: {deployment.api_domain})")
      continue
    print(f"✗ deployments[{index}] ({deployment.stack_name})", file=sys.stderr)
    for error in errors:
      print(f"  - {error}", file=sys.stderr)

  duplicates = config.duplicate_stack_names()
  for stack_name in duplicates:
    print(
      f"✗ Duplicate stack name {stack_name}: domain_name must be unique",
      file=sys.stderr,
    )

  if failures or duplicates:
    sys.exit(1)


if __name__ == "__main__":
  main()
