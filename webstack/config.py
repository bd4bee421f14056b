"""Configuration loader for website + API deployments."""

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from aws_cdk import RemovalPolicy

from webstack.validation import ValidationError, validate


@dataclass
class DeploymentConfig:
  """Configuration for a single website + API deployment."""

  domain_name: str | None
  owner: str
  email: str
  region: str = "us-east-1"
  api_domain_prefix: str = "api"
  environment: str = "prod"
  include_www: bool = True
  removal_policy: RemovalPolicy = RemovalPolicy.RETAIN

  @property
  def api_domain(self) -> str:
    return f"{self.api_domain_prefix}.{self.domain_name}"

  @property
  def stack_name(self) -> str:
    # domain_name is unvalidated here and may be missing or non-string
    domain = "" if self.domain_name is None else str(self.domain_name)
    return f"WebsiteApi-{domain.replace('.', '-')}"

  def config_values(self) -> dict[str, Any]:
    """Inputs checked by the validator.

    A missing domain_name is left out so the validator reports it as required.
    """
    values: dict[str, Any] = {
      "region": self.region,
      "api_domain_prefix": self.api_domain_prefix,
    }
    if self.domain_name is not None:
      values["domain_name"] = self.domain_name
    return values


@dataclass
class Config:
  """Multi-deployment configuration."""

  deployments: list[DeploymentConfig] = field(default_factory=list)

  @classmethod
  def from_yaml(cls, path: Path | str = "deployments.yaml") -> "Config":
    """Load configuration from YAML file."""
    with open(path) as f:
      data = yaml.safe_load(f) or {}

    defaults = data.get("defaults", {})
    deployments: list[DeploymentConfig] = []

    for deployment_data in data.get("deployments", []):
      # Merge defaults with deployment-specific config
      merged = {**defaults, **deployment_data}

      removal_policy_str = str(merged.get("removal_policy", "retain"))
      removal_policy = {
        "retain": RemovalPolicy.RETAIN,
        "destroy": RemovalPolicy.DESTROY,
        "snapshot": RemovalPolicy.SNAPSHOT,
      }.get(removal_policy_str.lower(), RemovalPolicy.RETAIN)

      deployments.append(
        DeploymentConfig(
          domain_name=merged.get("domain_name"),
          owner=merged["owner"],
          email=merged["email"],
          region=merged.get("region", "us-east-1"),
          api_domain_prefix=merged.get("api_domain_prefix", "api"),
          environment=merged.get("environment", "prod"),
          include_www=merged.get("include_www", True),
          removal_policy=removal_policy,
        )
      )

    return cls(deployments=deployments)

  def validate(self) -> dict[int, list[ValidationError]]:
    """Validate every deployment.

    Returns:
      Errors keyed by the deployment's position in `deployments`, for
      failing deployments only.
    """
    failures: dict[int, list[ValidationError]] = {}
    for index, deployment in enumerate(self.deployments):
      errors = validate(deployment.config_values())
      if errors:
        failures[index] = errors
    return failures

  def duplicate_stack_names(self) -> list[str]:
    """Stack names claimed by more than one deployment."""
    counts = Counter(deployment.stack_name for deployment in self.deployments)
    return [name for name, count in counts.items() if count > 1]
