"""Validation of deployment input values.

Each declared input carries an optional rule. ``validate`` checks every
rule in one pass and returns all failures together so an operator can fix
the whole configuration at once instead of one field per attempt.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


class _Required:
  """Sentinel marking a ConfigValue without a default."""

  def __repr__(self) -> str:
    return "REQUIRED"


REQUIRED: Any = _Required()


@dataclass(frozen=True)
class ValidationRule:
  """A regex predicate plus the message shown when it fails."""

  pattern: str
  message: str

  def check(self, value: Any) -> bool:
    """Return True when value is a string matching the whole pattern."""
    if not isinstance(value, str):
      return False
    return re.fullmatch(self.pattern, value) is not None


@dataclass(frozen=True)
class ConfigValue:
  """A named, typed deployment input."""

  name: str
  type: Any = str
  default: Any = REQUIRED
  rule: ValidationRule | None = None
  description: str = ""

  @property
  def required(self) -> bool:
    return self.default is REQUIRED


@dataclass(frozen=True)
class ValidationError:
  """A single input that failed its rule."""

  field: str
  supplied_value: Any
  message: str

  def __str__(self) -> str:
    return f"{self.field}: {self.message} (got {self.supplied_value!r})"


class ConfigValidationError(ValueError):
  """Raised when one or more inputs fail validation."""

  def __init__(self, errors: list[ValidationError]) -> None:
    self.errors = list(errors)
    lines = "\n".join(f"  - {error}" for error in self.errors)
    super().__init__(f"{len(self.errors)} invalid configuration value(s):\n{lines}")


INPUT_SCHEMA: tuple[ConfigValue, ...] = (
  ConfigValue(
    name="region",
    default="us-east-1",
    rule=ValidationRule(
      pattern=r"[a-z]{2}-[a-z]+-[0-9]",
      message="must be a valid AWS region code (e.g. us-east-1)",
    ),
    description="AWS region to deploy into",
  ),
  ConfigValue(
    name="domain_name",
    rule=ValidationRule(
      pattern=r"[a-z0-9][a-z0-9-]*\.[a-z]{2,}",
      message="must be a valid domain name (e.g. example.com)",
    ),
    description="Apex domain serving the website",
  ),
  ConfigValue(
    name="api_domain_prefix",
    default="api",
    rule=ValidationRule(
      pattern=r"[a-z0-9][a-z0-9-]*",
      message=(
        "must be a lowercase DNS label of letters, digits and hyphens "
        "that does not start with a hyphen (e.g. api)"
      ),
    ),
    description="Subdomain label for the API (api -> api.example.com)",
  ),
)


def validate(
  config_values: Mapping[str, Any],
  schema: tuple[ConfigValue, ...] = INPUT_SCHEMA,
) -> list[ValidationError]:
  """Check config_values against schema.

  Args:
    config_values: Supplied values keyed by input name. Undeclared keys
      are ignored.
    schema: Declared inputs to check.

  Returns:
    One ValidationError per failing input, in schema order. An empty list
    means the configuration is valid.
  """
  errors: list[ValidationError] = []

  for config_value in schema:
    value = config_values.get(config_value.name, config_value.default)

    if value is REQUIRED:
      errors.append(
        ValidationError(
          field=config_value.name,
          supplied_value=None,
          message="is required",
        )
      )
      continue

    if not isinstance(value, config_value.type):
      errors.append(
        ValidationError(
          field=config_value.name,
          supplied_value=value,
          message=f"must be of type {config_value.type.__name__}",
        )
      )
      continue

    if config_value.rule is not None and not config_value.rule.check(value):
      errors.append(
        ValidationError(
          field=config_value.name,
          supplied_value=value,
          message=config_value.rule.message,
        )
      )

  return errors


def ensure_valid(
  config_values: Mapping[str, Any],
  schema: tuple[ConfigValue, ...] = INPUT_SCHEMA,
) -> None:
  """Raise ConfigValidationError if any input fails validation."""
  errors = validate(config_values, schema)
  if errors:
    raise ConfigValidationError(errors)
