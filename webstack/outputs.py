"""Published outputs of a website + API deployment.

Outputs are direct reads from a ResourceTopology. A field that is not
populated raises MissingFieldError rather than producing an empty output,
since an empty value usually means a resource failed to provision.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ResourceTopology:
  """Fields read from the provisioned resources of one deployment."""

  domain_name: str
  bucket_name: str | None = None
  distribution_id: str | None = None
  distribution_domain_name: str | None = None
  api_endpoint: str | None = None
  # Hosted zone nameservers keyed by zone domain name
  zone_nameservers: Mapping[str, Sequence[str]] = field(default_factory=dict)


@dataclass(frozen=True)
class OutputBinding:
  """Projection of a published output name onto a topology field."""

  name: str
  field: str
  description: str
  by_domain: bool = False

  @property
  def output_key(self) -> str:
    """CloudFormation output key (alphanumeric only)."""
    return "".join(part.capitalize() for part in self.name.split("_"))


class MissingFieldError(LookupError):
  """Raised when a topology field backing an output is not populated."""

  def __init__(self, output_name: str, field: str) -> None:
    self.output_name = output_name
    self.field = field
    super().__init__(
      f"Output '{output_name}' requires topology field '{field}', "
      "which is not populated"
    )


OUTPUT_BINDINGS: tuple[OutputBinding, ...] = (
  OutputBinding(
    name="client_files_bucket_name",
    field="bucket_name",
    description="S3 bucket holding the website client files",
  ),
  OutputBinding(
    name="cloudfront_distribution_id",
    field="distribution_id",
    description="CloudFront distribution ID (for cache invalidation)",
  ),
  OutputBinding(
    name="cloudfront_distribution_domain_name",
    field="distribution_domain_name",
    description="CloudFront distribution domain name",
  ),
  OutputBinding(
    name="api_gateway_endpoint",
    field="api_endpoint",
    description="Base URL of the API Gateway",
  ),
  OutputBinding(
    name="route53_zone_nameservers",
    field="zone_nameservers",
    description="Route 53 nameservers to set at the domain registrar",
    by_domain=True,
  ),
)


def _read(topology: ResourceTopology, binding: OutputBinding) -> Any:
  value = getattr(topology, binding.field, None)
  if binding.by_domain and value is not None:
    value = value.get(topology.domain_name)
  if value is None or len(value) == 0:
    raise MissingFieldError(binding.name, binding.field)
  if binding.by_domain:
    return list(value)
  return value


def derive_outputs(
  topology: ResourceTopology,
  bindings: tuple[OutputBinding, ...] = OUTPUT_BINDINGS,
) -> dict[str, Any]:
  """Map each output name to its topology value.

  Raises:
    MissingFieldError: If a bound field is absent or empty.
  """
  return {binding.name: _read(topology, binding) for binding in bindings}


def topology_from_stack_outputs(
  domain_name: str,
  stack_outputs: Mapping[str, str],
  bindings: tuple[OutputBinding, ...] = OUTPUT_BINDINGS,
) -> ResourceTopology:
  """Rebuild a topology from deployed CloudFormation stack outputs.

  Args:
    domain_name: Domain the stack was deployed for.
    stack_outputs: OutputKey -> OutputValue, as returned by DescribeStacks.
      Domain-indexed values arrive comma joined.
    bindings: Output bindings the stack was synthesized with.

  Returns:
    A topology with every field found in stack_outputs populated. Missing
    keys leave their field empty so derive_outputs can report them.
  """
  fields: dict[str, Any] = {}

  for binding in bindings:
    raw = stack_outputs.get(binding.output_key)
    if raw is None:
      continue
    if binding.by_domain:
      values = [item.strip() for item in raw.split(",") if item.strip()]
      fields[binding.field] = {domain_name: values}
    else:
      fields[binding.field] = raw

  return ResourceTopology(domain_name=domain_name, **fields)
