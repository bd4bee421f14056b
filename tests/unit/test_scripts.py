"""Tests for the operator scripts."""

import json
import sys
import tempfile
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

# Add scripts to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "scripts"))

STACK_OUTPUTS = [
  {"OutputKey": "ClientFilesBucketName", "OutputValue": "example-com-client-files"},
  {"OutputKey": "CloudfrontDistributionId", "OutputValue": "E2QWRUHAPOMQZL"},
  {
    "OutputKey": "CloudfrontDistributionDomainName",
    "OutputValue": "d111111abcdef8.cloudfront.net",
  },
  {
    "OutputKey": "ApiGatewayEndpoint",
    "OutputValue": "https://a1b2c3d4e5.execute-api.us-east-1.amazonaws.com",
  },
  {
    "OutputKey": "Route53ZoneNameservers",
    "OutputValue": "ns-2048.awsdns-64.com,ns-2049.awsdns-65.net",
  },
]


def _cloudformation(outputs: list[dict[str, str]]) -> MagicMock:
  client = MagicMock()
  client.describe_stacks.return_value = {
    "Stacks": [{"StackName": "WebsiteApi-example-com", "Outputs": outputs}]
  }
  return client


class TestGetStackOutputs:
  """Tests for reading CloudFormation outputs."""

  def test_maps_keys_to_values(self) -> None:
    """Outputs come back as an OutputKey -> OutputValue mapping."""
    from show_outputs import get_stack_outputs

    client = _cloudformation(STACK_OUTPUTS)
    with patch("show_outputs.boto3.client", return_value=client) as client_factory:
      outputs = get_stack_outputs("WebsiteApi-example-com", "eu-west-1")

    client_factory.assert_called_once_with("cloudformation", region_name="eu-west-1")
    client.describe_stacks.assert_called_once_with(StackName="WebsiteApi-example-com")
    assert outputs["CloudfrontDistributionId"] == "E2QWRUHAPOMQZL"
    assert len(outputs) == 5

  def test_stack_without_outputs(self) -> None:
    """A stack with no Outputs key yields an empty mapping."""
    from show_outputs import get_stack_outputs

    client = MagicMock()
    client.describe_stacks.return_value = {"Stacks": [{"StackName": "s"}]}
    with patch("show_outputs.boto3.client", return_value=client):
      assert get_stack_outputs("s") == {}


class TestShowOutputsMain:
  """Tests for the show_outputs CLI."""

  def _run(self, argv: list[str], client: MagicMock) -> None:
    from show_outputs import main

    with (
      patch.object(sys, "argv", ["show_outputs.py", *argv]),
      patch("show_outputs.boto3.client", return_value=client),
    ):
      main()

  def test_env_format(self, capsys: pytest.CaptureFixture[str]) -> None:
    """Outputs print as name=value lines with joined nameservers."""
    self._run(["WebsiteApi-example-com", "example.com"], _cloudformation(STACK_OUTPUTS))

    lines = capsys.readouterr().out.splitlines()
    assert "cloudfront_distribution_id=E2QWRUHAPOMQZL" in lines
    assert (
      "route53_zone_nameservers=ns-2048.awsdns-64.com,ns-2049.awsdns-65.net" in lines
    )
    assert len(lines) == 5

  def test_json_format(self, capsys: pytest.CaptureFixture[str]) -> None:
    """JSON output keeps nameservers as a list."""
    self._run(
      ["WebsiteApi-example-com", "example.com", "--format", "json"],
      _cloudformation(STACK_OUTPUTS),
    )

    data = json.loads(capsys.readouterr().out)
    assert data["route53_zone_nameservers"] == [
      "ns-2048.awsdns-64.com",
      "ns-2049.awsdns-65.net",
    ]

  def test_missing_output_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
    """A stack missing an output fails with the output name on stderr."""
    with pytest.raises(SystemExit) as exc_info:
      self._run(
        ["WebsiteApi-example-com", "example.com"],
        _cloudformation(STACK_OUTPUTS[:-1]),
      )

    assert exc_info.value.code == 1
    assert "route53_zone_nameservers" in capsys.readouterr().err

  def test_client_error_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
    """AWS errors are reported on stderr."""
    client = MagicMock()
    client.describe_stacks.side_effect = ClientError(
      {"Error": {"Code": "ValidationError", "Message": "Stack does not exist"}},
      "DescribeStacks",
    )

    with pytest.raises(SystemExit) as exc_info:
      self._run(["WebsiteApi-missing-com", "missing.com"], client)

    assert exc_info.value.code == 1
    assert "Stack does not exist" in capsys.readouterr().err


class TestValidateConfigMain:
  """Tests for the validate_config CLI."""

  def _run(self, yaml_content: str) -> None:
    from validate_config import main

    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
      f.write(yaml_content)
      f.flush()

    with patch.object(sys, "argv", ["validate_config.py", f.name]):
      main()

  def test_valid_config(self, capsys: pytest.CaptureFixture[str]) -> None:
    """Valid deployments are listed with their API domain."""
    self._run(
      """
deployments:
  - domain_name: example.com
    owner: Test Owner
    email: test@example.com
"""
    )

    assert "example.com (api: api.example.com)" in capsys.readouterr().out

  def test_invalid_config_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
    """Every invalid field is reported before exiting."""
    with pytest.raises(SystemExit) as exc_info:
      self._run(
        """
deployments:
  - domain_name: bad
    owner: Test Owner
    email: test@example.com
    region: useast1
    api_domain_prefix: API_1
"""
      )

    err = capsys.readouterr().err
    assert exc_info.value.code == 1
    assert "region:" in err
    assert "domain_name:" in err
    assert "api_domain_prefix:" in err

  def test_missing_file_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
    """A missing config file is reported on stderr."""
    with (
      patch.object(sys, "argv", ["validate_config.py", "/nonexistent/deployments.yaml"]),
      pytest.raises(SystemExit) as exc_info,
    ):
      from validate_config import main

      main()

    assert exc_info.value.code == 1
    assert "Error loading" in capsys.readouterr().err

  def test_missing_domain_reported(self, capsys: pytest.CaptureFixture[str]) -> None:
    """A deployment without domain_name is a validation error, not a load error."""
    with pytest.raises(SystemExit) as exc_info:
      self._run(
        """
deployments:
  - owner: Test Owner
    email: test@example.com
"""
      )

    err = capsys.readouterr().err
    assert exc_info.value.code == 1
    assert "domain_name: is required" in err
    assert "Error loading" not in err

  def test_numeric_domain_reported(self, capsys: pytest.CaptureFixture[str]) -> None:
    """A numeric domain_name is reported by type."""
    with pytest.raises(SystemExit) as exc_info:
      self._run(
        """
deployments:
  - domain_name: 1234
    owner: Test Owner
    email: test@example.com
"""
      )

    err = capsys.readouterr().err
    assert exc_info.value.code == 1
    assert "deployments[0] (WebsiteApi-1234)" in err
    assert "domain_name: must be of type str" in err

  def test_duplicate_domains_exit(self, capsys: pytest.CaptureFixture[str]) -> None:
    """Two deployments for the same domain are refused."""
    with pytest.raises(SystemExit) as exc_info:
      self._run(
        """
deployments:
  - domain_name: example.com
    owner: Owner One
    email: one@example.com

  - domain_name: example.com
    owner: Owner Two
    email: two@example.com
"""
      )

    assert exc_info.value.code == 1
    assert "Duplicate stack name WebsiteApi-example-com" in capsys.readouterr().err
