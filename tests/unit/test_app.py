"""Tests for the CDK app entry point."""

from pathlib import Path
from unittest.mock import patch

import pytest
from aws_cdk import App

from static_website import app as app_module


class TestMain:
  """Test app.main."""

  @pytest.fixture
  def config_file(self, tmp_path: Path) -> Path:
    path = tmp_path / "websites.yaml"
    path.write_text(
      """
defaults:
  region: eu-west-1
sites:
  - domain_name: one.example.com
  - domain_name: two.example.com
    stack_name: Second
"""
    )
    return path

  def test_creates_stack_per_site(self, config_file: Path, tmp_path: Path) -> None:
    app = App(context={"config": str(config_file)}, outdir=str(tmp_path / "cdk.out"))

    with (
      patch.object(app_module, "get_account_id", return_value="123456789012"),
      patch.object(
        app_module, "StaticWebsiteStack", wraps=app_module.StaticWebsiteStack
      ) as stack_cls,
    ):
      app_module.main(app)

    stack_ids = [call.args[1] for call in stack_cls.call_args_list]
    assert stack_ids == ["StaticWebsite-one-example-com", "Second"]
    env = stack_cls.call_args_list[0].kwargs["env"]
    assert env.account == "123456789012"
    assert env.region == "eu-west-1"
    assert (tmp_path / "cdk.out" / "Second.template.json").exists()


class TestGetAccountId:
  """Test account resolution."""

  def test_uses_sts(self) -> None:
    with patch.object(app_module.boto3, "client") as client:
      client.return_value.get_caller_identity.return_value = {"Account": "999"}

      assert app_module.get_account_id() == "999"

    client.assert_called_once_with("sts")
