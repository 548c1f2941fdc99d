#!/usr/bin/env python3
"""CDK application entry point for static website infrastructure."""

import sys
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk
import boto3

from static_website.config import Config
from static_website.stacks import StaticWebsiteStack


def get_account_id() -> str:
  """Get AWS account ID from current credentials."""
  sts = boto3.client("sts")
  return str(sts.get_caller_identity()["Account"])


def main(app: cdk.App | None = None) -> None:
  """Create CDK app with a stack for each configured website."""
  app = app or cdk.App()

  config_path = app.node.try_get_context("config") or "websites.yaml"
  config = Config.from_yaml(Path(config_path))

  # Hosted zone lookups need an explicit account
  account_id = get_account_id()

  for site in config.sites:
    StaticWebsiteStack(
      app,
      site.stack_name,
      site_config=site,
      env=cdk.Environment(
        account=account_id,
        region=site.region,
      ),
      description=f"Static website infrastructure for {site.website.domain_name}",
    )

  app.synth()


if __name__ == "__main__":
  main()
