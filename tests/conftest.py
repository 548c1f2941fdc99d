"""Pytest fixtures for CDK construct tests."""

import aws_cdk as cdk
import pytest

ACCOUNT = "123456789012"
REGION = "eu-west-1"


@pytest.fixture
def app() -> cdk.App:
  """Create a CDK App for testing."""
  return cdk.App()


@pytest.fixture
def stack(app: cdk.App) -> cdk.Stack:
  """Create a CDK Stack for testing.

  The account is required by the hosted zone lookup.
  """
  return cdk.Stack(app, "TestStack", env=cdk.Environment(account=ACCOUNT, region=REGION))
