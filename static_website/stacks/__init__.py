"""CDK stacks for static website infrastructure."""

from .website_stack import StaticWebsiteStack

__all__ = ["StaticWebsiteStack"]
