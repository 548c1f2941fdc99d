"""CDK stack for a single static website."""

from typing import Any

import aws_cdk as cdk
from constructs import Construct

from static_website.cdk_constructs import StaticWebsite
from static_website.config import SiteConfig


class StaticWebsiteStack(cdk.Stack):
  """Stack for a single static website."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    site_config: SiteConfig,
    **kwargs: Any,
  ) -> None:
    super().__init__(scope, id, **kwargs)

    self.website = StaticWebsite.from_config(self, "Website", site_config.website)

    cdk.Tags.of(self).add("Project", "static-website")
    cdk.Tags.of(self).add("Domain", site_config.website.domain_name)
    for key, value in site_config.tags.items():
      cdk.Tags.of(self).add(key, value)
