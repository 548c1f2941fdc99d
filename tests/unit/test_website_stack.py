"""Tests for the StaticWebsiteStack."""

from aws_cdk import App, Environment
from aws_cdk.assertions import Match, Template

from static_website.config import SiteConfig, WebsiteConfig
from static_website.stacks import StaticWebsiteStack


class TestStaticWebsiteStack:
  """Test StaticWebsiteStack."""

  def _template(self, site: SiteConfig) -> Template:
    app = App()
    stack = StaticWebsiteStack(
      app,
      site.stack_name,
      site_config=site,
      env=Environment(account="123456789012", region=site.region),
    )
    return Template.from_stack(stack)

  def test_creates_website(self) -> None:
    site = SiteConfig(website=WebsiteConfig(domain_name="foo.bar.dk"), region="eu-west-1")
    template = self._template(site)

    template.has_resource_properties("AWS::S3::Bucket", {"BucketName": "website.foo.bar.dk"})
    template.has_resource_properties(
      "AWS::Route53::RecordSet", {"Name": "foo.bar.dk.", "Type": "A"}
    )

  def test_tags_resources(self) -> None:
    site = SiteConfig(
      website=WebsiteConfig(domain_name="foo.bar.dk"),
      tags={"Owner": "web-team"},
    )
    template = self._template(site)

    for tag in (
      {"Key": "Domain", "Value": "foo.bar.dk"},
      {"Key": "Owner", "Value": "web-team"},
      {"Key": "Project", "Value": "static-website"},
    ):
      template.has_resource_properties("AWS::S3::Bucket", {"Tags": Match.array_with([tag])})
