"""Route 53 hosted zone lookup and alias record."""

from aws_cdk import Annotations, Duration
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_route53 as route53
from aws_cdk import aws_route53_targets as targets
from constructs import Construct

from ..config import hosted_zone_name

RECORD_TTL = Duration.minutes(1)


class WebsiteDns(Construct):
  """Existing hosted zone of the parent domain and the site's A record."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
  ) -> None:
    super().__init__(scope, id)

    self.domain_name = domain_name
    self.zone_name = hosted_zone_name(domain_name)

    if "." not in self.zone_name:
      Annotations.of(self).add_warning(
        f"Hosted zone for {domain_name} resolves to top-level domain "
        f"'{self.zone_name}'; use a subdomain of a zone you own"
      )

    # Fails at synth time if the account has no such zone
    self.hosted_zone = route53.HostedZone.from_lookup(
      self,
      "HostedZone",
      domain_name=self.zone_name,
    )

  def create_alias_record(
    self,
    distribution: cloudfront.IDistribution,
  ) -> route53.ARecord:
    """Point the domain at the CloudFront distribution."""
    return route53.ARecord(
      self,
      "ARecord",
      zone=self.hosted_zone,
      record_name=self.domain_name,
      target=route53.RecordTarget.from_alias(targets.CloudFrontTarget(distribution)),
      # Not rendered for alias records; Route 53 uses the target's TTL
      ttl=RECORD_TTL,
    )
