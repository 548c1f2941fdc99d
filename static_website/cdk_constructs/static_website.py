"""Composite construct for a complete static website."""

from aws_cdk import CfnOutput
from aws_cdk import aws_s3_deployment as s3_deploy
from constructs import Construct

from ..config import DEFAULT_INDEX_DOCUMENT, WebsiteConfig
from .certificate import WebsiteCertificate
from .content import WebsiteContent
from .distribution import WebsiteDistribution
from .dns import WebsiteDns
from .storage import WebsiteBucket


class StaticWebsite(Construct):
  """Static website hosted by S3.

  Creates:
  - S3 bucket, with the website files uploaded to it if a path is given
  - CloudFront distribution proxying the bucket via an origin access identity
  - ACM certificate (DNS validated, issued in us-east-1)
  - Route 53 A record in the existing hosted zone of the parent domain
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    domain_name: str,
    website_dist_path: str | None = None,
    index_document: str = DEFAULT_INDEX_DOCUMENT,
    bucket_name: str | None = None,
    web_acl_id: str | None = None,
  ) -> None:
    super().__init__(scope, id)

    self.config = WebsiteConfig(
      domain_name=domain_name,
      website_dist_path=website_dist_path,
      index_document=index_document,
      bucket_name=bucket_name,
      web_acl_id=web_acl_id,
    )
    config = self.config

    storage = WebsiteBucket(
      self,
      "Storage",
      bucket_name=config.bucket_name,
      index_document=config.index_document,
    )
    self.bucket = storage.bucket

    self.bucket_deployment: s3_deploy.BucketDeployment | None = None
    if config.website_dist_path:
      self.bucket_deployment = WebsiteContent(
        self,
        "Content",
        bucket=self.bucket,
        website_dist_path=config.website_dist_path,
      ).deployment

    dns = WebsiteDns(self, "Dns", domain_name=config.domain_name)
    self.hosted_zone = dns.hosted_zone

    self.certificate = WebsiteCertificate(
      self,
      "Certificate",
      domain_name=config.domain_name,
      hosted_zone=self.hosted_zone,
    ).certificate

    self.distribution = WebsiteDistribution(
      self,
      "Cdn",
      bucket=self.bucket,
      certificate=self.certificate,
      domain_name=config.domain_name,
      index_document=config.index_document,
      web_acl_id=config.web_acl_id,
    ).distribution

    self.dns_record = dns.create_alias_record(self.distribution)

    # Outputs
    CfnOutput(
      self,
      "BucketName",
      value=self.bucket.bucket_name,
      description="S3 bucket name",
    )
    CfnOutput(
      self,
      "DistributionId",
      value=self.distribution.distribution_id,
      description="CloudFront distribution ID",
    )
    CfnOutput(
      self,
      "DistributionDomainName",
      value=self.distribution.distribution_domain_name,
      description="CloudFront distribution domain name",
    )
    CfnOutput(
      self,
      "WebsiteUrl",
      value=f"https://{config.domain_name}",
      description="Website URL",
    )

  @classmethod
  def from_config(
    cls,
    scope: Construct,
    id: str,
    config: WebsiteConfig,
  ) -> "StaticWebsite":
    """Create the website from an already loaded WebsiteConfig."""
    return cls(
      scope,
      id,
      domain_name=config.domain_name,
      website_dist_path=config.website_dist_path,
      index_document=config.index_document,
      bucket_name=config.bucket_name,
      web_acl_id=config.web_acl_id,
    )
