"""S3 bucket holding the website files."""

from aws_cdk import RemovalPolicy
from aws_cdk import aws_s3 as s3
from constructs import Construct


class WebsiteBucket(Construct):
  """Private S3 bucket served only through CloudFront.

  The bucket is torn down together with the rest of the site.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket_name: str,
    index_document: str,
  ) -> None:
    super().__init__(scope, id)

    self.bucket = s3.Bucket(
      self,
      "Bucket",
      bucket_name=bucket_name,
      website_index_document=index_document,
      block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
      removal_policy=RemovalPolicy.DESTROY,
      auto_delete_objects=True,
    )
