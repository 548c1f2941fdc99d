"""Upload of local website files into the bucket."""

from aws_cdk import aws_s3 as s3
from aws_cdk import aws_s3_deployment as s3_deploy
from constructs import Construct


class WebsiteContent(Construct):
  """Deploys a local directory or zip file to the website bucket.

  Every object is uploaded with ``Cache-Control: no-cache`` so browsers and
  CloudFront revalidate after each deploy.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    website_dist_path: str,
  ) -> None:
    super().__init__(scope, id)

    self.deployment = s3_deploy.BucketDeployment(
      self,
      "Deployment",
      sources=[s3_deploy.Source.asset(website_dist_path)],
      destination_bucket=bucket,
      cache_control=[s3_deploy.CacheControl.no_cache()],
    )
