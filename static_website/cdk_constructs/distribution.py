"""CloudFront distribution in front of the website bucket."""

from aws_cdk import Duration
from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_s3 as s3
from constructs import Construct

DEFAULT_TTL = Duration.days(60)
ERROR_CACHING_MIN_TTL = Duration.seconds(300)


class WebsiteDistribution(Construct):
  """CloudFront distribution reading the bucket through an origin access identity.

  404s are answered with the index document and a 200 status so client side
  routing of single page applications works.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
    certificate: acm.ICertificate,
    domain_name: str,
    index_document: str,
    web_acl_id: str | None = None,
  ) -> None:
    super().__init__(scope, id)

    self.origin_access_identity = cloudfront.OriginAccessIdentity(
      self,
      "Oai",
      comment=f"OAI for {bucket.bucket_name}",
    )
    # Also covers bucket listing, so missing keys come back as 404 rather than 403
    bucket.grant_read(self.origin_access_identity.grant_principal)

    self.cache_policy = cloudfront.CachePolicy(
      self,
      "CachePolicy",
      comment=f"Default caching for {domain_name}",
      default_ttl=DEFAULT_TTL,
    )

    self.distribution = cloudfront.Distribution(
      self,
      "Distribution",
      default_behavior=cloudfront.BehaviorOptions(
        origin=origins.S3BucketOrigin.with_origin_access_identity(
          bucket,
          origin_access_identity=self.origin_access_identity,
        ),
        viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
        cache_policy=self.cache_policy,
      ),
      domain_names=[domain_name],
      certificate=certificate,
      default_root_object=index_document,
      error_responses=[
        cloudfront.ErrorResponse(
          http_status=404,
          response_http_status=200,
          response_page_path=f"/{index_document}",
          ttl=ERROR_CACHING_MIN_TTL,
        )
      ],
      web_acl_id=web_acl_id,
    )
