"""CDK constructs for static website infrastructure."""

from .certificate import WebsiteCertificate
from .content import WebsiteContent
from .distribution import WebsiteDistribution
from .dns import WebsiteDns
from .static_website import StaticWebsite
from .storage import WebsiteBucket

__all__ = [
  "StaticWebsite",
  "WebsiteBucket",
  "WebsiteCertificate",
  "WebsiteContent",
  "WebsiteDistribution",
  "WebsiteDns",
]
