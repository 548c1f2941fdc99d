"""Configuration loader for static websites."""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

DEFAULT_INDEX_DOCUMENT = "index.html"
DEFAULT_REGION = "us-east-1"


@dataclass(frozen=True)
class WebsiteConfig:
  """Input of the StaticWebsite construct."""

  domain_name: str
  website_dist_path: str | None = None
  index_document: str = DEFAULT_INDEX_DOCUMENT
  bucket_name: str | None = None
  web_acl_id: str | None = None

  def __post_init__(self) -> None:
    _validate_domain_name(self.domain_name)
    if not self.index_document or self.index_document.startswith("/"):
      raise ValueError(
        f"index_document must be a non-empty relative key, got {self.index_document!r}"
      )
    if self.bucket_name is None:
      object.__setattr__(self, "bucket_name", f"website.{self.domain_name}")

  @property
  def hosted_zone_name(self) -> str:
    """Domain of the hosted zone the site's records live in."""
    return hosted_zone_name(self.domain_name)


def hosted_zone_name(domain_name: str) -> str:
  """Strip the leftmost label: foo.bar.dk -> bar.dk.

  Multi-label public suffixes are not special-cased, so foo.co.uk -> co.uk.
  """
  return domain_name.split(".", 1)[1]


def _validate_domain_name(domain_name: str) -> None:
  if not isinstance(domain_name, str):
    raise ValueError(f"domain_name must be a string, got {domain_name!r}")
  if not domain_name or any(c.isspace() for c in domain_name):
    raise ValueError(f"Invalid domain_name: {domain_name!r}")
  labels = domain_name.split(".")
  if len(labels) < 2 or not all(labels):
    raise ValueError(
      f"domain_name must be fully qualified (e.g. www.example.com), got {domain_name!r}"
    )


@dataclass
class SiteConfig:
  """A website plus where and how to deploy it."""

  website: WebsiteConfig
  region: str = DEFAULT_REGION
  stack_name: str = ""
  tags: dict[str, str] = field(default_factory=dict)

  def __post_init__(self) -> None:
    if not self.stack_name:
      self.stack_name = f"StaticWebsite-{self.website.domain_name.replace('.', '-')}"


_WEBSITE_KEYS = {f.name for f in fields(WebsiteConfig)}
_SITE_KEYS = {"region", "stack_name", "tags"}


@dataclass
class Config:
  """Multi-site configuration."""

  sites: list[SiteConfig] = field(default_factory=list)

  @classmethod
  def from_yaml(cls, path: Path | str = "websites.yaml") -> "Config":
    """Load configuration from YAML file."""
    with open(path) as f:
      data = yaml.safe_load(f) or {}

    defaults = data.get("defaults") or {}
    sites: list[SiteConfig] = []

    for index, site_data in enumerate(data.get("sites") or []):
      if not isinstance(site_data, dict):
        raise ValueError(f"Site #{index}: expected a mapping, got {site_data!r}")

      # Merge defaults with site-specific config
      merged: dict[str, Any] = {**defaults, **site_data}
      merged["tags"] = {**(defaults.get("tags") or {}), **(site_data.get("tags") or {})}

      unknown = set(merged) - _WEBSITE_KEYS - _SITE_KEYS
      if unknown:
        raise ValueError(f"Site #{index}: unknown keys {sorted(unknown)}")
      if "domain_name" not in merged:
        raise ValueError(f"Site #{index}: domain_name is required")

      website = WebsiteConfig(**{k: v for k, v in merged.items() if k in _WEBSITE_KEYS})
      sites.append(
        SiteConfig(
          website=website,
          region=merged.get("region", DEFAULT_REGION),
          stack_name=merged.get("stack_name", ""),
          tags={str(k): str(v) for k, v in merged["tags"].items()},
        )
      )

    return cls(sites=sites)
