from typing import Any, List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys (``wordCount``, ``openGraph``, …)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TextMetric(CamelModel):
    value: str
    length: int


class Headings(BaseModel):
    # h1s/h2s keep their names on the wire; to_camel would emit h1S/h2S.
    h1s: List[str]
    h2s: List[str]


class LinkCounts(CamelModel):
    internal: int
    external: int


class ImageRecord(CamelModel):
    src: str
    alt: str


class ImageSummary(CamelModel):
    total: int
    missing_alt_count: int
    missing_alt_images: List[ImageRecord]  # at most five samples


class TechnicalTags(CamelModel):
    canonical: str
    meta_robots: str


class OpenGraph(CamelModel):
    title: str
    description: str
    image: str
    url: str


class TwitterCard(CamelModel):
    card: str
    title: str
    description: str
    image: str


class SocialMetadata(CamelModel):
    open_graph: OpenGraph
    twitter: TwitterCard


class SeoReport(CamelModel):
    """On-page SEO signals extracted from a single document."""

    title: TextMetric
    description: TextMetric
    headings: Headings
    word_count: int
    links: LinkCounts
    images: ImageSummary
    technical: TechnicalTags
    social: SocialMetadata
    schemas: List[Any]  # raw @type values, usually strings
