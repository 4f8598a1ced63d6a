import json
import re
from typing import Any, List, Optional
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from app.models.seo_report import (
    Headings,
    ImageRecord,
    ImageSummary,
    LinkCounts,
    OpenGraph,
    SeoReport,
    SocialMetadata,
    TechnicalTags,
    TextMetric,
    TwitterCard,
)
from app.services.parser import all_text, attr, select, select_first, text

MISSING = "Missing"
NOT_SET = "Not Set"
NO_SRC = "No src"
TYPE_NOT_SPECIFIED = "Type not specified"

MISSING_ALT_SAMPLE_SIZE = 5

_WHITESPACE_RE = re.compile(r"\s+")


def resolve(primary: Optional[str], fallback: str) -> str:
    """Return *primary* when it is a non-empty string, otherwise *fallback*."""
    return primary if primary else fallback


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def try_parse_json(raw: str) -> Optional[Any]:
    """Return the decoded JSON value of *raw*, or ``None`` if it is not valid JSON.

    A literal ``null`` payload also yields ``None`` and is treated the same
    as invalid input. ``NaN`` and ``Infinity`` are rejected.
    """
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        return None


def _meta_content(tree: BeautifulSoup, selector: str) -> Optional[str]:
    return attr(select_first(tree, selector), "content")


def extract_title(tree: BeautifulSoup) -> str:
    return text(select_first(tree, "title"))


def extract_description(tree: BeautifulSoup) -> str:
    return resolve(_meta_content(tree, 'meta[name="description"]'), "")


def extract_headings(tree: BeautifulSoup) -> Headings:
    return Headings(
        h1s=[text(h) for h in select(tree, "h1")],
        h2s=[text(h) for h in select(tree, "h2")],
    )


def extract_word_count(tree: BeautifulSoup) -> int:
    """Count space-separated tokens in the collapsed ``<body>`` text.

    Inline script and style source counts as body text. An empty body still
    counts as one word: splitting an empty string on a space yields a single
    empty token.
    """
    collapsed = _WHITESPACE_RE.sub(" ", all_text(select_first(tree, "body"))).strip()
    return len(collapsed.split(" "))


def _is_internal_host(href: str, hostname: str) -> bool:
    """Return True when the host of absolute *href* contains *hostname*.

    This is substring containment, not a domain match, so
    ``example.com.evil.com`` is considered internal to ``example.com``.
    """
    try:
        link_host = urlparse(href).hostname
    except ValueError:
        return False
    return bool(link_host) and hostname in link_host


def extract_links(tree: BeautifulSoup, hostname: str) -> LinkCounts:
    """Count internal and external ``<a href>`` links.

    Absolute ``http…`` links are classified by host; root-relative ``/…``
    links are internal. Relative paths, fragments, ``mailto:`` and empty
    hrefs are ignored.
    """
    internal = external = 0
    for anchor in select(tree, "a[href]"):
        href = attr(anchor, "href")
        if not href:
            continue
        if href.startswith("http"):
            if _is_internal_host(href, hostname):
                internal += 1
            else:
                external += 1
        elif href.startswith("/"):
            internal += 1
    return LinkCounts(internal=internal, external=external)


def extract_technical(tree: BeautifulSoup) -> TechnicalTags:
    return TechnicalTags(
        canonical=resolve(attr(select_first(tree, 'link[rel="canonical"]'), "href"), MISSING),
        meta_robots=resolve(_meta_content(tree, 'meta[name="robots"]'), NOT_SET),
    )


def extract_open_graph(tree: BeautifulSoup, title: str, description: str) -> OpenGraph:
    return OpenGraph(
        title=resolve(_meta_content(tree, 'meta[property="og:title"]'), title),
        description=resolve(_meta_content(tree, 'meta[property="og:description"]'), description),
        image=resolve(_meta_content(tree, 'meta[property="og:image"]'), ""),
        url=resolve(_meta_content(tree, 'meta[property="og:url"]'), ""),
    )


def extract_twitter(tree: BeautifulSoup, open_graph: OpenGraph) -> TwitterCard:
    # Fallbacks come from the resolved Open Graph values, not the raw page tags.
    return TwitterCard(
        card=resolve(_meta_content(tree, 'meta[name="twitter:card"]'), ""),
        title=resolve(_meta_content(tree, 'meta[name="twitter:title"]'), open_graph.title),
        description=resolve(
            _meta_content(tree, 'meta[name="twitter:description"]'), open_graph.description
        ),
        image=resolve(_meta_content(tree, 'meta[name="twitter:image"]'), open_graph.image),
    )


def extract_images(tree: BeautifulSoup) -> ImageSummary:
    images = [
        ImageRecord(src=resolve(attr(img, "src"), NO_SRC), alt=resolve(attr(img, "alt"), MISSING))
        for img in select(tree, "img")
    ]
    missing_alt = [img for img in images if img.alt == MISSING]
    return ImageSummary(
        total=len(images),
        missing_alt_count=len(missing_alt),
        missing_alt_images=missing_alt[:MISSING_ALT_SAMPLE_SIZE],
    )


def _schema_type(value: Any) -> Any:
    declared = value.get("@type") if isinstance(value, dict) else None
    # null, false, 0 and "" count as absent; an empty list is still a declared value.
    if declared is None or declared is False or declared == "" or declared == 0:
        return TYPE_NOT_SPECIFIED
    return declared


def extract_schemas(tree: BeautifulSoup) -> List[Any]:
    """Return the ``@type`` of every JSON-LD block that parses; invalid blocks are skipped."""
    parsed = [
        try_parse_json(script.string or "")
        for script in select(tree, 'script[type="application/ld+json"]')
    ]
    return [_schema_type(value) for value in parsed if value is not None]


def _metric(value: str) -> TextMetric:
    return TextMetric(value=value, length=len(value))


def extract_seo(tree: BeautifulSoup, hostname: str) -> SeoReport:
    """Run every extractor against *tree* and assemble the report."""
    title = extract_title(tree)
    description = extract_description(tree)
    open_graph = extract_open_graph(tree, title, description)

    return SeoReport(
        title=_metric(title),
        description=_metric(description),
        headings=extract_headings(tree),
        word_count=extract_word_count(tree),
        links=extract_links(tree, hostname),
        images=extract_images(tree),
        technical=extract_technical(tree),
        social=SocialMetadata(
            open_graph=open_graph,
            twitter=extract_twitter(tree, open_graph),
        ),
        schemas=extract_schemas(tree),
    )
