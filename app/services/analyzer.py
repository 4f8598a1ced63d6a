"""Single-page SEO analysis pipeline.

``analyze`` runs the whole pipeline for one caller-supplied URL:

1. normalise the URL and derive the target hostname,
2. fetch the document,
3. parse it into a tree,
4. run the field extractors and assemble the report.

The result is either a :class:`SeoReport` or a :class:`Failure`.  There is
no partial success: any exception raised by a stage aborts the run and is
classified into a failure at this boundary.
"""

import logging
from typing import Optional, Union

import httpx

from app.models.failure import Failure
from app.models.seo_report import SeoReport
from app.services.extractor import extract_seo
from app.services.fetcher import fetch_document
from app.services.normalizer import InvalidTargetUrl, normalize_url, target_hostname
from app.services.parser import build_tree

logger = logging.getLogger(__name__)

MISSING_URL_MESSAGE = "URL is required"
NO_RESPONSE_MESSAGE = "No response received from the server. Check the URL or network."

AnalysisResult = Union[SeoReport, Failure]


async def analyze(raw_url: Optional[str]) -> AnalysisResult:
    """Analyse the page at *raw_url* and return its report or a classified failure."""
    if not raw_url:
        return Failure("input", MISSING_URL_MESSAGE)

    url = normalize_url(raw_url)
    try:
        hostname = target_hostname(url)
        html = await fetch_document(url)
        tree = build_tree(html)
        return extract_seo(tree, hostname)
    except Exception as exc:
        failure = classify_error(exc)
        if failure.kind == "internal":
            logger.exception("Unexpected error analysing %s", url)
        else:
            logger.error("Analysis of %s failed (%s): %s", url, failure.kind, failure.message)
        return failure


def classify_error(exc: Exception) -> Failure:
    """Map an exception raised by a pipeline stage to a :class:`Failure`."""
    if isinstance(exc, httpx.HTTPStatusError):
        return Failure(
            "upstream", f"Server responded with status: {exc.response.status_code}"
        )
    # UnsupportedProtocol is a RequestError but no request was ever sent.
    if isinstance(exc, (InvalidTargetUrl, httpx.InvalidURL, httpx.UnsupportedProtocol)):
        return Failure("malformed_url", str(exc))
    if isinstance(exc, httpx.RequestError):
        return Failure("network", NO_RESPONSE_MESSAGE)
    return Failure("internal", str(exc))
