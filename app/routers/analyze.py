import logging
from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from app.models.analyze_response import AnalyzeResponse, ErrorResponse
from app.models.failure import Failure
from app.services.analyzer import analyze

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/api/analyze",
    response_model=AnalyzeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Extract on-page SEO signals from a single page",
    description=(
        "Fetches *url* (``http://`` is assumed when no scheme is given), parses "
        "the HTML and returns title, description, headings, word count, link "
        "counts, image alt-text coverage, canonical/robots tags, Open Graph and "
        "Twitter metadata, and JSON-LD structured-data types."
    ),
)
async def analyze_page(
    url: Optional[str] = Query(default=None, description="Page to analyse."),
) -> AnalyzeResponse | JSONResponse:
    logger.info("Analyze request received", extra={"url": url})

    result = await analyze(url)
    if isinstance(result, Failure):
        if result.kind == "input":
            logger.warning("Rejected analyze request: %s", result.message)
        return JSONResponse(
            status_code=result.status_code,
            content=ErrorResponse(error=result.message).model_dump(),
        )

    return AnalyzeResponse(seo=result)
