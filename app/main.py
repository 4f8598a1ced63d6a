import logging
import logging.config

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.models.analyze_response import ErrorResponse
from app.routers.analyze import router as analyze_router

logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
            },
        },
        "root": {"level": "INFO", "handlers": ["console"]},
    }
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="DevSEOTools – On-Page SEO Analyzer",
    description="Fetches a single page and reports its on-page SEO signals.",
    version="1.0.0",
)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception for %s", request.url)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error="An unexpected error occurred.").model_dump(),
    )


app.include_router(analyze_router)


@app.get("/", summary="Health check")
async def root() -> dict:
    return {"message": "Hello from DevSEOTools"}
