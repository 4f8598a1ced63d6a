from typing import Literal

from pydantic import BaseModel

from app.models.seo_report import SeoReport


class AnalyzeResponse(BaseModel):
    success: Literal[True] = True
    seo: SeoReport


class ErrorResponse(BaseModel):
    success: Literal[False] = False
    error: str
