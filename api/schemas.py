# api/schemas.py

from typing import List, Optional
from pydantic import BaseModel, Field


class SpanSchema(BaseModel):
    start: int
    end: int
    type: str


class RenderRequest(BaseModel):
    feed: str
    spans: List[SpanSchema] = Field(default_factory=list)
    style_path: Optional[str] = None  # file name under configs/, e.g. "markup.yaml"
    allowed_types: Optional[List[str]] = None


class RenderResponse(BaseModel):
    html: str
    spans: List[SpanSchema]


class TypesResponse(BaseModel):
    types: List[str]


class ErrorResponse(BaseModel):
    detail: str
    error: str
