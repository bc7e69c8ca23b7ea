import os
import logging
import logging.config
from typing import Optional

import yaml
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from api.schemas import (
    ErrorResponse,
    RenderRequest,
    RenderResponse,
    SpanSchema,
    TypesResponse,
)
from feedmark.errors import MarkupError
from feedmark.formatters import supported_types
from feedmark.pipeline import render_feed


def setup_logging():
    cfg_path = os.path.join("configs", "logging.yaml")
    if os.path.exists(cfg_path):
        try:
            with open(cfg_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
            os.makedirs("logs", exist_ok=True)
            logging.config.dictConfig(config)
        except (OSError, ValueError, yaml.YAMLError) as e:
            print(f"[logging] Failed to load logging.yaml: {e}")
            logging.basicConfig(level=logging.INFO)
    else:
        logging.basicConfig(level=logging.INFO)


setup_logging()
logger = logging.getLogger("api")

CONFIG_DIR = os.path.realpath("configs")

app = FastAPI(
    title="Feedmark",
    version="0.1.0",
    description="Render annotated feed text as HTML.",
)


@app.exception_handler(MarkupError)
async def markup_error_handler(request: Request, exc: MarkupError) -> JSONResponse:
    logger.warning("Rejected %s: %s", request.url.path, exc)
    body = ErrorResponse(detail=str(exc), error=type(exc).__name__)
    return JSONResponse(status_code=422, content=body.model_dump())


def resolve_style_path(name: Optional[str]) -> Optional[str]:
    """
    Map a style name from a request to a file under configs/.

    Absolute paths and names escaping configs/ are rejected.
    """
    if name is None:
        return None
    path = os.path.realpath(os.path.join(CONFIG_DIR, name))
    if os.path.commonpath([path, CONFIG_DIR]) != CONFIG_DIR:
        raise HTTPException(
            status_code=400, detail="style_path must name a file under configs/"
        )
    if not os.path.isfile(path):
        raise HTTPException(status_code=404, detail=f"Unknown markup style: {name!r}")
    return path


@app.post(
    "/render",
    response_model=RenderResponse,
    responses={422: {"model": ErrorResponse}, 400: {}, 404: {}},
)
def render(req: RenderRequest) -> RenderResponse:
    logger.info("Received /render request with %d spans", len(req.spans))
    style_path = resolve_style_path(req.style_path)
    try:
        html, spans = render_feed(
            feed=req.feed,
            spans=[s.model_dump() for s in req.spans],
            style_path=style_path,
            allowed_types=req.allowed_types,
        )
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to read markup style %r: %s", req.style_path, e)
        raise HTTPException(
            status_code=400, detail=f"Markup style {req.style_path!r} could not be read"
        ) from e
    span_schemas = [SpanSchema(start=s.start, end=s.end, type=s.type) for s in spans]
    return RenderResponse(html=html, spans=span_schemas)


@app.get("/types", response_model=TypesResponse)
def types() -> TypesResponse:
    return TypesResponse(types=supported_types())
