# feedmark/pipeline.py

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from .compositor import SpanLike, as_span, new_span_compositor
from .models import Span
from .style import load_style


def render_feed(
    feed: str,
    spans: Iterable[SpanLike],
    style_path: Optional[str] = None,
    allowed_types: Optional[Iterable[str]] = None,
) -> Tuple[str, List[Span]]:
    """
    Render a feed to HTML using the markup style at style_path.

    allowed_types:
      - If None: every span is formatted.
      - If iterable: spans of other types are dropped and their text is
        left untouched in the output.
    """
    style = load_style(style_path)
    span_list = [as_span(s) for s in spans]

    if allowed_types is not None:
        allowed_set = set(allowed_types)
        span_list = [s for s in span_list if s.type in allowed_set]

    html = new_span_compositor(feed, span_list, style).parse()
    return html, span_list
