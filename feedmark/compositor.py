# feedmark/compositor.py

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional, Union

from .errors import SpanOutOfRange
from .formatters import format_value
from .models import Span
from .style import DEFAULT_STYLE, MarkupStyle

logger = logging.getLogger(__name__)

SpanLike = Union[Span, Mapping[str, Any]]


def as_span(item: SpanLike) -> Span:
    if isinstance(item, Span):
        return item
    return Span.from_dict(item)


class SpanCompositor:
    """
    Turn a feed plus its span annotations into an HTML string.

    Text between spans is copied through untouched; each span's text is
    wrapped by the formatter registered for its type.
    """

    def __init__(
        self,
        feed: str,
        spans: Iterable[SpanLike],
        style: Optional[MarkupStyle] = None,
    ):
        self.feed = feed
        self.spans: List[Span] = [as_span(s) for s in spans]
        self.style = style or DEFAULT_STYLE

    def parse(self) -> str:
        self._validate()
        spans_sorted = self._sort_spans()
        self._warn_overlaps(spans_sorted)
        logger.debug("Composing %d spans over %d chars", len(spans_sorted), len(self.feed))
        return self._compose(spans_sorted)

    def _validate(self) -> None:
        feed_length = len(self.feed)
        for span in self.spans:
            if not span.fits(feed_length):
                raise SpanOutOfRange(span, feed_length)

    def _sort_spans(self) -> List[Span]:
        # sorted() is stable, so equal starts keep their input order
        return sorted(self.spans, key=lambda s: s.start)

    def _warn_overlaps(self, spans_sorted: List[Span]) -> None:
        for prev, span in zip(spans_sorted, spans_sorted[1:]):
            if prev.overlaps(span):
                logger.warning(
                    "Overlapping spans [%d, %d) %r and [%d, %d) %r; output will be garbled",
                    prev.start, prev.end, prev.type,
                    span.start, span.end, span.type,
                )

    def _compose(self, spans_sorted: List[Span]) -> str:
        feed = self.feed
        out_parts: List[str] = []
        end_till_now = 0

        for span in spans_sorted:
            value = feed[span.start:span.end]
            formatted = format_value(value, span.type, self.style)
            out_parts.append(feed[end_till_now:span.start])
            out_parts.append(formatted)
            end_till_now = span.end

        out_parts.append(feed[end_till_now:])
        return "".join(out_parts)


def new_span_compositor(
    feed: str,
    spans: Iterable[SpanLike],
    style: Optional[MarkupStyle] = None,
) -> SpanCompositor:
    return SpanCompositor(feed, spans, style)
