# feedmark/errors.py

from __future__ import annotations

from typing import Any


class MarkupError(ValueError):
    """Base class for errors raised while turning spans into markup."""


class SpanOutOfRange(MarkupError):
    """Raised when a span's offsets do not fit inside the feed."""

    def __init__(self, span: Any, feed_length: int):
        self.span = span
        self.feed_length = feed_length
        super().__init__(
            f"Span [{span.start}, {span.end}) is out of range "
            f"for a feed of length {feed_length}"
        )


class UnsupportedAnnotationType(MarkupError):
    """Raised when no formatter is registered for an annotation type."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Unsupported annotation type: {tag!r}")


class EmptyUsernameValue(MarkupError):
    """Raised when a username span has no characters to format."""


class StyleConfigError(MarkupError):
    """Raised when the markup style file cannot be interpreted."""
