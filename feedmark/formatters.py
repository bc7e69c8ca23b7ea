# feedmark/formatters.py

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from .errors import EmptyUsernameValue, UnsupportedAnnotationType
from .models import ENTITY, LINK, TWITTER_USERNAME
from .style import DEFAULT_STYLE, MarkupStyle

Formatter = Callable[[str, MarkupStyle], str]


def append_tags(value: str, start_tag: str, end_tag: str) -> str:
    return start_tag + value + end_tag


def format_entity(value: str, style: MarkupStyle) -> str:
    return append_tags(value, "<strong>", "</strong>")


def format_link(value: str, style: MarkupStyle) -> str:
    # href is the raw value; upstream guarantees a well-formed URL
    return append_tags(value, f'<a href="{value}">', style.link_close)


def format_twitter_username(value: str, style: MarkupStyle) -> str:
    """
    Keep the first character (usually "@") outside the link and point the
    rest of the value at the user's profile.
    """
    if not value:
        raise EmptyUsernameValue("Twitter username span has an empty value")

    prefix, username = value[:1], value[1:]
    start_tag = (
        f"{prefix}{style.username_separator}"
        f'<a href="{style.twitter_url}{username}">'
    )
    return append_tags(username, start_tag, "</a>")


_FORMATTERS: Dict[str, Formatter] = {
    ENTITY: format_entity,
    LINK: format_link,
    TWITTER_USERNAME: format_twitter_username,
}


def register_formatter(tag: str, formatter: Formatter) -> None:
    """
    Add a formatter for a new annotation type.

    Existing types cannot be replaced; register under a new tag instead.
    """
    if tag in _FORMATTERS:
        raise ValueError(f"A formatter is already registered for {tag!r}")
    _FORMATTERS[tag] = formatter


def get_formatter(tag: str) -> Formatter:
    formatter = _FORMATTERS.get(tag)
    if formatter is None:
        raise UnsupportedAnnotationType(tag)
    return formatter


def supported_types() -> List[str]:
    return list(_FORMATTERS)


def format_value(value: str, tag: str, style: Optional[MarkupStyle] = None) -> str:
    return get_formatter(tag)(value, style or DEFAULT_STYLE)
