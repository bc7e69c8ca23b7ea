# feedmark/style.py

from __future__ import annotations

import yaml
from dataclasses import dataclass, fields
from typing import Any, Dict

from .errors import StyleConfigError


@dataclass(frozen=True)
class MarkupStyle:
    link_close: str = " </a>"
    username_separator: str = " "
    twitter_url: str = "http://twitter.com/"


DEFAULT_STYLE = MarkupStyle()


def style_from_dict(cfg: Dict[str, Any] | None) -> MarkupStyle:
    if cfg is None:
        return DEFAULT_STYLE
    if not isinstance(cfg, dict):
        raise StyleConfigError("markup style must be a mapping")

    known = {f.name for f in fields(MarkupStyle)}
    unknown = sorted(set(cfg) - known)
    if unknown:
        raise StyleConfigError(f"Unknown markup style keys: {', '.join(unknown)}")

    for key, value in cfg.items():
        if not isinstance(value, str):
            raise StyleConfigError(f"markup.{key} must be a string, got {value!r}")

    return MarkupStyle(**cfg)


def load_style(path: str | None) -> MarkupStyle:
    """
    Load a MarkupStyle from a YAML file with a top-level `markup:` mapping.

    A None path gives the default style.
    """
    if path is None:
        return DEFAULT_STYLE

    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)

    if cfg is None:
        return DEFAULT_STYLE
    if not isinstance(cfg, dict):
        raise StyleConfigError("markup style file: top level must be a mapping")

    return style_from_dict(cfg.get("markup", {}))
