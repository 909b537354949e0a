"""Tag building and escaping on top of markupsafe."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from markupsafe import Markup, escape


def html_escape(text: Any) -> Markup:
    """Escape ``text`` for HTML; values already marked safe pass through."""
    if text is None:
        return Markup("")
    return escape(text)


def escape_attribute(value: Any) -> str:
    """Escape ``&<>"`` in a double-quoted attribute value; single quotes stay literal."""
    if hasattr(value, "__html__"):
        return str(value.__html__())
    return (
        str(value)
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def tag_options(attributes: Optional[Mapping[str, Any]]) -> str:
    """Render ``attributes`` as `` key="value"`` pairs, in insertion order."""
    if not attributes:
        return ""
    parts = []
    for key, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True:
            value = key
        parts.append(f' {key}="{escape_attribute(value)}"')
    return "".join(parts)


def tag(name: str, attributes: Optional[Mapping[str, Any]] = None) -> Markup:
    """Render a self-closing tag such as ``<img src="..." />``."""
    return Markup(f"<{name}{tag_options(attributes)} />")


def content_tag(name: str, content: Any, attributes: Optional[Mapping[str, Any]] = None) -> Markup:
    """Render ``<name ...>content</name>``, escaping unsafe content."""
    return Markup(f"<{name}{tag_options(attributes)}>{html_escape(content)}</{name}>")
