"""
Link and markup helpers for templates.

:class:`LinkHelper` builds anchors, image links, conditional links and
obfuscated mailto links. URL resolution and the current request URI are
injected, so the same helper works inside Flask (the default) or with plain
callables in tests and offline rendering.

Operations:
    - resolve_url: options -> URL string
    - render_link: ``<a>`` with optional ``confirm()`` guard
    - render_image_link: ``<a><img /></a>`` with inferred path and alt text
    - link_unless / link_if / link_unless_current_page: conditional links
    - render_mail_link: plain, hex or JavaScript-obfuscated mailto links
    - is_current_page: compare a destination with the request URI
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from markupsafe import Markup

from link_helpers.encoding import confirm_to_javascript, hex_encode_address, javascript_escape
from link_helpers.options import (
    HtmlOptions,
    ImageOptions,
    LinkOptions,
    coerce_link_options,
)
from link_helpers.tags import content_tag, html_escape, tag
from link_helpers.urls import current_request_uri, flask_url_resolver, resolve_url

logger = logging.getLogger(__name__)

DEFAULT_IMAGES_PATH = "/images"
DEFAULT_IMAGE_EXTENSION = ".png"


# =============================================================================
# SUPPRESSION HANDLERS
# =============================================================================

@dataclass(frozen=True)
class NameHandler:
    """Called with the link name when a conditional link is suppressed."""

    callback: Callable[[Any], Any]

    def __call__(self, name, options: LinkOptions, html_options: HtmlOptions):
        return self.callback(name)


@dataclass(frozen=True)
class ContextHandler:
    """Called with ``(name, options, html_options)`` when a link is suppressed."""

    callback: Callable[[Any, LinkOptions, HtmlOptions], Any]

    def __call__(self, name, options: LinkOptions, html_options: HtmlOptions):
        return self.callback(name, options, html_options)


SuppressionHandler = Union[NameHandler, ContextHandler, Callable[[Any], Any]]


def _is_blank(name) -> bool:
    return name is None or name == ""


def _as_handler(handler: SuppressionHandler) -> Union[NameHandler, ContextHandler]:
    if isinstance(handler, (NameHandler, ContextHandler)):
        return handler
    return NameHandler(handler)


# =============================================================================
# HELPER
# =============================================================================

class LinkHelper:
    """Markup helpers bound to a URL resolver and a request URI accessor."""

    def __init__(
        self,
        resolver: Callable = flask_url_resolver,
        request_uri: Callable[[], str] = current_request_uri,
        images_path: str = DEFAULT_IMAGES_PATH,
        default_image_extension: str = DEFAULT_IMAGE_EXTENSION,
    ):
        self.resolver = resolver
        self.request_uri = request_uri
        self.images_path = images_path
        self.default_image_extension = default_image_extension

    def resolve_url(self, options: Any = None) -> str:
        """Return the URL for ``options`` (a string, a mapping or LinkOptions)."""
        return resolve_url(coerce_link_options(options), self.resolver)

    def render_link(self, name: Any, options: Any = None, html_options: Any = None) -> Markup:
        """Render an anchor to ``options`` with ``name`` as its content.

        When ``name`` is empty the URL itself becomes the content. A
        ``confirm`` entry guards the link with a JavaScript ``confirm()``.
        """
        html = HtmlOptions.from_mapping(html_options)
        attributes = html.to_mapping()
        confirm = attributes.pop("confirm", None)
        if confirm is not None:
            attributes["onclick"] = confirm_to_javascript(confirm)

        href = self.resolve_url(options)
        attributes["href"] = href
        return content_tag("a", href if _is_blank(name) else name, attributes)

    def render_image_link(self, src: str, options: Any = None, html_options: Any = None) -> Markup:
        """Render an anchor wrapping an ``<img>`` for ``src``.

        ``alt``, ``size`` ("WxH"), ``border`` and ``align`` go to the image;
        every other html option stays on the anchor.
        """
        html = HtmlOptions.from_mapping(html_options)
        image = ImageOptions(src=self.image_path(src))

        image.alt = html.alt if html.alt is not None else self.image_alt(src)
        if html.size is not None:
            dimensions = str(html.size).split("x")
            image.width = dimensions[0]
            if len(dimensions) > 1:
                image.height = dimensions[1]
        image.border = html.border
        image.align = html.align

        html.alt = html.size = html.border = html.align = None
        return self.render_link(tag("img", image.as_attributes()), options, html)

    # Older names kept for templates that still use them.
    link_image_to = render_image_link
    link_to_image = render_image_link

    def image_path(self, src: str) -> str:
        path = src if "/" in src else f"{self.images_path.rstrip('/')}/{src}"
        if "." not in src:
            path += self.default_image_extension
        return path

    @staticmethod
    def image_alt(src: str) -> str:
        """Capitalized file name of ``src`` without its extension."""
        filename = src.rstrip("/").split("/")[-1]
        return filename.split(".")[0].capitalize()

    def link_unless(
        self,
        condition: Any,
        name: Any,
        options: Any = None,
        html_options: Any = None,
        on_suppressed: Optional[SuppressionHandler] = None,
    ) -> Any:
        """Render a link unless ``condition`` holds.

        When suppressed, the escaped name is returned, or the result of
        ``on_suppressed`` if one is given.
        """
        if condition:
            if on_suppressed is None:
                return html_escape(name)
            handler = _as_handler(on_suppressed)
            return handler(name, coerce_link_options(options), HtmlOptions.from_mapping(html_options))
        return self.render_link(name, options, html_options)

    def link_if(
        self,
        condition: Any,
        name: Any,
        options: Any = None,
        html_options: Any = None,
        on_suppressed: Optional[SuppressionHandler] = None,
    ) -> Any:
        """Render a link only if ``condition`` holds."""
        return self.link_unless(not condition, name, options, html_options, on_suppressed)

    def link_unless_current_page(
        self,
        name: Any,
        options: Any = None,
        html_options: Any = None,
        on_suppressed: Optional[SuppressionHandler] = None,
    ) -> Any:
        """Render a link unless it points at the page being viewed."""
        return self.link_unless(self.is_current_page(options), name, options, html_options, on_suppressed)

    def render_mail_link(self, email_address: str, name: Any = None, html_options: Any = None) -> Markup:
        """Render a mailto link, optionally obfuscated.

        ``encode="hex"`` percent-encodes the word characters of the address
        in the href. ``encode="javascript"`` writes the whole anchor from an
        ``eval(unescape(...))`` script.
        """
        html = HtmlOptions.from_mapping(html_options)
        encode = html.encode
        html.encode = None
        attributes = html.to_mapping()
        address = str(email_address)
        logger.debug("Rendering mail link with encode=%s", encode)

        if encode == "javascript":
            content = address if _is_blank(name) else name
            anchor = content_tag("a", content, {**attributes, "href": f"mailto:{address}"})
            statement = f"document.write('{anchor}');"
            return Markup(
                '<script type="text/javascript" language="javascript">'
                f"eval(unescape('{javascript_escape(statement)}'))"
                "</script>"
            )
        if encode == "hex":
            href = f"mailto:{hex_encode_address(address)}"
        else:
            href = f"mailto:{address}"
        return content_tag("a", address if _is_blank(name) else name, {**attributes, "href": href})

    def is_current_page(self, options: Any = None) -> bool:
        """True if ``options`` resolve to the URI of the current request."""
        return self.resolve_url(options) == self.request_uri()
