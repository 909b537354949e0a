"""
flask-link-helpers - HTML link helpers for Flask/Jinja templates.

- helpers    LinkHelper: render_link, render_image_link, link_if,
             link_unless, link_unless_current_page, render_mail_link,
             is_current_page, resolve_url
- options    Literal, RouteQuery, HtmlOptions, ImageOptions
- tags       html_escape, tag, content_tag (markupsafe)
- extension  LinkHelpers Flask extension, current_link_helper()

Usage:
    from link_helpers import LinkHelpers
    LinkHelpers(app)
"""

__version__ = "0.1.0"

from link_helpers.errors import (
    LinkHelperError,
    InvalidLinkOptionsError,
    MissingRequestContextError,
)
from link_helpers.options import (
    Literal,
    RouteQuery,
    LinkOptions,
    HtmlOptions,
    ImageOptions,
    coerce_link_options,
)
from link_helpers.tags import html_escape, tag, content_tag
from link_helpers.helpers import LinkHelper, NameHandler, ContextHandler
from link_helpers.extension import LinkHelpers, current_link_helper

__all__ = [
    "__version__",
    # errors
    "LinkHelperError",
    "InvalidLinkOptionsError",
    "MissingRequestContextError",
    # options
    "Literal",
    "RouteQuery",
    "LinkOptions",
    "HtmlOptions",
    "ImageOptions",
    "coerce_link_options",
    # tags
    "html_escape",
    "tag",
    "content_tag",
    # helpers
    "LinkHelper",
    "NameHandler",
    "ContextHandler",
    # extension
    "LinkHelpers",
    "current_link_helper",
]
