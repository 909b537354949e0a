"""Flask extension exposing the link helpers to Jinja templates."""

from __future__ import annotations

import logging

from flask import current_app

from link_helpers.errors import LinkHelperError
from link_helpers.helpers import DEFAULT_IMAGE_EXTENSION, DEFAULT_IMAGES_PATH, LinkHelper

logger = logging.getLogger(__name__)

EXTENSION_KEY = "link_helpers"

# template name -> LinkHelper method
TEMPLATE_GLOBALS = {
    "resolve_url": "resolve_url",
    "render_link": "render_link",
    "render_image_link": "render_image_link",
    "link_unless": "link_unless",
    "link_if": "link_if",
    "link_unless_current_page": "link_unless_current_page",
    "render_mail_link": "render_mail_link",
    "is_current_page": "is_current_page",
    # Rails-style names
    "link_to": "render_link",
    "link_image_to": "render_image_link",
    "link_to_image": "render_image_link",
    "link_to_if": "link_if",
    "link_to_unless": "link_unless",
    "link_to_unless_current": "link_unless_current_page",
    "mail_to": "render_mail_link",
    "current_page": "is_current_page",
}


class LinkHelpers:
    """Register a :class:`LinkHelper` on a Flask app.

    Usage::

        link_helpers = LinkHelpers()
        link_helpers.init_app(app)

    Templates can then call ``render_link(...)``, ``mail_to(...)`` and the
    other helpers directly.
    """

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app) -> LinkHelper:
        app.config.setdefault("LINK_HELPERS_IMAGES_PATH", DEFAULT_IMAGES_PATH)
        app.config.setdefault("LINK_HELPERS_DEFAULT_IMAGE_EXTENSION", DEFAULT_IMAGE_EXTENSION)

        helper = LinkHelper(
            images_path=app.config["LINK_HELPERS_IMAGES_PATH"],
            default_image_extension=app.config["LINK_HELPERS_DEFAULT_IMAGE_EXTENSION"],
        )
        app.extensions[EXTENSION_KEY] = helper

        for template_name, method_name in TEMPLATE_GLOBALS.items():
            app.add_template_global(getattr(helper, method_name), template_name)

        @app.context_processor
        def inject_link_helper():
            """Expose the helper object itself as ``link_helper``."""
            return {"link_helper": helper}

        logger.info(
            "Link helpers registered (images_path=%s, default_extension=%s)",
            helper.images_path,
            helper.default_image_extension,
        )
        return helper


def current_link_helper() -> LinkHelper:
    """Return the helper registered on ``current_app``."""
    helper = current_app.extensions.get(EXTENSION_KEY)
    if helper is None:
        raise LinkHelperError("LinkHelpers has not been initialized on this application.")
    return helper
