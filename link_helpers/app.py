"""Flask application factory."""

import logging

from flask import Flask

from link_helpers.config import Config
from link_helpers.demo import demo_bp
from link_helpers.extension import LinkHelpers
from link_helpers.logging_config import setup_logging

logger = logging.getLogger(__name__)

links = LinkHelpers()


def create_app(config_object=Config, **overrides) -> Flask:
    """Build the demo application with the link helpers installed.

    ``overrides`` are applied on top of ``config_object``; tests use them to
    tweak single settings.
    """
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.config.update(overrides)
    if hasattr(config_object, "validate"):
        config_object.validate()

    setup_logging(app)
    links.init_app(app)

    app.register_blueprint(demo_bp)

    logger.info("Application created")
    return app
