"""URL resolution against the Flask routing context."""

from __future__ import annotations

import logging

from flask import has_request_context, request, url_for
from werkzeug.urls import iri_to_uri

from link_helpers.errors import MissingRequestContextError
from link_helpers.options import Literal, LinkOptions, RouteQuery

logger = logging.getLogger(__name__)


def flask_url_resolver(query: RouteQuery) -> str:
    """Resolve ``query`` with :func:`flask.url_for`.

    Without an explicit endpoint the current request's endpoint is reused,
    along with its view arguments, so ``{"page": 2}`` links to the same view
    with a different parameter.
    """
    endpoint = query.endpoint
    values = dict(query.params)
    if endpoint is None:
        if not has_request_context() or request.endpoint is None:
            raise MissingRequestContextError(
                "A route query without an endpoint needs an active request to resolve against."
            )
        endpoint = request.endpoint
        values = {**(request.view_args or {}), **values}
    return url_for(endpoint, _external=not query.only_path, **values)


def resolve_url(options: LinkOptions, resolver=flask_url_resolver) -> str:
    """Turn link options into a URL; literals are returned unchanged."""
    if isinstance(options, Literal):
        return options.url
    url = resolver(options)
    logger.debug("Resolved %s -> %s", options, url)
    return url


def current_request_uri() -> str:
    """Return the current request URI in the form ``url_for`` produces."""
    if not has_request_context():
        raise MissingRequestContextError()
    # request.path is decoded; url_for output is percent-encoded
    uri = iri_to_uri(f"{request.script_root}{request.path}")
    query_string = request.query_string.decode("latin-1")
    if query_string:
        uri = f"{uri}?{query_string}"
    return uri
