"""
Typed option structures for the link helpers.

Templates hand the helpers loose values: a URL string or a dict of route
parameters for the destination, and a dict of HTML attributes mixed with a
few reserved pseudo-attributes. Everything is normalized here, once, so the
helpers only ever see the dataclasses below.

Structures:
    - Literal / RouteQuery: destination of a link (``LinkOptions``)
    - HtmlOptions: HTML attributes plus reserved keys
    - ImageOptions: attributes of the ``<img>`` inside an image link
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Union

from link_helpers.errors import InvalidLinkOptionsError


# =============================================================================
# DESTINATIONS
# =============================================================================

@dataclass(frozen=True)
class Literal:
    """A literal URL or path, used as ``href`` without resolution."""

    url: str


@dataclass(frozen=True)
class RouteQuery:
    """A destination described by endpoint and parameters.

    ``endpoint`` may be ``None``, in which case the resolver falls back to
    the endpoint of the current request.
    """

    endpoint: Optional[str] = None
    params: Dict[str, Any] = field(default_factory=dict)
    only_path: bool = True

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> "RouteQuery":
        params = {str(key): value for key, value in mapping.items()}
        endpoint = params.pop("endpoint", None)
        only_path = params.pop("only_path", True)
        return cls(endpoint=endpoint, params=params, only_path=bool(only_path))


LinkOptions = Union[Literal, RouteQuery]


def coerce_link_options(value: Any) -> LinkOptions:
    """Normalize a template-supplied destination into ``LinkOptions``."""
    if isinstance(value, (Literal, RouteQuery)):
        return value
    if isinstance(value, str):
        return Literal(value)
    if value is None:
        return RouteQuery()
    if isinstance(value, Mapping):
        return RouteQuery.from_mapping(value)
    raise InvalidLinkOptionsError(value)


# =============================================================================
# HTML ATTRIBUTES
# =============================================================================

RESERVED_HTML_KEYS = ("confirm", "alt", "size", "border", "align", "encode")


@dataclass
class HtmlOptions:
    """HTML attributes with the reserved pseudo-attributes split out."""

    attributes: Dict[str, Any] = field(default_factory=dict)
    confirm: Optional[str] = None
    alt: Optional[str] = None
    size: Optional[str] = None
    border: Any = None
    align: Optional[str] = None
    encode: Optional[str] = None

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping]) -> "HtmlOptions":
        if mapping is None:
            return cls()
        if isinstance(mapping, HtmlOptions):
            return mapping.copy()

        attributes: Dict[str, Any] = {}
        reserved: Dict[str, Any] = {}
        for key, value in mapping.items():
            key = str(key)
            if key in RESERVED_HTML_KEYS:
                reserved[key] = value
            else:
                attributes[key] = value
        return cls(attributes=attributes, **reserved)

    def copy(self) -> "HtmlOptions":
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values["attributes"] = dict(self.attributes)
        return HtmlOptions(**values)

    def to_mapping(self) -> Dict[str, Any]:
        """Flatten back into a plain dict, reserved keys included when set."""
        mapping = dict(self.attributes)
        for key in RESERVED_HTML_KEYS:
            value = getattr(self, key)
            if value is not None:
                mapping[key] = value
        return mapping


@dataclass
class ImageOptions:
    """Attributes for the ``<img>`` tag embedded in an image link."""

    src: str
    alt: Optional[str] = None
    width: Optional[str] = None
    height: Optional[str] = None
    border: Any = None
    align: Optional[str] = None

    def as_attributes(self) -> Dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
