"""Request description and URL construction for management API calls."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote, urlencode

from .exceptions import InvalidRequestError


class HTTPMethod(str, Enum):
    """HTTP methods accepted by the management API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class ContentType(str, Enum):
    """Wire formats the management API speaks."""

    XML = "application/xml"
    JSON = "application/json"


@dataclass(frozen=True)
class Request:
    """A single management API call, independent of any HTTP library.

    Attributes:
        method: HTTP method
        path: Path relative to the client endpoint, without a query string
        content_type: Format used for both the request body and the response
        params: Query parameters
        body: Payload to serialize, or None for a bodiless request
        allow_empty_response: Accept an empty success body even when the
            caller asks for a decoded result
    """

    method: HTTPMethod
    path: str
    content_type: ContentType = ContentType.JSON
    params: Mapping[str, str] = field(default_factory=dict)
    body: Any = None
    allow_empty_response: bool = False

    def validate(self) -> None:
        """Check the request is well formed.

        Raises:
            InvalidRequestError: If method, content type, path or body are invalid
        """
        if not isinstance(self.method, HTTPMethod):
            try:
                HTTPMethod(self.method)
            except ValueError:
                raise InvalidRequestError(f"Unsupported HTTP method: {self.method!r}")
        if not isinstance(self.content_type, ContentType):
            try:
                ContentType(self.content_type)
            except ValueError:
                raise InvalidRequestError(
                    f"Unsupported content type: {self.content_type!r}"
                )
        if "?" in self.path:
            raise InvalidRequestError(
                f"Query string must be passed as params, not in path: {self.path}"
            )
        if self.body is not None and HTTPMethod(self.method) in (
            HTTPMethod.GET,
            HTTPMethod.DELETE,
        ):
            raise InvalidRequestError(
                f"{HTTPMethod(self.method).value} request cannot carry a body"
            )


def quote_segment(value: str) -> str:
    """Percent-encode a caller supplied value for use as one path segment."""
    return quote(str(value), safe="")


def join_url(base: str, path: str) -> str:
    """Join a base URL and a relative path with exactly one separator.

    Empty segments are collapsed. A trailing separator on ``path`` is kept
    since some endpoints distinguish ``tenant/`` from ``tenant``.
    """
    segments = [segment for segment in path.split("/") if segment]
    base = base.rstrip("/")
    if not segments:
        return base + "/" if path.endswith("/") else base
    url = base + "/" + "/".join(segments)
    if path.endswith("/"):
        url += "/"
    return url


def build_url(
    base: str, path: str, params: Optional[Mapping[str, str]] = None
) -> str:
    """Build the absolute URL for a request, query parameters sorted by key."""
    url = join_url(base, path)
    if params:
        ordered: Dict[str, str] = {key: str(params[key]) for key in sorted(params)}
        url += "?" + urlencode(ordered)
    return url
