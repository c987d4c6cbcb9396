"""Base ObjectScale management API client.

Provides the generic remote-call dispatcher used by every resource client:
URL construction, payload encoding, session handling with a single renewal
on expiry, and translation of failures into the client exception hierarchy.
"""

import logging
import ssl
from typing import Any, Dict, Optional, Protocol, Tuple, Union

import httpx

from .auth import Authenticator, Session
from .codec import decode, decode_error_payload, encode
from .exceptions import APIClientError, APIError, AuthenticationError, DecodeError
from .network_error_handler import NetworkErrorHandler
from .request import ContentType, HTTPMethod, Request, build_url

logger = logging.getLogger(__name__)

OVERRIDE_HEADER = "X-EMC-Override"

TimeoutTypes = Union[float, httpx.Timeout, None]


class RemoteCaller(Protocol):
    """Anything able to execute a management API Request."""

    async def make_remote_call(
        self, request: Request, into: Any = None, *, timeout: TimeoutTypes = None
    ) -> Any:
        ...


class ManagementAPIClient:
    """Authenticated dispatcher for ObjectScale management API calls."""

    def __init__(
        self,
        endpoint: str,
        authenticator: Authenticator,
        verify: Union[bool, ssl.SSLContext] = True,
        timeout: Optional[httpx.Timeout] = None,
        override_header: bool = False,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the dispatcher.

        Args:
            endpoint: Base URL of the object management service
            authenticator: Session source used for every call
            verify: TLS verification flag or SSL context with a CA bundle
            timeout: Default timeouts; per-call timeouts override them
            override_header: Send ``X-EMC-Override: true`` on every call
            transport: Custom httpx transport, used by tests
        """
        self.endpoint = endpoint.rstrip("/")
        self.authenticator = authenticator
        self.override_header = override_header
        self._verify = verify
        self._timeout = timeout or httpx.Timeout(
            connect=10.0,
            read=30.0,
            write=10.0,
            pool=5.0,
        )
        self._transport = transport
        self._session: Optional[httpx.AsyncClient] = None
        self._network_error_handler = NetworkErrorHandler()

    @property
    def session(self) -> httpx.AsyncClient:
        """Get or create the shared HTTP session."""
        if self._session is None or self._session.is_closed:
            limits = httpx.Limits(
                max_connections=20,
                max_keepalive_connections=10,
                keepalive_expiry=30.0,
            )
            self._session = httpx.AsyncClient(
                timeout=self._timeout,
                limits=limits,
                verify=self._verify,
                transport=self._transport,
            )
        return self._session

    async def make_remote_call(
        self, request: Request, into: Any = None, *, timeout: TimeoutTypes = None
    ) -> Any:
        """Execute a management API call.

        Args:
            request: Call description
            into: Type to decode a successful response into; None discards
                the body
            timeout: Per-call timeout overriding the client default

        Returns:
            Decoded response, or None when ``into`` is None or the operation
            returned no body and allows that

        Raises:
            InvalidRequestError: If the request is malformed
            EncodeError: If the body cannot be serialized
            TransportError: If the HTTP exchange fails
            AuthenticationError: If no valid session can be obtained
            APIError: If the server answers with a non-success status
            DecodeError: If the response body does not match ``into``
        """
        request.validate()
        method = HTTPMethod(request.method).value
        content_type = ContentType(request.content_type).value
        url = build_url(self.endpoint, request.path, request.params)

        headers = {"Accept": content_type}
        content: Optional[bytes] = None
        if request.body is not None:
            content = encode(request.body, request.content_type)
            headers["Content-Type"] = content_type
        if self.override_header:
            headers[OVERRIDE_HEADER] = "true"

        http = self.session
        await self._ensure_session(http)
        response, used_session = await self._send(
            http, method, url, headers, content, timeout
        )

        if self.authenticator.is_expired_response(response):
            logger.info(
                f"Session expired on {method} {url}, renewing and retrying"
            )
            await self._renew(http, used_session)
            response, _ = await self._send(
                http, method, url, headers, content, timeout
            )
            if self.authenticator.is_expired_response(response):
                raise AuthenticationError(
                    "Session rejected again after renewal",
                    status_code=response.status_code,
                )

        return self._handle_response(request, response, into)

    async def _ensure_session(self, http: httpx.AsyncClient) -> None:
        try:
            await self.authenticator.ensure_session(http)
        except AuthenticationError:
            logger.warning("Login rejected by the gateway")
            raise
        except APIClientError as e:
            logger.warning(f"Login failed: {e}")
            raise AuthenticationError(f"Login failed: {e}") from e

    async def _renew(self, http: httpx.AsyncClient, stale: Optional[Session]) -> None:
        try:
            await self.authenticator.renew(http, stale=stale)
        except AuthenticationError:
            logger.warning("Session renewal rejected by the gateway")
            raise
        except APIClientError as e:
            logger.warning(f"Session renewal failed: {e}")
            raise AuthenticationError(f"Session renewal failed: {e}") from e

    async def _send(
        self,
        http: httpx.AsyncClient,
        method: str,
        url: str,
        headers: Dict[str, str],
        content: Optional[bytes],
        timeout: TimeoutTypes,
    ) -> Tuple[httpx.Response, Optional[Session]]:
        request_headers = dict(headers)
        used_session = self.authenticator.session
        self.authenticator.apply_credentials(request_headers)

        logger.debug(f"{method} {url}")
        try:
            response = await http.request(
                method,
                url,
                headers=request_headers,
                content=content,
                timeout=timeout if timeout is not None else httpx.USE_CLIENT_DEFAULT,
            )
        except httpx.DecodingError as e:
            raise DecodeError(
                f"Undecodable response body for {method} {url}: {e}"
            ) from e
        except httpx.RequestError as e:
            self._network_error_handler.classify_network_error(e)
            raise
        logger.debug(f"{method} {url} -> {response.status_code}")
        return response, used_session

    def _handle_response(
        self, request: Request, response: httpx.Response, into: Any
    ) -> Any:
        if response.is_success:
            if into is None:
                return None
            return decode(
                response.content,
                request.content_type,
                into,
                allow_empty=request.allow_empty_response,
            )
        raise self._api_error(request, response)

    def _api_error(self, request: Request, response: httpx.Response) -> APIError:
        status = response.status_code
        body = response.text
        payload = decode_error_payload(response.content, request.content_type)

        code = payload.get("code") if payload else None
        message = None
        if payload:
            message = payload.get("message") or payload.get("description")

        if code is None and message is None:
            reason = response.reason_phrase or f"HTTP {status}"
            text = body.strip()
            return APIError(
                status_code=status,
                code=str(status),
                message=f"{reason}: {text}" if text else reason,
                body=body,
            )

        details = payload.get("details") if payload else None
        retryable = payload.get("retryable", False) if payload else False
        if isinstance(retryable, str):
            retryable = retryable.strip().lower() == "true"
        return APIError(
            status_code=status,
            code=str(code) if code is not None else str(status),
            message=str(message) if message is not None else f"HTTP {status}",
            details=str(details) if details else None,
            retryable=bool(retryable),
            body=body,
        )

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.is_closed:
            await self._session.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
