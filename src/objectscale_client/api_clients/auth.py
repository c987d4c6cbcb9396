"""Session management for the ObjectScale management API.

An Authenticator owns the current Session, performs the login handshake
against the gateway, stamps credentials on outgoing requests and decides
whether a response means the session has expired. Renewal is single-flight:
concurrent callers that observe the same stale session share one handshake.
"""

import asyncio
import base64
import hashlib
import hmac
import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Iterable, Optional, Tuple

import httpx

from .exceptions import APIClientError, AuthenticationError, DecodeError
from .network_error_handler import NetworkErrorHandler

logger = logging.getLogger(__name__)

AUTH_TOKEN_HEADER = "X-SDS-AUTH-TOKEN"

ExpiryPredicate = Callable[[httpx.Response], bool]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Session:
    """An authenticated session token.

    Attributes:
        token: Opaque token sent in the X-SDS-AUTH-TOKEN header
        obtained_at: When the handshake completed
        expires_at: Known expiry, or None when the server does not say
    """

    token: str
    obtained_at: datetime = field(default_factory=_utcnow)
    expires_at: Optional[datetime] = None

    @property
    def is_expired(self) -> bool:
        return self.expires_at is not None and _utcnow() >= self.expires_at

    def __repr__(self) -> str:
        return (
            f"Session(token='***', obtained_at={self.obtained_at!r}, "
            f"expires_at={self.expires_at!r})"
        )


def expiry_on(
    status_codes: Iterable[int] = (401,),
    body_markers: Iterable[str] = (),
) -> ExpiryPredicate:
    """Build an expiry predicate.

    A response is treated as session expiry when its status is one of
    ``status_codes``, or when ``body_markers`` are given, when its status
    matches and the body contains any of the markers.

    Args:
        status_codes: Statuses that signal expiry
        body_markers: Optional substrings that must also appear in the body
    """
    codes = frozenset(status_codes)
    markers = tuple(body_markers)

    def predicate(response: httpx.Response) -> bool:
        if response.status_code not in codes:
            return False
        if not markers:
            return True
        text = response.text
        return any(marker in text for marker in markers)

    return predicate


default_expiry_predicate: ExpiryPredicate = expiry_on((401,))


def login_url(gateway: str, path: str) -> str:
    """Return ``gateway`` with its path replaced by the absolute login ``path``."""
    return str(httpx.URL(gateway).copy_with(path=path))


class Authenticator(ABC):
    """Contract between the dispatcher and a session source."""

    @property
    @abstractmethod
    def session(self) -> Optional[Session]:
        """The current session, or None before the first login."""

    @abstractmethod
    def apply_credentials(self, headers: Dict[str, str]) -> None:
        """Add the session credentials to outgoing request headers."""

    @abstractmethod
    def is_expired_response(self, response: httpx.Response) -> bool:
        """Return True if the response means the session is no longer valid."""

    @abstractmethod
    async def ensure_session(self, http: httpx.AsyncClient) -> Session:
        """Return a usable session, logging in if there is none yet."""

    @abstractmethod
    async def renew(
        self, http: httpx.AsyncClient, stale: Optional[Session] = None
    ) -> Session:
        """Replace ``stale`` with a fresh session and return the new one."""


class TokenAuthenticator(Authenticator):
    """Token session with single-flight renewal.

    Subclasses implement ``_login`` to perform the actual handshake.
    """

    def __init__(
        self,
        expiry_predicate: Optional[ExpiryPredicate] = None,
        session: Optional[Session] = None,
        session_ttl: Optional[timedelta] = None,
    ):
        """Initialize the authenticator.

        Args:
            expiry_predicate: Decides whether a response means expiry;
                defaults to HTTP 401
            session: Pre-established session to start from
            session_ttl: Lifetime to assume for new sessions, enabling
                proactive renewal; None means renew only on expiry responses
        """
        self._session = session
        self._expiry_predicate = expiry_predicate or default_expiry_predicate
        self._session_ttl = session_ttl
        self._renew_lock = asyncio.Lock()
        self._network_error_handler = NetworkErrorHandler()
        # Number of finished login attempts and the last failure, if the
        # latest attempt failed: (stale session it replaced, error).
        self._attempts = 0
        self._last_failure: Optional[Tuple[Optional[Session], APIClientError]] = None
        self.login_count = 0

    @property
    def session(self) -> Optional[Session]:
        return self._session

    def apply_credentials(self, headers: Dict[str, str]) -> None:
        session = self._session
        if session is None:
            raise AuthenticationError("No session established")
        headers[AUTH_TOKEN_HEADER] = session.token

    def is_expired_response(self, response: httpx.Response) -> bool:
        return self._expiry_predicate(response)

    async def ensure_session(self, http: httpx.AsyncClient) -> Session:
        session = self._session
        if session is not None and not session.is_expired:
            return session
        return await self.renew(http, stale=session)

    async def renew(
        self, http: httpx.AsyncClient, stale: Optional[Session] = None
    ) -> Session:
        attempts_seen = self._attempts
        async with self._renew_lock:
            current = self._session
            if current is not None and current is not stale and not current.is_expired:
                logger.debug("Session already renewed by a concurrent call")
                return current

            failure = self._last_failure
            if (
                failure is not None
                and self._attempts > attempts_seen
                and failure[0] is stale
            ):
                logger.debug("Sharing the failure of a concurrent login")
                raise failure[1]

            logger.info("Logging in to management API")
            try:
                session = await self._login(http)
            except APIClientError as e:
                self._attempts += 1
                self._last_failure = (stale, e)
                raise
            self._attempts += 1
            self._last_failure = None
            self.login_count += 1
            # Published only after the handshake completes, so a cancelled
            # login leaves the previous session in place.
            self._session = session
            return session

    @abstractmethod
    async def _login(self, http: httpx.AsyncClient) -> Session:
        """Perform the login handshake."""

    async def _basic_auth_login(
        self, http: httpx.AsyncClient, url: str, username: str, password: str
    ) -> Session:
        """GET ``url`` with HTTP basic auth and read the token header.

        Raises:
            AuthenticationError: If the login is rejected or returns no token
            TransportError: If the gateway cannot be reached
            DecodeError: If the login response body cannot be decoded
        """
        try:
            response = await http.get(url, auth=httpx.BasicAuth(username, password))
        except httpx.DecodingError as e:
            raise DecodeError(f"Undecodable login response: {e}") from e
        except httpx.RequestError as e:
            self._network_error_handler.classify_network_error(e)
            raise

        if not response.is_success:
            raise AuthenticationError(
                f"Login failed: HTTP {response.status_code}",
                status_code=response.status_code,
            )

        token = response.headers.get(AUTH_TOKEN_HEADER)
        if not token:
            raise AuthenticationError(
                f"Login response carried no {AUTH_TOKEN_HEADER} header"
            )

        now = _utcnow()
        expires_at = now + self._session_ttl if self._session_ttl else None
        return Session(token=token, obtained_at=now, expires_at=expires_at)


class UserAuthenticator(TokenAuthenticator):
    """Logs in as a management user with username and password.

    The login path is absolute: it replaces any path on the gateway URL.
    """

    LOGIN_PATH = "/mgmt/login"

    def __init__(self, gateway: str, username: str, password: str, **kwargs):
        super().__init__(**kwargs)
        self.gateway = gateway
        self.username = username
        self._password = password

    async def _login(self, http: httpx.AsyncClient) -> Session:
        url = login_url(self.gateway, self.LOGIN_PATH)
        return await self._basic_auth_login(http, url, self.username, self._password)


class ServiceAuthenticator(TokenAuthenticator):
    """Logs in as an in-cluster service using a shared HMAC secret.

    The username encodes the ObjectScale instance, namespace and pod; the
    password is an HMAC-SHA256 of the service URN and the current time
    rounded to 30 seconds, so both sides derive it without a round trip.
    Like the user login, the path replaces any path on the gateway URL.
    """

    LOGIN_PATH = "/mgmt/serviceLogin"

    def __init__(
        self,
        gateway: str,
        shared_secret: str,
        pod_name: str,
        namespace: str,
        objectscale_id: str,
        clock: Callable[[], float] = time.time,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.gateway = gateway
        self.pod_name = pod_name
        self.namespace = namespace
        self.objectscale_id = objectscale_id
        self._shared_secret = shared_secret
        self._clock = clock

    def service_username(self) -> str:
        raw = f"{self.objectscale_id},,{self.namespace},{self.pod_name}"
        return "B64-" + base64.b64encode(raw.encode("utf-8")).decode("ascii")

    def service_password(self) -> str:
        urn = f"urn:osc:{self.objectscale_id}::service/{self.pod_name}"
        millis = int(self._clock() * 1000)
        time_factor = (millis + 15_000) // 30_000 * 30_000
        digest = hmac.new(
            self._shared_secret.encode("utf-8"),
            f"{urn}{time_factor}".encode("utf-8"),
            hashlib.sha256,
        ).digest()
        return base64.b64encode(digest).decode("ascii")

    async def _login(self, http: httpx.AsyncClient) -> Session:
        url = login_url(self.gateway, self.LOGIN_PATH)
        return await self._basic_auth_login(
            http, url, self.service_username(), self.service_password()
        )
