"""Configuration management for the ObjectScale management client."""

import json
import logging
import os
import ssl
from datetime import timedelta
from pathlib import Path
from typing import Literal, Optional, Union

import httpx
from pydantic import BaseModel, Field, field_validator, model_validator

from .api_clients.auth import ServiceAuthenticator, TokenAuthenticator, UserAuthenticator
from .api_clients.base_client import ManagementAPIClient
from .api_clients.client_set import ClientSet

logger = logging.getLogger(__name__)

PASSWORD_ENV = "OBJECTSCALE_PASSWORD"
SHARED_SECRET_ENV = "OBJECTSCALE_SHARED_SECRET"


class UserAuthConfig(BaseModel):
    """Management user credentials.

    The password may be left out of the file and supplied through the
    OBJECTSCALE_PASSWORD environment variable.
    """

    type: Literal["user"] = "user"
    username: str = Field(description="Management user name")
    password: Optional[str] = Field(default=None, description="Management password")


class ServiceAuthConfig(BaseModel):
    """In-cluster service credentials (HMAC shared secret login).

    The shared secret may be supplied through OBJECTSCALE_SHARED_SECRET.
    """

    type: Literal["service"] = "service"
    objectscale_id: str = Field(description="ObjectScale instance id")
    namespace: str = Field(description="Kubernetes namespace of the calling pod")
    pod_name: str = Field(description="Name of the calling pod")
    shared_secret: Optional[str] = Field(default=None, description="HMAC shared secret")


class TLSConfig(BaseModel):
    verify: bool = Field(default=True, description="Verify server certificates")
    ca_bundle: Optional[Path] = Field(
        default=None, description="PEM bundle used instead of the system CAs"
    )


class TimeoutsConfig(BaseModel):
    """HTTP timeouts in seconds."""

    connect: float = Field(default=10.0, gt=0)
    read: float = Field(default=30.0, gt=0)
    write: float = Field(default=10.0, gt=0)
    pool: float = Field(default=5.0, gt=0)

    def to_httpx(self) -> httpx.Timeout:
        return httpx.Timeout(
            connect=self.connect, read=self.read, write=self.write, pool=self.pool
        )


class ClientConfig(BaseModel):
    """Connection settings for one ObjectScale object store."""

    endpoint: str = Field(description="Object management service URL")
    gateway: Optional[str] = Field(
        default=None,
        description="Login gateway URL; defaults to the endpoint",
    )
    auth: Union[UserAuthConfig, ServiceAuthConfig] = Field(discriminator="type")
    tls: TLSConfig = Field(default_factory=TLSConfig)
    timeouts: TimeoutsConfig = Field(default_factory=TimeoutsConfig)
    override_header: bool = Field(
        default=False, description="Send X-EMC-Override: true on every call"
    )
    session_ttl_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        description="Assumed session lifetime; enables renewal before expiry",
    )

    @field_validator("endpoint", "gateway")
    @classmethod
    def validate_url(cls, v: Optional[str]) -> Optional[str]:
        """Require an http(s) URL and drop trailing slashes."""
        if v is None:
            return v
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"URL must start with http:// or https://: {v}")
        return v.rstrip("/")

    @model_validator(mode="after")
    def default_gateway(self) -> "ClientConfig":
        if self.gateway is None:
            self.gateway = self.endpoint
        return self


def load_config(path: Path) -> ClientConfig:
    """Load client configuration from a JSON file.

    Secrets missing from the file are taken from the environment.

    Raises:
        ValueError: If the file is missing, unreadable or invalid
    """
    if not path.exists():
        raise ValueError(f"Configuration file not found: {path}")
    try:
        with open(path, "r") as f:
            data = json.load(f)
        config = ClientConfig(**data)
    except Exception as e:
        raise ValueError(f"Failed to load config from {path}: {e}")

    auth = config.auth
    if isinstance(auth, UserAuthConfig) and auth.password is None:
        auth.password = os.environ.get(PASSWORD_ENV)
    if isinstance(auth, ServiceAuthConfig) and auth.shared_secret is None:
        auth.shared_secret = os.environ.get(SHARED_SECRET_ENV)
    return config


def build_authenticator(config: ClientConfig) -> TokenAuthenticator:
    """Create the authenticator described by ``config.auth``.

    Raises:
        ValueError: If the secret is neither configured nor in the environment
    """
    ttl = (
        timedelta(seconds=config.session_ttl_seconds)
        if config.session_ttl_seconds
        else None
    )
    gateway = config.gateway or config.endpoint
    auth = config.auth
    if isinstance(auth, UserAuthConfig):
        if not auth.password:
            raise ValueError(f"No password configured; set {PASSWORD_ENV}")
        return UserAuthenticator(
            gateway,
            auth.username,
            auth.password,
            session_ttl=ttl,
        )
    if not auth.shared_secret:
        raise ValueError(f"No shared secret configured; set {SHARED_SECRET_ENV}")
    return ServiceAuthenticator(
        gateway,
        shared_secret=auth.shared_secret,
        pod_name=auth.pod_name,
        namespace=auth.namespace,
        objectscale_id=auth.objectscale_id,
        session_ttl=ttl,
    )


def _verify_setting(tls: TLSConfig) -> Union[bool, ssl.SSLContext]:
    if not tls.verify:
        logger.warning("TLS certificate verification is disabled")
        return False
    if tls.ca_bundle is not None:
        return ssl.create_default_context(cafile=str(tls.ca_bundle))
    return True


def build_client(
    config: ClientConfig, transport: Optional[httpx.AsyncBaseTransport] = None
) -> ClientSet:
    """Create a ClientSet wired to a ManagementAPIClient for ``config``."""
    logger.debug(f"Connecting to {config.endpoint}")
    dispatcher = ManagementAPIClient(
        config.endpoint,
        build_authenticator(config),
        verify=_verify_setting(config.tls),
        timeout=config.timeouts.to_httpx(),
        override_header=config.override_header,
        transport=transport,
    )
    return ClientSet(dispatcher)
