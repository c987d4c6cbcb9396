"""Network error classification for the ObjectScale management API client.

Maps httpx transport exceptions onto the TransportError family and attaches
user guidance that the CLI renders with rich.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Type

import httpx

from .exceptions import (
    DNSResolutionError,
    NetworkConnectionError,
    NetworkTimeoutError,
    SSLCertificateError,
    TransportError,
)

logger = logging.getLogger(__name__)


@dataclass
class UserGuidance:
    """User guidance information for network errors."""

    error_type: str
    troubleshooting_steps: List[str]
    contact_info: Optional[str] = None
    additional_notes: List[str] = field(default_factory=list)

    def format_for_console(self) -> str:
        """Format guidance for rich console output."""
        content = [
            f"[bold red]Error Type:[/bold red] {self.error_type}",
            "",
            "[bold yellow]Troubleshooting Steps:[/bold yellow]",
        ]
        for i, step in enumerate(self.troubleshooting_steps, 1):
            content.append(f"{i}. {step}")

        if self.additional_notes:
            content.append("")
            content.append("[bold blue]Additional Notes:[/bold blue]")
            for note in self.additional_notes:
                content.append(f"• {note}")

        if self.contact_info:
            content.append("")
            content.append(f"[bold green]Support:[/bold green] {self.contact_info}")

        return "\n".join(content)


class UserGuidanceProvider:
    """Provides user guidance for different transport failures."""

    def __init__(self):
        self._guidance_mapping: Dict[Type[Exception], Callable[[], UserGuidance]] = {
            NetworkConnectionError: self._connection_guidance,
            DNSResolutionError: self._dns_guidance,
            SSLCertificateError: self._ssl_guidance,
            NetworkTimeoutError: self._timeout_guidance,
        }

    def get_guidance(self, error: Exception) -> UserGuidance:
        """Get user guidance for a specific error."""
        guidance_func = self._guidance_mapping.get(type(error), self._generic_guidance)
        return guidance_func()

    def _connection_guidance(self) -> UserGuidance:
        return UserGuidance(
            error_type="Network Connection Error",
            troubleshooting_steps=[
                "Check that the ObjectScale management endpoint is reachable",
                "Verify the endpoint URL and port are correct",
                "Check firewall and ingress rules between this host and the cluster",
            ],
            contact_info="Contact your ObjectScale administrator if the problem persists",
        )

    def _dns_guidance(self) -> UserGuidance:
        return UserGuidance(
            error_type="DNS Resolution Error",
            troubleshooting_steps=[
                "Verify the endpoint hostname is spelled correctly",
                "Try the management service IP address instead of its hostname",
                "Check your DNS server settings",
            ],
            additional_notes=[
                "In-cluster service names only resolve from inside Kubernetes",
            ],
        )

    def _ssl_guidance(self) -> UserGuidance:
        return UserGuidance(
            error_type="SSL Certificate Error",
            troubleshooting_steps=[
                "Check that the management certificate is valid and not expired",
                "Provide the cluster CA bundle with the tls.ca_bundle setting",
                "Verify the endpoint hostname matches the certificate",
            ],
            additional_notes=[
                "Do not disable certificate verification outside test clusters",
            ],
        )

    def _timeout_guidance(self) -> UserGuidance:
        return UserGuidance(
            error_type="Network Timeout Error",
            troubleshooting_steps=[
                "Try again, the management service may be under heavy load",
                "Check network latency to the cluster",
                "Increase the timeouts section of the configuration",
            ],
        )

    def _generic_guidance(self) -> UserGuidance:
        return UserGuidance(
            error_type="Unknown Network Error",
            troubleshooting_steps=[
                "Check your network connection",
                "Verify the management endpoint is accessible",
                "Try again in a few minutes",
            ],
        )


class NetworkErrorHandler:
    """Classifies httpx transport failures into TransportError subclasses."""

    def __init__(self):
        self.guidance_provider = UserGuidanceProvider()
        self._dns_error_patterns = [
            r"name.*resolution.*failed",
            r"name.*or.*service.*not.*known",
            r"nodename.*nor.*servname.*provided",
            r"temporary.*failure.*in.*name.*resolution",
            r"getaddrinfo.*failed",
        ]
        self._ssl_error_patterns = [
            r"ssl.*certificate.*verification.*failed",
            r"certificate.*verify.*failed",
            r"ssl.*handshake.*failed",
            r"bad.*certificate",
        ]

    def classify_network_error(self, error: Exception) -> None:
        """Classify a transport failure and raise the matching TransportError.

        Args:
            error: The original httpx exception

        Raises:
            TransportError: Always; the subclass depends on the failure
        """
        error_message = str(error).lower()

        if isinstance(error, httpx.ConnectTimeout):
            self._raise_with_guidance(
                NetworkTimeoutError(
                    "Connection timed out. Check your network connection or try again later."
                )
            )
        elif isinstance(error, httpx.TimeoutException):
            self._raise_with_guidance(
                NetworkTimeoutError(
                    "Request timed out. Check your network connection or try again later."
                )
            )
        elif isinstance(error, httpx.ConnectError):
            self._handle_connect_error(error, error_message)
        elif isinstance(error, httpx.TooManyRedirects):
            self._raise_with_guidance(
                NetworkConnectionError(f"Endpoint redirected too many times: {error}")
            )
        elif isinstance(error, httpx.TransportError):
            self._raise_with_guidance(NetworkConnectionError(f"Network error: {error}"))
        else:
            self._raise_with_guidance(
                NetworkConnectionError(f"Unknown network error: {error}")
            )

    def _handle_connect_error(
        self, error: httpx.ConnectError, error_message: str
    ) -> None:
        if any(re.search(pattern, error_message) for pattern in self._dns_error_patterns):
            self._raise_with_guidance(
                DNSResolutionError(
                    "Cannot resolve management endpoint address. Check the endpoint URL."
                )
            )

        if any(re.search(pattern, error_message) for pattern in self._ssl_error_patterns):
            self._raise_with_guidance(
                SSLCertificateError(
                    "SSL certificate verification failed for the management endpoint."
                )
            )

        if "connection refused" in error_message:
            self._raise_with_guidance(
                NetworkConnectionError(
                    "Cannot connect to management endpoint. Check that it is running and accessible."
                )
            )

        self._raise_with_guidance(NetworkConnectionError(f"Connection failed: {error}"))

    def _raise_with_guidance(self, error: TransportError) -> None:
        guidance = self.guidance_provider.get_guidance(error)
        error.user_guidance = guidance.format_for_console()
        logger.debug(f"Classified transport failure as {type(error).__name__}")
        raise error
