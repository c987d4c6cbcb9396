"""Console rendering of management API client errors."""

import logging
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .api_clients.exceptions import (
    APIClientError,
    APIError,
    AuthenticationError,
    CodecError,
    TransportError,
)

logger = logging.getLogger(__name__)


class CLIErrorDisplay:
    """User-friendly error display for CLI commands."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)

    def display_error(self, error: Exception, show_technical_details: bool = False):
        """Render ``error`` as a rich panel.

        Args:
            error: The exception raised by a client call
            show_technical_details: Also print the raw response body and cause
        """
        title, style = self._title_for(error)
        body = Text(str(error))

        if isinstance(error, APIError) and error.is_not_found:
            body.append("\n\nThe requested resource does not exist.", style="dim")

        self.console.print(Panel(body, title=title, border_style=style))

        if isinstance(error, TransportError) and error.user_guidance:
            self.console.print(Panel(error.user_guidance, border_style="yellow"))

        if show_technical_details:
            if isinstance(error, APIError) and error.body:
                self.console.print(Panel(Text(error.body), title="Response body"))
            if error.__cause__ is not None:
                self.console.print(f"[dim]Caused by: {error.__cause__!r}[/dim]")

    @staticmethod
    def _title_for(error: Exception):
        if isinstance(error, AuthenticationError):
            return "Authentication Failed", "red"
        if isinstance(error, TransportError):
            return "Connection Problem", "red"
        if isinstance(error, APIError):
            return f"Management API Error ({error.status_code})", "red"
        if isinstance(error, CodecError):
            return "Unexpected Response", "magenta"
        if isinstance(error, APIClientError):
            return "Client Error", "red"
        return "Error", "red"
