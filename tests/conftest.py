"""Shared pytest fixtures for ObjectScale client tests."""

import asyncio
from typing import Dict, List, Optional, Tuple

import httpx
import pytest

from objectscale_client.api_clients.auth import AUTH_TOKEN_HEADER


class ScriptedServer:
    """Management API stand-in served through httpx.MockTransport.

    Login endpoints hand out ``login_token``. Every other request must carry
    a token from ``valid_tokens`` or it gets a 401; authorized requests are
    answered from the registered routes, or 404.
    """

    def __init__(self):
        self.valid_tokens = {"fresh-token"}
        self.login_token = "fresh-token"
        self.login_status = 200
        self.login_delay = 0.0
        self.requests: List[httpx.Request] = []
        self.login_requests: List[httpx.Request] = []
        self._routes: Dict[Tuple[str, str], httpx.Response] = {}

    def route(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        json=None,
        content: bytes = b"",
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        if json is not None:
            response = httpx.Response(status_code, json=json, headers=headers)
        else:
            response = httpx.Response(status_code, content=content, headers=headers)
        self._routes[(method, path)] = response

    async def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path in ("/mgmt/login", "/mgmt/serviceLogin"):
            self.login_requests.append(request)
            if self.login_delay:
                await asyncio.sleep(self.login_delay)
            if self.login_status != 200:
                return httpx.Response(self.login_status, text="login rejected")
            return httpx.Response(200, headers={AUTH_TOKEN_HEADER: self.login_token})

        self.requests.append(request)
        if request.headers.get(AUTH_TOKEN_HEADER) not in self.valid_tokens:
            return httpx.Response(401, text="session expired")

        response = self._routes.get((request.method, path))
        if response is None:
            return httpx.Response(404, text="no route")
        return httpx.Response(
            response.status_code, content=response.content, headers=response.headers
        )

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def server() -> ScriptedServer:
    return ScriptedServer()
