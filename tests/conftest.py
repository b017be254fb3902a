"""Shared test fixtures for auth0_oidc.

Provides an in-memory :class:`FakeOidcEngine` that honours the engine
contract (single-use states, ``invalid_state`` on mismatches), a
:class:`RecordingBrowser` that returns a scripted result, and factories for
configurations and clients. These fixtures are automatically discovered by
pytest and available to all test modules without explicit imports.
"""

from __future__ import annotations

import base64
import hashlib
import secrets
from collections.abc import Callable
from typing import Any
from urllib.parse import parse_qs, urlencode, urlparse

import pytest

from auth0_oidc.browser import BrowserLauncher
from auth0_oidc.client import AuthClient
from auth0_oidc.engine import OidcEngine
from auth0_oidc.models import (
    AuthorizationState,
    BrowserOptions,
    BrowserResult,
    BrowserResultType,
    ClientConfiguration,
    LoginRequest,
    LoginResult,
    OidcClientOptions,
    RefreshTokenResult,
    TokenSet,
)
from auth0_oidc.platform import DesktopPlatform


# ---------------------------------------------------------------------------
# Test doubles
# ---------------------------------------------------------------------------


class RecordingBrowser(BrowserLauncher):
    """Browser that records every invocation and returns a scripted result."""

    def __init__(self, result: BrowserResult | None = None) -> None:
        self.result = result or BrowserResult(result_type=BrowserResultType.SUCCESS)
        self.invocations: list[BrowserOptions] = []

    async def invoke(self, options: BrowserOptions) -> BrowserResult:
        self.invocations.append(options)
        return self.result


class FakeOidcEngine(OidcEngine):
    """In-memory engine with single-use authorization states.

    ``login`` drives the configured browser and, when the scripted browser
    result carries no response, answers the callback itself with the code
    ``"interactive"``.
    """

    def __init__(self, options: OidcClientOptions) -> None:
        self.options = options
        self.login_requests: list[LoginRequest] = []
        self.prepared_parameters: list[dict[str, str]] = []
        self.revoked_tokens: set[str] = set()
        self._pending: dict[str, AuthorizationState] = {}

    async def login(self, request: LoginRequest) -> LoginResult:
        self.login_requests.append(request)
        state = await self.prepare_login(dict(request.front_channel_extra_parameters))
        result = await self.options.browser.invoke(
            BrowserOptions(
                start_url=state.start_url,
                end_url=self.options.redirect_uri,
                timeout=request.browser_timeout,
                display_mode=request.browser_display_mode,
                response_mode=self.options.response_mode,
            )
        )
        if result.result_type is BrowserResultType.USER_CANCEL:
            return LoginResult(error="cancelled", error_description="User cancelled login")
        if result.result_type is BrowserResultType.TIMEOUT:
            return LoginResult(error="network_error", error_description="Browser timed out")
        if not result.is_success:
            return LoginResult(error=result.error or "error", error_description=result.error_description)
        callback = result.response or (
            f"{self.options.redirect_uri}?{urlencode({'code': 'interactive', 'state': state.state})}"
        )
        return await self.process_response(callback, state)

    async def prepare_login(self, extra_parameters: dict[str, str]) -> AuthorizationState:
        self.prepared_parameters.append(extra_parameters)
        verifier = secrets.token_urlsafe(64)[:128]
        challenge = (
            base64.urlsafe_b64encode(hashlib.sha256(verifier.encode("ascii")).digest())
            .rstrip(b"=")
            .decode("ascii")
        )
        state_value = secrets.token_urlsafe(16)
        nonce = secrets.token_urlsafe(16)
        query = {
            "response_type": "code",
            "client_id": self.options.client_id,
            "redirect_uri": self.options.redirect_uri,
            "scope": self.options.scope,
            "state": state_value,
            "nonce": nonce,
            "code_challenge": challenge,
            "code_challenge_method": "S256",
            **extra_parameters,
        }
        state = AuthorizationState(
            state=state_value,
            nonce=nonce,
            code_verifier=verifier,
            start_url=f"{self.options.authority}/authorize?{urlencode(query)}",
            redirect_uri=self.options.redirect_uri,
        )
        self._pending[state_value] = state
        return state

    async def process_response(self, data: str, state: AuthorizationState) -> LoginResult:
        params = parse_qs(urlparse(data).query)
        issued = self._pending.pop(state.state, None)
        if issued is None or issued != state or params.get("state", [None])[0] != state.state:
            return LoginResult(
                error="invalid_state",
                error_description="Callback does not match an issued authorization state",
            )
        if "error" in params:
            return LoginResult(
                error=params["error"][0],
                error_description=params.get("error_description", [None])[0],
            )
        code = params["code"][0]
        return LoginResult(
            tokens=TokenSet(
                access_token=f"access-{code}",
                refresh_token=f"refresh-{code}",
                identity_token=f"id-{code}",
            ),
            claims={"sub": "auth0|user", "nonce": state.nonce},
        )

    async def refresh_token(self, refresh_token: str) -> RefreshTokenResult:
        if refresh_token in self.revoked_tokens:
            return RefreshTokenResult(error="token_error", error_description="invalid_grant")
        return RefreshTokenResult(
            tokens=TokenSet(
                access_token=f"access-for-{refresh_token}",
                refresh_token=f"{refresh_token}-rotated",
            )
        )


# ---------------------------------------------------------------------------
# Configuration and client fixtures
# ---------------------------------------------------------------------------


def make_configuration(**kwargs: Any) -> ClientConfiguration:
    """Build a ClientConfiguration with sensible defaults overridden by kwargs."""
    defaults: dict[str, Any] = {"domain": "t.auth0.com", "client_id": "cid"}
    defaults.update(kwargs)
    return ClientConfiguration(**defaults)


@pytest.fixture
def browser() -> RecordingBrowser:
    return RecordingBrowser()


@pytest.fixture
def engines() -> list[FakeOidcEngine]:
    """Every FakeOidcEngine built through ``make_client``, in creation order."""
    return []


@pytest.fixture
def make_client(
    browser: RecordingBrowser, engines: list[FakeOidcEngine]
) -> Callable[..., AuthClient]:
    """Factory building an AuthClient backed by a FakeOidcEngine.

    Keyword arguments override :func:`make_configuration` defaults;
    ``platform`` and ``version`` are passed to the client.
    """

    def factory(platform: Any = None, version: str | None = "1.2.3", **kwargs: Any) -> AuthClient:
        kwargs.setdefault("browser", browser)

        def engine_factory(options: OidcClientOptions) -> FakeOidcEngine:
            engine = FakeOidcEngine(options)
            engines.append(engine)
            return engine

        return AuthClient(
            make_configuration(**kwargs),
            platform=platform or DesktopPlatform(),
            engine_factory=engine_factory,
            version=version,
        )

    return factory
