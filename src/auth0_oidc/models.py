"""Canonical Pydantic models shared across all auth0_oidc modules.

This is the single source of truth for data shapes in the project. Every other
module imports from here rather than defining its own models. The models fall
into three groups:

**Configuration models** -- supplied by the application or derived from it:
    :class:`ClientConfiguration`, :class:`IdentityTokenPolicy`,
    :class:`OidcClientOptions`, and :class:`LogoutRequest`.

**Browser models** -- exchanged with a
:class:`~auth0_oidc.browser.BrowserLauncher`:
    :class:`DisplayMode`, :class:`ResponseMode`, :class:`BrowserOptions`,
    :class:`BrowserResultType`, and :class:`BrowserResult`.

**Engine models** -- exchanged with an :class:`~auth0_oidc.engine.OidcEngine`:
    :class:`AuthenticationFlow`, :class:`LoginRequest`,
    :class:`AuthorizationState`, :class:`TokenSet`, :class:`LoginResult`, and
    :class:`RefreshTokenResult`.

Configuration and authorization state are frozen; results are plain value
objects that this package passes through without modification.
"""

from __future__ import annotations

import enum
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from auth0_oidc.exceptions import error_for_code


# --- Configuration ---


class ClientConfiguration(BaseModel):
    """Application-supplied settings for an :class:`~auth0_oidc.client.AuthClient`.

    Only ``domain`` and ``client_id`` are required. The redirect URIs are
    derived from the platform unless overridden here.

    Example::

        ClientConfiguration(
            domain="tenant.auth0.com",
            client_id="abc123",
            scopes=("openid", "profile", "offline_access"),
        )

    See Also:
        :func:`~auth0_oidc.config.validate_configuration` for the checks
        applied when an ``AuthClient`` is constructed.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    domain: str = Field(description="Auth0 tenant domain, e.g. tenant.auth0.com")
    client_id: str = Field(description="Client identifier of the Auth0 application")
    client_secret: Optional[str] = Field(default=None, repr=False)
    scopes: tuple[str, ...] = Field(
        default=("openid",), description="Scopes requested at the authorization endpoint"
    )
    load_profile: bool = Field(
        default=True, description="Whether the engine loads claims from the userinfo endpoint"
    )
    redirect_uri: Optional[str] = Field(
        default=None, description="Explicit redirect URI; derived from the platform when unset"
    )
    post_logout_redirect_uri: Optional[str] = Field(
        default=None,
        description="Explicit post-logout redirect URI; derived from the platform when unset",
    )
    enable_telemetry: bool = Field(
        default=True, description="Send the auth0Client telemetry parameter"
    )
    browser: Optional[Any] = Field(
        default=None,
        description="BrowserLauncher instance; the system browser is used when unset",
    )


class IdentityTokenPolicy(BaseModel):
    """Validation policy handed to the engine.

    Auth0 does not issue ``c_hash`` / ``at_hash`` for the authorization code
    flow, so both requirements are disabled.
    """

    model_config = ConfigDict(frozen=True)

    require_authorization_code_hash: bool = False
    require_access_token_hash: bool = False


class AuthenticationFlow(str, enum.Enum):
    """OIDC flows an engine can be configured for."""

    AUTHORIZATION_CODE = "authorization_code"


class ResponseMode(str, enum.Enum):
    """How the authorization response is delivered to the redirect URI."""

    REDIRECT = "redirect"
    FORM_POST = "form_post"


class OidcClientOptions(BaseModel):
    """Fully resolved engine configuration built once per ``AuthClient``.

    Produced by :func:`~auth0_oidc.config.build_engine_options` and passed
    to the engine factory. Fixed for the lifetime of the client.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    authority: str
    client_id: str
    client_secret: Optional[str] = Field(default=None, repr=False)
    scope: str
    load_profile: bool = True
    browser: Any = None
    flow: AuthenticationFlow = AuthenticationFlow.AUTHORIZATION_CODE
    response_mode: ResponseMode = ResponseMode.REDIRECT
    redirect_uri: str
    post_logout_redirect_uri: str
    policy: IdentityTokenPolicy = Field(default_factory=IdentityTokenPolicy)


class DisplayMode(str, enum.Enum):
    """Whether the browser window is shown to the user."""

    VISIBLE = "visible"
    HIDDEN = "hidden"


class LogoutRequest(BaseModel):
    """Browser policy for the logout round-trip."""

    model_config = ConfigDict(frozen=True)

    browser_timeout: float = Field(default=300.0, description="Seconds to wait for the browser")
    browser_display_mode: DisplayMode = DisplayMode.VISIBLE


# --- Browser ---


class BrowserOptions(BaseModel):
    """Arguments for a single :meth:`~auth0_oidc.browser.BrowserLauncher.invoke` call."""

    model_config = ConfigDict(frozen=True)

    start_url: str = Field(description="URL opened in the browser")
    end_url: str = Field(description="URL the flow returns to; may be empty for logout")
    timeout: float = Field(default=300.0, description="Seconds to wait for the return URL")
    display_mode: DisplayMode = DisplayMode.VISIBLE
    response_mode: ResponseMode = ResponseMode.REDIRECT


class BrowserResultType(str, enum.Enum):
    """Outcome of a browser round-trip."""

    SUCCESS = "success"
    HTTP_ERROR = "http_error"
    UNKNOWN_ERROR = "unknown_error"
    TIMEOUT = "timeout"
    USER_CANCEL = "user_cancel"


class BrowserResult(BaseModel):
    """What a :class:`~auth0_oidc.browser.BrowserLauncher` returns.

    ``response`` holds the callback data (the full return URL, or the form
    body for form-post delivery) when
    ``result_type`` is :attr:`BrowserResultType.SUCCESS`.
    """

    result_type: BrowserResultType
    response: Optional[str] = None
    error: Optional[str] = None
    error_description: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.result_type is BrowserResultType.SUCCESS


# --- Engine ---


class LoginRequest(BaseModel):
    """Interactive login request handed to :meth:`OidcEngine.login`."""

    model_config = ConfigDict(frozen=True)

    front_channel_extra_parameters: dict[str, str] = Field(default_factory=dict)
    browser_timeout: float = 300.0
    browser_display_mode: DisplayMode = DisplayMode.VISIBLE


class AuthorizationState(BaseModel):
    """Opaque state produced by ``prepare_login`` and consumed by ``process_response``.

    The caller stores it until the callback arrives and passes it back
    unmodified, exactly once. This package never inspects or mutates it.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    state: str
    nonce: str
    code_verifier: str = Field(repr=False)
    start_url: str = Field(description="Navigable authorization URL")
    redirect_uri: str


class TokenSet(BaseModel):
    """Tokens issued by the token endpoint."""

    access_token: str = Field(repr=False)
    refresh_token: Optional[str] = Field(default=None, repr=False)
    identity_token: Optional[str] = Field(default=None, repr=False)
    access_token_expiration: Optional[datetime] = None


class _EngineResult(BaseModel):
    """Shared shape of engine results: either tokens or an error code."""

    tokens: Optional[TokenSet] = None
    error: Optional[str] = None
    error_description: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def raise_for_error(self) -> None:
        """Raise the :mod:`auth0_oidc.exceptions` type matching ``error``.

        Does nothing for a successful result.

        Raises:
            Auth0OidcError: The subclass registered for the error code.
        """
        if self.error is not None:
            raise error_for_code(self.error, self.error_description)


class LoginResult(_EngineResult):
    """Result of an interactive login or of processing a callback."""

    claims: dict[str, Any] = Field(default_factory=dict)
    authentication_time: Optional[datetime] = None


class RefreshTokenResult(_EngineResult):
    """Result of a refresh token exchange."""
