"""auth0_oidc -- Auth0 configuration and orchestration for OpenID Connect clients.

This package configures a pluggable OpenID Connect engine for an Auth0
tenant and sequences the interactive login, deferred login, callback
processing, logout, and refresh operations against it. Protocol work (PKCE,
token exchange, ID token validation) is delegated to the engine; this
package decides the authority and redirect URIs per platform, injects the
telemetry parameter, and builds the logout URL.

Typical usage::

    from auth0_oidc import AuthClient, ClientConfiguration, DesktopPlatform

    client = AuthClient(
        ClientConfiguration(domain="tenant.auth0.com", client_id="abc123"),
        platform=DesktopPlatform(),
        engine_factory=MyEngine,
    )
    result = await client.login()

Modules:
    client: The :class:`AuthClient` orchestrator and logout URL builder.
    models: Pydantic models shared across the entire package.
    config: Configuration validation and engine-option building.
    platform: Platform variants and redirect URI resolution.
    telemetry: Telemetry payload encoding.
    parameters: Front-channel request parameter building.
    engine: The OpenID Connect engine interface.
    browser: Browser launcher interface and the default system browser.
    exceptions: Exception hierarchy with stable error codes.
"""

__version__ = "0.3.0"

from auth0_oidc.browser import BrowserLauncher, SystemBrowserLauncher
from auth0_oidc.client import AuthClient, build_logout_url
from auth0_oidc.engine import EngineFactory, OidcEngine
from auth0_oidc.exceptions import (
    Auth0OidcError,
    ConfigurationError,
    InvalidStateError,
    LoginCancelledError,
    NetworkError,
    TokenError,
    TokenValidationError,
)
from auth0_oidc.models import (
    AuthorizationState,
    BrowserOptions,
    BrowserResult,
    BrowserResultType,
    ClientConfiguration,
    DisplayMode,
    LoginRequest,
    LoginResult,
    LogoutRequest,
    OidcClientOptions,
    RefreshTokenResult,
    ResponseMode,
    TokenSet,
)
from auth0_oidc.parameters import RequestParameters
from auth0_oidc.platform import (
    DesktopPlatform,
    PlatformInfo,
    SchemeCallbackPlatform,
    SystemCallbackBrokerPlatform,
)

__all__ = [
    "__version__",
    "Auth0OidcError",
    "AuthClient",
    "AuthorizationState",
    "BrowserLauncher",
    "BrowserOptions",
    "BrowserResult",
    "BrowserResultType",
    "ClientConfiguration",
    "ConfigurationError",
    "DesktopPlatform",
    "DisplayMode",
    "EngineFactory",
    "InvalidStateError",
    "LoginCancelledError",
    "LoginRequest",
    "LoginResult",
    "LogoutRequest",
    "NetworkError",
    "OidcClientOptions",
    "OidcEngine",
    "PlatformInfo",
    "RefreshTokenResult",
    "RequestParameters",
    "ResponseMode",
    "SchemeCallbackPlatform",
    "SystemBrowserLauncher",
    "SystemCallbackBrokerPlatform",
    "TokenError",
    "TokenSet",
    "TokenValidationError",
    "build_logout_url",
]
