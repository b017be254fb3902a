"""The Auth0 OIDC client orchestrator.

This module provides :class:`AuthClient`, which configures an
:class:`~auth0_oidc.engine.OidcEngine` for an Auth0 tenant once, at
construction, and then sequences the login, deferred login, callback
processing, logout, and refresh operations against it:

1. Configuration is validated and resolved into
   :class:`~auth0_oidc.models.OidcClientOptions` (authority, redirect URIs
   for the platform, PKCE authorization-code flow, response mode).
2. Every front-channel call merges the caller's extra parameters with the
   ``auth0Client`` telemetry parameter.
3. Engine results are returned exactly as the engine produced them.

Also exports :func:`build_logout_url` for the Auth0 ``/v2/logout``
endpoint.

See Also:
    :mod:`auth0_oidc.config` for validation and option building.
    :mod:`auth0_oidc.engine` for the engine contract.
"""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urlencode

from auth0_oidc import __version__
from auth0_oidc.config import build_engine_options
from auth0_oidc.engine import EngineFactory, OidcEngine
from auth0_oidc.models import (
    AuthorizationState,
    BrowserOptions,
    ClientConfiguration,
    LoginRequest,
    LoginResult,
    LogoutRequest,
    OidcClientOptions,
    RefreshTokenResult,
)
from auth0_oidc.parameters import ExtraParameters, merge_parameters
from auth0_oidc.platform import PlatformInfo, telemetry_tag_for
from auth0_oidc.telemetry import TELEMETRY_NAME, encode_telemetry

logger = logging.getLogger(__name__)


def build_logout_url(domain: str, client_id: str, return_to: str, federated: bool = False) -> str:
    """Build the Auth0 logout URL.

    Args:
        domain: Auth0 tenant domain.
        client_id: Client identifier of the application.
        return_to: Post-logout redirect URI; URL-encoded into ``returnTo``.
        federated: Also sign the user out of the upstream identity provider.

    Returns:
        ``https://{domain}/v2/logout?client_id=...&returnTo=...``, with a
        bare ``&federated`` appended when requested.

    Example::

        >>> build_logout_url("example.auth0.com", "abc123", "https://app/callback", True)
        'https://example.auth0.com/v2/logout?client_id=abc123&returnTo=https%3A%2F%2Fapp%2Fcallback&federated'
    """
    query = urlencode({"client_id": client_id, "returnTo": return_to})
    url = f"https://{domain}/v2/logout?{query}"
    if federated:
        url += "&federated"
    return url


class AuthClient:
    """Auth0-configured OpenID Connect client.

    The engine is built once from the resolved options; changing any
    configuration requires a new instance. The instance holds no other
    state, so independent operations may run concurrently on it.

    Args:
        configuration: Tenant, application, and telemetry settings.
        platform: The platform variant the application runs on; selects the
            default redirect URIs, response mode, and telemetry tag.
        engine_factory: Builds the engine from the resolved
            :class:`~auth0_oidc.models.OidcClientOptions`.
        version: SDK version reported in telemetry; defaults to the
            package version.
        logout_request: Browser policy for :meth:`logout`.

    Raises:
        ConfigurationError: If the domain or client id is missing or
            invalid, or no platform is given.

    Example::

        client = AuthClient(
            ClientConfiguration(domain="tenant.auth0.com", client_id="abc123"),
            platform=SchemeCallbackPlatform(app_scheme="com.example.app", platform_name="android"),
            engine_factory=MyEngine,
        )
        state = await client.prepare_login({"audience": "https://api.example.com"})
        # ... navigate to state.start_url, receive the callback ...
        result = await client.process_response(callback_url, state)
    """

    def __init__(
        self,
        configuration: ClientConfiguration,
        platform: PlatformInfo,
        engine_factory: EngineFactory,
        version: Optional[str] = None,
        logout_request: Optional[LogoutRequest] = None,
    ) -> None:
        self._configuration = configuration
        self._options = build_engine_options(configuration, platform)
        self._logout_request = logout_request or LogoutRequest()
        self._telemetry: Optional[str] = None
        if configuration.enable_telemetry:
            self._telemetry = encode_telemetry(
                TELEMETRY_NAME, version or __version__, telemetry_tag_for(platform)
            )
        self._engine: OidcEngine = engine_factory(self._options)
        logger.debug("Configured OIDC engine for %s", self._options.authority)

    @property
    def options(self) -> OidcClientOptions:
        """The resolved options the engine was built with."""
        return self._options

    def build_parameters(self, extra_parameters: ExtraParameters = None) -> dict[str, str]:
        """Merge ``extra_parameters`` with the telemetry parameter, if enabled."""
        return merge_parameters(extra_parameters, self._telemetry)

    async def login(self, extra_parameters: ExtraParameters = None) -> LoginResult:
        """Launch the browser to log the user in.

        Args:
            extra_parameters: Extra parameters for the authorization
                endpoint (``audience``, ``connection``, ...).

        Returns:
            The engine's :class:`~auth0_oidc.models.LoginResult`, including
            failed results, unchanged.
        """
        request = LoginRequest(front_channel_extra_parameters=self.build_parameters(extra_parameters))
        return await self._engine.login(request)

    async def prepare_login(self, extra_parameters: ExtraParameters = None) -> AuthorizationState:
        """Create an authorization state for a login the caller drives.

        The returned state holds the authorization URL (``start_url``) plus
        the state, nonce, and PKCE verifier. No browser is opened. Keep the
        state until the callback arrives and pass it to
        :meth:`process_response`.
        """
        return await self._engine.prepare_login(self.build_parameters(extra_parameters))

    async def process_response(self, data: str, state: AuthorizationState) -> LoginResult:
        """Process the callback of a login started with :meth:`prepare_login`.

        Args:
            data: The full redirect URI (or form body for form-post
                delivery) received by the application.
            state: The state :meth:`prepare_login` returned for this login.

        Returns:
            The engine's result. Its ``error`` is ``invalid_state`` when
            ``data`` does not belong to ``state``.
        """
        return await self._engine.process_response(data, state)

    async def logout(self, federated: bool = False) -> bool:
        """Launch the browser to log the user out and clear the Auth0 SSO cookie.

        Args:
            federated: Also log the user out of their identity provider.

        Returns:
            ``True`` when the browser round-trip succeeded, ``False`` when
            the browser reported cancellation, timeout, or an error.
        """
        options = self._options
        logout_url = build_logout_url(
            self._configuration.domain.strip(),
            options.client_id,
            options.post_logout_redirect_uri,
            federated,
        )
        browser_options = BrowserOptions(
            start_url=logout_url,
            end_url=options.post_logout_redirect_uri or "",
            timeout=self._logout_request.browser_timeout,
            display_mode=self._logout_request.browser_display_mode,
        )
        result = await options.browser.invoke(browser_options)
        if not result.is_success:
            logger.warning(
                "Logout browser round-trip ended with %s: %s",
                result.result_type.value,
                result.error_description or result.error or "no details",
            )
        return result.is_success

    async def refresh_token(self, refresh_token: str) -> RefreshTokenResult:
        """Exchange ``refresh_token`` for a new token set via the engine."""
        return await self._engine.refresh_token(refresh_token)
