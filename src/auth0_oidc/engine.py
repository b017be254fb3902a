"""Abstract interface for the OpenID Connect protocol engine.

The engine owns every security-sensitive step: authorization URL
construction, state / nonce / PKCE bookkeeping, the token endpoint calls,
and ID token validation. :class:`~auth0_oidc.client.AuthClient` builds an
engine once through an :data:`EngineFactory` and only sequences calls
against it.

Contract for implementers:

* Results are returned, not raised. A failed login or refresh is a
  :class:`~auth0_oidc.models.LoginResult` /
  :class:`~auth0_oidc.models.RefreshTokenResult` whose ``error`` is one of
  the codes in :mod:`auth0_oidc.exceptions` (``invalid_state``,
  ``cancelled``, ``network_error``, ``token_error``, ``validation_error``)
  or an error code reported by the authorization server.
* :meth:`OidcEngine.process_response` must fail with ``invalid_state``
  when the callback does not correspond to the supplied
  :class:`~auth0_oidc.models.AuthorizationState`, including a state that
  was never issued or has already been processed.
* Calls must be independent: concurrent ``prepare_login`` calls produce
  unrelated states.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from auth0_oidc.models import (
    AuthorizationState,
    LoginRequest,
    LoginResult,
    OidcClientOptions,
    RefreshTokenResult,
)


class OidcEngine(ABC):
    """Abstract base class for OpenID Connect engines.

    Concrete engines are constructed from a
    :class:`~auth0_oidc.models.OidcClientOptions` and keep it for their
    lifetime. Interactive logins use ``options.browser``.
    """

    @abstractmethod
    async def login(self, request: LoginRequest) -> LoginResult:
        """Run the full interactive login through the configured browser."""
        ...

    @abstractmethod
    async def prepare_login(self, extra_parameters: dict[str, str]) -> AuthorizationState:
        """Create a fresh state, nonce, and PKCE verifier plus the authorization URL.

        Args:
            extra_parameters: Front-channel parameters appended to the
                authorization URL.
        """
        ...

    @abstractmethod
    async def process_response(self, data: str, state: AuthorizationState) -> LoginResult:
        """Validate callback ``data`` against ``state`` and exchange the code.

        Args:
            data: The full redirect URI, or the form body for form-post
                delivery.
            state: The state returned by :meth:`prepare_login`.
        """
        ...

    @abstractmethod
    async def refresh_token(self, refresh_token: str) -> RefreshTokenResult:
        """Exchange a refresh token for a new token set."""
        ...


EngineFactory = Callable[[OidcClientOptions], OidcEngine]
"""Builds an engine from resolved options; an engine class itself qualifies."""
