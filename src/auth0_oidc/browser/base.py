"""Abstract base class for browser launchers.

A browser launcher opens an interactive URL (authorization or logout) and
reports how the round-trip ended. The engine uses it for interactive
logins, and :class:`~auth0_oidc.client.AuthClient` uses it directly for
logout.

To implement a new launcher (an embedded web view, a platform
authentication session), subclass :class:`BrowserLauncher` and implement
:meth:`~BrowserLauncher.invoke`. Report failures through
:class:`~auth0_oidc.models.BrowserResult` rather than by raising.

See Also:
    :class:`auth0_oidc.browser.system.SystemBrowserLauncher` for the
    default implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from auth0_oidc.models import BrowserOptions, BrowserResult


class BrowserLauncher(ABC):
    """Abstract base class for browser launchers."""

    @abstractmethod
    async def invoke(self, options: BrowserOptions) -> BrowserResult:
        """Open ``options.start_url`` and wait for ``options.end_url``.

        Args:
            options: URLs, timeout, display mode, and response mode for
                this round-trip.

        Returns:
            A :class:`~auth0_oidc.models.BrowserResult`. On success,
            ``response`` holds the callback data; on timeout the result
            type is :attr:`~auth0_oidc.models.BrowserResultType.TIMEOUT`.
        """
        ...
