"""Browser launchers for interactive login and logout.

Exports:
    :class:`BrowserLauncher` -- the abstract interface.
    :class:`SystemBrowserLauncher` -- the default launcher, which uses the
    system browser and a loopback callback server.
"""

from auth0_oidc.browser.base import BrowserLauncher
from auth0_oidc.browser.system import SystemBrowserLauncher

__all__ = ["BrowserLauncher", "SystemBrowserLauncher"]
