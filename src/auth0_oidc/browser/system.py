"""System browser launcher with a loopback callback server.

This module provides :class:`SystemBrowserLauncher`, the browser used when
a :class:`~auth0_oidc.models.ClientConfiguration` does not supply one. It
opens the start URL in the user's default browser and captures the return
on a temporary HTTP server bound to the loopback interface, so the
redirect URI (and post-logout redirect URI) must be an
``http://127.0.0.1:<port>/...`` or ``http://localhost:<port>/...`` URL,
registered as an allowed callback in the Auth0 application.

The blocking server runs in a worker thread via :func:`asyncio.to_thread`.
"""

from __future__ import annotations

import asyncio
import logging
import threading
import time
import webbrowser
from collections.abc import Callable
from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import Any, Optional
from urllib.parse import ParseResult, urlparse

from auth0_oidc.browser.base import BrowserLauncher
from auth0_oidc.models import BrowserOptions, BrowserResult, BrowserResultType, DisplayMode

logger = logging.getLogger(__name__)

_LOOPBACK_HOSTS = {"127.0.0.1", "localhost"}

_DONE_PAGE = (
    "<html><body><h2>Authentication complete. You can close this window "
    "and return to the application.</h2></body></html>"
)


def _loopback_target(end_url: str) -> Optional[ParseResult]:
    """Return the parsed ``end_url`` if a local server can receive it."""
    parsed = urlparse(end_url)
    if parsed.scheme != "http" or parsed.hostname not in _LOOPBACK_HOSTS:
        return None
    try:
        port = parsed.port
    except ValueError:
        return None
    if port is None:
        return None
    return parsed


class SystemBrowserLauncher(BrowserLauncher):
    """Open URLs in the default system browser and capture the loopback callback.

    Args:
        open_url: Callable that opens a URL, defaults to
            :func:`webbrowser.open`.
    """

    def __init__(self, open_url: Optional[Callable[[str], Any]] = None) -> None:
        self._open_url = open_url or webbrowser.open

    async def invoke(self, options: BrowserOptions) -> BrowserResult:
        if options.display_mode is DisplayMode.HIDDEN:
            return BrowserResult(
                result_type=BrowserResultType.UNKNOWN_ERROR,
                error="unsupported_display_mode",
                error_description="The system browser cannot run hidden",
            )

        target = _loopback_target(options.end_url)
        if target is None:
            return BrowserResult(
                result_type=BrowserResultType.UNKNOWN_ERROR,
                error="unsupported_redirect_uri",
                error_description=(
                    "The system browser needs an http://127.0.0.1:<port> return URL, "
                    f"got '{options.end_url}'"
                ),
            )

        return await asyncio.to_thread(self._wait_for_callback, options, target)

    def _wait_for_callback(self, options: BrowserOptions, target: ParseResult) -> BrowserResult:
        """Serve requests on the loopback port until the callback or the timeout.

        Requests for paths other than the return URL's path get a 404 and
        are otherwise ignored.
        """
        captured: dict[str, Optional[str]] = {"response": None}
        expected_path = target.path or "/"
        origin = f"{target.scheme}://{target.netloc}"

        class CallbackHandler(BaseHTTPRequestHandler):
            def do_GET(self) -> None:
                if urlparse(self.path).path != expected_path:
                    self.send_error(404)
                    return
                captured["response"] = origin + self.path
                self._finish()

            def do_POST(self) -> None:
                if urlparse(self.path).path != expected_path:
                    self.send_error(404)
                    return
                try:
                    length = int(self.headers.get("Content-Length", 0))
                except ValueError:
                    self.send_error(400, "Invalid Content-Length")
                    return
                captured["response"] = self.rfile.read(length).decode("utf-8")
                self._finish()

            def _finish(self) -> None:
                self.send_response(200)
                self.send_header("Content-Type", "text/html; charset=utf-8")
                self.end_headers()
                self.wfile.write(_DONE_PAGE.encode("utf-8"))

            def log_message(self, format: str, *args: Any) -> None:
                # Suppress default logging
                pass

        try:
            server = HTTPServer((target.hostname or "127.0.0.1", target.port), CallbackHandler)
        except OSError as exc:
            return BrowserResult(
                result_type=BrowserResultType.UNKNOWN_ERROR,
                error="callback_server_failed",
                error_description=f"Cannot listen on {target.netloc}: {exc}",
            )

        deadline = time.monotonic() + options.timeout

        browser_thread = threading.Thread(
            target=self._open_url, args=(options.start_url,), daemon=True
        )
        try:
            logger.debug("Opening system browser, waiting on %s", options.end_url)
            browser_thread.start()
            while captured["response"] is None:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    break
                server.timeout = remaining
                # Idle connections (browser preconnects) must not outlive the deadline
                CallbackHandler.timeout = max(remaining, 0.1)
                server.handle_request()
        finally:
            server.server_close()

        if captured["response"] is None:
            logger.debug("No callback received within %.0f seconds", options.timeout)
            return BrowserResult(
                result_type=BrowserResultType.TIMEOUT,
                error="timeout",
                error_description=f"No callback received within {options.timeout:g} seconds",
            )
        return BrowserResult(result_type=BrowserResultType.SUCCESS, response=captured["response"])
