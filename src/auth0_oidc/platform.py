"""Platform variants and redirect URI resolution.

Each application runs on exactly one platform, described by a
:class:`PlatformInfo` variant injected into
:class:`~auth0_oidc.client.AuthClient`:

* :class:`DesktopPlatform` -- desktop apps that receive the callback through
  an embedded view; the default redirect URI is ``https://{domain}/mobile``.
* :class:`SchemeCallbackPlatform` -- mobile apps that register a custom URL
  scheme; the default is
  ``{app_scheme}://{domain}/{platform_name}/{app_scheme}/callback``.
* :class:`SystemCallbackBrokerPlatform` -- platforms whose OS provides the
  callback URI through a broker; the URI is requested at resolution time
  and the authorization response is delivered with ``form_post``.

The variant also supplies the telemetry platform tag.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from auth0_oidc.exceptions import ConfigurationError
from auth0_oidc.models import ResponseMode


class DesktopPlatform(BaseModel):
    """Generic desktop application (WinForms, WPF, or a plain Python app)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["desktop"] = "desktop"
    telemetry_tag: str = "desktop"


class SchemeCallbackPlatform(BaseModel):
    """Application registered for a custom URL scheme.

    Android package names are case-insensitive and the redirect URI is
    lower-cased; iOS bundle identifiers are used verbatim, so pass
    ``lowercase=False`` there.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["scheme_callback"] = "scheme_callback"
    app_scheme: str = Field(description="Package name or bundle identifier")
    platform_name: str = Field(description="Path segment, e.g. android or ios")
    lowercase: bool = True
    telemetry_tag: Optional[str] = None

    def tag(self) -> str:
        return self.telemetry_tag or f"xamarin-{self.platform_name}"


class SystemCallbackBrokerPlatform(BaseModel):
    """Platform with an OS-provided authentication broker (e.g. UWP)."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["system_callback_broker"] = "system_callback_broker"
    callback_uri_provider: Callable[[], str]
    telemetry_tag: str = "uwp"


PlatformInfo = Union[DesktopPlatform, SchemeCallbackPlatform, SystemCallbackBrokerPlatform]


def resolve_redirect_uri(
    explicit_uri: Optional[str],
    domain: str,
    platform: Optional[PlatformInfo],
) -> str:
    """Return the redirect URI for ``platform`` unless explicitly overridden.

    Used for both the login redirect URI and the post-logout redirect URI,
    each with its own override.

    Args:
        explicit_uri: Override from configuration; returned verbatim when
            non-empty.
        domain: Auth0 tenant domain.
        platform: The platform variant the application runs on.

    Returns:
        The redirect URI.

    Raises:
        ConfigurationError: If ``platform`` is missing or not a known
            variant.
    """
    if platform is None:
        raise ConfigurationError("A platform is required to resolve redirect URIs")

    if explicit_uri:
        return explicit_uri

    if isinstance(platform, DesktopPlatform):
        return f"https://{domain}/mobile"

    if isinstance(platform, SchemeCallbackPlatform):
        scheme = platform.app_scheme
        uri = f"{scheme}://{domain}/{platform.platform_name}/{scheme}/callback"
        return uri.lower() if platform.lowercase else uri

    if isinstance(platform, SystemCallbackBrokerPlatform):
        return platform.callback_uri_provider()

    raise ConfigurationError(f"Unsupported platform: {type(platform).__name__}")


def response_mode_for(platform: PlatformInfo) -> ResponseMode:
    """Return how the authorization response reaches ``platform``."""
    if isinstance(platform, SystemCallbackBrokerPlatform):
        return ResponseMode.FORM_POST
    return ResponseMode.REDIRECT


def telemetry_tag_for(platform: PlatformInfo) -> str:
    """Return the platform tag sent in the telemetry payload."""
    if isinstance(platform, SchemeCallbackPlatform):
        return platform.tag()
    return platform.telemetry_tag
