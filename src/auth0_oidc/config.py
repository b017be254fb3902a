"""Configuration validation and engine-option building.

This module turns a :class:`~auth0_oidc.models.ClientConfiguration` into the
:class:`~auth0_oidc.models.OidcClientOptions` an engine is constructed with:

* **Validation** -- :func:`validate_configuration` returns human-readable
  problems; :func:`ensure_valid_configuration` raises
  :class:`~auth0_oidc.exceptions.ConfigurationError` when there are any.
* **Loading** -- :func:`load_configuration` builds a configuration from plain
  data (a dict parsed from the application's own settings), converting
  pydantic validation failures into ``ConfigurationError``.
* **Engine options** -- :func:`build_engine_options` resolves the authority,
  redirect URIs, response mode, and default browser for a platform.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import ValidationError

from auth0_oidc.browser import BrowserLauncher, SystemBrowserLauncher
from auth0_oidc.exceptions import ConfigurationError
from auth0_oidc.models import (
    AuthenticationFlow,
    ClientConfiguration,
    IdentityTokenPolicy,
    OidcClientOptions,
)
from auth0_oidc.platform import PlatformInfo, resolve_redirect_uri, response_mode_for

logger = logging.getLogger(__name__)


def validate_configuration(config: ClientConfiguration) -> list[str]:
    """Check a configuration before an engine is built from it.

    Args:
        config: The configuration to validate.

    Returns:
        A list of error message strings. An empty list means the
        configuration is valid.
    """
    errors: list[str] = []
    domain = config.domain.strip()
    if not domain:
        errors.append("'domain' is required")
    elif "://" in domain or "/" in domain:
        errors.append(
            f"'domain' must be a bare host name such as tenant.auth0.com, got '{config.domain}'"
        )
    if not config.client_id.strip():
        errors.append("'client_id' is required")
    if config.browser is not None and not isinstance(config.browser, BrowserLauncher):
        errors.append(
            f"'browser' must be a BrowserLauncher, got {type(config.browser).__name__}"
        )
    return errors


def ensure_valid_configuration(config: ClientConfiguration) -> None:
    """Raise :class:`ConfigurationError` listing every validation problem."""
    errors = validate_configuration(config)
    if errors:
        raise ConfigurationError("Invalid client configuration: " + "; ".join(errors))


def load_configuration(data: Mapping[str, Any]) -> ClientConfiguration:
    """Build and validate a configuration from plain data.

    Args:
        data: Mapping with :class:`ClientConfiguration` field names.

    Returns:
        The validated configuration.

    Raises:
        ConfigurationError: If fields are missing, have the wrong type, or
            fail :func:`validate_configuration`.
    """
    try:
        config = ClientConfiguration.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid client configuration: {exc}") from exc
    ensure_valid_configuration(config)
    return config


def build_engine_options(
    config: ClientConfiguration,
    platform: Optional[PlatformInfo],
) -> OidcClientOptions:
    """Resolve everything an engine needs for ``config`` on ``platform``.

    The authority is ``https://{domain}``; both redirect URIs fall back to
    the platform default when not set explicitly. The browser defaults to
    :class:`~auth0_oidc.browser.SystemBrowserLauncher`.

    Raises:
        ConfigurationError: If the configuration is invalid or the platform
            is missing.
    """
    ensure_valid_configuration(config)

    domain = config.domain.strip()
    redirect_uri = resolve_redirect_uri(config.redirect_uri, domain, platform)
    post_logout_redirect_uri = resolve_redirect_uri(
        config.post_logout_redirect_uri, domain, platform
    )

    options = OidcClientOptions(
        authority=f"https://{domain}",
        client_id=config.client_id,
        client_secret=config.client_secret,
        scope=" ".join(config.scopes),
        load_profile=config.load_profile,
        browser=config.browser or SystemBrowserLauncher(),
        flow=AuthenticationFlow.AUTHORIZATION_CODE,
        response_mode=response_mode_for(platform),
        redirect_uri=redirect_uri,
        post_logout_redirect_uri=post_logout_redirect_uri,
        policy=IdentityTokenPolicy(),
    )
    logger.debug(
        "Resolved engine options for %s (redirect_uri=%s, response_mode=%s)",
        options.authority,
        options.redirect_uri,
        options.response_mode.value,
    )
    return options
