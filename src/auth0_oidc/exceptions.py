"""Exception hierarchy for auth0_oidc.

All exceptions inherit from :class:`Auth0OidcError`, which carries an
``error_code`` attribute. The code is the same string an
:class:`~auth0_oidc.engine.OidcEngine` reports in the ``error`` field of a
:class:`~auth0_oidc.models.LoginResult`, so a structured result can be
turned into an exception with :func:`error_for_code` (or the result's own
``raise_for_error``) without reinterpreting it.

Subclass hierarchy::

    Auth0OidcError            ("error")
    +-- ConfigurationError    ("configuration_error")
    +-- InvalidStateError     ("invalid_state")
    +-- LoginCancelledError   ("cancelled")
    +-- NetworkError          ("network_error")
    +-- TokenError            ("token_error")
    +-- TokenValidationError  ("validation_error")

:class:`ConfigurationError` is the only one raised by
:class:`~auth0_oidc.client.AuthClient` itself; the others describe engine
and browser outcomes.
"""

from __future__ import annotations

from typing import Optional


class Auth0OidcError(Exception):
    """Base exception for all auth0_oidc errors.

    Every subclass sets a class-level ``error_code``.

    Args:
        message: Human-readable error description.
        error_code: Optional override for the class-level error code, used
            when an engine reports a code without a dedicated subclass.
    """

    error_code: str = "error"

    def __init__(self, message: str, error_code: str | None = None):
        super().__init__(message)
        if error_code is not None:
            self.error_code = error_code


class ConfigurationError(Auth0OidcError):
    """Raised for a missing or invalid domain, client id, or platform."""

    error_code = "configuration_error"


class InvalidStateError(Auth0OidcError):
    """Raised when callback data does not match a previously issued authorization state."""

    error_code = "invalid_state"


class LoginCancelledError(Auth0OidcError):
    """Raised when the user aborted the interactive browser flow."""

    error_code = "cancelled"


class NetworkError(Auth0OidcError):
    """Raised on transport failures or timeouts reaching the authority."""

    error_code = "network_error"


class TokenError(Auth0OidcError):
    """Raised when the token endpoint rejects a request (expired or revoked refresh token)."""

    error_code = "token_error"


class TokenValidationError(Auth0OidcError):
    """Raised when an ID token fails signature or claims validation in the engine."""

    error_code = "validation_error"


_ERRORS_BY_CODE: dict[str, type[Auth0OidcError]] = {
    cls.error_code: cls
    for cls in (
        ConfigurationError,
        InvalidStateError,
        LoginCancelledError,
        NetworkError,
        TokenError,
        TokenValidationError,
    )
}


def error_for_code(error_code: str, description: Optional[str] = None) -> Auth0OidcError:
    """Build the exception matching an engine-reported error code.

    Unknown codes produce a plain :class:`Auth0OidcError` that keeps the
    reported code.

    Args:
        error_code: The ``error`` value of a result object.
        description: Optional ``error_description`` used as the message.

    Returns:
        An exception instance; the caller decides whether to raise it.
    """
    message = description or error_code
    cls = _ERRORS_BY_CODE.get(error_code)
    if cls is None:
        return Auth0OidcError(message, error_code=error_code)
    return cls(message)
