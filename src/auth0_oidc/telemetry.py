"""Telemetry payload sent to Auth0 with every authorization request.

The payload identifies the SDK name, version, and platform. It is a compact
JSON object with the fields in a fixed order, UTF-8 encoded and then
base64-encoded with the standard alphabet and padding, and is attached to
the front-channel parameters under :data:`TELEMETRY_PARAMETER`.
"""

from __future__ import annotations

import base64
import json

TELEMETRY_PARAMETER = "auth0Client"
TELEMETRY_NAME = "oidc-net"


def encode_telemetry(name: str, version: str, platform: str) -> str:
    """Encode a telemetry payload for transport as a request parameter.

    Args:
        name: SDK name, normally :data:`TELEMETRY_NAME`.
        version: SDK version string injected at packaging time.
        platform: Platform tag, e.g. ``"xamarin-android"`` or ``"wpf"``.

    Returns:
        The base64 text of ``{"name":...,"version":...,"platform":...}``.

    Example::

        >>> encode_telemetry("oidc-net", "1.0.0", "wpf")
        'eyJuYW1lIjoib2lkYy1uZXQiLCJ2ZXJzaW9uIjoiMS4wLjAiLCJwbGF0Zm9ybSI6IndwZiJ9'
    """
    payload = json.dumps(
        {"name": name, "version": version, "platform": platform},
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return base64.b64encode(payload.encode("utf-8")).decode("ascii")


def decode_telemetry(value: str) -> dict[str, str]:
    """Decode a value produced by :func:`encode_telemetry`."""
    return json.loads(base64.b64decode(value).decode("utf-8"))
