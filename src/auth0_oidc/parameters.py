"""Front-channel request parameters.

:class:`RequestParameters` is the explicit, string-only mapping callers use
to pass extra parameters (``audience``, ``connection``, ``prompt`` ...) to
the authorization endpoint. :func:`merge_parameters` combines those with the
telemetry entry; telemetry is written last so it wins on a key collision.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Optional, Union

from auth0_oidc.telemetry import TELEMETRY_PARAMETER


class RequestParameters(Mapping[str, str]):
    """A string-to-string mapping populated explicitly by the caller.

    Args:
        initial: Optional mapping to copy entries from.

    Raises:
        TypeError: If a key or value is not a string.

    Example::

        params = RequestParameters({"audience": "https://api.example.com"})
        params.add("connection", "github")
    """

    def __init__(self, initial: Optional[Mapping[str, str]] = None) -> None:
        self._values: dict[str, str] = {}
        if initial:
            self.update(initial)

    def add(self, key: str, value: str) -> RequestParameters:
        """Set ``key`` to ``value`` and return ``self`` for chaining."""
        if not isinstance(key, str) or not isinstance(value, str):
            raise TypeError(
                f"Request parameters must be strings, got {type(key).__name__}="
                f"{type(value).__name__}"
            )
        self._values[key] = value
        return self

    def update(self, values: Mapping[str, str]) -> RequestParameters:
        for key, value in values.items():
            self.add(key, value)
        return self

    def to_dict(self) -> dict[str, str]:
        return dict(self._values)

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"RequestParameters({self._values!r})"


ExtraParameters = Union[RequestParameters, Mapping[str, str], None]


def merge_parameters(
    extra_parameters: ExtraParameters,
    telemetry: Optional[str] = None,
) -> dict[str, str]:
    """Build a fresh parameter dict from caller values plus telemetry.

    Args:
        extra_parameters: Caller-supplied parameters, or ``None``.
        telemetry: Encoded telemetry value, or ``None`` when disabled.

    Returns:
        A new dict. Without telemetry it equals the caller's parameters
        exactly; with telemetry it has one extra ``auth0Client`` entry.
    """
    merged = RequestParameters(extra_parameters).to_dict()
    if telemetry is not None:
        merged[TELEMETRY_PARAMETER] = telemetry
    return merged
