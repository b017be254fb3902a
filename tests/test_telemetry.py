"""Tests for auth0_oidc.telemetry."""

from __future__ import annotations

import base64
import json

from auth0_oidc.telemetry import (
    TELEMETRY_NAME,
    TELEMETRY_PARAMETER,
    decode_telemetry,
    encode_telemetry,
)


class TestEncodeTelemetry:
    def test_known_value(self) -> None:
        assert encode_telemetry("oidc-net", "1.0.0", "wpf") == (
            "eyJuYW1lIjoib2lkYy1uZXQiLCJ2ZXJzaW9uIjoiMS4wLjAiLCJwbGF0Zm9ybSI6IndwZiJ9"
        )

    def test_padding_is_kept(self) -> None:
        value = encode_telemetry("oidc-net", "0.3.0", "desktop")
        assert value.endswith("==")
        assert value == "eyJuYW1lIjoib2lkYy1uZXQiLCJ2ZXJzaW9uIjoiMC4zLjAiLCJwbGF0Zm9ybSI6ImRlc2t0b3AifQ=="

    def test_compact_json_in_field_order(self) -> None:
        raw = base64.b64decode(encode_telemetry("oidc-net", "2.4.1", "xamarin-android"))
        assert raw == b'{"name":"oidc-net","version":"2.4.1","platform":"xamarin-android"}'

    def test_deterministic(self) -> None:
        assert encode_telemetry("a", "1", "p") == encode_telemetry("a", "1", "p")

    def test_decodes_to_exactly_three_fields_in_order(self) -> None:
        decoded = decode_telemetry(encode_telemetry(TELEMETRY_NAME, "1.2.3", "uwp"))
        assert list(decoded) == ["name", "version", "platform"]
        assert decoded == {"name": "oidc-net", "version": "1.2.3", "platform": "uwp"}

    def test_non_ascii_is_utf8(self) -> None:
        raw = base64.b64decode(encode_telemetry("oidc-net", "1.0", "plateforme-é"))
        assert "plateforme-é".encode("utf-8") in raw
        assert json.loads(raw.decode("utf-8"))["platform"] == "plateforme-é"

    def test_standard_alphabet(self) -> None:
        # "???" encodes to "Pz8/" in the standard alphabet and "Pz8_" in the URL-safe one
        value = encode_telemetry("???", "???", "???")
        assert "_" not in value and "-" not in value
        assert "/" in value

    def test_reserved_parameter_name(self) -> None:
        assert TELEMETRY_PARAMETER == "auth0Client"
