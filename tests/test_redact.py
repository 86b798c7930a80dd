from __future__ import annotations

from pyrestroom._redact import redact_for_log


def test_redact_for_log_coarsens_coordinates() -> None:
    payload = {
        "lat": "52.367612",
        "lng": 4.904139,
        "page": "1",
        "nested": {"latitude": 51.92441, "Longitude": -0.1},
        "items": [{"lat": 1.23456}],
    }

    redacted = redact_for_log(payload)
    assert redacted["lat"] == 52.37
    assert redacted["lng"] == 4.9
    assert redacted["page"] == "1"
    assert redacted["nested"]["latitude"] == 51.92
    assert redacted["nested"]["Longitude"] == -0.1
    assert redacted["items"][0]["lat"] == 1.23


def test_redact_for_log_masks_non_numeric_coordinates() -> None:
    assert redact_for_log({"lat": "somewhere"})["lat"] == "<redacted>"
    assert redact_for_log({"lat": None})["lat"] is None


def test_redact_for_log_truncates_long_strings() -> None:
    long_value = "x" * 600
    redacted = redact_for_log({"value": long_value}, max_string=10)
    assert redacted["value"].startswith("x" * 10)
    assert "<truncated>" in redacted["value"]
