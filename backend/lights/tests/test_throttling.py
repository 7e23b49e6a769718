from __future__ import annotations

import pytest

from lights.throttling import ClientAddressRateThrottle, parse_window_rate


@pytest.fixture
def two_per_window(monkeypatch):
    monkeypatch.setattr(ClientAddressRateThrottle, "rate", "2/15m", raising=False)


@pytest.mark.parametrize(
    ("rate", "expected"),
    [
        ("100/15m", (100, 900)),
        ("5/s", (5, 1)),
        ("10/minute", (10, 60)),
        ("3/2h", (3, 7200)),
        ("1/day", (1, 86400)),
    ],
)
def test_parse_window_rate(rate, expected):
    assert parse_window_rate(rate) == expected


@pytest.mark.parametrize("rate", ["", "fast", "10/0m", "10/15w"])
def test_parse_window_rate_rejects_garbage(rate):
    with pytest.raises(ValueError):
        parse_window_rate(rate)


def test_requests_over_the_limit_are_rejected(api_client, two_per_window):
    assert api_client.get("/lights").status_code == 200
    assert api_client.get("/lights/1").status_code == 200

    response = api_client.get("/lights")

    assert response.status_code == 429
    assert response.json() == {
        "message": "Too many requests from this IP, please try again later."
    }
    assert "Retry-After" in response


def test_limit_is_tracked_per_address(api_client, two_per_window):
    for _ in range(2):
        api_client.get("/lights", REMOTE_ADDR="10.0.0.1")
    assert api_client.get("/lights", REMOTE_ADDR="10.0.0.1").status_code == 429
    assert api_client.get("/lights", REMOTE_ADDR="10.0.0.2").status_code == 200


def test_login_is_not_rate_limited(api_client, two_per_window):
    for _ in range(4):
        assert api_client.post("/login", {}, format="json").status_code == 200


def test_rejected_credentials_do_not_consume_budget(
    api_client, two_per_window, settings, basic_auth
):
    settings.LOGIN_REQUIRED = True
    for _ in range(3):
        assert api_client.get("/lights").status_code == 401

    api_client.credentials(
        HTTP_AUTHORIZATION=basic_auth(settings.BASIC_AUTH_USER, settings.BASIC_AUTH_PASSWORD)
    )
    assert api_client.get("/lights").status_code == 200
    assert api_client.get("/lights").status_code == 200
    assert api_client.get("/lights").status_code == 429
