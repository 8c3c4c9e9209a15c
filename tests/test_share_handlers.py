"""Tests for share link creation against a stubbed Supabase adapter."""

import httpx
import pytest
from supabase import PostgrestAPIError

from cineprompt.core.errors import AuthenticationError, ErrorCode, ThirdPartyError
from cineprompt.features.share import handlers
from cineprompt.features.share.handlers import create_share_link, is_auth_failure

STATE = {"mode": "single", "complexity": "simple", "fields": {"shot_type": "close-up"}}


class FakeSupabase:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def call_rpc(self, function_name, params):
        self.calls.append((function_name, params))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_supabase(monkeypatch):
    def install(**kwargs):
        fake = FakeSupabase(**kwargs)
        monkeypatch.setattr(handlers, "get_supabase", lambda: fake)
        return fake
    return install


def _api_error(message, code="P0001"):
    return PostgrestAPIError({"message": message, "code": code, "hint": None, "details": None})


def test_create_share_link_sends_rpc_params(fake_supabase):
    fake = fake_supabase(response={"url": "https://cineprompt.io/s/abc123", "short_code": "abc123"})

    link = create_share_link("cp_key", STATE, "Close-up.", mode=None)

    assert link.url == "https://cineprompt.io/s/abc123"
    assert link.short_code == "abc123"
    assert fake.calls == [(
        "create_share_link",
        {
            "api_key": "cp_key",
            "prompt_text": "Close-up.",
            "state_json": STATE,
            "share_mode": "single",
        },
    )]


def test_create_share_link_accepts_single_row_list(fake_supabase):
    fake_supabase(response=[{"url": "https://cineprompt.io/s/xyz", "short_code": "xyz"}])
    assert create_share_link("cp_key", STATE, "Close-up.", mode="single").short_code == "xyz"


def test_share_mode_is_forwarded(fake_supabase):
    fake = fake_supabase(response={"url": "https://cineprompt.io/s/q", "short_code": "q"})
    create_share_link("cp_key", STATE, "Close-up.", mode="sequence")
    assert fake.calls[0][1]["share_mode"] == "sequence"


@pytest.mark.parametrize("response", [None, [], {"short_code": "abc"}, "oops"])
def test_malformed_response_is_third_party_error(fake_supabase, response):
    fake_supabase(response=response)
    with pytest.raises(ThirdPartyError):
        create_share_link("cp_key", STATE, "Close-up.")


def test_rejected_key_is_authentication_error(fake_supabase):
    fake_supabase(error=_api_error("Invalid API key"))
    with pytest.raises(AuthenticationError) as exc_info:
        create_share_link("cp_bad", STATE, "Close-up.")
    assert exc_info.value.message == "CinePrompt API error: Invalid API key"
    assert exc_info.value.code == ErrorCode.AUTH_FAIL


def test_backend_error_text_is_surfaced(fake_supabase):
    fake_supabase(error=_api_error("Share limit reached for this month", code="P0001"))
    with pytest.raises(ThirdPartyError) as exc_info:
        create_share_link("cp_key", STATE, "Close-up.")
    assert exc_info.value.message == "CinePrompt API error: Share limit reached for this month"
    assert exc_info.value.exit_code == 4


def test_unreachable_backend_is_third_party_error(fake_supabase):
    fake_supabase(error=httpx.ConnectError("Name or service not known"))
    with pytest.raises(ThirdPartyError) as exc_info:
        create_share_link("cp_key", STATE, "Close-up.")
    assert "Name or service not known" in exc_info.value.message


@pytest.mark.parametrize(
    "code, message, expected",
    [
        ("42501", "permission denied", True),
        ("PGRST301", "JWT expired", True),
        ("P0001", "Invalid API key", True),
        ("P0001", "unknown api_key supplied", True),
        ("P0001", "Unauthorized", True),
        ("P0001", "Share limit reached", False),
        (None, "", False),
    ],
)
def test_is_auth_failure(code, message, expected):
    assert is_auth_failure(code, message) is expected
