"""
Integration test for the live share service.
Skipped unless CINEPROMPT_TEST_API_KEY is set.
"""

import os

import pytest

from cineprompt.core.logging import configure_logging
from cineprompt.features.prompts.prompt_builder import build_prompt_text
from cineprompt.features.share.handlers import create_share_link


@pytest.mark.integration
def test_create_share_link_live():
    api_key = os.getenv("CINEPROMPT_TEST_API_KEY")
    if not api_key:
        pytest.skip("CINEPROMPT_TEST_API_KEY not set; skipping integration test")

    configure_logging()
    state = {
        "mode": "single",
        "complexity": "simple",
        "fields": {"media_type": ["cinematic"], "genre": ["noir"], "shot_type": "close-up", "movement": "static"},
    }
    prompt_text = build_prompt_text(state)

    link = create_share_link(api_key, state, prompt_text, mode="single", correlation_id="test_share_live_001")

    assert link.url.startswith("https://"), "Share service did not return a URL"
    assert link.short_code, "Share service did not return a short code"
