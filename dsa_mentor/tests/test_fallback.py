import pytest

from dsa_mentor.assistance import SECTION_HEADINGS, build_fallback_response, sanitize_response
from dsa_mentor.languages import SUPPORTED_LANGUAGES


def test_fallback_is_deterministic(sample_problem):
    first = build_fallback_response(sample_problem, "cpp")
    second = build_fallback_response(sample_problem, "cpp")
    assert first == second


@pytest.mark.parametrize("language", list(SUPPORTED_LANGUAGES))
def test_fallback_references_problem_and_language(sample_problem, language):
    text = build_fallback_response(sample_problem, language)

    for heading in SECTION_HEADINGS:
        assert heading in text
    assert "The AI Mentor is not available right now" in text
    assert "Two Sum" in text
    assert "difficulty of Easy" in text
    assert f"You selected {SUPPORTED_LANGUAGES[language]}" in text


@pytest.mark.parametrize("language", list(SUPPORTED_LANGUAGES))
def test_fallback_survives_sanitizer_unchanged(sample_problem, language):
    text = build_fallback_response(sample_problem, language)
    assert sanitize_response(text) == text
