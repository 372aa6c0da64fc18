import pytest

from dsa_mentor.assistance import SECTION_HEADINGS, build_prompt
from dsa_mentor.languages import SUPPORTED_LANGUAGES


def test_prompt_is_deterministic(sample_problem):
    assert build_prompt(sample_problem, "python") == build_prompt(sample_problem, "python")


@pytest.mark.parametrize("language", list(SUPPORTED_LANGUAGES))
def test_prompt_has_three_sections_and_language(sample_problem, language):
    prompt = build_prompt(sample_problem, language)
    display = SUPPORTED_LANGUAGES[language]

    for heading in SECTION_HEADINGS:
        assert prompt.count(heading) == 1
    assert f"You are an expert {display} mentor" in prompt
    assert f"Selected Language:\n{display}" in prompt
    assert "DO NOT INCLUDE ANY CODE EXAMPLES OR SNIPPETS" in prompt
    assert f"NEVER include any {display} code" in prompt


def test_prompt_includes_problem_fields_verbatim(sample_problem):
    prompt = build_prompt(sample_problem, "java")

    assert "Problem Title:\nTwo Sum" in prompt
    assert "Difficulty:\nEasy" in prompt
    assert sample_problem.question in prompt
    assert "Constraints:\n2 <= n <= 10^5" in prompt
    assert "Hint:\nRemember the values you have already seen." in prompt
    assert "Sample Input:\n4 9\n2 7 11 15" in prompt
    assert "Sample Output:\n0 1" in prompt


def test_prompt_mentions_language_considerations(sample_problem):
    assert "Java's collection framework" in build_prompt(sample_problem, "java")
    assert "Java's collection framework" not in build_prompt(sample_problem, "python")
