import json

import pytest

from dsa_mentor.catalog import Problem

SAMPLE_PROBLEMS = [
    {
        "id": 1,
        "title": "Two Sum",
        "difficulty": "Easy",
        "question": "Find the positions of the two numbers that add up to the target.",
        "input_format": "n and target, then n integers",
        "output_format": "Two zero-based positions",
        "constraints": "2 <= n <= 10^5",
        "hint": "Remember the values you have already seen.",
        "sample_input": "4 9\n2 7 11 15",
        "sample_output": "0 1",
    },
    {
        "id": 2,
        "title": "Valid Parentheses",
        "difficulty": "Easy",
        "question": "Decide whether every opening bracket is closed in the correct order.",
        "sample_input": "()[]{}",
        "sample_output": "true",
    },
]


@pytest.fixture
def problems_file(tmp_path):
    path = tmp_path / "questions.json"
    path.write_text(json.dumps(SAMPLE_PROBLEMS), encoding="utf-8")
    return path


@pytest.fixture
def storage_path(tmp_path):
    return tmp_path / "storage" / "PAResponse.json"


@pytest.fixture
def sample_problem():
    return Problem.model_validate(SAMPLE_PROBLEMS[0])
