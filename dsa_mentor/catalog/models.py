"""Data models for DSA practice problems."""
from typing import Optional
from pydantic import BaseModel


class Problem(BaseModel):
    """A practice problem as stored in questions.json."""
    id: Optional[int] = None
    title: str
    difficulty: str = ""
    question: str  # Problem statement
    input_format: str = ""
    output_format: str = ""
    constraints: str = ""
    hint: str = ""
    sample_input: str = ""
    sample_output: str = ""
    # Used by the judge service only
    hidden_inputs: list[str] = []
    hidden_outputs: list[str] = []
