"""Canned response used when the Ollama endpoint cannot be reached."""
from dsa_mentor.catalog.models import Problem
from dsa_mentor.languages import LANGUAGE_CONTEXT, display_name
from dsa_mentor.assistance.prompts import SECTION_HEADINGS


def build_fallback_response(problem: Problem, language: str) -> str:
    lang = display_name(language)
    explaining, topics, strategy = SECTION_HEADINGS
    considerations = "\n".join(f"- {line}" for line in LANGUAGE_CONTEXT[language])

    return f"""{explaining}
- The AI Mentor is not available right now. Please try again later.
- This problem is about {problem.title} with a difficulty of {problem.difficulty}.
- You selected {lang} as your programming language.

{topics}
- When the AI Mentor is available, it will identify the key Data Structures and Algorithms topics involved in this problem.
- Common DSA topics include arrays, linked lists, stacks, queues, trees, graphs, sorting, searching, and dynamic programming.

{strategy}
1. Read the problem statement and understand the requirements
2. Analyze the sample inputs and outputs
3. Think about which algorithms or data structures might help
4. Plan your solution with {lang} in mind
5. Try to implement a solution in {lang} and test it with the sample cases
6. If you are stuck, try again later when the AI Mentor is available

Things to keep in mind for {lang}:
{considerations}"""
