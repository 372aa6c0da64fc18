"""Supported solution languages and their display metadata."""
from typing import Optional

# Canonical value -> display name
SUPPORTED_LANGUAGES = {
    "python": "Python",
    "javascript": "JavaScript",
    "java": "Java",
    "cpp": "C++",
    "c": "C",
}

LANGUAGE_CONTEXT = {
    "python": [
        "Consider Python's built-in data structures like lists, dictionaries, sets, and tuples",
        "Think about Python's standard library modules that might be helpful",
        "Remember Python's zero-indexed collections and slicing capabilities",
    ],
    "javascript": [
        "Consider JavaScript's array methods and object manipulation techniques",
        "Think about JavaScript's functional programming capabilities",
        "Remember JavaScript's zero-indexed arrays and object property access",
    ],
    "java": [
        "Consider Java's collection framework such as ArrayList and HashMap",
        "Think about how Java's type system affects the solution",
        "Remember Java's zero-indexed arrays and explicit type declarations",
    ],
    "cpp": [
        "Consider the containers and algorithms of the C++ standard library",
        "Think about memory usage and efficiency",
        "Remember that C++ arrays and vectors are zero-indexed",
    ],
    "c": [
        "Consider the functions available in the C standard library",
        "Think about manual memory management and efficiency",
        "Remember that C arrays are zero-indexed and have a fixed size",
    ],
}


def display_name(language: str) -> str:
    return SUPPORTED_LANGUAGES[language]


def normalize_language(language: Optional[str]) -> Optional[str]:
    """Return the canonical form of ``language``, or None when unsupported."""
    if not language:
        return None
    normalized = language.strip().lower()
    if normalized in SUPPORTED_LANGUAGES:
        return normalized
    return None
