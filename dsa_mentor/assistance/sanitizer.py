"""Heuristic removal of code from model responses.

The mentor must explain concepts without handing out code, and models do not
always obey the prompt. The detectors below strip the usual offenders:
fenced blocks, inline spans and lines that read like source code in the
supported languages. This is best-effort pattern matching, not a security
boundary; unusual formatting can slip through and some prose lines that look
like code get removed: an assignment written in words, a nested bullet with
parentheses, or a heading made of a single word such as "Stack".
"""
import logging
import re
from typing import Iterable, Optional

logger = logging.getLogger(__name__)


class CodeDetector:
    """Strategy interface: return ``text`` with the detected code removed."""

    name = "detector"

    def strip(self, text: str) -> str:
        raise NotImplementedError


class FencedBlockDetector(CodeDetector):
    """Paired triple-backtick blocks, removed entirely."""

    name = "fenced"
    pattern = re.compile(r"```[\s\S]*?```")

    def strip(self, text: str) -> str:
        return self.pattern.sub("", text)


class InlineSpanDetector(CodeDetector):
    """Single-backtick spans such as `arr[i]`."""

    name = "inline"
    pattern = re.compile(r"`[^`]*`")

    def strip(self, text: str) -> str:
        return self.pattern.sub("", text)


class SymbolFragmentDetector(CodeDetector):
    """Slice notation, numeric pairs and tiny object literals inside prose."""

    name = "fragments"
    patterns = [
        re.compile(r"\[\s*\d+\s*:\s*\d+\s*\]"),  # [1:3]
        re.compile(r"\(\s*\d+\s*,\s*\d+\s*\)"),  # (0, 1)
        re.compile(r"\{\s*\w+\s*:\s*\w+\s*\}"),  # {key: value}
    ]

    def strip(self, text: str) -> str:
        for pattern in self.patterns:
            text = pattern.sub("", text)
        return text


# Matched against the start of each line.
IDIOM_PATTERNS = [
    # indentation plus code symbols
    r"\s{2,}.*[;{}=()]",
    r"\t+.*[;{}=()]",
    # python
    r"def\s+\w+\s*\(.*\):",
    r"import\s+\w+",
    r"from\s+\w+\s+import",
    r"class\s+\w+",
    r"if\s+.*:",
    r"elif\s+.*:",
    r"for\s+.*:",
    r"while\s+.*:",
    r"return\s+.*",
    r"print\s*\(",
    # assignments
    r"\s*[a-zA-Z_][a-zA-Z0-9_]*\s*=\s*.*",
    # javascript
    r"function\s+\w+\s*\(.*\)",
    r"(const|let|var)\s+.*=\s*function",
    r"(const|let|var)\s+.*=\s*\(.*\)\s*=>",
    r"console\.log",
    # java
    r"(public|private|protected|static)\s+.*\(",
    r"System\.out\.print",
    # c / c++
    r"(void|int|char|float|double|bool|long)\s+\w+\s*\(",
    r"#include",
    r"using\s+namespace",
    r"namespace\s+\w+",
    r"template\s*<",
    r"printf\s*\(",
    r"cout\s*<<",
    r"cin\s*>>",
    # calls; O(n) is complexity notation, not a call
    r"[a-zA-Z_][a-zA-Z0-9_]*\.[a-zA-Z_][a-zA-Z0-9_]*\(",
    r"(?!O\()[a-zA-Z_][a-zA-Z0-9_]*\(",
    # a lone identifier on its own line
    r"[a-zA-Z_][a-zA-Z0-9_]*\s*$",
]


class IdiomLineDetector(CodeDetector):
    """Blanks whole lines that look like statements or declarations."""

    name = "idiom-lines"

    def __init__(self, patterns: Optional[Iterable[str]] = None):
        self.patterns = [re.compile(p) for p in (patterns or IDIOM_PATTERNS)]

    def is_code_line(self, line: str) -> bool:
        return any(p.match(line) for p in self.patterns)

    def strip(self, text: str) -> str:
        return "\n".join("" if self.is_code_line(line) else line for line in text.split("\n"))


BLANK_RUN = re.compile(r"\n\s*\n\s*\n")


def default_detectors() -> list[CodeDetector]:
    return [
        FencedBlockDetector(),
        InlineSpanDetector(),
        SymbolFragmentDetector(),
        IdiomLineDetector(),
    ]


class ResponseSanitizer:
    """Runs detectors in order, then collapses the blank runs they leave."""

    def __init__(self, detectors: Optional[Iterable[CodeDetector]] = None):
        self.detectors = list(detectors) if detectors is not None else default_detectors()

    def sanitize(self, text: str) -> str:
        for detector in self.detectors:
            stripped = detector.strip(text)
            if stripped != text:
                logger.debug("%s detector removed %d characters", detector.name, len(text) - len(stripped))
            text = stripped
        return BLANK_RUN.sub("\n\n", text)


def sanitize_response(text: str) -> str:
    return ResponseSanitizer().sanitize(text)
