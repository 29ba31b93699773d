"""Naive code heuristics: language guess and function count.

Both are intentionally shallow substring/regex checks. They misclassify
realistic code and must stay that way.
"""

import re
from typing import Tuple

# Ordered: first group with any marker present wins
LANGUAGE_MARKERS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("JavaScript/TypeScript", ("function", "const ", "let ")),
    ("Python", ("def ", "import ")),
    ("Java", ("public class", "private ")),
)

UNKNOWN_LANGUAGE = "Unknown"

# ECMAScript whitespace and line terminators, the set matched by JS \s and trim()
JS_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_SPACE = "[" + re.escape(JS_WHITESPACE) + "]"

# function foo | const foo = ( | def foo; \w is ASCII-only as in JS
FUNCTION_RE = re.compile(
    rf"function{_SPACE}+\w+|const{_SPACE}+\w+{_SPACE}*={_SPACE}*\(|def{_SPACE}+\w+",
    re.ASCII,
)


def detect_language(code: str) -> str:
    """Guess the language of ``code`` from substring markers."""
    for language, markers in LANGUAGE_MARKERS:
        if any(marker in code for marker in markers):
            return language
    return UNKNOWN_LANGUAGE


def count_functions(code: str) -> int:
    """Count function-like declarations in ``code``."""
    return len(FUNCTION_RE.findall(code))
