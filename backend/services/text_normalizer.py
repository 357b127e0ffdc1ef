"""Text normalization shared by every scoring stage.

Lowercases, rewrites symbol-bearing technology names to word forms,
strips everything except word characters, dots and hyphens, and
collapses whitespace. Dots and hyphens survive so catalog terms like
"node.js" and "full-stack" stay intact.
"""

import re

from nltk.tokenize import RegexpTokenizer

# Symbols that would otherwise be stripped out of technology names
_SYMBOL_REWRITES: list[tuple[re.Pattern, str]] = [
    (re.compile(r"(?<![\w+])c\+\+(?![\w+])"), "cpp"),
    (re.compile(r"(?<![\w#])c#(?![\w#])"), "csharp"),
    (re.compile(r"(?<![\w#])f#(?![\w#])"), "fsharp"),
    (re.compile(r"(?<![\w/])ci\s*/\s*cd(?![\w/])"), "ci-cd"),
]

_STRIP_RE = re.compile(r"[^\w\s.-]")
_WHITESPACE_RE = re.compile(r"\s+")

_tokenizer = RegexpTokenizer(r"\S+")


def normalize_text(text: str) -> str:
    """Return lowercase text with only word chars, dots, hyphens and single spaces."""
    if not text:
        return ""
    lowered = text.lower()
    for pattern, replacement in _SYMBOL_REWRITES:
        lowered = pattern.sub(replacement, lowered)
    stripped = _STRIP_RE.sub(" ", lowered)
    return _WHITESPACE_RE.sub(" ", stripped).strip()


def tokenize(normalized: str) -> list[str]:
    """Split normalized text into word tokens, trimming edge dots and hyphens.

    "python." -> "python", "node.js" stays "node.js", lone "-" is dropped.
    """
    tokens = []
    for raw in _tokenizer.tokenize(normalized):
        token = raw.strip(".-")
        if token:
            tokens.append(token)
    return tokens


def clean_length(text: str) -> int:
    """Length of the raw text after collapsing whitespace."""
    if not text:
        return 0
    return len(_WHITESPACE_RE.sub(" ", text).strip())
