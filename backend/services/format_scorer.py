"""Format quality and readability heuristics for resume text."""

import re

from services.text_normalizer import normalize_text

# Standard section keywords, each worth a fixed increment
FORMAT_SECTIONS = ("summary", "experience", "education", "skills", "projects")

BULLET_RE = re.compile(r"^\s*[•\-*▪◦‣–]\s*\S", re.MULTILINE)
YEAR_RE = re.compile(r"(?<!\d)\d{4}(?!\d)")

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_VOWELS = "aeiouy"

NEUTRAL_READABILITY = 50


def missing_format_sections(text: str) -> list[str]:
    """Standard section keywords that never appear in text."""
    normalized = normalize_text(text)
    return [s for s in FORMAT_SECTIONS if s not in normalized]


def score_format(text: str) -> int:
    """Structural quality of the resume. Returns 0-100.

    Very short content caps near 5 (under 20 chars) or 15 (under 100 chars).
    """
    normalized = normalize_text(text)
    length = len(normalized)
    if length < 20:
        return 5
    if length < 100:
        return 15

    score = 60
    score += 5 * sum(1 for s in FORMAT_SECTIONS if s in normalized)
    if BULLET_RE.search(text):
        score += 10
    if YEAR_RE.search(text):
        score += 10
    if length > 1000:
        score += 10  # adequate length
    if length < 4000:
        score += 5  # not too long
    return min(100, max(0, score))


def count_syllables(word: str) -> int:
    """Vowel-group syllable estimate with a trailing-'e' adjustment."""
    word = word.lower()
    if len(word) <= 3:
        return 1

    count = 0
    previous_was_vowel = False
    for char in word:
        is_vowel = char in _VOWELS
        if is_vowel and not previous_was_vowel:
            count += 1
        previous_was_vowel = is_vowel

    if word.endswith("e"):
        count -= 1
    return max(1, count)


def score_readability(text: str) -> int:
    """Flesch Reading Ease clamped to 0-100; 50 for degenerate input."""
    if not text:
        return NEUTRAL_READABILITY
    sentences = [s for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()]
    words = text.split()
    if not sentences or not words:
        return NEUTRAL_READABILITY

    syllables = sum(count_syllables(w) for w in words)
    avg_sentence_length = len(words) / len(sentences)
    avg_syllables_per_word = syllables / len(words)
    flesch = 206.835 - 1.015 * avg_sentence_length - 84.6 * avg_syllables_per_word
    return min(100, max(0, round(flesch)))
