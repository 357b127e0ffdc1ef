"""Statistical keyword discovery and keyword density analysis.

Catches domain terms the fixed catalog does not know about by scoring
tokens with TF-IDF against a small reference corpus of generic posting
filler, and measures how densely the resume uses technical keywords.
"""

import logging
from collections import Counter

from nltk.stem import PorterStemmer
from sklearn.feature_extraction.text import TfidfVectorizer

from services.fluff_filter import remove_fluff
from services.skill_catalog import CATALOG_VOCABULARY
from services.text_normalizer import normalize_text, tokenize

logger = logging.getLogger(__name__)

_stemmer = PorterStemmer()

# Minimum TF-IDF weight (l2-normalized, sublinear tf) for a statistical term
SIGNIFICANCE_THRESHOLD = 0.1

# Reference corpus to provide IDF contrast against generic posting language
_REFERENCE_CORPUS = [
    "the candidate should have experience and skills in relevant areas",
    "looking for a professional with strong background and qualifications",
    "requirements include working with teams and delivering results",
    "we offer competitive salary benefits and a great work environment",
]

# Keyword density bands (percent of words that are technical keywords)
OPTIMAL_DENSITY = (2.0, 5.0)


def _identity(tokens: list[str]) -> list[str]:
    return tokens


def candidate_tokens(normalized: str) -> list[str]:
    """Tokens eligible for the statistical pass.

    Drops boilerplate, function words, digits, very short tokens and
    anything that is part of a catalog spelling (the catalog pass owns those).
    """
    tokens = remove_fluff(tokenize(normalized))
    return [
        t for t in tokens
        if len(t) > 2
        and not t.replace(".", "").replace("-", "").isdigit()
        and t not in CATALOG_VOCABULARY
    ]


def merge_inflections(tokens: list[str]) -> list[str]:
    """Rewrite tokens sharing a stem to one spelling ('merchants' -> 'merchant').

    The kept spelling is the most frequent one, then the shortest.
    """
    counts = Counter(tokens)
    by_stem: dict[str, list[str]] = {}
    for surface in sorted(counts):
        by_stem.setdefault(_stemmer.stem(surface), []).append(surface)

    spelling: dict[str, str] = {}
    for surfaces in by_stem.values():
        keep = min(surfaces, key=lambda s: (-counts[s], len(s), s))
        for surface in surfaces:
            spelling[surface] = keep
    return [spelling[t] for t in tokens]


def extract_statistical_terms(
    normalized: str,
    limit: int = 10,
    min_frequency: int = 2,
) -> list[tuple[str, float, int]]:
    """Return (term, tfidf_score, frequency) for statistically important terms.

    Sorted by score descending, then term, so ties are stable across runs.
    """
    tokens = merge_inflections(candidate_tokens(normalized))
    if not tokens:
        return []

    counts = Counter(tokens)
    reference = [candidate_tokens(normalize_text(doc)) for doc in _REFERENCE_CORPUS]

    vectorizer = TfidfVectorizer(
        analyzer=_identity,
        sublinear_tf=True,
        norm="l2",
    )
    try:
        tfidf_matrix = vectorizer.fit_transform([tokens] + reference)
    except ValueError:
        return []

    feature_names = vectorizer.get_feature_names_out()
    scores = tfidf_matrix[0].toarray().flatten()

    terms = [
        (str(feature_names[i]), float(scores[i]), counts[str(feature_names[i])])
        for i in range(len(feature_names))
        if scores[i] >= SIGNIFICANCE_THRESHOLD
        and counts[str(feature_names[i])] >= min_frequency
    ]
    terms.sort(key=lambda item: (-item[1], item[0]))
    logger.debug("Statistical pass kept %d of %d candidate terms", len(terms[:limit]), len(counts))
    return terms[:limit]


def keyword_density_percent(normalized_resume: str, technical_keyword_count: int) -> float:
    """Share of resume words that are distinct technical keywords, in percent."""
    words = normalized_resume.split()
    if not words:
        return 0.0
    return technical_keyword_count / len(words) * 100


def score_keyword_density(density: float) -> int:
    """Map keyword density to a 0-100 score.

    Optimal range is 2-5%; above 8% reads as keyword stuffing.
    """
    low, high = OPTIMAL_DENSITY
    if low <= density <= high:
        return 100
    if 1.0 <= density < low:
        return 80
    if high < density <= 8.0:
        return 70
    if density > 8.0:
        return 50
    return 40


def compute_keyword_density(
    resume_text: str, keywords: list[str]
) -> dict[str, float]:
    """Compute keyword density (frequency / total words) for each keyword.

    Returns dict of keyword -> density percentage.
    ATS optimal range: 1-3% per primary keyword.
    """
    normalized = normalize_text(resume_text)
    words = tokenize(normalized)
    total_words = len(words)
    if total_words == 0:
        return {}

    word_counts = Counter(words)
    padded = f" {' '.join(words)} "
    densities = {}
    for kw in keywords:
        if " " in kw:
            count = padded.count(f" {kw} ")
        else:
            count = word_counts.get(kw, 0)
        densities[kw] = round((count / total_words) * 100, 2)

    return densities
