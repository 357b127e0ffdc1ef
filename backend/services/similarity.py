"""String and document similarity for resume-JD matching.

Two concerns live here:
- Pluggable term similarity strategies (edit distance, Jaro-Winkler, Indel)
  used by the skill matcher for fuzzy matching.
- Lexical document similarity (content-word Jaccard blended with TF-IDF
  cosine) used as the semantic match signal.
"""

import logging
from abc import ABC, abstractmethod

import numpy as np
from rapidfuzz import fuzz
from rapidfuzz.distance import JaroWinkler, Levenshtein
from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.metrics.pairwise import cosine_similarity as sklearn_cosine

from services.fluff_filter import remove_fluff
from services.text_normalizer import normalize_text, tokenize

logger = logging.getLogger(__name__)

# Blend of the semantic signal
W_JACCARD = 0.7
W_COSINE = 0.3

# Normalized texts shorter than this carry no semantic signal
MIN_SEMANTIC_LENGTH = 10


# ---------------------------------------------------------------------------
# Term similarity strategies
# ---------------------------------------------------------------------------

class SimilarityStrategy(ABC):
    """Scores how alike two terms are, 0.0 (unrelated) to 1.0 (identical)."""

    name: str = ""

    @abstractmethod
    def similarity(self, a: str, b: str) -> float:
        """Return a similarity in [0.0, 1.0]."""


class LevenshteinSimilarity(SimilarityStrategy):
    """1 - edit distance / length of the longer term."""

    name = "levenshtein"

    def similarity(self, a: str, b: str) -> float:
        return float(Levenshtein.normalized_similarity(a, b))


class JaroWinklerSimilarity(SimilarityStrategy):
    """Jaro-Winkler, which favors terms sharing a common prefix."""

    name = "jaro_winkler"

    def similarity(self, a: str, b: str) -> float:
        return float(JaroWinkler.similarity(a, b))


class IndelSimilarity(SimilarityStrategy):
    """Insertion/deletion ratio (rapidfuzz's fuzz.ratio)."""

    name = "indel"

    def similarity(self, a: str, b: str) -> float:
        return fuzz.ratio(a, b) / 100.0


_STRATEGIES: dict[str, type[SimilarityStrategy]] = {
    cls.name: cls
    for cls in (LevenshteinSimilarity, JaroWinklerSimilarity, IndelSimilarity)
}


def get_strategy(name: str) -> SimilarityStrategy:
    """Look up a strategy by name. Raises ValueError for unknown names."""
    try:
        return _STRATEGIES[name]()
    except KeyError:
        raise ValueError(
            f"Unknown similarity strategy {name!r}; "
            f"expected one of {sorted(_STRATEGIES)}"
        ) from None


# ---------------------------------------------------------------------------
# Document similarity
# ---------------------------------------------------------------------------

def tfidf_cosine_similarity(text_a: str, text_b: str) -> float:
    """Compute cosine similarity between two texts using TF-IDF vectors."""
    if not text_a.strip() or not text_b.strip():
        return 0.0

    vectorizer = TfidfVectorizer(
        stop_words="english",
        max_features=5000,
        sublinear_tf=True,
        ngram_range=(1, 2),
    )
    try:
        tfidf_matrix = vectorizer.fit_transform([text_a, text_b])
        score = sklearn_cosine(tfidf_matrix[0:1], tfidf_matrix[1:2])[0][0]
        return float(np.clip(score, 0.0, 1.0))
    except ValueError:
        return 0.0


def content_words(normalized: str) -> set[str]:
    """Distinct non-boilerplate words of normalized text."""
    return {t for t in remove_fluff(tokenize(normalized)) if len(t) > 1}


def jaccard_similarity(words_a: set[str], words_b: set[str]) -> float:
    union = words_a | words_b
    if not union:
        return 0.0
    return len(words_a & words_b) / len(union)


def semantic_match_score(resume_text: str, job_text: str) -> int:
    """Lexical approximation of semantic relevance. Returns 0-100.

    No pretrained embeddings: content-word overlap carries most of the
    weight, TF-IDF cosine adds phrase-level agreement.
    """
    resume_norm = normalize_text(resume_text)
    job_norm = normalize_text(job_text)
    if len(resume_norm) < MIN_SEMANTIC_LENGTH or len(job_norm) < MIN_SEMANTIC_LENGTH:
        return 0

    resume_words = content_words(resume_norm)
    job_words = content_words(job_norm)
    if not resume_words & job_words:
        return 0

    jaccard = jaccard_similarity(resume_words, job_words)
    cosine = tfidf_cosine_similarity(resume_norm, job_norm)
    score = round(100 * (W_JACCARD * jaccard + W_COSINE * cosine))
    logger.debug("Semantic match: jaccard=%.3f cosine=%.3f -> %d", jaccard, cosine, score)
    return min(100, max(0, score))
