"""Domain classifier: dominant technical domain and mismatch penalty.

Guards against a data-science resume scoring high against a
web-development posting purely on generic overlap.
"""

import logging
from types import MappingProxyType
from typing import Mapping

from models.schemas import DomainProfile
from services.skill_catalog import term_pattern
from services.text_normalizer import normalize_text

logger = logging.getLogger(__name__)

# Signature terms per domain, in normalized form. Declaration order breaks ties.
DOMAIN_SIGNATURES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "data_science": (
        "data", "scientist", "machine", "learning", "ml", "ai", "artificial",
        "intelligence", "statistics", "statistical", "analytics", "pandas",
        "numpy", "scikit", "scikit-learn", "tensorflow", "pytorch", "jupyter",
        "notebook", "visualization", "tableau", "powerbi", "power bi", "stata",
    ),
    "web_development": (
        "react", "angular", "vue", "javascript", "typescript", "node", "node.js",
        "express", "html", "css", "frontend", "backend", "fullstack",
        "full-stack", "responsive", "bootstrap", "tailwind", "webpack", "vite",
    ),
    "mobile": (
        "ios", "android", "swift", "kotlin", "react-native", "react native",
        "flutter", "dart", "xcode", "mobile",
    ),
    "devops": (
        "aws", "azure", "gcp", "docker", "kubernetes", "jenkins", "ci-cd",
        "terraform", "ansible",
    ),
    "embedded": (
        "embedded", "microcontroller", "arduino", "raspberry", "iot", "sensors",
        "hardware", "cpp", "firmware",
    ),
})

# A domain needs this many distinct signature hits to be determined
MIN_DOMAIN_SIGNAL = 2
# Both sides at or above this count as a clear mismatch
STRONG_DOMAIN_SIGNAL = 3

HEAVY_PENALTY = 0.4
MODERATE_PENALTY = 0.7
NO_PENALTY = 1.0

_SIGNATURE_PATTERNS = MappingProxyType({
    domain: tuple(term_pattern((term,)) for term in terms)
    for domain, terms in DOMAIN_SIGNATURES.items()
})


def domain_scores(normalized: str) -> dict[str, int]:
    """Count distinct signature terms present per domain."""
    return {
        domain: sum(1 for pattern in patterns if pattern.search(normalized))
        for domain, patterns in _SIGNATURE_PATTERNS.items()
    }


def classify_domain(text: str) -> DomainProfile:
    """Bucket a document into its dominant domain, or none below the signal threshold."""
    scores = domain_scores(normalize_text(text))
    best_domain, best_score = None, 0
    for domain, score in scores.items():
        if score > best_score:
            best_domain, best_score = domain, score

    if best_score < MIN_DOMAIN_SIGNAL:
        return DomainProfile(domain=None, signal_strength=best_score, scores=scores)
    return DomainProfile(domain=best_domain, signal_strength=best_score, scores=scores)


def domain_penalty(resume_profile: DomainProfile, job_profile: DomainProfile) -> float:
    """Multiplier applied to the overall score: 0.4 clear mismatch, 0.7 moderate, else 1.0."""
    if resume_profile.domain is None or job_profile.domain is None:
        return NO_PENALTY
    if resume_profile.domain == job_profile.domain:
        return NO_PENALTY

    if (
        resume_profile.signal_strength >= STRONG_DOMAIN_SIGNAL
        and job_profile.signal_strength >= STRONG_DOMAIN_SIGNAL
    ):
        penalty = HEAVY_PENALTY
    else:
        penalty = MODERATE_PENALTY
    logger.debug(
        "Domain mismatch: resume=%s(%d) job=%s(%d) -> x%.1f",
        resume_profile.domain, resume_profile.signal_strength,
        job_profile.domain, job_profile.signal_strength, penalty,
    )
    return penalty
