"""Skill extraction: catalog scanning plus a statistical pass.

Combines:
1. Table-driven catalog scan (canonical terms and their variants, word boundaries)
2. TF-IDF statistical pass for domain terms the catalog does not know about
3. Deduplication by canonical term
"""

import logging

from config import settings
from models.schemas import ExtractedSkill
from services.keyword_extractor import extract_statistical_terms
from services.skill_catalog import (
    CATALOG_MATCHERS,
    GENERAL_CATEGORY,
    GENERAL_WEIGHT,
    canonicalize,
)
from services.text_normalizer import normalize_text

logger = logging.getLogger(__name__)

# Source confidence by how the skill was found
CONFIDENCE_CANONICAL = 1.0
CONFIDENCE_VARIANT = 0.9
CONFIDENCE_STATISTICAL = 0.8

# Below this many normalized characters only the catalog scan runs
MIN_STATISTICAL_LENGTH = 20


def extract_catalog_skills(normalized: str) -> list[ExtractedSkill]:
    """Scan normalized text with every category matcher."""
    skills: list[ExtractedSkill] = []
    for category, weight, matcher in CATALOG_MATCHERS:
        for hit in matcher.scan(normalized):
            skills.append(ExtractedSkill(
                term=hit.canonical,
                category=category,
                source_confidence=CONFIDENCE_CANONICAL if hit.exact else CONFIDENCE_VARIANT,
                frequency=hit.frequency,
                weight=weight,
            ))
    return skills


def extract_statistical_skills(
    normalized: str,
    limit: int | None = None,
    min_frequency: int | None = None,
) -> list[ExtractedSkill]:
    """Statistically important non-catalog terms as general-category skills."""
    if len(normalized) < MIN_STATISTICAL_LENGTH:
        return []
    terms = extract_statistical_terms(
        normalized,
        limit=settings.statistical_terms_limit if limit is None else limit,
        min_frequency=(
            settings.statistical_min_frequency if min_frequency is None else min_frequency
        ),
    )
    return [
        ExtractedSkill(
            term=term,
            category=GENERAL_CATEGORY,
            source_confidence=CONFIDENCE_STATISTICAL,
            frequency=frequency,
            weight=GENERAL_WEIGHT,
        )
        for term, _score, frequency in terms
    ]


def extract_skills(text: str, include_statistical: bool = True) -> list[ExtractedSkill]:
    """Extract skills from text, deduplicated by canonical term.

    Accepts raw or already-normalized text (normalization is idempotent).
    Returned skills are sorted by term so downstream stages see a stable order.
    """
    normalized = normalize_text(text)
    if not normalized:
        return []

    found: dict[str, ExtractedSkill] = {}
    for skill in extract_catalog_skills(normalized):
        key = canonicalize(skill.term)
        existing = found.get(key)
        if existing is None:
            found[key] = skill
        else:
            found[key] = existing.model_copy(update={
                "frequency": existing.frequency + skill.frequency,
                "source_confidence": max(existing.source_confidence, skill.source_confidence),
            })

    if include_statistical:
        for skill in extract_statistical_skills(normalized):
            found.setdefault(skill.term, skill)

    skills = sorted(found.values(), key=lambda s: s.term)
    logger.debug(
        "Extracted %d skills (%d catalog) from %d chars",
        len(skills),
        sum(1 for s in skills if s.category != GENERAL_CATEGORY),
        len(normalized),
    )
    return skills


def skill_terms(skills: list[ExtractedSkill]) -> list[str]:
    return [s.term for s in skills]
