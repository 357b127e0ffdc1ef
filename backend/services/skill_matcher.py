"""Skill matcher: partition job skills into matched and missing.

Matching precedence (first rule that succeeds wins):
1. Exact canonical-term equality
2. Variant table lookup, either direction
3. Partial: one term is a whole-word component of the other, unless both
   are catalog skills ("react" does not satisfy "react native")
4. Fuzzy string similarity above a threshold (pluggable strategy)

Job skills and resume candidates are visited in sorted order so the
partition is identical on every run.
"""

import logging

from config import settings
from models.schemas import ExtractedSkill, MatchOutcome, SkillMatch
from services.similarity import SimilarityStrategy, get_strategy
from services.skill_catalog import canonicalize, term_pattern, variants_of

logger = logging.getLogger(__name__)

# Match confidence by rule
CONFIDENCE = {
    "exact": 1.0,
    "variant": 0.9,
    "partial": 0.85,
    "fuzzy": 0.8,
}

# Shorter side of a partial match must be longer than this
MIN_PARTIAL_LENGTH = 3


def _is_variant(a: str, b: str) -> bool:
    if canonicalize(a) == canonicalize(b):
        return True
    return b in variants_of(a) or a in variants_of(b)


def _is_partial(a: str, b: str) -> bool:
    shorter, longer = sorted((a, b), key=len)
    if shorter == longer or len(shorter) <= MIN_PARTIAL_LENGTH:
        return False
    return term_pattern((shorter,)).search(longer) is not None


def _match_one(
    job_skill: ExtractedSkill,
    resume_skills: list[ExtractedSkill],
    resume_terms: set[str],
    strategy: SimilarityStrategy,
    threshold: float,
) -> SkillMatch | None:
    term = job_skill.term

    if term in resume_terms:
        return SkillMatch(jd_skill=term, resume_skill=term,
                          similarity=CONFIDENCE["exact"], match_type="exact")

    for candidate in resume_skills:
        if _is_variant(term, candidate.term):
            return SkillMatch(jd_skill=term, resume_skill=candidate.term,
                              similarity=CONFIDENCE["variant"], match_type="variant")

    for candidate in resume_skills:
        if job_skill.is_catalog and candidate.is_catalog:
            continue
        if _is_partial(term, candidate.term):
            return SkillMatch(jd_skill=term, resume_skill=candidate.term,
                              similarity=CONFIDENCE["partial"], match_type="partial")

    # Two distinct catalog canonicals are distinct skills; only fuzz when
    # at least one side came from the statistical pass.
    best_term, best_score = "", 0.0
    for candidate in resume_skills:
        if job_skill.is_catalog and candidate.is_catalog:
            continue
        score = strategy.similarity(term, candidate.term)
        if score >= threshold and score > best_score:
            best_term, best_score = candidate.term, score
    if best_term:
        return SkillMatch(jd_skill=term, resume_skill=best_term,
                          similarity=CONFIDENCE["fuzzy"], match_type="fuzzy")

    return None


def match_skills(
    resume_skills: list[ExtractedSkill],
    job_skills: list[ExtractedSkill],
    strategy: SimilarityStrategy | None = None,
    threshold: float | None = None,
) -> MatchOutcome:
    """Partition job skills into matched and missing against resume skills."""
    if strategy is None:
        strategy = get_strategy(settings.similarity_strategy)
    if threshold is None:
        threshold = settings.fuzzy_threshold

    candidates = sorted(resume_skills, key=lambda s: s.term)
    resume_terms = {s.term for s in candidates}

    outcome = MatchOutcome()
    seen: set[str] = set()
    for job_skill in sorted(job_skills, key=lambda s: s.term):
        if job_skill.term in seen:
            continue
        seen.add(job_skill.term)
        match = _match_one(job_skill, candidates, resume_terms, strategy, threshold)
        if match is None:
            outcome.missing.append(job_skill)
        else:
            outcome.matched.append(job_skill)
            outcome.matches.append(match)

    logger.debug(
        "Skill match (%s): %d matched, %d missing",
        strategy.name, len(outcome.matched), len(outcome.missing),
    )
    return outcome


def compute_skills_score(outcome: MatchOutcome) -> int:
    """Category-weighted share of job skills the resume satisfies. Returns 0-100.

    Statistical terms only count when the job names no catalog skill at all.
    """
    catalog_only = any(s.is_catalog for s in outcome.matched + outcome.missing)

    def scored(skill: ExtractedSkill) -> bool:
        return skill.is_catalog or not catalog_only

    total_weight = sum(s.weight for s in outcome.matched + outcome.missing if scored(s))
    if total_weight <= 0:
        return 0
    earned = sum(
        skill.weight * match.similarity
        for skill, match in zip(outcome.matched, outcome.matches)
        if scored(skill)
    )
    return min(100, max(0, round(100 * earned / total_weight)))
