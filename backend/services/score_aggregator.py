"""Score aggregation: weighted sub-scores, then deterministic caps and penalties.

Pipeline:
1. Weighted sum of sub-scores (raw score)
2. Minimal-content cap (either input too short to carry signal)
3. Low-match-count penalty
4. Skill-match-ratio cap
5. Domain-mismatch multiplier
"""

import logging

from services.text_normalizer import clean_length

logger = logging.getLogger(__name__)

# Weights for the overall score (sum to 1.0)
W_SEMANTIC = 0.25
W_SKILLS = 0.35
W_EXPERIENCE = 0.20
W_FORMAT = 0.10
W_DENSITY = 0.10

# Minimal-content cap
MIN_CONTENT_LENGTH = 20
MIN_CONTENT_CAP = 5
SHORT_CONTENT_LENGTH = 50
SHORT_CONTENT_CAP = 15

# Skill-match-ratio caps: (ratio below, cap)
RATIO_CAPS = ((0.3, 45), (0.5, 65))

# Adjustment names recorded on the result
MINIMAL_CONTENT_CAP = "minimal_content_cap"
LOW_MATCH_PENALTY = "low_match_penalty"
SKILL_RATIO_CAP = "skill_ratio_cap"
DOMAIN_MISMATCH_PENALTY = "domain_mismatch_penalty"


def weighted_score(
    semantic: int,
    skills: int,
    experience: int,
    format_quality: int,
    keyword_density: int,
) -> int:
    """Compute weighted overall score from all sub-scores. Returns 0-100."""
    raw = (
        W_SEMANTIC * semantic
        + W_SKILLS * skills
        + W_EXPERIENCE * experience
        + W_FORMAT * format_quality
        + W_DENSITY * keyword_density
    )
    return min(100, max(0, round(raw)))


def minimal_content_cap(resume_text: str, job_text: str) -> int | None:
    """Ceiling for inputs too short to score meaningfully, or None."""
    resume_len = clean_length(resume_text)
    job_len = clean_length(job_text)
    if resume_len < MIN_CONTENT_LENGTH or job_len < MIN_CONTENT_LENGTH:
        return MIN_CONTENT_CAP
    if resume_len < SHORT_CONTENT_LENGTH and job_len < SHORT_CONTENT_LENGTH:
        return SHORT_CONTENT_CAP
    return None


def low_match_multiplier(matched: int, missing: int) -> float:
    if matched < 3 and missing > 10:
        return 0.4
    if matched < 5 and missing > 8:
        return 0.6
    if matched < missing / 2:
        return 0.7
    return 1.0


def ratio_cap(matched: int, missing: int) -> int | None:
    total = matched + missing
    if total == 0:
        return None
    ratio = matched / total
    for threshold, cap in RATIO_CAPS:
        if ratio < threshold:
            return cap
    return None


def aggregate(
    semantic: int,
    skills: int,
    experience: int,
    format_quality: int,
    keyword_density: int,
    *,
    resume_text: str,
    job_text: str,
    matched_count: int,
    missing_count: int,
    domain_multiplier: float = 1.0,
) -> tuple[int, int, list[str]]:
    """Combine sub-scores and apply adjustments in order.

    Returns (overall_score, raw_score, applied_adjustment_names).
    """
    raw = weighted_score(semantic, skills, experience, format_quality, keyword_density)
    overall = raw
    adjustments: list[str] = []

    cap = minimal_content_cap(resume_text, job_text)
    if cap is not None and overall > cap:
        overall = cap
        adjustments.append(MINIMAL_CONTENT_CAP)

    multiplier = low_match_multiplier(matched_count, missing_count)
    if multiplier < 1.0:
        overall = round(overall * multiplier)
        adjustments.append(LOW_MATCH_PENALTY)

    cap = ratio_cap(matched_count, missing_count)
    if cap is not None and overall > cap:
        overall = cap
        adjustments.append(SKILL_RATIO_CAP)

    if domain_multiplier < 1.0:
        overall = round(overall * domain_multiplier)
        adjustments.append(DOMAIN_MISMATCH_PENALTY)

    overall = min(100, max(0, overall))
    logger.debug("Aggregate: raw=%d overall=%d adjustments=%s", raw, overall, adjustments)
    return overall, raw, adjustments
