"""Experience and seniority matching between resume and job posting."""

import logging
import re

from models.schemas import ExperienceProfile
from services.skill_catalog import term_pattern
from services.text_normalizer import normalize_text

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Experience duration extraction
# ---------------------------------------------------------------------------

# "5+ years of experience", "3 yrs exp", "experience: 4 years", "6 years in fintech"
EXP_YEARS_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"(\d{1,2})\+?\s*(?:years?|yrs?)\s*(?:of\s+)?(?:experience|exp\b)", re.IGNORECASE),
    re.compile(r"experience\s*:?\s*(\d{1,2})\+?\s*(?:years?|yrs?)", re.IGNORECASE),
    re.compile(r"(\d{1,2})\+?\s*(?:years?|yrs?)\s+(?:in|with|working)\b", re.IGNORECASE),
)

# Claims at or above this are not experience figures
MAX_PLAUSIBLE_YEARS = 60

# ---------------------------------------------------------------------------
# Seniority tiers: 0=entry, 1=mid, 2=senior, 3=lead/principal, 4=director+
# ---------------------------------------------------------------------------
SENIORITY_TIERS: dict[int, tuple[str, ...]] = {
    4: ("director", "vp", "vice president", "head of", "chief", "cto", "ceo"),
    3: ("lead", "principal", "architect", "staff", "manager"),
    2: ("senior", "sr"),
    1: ("mid-level", "intermediate"),
    0: ("entry", "intern", "graduate", "fresher", "new grad", "junior", "jr"),
}
DEFAULT_LEVEL = 1

# Checked highest tier first
_TIER_PATTERNS: list[tuple[int, re.Pattern]] = [
    (level, term_pattern(SENIORITY_TIERS[level]))
    for level in sorted(SENIORITY_TIERS, reverse=True)
]

BASE_SCORE = 50


def extract_years(text: str) -> float:
    """Largest "N years" figure claimed in text, 0 if none."""
    normalized = normalize_text(text)
    best = 0.0
    for pattern in EXP_YEARS_PATTERNS:
        for match in pattern.finditer(normalized):
            years = float(match.group(1))
            if years < MAX_PLAUSIBLE_YEARS and years > best:
                best = years
    return best


def extract_seniority(text: str) -> int:
    """Highest seniority tier mentioned in text, mid-level when none."""
    normalized = normalize_text(text)
    for level, pattern in _TIER_PATTERNS:
        if pattern.search(normalized):
            return level
    return DEFAULT_LEVEL


def score_experience(
    resume_years: float,
    required_years: float,
    resume_level: int,
    required_level: int,
) -> int:
    """Score 0-100: neutral base plus tiered years and seniority credit."""
    score = BASE_SCORE

    if resume_years >= required_years:
        score += 30
    elif resume_years >= required_years * 0.7:
        score += 20
    elif resume_years >= required_years * 0.5:
        score += 10

    if resume_level >= required_level:
        score += 20
    elif resume_level >= required_level - 1:
        score += 10

    return min(100, max(0, score))


def compute_experience_match(resume_text: str, job_text: str) -> ExperienceProfile:
    """Compare resume experience and seniority against the job requirement."""
    resume_years = extract_years(resume_text)
    required_years = extract_years(job_text)
    resume_level = extract_seniority(resume_text)
    required_level = extract_seniority(job_text)

    profile = ExperienceProfile(
        resume_years=resume_years,
        required_years=required_years,
        resume_level=resume_level,
        required_level=required_level,
        score=score_experience(resume_years, required_years, resume_level, required_level),
    )
    logger.debug(
        "Experience: %.0fy/L%d vs required %.0fy/L%d -> %d",
        resume_years, resume_level, required_years, required_level, profile.score,
    )
    return profile
