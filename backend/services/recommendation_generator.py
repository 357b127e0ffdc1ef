"""Turn missing skills and weak sub-scores into ranked suggestions.

Order of recommendations: skills gap, format, keyword density, experience.
"""

from models.responses import KeywordSuggestion, ScoreBreakdown
from models.schemas import ExtractedSkill
from services.format_scorer import missing_format_sections
from services.skill_catalog import CRITICAL_WEIGHT

# Sub-score thresholds below which a recommendation is emitted
FORMAT_THRESHOLD = 70
DENSITY_THRESHOLD = 60
EXPERIENCE_THRESHOLD = 60

# Density band score for keyword stuffing (see services.keyword_extractor)
DENSITY_STUFFED = 50

TOP_GAP_SKILLS = 3
MAX_KEYWORD_SUGGESTIONS = 10

POSITIVE_MESSAGE = (
    "Your resume looks strong! Consider minor optimizations for specific job requirements."
)

_PRIORITY_ORDER = {"high": 0, "medium": 1, "low": 2}

# Categories -> resume section a missing keyword belongs in
_TECHNICAL = {
    "programming_languages", "frameworks_libraries", "databases", "cloud_devops",
    "data_ml", "apis_architecture", "testing_quality",
}
_TOOLS = {"business_tools", "management_tools"}

_SUGGESTION_TEMPLATES = {
    "programming_languages": (
        'Add "{kw}" to your programming languages. Mention specific projects where you used {kw}.'
    ),
    "frameworks_libraries": (
        'Include "{kw}" in your frameworks section. Highlight any projects or experience with {kw}.'
    ),
    "databases": (
        'Add "{kw}" to your database technologies. Mention data modeling or query optimization work.'
    ),
    "cloud_devops": (
        'Include "{kw}" in your cloud/DevOps skills. Highlight deployment or infrastructure experience.'
    ),
    "soft_skills": (
        'Demonstrate "{kw}" through specific examples in your work experience.'
    ),
}
_DEFAULT_TEMPLATE = 'Consider adding "{kw}" to your relevant skills if you have experience with it.'


def rank_missing(missing: list[ExtractedSkill]) -> list[ExtractedSkill]:
    """Most important first: category weight x frequency, ties by term."""
    return sorted(missing, key=lambda s: (-s.importance, s.term))


def critical_missing(missing: list[ExtractedSkill]) -> list[str]:
    return [s.term for s in missing if s.weight >= CRITICAL_WEIGHT]


def generate_recommendations(
    missing: list[ExtractedSkill],
    breakdown: ScoreBreakdown,
    resume_text: str,
) -> list[str]:
    """Ordered natural-language suggestions; one positive note when nothing is weak."""
    recommendations: list[str] = []

    ranked = rank_missing(missing)
    if ranked:
        top = ", ".join(s.term for s in ranked[:TOP_GAP_SKILLS])
        recommendations.append(f"Add these critical skills: {top}")

    if breakdown.format_quality < FORMAT_THRESHOLD:
        absent = missing_format_sections(resume_text)
        if absent:
            names = ", ".join(s.capitalize() for s in absent)
            recommendations.append(f"Improve resume structure with clear sections ({names})")
        else:
            recommendations.append(
                "Improve resume structure with bullet points, dates and consistent sections"
            )

    if breakdown.keyword_density < DENSITY_THRESHOLD:
        if breakdown.keyword_density == DENSITY_STUFFED:
            recommendations.append(
                "Reduce keyword repetition; the resume reads as keyword stuffing"
            )
        else:
            recommendations.append(
                "Include more relevant technical keywords naturally throughout your resume"
            )

    if breakdown.experience_match < EXPERIENCE_THRESHOLD:
        recommendations.append(
            "Highlight projects or experiences that demonstrate the required skill level"
        )

    if not recommendations:
        recommendations.append(POSITIVE_MESSAGE)
    return recommendations


def _section_for(category: str) -> str:
    if category in _TECHNICAL:
        return "Technical Skills"
    if category in _TOOLS:
        return "Tools"
    if category == "soft_skills":
        return "Experience"
    return "Summary"


def keyword_suggestions(
    missing: list[ExtractedSkill],
    detected_sections: list[str] | None = None,
) -> list[KeywordSuggestion]:
    """Placement suggestions for the top missing skills, high priority first."""
    sections = set(detected_sections or [])
    suggestions: list[KeywordSuggestion] = []
    for index, skill in enumerate(rank_missing(missing)[:MAX_KEYWORD_SUGGESTIONS]):
        if skill.weight >= CRITICAL_WEIGHT or index < 3:
            priority = "high"
        elif index < 7:
            priority = "medium"
        else:
            priority = "low"

        section = _section_for(skill.category)
        text = _SUGGESTION_TEMPLATES.get(skill.category, _DEFAULT_TEMPLATE).format(kw=skill.term)
        if section == "Technical Skills" and "skills" not in sections:
            text += " A dedicated Skills section makes it easier to find."
        suggestions.append(KeywordSuggestion(
            keyword=skill.term,
            section=section,
            suggestion=text,
            priority=priority,
        ))

    # sorted() is stable, so rank order survives within a priority
    return sorted(suggestions, key=lambda s: _PRIORITY_ORDER[s.priority])


def improvement_areas(breakdown: ScoreBreakdown) -> list[str]:
    areas: list[str] = []
    if breakdown.skills_match < 70:
        areas.append("Technical Skills Alignment")
    if breakdown.format_quality < 70:
        areas.append("Resume Structure & Format")
    if breakdown.keyword_density < 50:
        areas.append("Keyword Optimization")
    if breakdown.experience_match < 60:
        areas.append("Experience Level Matching")
    if breakdown.semantic_match < 60:
        areas.append("Content Relevance")
    return areas


def strength_areas(breakdown: ScoreBreakdown, industry_fit: int) -> list[str]:
    areas: list[str] = []
    if breakdown.skills_match >= 80:
        areas.append("Strong Technical Skills Match")
    if breakdown.format_quality >= 80:
        areas.append("Excellent Resume Structure")
    if breakdown.experience_match >= 80:
        areas.append("Well-Matched Experience Level")
    if breakdown.readability >= 80:
        areas.append("Clear and Professional Writing")
    if industry_fit >= 80:
        areas.append("Strong Industry Alignment")
    return areas
