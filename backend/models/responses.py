from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from models.schemas import ExperienceProfile, ExtractedSkill, SkillMatch


class ScoreBreakdown(BaseModel):
    semantic_match: int = 0
    skills_match: int = 0
    experience_match: int = 0
    format_quality: int = 0
    keyword_density: int = 0
    readability: int = 0


class KeywordSuggestion(BaseModel):
    keyword: str
    section: str  # Technical Skills, Experience, Tools, Summary
    suggestion: str
    priority: str = "medium"  # high, medium, low


class AnalysisResult(BaseModel):
    overall_score: int = 0
    raw_score: int = 0  # weighted score before caps and penalties
    breakdown: ScoreBreakdown = ScoreBreakdown()
    matched_skills: list[ExtractedSkill] = []
    missing_skills: list[ExtractedSkill] = []  # ranked by importance, capped
    critical_missing_skills: list[str] = []
    skill_matches: list[SkillMatch] = []
    matched_count: int = 0  # before capping
    missing_count: int = 0
    recommendations: list[str] = []
    keyword_suggestions: list[KeywordSuggestion] = []
    improvement_areas: list[str] = []
    strength_areas: list[str] = []
    domain_penalty_applied: float = 1.0  # 1.0 = no penalty
    resume_domain: str | None = None
    job_domain: str | None = None
    experience: ExperienceProfile = ExperienceProfile()
    detected_sections: list[str] = []
    industry_fit: int = 0
    keyword_frequencies: dict[str, float] = {}  # percent of resume words
    adjustments: list[str] = []
    degraded: bool = False


# ---------------------------------------------------------------------------
# Flattened camelCase view for the HTTP collaborator
# ---------------------------------------------------------------------------

class AtsScores(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    overall: int = 0
    keyword: int = 0
    format: int = 0
    content: int = 0
    semantic: int = 0


class AtsResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    scores: AtsScores = AtsScores()
    matched_keywords: list[str] = []
    missing_keywords: list[str] = []
    critical_missing_keywords: list[str] = []
    suggestions: list[str] = []
    industry_fit: int = 0
    readability_score: int = 0
    semantic_similarity: int = 0
    keyword_density: int = 0
    improvement_areas: list[str] = []
    strength_areas: list[str] = []
