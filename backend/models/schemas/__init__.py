"""Inter-stage Pydantic contracts for the scoring engine."""

from models.schemas.domain_profile import DomainProfile
from models.schemas.experience_profile import ExperienceProfile
from models.schemas.skills_comparison import ExtractedSkill, MatchOutcome, SkillMatch

__all__ = [
    "DomainProfile",
    "ExperienceProfile",
    "ExtractedSkill",
    "MatchOutcome",
    "SkillMatch",
]
