"""Skill extraction and matching contracts between resume and job posting."""

from pydantic import BaseModel, Field


class ExtractedSkill(BaseModel):
    """A skill signal found in one document."""
    term: str  # canonical, normalized spelling
    category: str  # catalog category name, or "general" for statistical terms
    source_confidence: float = Field(default=1.0, ge=0.0, le=1.0)
    frequency: int = 1  # occurrences in the source document
    weight: float = 0.05  # category importance weight

    @property
    def importance(self) -> float:
        """Ranking key for missing skills: category weight x frequency."""
        return self.weight * self.frequency

    @property
    def is_catalog(self) -> bool:
        return self.category != "general"


class SkillMatch(BaseModel):
    """How a single job skill was satisfied by the resume."""
    jd_skill: str
    resume_skill: str = ""  # empty if unmatched
    similarity: float = 0.0  # 0.0-1.0 match confidence
    match_type: str = "none"  # exact, variant, partial, fuzzy, none


class MatchOutcome(BaseModel):
    """Partition of job skills into matched and missing.

    Every job skill appears in exactly one of the two lists; `matches`
    runs parallel to `matched` with the rule that satisfied each one.
    """
    matched: list[ExtractedSkill] = []
    missing: list[ExtractedSkill] = []
    matches: list[SkillMatch] = []

    @property
    def skill_match_ratio(self) -> float | None:
        total = len(self.matched) + len(self.missing)
        if total == 0:
            return None
        return len(self.matched) / total

    def catalog_counts(self) -> tuple[int, int]:
        """(matched, missing) counting catalog skills only."""
        return (
            sum(1 for s in self.matched if s.is_catalog),
            sum(1 for s in self.missing if s.is_catalog),
        )
