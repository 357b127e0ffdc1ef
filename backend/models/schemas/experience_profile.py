"""Experience matcher output: years and seniority for resume vs job."""

from pydantic import BaseModel


class ExperienceProfile(BaseModel):
    resume_years: float = 0.0
    required_years: float = 0.0
    resume_level: int = 1  # 0=entry, 1=mid, 2=senior, 3=lead/principal, 4=director+
    required_level: int = 1
    score: int = 50  # 0-100
