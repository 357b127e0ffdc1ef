"""Domain classifier output: dominant technical domain of one document."""

from pydantic import BaseModel


class DomainProfile(BaseModel):
    domain: str | None = None  # web_development, data_science, mobile, devops, embedded
    signal_strength: int = 0  # distinct signature terms found for `domain`
    scores: dict[str, int] = {}  # hits per domain, for transparency
