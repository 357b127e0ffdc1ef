from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AnalysisOptions(BaseModel):
    model_config = ConfigDict(extra="forbid")

    job_title: str | None = Field(None, max_length=200)
    company: str | None = Field(None, max_length=200)
    industry: str | None = Field(None, max_length=100, description="e.g. technology, finance")


class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    resume_content: str = Field(..., max_length=50000, description="Plain text resume content")
    job_description: str = Field(..., max_length=10000, description="Job description text")
    job_title: str | None = None
    company: str | None = None
    industry: str | None = None
    resume_id: str | None = None  # persistence key, not used by scoring

    def options(self) -> AnalysisOptions:
        return AnalysisOptions(
            job_title=self.job_title,
            company=self.company,
            industry=self.industry,
        )
