"""End-to-end tests for the resume vs job analysis engine."""

import pytest

from config import settings
from models.requests import AnalysisOptions, AnalyzeRequest
from models.responses import AnalysisResult, AtsResponse
from services import resume_analyzer
from services.resume_analyzer import (
    InvalidInputError,
    analyze,
    analyze_request,
    compute_industry_fit,
    fallback_analysis,
    to_ats_response,
)
from services.skill_extractor import extract_skills
from services.skill_matcher import match_skills
from services.text_normalizer import normalize_text

EXACT_RESUME = "Experienced Python developer with Django, PostgreSQL, and AWS."
EXACT_JOB = "Looking for Python, Django, PostgreSQL, AWS, Docker experience."

DATA_SCIENCE_RESUME = "Data scientist. " + (
    "Data scientist with pandas, numpy, tensorflow, jupyter notebooks "
    "and machine learning statistics. "
) * 5
WEB_JOB = "Frontend engineer. " + (
    "We need react, frontend, css, webpack, html and javascript expertise. "
) * 5

WIDE_JOB = (
    "Required skills: Python, JavaScript, TypeScript, React, Angular, Vue, Django, "
    "Flask, PostgreSQL, MongoDB, Redis, Docker, Kubernetes and Terraform."
)

PAYMENTS_RESUME = (
    "Backend engineer with 6 years of experience building Python services.\n"
    "Skills: Python, Django, PostgreSQL, Redis, Docker, AWS and Kubernetes.\n"
)
PAYMENTS_JOB = (
    "Our payments group moves money for merchants and their customers. "
    "You will build ledger services, payments reconciliation and fraud screening "
    "for merchant settlement. The ledger records transactions, chargebacks and "
    "settlement batches; fraud rules protect customers and merchants. "
    "Reconciliation jobs match transactions against chargebacks every night. "
    "Stack: Python, Django, PostgreSQL, Redis, Docker, AWS and Kubernetes."
)

ODD_INPUTS = [
    ("", ""),
    ("", "some job text longer than fifty characters for the cap check"),
    ("x", "y"),
    ("!!!! ???? ....", "#### $$$$ %%%%"),
    ("résumé naïve café " * 20, "日本語のテキスト " * 10),
    ("python " * 500, "python"),
    ("\n\n\t  \n", "Python Django"),
]


def _terms(skills):
    return {s.term for s in skills}


@pytest.mark.scenario
class TestScenarios:
    def test_exact_match(self):
        result = analyze(EXACT_RESUME, EXACT_JOB)
        assert {"python", "django", "postgresql", "aws"} <= _terms(result.matched_skills)
        assert "docker" in _terms(result.missing_skills)
        assert 60 <= result.overall_score <= 85
        assert result.domain_penalty_applied == 1.0

    def test_minimal_content_cap(self):
        result = analyze("", "some job text longer than 50 chars, with Python and Docker")
        assert result.overall_score <= 5
        assert "minimal_content_cap" in result.adjustments

    def test_domain_mismatch_reduces_score(self):
        with_penalty = analyze(DATA_SCIENCE_RESUME, WEB_JOB, apply_domain_penalty=True)
        without = analyze(DATA_SCIENCE_RESUME, WEB_JOB, apply_domain_penalty=False)
        assert with_penalty.resume_domain == "data_science"
        assert with_penalty.job_domain == "web_development"
        assert with_penalty.domain_penalty_applied == 0.4
        assert without.domain_penalty_applied == 1.0
        assert with_penalty.overall_score < without.overall_score
        assert "domain_mismatch_penalty" in with_penalty.adjustments

    def test_domain_penalty_follows_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "domain_penalty_enabled", False)
        result = analyze(DATA_SCIENCE_RESUME, WEB_JOB)
        assert result.domain_penalty_applied == 1.0

    def test_low_match_penalty(self):
        result = analyze("Experienced with Python and Excel.", WIDE_JOB)
        assert result.matched_count < 3
        assert result.missing_count > 10
        assert "low_match_penalty" in result.adjustments
        assert result.overall_score <= round(result.raw_score * 0.4)

    def test_domain_nouns_do_not_trigger_match_count_caps(self):
        result = analyze(PAYMENTS_RESUME, PAYMENTS_JOB)
        catalog_matched = {s.term for s in result.matched_skills if s.is_catalog}
        assert catalog_matched == {
            "aws", "django", "docker", "kubernetes", "postgresql", "python", "redis",
        }
        assert result.missing_skills
        assert not any(s.is_catalog for s in result.missing_skills)
        assert "skill_ratio_cap" not in result.adjustments
        assert "low_match_penalty" not in result.adjustments
        assert result.breakdown.skills_match == 100
        missing = {s.term for s in result.missing_skills}
        assert len(missing & {"merchant", "merchants"}) == 1

    def test_realistic_documents(self, sample_resume, sample_job):
        result = analyze(sample_resume, sample_job)
        assert result.overall_score >= 50
        assert result.experience.resume_years == 7
        assert result.experience.required_years == 5
        assert {"education", "experience", "skills", "summary"} <= set(result.detected_sections)
        assert "python" in _terms(result.matched_skills)


def test_analyze_is_deterministic(sample_resume, sample_job):
    assert analyze(sample_resume, sample_job) == analyze(sample_resume, sample_job)
    assert analyze(EXACT_RESUME, EXACT_JOB) == analyze(EXACT_RESUME, EXACT_JOB)


def test_partition_matches_extracted_job_skills(sample_resume, sample_job):
    job_skills = extract_skills(sample_job)
    outcome = match_skills(extract_skills(sample_resume), job_skills)
    assert _terms(outcome.matched) | _terms(outcome.missing) == _terms(job_skills)
    assert not _terms(outcome.matched) & _terms(outcome.missing)

    result = analyze(sample_resume, sample_job)
    assert result.matched_count + result.missing_count == len(job_skills)


@pytest.mark.parametrize("resume,job", ODD_INPUTS)
def test_scores_are_bounded(resume, job):
    result = analyze(resume, job)
    assert 0 <= result.overall_score <= 100
    assert 0 <= result.raw_score <= 100
    for value in result.breakdown.model_dump().values():
        assert 0 <= value <= 100
    assert 0 <= result.industry_fit <= 100


def test_skills_score_monotone_in_resume_skills():
    job = "Python, React, Docker, AWS, PostgreSQL, Kubernetes and Terraform engineer"
    small = analyze("Engineer skilled in Python and React.", job)
    large = analyze("Engineer skilled in Python, React, Docker and Kubernetes.", job)
    assert large.breakdown.skills_match >= small.breakdown.skills_match


def test_normalization_is_idempotent():
    text = "Senior C++ / C# engineer -- Node.js, CI/CD; 5+ yrs!"
    assert normalize_text(normalize_text(text)) == normalize_text(text)


def test_missing_skills_are_ranked_and_capped(monkeypatch):
    monkeypatch.setattr(settings, "max_missing_skills", 3)
    result = analyze("Experienced with Python and Excel.", WIDE_JOB)
    assert len(result.missing_skills) == 3
    weights = [s.importance for s in result.missing_skills]
    assert weights == sorted(weights, reverse=True)
    assert result.missing_count > 3
    assert set(result.critical_missing_skills) >= {"javascript", "docker"}


class TestOptions:
    def test_job_title_adds_seniority_signal(self):
        job = "Build Python services with Django and PostgreSQL every day."
        plain = analyze(EXACT_RESUME, job)
        titled = analyze(EXACT_RESUME, job, {"job_title": "Director of Engineering"})
        assert plain.experience.required_level == 1
        assert titled.experience.required_level == 4

    def test_options_model_accepted(self):
        result = analyze(EXACT_RESUME, EXACT_JOB, AnalysisOptions(industry="technology"))
        assert isinstance(result, AnalysisResult)

    def test_unknown_option_rejected(self):
        with pytest.raises(InvalidInputError):
            analyze(EXACT_RESUME, EXACT_JOB, {"salary": 100})

    def test_bad_options_type_rejected(self):
        with pytest.raises(InvalidInputError):
            analyze(EXACT_RESUME, EXACT_JOB, "technology")


class TestInvalidInput:
    def test_non_string_resume(self):
        with pytest.raises(InvalidInputError):
            analyze(None, EXACT_JOB)

    def test_non_string_job(self):
        with pytest.raises(InvalidInputError):
            analyze(EXACT_RESUME, b"bytes job")

    def test_is_type_error(self):
        with pytest.raises(TypeError):
            analyze(123, 456)


class TestIndustryFit:
    def test_base_blend(self):
        assert compute_industry_fit("anything", 60, 40) == 50

    def test_known_industry(self):
        fit = compute_industry_fit("seo and content marketing", 60, 40, "Marketing")
        assert fit == 44

    def test_unknown_industry(self):
        assert compute_industry_fit("anything", 60, 40, "aerospace") == 50


def test_fallback_analysis():
    result = fallback_analysis()
    assert result.overall_score == 45
    assert result.breakdown.semantic_match == 40
    assert result.breakdown.skills_match == 40
    assert result.breakdown.experience_match == 45
    assert result.breakdown.format_quality == 50
    assert result.breakdown.keyword_density == 30
    assert result.breakdown.readability == 50
    assert result.degraded is True
    assert len(result.recommendations) == 1


class TestCollaboratorView:
    def test_to_ats_response_camel_case(self):
        result = analyze(EXACT_RESUME, EXACT_JOB)
        payload = to_ats_response(result).model_dump(by_alias=True)
        assert payload["scores"]["overall"] == result.overall_score
        assert payload["scores"]["keyword"] == result.breakdown.skills_match
        assert payload["scores"]["content"] == result.breakdown.semantic_match
        assert "python" in payload["matchedKeywords"]
        assert "docker" in payload["missingKeywords"]
        assert "docker" in payload["criticalMissingKeywords"]
        assert payload["readabilityScore"] == result.breakdown.readability
        assert payload["suggestions"] == result.recommendations

    def test_analyze_request_from_camel_case_dict(self):
        response = analyze_request({
            "resumeContent": EXACT_RESUME,
            "jobDescription": EXACT_JOB,
            "jobTitle": "Backend Engineer",
            "resumeId": "abc123",
        })
        assert isinstance(response, AtsResponse)
        assert response.scores.overall == analyze(
            EXACT_RESUME, EXACT_JOB, {"job_title": "Backend Engineer"}
        ).overall_score

    def test_analyze_request_model(self):
        request = AnalyzeRequest(resume_content=EXACT_RESUME, job_description=EXACT_JOB)
        assert analyze_request(request).scores.overall > 0

    def test_analyze_request_invalid(self):
        with pytest.raises(InvalidInputError):
            analyze_request({"jobDescription": EXACT_JOB})

    def test_analyze_request_falls_back_on_engine_failure(self, monkeypatch):
        def boom(*args, **kwargs):
            raise RuntimeError("engine exploded")

        monkeypatch.setattr(resume_analyzer, "analyze", boom)
        response = analyze_request({"resumeContent": "r", "jobDescription": "j"})
        assert response.scores.overall == 45
        assert response.keyword_density == 30
