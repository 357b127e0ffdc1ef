"""Orchestrator: resume vs job posting compatibility analysis.

Pipeline:
1. Skill extraction from both documents (catalog + statistical)
2. Skill matching (exact, variant, partial, fuzzy)
3. Semantic, experience, format, density and readability sub-scores
4. Domain classification of both documents
5. Weighted aggregation with caps and penalties
6. Recommendations and keyword placement suggestions

Every stage is a pure function of the two input strings; nothing is
cached or shared between calls beyond the read-only catalog tables.
"""

import logging
from typing import Any, Mapping

from pydantic import ValidationError

from config import settings
from models.requests import AnalysisOptions, AnalyzeRequest
from models.responses import AnalysisResult, AtsResponse, AtsScores, ScoreBreakdown
from services import keyword_extractor, recommendation_generator
from services.domain_classifier import classify_domain, domain_penalty
from services.experience_matcher import compute_experience_match
from services.format_scorer import score_format, score_readability
from services.score_aggregator import aggregate
from services.section_parser import detect_sections
from services.similarity import semantic_match_score
from services.skill_catalog import GENERAL_CATEGORY, INDUSTRY_KEYWORDS, term_pattern
from services.skill_extractor import extract_skills
from services.skill_matcher import compute_skills_score, match_skills
from services.text_normalizer import normalize_text

logger = logging.getLogger(__name__)

# Industry fit blend when a known industry is given
W_INDUSTRY_BASE = 0.7
W_INDUSTRY_KEYWORDS = 0.3


class InvalidInputError(TypeError):
    """Raised when analyze() is called with non-string text or bad options."""


def _coerce_options(options: Any) -> AnalysisOptions:
    if options is None:
        return AnalysisOptions()
    if isinstance(options, AnalysisOptions):
        return options
    if isinstance(options, Mapping):
        try:
            return AnalysisOptions.model_validate(dict(options))
        except ValidationError as e:
            raise InvalidInputError(f"Invalid analysis options: {e}") from e
    raise InvalidInputError(
        f"options must be a mapping or AnalysisOptions, got {type(options).__name__}"
    )


def compute_industry_fit(
    resume_text: str,
    semantic: int,
    skills: int,
    industry: str | None = None,
) -> int:
    """Alignment with the target industry. Returns 0-100."""
    base = (semantic + skills) / 2
    keywords = INDUSTRY_KEYWORDS.get((industry or "").strip().lower())
    if not keywords:
        return min(100, max(0, round(base)))

    normalized = normalize_text(resume_text)
    found = sum(1 for kw in keywords if term_pattern((kw,)).search(normalized))
    share = found / len(keywords)
    return min(100, max(0, round(W_INDUSTRY_BASE * base + W_INDUSTRY_KEYWORDS * 100 * share)))


def analyze(
    resume_text: str,
    job_text: str,
    options: AnalysisOptions | Mapping[str, Any] | None = None,
    *,
    apply_domain_penalty: bool | None = None,
) -> AnalysisResult:
    """Score a resume against a job posting.

    Never raises for string input, however short or empty; raises
    InvalidInputError for non-string text or invalid options.
    """
    if not isinstance(resume_text, str):
        raise InvalidInputError(
            f"resume_text must be str, got {type(resume_text).__name__}"
        )
    if not isinstance(job_text, str):
        raise InvalidInputError(f"job_text must be str, got {type(job_text).__name__}")
    opts = _coerce_options(options)
    if apply_domain_penalty is None:
        apply_domain_penalty = settings.domain_penalty_enabled

    # Job title carries seniority and domain signal the body may omit
    job_signal_text = f"{opts.job_title}\n{job_text}" if opts.job_title else job_text

    # --- Layer 1: Skill extraction ---
    resume_skills = extract_skills(resume_text)
    job_skills = extract_skills(job_text)

    # --- Layer 2: Skill matching ---
    outcome = match_skills(resume_skills, job_skills)
    skills_score = compute_skills_score(outcome)

    # --- Layer 3: Sub-scores ---
    semantic = semantic_match_score(resume_text, job_text)
    experience = compute_experience_match(resume_text, job_signal_text)
    format_quality = score_format(resume_text)
    readability = score_readability(resume_text)

    catalog_hits = sum(1 for s in resume_skills if s.category != GENERAL_CATEGORY)
    density_pct = keyword_extractor.keyword_density_percent(
        normalize_text(resume_text), catalog_hits
    )
    density = keyword_extractor.score_keyword_density(density_pct)

    breakdown = ScoreBreakdown(
        semantic_match=semantic,
        skills_match=skills_score,
        experience_match=experience.score,
        format_quality=format_quality,
        keyword_density=density,
        readability=readability,
    )

    # --- Layer 4: Domain classification ---
    resume_domain = classify_domain(resume_text)
    job_domain = classify_domain(job_signal_text)
    multiplier = domain_penalty(resume_domain, job_domain) if apply_domain_penalty else 1.0

    # --- Layer 5: Aggregation ---
    # Match-count penalties and caps look at catalog skills only
    catalog_matched, catalog_missing = outcome.catalog_counts()
    overall, raw, adjustments = aggregate(
        semantic,
        skills_score,
        experience.score,
        format_quality,
        density,
        resume_text=resume_text,
        job_text=job_text,
        matched_count=catalog_matched,
        missing_count=catalog_missing,
        domain_multiplier=multiplier,
    )

    # --- Layer 6: Recommendations ---
    sections = detect_sections(resume_text)
    ranked_missing = recommendation_generator.rank_missing(outcome.missing)
    ranked_matched = sorted(outcome.matched, key=lambda s: (-s.importance, s.term))
    industry_fit = compute_industry_fit(resume_text, semantic, skills_score, opts.industry)
    job_terms = [s.term for s in outcome.matched] + [s.term for s in outcome.missing]

    result = AnalysisResult(
        overall_score=overall,
        raw_score=raw,
        breakdown=breakdown,
        matched_skills=ranked_matched[: settings.max_matched_skills],
        missing_skills=ranked_missing[: settings.max_missing_skills],
        critical_missing_skills=recommendation_generator.critical_missing(ranked_missing),
        skill_matches=outcome.matches,
        matched_count=len(outcome.matched),
        missing_count=len(outcome.missing),
        recommendations=recommendation_generator.generate_recommendations(
            outcome.missing, breakdown, resume_text
        ),
        keyword_suggestions=recommendation_generator.keyword_suggestions(
            outcome.missing, sections
        ),
        improvement_areas=recommendation_generator.improvement_areas(breakdown),
        strength_areas=recommendation_generator.strength_areas(breakdown, industry_fit),
        domain_penalty_applied=multiplier,
        resume_domain=resume_domain.domain,
        job_domain=job_domain.domain,
        experience=experience,
        detected_sections=sections,
        industry_fit=industry_fit,
        keyword_frequencies=keyword_extractor.compute_keyword_density(resume_text, job_terms),
        adjustments=adjustments,
    )
    if settings.debug:
        logger.debug("Analysis result: %s", result.model_dump_json())
    return result


def fallback_analysis() -> AnalysisResult:
    """Neutral result for callers whose engine call failed at the integration boundary."""
    return AnalysisResult(
        overall_score=45,
        raw_score=45,
        breakdown=ScoreBreakdown(
            semantic_match=40,
            skills_match=40,
            experience_match=45,
            format_quality=50,
            keyword_density=30,
            readability=50,
        ),
        recommendations=["Unable to complete full analysis. Please try again."],
        improvement_areas=["Analysis Error"],
        industry_fit=45,
        degraded=True,
    )


def to_ats_response(result: AnalysisResult) -> AtsResponse:
    """Flattened, renamed view of an AnalysisResult for the HTTP collaborator."""
    b = result.breakdown
    return AtsResponse(
        scores=AtsScores(
            overall=result.overall_score,
            keyword=b.skills_match,
            format=b.format_quality,
            content=b.semantic_match,
            semantic=b.semantic_match,
        ),
        matched_keywords=[s.term for s in result.matched_skills],
        missing_keywords=[s.term for s in result.missing_skills],
        critical_missing_keywords=result.critical_missing_skills,
        suggestions=result.recommendations,
        industry_fit=result.industry_fit,
        readability_score=b.readability,
        semantic_similarity=b.semantic_match,
        keyword_density=b.keyword_density,
        improvement_areas=result.improvement_areas,
        strength_areas=result.strength_areas,
    )


def analyze_request(request: AnalyzeRequest | Mapping[str, Any]) -> AtsResponse:
    """Entry point for the HTTP collaborator: request contract in, flattened view out.

    Engine failures degrade to the fallback analysis instead of propagating.
    """
    try:
        if not isinstance(request, AnalyzeRequest):
            request = AnalyzeRequest.model_validate(request)
        options = request.options()
    except ValidationError as e:
        raise InvalidInputError(f"Invalid analyze request: {e}") from e

    try:
        result = analyze(request.resume_content, request.job_description, options)
    except Exception as e:
        logger.warning("Analysis failed, returning fallback analysis: %s", e)
        result = fallback_analysis()
    return to_ats_response(result)
