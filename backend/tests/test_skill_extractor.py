"""Tests for catalog + statistical skill extraction."""

from services.skill_catalog import GENERAL_CATEGORY, GENERAL_WEIGHT
from services.skill_extractor import (
    CONFIDENCE_CANONICAL,
    CONFIDENCE_STATISTICAL,
    CONFIDENCE_VARIANT,
    extract_catalog_skills,
    extract_skills,
    extract_statistical_skills,
    skill_terms,
)


def _by_term(skills):
    return {s.term: s for s in skills}


def test_extract_skills_exact_catalog_terms():
    skills = extract_skills("Experienced Python developer with Django, PostgreSQL, and AWS.")
    assert skill_terms(skills) == ["aws", "django", "postgresql", "python"]
    found = _by_term(skills)
    assert found["python"].category == "programming_languages"
    assert found["python"].weight == 0.25
    assert found["django"].category == "frameworks_libraries"
    assert all(s.source_confidence == CONFIDENCE_CANONICAL for s in skills)


def test_extract_skills_variant_confidence():
    found = _by_term(extract_skills("Built services in JS and Postgres"))
    assert found["javascript"].source_confidence == CONFIDENCE_VARIANT
    assert found["postgresql"].source_confidence == CONFIDENCE_VARIANT


def test_extract_skills_canonical_and_variant_dedup():
    found = _by_term(extract_skills("JavaScript and JS everywhere"))
    assert list(found) == ["javascript"]
    assert found["javascript"].frequency == 2
    assert found["javascript"].source_confidence == CONFIDENCE_CANONICAL


def test_extract_skills_avoids_substring_false_positives():
    terms = skill_terms(extract_skills("Senior Software Engineer built scalable systems in JavaScript"))
    assert "scala" not in terms
    assert "java" not in terms
    assert "javascript" in terms


def test_extract_skills_multiword_and_dotted():
    terms = skill_terms(extract_skills(
        "Built APIs with Node.js and Next.js; knowledge of machine learning"
    ))
    assert "node.js" in terms
    assert "next.js" in terms
    assert "machine learning" in terms
    assert "javascript" not in terms  # "js" must not fire inside "node.js"


def test_extract_skills_symbol_names():
    terms = skill_terms(extract_skills("C++ and C# with CI/CD"))
    assert {"cpp", "csharp", "ci-cd"} <= set(terms)


def test_extract_skills_statistical_terms():
    skills = extract_skills(
        "Blockchain engineer. Blockchain ledgers and Solidity. Solidity audits."
    )
    found = _by_term(skills)
    assert "blockchain" in found
    assert "solidity" in found
    assert found["blockchain"].category == GENERAL_CATEGORY
    assert found["blockchain"].weight == GENERAL_WEIGHT
    assert found["blockchain"].source_confidence == CONFIDENCE_STATISTICAL


def test_extract_skills_without_statistical_pass():
    skills = extract_skills(
        "Blockchain engineer. Blockchain ledgers and Solidity. Solidity audits.",
        include_statistical=False,
    )
    assert skills == []


def test_extract_skills_short_and_empty_text():
    assert extract_skills("") == []
    assert extract_skills("   ") == []
    assert skill_terms(extract_skills("python")) == ["python"]
    assert extract_statistical_skills("tiny text") == []


def test_extract_skills_is_deterministic():
    text = "Python, React, Docker, blockchain blockchain, AWS and k8s"
    assert extract_skills(text) == extract_skills(text)


def test_extract_catalog_skills_frequency():
    found = _by_term(extract_catalog_skills("docker docker docker kubernetes"))
    assert found["docker"].frequency == 3
    assert found["kubernetes"].frequency == 1


def test_extract_skills_compound_terms_not_split():
    terms = skill_terms(extract_skills("Mobile apps in React-Native; services on Spring Boot"))
    assert "react native" in terms
    assert "spring boot" in terms
    assert "react" not in terms
    assert "spring" not in terms
