import pytest

from services.similarity import (
    IndelSimilarity,
    JaroWinklerSimilarity,
    LevenshteinSimilarity,
    SimilarityStrategy,
    content_words,
    get_strategy,
    jaccard_similarity,
    semantic_match_score,
    tfidf_cosine_similarity,
)


@pytest.mark.parametrize("name,cls", [
    ("levenshtein", LevenshteinSimilarity),
    ("jaro_winkler", JaroWinklerSimilarity),
    ("indel", IndelSimilarity),
])
def test_get_strategy(name, cls):
    strategy = get_strategy(name)
    assert isinstance(strategy, cls)
    assert isinstance(strategy, SimilarityStrategy)
    assert strategy.name == name


def test_get_strategy_unknown():
    with pytest.raises(ValueError):
        get_strategy("cosine")


@pytest.mark.parametrize("cls", [LevenshteinSimilarity, JaroWinklerSimilarity, IndelSimilarity])
def test_strategy_bounds(cls):
    strategy = cls()
    assert strategy.similarity("kubernetes", "kubernetes") == pytest.approx(1.0)
    assert strategy.similarity("abc", "xyz") == pytest.approx(0.0)
    assert 0.0 <= strategy.similarity("postgresql", "postgres") <= 1.0


def test_levenshtein_normalized_by_longer_term():
    assert LevenshteinSimilarity().similarity("postgresql", "postgresq") == pytest.approx(0.9)


def test_tfidf_cosine_similarity_identical():
    text = "Python developer with React and Docker experience"
    score = tfidf_cosine_similarity(text, text)
    assert score == pytest.approx(1.0, abs=0.01)


def test_tfidf_cosine_similarity_different():
    a = "Python developer with React and Docker experience in web development"
    b = "Marketing manager with expertise in social media and brand strategy"
    score = tfidf_cosine_similarity(a, b)
    assert score < 0.3  # Very different texts


def test_tfidf_cosine_similarity_empty():
    assert tfidf_cosine_similarity("", "some text") == 0.0
    assert tfidf_cosine_similarity("some text", "") == 0.0


def test_jaccard_similarity():
    assert jaccard_similarity({"a", "b"}, {"b", "c"}) == pytest.approx(1 / 3)
    assert jaccard_similarity(set(), set()) == 0.0


def test_content_words_drop_boilerplate():
    words = content_words("looking for a passionate python developer with django")
    assert words == {"python", "django"}


def test_semantic_match_identical_texts():
    text = "Python engineer building Django services on PostgreSQL and AWS"
    assert semantic_match_score(text, text) == 100


def test_semantic_match_disjoint_texts():
    assert semantic_match_score(
        "python django postgresql kubernetes",
        "marketing brand strategy campaigns",
    ) == 0


def test_semantic_match_short_text():
    assert semantic_match_score("python", "python django postgresql aws docker") == 0
    assert semantic_match_score("", "") == 0


def test_semantic_match_related_texts():
    score = semantic_match_score(
        "Experienced Python developer with Django, PostgreSQL, and AWS.",
        "Looking for Python, Django, PostgreSQL, AWS, Docker experience.",
    )
    assert 50 <= score <= 80
