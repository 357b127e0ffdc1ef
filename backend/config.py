from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Skill matching
    fuzzy_threshold: float = 0.8  # 0.0-1.0 similarity needed for a fuzzy match
    similarity_strategy: str = "levenshtein"  # "levenshtein" | "jaro_winkler" | "indel"

    # Result sizing
    max_missing_skills: int = 10
    max_matched_skills: int = 20

    # Statistical term pass
    statistical_terms_limit: int = 10
    statistical_min_frequency: int = 2

    # Scoring
    domain_penalty_enabled: bool = True

    debug: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
