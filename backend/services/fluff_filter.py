"""Job-posting boilerplate filtering.

Terms here are removed before any statistical scoring so recruiting
language ("looking", "passionate", "team member") cannot inflate
keyword counts. Catalog scanning does not consult this table.
"""

from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS

# ---------------------------------------------------------------------------
# Job posting fluff: common in postings and resumes but never a skill
# ---------------------------------------------------------------------------
FLUFF_TERMS: frozenset[str] = frozenset({
    # Posting logistics
    "job", "title", "position", "positions", "role", "roles", "location",
    "remote", "onsite", "hybrid", "office", "city", "country", "state",
    "full", "part", "time", "hours", "contract", "permanent", "temporary",
    "internship", "full-time", "part-time", "immediately", "start", "date",
    "duration", "stipend", "posted", "ago", "openings", "apply", "submit",
    # HR vocabulary
    "company", "organization", "team", "teams", "member", "members",
    "candidate", "candidates", "applicant", "applicants", "hiring",
    "recruitment", "employee", "employees", "employer", "employment",
    "opportunity", "opportunities", "career", "careers", "department",
    "salary", "pay", "benefits", "bonus", "compensation", "perks",
    "equal", "eeo", "privacy", "policy",
    # Posting sections
    "about", "description", "overview", "summary", "responsibilities",
    "requirements", "requirement", "qualifications", "qualification",
    "skills", "skill", "experience", "experiences", "required", "preferred",
    "plus", "nice",
    # Seniority and titles
    "years", "year", "level", "senior", "junior", "entry", "mid",
    "developer", "developers", "engineer", "engineers", "specialist",
    "professional", "professionals", "expert", "experts", "individual",
    # Marketing language
    "looking", "seeking", "passionate", "dynamic", "innovative", "exciting",
    "cutting-edge", "cutting", "edge", "kickstart", "environment", "talented",
    "join", "world", "class", "world-class", "fast", "growing", "fast-growing",
    "startup", "enterprise", "global", "international", "leading", "top",
    "best", "premier", "mission", "vision", "culture", "thriving", "proud",
    # Generic descriptors
    "good", "great", "excellent", "outstanding", "strong", "solid", "proven",
    "skilled", "qualified", "experienced", "motivated", "driven", "dedicated",
    "committed", "focused", "results", "oriented", "goal", "self", "proactive",
    "initiative", "strategic", "tactical", "operational", "technical",
    "practical", "effective", "efficient", "productive", "reliable",
    "dependable", "trustworthy", "capable", "advanced", "superior", "able",
    "new", "latest", "current", "modern", "real", "various", "multiple",
    "different", "several", "many", "ability", "abilities", "familiarity",
    "knowledge", "understanding", "proficiency", "proficient", "hands-on",
    # Generic actions
    "work", "working", "worked", "develop", "developing", "developed",
    "build", "building", "built", "create", "creating", "created", "design",
    "designing", "designed", "implement", "implementing", "implemented",
    "maintain", "maintaining", "manage", "managing", "lead", "support",
    "collaborate", "communicate", "deliver", "delivering", "provide",
    "ensure", "help", "assist", "use", "using", "used", "including",
    "related", "relevant", "based", "etc",
    # Time words
    "day", "days", "week", "weeks", "month", "months", "daily", "weekly",
    "monthly",
})

STOPWORDS: frozenset[str] = frozenset(ENGLISH_STOP_WORDS) | FLUFF_TERMS


def is_fluff(token: str) -> bool:
    """True if the token is boilerplate or an English function word."""
    return token.lower() in STOPWORDS


def remove_fluff(tokens: list[str]) -> list[str]:
    """Drop boilerplate tokens, keeping order and duplicates of the rest."""
    return [t for t in tokens if not is_fluff(t)]
