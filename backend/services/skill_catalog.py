"""Skill category catalog: weighted categories, canonical terms and variants.

The catalog is built once at import time and is read-only afterwards.
Every canonical term is written in normalized form (see
services.text_normalizer) and belongs to exactly one category.
Scanning is table driven: CATALOG_MATCHERS pairs each category with its
weight and a compiled matcher, so extending the catalog never touches
matching logic.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, NamedTuple

GENERAL_CATEGORY = "general"
GENERAL_WEIGHT = 0.05

# Categories whose missing skills are reported as critical
CRITICAL_WEIGHT = 0.15


@dataclass(frozen=True)
class SkillCategory:
    name: str
    label: str
    importance_weight: float  # 0.0-1.0 relative importance
    terms: frozenset[str]
    variants: Mapping[str, frozenset[str]]  # canonical -> accepted spellings


# ---------------------------------------------------------------------------
# Raw catalog table: category -> (label, weight, {canonical: variants})
# ---------------------------------------------------------------------------
_CATALOG_TABLE: dict[str, tuple[str, float, dict[str, tuple[str, ...]]]] = {
    "programming_languages": ("Programming Languages", 0.25, {
        "python": ("python3",),
        "javascript": ("js", "ecmascript", "es6", "es2015", "es2020"),
        "typescript": ("ts",),
        "java": (),
        "cpp": ("cplusplus", "c plus plus"),
        "csharp": ("c sharp",),
        "fsharp": (),
        "php": (),
        "ruby": (),
        "golang": ("go lang",),
        "rust": (),
        "swift": (),
        "kotlin": (),
        "scala": (),
        "matlab": (),
        "sql": (),
        "html": ("html5", "hypertext markup language"),
        "css": ("css3", "cascading style sheets"),
        "bash": ("shell scripting",),
        "powershell": (),
        "perl": (),
        "dart": (),
        "elixir": (),
        "haskell": (),
        "objective-c": ("objc",),
    }),
    "frameworks_libraries": ("Frameworks & Libraries", 0.20, {
        "react": ("reactjs", "react.js"),
        "react native": ("react-native",),
        "angular": ("angularjs", "angular.js"),
        "vue": ("vuejs", "vue.js"),
        "svelte": (),
        "node.js": ("nodejs", "node"),
        "express": ("expressjs", "express.js"),
        "next.js": ("nextjs",),
        "nuxt.js": ("nuxtjs", "nuxt"),
        "nestjs": ("nest.js",),
        "django": (),
        "flask": (),
        "fastapi": ("fast api",),
        "spring": (),
        "spring boot": ("springboot",),
        "laravel": (),
        "rails": ("ruby on rails",),
        "asp.net": ("asp.net core",),
        ".net": ("dotnet",),
        "jquery": (),
        "bootstrap": (),
        "tailwind": ("tailwindcss", "tailwind css"),
        "redux": (),
        "flutter": (),
    }),
    "databases": ("Databases", 0.15, {
        "postgresql": ("postgres", "psql"),
        "mysql": (),
        "mongodb": ("mongo",),
        "redis": (),
        "elasticsearch": ("elastic search",),
        "sqlite": (),
        "oracle": (),
        "cassandra": (),
        "firebase": (),
        "firestore": (),
        "dynamodb": ("dynamo db",),
        "neo4j": (),
        "sql server": ("mssql",),
        "nosql": (),
        "snowflake": (),
        "bigquery": (),
        "redshift": (),
    }),
    "cloud_devops": ("Cloud & DevOps", 0.15, {
        "aws": ("amazon web services",),
        "azure": ("microsoft azure",),
        "gcp": ("google cloud platform", "google cloud"),
        "docker": (),
        "kubernetes": ("k8s",),
        "jenkins": (),
        "terraform": (),
        "ansible": (),
        "ci-cd": ("cicd", "continuous integration"),
        "devops": (),
        "github actions": (),
        "gitlab ci": (),
        "git": ("github", "gitlab", "bitbucket", "version control"),
        "helm": (),
        "prometheus": (),
        "grafana": (),
        "vercel": (),
        "netlify": (),
        "heroku": (),
        "cloudformation": (),
        "linux": (),
        "nginx": (),
    }),
    "data_ml": ("Data & Machine Learning", 0.15, {
        "machine learning": ("ml", "machine-learning"),
        "deep learning": (),
        "artificial intelligence": ("ai", "artificial-intelligence"),
        "natural language processing": ("nlp",),
        "computer vision": (),
        "data science": (),
        "data analysis": ("data analytics",),
        "pandas": (),
        "numpy": (),
        "scikit-learn": ("sklearn", "scikit"),
        "tensorflow": (),
        "pytorch": ("torch",),
        "keras": (),
        "spark": ("apache spark", "pyspark"),
        "hadoop": (),
        "airflow": (),
        "tableau": (),
        "power bi": ("powerbi",),
        "jupyter": (),
        "statistics": (),
        "llm": ("large language model", "large language models"),
    }),
    "apis_architecture": ("APIs & Architecture", 0.10, {
        "rest api": ("restful", "rest apis", "restful api", "restful apis"),
        "api": ("apis",),
        "graphql": ("graph ql",),
        "grpc": (),
        "soap": (),
        "microservices": ("microservice",),
        "serverless": (),
        "websocket": ("websockets",),
        "api gateway": (),
        "load balancing": ("load balancer", "load balancers"),
        "cdn": (),
        "caching": (),
        "system design": (),
        "event-driven": ("event driven",),
    }),
    "business_tools": ("Business Tools", 0.10, {
        "salesforce": (),
        "hubspot": (),
        "crm": (),
        "google analytics": (),
        "seo": (),
        "sem": (),
        "excel": ("microsoft excel", "ms excel"),
        "quickbooks": (),
        "sap": (),
        "content marketing": (),
        "social media": (),
        "financial analysis": (),
        "forecasting": (),
        "budgeting": (),
        "figma": (),
        "photoshop": (),
        "illustrator": (),
        "canva": (),
    }),
    "management_tools": ("Management Tools", 0.10, {
        "agile": (),
        "scrum": (),
        "kanban": (),
        "jira": (),
        "confluence": (),
        "asana": (),
        "trello": (),
        "notion": (),
        "slack": (),
        "project management": ("project mgmt",),
        "stakeholder management": (),
        "strategic planning": (),
        "change management": (),
    }),
    "testing_quality": ("Testing & Quality", 0.08, {
        "unit testing": ("unit tests",),
        "integration testing": ("integration tests",),
        "e2e testing": ("e2e", "end-to-end testing"),
        "tdd": ("test driven development", "test-driven development"),
        "bdd": (),
        "jest": (),
        "mocha": (),
        "cypress": (),
        "selenium": (),
        "playwright": (),
        "junit": (),
        "pytest": (),
        "quality assurance": ("qa",),
        "debugging": (),
    }),
    "soft_skills": ("Soft Skills", 0.07, {
        "leadership": (),
        "communication": ("communication skills",),
        "teamwork": ("team player", "collaboration"),
        "problem solving": ("problem-solving",),
        "analytical": ("analytical skills",),
        "mentoring": ("mentorship",),
        "time management": (),
        "critical thinking": (),
        "adaptability": (),
        "attention to detail": (),
        "creativity": (),
    }),
}

# ---------------------------------------------------------------------------
# Industry keyword sets used for the optional industry-fit signal
# ---------------------------------------------------------------------------
INDUSTRY_KEYWORDS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "technology": ("api", "rest", "graphql", "microservices", "architecture",
                   "scalability", "performance"),
    "finance": ("financial modeling", "risk management", "compliance", "audit",
                "derivatives", "trading"),
    "marketing": ("seo", "sem", "social media", "content marketing",
                  "digital marketing", "roi", "conversion"),
    "healthcare": ("hipaa", "patient care", "medical records", "clinical",
                   "pharmaceutical", "regulatory"),
    "education": ("curriculum", "pedagogy", "assessment", "learning outcomes",
                  "instructional design"),
    "retail": ("inventory", "supply chain", "pos", "customer experience",
               "merchandising", "sales"),
})


def term_pattern(surfaces: list[str] | tuple[str, ...]) -> re.Pattern:
    """Compile a word-boundary alternation over normalized surface forms.

    Longest surfaces first so "react.js" is consumed before "react".
    A preceding dot blocks a match: "js" must not fire inside "node.js".
    """
    ordered = sorted(set(surfaces), key=lambda s: (-len(s), s))
    alternation = "|".join(re.escape(s) for s in ordered)
    return re.compile(rf"(?<![\w.])(?:{alternation})(?!\w)")


class CatalogHit(NamedTuple):
    canonical: str
    frequency: int
    exact: bool  # canonical spelling itself was present


class CatalogMatcher:
    """Scans normalized text for one category's canonical terms and variants.

    When given the catalog-wide spelling index, a longer spelling of another
    skill hides the words inside it: "react native" is not also a "react" hit.
    """

    def __init__(
        self,
        category: SkillCategory,
        surfaces: Mapping[str, str] | None = None,
    ) -> None:
        self.category = category
        self._patterns: list[tuple[str, re.Pattern, re.Pattern | None]] = []
        for canonical in sorted(category.terms):
            own = (canonical, *category.variants[canonical])
            pattern = term_pattern(own)
            shadows = [
                surface for surface, owner in (surfaces or {}).items()
                if owner != canonical and pattern.search(surface)
            ]
            self._patterns.append(
                (canonical, pattern, term_pattern(shadows) if shadows else None)
            )

    def scan(self, normalized: str) -> list[CatalogHit]:
        hits: list[CatalogHit] = []
        if not normalized:
            return hits
        for canonical, pattern, shadow in self._patterns:
            text = shadow.sub(" ", normalized) if shadow else normalized
            found = pattern.findall(text)
            if found:
                hits.append(CatalogHit(canonical, len(found), canonical in found))
        return hits


def _build_catalog() -> tuple[SkillCategory, ...]:
    categories = []
    seen: set[str] = set()
    for name, (label, weight, entries) in _CATALOG_TABLE.items():
        for canonical in entries:
            if canonical in seen:
                raise ValueError(f"Catalog term listed twice: {canonical}")
            seen.add(canonical)
        categories.append(SkillCategory(
            name=name,
            label=label,
            importance_weight=weight,
            terms=frozenset(entries),
            variants=MappingProxyType(
                {canonical: frozenset(v) for canonical, v in entries.items()}
            ),
        ))
    return tuple(categories)


CATALOG: tuple[SkillCategory, ...] = _build_catalog()

CATEGORY_BY_NAME: Mapping[str, SkillCategory] = MappingProxyType(
    {c.name: c for c in CATALOG}
)

# canonical term -> owning category
CATEGORY_BY_TERM: Mapping[str, SkillCategory] = MappingProxyType(
    {term: c for c in CATALOG for term in c.terms}
)

# any accepted spelling (canonical included) -> canonical
VARIANT_INDEX: Mapping[str, str] = MappingProxyType({
    surface: canonical
    for c in CATALOG
    for canonical, variants in c.variants.items()
    for surface in (canonical, *variants)
})

# Every word that takes part in some catalog spelling
CATALOG_VOCABULARY: frozenset[str] = frozenset(
    word for surface in VARIANT_INDEX for word in surface.split()
)

CATALOG_MATCHERS: tuple[tuple[str, float, CatalogMatcher], ...] = tuple(
    (c.name, c.importance_weight, CatalogMatcher(c, VARIANT_INDEX)) for c in CATALOG
)


def canonicalize(term: str) -> str:
    """Resolve a spelling to its canonical catalog term (identity if unknown)."""
    lower = term.lower().strip()
    return VARIANT_INDEX.get(lower, lower)


def is_catalog_term(term: str) -> bool:
    return term in CATEGORY_BY_TERM


def category_weight(category_name: str) -> float:
    if category_name == GENERAL_CATEGORY:
        return GENERAL_WEIGHT
    category = CATEGORY_BY_NAME.get(category_name)
    return category.importance_weight if category else GENERAL_WEIGHT


def category_label(category_name: str) -> str:
    if category_name == GENERAL_CATEGORY:
        return "General"
    category = CATEGORY_BY_NAME.get(category_name)
    return category.label if category else category_name


def variants_of(canonical: str) -> frozenset[str]:
    category = CATEGORY_BY_TERM.get(canonical)
    if category is None:
        return frozenset()
    return category.variants[canonical]
