from __future__ import annotations

import re

from resume_engine.schemas.draft import SkillLevel

DEFAULT_CATEGORY = "Technical"
TRANSFERABLE_CATEGORY = "Transferable Skills"

# Checked in order; the first category with a matching term wins.
_CATEGORY_TERMS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "Soft Skills",
        (
            "leadership", "communication", "teamwork", "problem solving", "critical thinking",
            "time management", "project management", "collaboration", "presentation",
            "public speaking", "mentoring", "coaching",
        ),
    ),
    (
        "Frameworks & Libraries",
        (
            "react", "angular", "vue", "svelte", "next.js", "nuxt", "express", "django", "flask",
            "spring", "laravel", "rails", "asp.net", ".net", "node.js", "jquery", "bootstrap",
            "tailwind", "material-ui", "redux", "graphql", "rest api", "fastapi", "nestjs", "ember",
        ),
    ),
    (
        "Databases",
        (
            "mysql", "postgresql", "mongodb", "redis", "sqlite", "oracle", "sql server", "dynamodb",
            "cassandra", "elasticsearch", "firebase", "mariadb", "couchdb", "neo4j", "postgres",
        ),
    ),
    (
        "Cloud & DevOps",
        (
            "aws", "azure", "gcp", "google cloud", "docker", "kubernetes", "k8s", "jenkins", "gitlab",
            "github actions", "terraform", "ansible", "ci/cd", "devops", "linux", "unix", "nginx",
            "apache", "heroku", "vercel", "netlify",
        ),
    ),
    (
        "Testing",
        (
            "jest", "mocha", "chai", "jasmine", "pytest", "junit", "selenium", "cypress", "testing",
            "test", "tdd", "bdd", "unit test", "integration test", "vitest", "karma",
        ),
    ),
    (
        "Data & Analytics",
        (
            "machine learning", "ml", "ai", "artificial intelligence", "data science", "data analysis",
            "pandas", "numpy", "tensorflow", "pytorch", "scikit-learn", "tableau", "power bi", "excel",
            "statistics", "analytics",
        ),
    ),
    (
        "Design",
        (
            "ui", "ux", "design", "wireframe", "prototype", "user experience", "user interface",
            "responsive design", "mobile design", "web design", "graphic design",
        ),
    ),
    (
        "Tools & Software",
        (
            "git", "jira", "confluence", "slack", "figma", "sketch", "photoshop", "illustrator", "xd",
            "vscode", "intellij", "eclipse", "postman", "webpack", "vite", "babel", "npm", "yarn",
            "maven", "gradle",
        ),
    ),
    ("Methodologies", ("agile", "scrum", "kanban")),
    (
        "Programming Languages",
        (
            "javascript", "typescript", "python", "java", "c++", "c#", "ruby", "php", "swift", "kotlin",
            "go", "rust", "scala", "r", "matlab", "sql", "html", "css", "bash", "shell", "perl", "dart",
            "objective-c", "c", "lua", "elixir", "haskell", "clojure",
        ),
    ),
)

# Terms this short only match a whole token ("r" must not match "react").
_SHORT_TERM_LENGTH = 2
_TOKEN_SPLIT_RE = re.compile(r"[\s,;/()\[\]]+")

_LEVEL_RULES: tuple[tuple[tuple[str, ...], SkillLevel], ...] = (
    (("student", "entry"), "beginner"),
    (("junior",), "intermediate"),
    (("mid", "intermediate"), "intermediate"),
    (("senior", "lead"), "advanced"),
    (("principal", "staff", "architect", "expert"), "expert"),
)


def normalize_skill_name(name: str) -> str:
    """Identity key for skill deduplication."""
    return re.sub(r"\s+", " ", (name or "").strip().lower())


def _term_matches(term: str, normalized: str, tokens: set[str]) -> bool:
    if len(term) <= _SHORT_TERM_LENGTH:
        return term in tokens
    return term == normalized or term in normalized


def categorize(name: str) -> str:
    normalized = normalize_skill_name(name)
    if not normalized:
        return DEFAULT_CATEGORY
    tokens = {token for token in _TOKEN_SPLIT_RE.split(normalized) if token}
    for category, terms in _CATEGORY_TERMS:
        if any(_term_matches(term, normalized, tokens) for term in terms):
            return category
    return DEFAULT_CATEGORY


def default_level(experience_level: str | None) -> SkillLevel:
    lowered = (experience_level or "").lower()
    for markers, level in _LEVEL_RULES:
        if any(marker in lowered for marker in markers):
            return level
    return "intermediate"
