"""
Keyword tables used by the keyword-based classifiers.

All keywords are lower-case; matching is plain substring membership on
lower-cased text. German and English terms are mixed because job
descriptions arrive in both languages.
"""

from typing import Dict, List, Tuple

# Order matters: earlier industries win when several match.
INDUSTRY_PRIORITY: Tuple[str, ...] = ("hr", "finance", "marketing", "tech", "healthcare", "production")

INDUSTRY_KEYWORDS: Dict[str, List[str]] = {
    "tech": [
        "software", "development", "programming", "code", "api", "system", "technical",
        "engineer", "developer", "programmer", "frontend", "backend", "fullstack",
        "javascript", "typescript", "react", "vue", "angular", "node.js", "python",
        "java", "c++", "database", "sql", "nosql", "mongodb", "postgresql",
        "docker", "kubernetes", "aws", "azure", "cloud", "devops", "ci/cd",
        "git", "github", "gitlab", "agile", "scrum", "sprint",
        "software engineer", "coding", "api development", "system design", "technical lead",
        "ux", "ui", "user experience", "user interface", "designer", "design",
        "figma", "sketch", "adobe xd", "wireframe", "mockup", "prototyp",
        "designsystem", "design system", "usability", "user research", "user feedback",
    ],
    "marketing": [
        "marketing", "campaign", "brand", "content", "social media", "advertising",
        "promotion", "seo", "sem", "google ads", "facebook ads", "instagram",
        "linkedin", "twitter", "youtube", "email marketing", "newsletter",
        "lead generation", "conversion", "analytics", "google analytics",
        "influencer", "affiliate", "pr", "public relations", "copywriting",
        "marketing manager", "campaign management", "brand strategy", "content creation",
        "digital marketing",
    ],
    "finance": [
        "financial", "accounting", "tax", "budget", "invoice", "payment",
        "controller", "accountant", "bookkeeper", "audit", "compliance",
        "bilanz", "buchhaltung", "buchhalter", "buchführung", "steuer",
        "rechnungswesen", "finanzen", "controlling", "kostenrechnung",
        "liquidität", "cashflow", "reporting", "abrechnung", "kassenbuch",
    ],
    "healthcare": [
        "medical", "patient", "healthcare", "clinical", "nursing", "treatment",
        "doctor", "nurse", "physician", "hospital", "clinic", "therapy",
        "medizinisch", "pflege", "krankenhaus", "praxis", "therapie",
        "gesundheit", "medikament", "diagnose", "behandlung", "operation",
        "medical professional", "patient care", "healthcare management", "clinical operations",
    ],
    "production": [
        "production", "manufacturing", "quality", "process", "operations",
        "factory", "plant", "assembly", "lean", "six sigma", "kaizen",
        "produktion", "fertigung", "qualität", "prozess", "betrieb",
        "fabrik", "werk", "montage", "logistik", "supply chain", "warehouse",
        "production manager", "quality assurance", "process optimization",
    ],
}

# Generic terms like "personal" over-trigger HR, so HR needs one of these.
HR_SPECIFIC_KEYWORDS: List[str] = [
    "hr manager", "hr director", "hr specialist", "human resources manager",
    "personalmanager", "personalchef", "personalreferent", "recruiter",
    "talent acquisition", "recruitment", "onboarding", "offboarding",
]

# Order matters: the first matching category wins.
CATEGORY_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("administrative", (
        "verwaltung", "administration", "büro", "office", "koordination", "coordination",
        "planung", "planning", "organisation", "organization", "berichterstattung",
        "reporting", "dokumentation", "documentation", "datenerfassung", "data entry",
        "abrechnung", "accounting",
    )),
    ("communication", (
        "kommunikation", "communication", "präsentation", "presentation", "meeting",
        "gespräch", "verhandlung", "negotiation", "kundeninteraktion", "customer interaction",
    )),
    ("technical", (
        "entwicklung", "development", "programmierung", "programming", "system",
        "integration", "datenbank", "database", "api", "software",
    )),
    ("analytical", (
        "analyse", "analysis", "auswertung", "evaluation", "statistik", "statistics",
        "datenanalyse", "data analysis", "forschung", "research",
    )),
    ("creative", (
        "content", "design", "kreativ", "creative", "marketing", "werbung",
        "kampagne", "campaign",
    )),
    ("management", (
        "führung", "leadership", "management", "leitung", "strategie", "strategy",
        "entscheidung", "decision",
    )),
    ("physical", (
        "körperlich", "physical", "bewegung", "movement", "handarbeit", "manual work",
        "transport", "lieferung",
    )),
    ("routine", (
        "routine", "wiederkehrend", "repetitive", "standard", "prozess", "process",
    )),
)

AUTOMATION_POSITIVE_KEYWORDS: List[str] = [
    "daten", "data", "excel", "tabelle", "table", "bericht", "report", "routine",
    "wiederkehrend", "repetitive", "standard", "prozess", "process", "automatisch",
    "automatic", "system", "software",
]

AUTOMATION_NEGATIVE_KEYWORDS: List[str] = [
    "kreativ", "creative", "beratung", "consultation", "entscheidung", "decision",
    "strategie", "strategy", "führung", "leadership", "körperlich", "physical",
    "handarbeit", "manual",
]

# Job parser refinements
HIGH_COMPLEXITY_TRIGGERS: Tuple[str, ...] = (
    "debugging", "fehlerbehebung", "integration", "optimierung", "entwicklung", "programmierung",
)
MEDIUM_COMPLEXITY_TRIGGERS: Tuple[str, ...] = (
    "dokumentation", "testing", "review", "code-review",
)
INCREASING_TREND_TRIGGERS: Tuple[str, ...] = (
    "ai", "automatisierung", "workflow", "machine learning",
)
STABLE_TREND_TRIGGERS: Tuple[str, ...] = (
    "debugging", "fehlerbehebung", "support", "wartung", "pflege",
)


def contains_any(text: str, keywords) -> bool:
    """Check whether any keyword occurs in the (lower-cased) text."""
    return any(keyword in text for keyword in keywords)


def count_matches(text: str, keywords) -> int:
    """Count how many distinct keywords occur in the (lower-cased) text."""
    return sum(1 for keyword in keywords if keyword in text)
