"""Integration name normalization."""

from typing import Dict

INTEGRATION_SYNONYMS: Dict[str, str] = {
    "http": "http request",
    "http request": "http request",
    "webhook": "webhook",
    "gmail": "gmail",
    "google drive": "google drive",
    "drive": "google drive",
    "sheets": "google sheets",
    "google sheets": "google sheets",
    "postgres": "postgresql",
    "postgresql": "postgresql",
    "mysql": "mysql",
    "mongo": "mongodb",
    "mongodb": "mongodb",
    "openai": "openai",
    "slack": "slack",
    "github": "github",
    "graph ql": "graphql",
    "graphql": "graphql",
}


def normalize_integration(raw: str) -> str:
    """
    Map an integration name to its canonical form.

    Unknown names are returned lower-cased and stripped.

    >>> normalize_integration("Postgres")
    'postgresql'
    """
    name = (raw or "").lower().strip()
    return INTEGRATION_SYNONYMS.get(name, name)
