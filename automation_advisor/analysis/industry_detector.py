"""
Keyword-driven industry and task category detection.

Both detectors lower-case the text and test substring membership against
ordered keyword tables; the first match wins. No tokenization, no ML.

Usage:
    from automation_advisor.analysis.industry_detector import (
        detect_industry,
        detect_task_category,
    )
"""

from automation_advisor.catalog.keywords import (
    CATEGORY_KEYWORDS,
    HR_SPECIFIC_KEYWORDS,
    INDUSTRY_KEYWORDS,
    INDUSTRY_PRIORITY,
    contains_any,
)

GENERAL_INDUSTRY = "general"
GENERAL_CATEGORY = "general"


def detect_industry(text: str) -> str:
    """
    Detect the industry a text belongs to.

    Industries are checked in priority order (hr, finance, marketing, tech,
    healthcare, production). HR only matches on its high-precision phrases.

    Args:
        text: Free text (job title and/or task text)

    Returns:
        Industry tag, ``general`` when nothing matches
    """
    lower_text = (text or "").lower()

    for industry in INDUSTRY_PRIORITY:
        if industry == "hr":
            if contains_any(lower_text, HR_SPECIFIC_KEYWORDS):
                return industry
        elif contains_any(lower_text, INDUSTRY_KEYWORDS.get(industry, [])):
            return industry

    return GENERAL_INDUSTRY


def detect_task_category(text: str) -> str:
    """
    Detect the task category of a text.

    Categories are walked in table order, so administrative wins over
    analytical for "Reporting und Analyse".

    Returns:
        Category tag, ``general`` when nothing matches
    """
    lower_text = (text or "").lower()

    for category, keywords in CATEGORY_KEYWORDS:
        if contains_any(lower_text, keywords):
            return category

    return GENERAL_CATEGORY
