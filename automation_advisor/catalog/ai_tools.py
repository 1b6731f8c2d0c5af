"""
AI tool catalog.

Static catalog of AI tools used to attach tool suggestions to classified
tasks, plus the per-industry recommendation table used by the aggregator.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class AITool:
    """
    An AI tool suggested for a set of industries.

    Attributes:
        id: Catalog identifier
        name: Display name
        category: Tool category
        industries: Industries the tool is suggested for
        automation_potential: 0-100 estimate of the tool's automation leverage
    """
    id: str
    name: str
    category: str
    industries: Tuple[str, ...]
    automation_potential: int


AI_TOOLS: Tuple[AITool, ...] = (
    AITool("chatgpt", "ChatGPT", "LLM", ("tech", "general"), 75),
    AITool("claude", "Claude", "LLM", ("tech", "general"), 80),
    AITool("github-copilot", "GitHub Copilot", "Code Assistant", ("tech",), 85),
    AITool("code-whisperer", "CodeWhisperer", "Code Assistant", ("tech",), 80),
    AITool("tabnine", "Tabnine", "Code Assistant", ("tech",), 75),
    AITool("notion-ai", "Notion AI", "Documentation",
           ("healthcare", "hr", "education", "legal", "general"), 70),
    AITool("obsidian-ai", "Obsidian AI", "Knowledge Management",
           ("healthcare", "education", "research"), 65),
    AITool("microsoft-copilot", "Microsoft Copilot", "Office Integration",
           ("healthcare", "hr", "finance", "general"), 75),
    AITool("excel-ai", "Excel AI", "Data Analysis", ("finance", "production", "general"), 85),
    AITool("power-bi-ai", "Power BI AI", "Business Intelligence",
           ("finance", "production", "marketing"), 80),
    AITool("google-sheets-ai", "Google Sheets AI", "Data Analysis", ("finance", "hr", "general"), 75),
    AITool("airtable-ai", "Airtable AI", "Database", ("finance", "hr", "production", "general"), 80),
    AITool("jasper", "Jasper", "Content Creation", ("marketing",), 75),
    AITool("copy-ai", "Copy.ai", "Content Creation", ("marketing",), 70),
    AITool("writesonic", "Writesonic", "Content Creation", ("marketing",), 70),
    AITool("canva-ai", "Canva AI", "Design", ("marketing", "general"), 65),
    AITool("perplexity", "Perplexity", "Research",
           ("healthcare", "education", "legal", "general"), 75),
    AITool("grammarly", "Grammarly", "Writing Assistant", ("education", "general"), 70),
    AITool("grok", "Grok", "LLM", ("general",), 70),
    AITool("gemini", "Gemini", "LLM", ("general",), 75),
)


def get_tools_by_industry(industry: str) -> List[AITool]:
    """Get all catalog tools suggested for an industry."""
    return [tool for tool in AI_TOOLS if industry in tool.industries]


def get_tool_ids_by_industry(industry: str) -> List[str]:
    """Get catalog ids of the tools suggested for an industry."""
    return [tool.id for tool in get_tools_by_industry(industry)]


def get_top_tools_by_industry(industry: str, limit: int = 5) -> List[AITool]:
    """Get the tools for an industry with the highest automation potential."""
    tools = sorted(
        get_tools_by_industry(industry),
        key=lambda tool: tool.automation_potential,
        reverse=True,
    )
    return tools[:limit]


INDUSTRY_RECOMMENDATIONS: Dict[str, Dict[str, List[str]]] = {
    "de": {
        "tech": [
            "Implementieren Sie GitHub Copilot für Code-Vervollständigung",
            "Nutzen Sie Claude für Code-Reviews und Sicherheitsanalysen",
            "Verwenden Sie ChatGPT für Dokumentation und Debugging-Hilfe",
            "Integrieren Sie CI/CD-Pipelines mit AI-gestützter Qualitätskontrolle",
        ],
        "healthcare": [
            "Etablieren Sie Notion AI für Patientendaten-Management",
            "Nutzen Sie Claude für klinische Entscheidungsunterstützung",
            "Implementieren Sie Microsoft Copilot für medizinische Berichte",
            "Verwenden Sie Perplexity für medizinische Recherche",
        ],
        "finance": [
            "Integrieren Sie Excel AI für automatische Datenverarbeitung",
            "Nutzen Sie Power BI AI für Finanzdashboards",
            "Implementieren Sie Claude für Risikoanalysen",
            "Verwenden Sie Airtable AI für Workflow-Automatisierung",
        ],
        "marketing": [
            "Etablieren Sie Jasper für Content-Erstellung",
            "Nutzen Sie Copy.ai für Conversion-optimierte Texte",
            "Implementieren Sie Canva AI für Visual Content",
            "Verwenden Sie Claude für Marktanalysen",
        ],
        "hr": [
            "Integrieren Sie Notion AI für HR-Dokumentation",
            "Nutzen Sie Airtable AI für Bewerber-Management",
            "Implementieren Sie ChatGPT für Recruiting-Unterstützung",
            "Verwenden Sie Microsoft Copilot für Office-Aufgaben",
        ],
        "production": [
            "Etablieren Sie Excel AI für Produktionsdaten",
            "Nutzen Sie Power BI AI für Performance-Monitoring",
            "Implementieren Sie Airtable AI für Lagerverwaltung",
            "Verwenden Sie Claude für Prozessoptimierung",
        ],
        "education": [
            "Integrieren Sie Notion AI für Kurs-Management",
            "Nutzen Sie Obsidian AI für Forschungsnotizen",
            "Implementieren Sie ChatGPT für Unterrichtsvorbereitung",
            "Verwenden Sie Perplexity für Literaturrecherche",
        ],
        "legal": [
            "Etablieren Sie Notion AI für Fall-Management",
            "Nutzen Sie Claude für Rechtsanalysen",
            "Implementieren Sie Perplexity für Rechtsrecherche",
            "Verwenden Sie ChatGPT für Vertragsentwürfe",
        ],
        "general": [
            "Starten Sie mit ChatGPT für allgemeine Aufgaben",
            "Nutzen Sie Claude für detaillierte Analysen",
            "Implementieren Sie Microsoft Copilot für Office-Integration",
            "Verwenden Sie Notion AI für Dokumentation",
        ],
    },
    "en": {
        "tech": [
            "Adopt GitHub Copilot for code completion",
            "Use Claude for code reviews and security analysis",
            "Use ChatGPT for documentation and debugging help",
            "Integrate CI/CD pipelines with AI-assisted quality control",
        ],
        "healthcare": [
            "Establish Notion AI for patient data management",
            "Use Claude for clinical decision support",
            "Adopt Microsoft Copilot for medical reports",
            "Use Perplexity for medical research",
        ],
        "finance": [
            "Integrate Excel AI for automated data processing",
            "Use Power BI AI for finance dashboards",
            "Adopt Claude for risk analysis",
            "Use Airtable AI for workflow automation",
        ],
        "marketing": [
            "Establish Jasper for content creation",
            "Use Copy.ai for conversion-optimised copy",
            "Adopt Canva AI for visual content",
            "Use Claude for market analysis",
        ],
        "hr": [
            "Integrate Notion AI for HR documentation",
            "Use Airtable AI for applicant management",
            "Adopt ChatGPT for recruiting support",
            "Use Microsoft Copilot for office tasks",
        ],
        "production": [
            "Establish Excel AI for production data",
            "Use Power BI AI for performance monitoring",
            "Adopt Airtable AI for inventory management",
            "Use Claude for process optimisation",
        ],
        "education": [
            "Integrate Notion AI for course management",
            "Use Obsidian AI for research notes",
            "Adopt ChatGPT for lesson preparation",
            "Use Perplexity for literature research",
        ],
        "legal": [
            "Establish Notion AI for case management",
            "Use Claude for legal analysis",
            "Adopt Perplexity for legal research",
            "Use ChatGPT for contract drafts",
        ],
        "general": [
            "Start with ChatGPT for general tasks",
            "Use Claude for detailed analysis",
            "Adopt Microsoft Copilot for office integration",
            "Use Notion AI for documentation",
        ],
    },
}


def get_industry_recommendations(industry: str, lang: str = "de") -> List[str]:
    """Get canned recommendations for an industry (general if unknown)."""
    table = INDUSTRY_RECOMMENDATIONS.get(lang, INDUSTRY_RECOMMENDATIONS["de"])
    return table.get(industry, table["general"])
