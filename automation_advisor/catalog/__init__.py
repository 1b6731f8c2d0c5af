"""
Catalog package for the Automation Advisor.

Contains static lookup data:
- keywords: Keyword tables for industry/category detection and scoring
- ai_tools: AI tool catalog and per-industry recommendation table
"""

from automation_advisor.catalog.ai_tools import (
    AITool,
    AI_TOOLS,
    get_tools_by_industry,
    get_tool_ids_by_industry,
    get_top_tools_by_industry,
    get_industry_recommendations,
)

__all__ = [
    "AITool",
    "AI_TOOLS",
    "get_tools_by_industry",
    "get_tool_ids_by_industry",
    "get_top_tools_by_industry",
    "get_industry_recommendations",
]
