"""
Configuration package for the Automation Advisor.

Contains:
- settings: Environment-based configuration
- heuristics: Tunable scoring constants
- logging_setup: Logging setup
"""

from automation_advisor.config.settings import Settings, get_settings
from automation_advisor.config.heuristics import (
    HeuristicConfig,
    DEFAULT_HEURISTICS,
    get_heuristics,
)
from automation_advisor.config.logging_setup import configure_logging

__all__ = [
    "Settings",
    "get_settings",
    "HeuristicConfig",
    "DEFAULT_HEURISTICS",
    "get_heuristics",
    "configure_logging",
]
