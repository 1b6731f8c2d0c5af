"""
Clients package for the Automation Advisor.

Contains clients for external services:
- llm_client: Completion service (job description analysis)
- candidate_store_client: Candidate solution store (REST)
- cache_client: Recommendation cache (Redis)
"""

from automation_advisor.clients.llm_client import (
    LLMClient,
    get_llm_client,
    reset_llm_client,
)
from automation_advisor.clients.candidate_store_client import (
    CandidateStoreClient,
    get_candidate_store_client,
    reset_candidate_store_client,
)
from automation_advisor.clients.cache_client import (
    CacheClient,
    get_cache_client,
    reset_cache_client,
)

__all__ = [
    "LLMClient",
    "get_llm_client",
    "reset_llm_client",
    "CandidateStoreClient",
    "get_candidate_store_client",
    "reset_candidate_store_client",
    "CacheClient",
    "get_cache_client",
    "reset_cache_client",
]
