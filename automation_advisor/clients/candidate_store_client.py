"""
Candidate store client for the Automation Advisor.

Provides bulk reads of candidate solutions from a PostgREST-style REST
API:
- Consolidated candidates (active, verified, bounded row count)
- Legacy per-source workflow cache rows

A single attempt is made per read; failures raise CandidateStoreError.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from automation_advisor.config.settings import get_settings
from automation_advisor.exceptions import CandidateStoreError

logger = logging.getLogger(__name__)


class CandidateStoreClient:
    """
    HTTP client for the candidate store.

    Example:
        client = CandidateStoreClient()
        rows = client.fetch_active_solutions(limit=1000)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize candidate store client.

        Args:
            base_url: Base URL of the REST API
            api_key: API key sent as ``apikey`` and bearer token
            timeout: Request timeout in seconds
        """
        settings = get_settings()
        self.base_url = (base_url or settings.candidate_store_url).rstrip("/")
        self.api_key = api_key or settings.candidate_store_api_key
        self.timeout = timeout or settings.candidate_store_timeout
        self._session: Optional[httpx.Client] = None

    def _get_session(self) -> httpx.Client:
        """Get or create HTTP session."""
        if self._session is None:
            headers = {"Accept": "application/json"}
            if self.api_key:
                headers["apikey"] = self.api_key
                headers["Authorization"] = f"Bearer {self.api_key}"
            self._session = httpx.Client(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=headers,
            )
        return self._session

    def _request(self, table: str, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        """
        Read rows from a table.

        Args:
            table: Table name
            params: PostgREST query parameters

        Returns:
            Rows as dicts

        Raises:
            CandidateStoreError: If the request fails or returns no list
        """
        endpoint = f"/rest/v1/{table}"
        logger.debug(f"Store request: GET {endpoint}", extra={"params": params})

        try:
            response = self._get_session().get(endpoint, params=params)
            response.raise_for_status()
            rows = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Failed to read {table}: {e}")
            raise CandidateStoreError(f"Failed to load {table}: {e}") from e

        if not isinstance(rows, list):
            raise CandidateStoreError(f"Unexpected response shape from {table}")
        return rows

    def fetch_active_solutions(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """
        Read active, verified candidate solutions.

        Args:
            limit: Maximum rows (defaults to ``candidate_row_limit``)

        Returns:
            Candidate rows
        """
        settings = get_settings()
        rows = self._request(
            settings.candidate_table,
            {
                "select": "*",
                "active": "eq.true",
                "status": f"eq.{settings.candidate_verification_status}",
                "limit": limit or settings.candidate_row_limit,
            },
        )
        logger.info(f"Loaded {len(rows)} candidate solutions")
        return rows

    def fetch_legacy_cache_rows(self) -> List[Dict[str, Any]]:
        """
        Read legacy workflow cache rows (``{source, workflows[]}``).

        Returns:
            Cache rows
        """
        settings = get_settings()
        sources = ",".join(f'"{source}"' for source in settings.legacy_cache_sources)
        rows = self._request(
            settings.legacy_cache_table,
            {
                "select": "source,workflows",
                "source": f"in.({sources})",
                "version": f"eq.{settings.legacy_cache_version}",
            },
        )
        logger.info(f"Loaded {len(rows)} legacy workflow cache rows")
        return rows

    def close(self):
        """Close HTTP session."""
        if self._session:
            self._session.close()
            self._session = None


# Singleton client instance
_store_client: Optional[CandidateStoreClient] = None


def get_candidate_store_client() -> CandidateStoreClient:
    """
    Get the singleton candidate store client instance.

    Returns:
        CandidateStoreClient instance
    """
    global _store_client
    if _store_client is None:
        _store_client = CandidateStoreClient()
    return _store_client


def reset_candidate_store_client():
    """Reset the singleton client (for testing)."""
    global _store_client
    if _store_client:
        _store_client.close()
    _store_client = None
