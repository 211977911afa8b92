"""
Subgraph GraphQL clients

Two subgraphs are queried: the info subgraph (pools, ticks) and the farming
subgraph (tokens, eternal farmings, deposits). Clients own every transport
concern: authentication, timeouts and retries. `query` returns the response
envelope as a QueryResult; unwrapping it is left to the callers.
"""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx
import requests

from ..config import settings
from ..constants import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_RETRY_DELAY,
    DEFAULT_TIMEOUT,
    ERROR_POLICIES,
)

logger = logging.getLogger(__name__)


@dataclass
class GraphClientConfig:
    """Subgraph client settings"""
    url: str
    api_key: Optional[str] = None
    timeout: int = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_delay: float = DEFAULT_RETRY_DELAY
    error_policy: str = "none"

    def __post_init__(self):
        if self.error_policy not in ERROR_POLICIES:
            raise ValueError(
                f"Unknown error policy: {self.error_policy}. "
                f"Expected one of: {', '.join(ERROR_POLICIES)}"
            )
        if self.max_retries < 1:
            raise ValueError("max_retries must be at least 1")


class GraphClientError(Exception):
    """Subgraph request failed

    `errors` holds the GraphQL error list when the subgraph answered with one.
    """

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []


@dataclass
class QueryResult:
    """Response envelope of a single query"""
    data: Dict[str, Any] = field(default_factory=dict)
    error: Optional[GraphClientError] = None
    loading: bool = False


def _build_payload(query: str, variables: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """JSON body of a GraphQL POST

    None-valued variables are left out so the subgraph sees them as unset.
    """
    payload: Dict[str, Any] = {"query": query}
    if variables:
        present = {k: v for k, v in variables.items() if v is not None}
        if present:
            payload["variables"] = present
    return payload


def _build_headers(api_key: Optional[str]) -> Dict[str, str]:
    headers = {"Content-Type": "application/json"}
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"
    return headers


def _unwrap(body: Any, error_policy: str) -> QueryResult:
    """Turn a decoded GraphQL response into a QueryResult

    Raises:
        GraphClientError: on GraphQL errors under the "none" policy, or when
            the response carries neither data nor errors
    """
    if not isinstance(body, dict):
        raise GraphClientError(f"Unexpected response body: {body!r}")

    errors = body.get("errors")
    data = body.get("data")

    error = None
    if errors:
        messages = [e.get("message", str(e)) if isinstance(e, dict) else str(e) for e in errors]
        error = GraphClientError(f"GraphQL errors: {'; '.join(messages)}", errors=errors)
        if error_policy == "none":
            raise error
        logger.warning("Subgraph returned partial data: %s", error)
    elif data is None:
        raise GraphClientError("Response has no 'data' field")

    return QueryResult(data=data or {}, error=error, loading=False)


def _handle_response(response, error_policy: str):
    """QueryResult for an HTTP response, or the GraphClientError to retry on

    A body carrying GraphQL `errors` is unwrapped whatever the HTTP status,
    so those errors are never retried. Other non-2xx responses are retried.

    Raises:
        GraphClientError: on a 2xx response whose body is not JSON
    """
    try:
        body = response.json()
    except ValueError as e:
        if response.status_code >= 400:
            return GraphClientError(f"HTTP {response.status_code} from subgraph")
        raise GraphClientError(f"Invalid JSON response: {e}") from e

    if isinstance(body, dict) and body.get("errors"):
        return _unwrap(body, error_policy)
    if response.status_code >= 400:
        return GraphClientError(f"HTTP {response.status_code} from subgraph")
    return _unwrap(body, error_policy)


class GraphClient:
    """Synchronous subgraph client

    Usage:
        client = GraphClient(GraphClientConfig(url="https://.../subgraphs/name/..."))
        result = client.query(FETCH_POOL_QUERY, {"poolId": "0x..."})
        pool = result.data["pool"]
    """

    def __init__(self, config: GraphClientConfig, session: Optional[requests.Session] = None):
        """
        Args:
            config: endpoint and transport settings
            session: requests session to reuse; a new one is created if None
        """
        self.config = config
        self._session = session or requests.Session()

    @property
    def endpoint(self) -> str:
        return self.config.url

    def query(self, query: str, variables: Optional[Dict[str, Any]] = None) -> QueryResult:
        """Execute a GraphQL query

        Timeouts and network/HTTP errors are retried with linear backoff.
        GraphQL errors are not retried.

        Args:
            query: GraphQL document
            variables: query variables

        Returns:
            QueryResult with the response `data`

        Raises:
            GraphClientError: when retries are exhausted or the subgraph
                reports errors under the "none" policy
        """
        payload = _build_payload(query, variables)
        headers = _build_headers(self.config.api_key)

        last_error: Optional[GraphClientError] = None
        for attempt in range(self.config.max_retries):
            logger.debug("POST %s (attempt %d)", self.endpoint, attempt + 1)
            try:
                response = self._session.post(
                    self.endpoint,
                    json=payload,
                    headers=headers,
                    timeout=self.config.timeout,
                )
            except requests.exceptions.Timeout:
                last_error = GraphClientError(f"Request timed out ({self.config.timeout}s)")
            except requests.exceptions.RequestException as e:
                last_error = GraphClientError(f"Network error: {e}")
            else:
                outcome = _handle_response(response, self.config.error_policy)
                if isinstance(outcome, QueryResult):
                    return outcome
                last_error = outcome

            if attempt < self.config.max_retries - 1:
                delay = self.config.retry_delay * (attempt + 1)
                logger.warning("%s, retrying in %.1fs", last_error, delay)
                time.sleep(delay)

        raise last_error

    def close(self):
        self._session.close()


class AsyncGraphClient:
    """asyncio subgraph client, same contract as GraphClient"""

    def __init__(self, config: GraphClientConfig,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Args:
            config: endpoint and transport settings
            transport: httpx transport override (e.g. httpx.MockTransport)
        """
        self.config = config
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return self.config.url

    async def query(self, query: str,
                    variables: Optional[Dict[str, Any]] = None) -> QueryResult:
        """Execute a GraphQL query, see GraphClient.query"""
        payload = _build_payload(query, variables)
        headers = _build_headers(self.config.api_key)

        last_error: Optional[GraphClientError] = None
        async with httpx.AsyncClient(timeout=self.config.timeout,
                                     transport=self._transport) as client:
            for attempt in range(self.config.max_retries):
                logger.debug("POST %s (attempt %d)", self.endpoint, attempt + 1)
                try:
                    response = await client.post(self.endpoint, json=payload, headers=headers)
                except httpx.TimeoutException:
                    last_error = GraphClientError(f"Request timed out ({self.config.timeout}s)")
                except httpx.HTTPError as e:
                    last_error = GraphClientError(f"Network error: {e}")
                else:
                    outcome = _handle_response(response, self.config.error_policy)
                    if isinstance(outcome, QueryResult):
                        return outcome
                    last_error = outcome

                if attempt < self.config.max_retries - 1:
                    delay = self.config.retry_delay * (attempt + 1)
                    logger.warning("%s, retrying in %.1fs", last_error, delay)
                    await asyncio.sleep(delay)

        raise last_error


# Default clients, built from settings on first use
_CLIENTS: Dict[tuple, Any] = {}


def config_for(subgraph: str) -> GraphClientConfig:
    """GraphClientConfig for 'info' or 'farming' from settings

    Raises:
        GraphClientError: when the subgraph URL is not configured or a
            setting is invalid
    """
    url = settings.get_subgraph_url(subgraph)
    if not url:
        raise GraphClientError(
            f"No {subgraph} subgraph URL configured. "
            f"Set the {settings.SUBGRAPH_URL_VARIABLES[subgraph]} environment variable."
        )
    try:
        return GraphClientConfig(
            url=url,
            api_key=settings.GRAPH_API_KEY,
            timeout=settings.GRAPH_TIMEOUT,
            max_retries=settings.GRAPH_MAX_RETRIES,
            retry_delay=settings.GRAPH_RETRY_DELAY,
            error_policy=settings.GRAPH_ERROR_POLICY,
        )
    except ValueError as e:
        raise GraphClientError(f"Invalid {subgraph} client settings: {e}") from e


def get_client(subgraph: str, asynchronous: bool = False):
    """Default client for 'info' or 'farming'"""
    key = (subgraph, asynchronous)
    if key not in _CLIENTS:
        config = config_for(subgraph)
        _CLIENTS[key] = AsyncGraphClient(config) if asynchronous else GraphClient(config)
        logger.info("Using %s subgraph at %s", subgraph, config.url)
    return _CLIENTS[key]


def set_client(subgraph: str, client, asynchronous: bool = False):
    """Replace the default client for 'info' or 'farming'"""
    settings.get_subgraph_url(subgraph)  # rejects unknown names
    _CLIENTS[(subgraph, asynchronous)] = client


def reset_clients():
    """Drop all default clients; they are rebuilt from settings on next use"""
    for client in _CLIENTS.values():
        if isinstance(client, GraphClient):
            client.close()
    _CLIENTS.clear()


def get_info_client() -> GraphClient:
    return get_client("info")


def get_farming_client() -> GraphClient:
    return get_client("farming")
