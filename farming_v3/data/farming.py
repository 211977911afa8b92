"""
Farming V3 query functions

Each function builds the query variables, runs one query on the info or
farming subgraph client and casts the requested root field into data types.
Pass `client` to use something other than the default client.
"""

from typing import List, Optional

from ..constants import MAX_SKIP, TICKS_PAGE_SIZE
from . import queries
from .graph_client import GraphClient, GraphClientError, get_farming_client, get_info_client
from .types import Deposit, EternalFarming, Pool, Tick, TicksResult, Token


def get_pool(pool_address: Optional[str], client: Optional[GraphClient] = None) -> Optional[Pool]:
    """Pool state from the info subgraph

    Args:
        pool_address: pool contract address (case-insensitive)

    Returns:
        Pool, or None if the subgraph has no such pool
    """
    client = client or get_info_client()
    result = client.query(
        queries.FETCH_POOL_QUERY,
        {"poolId": pool_address.lower() if pool_address else pool_address},
    )
    pool = result.data.get("pool")
    return Pool.from_dict(pool) if pool else None


def get_token(token_address: Optional[str], client: Optional[GraphClient] = None) -> Optional[Token]:
    """Token from the farming subgraph

    The address is sent as given; the farming subgraph stores ids lowercased.
    """
    client = client or get_farming_client()
    result = client.query(queries.FETCH_TOKEN_QUERY, {"tokenId": token_address})
    token = result.data.get("token")
    return Token.from_dict(token) if token else None


def get_eternal_farmings(client: Optional[GraphClient] = None) -> List[EternalFarming]:
    """All eternal farmings that are not detached"""
    client = client or get_farming_client()
    result = client.query(queries.FETCH_ETERNAL_FARMINGS_QUERY)
    return [EternalFarming.from_dict(f) for f in result.data.get("eternalFarmings") or []]


def get_eternal_farming(farming_id: Optional[str],
                        client: Optional[GraphClient] = None) -> Optional[EternalFarming]:
    client = client or get_farming_client()
    result = client.query(queries.FETCH_ETERNAL_FARMING_QUERY, {"farmingId": farming_id})
    farming = result.data.get("eternalFarming")
    return EternalFarming.from_dict(farming) if farming else None


def get_eternal_farming_from_pool(pool_address: Optional[str],
                                  client: Optional[GraphClient] = None) -> List[EternalFarming]:
    """Attached farmings of a pool with a non-zero reward rate"""
    client = client or get_farming_client()
    result = client.query(
        queries.FETCH_ETERNAL_FARMING_FROM_POOL_QUERY,
        {"poolAddress": pool_address},
    )
    return [EternalFarming.from_dict(f) for f in result.data.get("eternalFarmings") or []]


def get_transferred_positions(account: Optional[str],
                              client: Optional[GraphClient] = None) -> List[Deposit]:
    """Deposits of `account` currently on the farming center, newest id first"""
    client = client or get_farming_client()
    result = client.query(queries.FETCH_TRANSFERRED_POSITIONS_QUERY, {"account": account})
    return [Deposit.from_dict(d) for d in result.data.get("deposits") or []]


def get_positions_on_eternal_farming(account: Optional[str],
                                     client: Optional[GraphClient] = None) -> List[Deposit]:
    """Deposits of `account` entered in an eternal farming, newest id first"""
    client = client or get_farming_client()
    result = client.query(queries.FETCH_POSITIONS_ON_ETERNAL_FARMING_QUERY, {"account": account})
    return [Deposit.from_dict(d) for d in result.data.get("deposits") or []]


def get_transferred_positions_for_pool(
    account: str,
    pool_id: str,
    min_range_length: int,
    client: Optional[GraphClient] = None
) -> List[Deposit]:
    """Deposits of `account` in `pool_id` that still hold liquidity

    `min_range_length` is sent along with the other variables; the document
    does not declare it, so the subgraph does not filter on it.
    """
    client = client or get_farming_client()
    result = client.query(
        queries.FETCH_TRANSFERRED_POSITIONS_FOR_POOL_QUERY,
        {
            "account": account,
            "poolId": pool_id,
            "minRangeLength": min_range_length,
        },
    )
    return [Deposit.from_dict(d) for d in result.data.get("deposits") or []]


def get_all_v3_ticks(
    pool_address: str,
    tick_idx_lower_bound: int,
    tick_idx_upper_bound: int,
    skip: int,
    client: Optional[GraphClient] = None
) -> TicksResult:
    """One page of initialized ticks with tickIdx in [lower, upper]

    Args:
        pool_address: pool contract address (case-insensitive)
        tick_idx_lower_bound: lowest tick index, inclusive
        tick_idx_upper_bound: highest tick index, inclusive
        skip: number of ticks to skip (pages are TICKS_PAGE_SIZE long)

    Returns:
        TicksResult with the ticks and the client's error/loading state
    """
    client = client or get_info_client()
    result = client.query(
        queries.FETCH_ALL_V3_TICKS_QUERY,
        {
            "poolAddress": pool_address.lower(),
            "tickIdxLowerBound": tick_idx_lower_bound,
            "tickIdxUpperBound": tick_idx_upper_bound,
            "skip": skip,
        },
    )
    ticks = result.data.get("ticks") or []
    return TicksResult(
        data=[Tick.from_dict(t) for t in ticks],
        error=result.error,
        loading=result.loading,
    )


def get_all_v3_ticks_paginated(
    pool_address: str,
    tick_idx_lower_bound: int,
    tick_idx_upper_bound: int,
    client: Optional[GraphClient] = None
) -> TicksResult:
    """All initialized ticks with tickIdx in [lower, upper]

    Requests pages until one comes back shorter than TICKS_PAGE_SIZE. The
    first error reported by the client stops pagination and is returned with
    the ticks gathered so far.

    The subgraph caps `skip` at MAX_SKIP, so at most MAX_SKIP + TICKS_PAGE_SIZE
    ticks are reachable. A range with more ticks returns what was fetched
    together with a GraphClientError instead of requesting past the cap.
    """
    all_ticks: List[Tick] = []
    skip = 0

    while True:
        page = get_all_v3_ticks(
            pool_address, tick_idx_lower_bound, tick_idx_upper_bound, skip, client=client
        )
        all_ticks.extend(page.data)
        if page.error is not None:
            return TicksResult(data=all_ticks, error=page.error, loading=False)
        if len(page.data) < TICKS_PAGE_SIZE:
            break
        skip += TICKS_PAGE_SIZE
        if skip > MAX_SKIP:
            error = GraphClientError(
                f"Tick range holds at least {MAX_SKIP + TICKS_PAGE_SIZE} ticks; "
                "narrow the bounds to page through it"
            )
            return TicksResult(data=all_ticks, error=error, loading=False)

    return TicksResult(data=all_ticks, error=None, loading=False)
