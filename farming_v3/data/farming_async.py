"""
Farming V3 query functions for asyncio

Coroutine versions of the functions in farming.py, running on
AsyncGraphClient. Documents, variables and result types are the same.
"""

from typing import List, Optional

from ..constants import MAX_SKIP, TICKS_PAGE_SIZE
from . import queries
from .graph_client import AsyncGraphClient, GraphClientError, get_client
from .types import Deposit, EternalFarming, Pool, Tick, TicksResult, Token


def _info(client: Optional[AsyncGraphClient]) -> AsyncGraphClient:
    return client or get_client("info", asynchronous=True)


def _farming(client: Optional[AsyncGraphClient]) -> AsyncGraphClient:
    return client or get_client("farming", asynchronous=True)


async def get_pool(pool_address: Optional[str],
                   client: Optional[AsyncGraphClient] = None) -> Optional[Pool]:
    result = await _info(client).query(
        queries.FETCH_POOL_QUERY,
        {"poolId": pool_address.lower() if pool_address else pool_address},
    )
    pool = result.data.get("pool")
    return Pool.from_dict(pool) if pool else None


async def get_token(token_address: Optional[str],
                    client: Optional[AsyncGraphClient] = None) -> Optional[Token]:
    result = await _farming(client).query(queries.FETCH_TOKEN_QUERY, {"tokenId": token_address})
    token = result.data.get("token")
    return Token.from_dict(token) if token else None


async def get_eternal_farmings(client: Optional[AsyncGraphClient] = None) -> List[EternalFarming]:
    result = await _farming(client).query(queries.FETCH_ETERNAL_FARMINGS_QUERY)
    return [EternalFarming.from_dict(f) for f in result.data.get("eternalFarmings") or []]


async def get_eternal_farming(farming_id: Optional[str],
                              client: Optional[AsyncGraphClient] = None) -> Optional[EternalFarming]:
    result = await _farming(client).query(
        queries.FETCH_ETERNAL_FARMING_QUERY, {"farmingId": farming_id}
    )
    farming = result.data.get("eternalFarming")
    return EternalFarming.from_dict(farming) if farming else None


async def get_eternal_farming_from_pool(pool_address: Optional[str],
                                        client: Optional[AsyncGraphClient] = None) -> List[EternalFarming]:
    result = await _farming(client).query(
        queries.FETCH_ETERNAL_FARMING_FROM_POOL_QUERY, {"poolAddress": pool_address}
    )
    return [EternalFarming.from_dict(f) for f in result.data.get("eternalFarmings") or []]


async def get_transferred_positions(account: Optional[str],
                                    client: Optional[AsyncGraphClient] = None) -> List[Deposit]:
    result = await _farming(client).query(
        queries.FETCH_TRANSFERRED_POSITIONS_QUERY, {"account": account}
    )
    return [Deposit.from_dict(d) for d in result.data.get("deposits") or []]


async def get_positions_on_eternal_farming(account: Optional[str],
                                           client: Optional[AsyncGraphClient] = None) -> List[Deposit]:
    result = await _farming(client).query(
        queries.FETCH_POSITIONS_ON_ETERNAL_FARMING_QUERY, {"account": account}
    )
    return [Deposit.from_dict(d) for d in result.data.get("deposits") or []]


async def get_transferred_positions_for_pool(account: str, pool_id: str, min_range_length: int,
                                             client: Optional[AsyncGraphClient] = None) -> List[Deposit]:
    result = await _farming(client).query(
        queries.FETCH_TRANSFERRED_POSITIONS_FOR_POOL_QUERY,
        {
            "account": account,
            "poolId": pool_id,
            "minRangeLength": min_range_length,
        },
    )
    return [Deposit.from_dict(d) for d in result.data.get("deposits") or []]


async def get_all_v3_ticks(pool_address: str, tick_idx_lower_bound: int,
                           tick_idx_upper_bound: int, skip: int,
                           client: Optional[AsyncGraphClient] = None) -> TicksResult:
    result = await _info(client).query(
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


async def get_all_v3_ticks_paginated(pool_address: str, tick_idx_lower_bound: int,
                                     tick_idx_upper_bound: int,
                                     client: Optional[AsyncGraphClient] = None) -> TicksResult:
    """All initialized ticks in [lower, upper], see farming.get_all_v3_ticks_paginated

    Stops with a GraphClientError once `skip` would pass MAX_SKIP.
    """
    all_ticks: List[Tick] = []
    skip = 0

    while True:
        page = await get_all_v3_ticks(
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
