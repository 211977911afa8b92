"""
Query document tests

Checks the declared variables and filters of each document.
"""

import pytest

from ..constants import TICKS_PAGE_SIZE
from ..data import queries


@pytest.mark.parametrize("document, header", [
    (queries.FETCH_TOKEN_QUERY, "query fetchToken($tokenId: ID)"),
    (queries.FETCH_POOL_QUERY, "query fetchPool($poolId: ID)"),
    (queries.FETCH_ETERNAL_FARMINGS_QUERY, "query fetchEternalFarmings {"),
    (queries.FETCH_ETERNAL_FARMING_QUERY, "query fetchEternalFarm($farmingId: ID)"),
    (queries.FETCH_TRANSFERRED_POSITIONS_QUERY, "query transferedPositions($account: Bytes)"),
    (queries.FETCH_POSITIONS_ON_ETERNAL_FARMING_QUERY,
     "query positionsOnEternalFarming($account: Bytes)"),
    (queries.FETCH_TRANSFERRED_POSITIONS_FOR_POOL_QUERY,
     "query transferedPositionsForPool($account: Bytes, $poolId: Bytes)"),
    (queries.FETCH_ETERNAL_FARMING_FROM_POOL_QUERY,
     "query eternalFarmingFromPools($poolAddress: String!)"),
])
def test_operation_header(document, header):
    assert header in document


def test_ticks_query_page_size():
    assert f"first: {TICKS_PAGE_SIZE}" in queries.FETCH_ALL_V3_TICKS_QUERY
    assert "%d" not in queries.FETCH_ALL_V3_TICKS_QUERY
    assert "subgraphError: allow" in queries.FETCH_ALL_V3_TICKS_QUERY


def test_ticks_query_bounds_are_inclusive():
    assert "tickIdx_lte: $tickIdxUpperBound" in queries.FETCH_ALL_V3_TICKS_QUERY
    assert "tickIdx_gte: $tickIdxLowerBound" in queries.FETCH_ALL_V3_TICKS_QUERY


def test_farmings_exclude_detached():
    assert "isDetached: false" in queries.FETCH_ETERNAL_FARMINGS_QUERY
    assert "isDetached: false" in queries.FETCH_ETERNAL_FARMING_FROM_POOL_QUERY
    assert "rewardRate_gt: 0" in queries.FETCH_ETERNAL_FARMING_FROM_POOL_QUERY


def test_deposits_newest_first():
    for document in (
        queries.FETCH_TRANSFERRED_POSITIONS_QUERY,
        queries.FETCH_POSITIONS_ON_ETERNAL_FARMING_QUERY,
        queries.FETCH_TRANSFERRED_POSITIONS_FOR_POOL_QUERY,
    ):
        assert "orderBy: id" in document
        assert "orderDirection: desc" in document


def test_positions_for_pool_skip_empty_positions():
    assert 'liquidity_not: "0"' in queries.FETCH_TRANSFERRED_POSITIONS_FOR_POOL_QUERY
