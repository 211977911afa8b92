"""
asyncio query function tests
"""

import asyncio

from ..constants import MAX_SKIP, TICKS_PAGE_SIZE
from ..data import farming_async, queries
from ..data.graph_client import set_client
from . import responses
from .fakes import AsyncFakeClient


class TestAsyncQueries:

    def test_get_pool(self):
        client = AsyncFakeClient(responses.POOL_RESPONSE)
        pool = asyncio.run(farming_async.get_pool(responses.POOL_ADDRESS.upper(), client=client))
        assert pool.token0.symbol == "WMATIC"
        assert client.last_variables == {"poolId": responses.POOL_ADDRESS}

    def test_get_token_default_client(self):
        client = AsyncFakeClient(responses.TOKEN_RESPONSE)
        set_client("farming", client, asynchronous=True)
        token = asyncio.run(farming_async.get_token("0xabc"))
        assert token.name == "Algebra"
        assert client.last_query == queries.FETCH_TOKEN_QUERY

    def test_get_eternal_farmings(self):
        client = AsyncFakeClient(responses.ETERNAL_FARMINGS_RESPONSE)
        result = asyncio.run(farming_async.get_eternal_farmings(client=client))
        assert result[0].tier2_multiplier == 12500

    def test_get_eternal_farming(self):
        client = AsyncFakeClient(responses.ETERNAL_FARMING_RESPONSE)
        result = asyncio.run(farming_async.get_eternal_farming(responses.FARMING_ID, client=client))
        assert result.id == responses.FARMING_ID

    def test_get_eternal_farming_from_pool(self):
        client = AsyncFakeClient(responses.POOL_FARMINGS_RESPONSE)
        result = asyncio.run(
            farming_async.get_eternal_farming_from_pool(responses.POOL_ADDRESS, client=client)
        )
        assert result[0].is_detached is False

    def test_positions(self):
        client = AsyncFakeClient(
            responses.TRANSFERRED_POSITIONS_RESPONSE,
            responses.POSITIONS_ON_ETERNAL_FARMING_RESPONSE,
            responses.POSITIONS_FOR_POOL_RESPONSE,
        )

        async def run():
            return await asyncio.gather(
                farming_async.get_transferred_positions(responses.ACCOUNT, client=client),
                farming_async.get_positions_on_eternal_farming(responses.ACCOUNT, client=client),
                farming_async.get_transferred_positions_for_pool(
                    responses.ACCOUNT, responses.POOL_ADDRESS, 0, client=client
                ),
            )

        transferred, on_farming, for_pool = asyncio.run(run())
        assert len(transferred) == 2
        assert on_farming[0].eternal_farming == responses.FARMING_ID
        assert for_pool[0].tokens_locked_eternal == 5000000000000000000000

    def test_ticks_paginated(self):
        full_page = {"data": {"ticks": [responses.make_tick(i) for i in range(TICKS_PAGE_SIZE)]}}
        client = AsyncFakeClient(full_page, responses.TICKS_RESPONSE)
        result = asyncio.run(
            farming_async.get_all_v3_ticks_paginated(responses.POOL_ADDRESS, -5000, 5000, client=client)
        )
        assert len(result.data) == TICKS_PAGE_SIZE + 3
        assert [v["skip"] for _, v in client.calls] == [0, TICKS_PAGE_SIZE]

    def test_ticks_paginated_stops_at_skip_cap(self):
        full_page = {"data": {"ticks": [responses.make_tick(i) for i in range(TICKS_PAGE_SIZE)]}}
        client = AsyncFakeClient(full_page)
        result = asyncio.run(
            farming_async.get_all_v3_ticks_paginated(responses.POOL_ADDRESS, -887272, 887272, client=client)
        )
        assert client.calls[-1][1]["skip"] == MAX_SKIP
        assert result.error is not None
