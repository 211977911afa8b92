"""
Data layer for Farming V3

Subgraph clients, query documents, data types and query functions.
"""

from .types import Token, Pool, EternalFarming, Deposit, Tick, TicksResult
from .graph_client import (
    GraphClient,
    AsyncGraphClient,
    GraphClientConfig,
    GraphClientError,
    QueryResult,
    get_client,
    set_client,
    reset_clients,
)
from .farming import (
    get_pool,
    get_token,
    get_eternal_farmings,
    get_eternal_farming,
    get_eternal_farming_from_pool,
    get_transferred_positions,
    get_positions_on_eternal_farming,
    get_transferred_positions_for_pool,
    get_all_v3_ticks,
    get_all_v3_ticks_paginated,
)
