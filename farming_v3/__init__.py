"""
Farming V3 subgraph queries

Typed query functions over the info and farming subgraphs of a
concentrated-liquidity DEX: pools, tokens, eternal farmings, deposits and ticks.
"""

__version__ = "0.1.0"

from .constants import TICKS_PAGE_SIZE, MIN_TICK, MAX_TICK
