"""
Subgraph constants

- TICKS_PAGE_SIZE: `first:` bound of the ticks query
- MIN_TICK / MAX_TICK: full tick range, used as default bounds
- ERROR_POLICIES: how a client treats GraphQL errors in a response
"""

from typing import Tuple

# The Graph caps `first` at 1000 per request
TICKS_PAGE_SIZE: int = 1000

# The Graph rejects `skip` above 5000
MAX_SKIP: int = 5000

# Tick range
MIN_TICK: int = -887272
MAX_TICK: int = 887272

# "none": raise on any GraphQL error, "all": return partial data with the error
ERROR_POLICIES: Tuple[str, ...] = ("none", "all")

DEFAULT_TIMEOUT: int = 30
DEFAULT_MAX_RETRIES: int = 3
DEFAULT_RETRY_DELAY: float = 1.0
