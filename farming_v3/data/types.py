"""
Farming V3 data types

Subgraph entities returned by the query functions, as Python dataclasses.
BigInt fields are converted to int for on-chain precision, BigDecimal fields
to float. Fields that only some query documents select default to None.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional


def _int_or_none(value: Any) -> Optional[int]:
    return int(value) if value is not None else None


def _float_or_none(value: Any) -> Optional[float]:
    return float(value) if value is not None else None


@dataclass
class Token:
    """ERC20 token"""
    id: str  # contract address
    symbol: str
    decimals: int
    name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Token":
        return cls(
            id=data["id"],
            symbol=data["symbol"],
            decimals=int(data["decimals"]),
            name=data.get("name"),
        )


@dataclass
class Pool:
    """Pool state from the info subgraph

    - fee: current dynamic fee
    - sqrt_price: sqrtPriceX96
    - tick: current tick, None while the pool is not initialized
    - fees_usd / untracked_fees_usd: cumulative fees in USD
    """
    id: str  # pool contract address
    fee: int
    token0: Token
    token1: Token
    sqrt_price: int
    liquidity: int
    tick: Optional[int] = None
    fees_usd: Optional[float] = None
    untracked_fees_usd: Optional[float] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Pool":
        return cls(
            id=data["id"],
            fee=int(data["fee"]),
            token0=Token.from_dict(data["token0"]),
            token1=Token.from_dict(data["token1"]),
            sqrt_price=int(data["sqrtPrice"]),
            liquidity=int(data["liquidity"]),
            tick=_int_or_none(data.get("tick")),
            fees_usd=_float_or_none(data.get("feesUSD")),
            untracked_fees_usd=_float_or_none(data.get("untrackedFeesUSD")),
        )


@dataclass
class EternalFarming:
    """Open-ended incentive program attached to a pool

    Tier fields describe the boost a deposit gets for locking
    `multiplier_token`: locking at least `token_amount_for_tierN` applies
    `tierN_multiplier` to its rewards.
    """
    id: str
    reward_token: str
    bonus_reward_token: str
    pool: str
    start_time: int
    end_time: int
    reward: int
    bonus_reward: int
    reward_rate: int
    bonus_reward_rate: int
    is_detached: Optional[bool] = None
    min_range_length: Optional[int] = None
    token_amount_for_tier1: Optional[int] = None
    token_amount_for_tier2: Optional[int] = None
    token_amount_for_tier3: Optional[int] = None
    tier1_multiplier: Optional[int] = None
    tier2_multiplier: Optional[int] = None
    tier3_multiplier: Optional[int] = None
    multiplier_token: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "EternalFarming":
        return cls(
            id=data["id"],
            reward_token=data["rewardToken"],
            bonus_reward_token=data["bonusRewardToken"],
            pool=data["pool"],
            start_time=int(data["startTime"]),
            end_time=int(data["endTime"]),
            reward=int(data["reward"]),
            bonus_reward=int(data["bonusReward"]),
            reward_rate=int(data["rewardRate"]),
            bonus_reward_rate=int(data["bonusRewardRate"]),
            is_detached=data.get("isDetached"),
            min_range_length=_int_or_none(data.get("minRangeLength")),
            token_amount_for_tier1=_int_or_none(data.get("tokenAmountForTier1")),
            token_amount_for_tier2=_int_or_none(data.get("tokenAmountForTier2")),
            token_amount_for_tier3=_int_or_none(data.get("tokenAmountForTier3")),
            tier1_multiplier=_int_or_none(data.get("tier1Multiplier")),
            tier2_multiplier=_int_or_none(data.get("tier2Multiplier")),
            tier3_multiplier=_int_or_none(data.get("tier3Multiplier")),
            multiplier_token=data.get("multiplierToken"),
        )


@dataclass
class Deposit:
    """Liquidity position transferred into the farming center

    `limit_farming` / `eternal_farming` hold the id of the farming the
    position is entered in, or None.
    """
    id: str  # position NFT id
    owner: str
    pool: str
    l2_token_id: int
    on_farming_center: bool
    limit_farming: Optional[str] = None
    eternal_farming: Optional[str] = None
    range_length: Optional[int] = None
    entered_in_eternal_farming: Optional[int] = None
    tokens_locked_limit: Optional[int] = None
    tokens_locked_eternal: Optional[int] = None
    tier_limit: Optional[int] = None
    tier_eternal: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Deposit":
        return cls(
            id=data["id"],
            owner=data["owner"],
            pool=data["pool"],
            l2_token_id=int(data["L2tokenId"]),
            on_farming_center=bool(data["onFarmingCenter"]),
            limit_farming=data.get("limitFarming"),
            eternal_farming=data.get("eternalFarming"),
            range_length=_int_or_none(data.get("rangeLength")),
            entered_in_eternal_farming=_int_or_none(data.get("enteredInEternalFarming")),
            tokens_locked_limit=_int_or_none(data.get("tokensLockedLimit")),
            tokens_locked_eternal=_int_or_none(data.get("tokensLockedEternal")),
            tier_limit=_int_or_none(data.get("tierLimit")),
            tier_eternal=_int_or_none(data.get("tierEternal")),
        )


@dataclass
class Tick:
    """Initialized tick of a pool

    - liquidity_net: liquidity change when the price crosses the tick upwards
    - price0 / price1: token prices at the tick
    """
    tick_idx: int
    liquidity_gross: int
    liquidity_net: int
    price0: float
    price1: float

    @classmethod
    def from_dict(cls, data: dict) -> "Tick":
        return cls(
            tick_idx=int(data["tickIdx"]),
            liquidity_gross=int(data.get("liquidityGross", 0)),
            liquidity_net=int(data.get("liquidityNet", 0)),
            price0=float(data.get("price0", 0)),
            price1=float(data.get("price1", 0)),
        )


@dataclass
class TicksResult:
    """Ticks together with the client's error and loading state"""
    data: List[Tick] = field(default_factory=list)
    error: Optional[Exception] = None
    loading: bool = False
