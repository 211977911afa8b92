"""
GraphQL query definitions

Documents for the info subgraph (pools, ticks) and the farming subgraph
(tokens, eternal farmings, deposits).
"""

from ..constants import TICKS_PAGE_SIZE

# Token (farming subgraph)
FETCH_TOKEN_QUERY = """
query fetchToken($tokenId: ID) {
  token(id: $tokenId) {
    id
    symbol
    name
    decimals
  }
}
"""

# Pool state (info subgraph)
FETCH_POOL_QUERY = """
query fetchPool($poolId: ID) {
  pool(id: $poolId) {
    id
    fee
    token0 {
      id
      decimals
      symbol
    }
    token1 {
      id
      decimals
      symbol
    }
    sqrtPrice
    liquidity
    tick
    feesUSD
    untrackedFeesUSD
  }
}
"""

# All farmings that are still attached to their pool
FETCH_ETERNAL_FARMINGS_QUERY = """
query fetchEternalFarmings {
  eternalFarmings(where: { isDetached: false }) {
    id
    rewardToken
    bonusRewardToken
    pool
    startTime
    endTime
    reward
    bonusReward
    rewardRate
    bonusRewardRate
    minRangeLength
    tokenAmountForTier1
    tokenAmountForTier2
    tokenAmountForTier3
    tier1Multiplier
    tier2Multiplier
    tier3Multiplier
    multiplierToken
  }
}
"""

FETCH_ETERNAL_FARMING_QUERY = """
query fetchEternalFarm($farmingId: ID) {
  eternalFarming(id: $farmingId) {
    id
    rewardToken
    bonusRewardToken
    pool
    startTime
    endTime
    reward
    bonusReward
    rewardRate
    bonusRewardRate
    isDetached
    tier1Multiplier
    tier2Multiplier
    tier3Multiplier
    tokenAmountForTier1
    tokenAmountForTier2
    tokenAmountForTier3
    multiplierToken
  }
}
"""

# Positions of an owner sitting on the farming center
FETCH_TRANSFERRED_POSITIONS_QUERY = """
query transferedPositions($account: Bytes) {
  deposits(
    orderBy: id
    orderDirection: desc
    where: { owner: $account, onFarmingCenter: true }
  ) {
    id
    owner
    pool
    L2tokenId
    limitFarming
    eternalFarming
    onFarmingCenter
    rangeLength
  }
}
"""

FETCH_POSITIONS_ON_ETERNAL_FARMING_QUERY = """
query positionsOnEternalFarming($account: Bytes) {
  deposits(
    orderBy: id
    orderDirection: desc
    where: {
      owner: $account
      onFarmingCenter: true
      eternalFarming_not: null
    }
  ) {
    id
    owner
    pool
    L2tokenId
    eternalFarming
    onFarmingCenter
    enteredInEternalFarming
  }
}
"""

# Positions of an owner in one pool that still hold liquidity
FETCH_TRANSFERRED_POSITIONS_FOR_POOL_QUERY = """
query transferedPositionsForPool($account: Bytes, $poolId: Bytes) {
  deposits(
    orderBy: id
    orderDirection: desc
    where: { owner: $account, pool: $poolId, liquidity_not: "0" }
  ) {
    id
    owner
    pool
    L2tokenId
    limitFarming
    eternalFarming
    onFarmingCenter
    enteredInEternalFarming
    tokensLockedLimit
    tokensLockedEternal
    tierLimit
    tierEternal
  }
}
"""

# One page of initialized ticks inside [lower, upper] (info subgraph)
FETCH_ALL_V3_TICKS_QUERY = """
query surroundingTicks(
  $poolAddress: String!
  $tickIdxLowerBound: BigInt!
  $tickIdxUpperBound: BigInt!
  $skip: Int!
) {
  ticks(
    subgraphError: allow
    first: %d
    skip: $skip
    where: {
      poolAddress: $poolAddress
      tickIdx_lte: $tickIdxUpperBound
      tickIdx_gte: $tickIdxLowerBound
    }
  ) {
    tickIdx
    liquidityGross
    liquidityNet
    price0
    price1
  }
}
""" % TICKS_PAGE_SIZE

# Attached farmings of a pool that are still paying rewards
FETCH_ETERNAL_FARMING_FROM_POOL_QUERY = """
query eternalFarmingFromPools($poolAddress: String!) {
  eternalFarmings(
    where: { pool: $poolAddress, isDetached: false, rewardRate_gt: 0 }
  ) {
    id
    rewardToken
    bonusRewardToken
    pool
    startTime
    endTime
    reward
    bonusReward
    rewardRate
    bonusRewardRate
    isDetached
  }
}
"""
