"""
Adapter types shared with the host platform.
Every fee adapter exposes a per-chain {fetch, start, meta} entry.
"""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Optional

from spro_fees.core.balances import Balances
from spro_fees.core.chains import Chain


@dataclass
class FetchOptions:
    """Per-call options handed to a fetch function by the host"""
    start_of_day: int                                   # Unix seconds, UTC midnight
    create_balances: Callable[[], Balances] = Balances  # Balance map factory


@dataclass
class FetchResult:
    """Balance maps for one day on one chain"""
    daily_fees: Balances
    daily_revenue: Balances

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {
            "dailyFees": self.daily_fees.get_balances(),
            "dailyRevenue": self.daily_revenue.get_balances(),
        }


# fetch(timestamp, chain_blocks, options)
FetchFunction = Callable[[int, Optional[Any], FetchOptions], Awaitable[FetchResult]]


@dataclass
class ChainAdapter:
    fetch: FetchFunction
    start: str                                  # YYYY-MM-DD, first day with data
    meta: Dict[str, Any] = field(default_factory=dict)


@dataclass
class SimpleAdapter:
    adapter: Dict[Chain, ChainAdapter]
    version: int = 1

    def get_chain_adapter(self, chain: Chain) -> Optional[ChainAdapter]:
        return self.adapter.get(chain)
