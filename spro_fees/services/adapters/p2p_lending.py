"""
SmarDex P2P lending (SPRO) fees adapter.

Fees: interest paid by borrowers in each credit token, plus SDEX burnt at
proposal creation. Revenue: the SDEX burnt only.
"""

from typing import Any, Iterable, Optional

from spro_fees.core.chains import Chain
from spro_fees.services.spro_subgraph import SproSubgraphService, SUPPORTED_CHAINS

from .base import ChainAdapter, FetchOptions, FetchResult, SimpleAdapter

SDEX_ADDRESS = "0x5de8ab7e27f6e7a1fff3e5b337584aa43961beef"

METHODOLOGY = {
    "Fees": "Protocol fees are given by interests paid in credit Tokens by Borrowers to Lenders, cumulated with the amount of SDEX burned at Proposal creation.",
    "Revenue": "Protocol revenue is the total amount of SDEX burned at each new Proposal creation.",
}

START_DATE = "2025-05-22"
VERSION = 1


def make_fetch(chain: Chain, service: SproSubgraphService):
    """Build the fetch function for one chain."""

    async def fetch(_timestamp: int, _chain_blocks: Optional[Any], options: FetchOptions) -> FetchResult:
        metrics = await service.get_metrics(options.start_of_day, chain)

        daily_fees = options.create_balances()
        daily_revenue = options.create_balances()

        daily_fees.add_token(SDEX_ADDRESS, metrics.total_sdex_burnt)
        for token in metrics.token_metrics:
            daily_fees.add_token(token.token_address, token.interest_paid)

        # Interest goes to lenders, only the burn is protocol revenue
        daily_revenue.add_token(SDEX_ADDRESS, metrics.total_sdex_burnt)

        return FetchResult(daily_fees=daily_fees, daily_revenue=daily_revenue)

    return fetch


def build_adapter(service: SproSubgraphService, chains: Iterable[Chain] = SUPPORTED_CHAINS) -> SimpleAdapter:
    return SimpleAdapter(
        adapter={
            chain: ChainAdapter(
                fetch=make_fetch(chain, service),
                start=START_DATE,
                meta={"methodology": METHODOLOGY},
            )
            for chain in chains
        },
        version=VERSION,
    )
