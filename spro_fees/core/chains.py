"""
Chain identifiers known to the host platform.

Only a subset is served by the SPRO subgraphs, see
spro_fees.services.spro_subgraph.SUBGRAPH_PATHS.
"""

from enum import Enum

from spro_fees.core.errors import UnsupportedNetworkError


class Chain(str, Enum):
    ETHEREUM = "ethereum"
    ARBITRUM = "arbitrum"
    BSC = "bsc"
    BASE = "base"
    POLYGON = "polygon"
    OPTIMISM = "optimism"
    AVAX = "avax"

    @classmethod
    def parse(cls, value: str) -> "Chain":
        """Case-insensitive lookup, raises UnsupportedNetworkError for unknown ids"""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnsupportedNetworkError(value) from None


CHAIN_DISPLAY_NAMES = {
    Chain.ETHEREUM: "Ethereum",
    Chain.ARBITRUM: "Arbitrum",
    Chain.BSC: "BSC",
    Chain.BASE: "Base",
    Chain.POLYGON: "Polygon",
    Chain.OPTIMISM: "Optimism",
    Chain.AVAX: "Avalanche",
}


def chain_display_name(chain: Chain) -> str:
    return CHAIN_DISPLAY_NAMES.get(chain, str(chain.value).capitalize())
