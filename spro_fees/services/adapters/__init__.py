"""
Fee adapter registry for managing and accessing adapters.
"""

from typing import Dict, List, Optional

from spro_fees.core.config import settings
from spro_fees.services.spro_subgraph import SproSubgraphService, SubgraphOptions

from .base import ChainAdapter, FetchOptions, FetchResult, SimpleAdapter


class AdapterRegistry:
    """Registry for fee adapters"""

    _adapters: Dict[str, SimpleAdapter] = {}

    @classmethod
    def register(cls, name: str, adapter: SimpleAdapter) -> None:
        """Register an adapter"""
        cls._adapters[name] = adapter

    @classmethod
    def get_adapter(cls, name: str) -> Optional[SimpleAdapter]:
        """Get adapter by name"""
        return cls._adapters.get(name)

    @classmethod
    def list_adapters(cls) -> List[str]:
        """List all registered adapter names"""
        return list(cls._adapters.keys())


from .p2p_lending import build_adapter, make_fetch, METHODOLOGY, SDEX_ADDRESS, START_DATE

P2P_LENDING = "p2p-lending"

# Shared service for the registered adapter, the client is created on first query
spro_service = SproSubgraphService(
    SubgraphOptions(
        api_key=settings.smardex_subgraph_api_key,
        host=settings.subgraph_host,
        timeout=settings.subgraph_timeout
    )
)

AdapterRegistry.register(P2P_LENDING, build_adapter(spro_service))

__all__ = [
    'AdapterRegistry',
    'ChainAdapter',
    'FetchOptions',
    'FetchResult',
    'SimpleAdapter',
    'build_adapter',
    'make_fetch',
    'METHODOLOGY',
    'SDEX_ADDRESS',
    'START_DATE',
    'P2P_LENDING',
    'spro_service',
]
