"""
SmarDex SPRO (P2P lending) Subgraph Service

Queries the per-network SPRO subgraphs for daily fee metrics:
- dailyGlobalMetrics: SDEX burnt at proposal creation
- dailyTokenMetrics: interest paid per credit token

Any query failure degrades the whole day to zero fees rather than
reporting a partial number.
"""

import asyncio
import httpx
from dataclasses import dataclass, field
from typing import Any, List, Optional, Union
from pydantic import BaseModel, Field
import logging

from spro_fees.core.chains import Chain
from spro_fees.core.errors import (
    MalformedRecordIdError, NetworkError, SubgraphQueryError, UnsupportedNetworkError
)

logger = logging.getLogger(__name__)

SUBGRAPH_HOST = "https://subgraph.smardex.io"

# One SPRO deployment per network, same host
SUBGRAPH_PATHS = {
    Chain.ETHEREUM: "ethereum/spro",
    Chain.ARBITRUM: "arbitrum/spro",
    Chain.BSC: "bsc/spro",
    Chain.BASE: "base/spro",
    Chain.POLYGON: "polygon/spro",
}

SUBGRAPH_URLS = {chain: f"{SUBGRAPH_HOST}/{path}" for chain, path in SUBGRAPH_PATHS.items()}

SUPPORTED_CHAINS = tuple(SUBGRAPH_PATHS)

# Token metric ids look like <day>-<tokenAddress>
RECORD_ID_DELIMITER = "-"


def get_subgraph_url(chain: Union[Chain, str], host: str = SUBGRAPH_HOST) -> str:
    """Resolve the SPRO subgraph URL for a network, fails for anything unsupported."""
    chain = Chain.parse(chain)
    path = SUBGRAPH_PATHS.get(chain)
    if path is None:
        raise UnsupportedNetworkError(chain.value)
    return f"{host.rstrip('/')}/{path}"


def parse_token_address(record_id: str, strict: bool = False) -> str:
    """
    Extract the token address from a dailyTokenMetrics id.

    Splits on the first delimiter and drops the day prefix. Without a
    delimiter the best-effort mode returns "" and strict mode raises
    MalformedRecordIdError.
    """
    _, sep, address = record_id.partition(RECORD_ID_DELIMITER)
    if not sep and strict:
        raise MalformedRecordIdError(record_id)
    return address


@dataclass
class TokenInterest:
    token_address: str
    interest_paid: float


@dataclass
class SubgraphMetrics:
    """Normalized metrics for one day on one network."""
    total_sdex_burnt: float = 0.0
    token_metrics: List[TokenInterest] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "SubgraphMetrics":
        return cls(total_sdex_burnt=0.0, token_metrics=[])


class SubgraphOptions(BaseModel):
    """Options accepted by SproSubgraphService at construction time."""
    api_key: str = Field(default="", alias="apiKey")
    host: str = SUBGRAPH_HOST
    timeout: float = 30.0
    strict_record_ids: bool = False

    model_config = {"populate_by_name": True}


class SproSubgraphService:
    """Service for querying the SmarDex SPRO subgraphs."""

    def __init__(
        self,
        options: Optional[SubgraphOptions] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.options = options or SubgraphOptions()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def headers(self) -> dict:
        return {
            "origin": self.options.host,
            "referer": self.options.host,
            "x-api-key": self.options.api_key or "",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers=self.headers,
                timeout=self.options.timeout,
                transport=self._transport
            )
        return self._client

    async def close(self):
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    def resolve_endpoint(self, chain: Union[Chain, str]) -> str:
        return get_subgraph_url(chain, self.options.host)

    async def _query(self, url: str, query: str) -> dict:
        """Execute a GraphQL query, raising on transport, HTTP or GraphQL errors."""
        client = await self._get_client()
        try:
            response = await client.post(url, json={"query": query})
        except httpx.HTTPError as e:
            raise NetworkError(url, f"{type(e).__name__}: {e}") from e
        if response.status_code != 200:
            raise SubgraphQueryError(url, f"HTTP {response.status_code}")

        payload = response.json()
        if payload.get("errors"):
            raise SubgraphQueryError(url, str(payload["errors"]))

        data = payload.get("data")
        if not isinstance(data, dict):
            raise SubgraphQueryError(url, "response has no data object")
        return data

    async def _fetch_global_metrics(self, url: str, timestamp: int) -> Optional[dict]:
        query = f"""{{
          dailyGlobalMetrics_collection (where: {{
            id: "{timestamp}"
          }}) {{
            totalSdexBurnt
          }}
        }}"""
        data = await self._query(url, query)
        rows = data.get("dailyGlobalMetrics_collection") or []
        return rows[0] if rows else None

    async def _fetch_token_metrics(self, url: str, timestamp: int) -> List[dict]:
        query = f"""{{
          dailyTokenMetrics_collection (where: {{
            day: "{timestamp}"
          }}) {{
            id
            totalInterestPaid
          }}
        }}"""
        data = await self._query(url, query)
        return data.get("dailyTokenMetrics_collection") or []

    async def get_daily_global_metrics(self, timestamp: int, chain: Union[Chain, str]) -> Optional[dict]:
        """Global metrics row for the day, or None when the subgraph has none."""
        return await self._fetch_global_metrics(self.resolve_endpoint(chain), timestamp)

    async def get_daily_token_metrics(self, timestamp: int, chain: Union[Chain, str]) -> List[dict]:
        """All per-token metric rows for the day."""
        return await self._fetch_token_metrics(self.resolve_endpoint(chain), timestamp)

    def _to_token_interest(self, row: dict) -> TokenInterest:
        return TokenInterest(
            token_address=parse_token_address(row["id"], strict=self.options.strict_record_ids),
            interest_paid=float(row["totalInterestPaid"]),
        )

    async def get_metrics(self, timestamp: int, chain: Union[Chain, str]) -> SubgraphMetrics:
        """
        Fetch SDEX burnt and per-token interest for a day.

        An unsupported network raises UnsupportedNetworkError. Any failure in
        either query zeroes the whole result, both queries share one guard.
        """
        url = self.resolve_endpoint(chain)
        chain_id = Chain.parse(chain).value

        try:
            results: List[Any] = await asyncio.gather(
                self._fetch_global_metrics(url, timestamp),
                self._fetch_token_metrics(url, timestamp),
                return_exceptions=True
            )
            for result in results:
                if isinstance(result, BaseException):
                    raise result
            global_row, token_rows = results

            total_burnt = (global_row or {}).get("totalSdexBurnt") or 0
            return SubgraphMetrics(
                total_sdex_burnt=float(total_burnt),
                token_metrics=[self._to_token_interest(row) for row in token_rows],
            )
        except Exception as e:
            logger.warning(f"SPRO subgraph metrics unavailable for {chain_id} at {timestamp}, reporting zero: {e}")
            return SubgraphMetrics.empty()
