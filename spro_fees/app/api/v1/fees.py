from fastapi import APIRouter, HTTPException, Depends, Query
from typing import Any
import logging

from spro_fees.core.chains import Chain, chain_display_name
from spro_fees.core.config import settings
from spro_fees.core.errors import ErrorCode, ErrorResponse, UnsupportedNetworkError
from spro_fees.services.adapters import AdapterRegistry, FetchOptions, P2P_LENDING, SimpleAdapter

logger = logging.getLogger(__name__)
router = APIRouter()

SECONDS_PER_DAY = 86400


def error_detail(code: ErrorCode, message: str, details: str = None) -> dict:
    """HTTPException detail, technical details only outside production"""
    return ErrorResponse(
        error_code=code,
        message=message,
        details=None if settings.is_production else details
    ).model_dump(mode="json")


def get_p2p_lending_adapter() -> SimpleAdapter:
    """Dependency for the registered P2P lending adapter"""
    return AdapterRegistry.get_adapter(P2P_LENDING)


def start_of_day(timestamp: int) -> int:
    """UTC midnight at or before timestamp"""
    return timestamp - timestamp % SECONDS_PER_DAY


@router.get("/fees/meta")
async def get_fees_meta(
    adapter: SimpleAdapter = Depends(get_p2p_lending_adapter)
) -> dict[str, Any]:
    """Methodology and start date per chain"""
    return {
        "status": "success",
        "data": {
            "version": adapter.version,
            "chains": {
                chain.value: {
                    "name": chain_display_name(chain),
                    "start": chain_adapter.start,
                    "meta": chain_adapter.meta,
                }
                for chain, chain_adapter in adapter.adapter.items()
            },
        },
    }


@router.get("/fees/{chain}")
async def get_daily_fees(
    chain: str,
    timestamp: int = Query(..., ge=0, description="Unix seconds within the requested day"),
    adapter: SimpleAdapter = Depends(get_p2p_lending_adapter)
) -> dict[str, Any]:
    """Daily fees and revenue for a chain, per token"""
    try:
        parsed = Chain.parse(chain)
        chain_adapter = adapter.get_chain_adapter(parsed)
        if chain_adapter is None:
            raise UnsupportedNetworkError(chain)

        day = start_of_day(timestamp)
        result = await chain_adapter.fetch(timestamp, None, FetchOptions(start_of_day=day))
        return {
            "status": "success",
            "data": {
                "chain": parsed.value,
                "startOfDay": day,
                **result.to_dict(),
            },
        }
    except UnsupportedNetworkError as e:
        raise HTTPException(status_code=400, detail=error_detail(e.code, e.user_msg, e.details))
    except Exception as e:
        # Query failures are already zeroed by the adapter, anything here is a bug
        logger.exception(f"Unexpected error fetching fees for {chain} at {timestamp}")
        raise HTTPException(
            status_code=500,
            detail=error_detail(ErrorCode.UNKNOWN, "An unexpected error occurred.", str(e))
        )
