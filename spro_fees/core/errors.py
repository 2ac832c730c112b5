from enum import Enum
from pydantic import BaseModel
from typing import Optional

class ErrorCode(str, Enum):
    UNSUPPORTED_NETWORK = "UNSUPPORTED_NETWORK"
    MALFORMED_RECORD_ID = "MALFORMED_RECORD_ID"
    SUBGRAPH_ERROR = "SUBGRAPH_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    UNKNOWN = "UNKNOWN"

class ErrorResponse(BaseModel):
    error_code: ErrorCode
    message: str  # User-friendly message
    details: Optional[str] = None  # Technical details (only in dev mode)

# Custom Exception Classes
class FeesAdapterError(Exception):
    def __init__(self, code: ErrorCode, user_msg: str, details: str = None):
        self.code = code
        self.user_msg = user_msg
        self.details = details
        super().__init__(user_msg)

class UnsupportedNetworkError(FeesAdapterError):
    def __init__(self, network: str):
        super().__init__(
            ErrorCode.UNSUPPORTED_NETWORK,
            f"Unsupported chain: {network}",
            f"No SPRO subgraph is deployed for network {network!r}"
        )
        self.network = network

class MalformedRecordIdError(FeesAdapterError):
    def __init__(self, record_id: str):
        super().__init__(
            ErrorCode.MALFORMED_RECORD_ID,
            "Subgraph returned a malformed token metric id.",
            f"Record id {record_id!r} does not match <day>-<tokenAddress>"
        )
        self.record_id = record_id

class SubgraphQueryError(FeesAdapterError):
    def __init__(self, url: str, details: str):
        super().__init__(
            ErrorCode.SUBGRAPH_ERROR,
            "Subgraph query failed.",
            f"{url}: {details}"
        )
        self.url = url

class NetworkError(FeesAdapterError):
    def __init__(self, url: str, details: str):
        super().__init__(
            ErrorCode.NETWORK_ERROR,
            "Subgraph is unreachable.",
            f"{url}: {details}"
        )
        self.url = url
