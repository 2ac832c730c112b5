import pytest
import pytest_asyncio
from spro_fees.tests.fakes import DAY, FakeSubgraph, make_service


@pytest.fixture
def fake_subgraph():
    return FakeSubgraph(
        global_rows=[{"totalSdexBurnt": "1000"}],
        token_rows=[
            {"id": f"{DAY}-0xABCDEF", "totalInterestPaid": "12.5"},
            {"id": f"{DAY}-0x123456", "totalInterestPaid": "3"},
        ],
    )


@pytest_asyncio.fixture
async def spro_service(fake_subgraph):
    """Service backed by the fake subgraph"""
    service = make_service(fake_subgraph, api_key="test-key")
    yield service
    await service.close()
