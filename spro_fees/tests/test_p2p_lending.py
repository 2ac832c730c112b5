import pytest
from spro_fees.core.balances import Balances
from spro_fees.core.chains import Chain
from spro_fees.core.errors import UnsupportedNetworkError
from spro_fees.services.adapters import (
    AdapterRegistry, FetchOptions, METHODOLOGY, P2P_LENDING, SDEX_ADDRESS, START_DATE,
    build_adapter, make_fetch
)
from spro_fees.services.spro_subgraph import SUPPORTED_CHAINS
from spro_fees.tests.fakes import DAY, FakeSubgraph, make_service


@pytest.mark.asyncio
async def test_fees_include_burn_and_interest(spro_service):
    fetch = make_fetch(Chain.ETHEREUM, spro_service)
    result = await fetch(DAY + 3600, None, FetchOptions(start_of_day=DAY))

    assert result.daily_fees.get_balances() == {
        SDEX_ADDRESS: 1000.0,
        "0xABCDEF": 12.5,
        "0x123456": 3.0,
    }


@pytest.mark.asyncio
async def test_revenue_is_burn_only(spro_service):
    fetch = make_fetch(Chain.ETHEREUM, spro_service)
    result = await fetch(DAY, None, FetchOptions(start_of_day=DAY))

    assert result.daily_revenue.get_balances() == {SDEX_ADDRESS: 1000.0}
    assert len(result.daily_revenue) == 1


@pytest.mark.asyncio
async def test_start_of_day_is_the_query_filter(spro_service, fake_subgraph):
    fetch = make_fetch(Chain.BSC, spro_service)
    await fetch(123, None, FetchOptions(start_of_day=DAY))

    assert all(str(DAY).encode() in r.content for r in fake_subgraph.requests)
    assert not any(b'"123"' in r.content for r in fake_subgraph.requests)


@pytest.mark.asyncio
async def test_no_token_rows_leaves_only_burn():
    service = make_service(FakeSubgraph(global_rows=[{"totalSdexBurnt": "7.5"}]))
    result = await make_fetch(Chain.BASE, service)(DAY, None, FetchOptions(start_of_day=DAY))

    assert result.daily_fees.get_balances() == {SDEX_ADDRESS: 7.5}
    assert result.daily_revenue.get_balances() == {SDEX_ADDRESS: 7.5}
    await service.close()


@pytest.mark.asyncio
async def test_failure_reports_zero_fees(fake_subgraph):
    fake_subgraph.fail_tokens = True
    service = make_service(fake_subgraph)
    result = await make_fetch(Chain.ARBITRUM, service)(DAY, None, FetchOptions(start_of_day=DAY))

    assert result.to_dict() == {
        "dailyFees": {SDEX_ADDRESS: 0.0},
        "dailyRevenue": {SDEX_ADDRESS: 0.0},
    }
    await service.close()


@pytest.mark.asyncio
async def test_unsupported_chain_propagates(spro_service):
    fetch = make_fetch(Chain.AVAX, spro_service)
    with pytest.raises(UnsupportedNetworkError):
        await fetch(DAY, None, FetchOptions(start_of_day=DAY))


@pytest.mark.asyncio
async def test_uses_supplied_balance_factory(spro_service):
    created = []

    def create_balances():
        balances = Balances()
        created.append(balances)
        return balances

    result = await make_fetch(Chain.POLYGON, spro_service)(
        DAY, None, FetchOptions(start_of_day=DAY, create_balances=create_balances)
    )
    assert len(created) == 2
    assert result.daily_fees is created[0]
    assert result.daily_revenue is created[1]


@pytest.mark.asyncio
async def test_repeated_calls_are_identical(spro_service):
    fetch = make_fetch(Chain.ETHEREUM, spro_service)
    first = await fetch(DAY, None, FetchOptions(start_of_day=DAY))
    second = await fetch(DAY, None, FetchOptions(start_of_day=DAY))

    assert first == second
    assert first.daily_fees is not second.daily_fees


def test_build_adapter_covers_supported_chains(spro_service):
    adapter = build_adapter(spro_service)

    assert set(adapter.adapter) == set(SUPPORTED_CHAINS)
    assert adapter.version == 1
    for chain_adapter in adapter.adapter.values():
        assert chain_adapter.start == START_DATE == "2025-05-22"
        assert chain_adapter.meta == {"methodology": METHODOLOGY}
    assert set(METHODOLOGY) == {"Fees", "Revenue"}


def test_registry_has_p2p_lending():
    assert P2P_LENDING in AdapterRegistry.list_adapters()
    adapter = AdapterRegistry.get_adapter(P2P_LENDING)
    assert adapter.get_chain_adapter(Chain.ETHEREUM) is not None
    assert adapter.get_chain_adapter(Chain.OPTIMISM) is None
    assert AdapterRegistry.get_adapter("unknown") is None
