import pytest
from unittest.mock import AsyncMock, MagicMock

from dao.exceptions import AuctionNotActive, BidTooLow, SubmissionFailed
from dao.models.auction import AuctionSnapshot, BidParams
from dao.models.receipt import SubmissionReceipt
from dao.service.auction_service import AuctionService

START = 1_700_000_000
END = START + 86_400

SNAPSHOT = AuctionSnapshot(
    token_id=99,
    current_bid=10**15,
    current_bidder="0x00000000000000000000000000000000000000b1",
    start_time=START,
    end_time=END,
    reserve_price=8 * 10**14,
    increment_pct=10,
)

RECEIPT = SubmissionReceipt(tx_hash="0xabc", block_number=123, gas_used=80_000, effective_gas_price=10**9)


@pytest.fixture
def mock_chain_client():
    client = MagicMock()
    client.get_auction_snapshot = AsyncMock(return_value=SNAPSHOT)
    client.get_latest_timestamp = AsyncMock(return_value=START + 60)
    client.submit_bid = AsyncMock(return_value=RECEIPT)
    return client


@pytest.mark.asyncio
async def test_get_status_evaluates_fresh_snapshot(mock_chain_client):
    snapshot, evaluation = await AuctionService(mock_chain_client).get_status()

    assert snapshot == SNAPSHOT
    assert evaluation.min_next_bid == 11 * 10**14
    assert evaluation.seconds_remaining == END - START - 60
    mock_chain_client.get_auction_snapshot.assert_awaited_once()


@pytest.mark.asyncio
async def test_place_bid_submits_once(mock_chain_client):
    params, receipt = await AuctionService(mock_chain_client).place_bid(11 * 10**14)

    assert params == BidParams(token_id=99, value=11 * 10**14)
    assert receipt == RECEIPT
    mock_chain_client.submit_bid.assert_awaited_once_with(params)


@pytest.mark.asyncio
async def test_low_bid_never_reaches_chain(mock_chain_client):
    with pytest.raises(BidTooLow) as exc_info:
        await AuctionService(mock_chain_client).place_bid(10**15)

    assert exc_info.value.min_next_bid == 11 * 10**14
    mock_chain_client.submit_bid.assert_not_called()


@pytest.mark.asyncio
async def test_ended_auction_never_reaches_chain(mock_chain_client):
    mock_chain_client.get_latest_timestamp.return_value = END + 5

    with pytest.raises(AuctionNotActive):
        await AuctionService(mock_chain_client).place_bid(10**18)
    mock_chain_client.submit_bid.assert_not_called()


@pytest.mark.asyncio
async def test_submission_failure_is_propagated_unchanged(mock_chain_client):
    failure = SubmissionFailed("execution reverted: Must send more than last bid by minBidIncrementPercentage amount")
    mock_chain_client.submit_bid.side_effect = failure

    with pytest.raises(SubmissionFailed) as exc_info:
        await AuctionService(mock_chain_client).place_bid(11 * 10**14)

    assert exc_info.value is failure
    assert mock_chain_client.submit_bid.await_count == 1
