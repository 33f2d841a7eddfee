from decimal import Decimal

import pytest

from dao.enums.auction_phase import AuctionPhase
from dao.exceptions import AuctionNotActive, BidNotHigher, BidTooLow
from dao.models.auction import AuctionSnapshot, BidParams
from dao.service.auction_evaluator import evaluate_auction
from dao.service.bid_validator import validate_bid

START = 1_700_000_000
END = START + 86_400
NOW = START + 600


def make_snapshot(**overrides) -> AuctionSnapshot:
    fields = dict(
        token_id=7,
        current_bid=1000,
        current_bidder="0x00000000000000000000000000000000000000b1",
        start_time=START,
        end_time=END,
        reserve_price=500,
        increment_pct=10,
    )
    fields.update(overrides)
    return AuctionSnapshot(**fields)


def test_bid_at_minimum_is_accepted():
    snapshot = make_snapshot()
    params = validate_bid(snapshot, 1100, evaluate_auction(snapshot, NOW))
    assert params == BidParams(token_id=7, value=1100)


def test_bid_below_minimum_is_rejected_with_minimum():
    snapshot = make_snapshot()
    with pytest.raises(BidTooLow) as exc_info:
        validate_bid(snapshot, 1099, evaluate_auction(snapshot, NOW))
    assert exc_info.value.min_next_bid == 1100
    assert exc_info.value.amount == 1099


def test_first_bid_must_reach_reserve():
    snapshot = make_snapshot(current_bid=0)
    evaluation = evaluate_auction(snapshot, NOW)
    with pytest.raises(BidTooLow):
        validate_bid(snapshot, 499, evaluation)
    assert validate_bid(snapshot, 500, evaluation).value == 500


@pytest.mark.parametrize("now", [START - 1, END + 1])
def test_inactive_auction_rejects_any_bid(now):
    snapshot = make_snapshot()
    with pytest.raises(AuctionNotActive) as exc_info:
        validate_bid(snapshot, 10**18, evaluate_auction(snapshot, now))
    assert exc_info.value.phase != AuctionPhase.ACTIVE


def test_phase_is_checked_before_amount():
    snapshot = make_snapshot()
    with pytest.raises(AuctionNotActive):
        validate_bid(snapshot, 1, evaluate_auction(snapshot, END + 1))


def test_equal_bid_is_not_higher_without_increment():
    snapshot = make_snapshot(increment_pct=0)
    with pytest.raises(BidNotHigher):
        validate_bid(snapshot, 1000, evaluate_auction(snapshot, NOW))


def test_zero_bid_with_zero_reserve_is_not_higher():
    snapshot = make_snapshot(current_bid=0, reserve_price=0)
    with pytest.raises(BidNotHigher):
        validate_bid(snapshot, 0, evaluate_auction(snapshot, NOW))


def test_validation_is_deterministic():
    snapshot = make_snapshot()
    evaluation = evaluate_auction(snapshot, NOW)
    assert validate_bid(snapshot, 1200, evaluation) == validate_bid(snapshot, 1200, evaluation)


def test_accepted_bid_is_rejected_once_it_stands():
    snapshot = make_snapshot()
    evaluation = evaluate_auction(snapshot, NOW)
    params = validate_bid(snapshot, 1100, evaluation)

    # The accepted bid is now the standing bid
    advanced = snapshot.model_copy(update={"current_bid": params.value})
    advanced_evaluation = evaluate_auction(advanced, NOW)
    assert advanced_evaluation == evaluate_auction(advanced, NOW)
    assert advanced_evaluation.min_next_bid == 1210

    with pytest.raises(BidTooLow):
        validate_bid(advanced, params.value, advanced_evaluation)

    flat = advanced.model_copy(update={"increment_pct": 0})
    with pytest.raises(BidNotHigher):
        validate_bid(flat, params.value, evaluate_auction(flat, NOW))


@pytest.mark.parametrize("amount", [0, -1100, 1100.0, Decimal("1100"), True])
def test_non_positive_or_non_integer_amount_is_rejected(amount):
    snapshot = make_snapshot(current_bid=0, reserve_price=0)
    with pytest.raises(BidTooLow) as exc_info:
        validate_bid(snapshot, amount, evaluate_auction(snapshot, NOW))
    assert exc_info.value.amount == amount


def test_amount_is_checked_before_phase():
    snapshot = make_snapshot()
    with pytest.raises(BidTooLow):
        validate_bid(snapshot, 0, evaluate_auction(snapshot, END + 1))
