from constants.constants import PERCENT_DENOMINATOR
from dao.enums.auction_phase import AuctionPhase
from dao.models.auction import AuctionEvaluation, AuctionSnapshot
from utils.validation_utils import validate_non_negative, validate_time_range


def compute_min_next_bid(current_bid: int, reserve_price: int, increment_pct: int) -> int:
    """
    Smallest bid the auction house will accept next, in wei.

    With no bid yet the reserve price applies. Otherwise the increment is rounded up,
    so the result is never short of what the contract requires.
    """
    if current_bid == 0:
        return reserve_price
    increment = -(-current_bid * increment_pct // PERCENT_DENOMINATOR)
    return current_bid + increment


def derive_phase(snapshot: AuctionSnapshot, now: int) -> AuctionPhase:
    if now < snapshot.start_time:
        return AuctionPhase.NOT_STARTED
    if now > snapshot.end_time:
        return AuctionPhase.ENDED_UNSETTLED
    return AuctionPhase.ACTIVE


def evaluate_auction(snapshot: AuctionSnapshot, now: int) -> AuctionEvaluation:
    """
    Classify the auction at time `now` and work out what the next bid must look like.

    Raises:
        InvalidSnapshot: If the time window is inverted or any amount is negative.
    """
    validate_time_range(snapshot.start_time, snapshot.end_time)
    validate_non_negative(
        current_bid=snapshot.current_bid,
        reserve_price=snapshot.reserve_price,
        increment_pct=snapshot.increment_pct,
        extension_window=snapshot.extension_window,
        extension_duration=snapshot.extension_duration,
    )

    phase = derive_phase(snapshot, now)
    seconds_remaining = max(0, snapshot.end_time - now)
    will_extend = phase == AuctionPhase.ACTIVE and seconds_remaining <= snapshot.extension_window

    return AuctionEvaluation(
        phase=phase,
        min_next_bid=compute_min_next_bid(snapshot.current_bid, snapshot.reserve_price, snapshot.increment_pct),
        seconds_remaining=seconds_remaining,
        will_extend=will_extend,
    )
