from dao.enums.auction_phase import AuctionPhase
from dao.exceptions import AuctionNotActive, BidNotHigher, BidTooLow
from dao.models.auction import AuctionEvaluation, AuctionSnapshot, BidParams


def validate_bid(snapshot: AuctionSnapshot, amount: int, evaluation: AuctionEvaluation) -> BidParams:
    """
    Approve `amount` (wei) against the evaluated auction or raise the first rule it breaks.

    Rules, in order: the amount must be a positive integer number of wei, the auction must
    be Active, the bid must reach the minimum next bid, and it must be strictly higher than
    the standing bid.
    """
    if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
        raise BidTooLow(amount=amount, min_next_bid=evaluation.min_next_bid)
    if evaluation.phase != AuctionPhase.ACTIVE:
        raise AuctionNotActive(evaluation.phase)
    if amount < evaluation.min_next_bid:
        raise BidTooLow(amount=amount, min_next_bid=evaluation.min_next_bid)
    if amount == snapshot.current_bid:
        raise BidNotHigher(amount)
    return BidParams(token_id=snapshot.token_id, value=amount)
