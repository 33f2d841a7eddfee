from pydantic import BaseModel, ConfigDict

from dao.enums.auction_phase import AuctionPhase


class AuctionSnapshot(BaseModel):
    """Current auction as read from the auction house. Amounts are in wei."""

    model_config = ConfigDict(frozen=True)

    token_id: int
    current_bid: int
    current_bidder: str
    start_time: int
    end_time: int
    reserve_price: int
    increment_pct: int
    extension_window: int = 900
    extension_duration: int = 600


class AuctionEvaluation(BaseModel):
    model_config = ConfigDict(frozen=True)

    phase: AuctionPhase
    min_next_bid: int
    seconds_remaining: int
    # Informational: the auction house itself moves end_time
    will_extend: bool


class BidParams(BaseModel):
    """Arguments for `createBid(tokenId)` with `value` attached."""

    model_config = ConfigDict(frozen=True)

    token_id: int
    value: int
