from enum import Enum


class AuctionPhase(str, Enum):
    NOT_STARTED = "NotStarted"
    ACTIVE = "Active"
    # Past end time, waiting for someone to settle and start the next auction
    ENDED_UNSETTLED = "EndedUnsettled"
