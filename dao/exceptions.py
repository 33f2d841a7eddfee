from typing import Any, Optional

from constants.constants import KNOWN_SUBMISSION_ERRORS


class ConfigurationError(Exception):
    """Raised when the local setup (signing key, addresses) cannot support the requested command."""


class DaoActionError(Exception):
    """Base class for every reason a bid or vote is refused or fails."""


class InvalidSnapshot(DaoActionError):
    pass


class AuctionNotActive(DaoActionError):
    def __init__(self, phase: Any):
        self.phase = phase
        super().__init__(f"Auction is {getattr(phase, 'value', phase)}, not Active")


class BidTooLow(DaoActionError):
    def __init__(self, amount: int, min_next_bid: int):
        self.amount = amount
        self.min_next_bid = min_next_bid
        super().__init__(f"Bid of {amount} wei is below the minimum next bid of {min_next_bid} wei")


class BidNotHigher(DaoActionError):
    def __init__(self, amount: int):
        self.amount = amount
        super().__init__(f"Bid of {amount} wei does not exceed the current highest bid")


class UnknownPhase(DaoActionError):
    def __init__(self, code: Any):
        self.code = code
        super().__init__(f"Unknown proposal phase code: {code!r}")


class InvalidSupportValue(DaoActionError):
    def __init__(self, support: Any):
        self.support = support
        super().__init__(f"Invalid support value {support!r}. Use 0 (Against), 1 (For), or 2 (Abstain)")


class NoVotingPower(DaoActionError):
    def __init__(self, voter: str):
        self.voter = voter
        super().__init__(f"{voter} holds no DAO tokens. Cannot vote.")


class ProposalNotActive(DaoActionError):
    def __init__(self, proposal_id: int, phase: Any):
        self.proposal_id = proposal_id
        self.phase = phase
        label = getattr(phase, "label", phase)
        super().__init__(f"Cannot vote. Proposal {proposal_id} is {label}, not Active.")


class AlreadyVoted(DaoActionError):
    def __init__(self, proposal_id: int, voter: str):
        self.proposal_id = proposal_id
        self.voter = voter
        super().__init__(f"{voter} has already voted on proposal {proposal_id}")


class SubmissionFailed(DaoActionError):
    """The chain client rejected or reverted a write. The message is the collaborator's, untouched."""

    def __init__(self, message: str, tx_hash: Optional[str] = None):
        self.message = message
        self.tx_hash = tx_hash
        super().__init__(message)

    @property
    def hint(self) -> Optional[str]:
        for fragment, hint in KNOWN_SUBMISSION_ERRORS.items():
            if fragment.lower() in self.message.lower():
                return hint
        return None
