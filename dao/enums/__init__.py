from dao.enums.auction_phase import AuctionPhase
from dao.enums.delegation_advisory_kind import DelegationAdvisoryKind
from dao.enums.proposal_phase import ProposalPhase
from dao.enums.vote_support import VoteSupport

__all__ = ["AuctionPhase", "DelegationAdvisoryKind", "ProposalPhase", "VoteSupport"]
