from dao.models.auction import AuctionEvaluation, AuctionSnapshot, BidParams
from dao.models.proposal import GovernanceParameters, ProposalClassification, ProposalReport, ProposalSnapshot
from dao.models.receipt import SubmissionReceipt
from dao.models.voter import DelegationAdvisory, VoteParams, VoterEligibility

__all__ = [
    "AuctionEvaluation",
    "AuctionSnapshot",
    "BidParams",
    "DelegationAdvisory",
    "GovernanceParameters",
    "ProposalClassification",
    "ProposalReport",
    "ProposalSnapshot",
    "SubmissionReceipt",
    "VoteParams",
    "VoterEligibility",
]
