from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from dao.enums.delegation_advisory_kind import DelegationAdvisoryKind
from dao.enums.vote_support import VoteSupport


class VoterEligibility(BaseModel):
    model_config = ConfigDict(frozen=True)

    voter: str
    balance: int
    delegate: str
    has_voted: bool = False


class DelegationAdvisory(BaseModel):
    """Non-blocking warning: the vote may not carry the voter's own tokens."""

    model_config = ConfigDict(frozen=True)

    kind: DelegationAdvisoryKind
    voter: str
    delegate: str

    @property
    def message(self) -> str:
        if self.kind == DelegationAdvisoryKind.NOT_DELEGATED:
            return "Your voting power is not delegated. You may need to delegate to yourself to vote."
        return f"Your votes are delegated to {self.delegate}. Only the delegate can vote with your voting power."


class VoteParams(BaseModel):
    """Arguments for `castVote` / `castVoteWithReason`."""

    model_config = ConfigDict(frozen=True)

    proposal_id: int
    support: VoteSupport
    reason: Optional[str] = None
    advisories: List[DelegationAdvisory] = Field(default_factory=list)
