from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from dao.enums.proposal_phase import ProposalPhase


class ProposalSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    proposal_id: int = Field(gt=0)
    proposer: str
    start_block: int
    end_block: int
    for_votes: int = 0
    against_votes: int = 0
    abstain_votes: int = 0
    canceled: bool = False
    executed: bool = False
    eta: Optional[int] = None


class ProposalClassification(BaseModel):
    model_config = ConfigDict(frozen=True)

    proposal: ProposalSnapshot
    phase: ProposalPhase
    # Only set while the proposal is Active
    blocks_remaining: Optional[int] = None


class GovernanceParameters(BaseModel):
    """Governor settings. Zero means the governor does not expose the value."""

    model_config = ConfigDict(frozen=True)

    # seconds, as the Base governor reports them
    voting_delay: int = 0
    voting_period: int = 0
    proposal_threshold: int = 0
    quorum_votes: int = 0


class ProposalReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    parameters: GovernanceParameters
    total_count: int
    show_all: bool
    proposals: List[ProposalClassification] = Field(default_factory=list)

    @property
    def summary(self) -> Dict[ProposalPhase, int]:
        counts = {ProposalPhase.ACTIVE: 0, ProposalPhase.SUCCEEDED: 0, ProposalPhase.EXECUTED: 0}
        for item in self.proposals:
            if item.phase in counts:
                counts[item.phase] += 1
        return counts
