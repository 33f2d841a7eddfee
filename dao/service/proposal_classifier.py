from typing import Optional

from constants.constants import SECONDS_PER_HOUR
from dao.enums.proposal_phase import ProposalPhase
from dao.models.proposal import ProposalClassification, ProposalSnapshot


def classify_proposal(snapshot: ProposalSnapshot, phase_code: int, current_block: int) -> ProposalClassification:
    """
    Label the governor's phase code and, for Active proposals, count the blocks left to vote.

    Raises:
        UnknownPhase: If `phase_code` is outside 0..7.
    """
    phase = ProposalPhase.from_code(phase_code)
    blocks_remaining: Optional[int] = None
    if phase == ProposalPhase.ACTIVE:
        blocks_remaining = max(0, snapshot.end_block - current_block)
    return ProposalClassification(proposal=snapshot, phase=phase, blocks_remaining=blocks_remaining)


def estimate_hours_remaining(blocks_remaining: int, seconds_per_block: int) -> int:
    return (blocks_remaining * seconds_per_block) // SECONDS_PER_HOUR
