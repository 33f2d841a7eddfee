from typing import Any, List, Optional

from dao.enums.delegation_advisory_kind import DelegationAdvisoryKind
from dao.enums.proposal_phase import ProposalPhase
from dao.enums.vote_support import VoteSupport
from dao.exceptions import AlreadyVoted, InvalidSupportValue, NoVotingPower, ProposalNotActive
from dao.models.proposal import ProposalSnapshot
from dao.models.voter import DelegationAdvisory, VoteParams, VoterEligibility
from utils.formatter_utils import addresses_match, is_zero_address


def parse_support(support: Any) -> VoteSupport:
    """Accept 0/1/2 as int or numeric string; anything else is InvalidSupportValue."""
    if isinstance(support, bool):
        raise InvalidSupportValue(support)
    if isinstance(support, str):
        stripped = support.strip()
        # ASCII digits only; int() also parses other Unicode digits
        if stripped not in {"0", "1", "2"}:
            raise InvalidSupportValue(support)
        support = int(stripped)
    if not isinstance(support, int):
        raise InvalidSupportValue(support)
    try:
        return VoteSupport(support)
    except ValueError:
        raise InvalidSupportValue(support) from None


def delegation_advisories(voter: VoterEligibility) -> List[DelegationAdvisory]:
    """The chain decides whose voting power counts; these are warnings only."""
    if is_zero_address(voter.delegate):
        kind = DelegationAdvisoryKind.NOT_DELEGATED
    elif not addresses_match(voter.delegate, voter.voter):
        kind = DelegationAdvisoryKind.DELEGATED_ELSEWHERE
    else:
        return []
    return [DelegationAdvisory(kind=kind, voter=voter.voter, delegate=voter.delegate)]


def check_vote_eligibility(
    voter: VoterEligibility,
    proposal: ProposalSnapshot,
    phase: ProposalPhase,
    support: Any,
    reason: Optional[str] = None,
) -> VoteParams:
    """
    Approve a vote or raise the first rule it breaks.

    Rules, in order: support must be 0/1/2, the voter must hold tokens, the proposal
    must be Active and the voter must not have voted yet. Delegation problems are
    attached as advisories to the approved vote.
    """
    vote_support = parse_support(support)
    if voter.balance <= 0:
        raise NoVotingPower(voter.voter)
    if phase != ProposalPhase.ACTIVE:
        raise ProposalNotActive(proposal.proposal_id, phase)
    if voter.has_voted:
        raise AlreadyVoted(proposal.proposal_id, voter.voter)

    return VoteParams(
        proposal_id=proposal.proposal_id,
        support=vote_support,
        reason=reason or None,
        advisories=delegation_advisories(voter),
    )
