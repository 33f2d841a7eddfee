import pytest
from unittest.mock import AsyncMock, MagicMock

from constants.constants import ZERO_ADDRESS
from dao.enums.delegation_advisory_kind import DelegationAdvisoryKind
from dao.enums.proposal_phase import ProposalPhase
from dao.exceptions import InvalidSupportValue, NoVotingPower, ProposalNotActive, UnknownPhase
from dao.models.proposal import GovernanceParameters, ProposalSnapshot
from dao.models.receipt import SubmissionReceipt
from dao.models.voter import VoterEligibility
from dao.service.governance_service import GovernanceService

VOTER = "0x7E5F4552091A69125d5DfCb7b8C2659029395Bdf"
CURRENT_BLOCK = 10_000

# proposal id -> governor state code
MOCK_STATES = {1: 7, 2: 3, 3: 1, 4: 4, 5: 1}


def make_proposal(proposal_id: int) -> ProposalSnapshot:
    return ProposalSnapshot(
        proposal_id=proposal_id,
        proposer=VOTER,
        start_block=CURRENT_BLOCK - 500,
        end_block=CURRENT_BLOCK + 100 * proposal_id,
        for_votes=proposal_id,
    )


@pytest.fixture
def mock_chain_client():
    client = MagicMock()
    client.get_governance_parameters = AsyncMock(
        return_value=GovernanceParameters(voting_delay=1, voting_period=100, proposal_threshold=1)
    )
    client.get_proposal_count = AsyncMock(return_value=len(MOCK_STATES))
    client.get_block_number = AsyncMock(return_value=CURRENT_BLOCK)
    client.get_proposal = AsyncMock(side_effect=make_proposal)
    client.get_proposal_state = AsyncMock(side_effect=lambda proposal_id: MOCK_STATES[proposal_id])
    client.get_voter_eligibility = AsyncMock(
        return_value=VoterEligibility(voter=VOTER, balance=2, delegate=VOTER, has_voted=False)
    )
    client.submit_vote = AsyncMock(
        return_value=SubmissionReceipt(tx_hash="0xdef", block_number=1, gas_used=60_000, effective_gas_price=1)
    )
    return client


@pytest.mark.asyncio
async def test_list_proposals_keeps_active_only(mock_chain_client):
    report = await GovernanceService(mock_chain_client).list_proposals()

    assert report.total_count == 5
    assert [p.proposal.proposal_id for p in report.proposals] == [3, 5]
    assert [p.blocks_remaining for p in report.proposals] == [300, 500]
    assert report.summary[ProposalPhase.ACTIVE] == 2


@pytest.mark.asyncio
async def test_list_proposals_show_all_in_id_order(mock_chain_client):
    report = await GovernanceService(mock_chain_client, max_concurrent_requests=2).list_proposals(show_all=True)

    assert [p.proposal.proposal_id for p in report.proposals] == [1, 2, 3, 4, 5]
    assert report.summary == {ProposalPhase.ACTIVE: 2, ProposalPhase.SUCCEEDED: 1, ProposalPhase.EXECUTED: 1}
    # 1-indexed walk
    requested = sorted(call.args[0] for call in mock_chain_client.get_proposal.await_args_list)
    assert requested == [1, 2, 3, 4, 5]


@pytest.mark.asyncio
async def test_list_proposals_skips_unreadable_and_unknown(mock_chain_client):
    def state(proposal_id):
        if proposal_id == 2:
            raise ValueError("execution reverted: invalid proposal id")
        if proposal_id == 4:
            return 9
        return MOCK_STATES[proposal_id]

    mock_chain_client.get_proposal_state.side_effect = state
    report = await GovernanceService(mock_chain_client).list_proposals(show_all=True)

    assert [p.proposal.proposal_id for p in report.proposals] == [1, 3, 5]


@pytest.mark.asyncio
async def test_list_proposals_without_proposals(mock_chain_client):
    mock_chain_client.get_proposal_count.return_value = 0
    report = await GovernanceService(mock_chain_client).list_proposals()

    assert report.total_count == 0
    assert report.proposals == []
    mock_chain_client.get_proposal.assert_not_called()


@pytest.mark.asyncio
async def test_cast_vote_submits_once(mock_chain_client):
    classification, params, receipt = await GovernanceService(mock_chain_client).cast_vote(VOTER, 3, 1, "lgtm")

    assert classification.blocks_remaining == 300
    assert params.proposal_id == 3
    assert params.reason == "lgtm"
    assert receipt.tx_hash == "0xdef"
    mock_chain_client.submit_vote.assert_awaited_once_with(params)


@pytest.mark.asyncio
async def test_cast_vote_rejects_bad_support_before_reading(mock_chain_client):
    with pytest.raises(InvalidSupportValue):
        await GovernanceService(mock_chain_client).cast_vote(VOTER, 3, "7")

    mock_chain_client.get_voter_eligibility.assert_not_called()
    mock_chain_client.submit_vote.assert_not_called()


@pytest.mark.asyncio
async def test_cast_vote_on_closed_proposal(mock_chain_client):
    with pytest.raises(ProposalNotActive):
        await GovernanceService(mock_chain_client).cast_vote(VOTER, 2, 0)
    mock_chain_client.submit_vote.assert_not_called()


@pytest.mark.asyncio
async def test_cast_vote_without_tokens(mock_chain_client):
    mock_chain_client.get_voter_eligibility.return_value = VoterEligibility(
        voter=VOTER, balance=0, delegate=VOTER, has_voted=False
    )
    with pytest.raises(NoVotingPower):
        await GovernanceService(mock_chain_client).cast_vote(VOTER, 3, 1)
    mock_chain_client.submit_vote.assert_not_called()


@pytest.mark.asyncio
async def test_cast_vote_with_unknown_phase(mock_chain_client):
    mock_chain_client.get_proposal_state.side_effect = None
    mock_chain_client.get_proposal_state.return_value = 12
    with pytest.raises(UnknownPhase):
        await GovernanceService(mock_chain_client).cast_vote(VOTER, 3, 1)


@pytest.mark.asyncio
async def test_delegation_advisory_does_not_block(mock_chain_client):
    mock_chain_client.get_voter_eligibility.return_value = VoterEligibility(
        voter=VOTER, balance=1, delegate=ZERO_ADDRESS, has_voted=False
    )
    _, params, _ = await GovernanceService(mock_chain_client).cast_vote(VOTER, 5, 2)

    assert params.advisories[0].kind == DelegationAdvisoryKind.NOT_DELEGATED
    mock_chain_client.submit_vote.assert_awaited_once()
