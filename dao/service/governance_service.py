import asyncio
from typing import Any, List, Optional, Tuple

from constants.constants import FIRST_PROPOSAL_ID
from dao.client.dao_chain_client import DaoChainClient
from dao.enums.proposal_phase import ProposalPhase
from dao.exceptions import UnknownPhase
from dao.models.proposal import ProposalClassification, ProposalReport
from dao.models.receipt import SubmissionReceipt
from dao.models.voter import VoteParams
from dao.service.proposal_classifier import classify_proposal
from dao.service.vote_eligibility_checker import check_vote_eligibility, parse_support
from utils.async_utils import gather_with_concurrency
from utils.logger_utils import get_logger

logger = get_logger("Governance Service")


class GovernanceService(object):
    def __init__(self, chain_client: DaoChainClient, max_concurrent_requests: int = 5):
        self.chain_client = chain_client
        self.max_concurrent_requests = max_concurrent_requests

    async def list_proposals(self, show_all: bool = False) -> ProposalReport:
        """
        Classify every proposal the governor knows about.

        Only Active proposals are kept unless `show_all` is set. Proposals that cannot be
        read or report an unknown phase are skipped with a warning.
        """
        parameters, count, current_block = await asyncio.gather(
            self.chain_client.get_governance_parameters(),
            self.chain_client.get_proposal_count(),
            self.chain_client.get_block_number(),
        )
        logger.info(f"Governor reports {count} proposals")

        classified = await gather_with_concurrency(
            self.max_concurrent_requests,
            *(self._load_proposal(proposal_id, current_block) for proposal_id in range(FIRST_PROPOSAL_ID, count + 1)),
        )

        proposals: List[ProposalClassification] = []
        for item in classified:
            if item is None:
                continue
            if not show_all and item.phase != ProposalPhase.ACTIVE:
                continue
            proposals.append(item)

        return ProposalReport(parameters=parameters, total_count=count, show_all=show_all, proposals=proposals)

    async def _load_proposal(self, proposal_id: int, current_block: int) -> Optional[ProposalClassification]:
        try:
            snapshot, phase_code = await asyncio.gather(
                self.chain_client.get_proposal(proposal_id),
                self.chain_client.get_proposal_state(proposal_id),
            )
        except Exception as e:
            logger.warning(f"Skipping proposal {proposal_id}: {e}")
            return None

        try:
            return classify_proposal(snapshot, phase_code, current_block)
        except UnknownPhase as e:
            logger.warning(f"Skipping proposal {proposal_id}: {e}")
            return None

    async def prepare_vote(
        self, voter: str, proposal_id: int, support: Any, reason: Optional[str] = None
    ) -> Tuple[ProposalClassification, VoteParams]:
        # Bad support codes are refused before touching the node
        parse_support(support)

        eligibility, snapshot, phase_code, current_block = await asyncio.gather(
            self.chain_client.get_voter_eligibility(proposal_id, voter),
            self.chain_client.get_proposal(proposal_id),
            self.chain_client.get_proposal_state(proposal_id),
            self.chain_client.get_block_number(),
        )
        classification = classify_proposal(snapshot, phase_code, current_block)
        params = check_vote_eligibility(eligibility, snapshot, classification.phase, support, reason)
        return classification, params

    async def cast_vote(
        self, voter: str, proposal_id: int, support: Any, reason: Optional[str] = None
    ) -> Tuple[ProposalClassification, VoteParams, SubmissionReceipt]:
        """
        Check the voter against fresh proposal state and submit the vote once.

        Raises:
            DaoActionError: Any validation failure, or SubmissionFailed from the chain client.
        """
        classification, params = await self.prepare_vote(voter, proposal_id, support, reason)
        for advisory in params.advisories:
            logger.warning(advisory.message)
        logger.info(f"Submitting {params.support.label} vote on proposal {params.proposal_id}")
        receipt = await self.chain_client.submit_vote(params)
        return classification, params, receipt
