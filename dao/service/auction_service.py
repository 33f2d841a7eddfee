import asyncio
from typing import Tuple

from dao.client.dao_chain_client import DaoChainClient
from dao.models.auction import AuctionEvaluation, AuctionSnapshot, BidParams
from dao.models.receipt import SubmissionReceipt
from dao.service.auction_evaluator import evaluate_auction
from dao.service.bid_validator import validate_bid
from utils.logger_utils import get_logger

logger = get_logger("Auction Service")


class AuctionService(object):
    def __init__(self, chain_client: DaoChainClient):
        self.chain_client = chain_client

    async def get_status(self) -> Tuple[AuctionSnapshot, AuctionEvaluation]:
        snapshot, now = await asyncio.gather(
            self.chain_client.get_auction_snapshot(),
            self.chain_client.get_latest_timestamp(),
        )
        evaluation = evaluate_auction(snapshot, now)
        logger.debug(f"Auction {snapshot.token_id} is {evaluation.phase.value} at {now}")
        return snapshot, evaluation

    async def prepare_bid(self, amount: int) -> Tuple[AuctionEvaluation, BidParams]:
        snapshot, evaluation = await self.get_status()
        return evaluation, validate_bid(snapshot, amount, evaluation)

    async def place_bid(self, amount: int) -> Tuple[BidParams, SubmissionReceipt]:
        """
        Validate `amount` (wei) against fresh auction state and submit it once.

        Raises:
            DaoActionError: Any validation failure, or SubmissionFailed from the chain client.
        """
        evaluation, params = await self.prepare_bid(amount)
        if evaluation.will_extend:
            logger.info("Bid lands in the extension window; the auction will run on past its current end")
        logger.info(f"Submitting bid of {params.value} wei on token {params.token_id}")
        receipt = await self.chain_client.submit_bid(params)
        return params, receipt
