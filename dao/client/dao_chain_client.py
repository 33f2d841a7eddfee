import asyncio
from typing import Any, Dict, Optional

from aiohttp import ClientError
from eth_account import Account
from eth_account.signers.local import LocalAccount
from eth_utils import to_checksum_address
from web3 import AsyncWeb3, Web3
from web3.exceptions import Web3Exception

from abi.auction_house_abi import AUCTION_HOUSE_ABI
from abi.dao_governance_abi import GOVERNOR_ABI
from abi.dao_token_abi import DAO_TOKEN_ABI
from config.settings import DaoSettings, Settings
from dao.exceptions import ConfigurationError, SubmissionFailed
from dao.models.auction import AuctionSnapshot, BidParams
from dao.models.proposal import GovernanceParameters, ProposalSnapshot
from dao.models.receipt import SubmissionReceipt
from dao.models.voter import VoteParams, VoterEligibility
from utils.logger_utils import get_logger
from utils.rpc_provider_utils import get_async_provider_from_uri

logger = get_logger("DAO Chain Client")

# Failures of an optional read; the caller falls back to a default
READ_ERRORS = (Web3Exception, ValueError)
# Anything that can go wrong between building a transaction and its receipt
SUBMISSION_ERRORS = (Web3Exception, ValueError, ClientError, asyncio.TimeoutError)


def _checksum(address: str, label: str) -> str:
    try:
        return to_checksum_address(address)
    except (ValueError, TypeError):
        raise ConfigurationError(f"Invalid {label} address: {address!r}") from None


def error_message(error: Exception) -> str:
    # ContractLogicError keeps the revert reason on .message; its str() is an args tuple
    message = getattr(error, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(error) or type(error).__name__


class DaoChainClient(object):
    """
    Reads auction and governance state from the DAO contracts and submits bids and votes.

    Every read hits the node again; nothing is cached across calls except the resolved
    auction house contract. Writes are sent once and never retried.
    """

    def __init__(
        self,
        web3: AsyncWeb3,
        dao_settings: DaoSettings,
        account: Optional[LocalAccount] = None,
        receipt_timeout: int = 180,
    ):
        self._web3 = web3
        self._settings = dao_settings
        self._account = account
        self._receipt_timeout = receipt_timeout

        self._governor = web3.eth.contract(
            address=_checksum(dao_settings.governor_address, "governor"), abi=GOVERNOR_ABI
        )
        self._token = web3.eth.contract(address=_checksum(dao_settings.token_address, "token"), abi=DAO_TOKEN_ABI)
        self._auction_house = None

    @classmethod
    def from_settings(cls, settings: Settings, require_signer: bool = False) -> "DaoChainClient":
        provider = get_async_provider_from_uri(settings.chain.rpc_url, timeout=settings.chain.rpc_timeout)
        web3 = AsyncWeb3(provider)

        account = None
        if settings.chain.private_key is not None:
            try:
                account = Account.from_key(settings.chain.private_key.get_secret_value())
            except (ValueError, TypeError) as e:
                raise ConfigurationError(f"PRIVATE_KEY is not a valid private key: {e}") from None
        elif require_signer:
            raise ConfigurationError("PRIVATE_KEY environment variable not set")

        return cls(web3, settings.dao, account=account, receipt_timeout=settings.chain.receipt_timeout)

    @property
    def address(self) -> str:
        return self._require_account().address

    def _require_account(self) -> LocalAccount:
        if self._account is None:
            raise ConfigurationError("PRIVATE_KEY environment variable not set")
        return self._account

    async def close(self) -> None:
        provider = self._web3.provider
        if hasattr(provider, "disconnect"):
            await provider.disconnect()

    async def _call_or_default(self, contract_function, default: Any) -> Any:
        try:
            return await contract_function.call()
        except READ_ERRORS as e:
            logger.debug(f"{contract_function.fn_name}() unavailable, using {default!r}: {e}")
            return default

    # --- Auction reads ---

    async def _auction_house_contract(self):
        if self._auction_house is None:
            address = self._settings.auction_house_address
            if not address:
                address = await self._token.functions.minter().call()
                logger.info(f"Resolved auction house {address} from token minter()")
            self._auction_house = self._web3.eth.contract(
                address=_checksum(address, "auction house"), abi=AUCTION_HOUSE_ABI
            )
        return self._auction_house

    async def get_auction_snapshot(self) -> AuctionSnapshot:
        house = await self._auction_house_contract()
        auction, reserve_price, increment_pct, time_buffer = await asyncio.gather(
            house.functions.auction().call(),
            house.functions.reservePrice().call(),
            house.functions.minBidIncrementPercentage().call(),
            self._call_or_default(house.functions.timeBuffer(), None),
        )
        token_id, amount, start_time, end_time, bidder, _settled = auction

        # The auction house extends by timeBuffer when a bid lands within timeBuffer of the end
        if time_buffer is not None:
            extension_window = extension_duration = time_buffer
        else:
            extension_window = self._settings.extension_window_seconds
            extension_duration = self._settings.extension_duration_seconds

        return AuctionSnapshot(
            token_id=token_id,
            current_bid=amount,
            current_bidder=bidder,
            start_time=start_time,
            end_time=end_time,
            reserve_price=reserve_price,
            increment_pct=increment_pct,
            extension_window=extension_window,
            extension_duration=extension_duration,
        )

    async def get_latest_timestamp(self) -> int:
        block = await self._web3.eth.get_block("latest")
        return block["timestamp"]

    # --- Governance reads ---

    async def get_block_number(self) -> int:
        return await self._web3.eth.block_number

    async def get_proposal_count(self) -> int:
        return await self._governor.functions.proposalCount().call()

    async def get_proposal(self, proposal_id: int) -> ProposalSnapshot:
        (
            proposer,
            eta,
            start_block,
            end_block,
            for_votes,
            against_votes,
            abstain_votes,
            canceled,
            executed,
        ) = await self._governor.functions.proposals(proposal_id).call()
        return ProposalSnapshot(
            proposal_id=proposal_id,
            proposer=proposer,
            start_block=start_block,
            end_block=end_block,
            for_votes=for_votes,
            against_votes=against_votes,
            abstain_votes=abstain_votes,
            canceled=canceled,
            executed=executed,
            eta=eta or None,
        )

    async def get_proposal_state(self, proposal_id: int) -> int:
        return await self._governor.functions.state(proposal_id).call()

    async def get_governance_parameters(self) -> GovernanceParameters:
        voting_delay, voting_period, proposal_threshold, quorum_votes = await asyncio.gather(
            self._call_or_default(self._governor.functions.votingDelay(), 0),
            self._call_or_default(self._governor.functions.votingPeriod(), 0),
            self._call_or_default(self._governor.functions.proposalThreshold(), 0),
            self._call_or_default(self._governor.functions.quorumVotes(), 0),
        )
        return GovernanceParameters(
            voting_delay=voting_delay,
            voting_period=voting_period,
            proposal_threshold=proposal_threshold,
            quorum_votes=quorum_votes,
        )

    async def get_voter_eligibility(self, proposal_id: int, voter: str) -> VoterEligibility:
        voter = _checksum(voter, "voter")
        balance, delegate, has_voted = await asyncio.gather(
            self._token.functions.balanceOf(voter).call(),
            self._token.functions.delegates(voter).call(),
            self._governor.functions.hasVoted(proposal_id, voter).call(),
        )
        return VoterEligibility(voter=voter, balance=balance, delegate=delegate, has_voted=has_voted)

    # --- Writes ---

    async def submit_bid(self, params: BidParams) -> SubmissionReceipt:
        house = await self._auction_house_contract()
        tx_params: Dict[str, Any] = {"value": params.value}
        if self._settings.bid_gas_limit:
            tx_params["gas"] = self._settings.bid_gas_limit
        return await self._submit(house.functions.createBid(params.token_id), tx_params)

    async def submit_vote(self, params: VoteParams) -> SubmissionReceipt:
        if params.reason:
            contract_function = self._governor.functions.castVoteWithReason(
                params.proposal_id, int(params.support), params.reason
            )
            gas_limit = self._settings.vote_with_reason_gas_limit
        else:
            contract_function = self._governor.functions.castVote(params.proposal_id, int(params.support))
            gas_limit = self._settings.vote_gas_limit
        return await self._submit(contract_function, {"gas": gas_limit})

    async def _submit(self, contract_function, tx_params: Dict[str, Any]) -> SubmissionReceipt:
        account = self._require_account()
        tx_hash: Optional[str] = None
        try:
            nonce = await self._web3.eth.get_transaction_count(account.address, "pending")
            # chainId and fees are filled in by build_transaction
            transaction = await contract_function.build_transaction(
                {"from": account.address, "nonce": nonce, **tx_params}
            )
            signed = account.sign_transaction(transaction)
            tx_hash = Web3.to_hex(await self._web3.eth.send_raw_transaction(signed.raw_transaction))
            logger.info(f"Transaction {tx_hash} sent, waiting for confirmation...")
            receipt = await self._web3.eth.wait_for_transaction_receipt(tx_hash, timeout=self._receipt_timeout)
        except SUBMISSION_ERRORS as e:
            raise SubmissionFailed(error_message(e), tx_hash=tx_hash) from e

        if receipt["status"] != 1:
            raise SubmissionFailed(f"Transaction {tx_hash} reverted in block {receipt['blockNumber']}", tx_hash=tx_hash)

        return SubmissionReceipt(
            tx_hash=tx_hash,
            block_number=receipt["blockNumber"],
            gas_used=receipt["gasUsed"],
            effective_gas_price=receipt.get("effectiveGasPrice", 0),
        )
