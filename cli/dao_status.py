from typing import Optional

import click

from cli.command_utils import format_duration, run_with_client
from config.settings import settings
from constants.constants import SECONDS_PER_DAY
from dao.client.dao_chain_client import DaoChainClient
from dao.enums.auction_phase import AuctionPhase
from dao.enums.proposal_phase import ProposalPhase
from dao.models.auction import AuctionEvaluation, AuctionSnapshot
from dao.models.proposal import ProposalReport
from dao.service.auction_service import AuctionService
from dao.service.governance_service import GovernanceService
from dao.service.proposal_classifier import estimate_hours_remaining
from utils.formatter_utils import format_ether, is_zero_address
from utils.logger_utils import configure_logging, get_logger

logger = get_logger("DAO Status CLI")


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option(
    "-a", "--all", "show_all", is_flag=True, default=False, help="List proposals in every phase, not only Active ones."
)
@click.option("--no-auction", is_flag=True, default=False, help="Skip the current auction.")
@click.option(
    "-p",
    "--provider-uri",
    default=settings.chain.rpc_url,
    show_default=True,
    type=str,
    help="The URI of the Base JSON-RPC node.",
)
@click.option("--log-file", default=settings.app.log_file, show_default=True, type=str, help="Path to the log file.")
def dao_status(show_all: bool, no_auction: bool, provider_uri: str, log_file: Optional[str]):
    """
    Shows the current auction and the DAO's governance proposals.
    """
    configure_logging(log_file, settings.app.log_level)
    logger.info(f"Fetching DAO status from {provider_uri} (all proposals: {show_all})")

    async def _status(client: DaoChainClient):
        if not no_auction:
            snapshot, evaluation = await AuctionService(client).get_status()
            _echo_auction(snapshot, evaluation)
        report = await GovernanceService(client, settings.chain.max_concurrent_requests).list_proposals(show_all)
        _echo_proposals(report)

    run_with_client(_status, provider_uri=provider_uri)


def _echo_auction(snapshot: AuctionSnapshot, evaluation: AuctionEvaluation) -> None:
    click.echo(f"Auction: token #{snapshot.token_id}")
    click.echo(f"Phase: {evaluation.phase.value}")
    if snapshot.current_bid and not is_zero_address(snapshot.current_bidder):
        click.echo(f"Highest bid: {format_ether(snapshot.current_bid)} ETH by {snapshot.current_bidder}")
    else:
        click.echo(f"Highest bid: none (reserve price {format_ether(snapshot.reserve_price)} ETH)")

    if evaluation.phase == AuctionPhase.ACTIVE:
        click.echo(f"Time left: {format_duration(evaluation.seconds_remaining)}")
        click.echo(f"Minimum next bid: {format_ether(evaluation.min_next_bid)} ETH")
        if evaluation.will_extend:
            click.echo(f"Warning: a bid now extends the auction by {snapshot.extension_duration}s")
    elif evaluation.phase == AuctionPhase.ENDED_UNSETTLED:
        click.echo("Auction ended; waiting for settlement and the next auction.")
    else:
        click.echo(f"Auction starts at {snapshot.start_time}")
    click.echo("")


def _echo_proposals(report: ProposalReport) -> None:
    parameters = report.parameters
    if parameters.voting_delay > 0:
        # The Base governor reports delay and period in seconds
        click.echo("Governance Parameters:")
        click.echo(f"Voting Delay: {parameters.voting_delay / SECONDS_PER_DAY:g} days")
        click.echo(f"Voting Period: {parameters.voting_period / SECONDS_PER_DAY:g} days")
        click.echo(f"Proposal Threshold: {parameters.proposal_threshold} votes")
        if parameters.quorum_votes:
            click.echo(f"Quorum: {parameters.quorum_votes} votes")
        click.echo("")

    click.echo(f"Total Proposals: {report.total_count}\n")
    if report.total_count == 0:
        click.echo("No proposals yet.")
        return

    if not report.proposals:
        click.echo("No proposals found." if report.show_all else "No active proposals. Use --all to see all proposals.")
        return

    for item in report.proposals:
        proposal = item.proposal
        click.echo(f"Proposal #{proposal.proposal_id}")
        click.echo(f"State: {item.phase.label}")
        click.echo(f"For: {proposal.for_votes} votes")
        click.echo(f"Against: {proposal.against_votes} votes")
        click.echo(f"Abstain: {proposal.abstain_votes} votes")
        if item.blocks_remaining is not None:
            hours = estimate_hours_remaining(item.blocks_remaining, settings.dao.seconds_per_block)
            click.echo(f"Time Left: ~{hours} hours ({item.blocks_remaining} blocks)")
        click.echo(f"URL: {settings.dao.proposal_url_base}/{proposal.proposal_id}")
        click.echo("---\n")

    summary = report.summary
    click.echo("Summary:")
    click.echo(f"Active: {summary[ProposalPhase.ACTIVE]}")
    click.echo(f"Succeeded: {summary[ProposalPhase.SUCCEEDED]}")
    click.echo(f"Executed: {summary[ProposalPhase.EXECUTED]}")
