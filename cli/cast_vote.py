from typing import Optional

import click

from cli.command_utils import echo_receipt, run_with_client
from config.settings import settings
from dao.client.dao_chain_client import DaoChainClient
from dao.models.voter import VoteParams
from dao.service.governance_service import GovernanceService
from dao.service.proposal_classifier import estimate_hours_remaining
from utils.logger_utils import configure_logging, get_logger

logger = get_logger("Cast Vote CLI")


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.argument("proposal_id", type=click.IntRange(min=1))
@click.argument("support", type=str)
@click.argument("reason", required=False, default=None, type=str)
@click.option("--dry-run", is_flag=True, default=False, help="Check eligibility without submitting the vote.")
@click.option("--voter", default=None, type=str, help="Address to check with --dry-run instead of the PRIVATE_KEY account.")
@click.option(
    "-p",
    "--provider-uri",
    default=settings.chain.rpc_url,
    show_default=True,
    type=str,
    help="The URI of the Base JSON-RPC node.",
)
@click.option("--log-file", default=settings.app.log_file, show_default=True, type=str, help="Path to the log file.")
def cast_vote(
    proposal_id: int,
    support: str,
    reason: Optional[str],
    dry_run: bool,
    voter: Optional[str],
    provider_uri: str,
    log_file: Optional[str],
):
    """
    Votes on PROPOSAL_ID. SUPPORT: 0 = Against, 1 = For, 2 = Abstain. REASON is optional.
    """
    configure_logging(log_file, settings.app.log_level)
    if voter and not dry_run:
        raise click.UsageError("--voter can only be used with --dry-run")
    logger.info(f"Preparing vote on proposal {proposal_id} (dry run: {dry_run})")

    async def _vote(client: DaoChainClient):
        service = GovernanceService(client, settings.chain.max_concurrent_requests)
        voter_address = voter or client.address
        click.echo(f"Voter: {voter_address}")

        if dry_run:
            classification, params = await service.prepare_vote(voter_address, proposal_id, support, reason)
            _echo_decision(params)
            if classification.blocks_remaining is not None:
                hours = estimate_hours_remaining(classification.blocks_remaining, settings.dao.seconds_per_block)
                click.echo(f"Voting ends in: ~{hours} hours ({classification.blocks_remaining} blocks)")
            return

        classification, params, receipt = await service.cast_vote(voter_address, proposal_id, support, reason)
        _echo_decision(params)
        click.echo("Vote cast!")
        echo_receipt(receipt)
        click.echo(f"View proposal: {settings.dao.proposal_url_base}/{params.proposal_id}")

    run_with_client(_vote, provider_uri=provider_uri, require_signer=not (dry_run and voter))


def _echo_decision(params: VoteParams) -> None:
    click.echo(f"Proposal ID: {params.proposal_id}")
    click.echo(f"Vote: {params.support.label}")
    if params.reason:
        click.echo(f"Reason: {params.reason}")
    for advisory in params.advisories:
        click.echo(f"Warning: {advisory.message}")
