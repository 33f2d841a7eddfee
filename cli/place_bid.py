from typing import Optional

import click

from cli.command_utils import echo_receipt, run_with_client
from config.settings import settings
from dao.client.dao_chain_client import DaoChainClient
from dao.service.auction_service import AuctionService
from utils.formatter_utils import format_ether, parse_ether
from utils.logger_utils import configure_logging, get_logger

logger = get_logger("Place Bid CLI")


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.argument("amount", type=str)
@click.option("--wei", "in_wei", is_flag=True, default=False, help="AMOUNT is in wei instead of ETH.")
@click.option("--dry-run", is_flag=True, default=False, help="Validate the bid without submitting it.")
@click.option(
    "-p",
    "--provider-uri",
    default=settings.chain.rpc_url,
    show_default=True,
    type=str,
    help="The URI of the Base JSON-RPC node.",
)
@click.option("--log-file", default=settings.app.log_file, show_default=True, type=str, help="Path to the log file.")
def place_bid(amount: str, in_wei: bool, dry_run: bool, provider_uri: str, log_file: Optional[str]):
    """
    Bids AMOUNT (ETH unless --wei) on the current auction. Requires PRIVATE_KEY.
    """
    configure_logging(log_file, settings.app.log_level)

    try:
        value = int(amount) if in_wei else parse_ether(amount)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="AMOUNT")
    logger.info(f"Preparing bid of {value} wei (dry run: {dry_run})")

    async def _bid(client: DaoChainClient):
        service = AuctionService(client)
        if dry_run:
            evaluation, params = await service.prepare_bid(value)
            click.echo(f"Bid OK: {format_ether(params.value)} ETH on token #{params.token_id}")
            click.echo(f"Minimum next bid: {format_ether(evaluation.min_next_bid)} ETH")
            return

        click.echo(f"Bidder: {client.address}")
        params, receipt = await service.place_bid(value)
        click.echo(f"Bid placed: {format_ether(params.value)} ETH on token #{params.token_id}")
        echo_receipt(receipt)

    run_with_client(_bid, provider_uri=provider_uri, require_signer=not dry_run)
