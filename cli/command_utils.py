import asyncio
import sys
from typing import Any, Awaitable, Callable, Optional

import click

from config.settings import settings
from dao.client.dao_chain_client import DaoChainClient, error_message
from dao.exceptions import ConfigurationError, DaoActionError, SubmissionFailed
from dao.models.receipt import SubmissionReceipt
from utils.formatter_utils import format_ether
from utils.logger_utils import get_logger

logger = get_logger("DAO CLI")

EXIT_FAILURE = 1


def build_chain_client(provider_uri: Optional[str] = None, require_signer: bool = False) -> DaoChainClient:
    active_settings = settings
    if provider_uri and provider_uri != settings.chain.rpc_url:
        chain = settings.chain.model_copy(update={"rpc_url": provider_uri})
        active_settings = settings.model_copy(update={"chain": chain})
    return DaoChainClient.from_settings(active_settings, require_signer=require_signer)


def run_with_client(
    action: Callable[[DaoChainClient], Awaitable[Any]],
    provider_uri: Optional[str] = None,
    require_signer: bool = False,
) -> Any:
    """
    Build a chain client, run `action` against it and close it.

    Validation, submission and chain read failures are reported and end the process with exit code 1.
    """

    async def _run() -> Any:
        client = build_chain_client(provider_uri, require_signer=require_signer)
        try:
            return await action(client)
        finally:
            await client.close()

    try:
        return asyncio.run(_run())
    except SubmissionFailed as e:
        logger.error(f"Submission failed: {e.message}")
        click.echo(f"Error: {e.message}", err=True)
        if e.hint:
            click.echo(f"   -> {e.hint}", err=True)
        if e.tx_hash:
            click.echo(f"   Transaction: {e.tx_hash}", err=True)
        sys.exit(EXIT_FAILURE)
    except (DaoActionError, ConfigurationError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_FAILURE)
    except KeyboardInterrupt:
        logger.info("Interrupted by user.")
        sys.exit(EXIT_FAILURE)
    except Exception as e:
        logger.exception(f"Command failed: {e}")
        click.echo(f"Error: {error_message(e)}", err=True)
        sys.exit(EXIT_FAILURE)


def echo_receipt(receipt: SubmissionReceipt) -> None:
    click.echo(f"Transaction: {receipt.tx_hash}")
    click.echo(f"Block: {receipt.block_number}")
    click.echo(f"Gas used: {receipt.gas_used}")
    click.echo(f"Gas cost: {format_ether(receipt.gas_cost)} ETH")


def format_duration(seconds: int) -> str:
    hours, remainder = divmod(max(0, seconds), 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours}h {minutes}m {secs}s"
