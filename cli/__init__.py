import click

from cli.cast_vote import cast_vote
from cli.dao_status import dao_status
from cli.place_bid import place_bid


@click.group()
@click.version_option(version="0.3.0")
@click.pass_context
def cli(ctx):
    pass


# Current auction and governance proposals
cli.add_command(dao_status, "status")

# Bid on the current auction
cli.add_command(place_bid, "bid")

# Vote on a proposal
cli.add_command(cast_vote, "vote")
