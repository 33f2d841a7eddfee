ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400

# Governor proposal ids start at 1 and are contiguous up to proposalCount()
FIRST_PROPOSAL_ID = 1

# Minimum bid increment is expressed in whole percent
PERCENT_DENOMINATOR = 100

# Revert/RPC message fragments and what they mean for the caller
KNOWN_SUBMISSION_ERRORS = {
    "User already voted": "You have already voted on this proposal",
    "already voted": "You have already voted on this proposal",
    "Proposal not active": "Proposal is not currently active",
    "voting is closed": "Proposal is not currently active",
    "insufficient funds": "Insufficient ETH for value plus gas",
    "Must send more than last bid": "Another bid landed first; re-check the minimum bid",
    "Auction expired": "The auction ended before the bid was mined",
    "Noun not up for auction": "The auction moved on to a new token; re-check the status",
}
