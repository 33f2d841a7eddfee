# --- AUCTION HOUSE (Nouns-style, one token auctioned at a time) ---
AUCTION_HOUSE_ABI = [
    {
        "inputs": [],
        "name": "auction",
        "outputs": [
            {"internalType": "uint256", "name": "nounId", "type": "uint256"},
            {"internalType": "uint256", "name": "amount", "type": "uint256"},
            {"internalType": "uint256", "name": "startTime", "type": "uint256"},
            {"internalType": "uint256", "name": "endTime", "type": "uint256"},
            {"internalType": "address payable", "name": "bidder", "type": "address"},
            {"internalType": "bool", "name": "settled", "type": "bool"}
        ],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "reservePrice",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "minBidIncrementPercentage",
        "outputs": [{"internalType": "uint8", "name": "", "type": "uint8"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "timeBuffer",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [{"internalType": "uint256", "name": "nounId", "type": "uint256"}],
        "name": "createBid",
        "outputs": [],
        "stateMutability": "payable",
        "type": "function"
    }
]
