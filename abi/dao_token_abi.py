# --- DAO TOKEN (ERC721 with ERC20Votes-style checkpoints) ---
DAO_TOKEN_ABI = [
    {
        "inputs": [{"internalType": "address", "name": "owner", "type": "address"}],
        "name": "balanceOf",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function"
    },
    # Zero address when the holder never delegated
    {
        "inputs": [{"internalType": "address", "name": "delegator", "type": "address"}],
        "name": "delegates",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function"
    },
    # The auction house mints every token, so it doubles as its address lookup
    {
        "inputs": [],
        "name": "minter",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function"
    }
]
