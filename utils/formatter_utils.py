from decimal import Decimal, InvalidOperation
from typing import Optional

from eth_utils import from_wei, is_same_address, to_checksum_address, to_wei

from constants.constants import ZERO_ADDRESS
from utils.logger_utils import get_logger

logger = get_logger("Formatter Utils")


def to_normalized_address(address: Optional[str]) -> Optional[str]:
    """
    Convert address to its checksum form.
    Safe-guards against None or invalid types.
    """
    if address is None or not isinstance(address, str):
        return None

    try:
        return to_checksum_address(address)
    except ValueError:
        logger.debug(f"Cannot checksum address: {address}")
        return address.lower()


def is_zero_address(address: Optional[str]) -> bool:
    if not address:
        return True
    try:
        return is_same_address(address, ZERO_ADDRESS)
    except ValueError:
        return False


def addresses_match(left: Optional[str], right: Optional[str]) -> bool:
    """Case-insensitive address comparison; malformed addresses never match."""
    if not left or not right:
        return False
    try:
        return is_same_address(left, right)
    except ValueError:
        return left.lower() == right.lower()


def format_ether(wei: int) -> str:
    """Render a wei amount as ETH without float rounding, e.g. 1100000000000000 -> '0.0011'."""
    value = from_wei(wei, "ether")
    text = format(Decimal(value), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text or "0"


def parse_ether(amount: str) -> int:
    """Parse a decimal ETH amount into wei. Raises ValueError on malformed or sub-wei input."""
    try:
        value = Decimal(amount.strip())
    except (InvalidOperation, AttributeError):
        raise ValueError(f"Not a decimal ETH amount: {amount!r}") from None
    if not value.is_finite() or value < 0:
        raise ValueError(f"Amount must be a non-negative number, got {amount!r}")
    if value.normalize().as_tuple().exponent < -18:
        raise ValueError(f"Amount {amount} has more precision than 1 wei")
    return int(to_wei(value, "ether"))
