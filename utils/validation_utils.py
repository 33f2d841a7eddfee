from dao.exceptions import InvalidSnapshot


def validate_time_range(start_time: int, end_time: int) -> None:
    """
    Validate an auction time window.

    Args:
        start_time: Auction start, unix seconds.
        end_time: Auction end, unix seconds.

    Raises:
        InvalidSnapshot: If the window ends before it starts.
    """
    if end_time < start_time:
        raise InvalidSnapshot(f"end_time ({end_time}) must be greater than or equal to start_time ({start_time})")


def validate_non_negative(**amounts: int) -> None:
    """
    Validate that every named amount is a non-negative integer.

    Raises:
        InvalidSnapshot: On the first negative or non-integer amount.
    """
    for name, value in amounts.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidSnapshot(f"{name} must be an integer, got {value!r}")
        if value < 0:
            raise InvalidSnapshot(f"{name} must be greater than or equal to 0, got {value}")
