from enum import IntEnum

from dao.exceptions import UnknownPhase


class ProposalPhase(IntEnum):
    """Governor `state(proposalId)` codes. Pass/fail is decided by the governor, never locally."""

    PENDING = 0
    ACTIVE = 1
    CANCELED = 2
    DEFEATED = 3
    SUCCEEDED = 4
    QUEUED = 5
    EXPIRED = 6
    EXECUTED = 7

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_code(cls, code: int) -> "ProposalPhase":
        if isinstance(code, bool) or not isinstance(code, int):
            raise UnknownPhase(code)
        try:
            return cls(code)
        except ValueError:
            raise UnknownPhase(code) from None
