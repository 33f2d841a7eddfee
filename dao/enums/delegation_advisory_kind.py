from enum import Enum


class DelegationAdvisoryKind(str, Enum):
    NOT_DELEGATED = "NotDelegated"
    DELEGATED_ELSEWHERE = "DelegatedElsewhere"
