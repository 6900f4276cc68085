"""Parsing of user-supplied enum values."""

from fintrack.domain.entities import Direction, PersonType, TransactionStatus

_DIRECTION_ALIASES = {
    "debit": Direction.DEBIT,
    "income": Direction.DEBIT,
    "in": Direction.DEBIT,
    "credit": Direction.CREDIT,
    "expense": Direction.CREDIT,
    "out": Direction.CREDIT,
}

_PERSON_TYPE_ALIASES = {
    "individual": PersonType.INDIVIDUAL,
    "person": PersonType.INDIVIDUAL,
    "legal": PersonType.LEGAL_ENTITY,
    "legal_entity": PersonType.LEGAL_ENTITY,
    "legal-entity": PersonType.LEGAL_ENTITY,
    "company": PersonType.LEGAL_ENTITY,
}


def parse_direction(value: str) -> Direction:
    """Parse income/expense (or debit/credit) into a Direction.

    Raises:
        ValueError: If the value is not recognized
    """
    try:
        return _DIRECTION_ALIASES[value.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown direction '{value}'. Use income or expense")


def parse_person_type(value: str) -> PersonType:
    """Parse individual/legal into a PersonType.

    Raises:
        ValueError: If the value is not recognized
    """
    try:
        return _PERSON_TYPE_ALIASES[value.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown person type '{value}'. Use individual or legal")


def parse_status(value: str) -> TransactionStatus:
    """Parse a status name such as "accepted" or "payment-completed".

    Raises:
        ValueError: If the value is not a known status
    """
    name = value.strip().upper().replace("-", "_")
    try:
        return TransactionStatus[name]
    except KeyError:
        allowed = ", ".join(s.value.lower() for s in TransactionStatus)
        raise ValueError(f"Unknown status '{value}'. Allowed: {allowed}")
