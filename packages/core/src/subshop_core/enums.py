"""Domain enums shared by the API and the DB models."""

from enum import StrEnum


class Term(StrEnum):
    """Billing term of a product."""

    MONTHLY = "monthly"
    ANNUALLY = "annually"

    @property
    def months(self) -> int:
        return 12 if self is Term.ANNUALLY else 1
