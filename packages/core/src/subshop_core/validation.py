"""Input validation rules applied before any storage call.

Every validator checks all of its rules and returns the accumulated
messages; an empty list means the input is valid.
"""

from __future__ import annotations

import re
from decimal import Decimal

from .enums import Term

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+$")


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_paging(page_number: int, page_size: int) -> list[str]:
    errors: list[str] = []
    if page_number < 1:
        errors.append("pageNumber should be >= 1")
    if page_size < 1:
        errors.append("pageSize should be >= 1")
    return errors


def validate_brand(name: str | None) -> list[str]:
    errors: list[str] = []
    if _blank(name):
        errors.append("Name should not be empty")
    return errors


def validate_product(name: str | None, term: str | None) -> list[str]:
    errors: list[str] = []
    if term not in {t.value for t in Term}:
        errors.append("Term allowed values annually or monthly")
    if _blank(name):
        errors.append("Name should not be empty")
    return errors


def validate_offer(number_of_terms: int, price: Decimal) -> list[str]:
    errors: list[str] = []
    if number_of_terms < 1:
        errors.append("NumberOfTerms should be >= 1")
    if price < 0:
        errors.append("Price should be >= 0")
    return errors


def validate_customer(
    email_address: str | None,
    first_name: str | None,
    last_name: str | None,
) -> list[str]:
    errors: list[str] = []
    if _blank(email_address):
        errors.append("EmailAddress should not be empty")
    elif not _EMAIL_RE.match(email_address):
        errors.append("Invalid Email Address")
    if _blank(first_name):
        errors.append("FirstName should not be empty")
    if _blank(last_name):
        errors.append("LastName should not be empty")
    return errors
