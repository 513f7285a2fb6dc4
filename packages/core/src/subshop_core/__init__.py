"""Core building blocks for Subshop: results, pagination, validation."""

from .enums import Term
from .pagination import PaginatedList, check_page_arguments
from .result import Result
from .validation import (
    validate_brand,
    validate_customer,
    validate_offer,
    validate_paging,
    validate_product,
)

__all__ = [
    "PaginatedList",
    "Result",
    "Term",
    "check_page_arguments",
    "validate_brand",
    "validate_customer",
    "validate_offer",
    "validate_paging",
    "validate_product",
]
