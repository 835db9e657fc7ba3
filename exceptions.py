"""
Skuman Exceptions.

All skuman errors are raised as SkuError for consistent handling.
"""

from typing import Any


class SkuError(Exception):
    """
    Base exception for all Skuman errors.

    Usage:
        raise SkuError('INVALID_SEGMENT', dimension='product_type', code='X')

    Attributes:
        code: Error code (INVALID_SEGMENT, SEQUENCE_EXHAUSTED, etc.)
        details: Additional context as keyword arguments
    """

    def __init__(self, code: str, /, **details: Any):
        self.code = code
        self.details = details
        message = f"{code}: {details}" if details else code
        super().__init__(message)

    def as_dict(self) -> dict:
        """Return error as dictionary for API responses."""
        return {"code": self.code, **self.details}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"SkuError({self.code}: {details_str})"
        return f"SkuError({self.code})"


# Error codes
# INVALID_SEGMENT: A classification code fails its dimension's width/charset
# SEQUENCE_OUT_OF_RANGE: Sequence outside [1, MAX_SEQUENCE]
# UNKNOWN_OR_INACTIVE_SEGMENT: Code not in catalog, or inactive
# SUBCATEGORY_CATEGORY_MISMATCH: Subcategory not owned by the supplied category
# SEQUENCE_EXHAUSTED: Combination already issued MAX_SEQUENCE codes
# INVALID_LENGTH: Code to decode is not exactly 12 characters
# INVALID_CHARACTERS: Code to decode contains non-digit characters
# UNKNOWN_DIMENSION: Dimension name is not one of the six classification dimensions
