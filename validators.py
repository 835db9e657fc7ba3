"""
Model field validators for classification codes.

Reuses the codec's format check so catalog administration and SKU
generation agree on what a well-formed code is.
"""

from django.core.exceptions import ValidationError
from django.utils.deconstruct import deconstructible
from django.utils.translation import gettext_lazy as _


@deconstructible
class SegmentCodeValidator:
    """Validate a code against its dimension's width and digit pattern."""

    message = _("Code must be exactly %(width)s digit(s) (0-9).")
    code = "invalid_segment"

    def __init__(self, dimension: str):
        self.dimension = dimension

    def __call__(self, value):
        from skuman.codec import SegmentCodec
        from skuman.conf import get_layout

        codec = SegmentCodec(get_layout())
        if not codec.validate_format(self.dimension, value):
            raise ValidationError(
                self.message,
                code=self.code,
                params={"width": codec.layout.width(self.dimension), "value": value},
            )

    def __eq__(self, other):
        return (
            isinstance(other, SegmentCodeValidator)
            and self.dimension == other.dimension
        )
