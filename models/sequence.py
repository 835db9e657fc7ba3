"""
Per-combination sequence counter for SKU generation.

One row per combination key; the row lock taken by SELECT FOR UPDATE
serializes allocations for that key only.
"""

import logging

from django.db import models, transaction
from django.utils.translation import gettext_lazy as _

from skuman.exceptions import SkuError

logger = logging.getLogger(__name__)


class SkuSequence(models.Model):
    """
    Atomic counter for generating per-combination sequence numbers.

    One row per combination key, e.g. "110102051" → last_value = 42.
    Thread-safe via SELECT FOR UPDATE. Values are never decremented,
    so a reserved sequence is never issued twice.

    Usage (internal to DatabaseSequenceBackend):
        seq_val = SkuSequence.next_value("110102051", max_value=999)
        # Returns 1, 2, 3... atomically
    """

    key = models.CharField(
        max_length=20,
        unique=True,
        verbose_name=_("Combination key"),
    )
    last_value = models.PositiveIntegerField(
        default=0,
        verbose_name=_("Last value"),
    )
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    class Meta:
        db_table = "skuman_sku_sequence"
        verbose_name = _("SKU Sequence")
        verbose_name_plural = _("SKU Sequences")
        ordering = ["key"]

    def __str__(self) -> str:
        return f"{self.key} → {self.last_value}"

    @classmethod
    def next_value(cls, key: str, max_value: int) -> int:
        """
        Atomically increment and return the next value for a key.

        Thread-safe: uses SELECT FOR UPDATE to prevent race conditions.

        Raises:
            SkuError(SEQUENCE_EXHAUSTED): counter already at max_value
        """
        with transaction.atomic():
            seq, created = cls.objects.select_for_update().get_or_create(
                key=key, defaults={"last_value": 0}
            )
            if seq.last_value >= max_value:
                raise SkuError("SEQUENCE_EXHAUSTED", key=key, max=max_value)
            seq.last_value += 1
            seq.save(update_fields=["last_value", "updated_at"])
            return seq.last_value

    @classmethod
    def current_value(cls, key: str) -> int:
        return (
            cls.objects.filter(key=key).values_list("last_value", flat=True).first()
            or 0
        )

    @classmethod
    def seed(cls, key: str, value: int) -> int:
        """Raise the counter for a key to at least `value`; never lowers it."""
        with transaction.atomic():
            seq, created = cls.objects.select_for_update().get_or_create(
                key=key, defaults={"last_value": 0}
            )
            if value > seq.last_value:
                logger.info(
                    f"Seeding sequence {key}: {seq.last_value} → {value}",
                    extra={"key": key, "previous": seq.last_value, "value": value},
                )
                seq.last_value = value
                seq.save(update_fields=["last_value", "updated_at"])
            return seq.last_value
