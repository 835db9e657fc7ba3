"""
Skuman Service — SKU generation and decoding.

Usage:
    from skuman import sku, SkuError

    code = sku.generate("1", "10", "1", "02", "05", "1")
    # '110102051001'

    decoded = sku.decode(code)
    decoded.category, decoded.sequence
    # ('10', 1)

    sku.validate_format("color", "05")
    # True

Generation checks, in order, stopping at the first failure:
    1. format of all six codes (no I/O)
    2. each code exists in the catalog and is active
    3. the subcategory belongs to the supplied category
Only then is a sequence number reserved, so rejected requests never
consume one.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from skuman.codec import DIMENSIONS, CombinationKey, DecodedSku, SegmentCodec, SkuLayout
from skuman.conf import get_catalog_backend, get_layout, get_sequence_backend
from skuman.exceptions import SkuError
from skuman.protocols import CatalogBackend, SequenceBackend
from skuman.signals import sku_generated

logger = logging.getLogger(__name__)


class SkuGenerator:
    """
    Orchestrates catalog validation, sequence allocation and encoding.

    Backends and layout default to the SKUMAN settings and are resolved on
    first use, so a module-level instance is safe to create at import time.
    """

    def __init__(
        self,
        catalog: CatalogBackend | None = None,
        sequences: SequenceBackend | None = None,
        layout: SkuLayout | None = None,
    ):
        self._catalog = catalog
        self._sequences = sequences
        self._codec = SegmentCodec(layout) if layout is not None else None

    @property
    def codec(self) -> SegmentCodec:
        return self._codec or SegmentCodec(get_layout())

    @property
    def layout(self) -> SkuLayout:
        return self.codec.layout

    @property
    def catalog(self) -> CatalogBackend:
        return self._catalog if self._catalog is not None else get_catalog_backend()

    @property
    def sequences(self) -> SequenceBackend:
        return (
            self._sequences if self._sequences is not None else get_sequence_backend()
        )

    # ══════════════════════════════════════════════════════════════
    # GENERATION
    # ══════════════════════════════════════════════════════════════

    def generate(
        self,
        product_type: str,
        category: str,
        subcategory: str,
        size: str,
        color: str,
        season: str,
    ) -> str:
        """
        Generate the next SKU for a classification combination.

        The sequence is consumed before `sku_generated` is sent; an exception
        raised by a receiver propagates and that sequence is never reissued.

        Returns:
            12-digit code, e.g. '110102051001'

        Raises:
            SkuError: INVALID_SEGMENT, UNKNOWN_OR_INACTIVE_SEGMENT,
                SUBCATEGORY_CATEGORY_MISMATCH or SEQUENCE_EXHAUSTED
        """
        codec = self.codec
        key = CombinationKey(product_type, category, subcategory, size, color, season)

        try:
            self.validate(key, codec=codec)
            sequence = self.sequences.allocate_next(
                key, max_value=codec.layout.max_sequence
            )
        except SkuError as e:
            logger.warning(
                f"SKU generation rejected for {key!r}: {e}",
                extra={"key": key._asdict(), "error": e.as_dict()},
            )
            raise

        code = codec.encode(*key, sequence=sequence)

        logger.info(
            f"Generated SKU {code}",
            extra={"sku": code, "key": str(key), "sequence": sequence},
        )
        sku_generated.send(
            sender=self.__class__,
            code=code,
            decoded=DecodedSku(*key, sequence=sequence),
        )
        return code

    def validate(self, key: CombinationKey, codec: SegmentCodec | None = None) -> None:
        """
        Run the validation pipeline for a combination without allocating.

        Raises:
            SkuError: INVALID_SEGMENT, UNKNOWN_OR_INACTIVE_SEGMENT or
                SUBCATEGORY_CATEGORY_MISMATCH
        """
        (codec or self.codec).check_key(key)

        catalog = self.catalog
        for dimension, code in zip(DIMENSIONS, key):
            if dimension == "subcategory":
                entry = catalog.resolve(dimension, code, category=key.category)
            else:
                entry = catalog.resolve(dimension, code)
            if entry is None or not entry.is_active:
                raise SkuError(
                    "UNKNOWN_OR_INACTIVE_SEGMENT",
                    dimension=dimension,
                    code=code,
                    found=entry is not None,
                )

        owners = catalog.parent_categories(key.subcategory)
        if key.category not in owners:
            raise SkuError(
                "SUBCATEGORY_CATEGORY_MISMATCH",
                subcategory=key.subcategory,
                expected_category=owners[0] if owners else None,
                supplied_category=key.category,
            )

    # ══════════════════════════════════════════════════════════════
    # DECODING / FORMAT
    # ══════════════════════════════════════════════════════════════

    def decode(self, code: str) -> DecodedSku:
        """
        Split a SKU into its classification codes and sequence.

        Does not consult the catalog: historical codes stay decodable after
        their classification entries are deactivated or renamed.
        """
        return self.codec.decode(code)

    def validate_format(self, dimension: str, code: str) -> bool:
        """Pure width/digit check for one classification code."""
        return self.codec.validate_format(dimension, code)

    # ══════════════════════════════════════════════════════════════
    # SEEDING
    # ══════════════════════════════════════════════════════════════

    def seed_from_codes(self, codes: Iterable[str]) -> dict[str, int]:
        """
        Seed sequence counters from codes issued outside this generator.

        Each combination's counter is raised to the highest sequence seen
        for it (never lowered), so imported codes are never issued again.

        Returns:
            {combination key: counter value after seeding}

        Raises:
            SkuError: INVALID_LENGTH or INVALID_CHARACTERS on a malformed code
        """
        codec = self.codec
        highest: dict[CombinationKey, int] = {}
        for code in codes:
            decoded = codec.decode(code)
            highest[decoded.key] = max(highest.get(decoded.key, 0), decoded.sequence)

        sequences = self.sequences
        seeded = {
            str(key): sequences.seed(key, value) for key, value in highest.items()
        }
        logger.info(
            f"Seeded {len(seeded)} sequence counter(s)",
            extra={"combinations": len(seeded)},
        )
        return seeded


sku = SkuGenerator()
