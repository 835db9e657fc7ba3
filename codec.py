"""
Segment codec — the fixed-offset 12-digit SKU layout.

    T CC S SS CC S ###
    │ │  │ │  │  │ └── sequence (zero-padded, 1..999)
    │ │  │ │  │  └──── season
    │ │  │ │  └─────── color
    │ │  │ └────────── size
    │ │  └──────────── subcategory (scoped to its category)
    │ └─────────────── category
    └───────────────── product type

No separators. Stored codes must stay decodable under this layout forever,
so decoding is a pure string operation and never consults the catalog.

Usage:
    codec = SegmentCodec()
    code = codec.encode("1", "10", "1", "02", "05", "1", sequence=1)
    # '110102051001'
    codec.decode(code).sequence
    # 1
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import NamedTuple

from skuman.exceptions import SkuError


DIMENSIONS = ("product_type", "category", "subcategory", "size", "color", "season")

_DIGITS = re.compile(r"[0-9]+")


class CombinationKey(NamedTuple):
    """
    The six classification codes that identify one family of sibling products.

    Siblings share a sequence counter; any differing code is an independent
    combination with its own counter.
    """

    product_type: str
    category: str
    subcategory: str
    size: str
    color: str
    season: str

    def __str__(self) -> str:
        return "".join(self)


@dataclass(frozen=True)
class DecodedSku:
    """The seven fields recovered from a 12-digit code."""

    product_type: str
    category: str
    subcategory: str
    size: str
    color: str
    season: str
    sequence: int

    @property
    def key(self) -> CombinationKey:
        return CombinationKey(
            self.product_type,
            self.category,
            self.subcategory,
            self.size,
            self.color,
            self.season,
        )

    def as_dict(self) -> dict:
        return {**self.key._asdict(), "sequence": self.sequence}


@dataclass(frozen=True)
class SkuLayout:
    """
    Segment widths and sequence bounds.

    `widths` follows DIMENSIONS order. Passed to the codec at construction;
    see skuman.conf.get_layout() for the settings-driven instance.
    """

    widths: tuple[int, ...] = (1, 2, 1, 2, 2, 1)
    sequence_width: int = 3
    max_sequence: int = 999

    def __post_init__(self):
        if len(self.widths) != len(DIMENSIONS):
            raise ValueError(
                f"SkuLayout needs {len(DIMENSIONS)} widths, got {len(self.widths)}"
            )
        if any(w < 1 for w in self.widths) or self.sequence_width < 1:
            raise ValueError("Segment widths must be positive")
        if not 1 <= self.max_sequence < 10**self.sequence_width:
            raise ValueError(
                f"max_sequence {self.max_sequence} does not fit "
                f"{self.sequence_width} digits"
            )

    @property
    def key_length(self) -> int:
        return sum(self.widths)

    @property
    def total_length(self) -> int:
        return self.key_length + self.sequence_width

    def width(self, dimension: str) -> int:
        try:
            return self.widths[DIMENSIONS.index(dimension)]
        except ValueError:
            raise SkuError("UNKNOWN_DIMENSION", dimension=dimension) from None

    def pattern(self, dimension: str) -> str:
        """Regex a well-formed code for this dimension matches (e.g. ^[0-9]{2}$)."""
        width = self.width(dimension)
        return f"^[0-9]{{{width}}}$" if width > 1 else "^[0-9]$"


class SegmentCodec:
    """
    Pure encode/decode between classification segments and SKU strings.

    Holds no state besides its layout; safe to share between threads.
    """

    def __init__(self, layout: SkuLayout | None = None):
        self.layout = layout or SkuLayout()

    # ══════════════════════════════════════════════════════════════
    # FORMAT
    # ══════════════════════════════════════════════════════════════

    def validate_format(self, dimension: str, code) -> bool:
        """True if `code` is exactly the dimension's width, all ASCII digits."""
        return (
            dimension in DIMENSIONS
            and isinstance(code, str)
            and re.fullmatch(self.layout.pattern(dimension), code) is not None
        )

    def check_segment(self, dimension: str, code) -> str:
        """Return `code` unchanged, or raise INVALID_SEGMENT naming the dimension."""
        if not self.validate_format(dimension, code):
            raise SkuError(
                "INVALID_SEGMENT",
                dimension=dimension,
                code=code,
                expected_width=self.layout.width(dimension),
            )
        return code

    def check_key(self, key: CombinationKey) -> CombinationKey:
        for dimension, code in zip(DIMENSIONS, key):
            self.check_segment(dimension, code)
        return key

    # ══════════════════════════════════════════════════════════════
    # ENCODE / DECODE
    # ══════════════════════════════════════════════════════════════

    def encode(
        self,
        product_type: str,
        category: str,
        subcategory: str,
        size: str,
        color: str,
        season: str,
        sequence: int,
    ) -> str:
        """
        Assemble a SKU from six segments and a sequence number.

        Raises:
            SkuError(INVALID_SEGMENT): a segment has the wrong width/charset
            SkuError(SEQUENCE_OUT_OF_RANGE): sequence outside [1, max_sequence]
        """
        key = self.check_key(
            CombinationKey(product_type, category, subcategory, size, color, season)
        )
        return str(key) + self.format_sequence(sequence)

    def format_sequence(self, sequence: int) -> str:
        if (
            isinstance(sequence, bool)
            or not isinstance(sequence, int)
            or not 1 <= sequence <= self.layout.max_sequence
        ):
            raise SkuError(
                "SEQUENCE_OUT_OF_RANGE",
                sequence=sequence,
                min=1,
                max=self.layout.max_sequence,
            )
        return str(sequence).zfill(self.layout.sequence_width)

    def decode(self, code: str) -> DecodedSku:
        """
        Split a SKU into its seven fields.

        Raises:
            SkuError(INVALID_LENGTH): code is not exactly total_length chars
            SkuError(INVALID_CHARACTERS): code contains a non-digit
            SkuError(SEQUENCE_OUT_OF_RANGE): sequence segment is all zeros
        """
        if not isinstance(code, str) or len(code) != self.layout.total_length:
            raise SkuError(
                "INVALID_LENGTH",
                code=code,
                length=len(code) if isinstance(code, str) else None,
                expected=self.layout.total_length,
            )
        if _DIGITS.fullmatch(code) is None:
            raise SkuError("INVALID_CHARACTERS", code=code)

        segments = []
        offset = 0
        for width in self.layout.widths:
            segments.append(code[offset : offset + width])
            offset += width

        sequence = int(code[offset:])
        if sequence < 1:
            raise SkuError("SEQUENCE_OUT_OF_RANGE", code=code, sequence=sequence)

        return DecodedSku(*segments, sequence=sequence)
