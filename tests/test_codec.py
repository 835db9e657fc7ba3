"""
Tests for the segment codec (skuman.codec).

Pure string logic: no database, no catalog.
"""

import pytest

from skuman import SkuError
from skuman.codec import DIMENSIONS, CombinationKey, DecodedSku, SegmentCodec, SkuLayout


# ═══════════════════════════════════════════════════════════════════
# Fixtures
# ═══════════════════════════════════════════════════════════════════


@pytest.fixture
def codec():
    return SegmentCodec()


SEGMENTS = ("1", "10", "1", "02", "05", "1")


# ═══════════════════════════════════════════════════════════════════
# Layout
# ═══════════════════════════════════════════════════════════════════


class TestSkuLayout:
    """Tests for SkuLayout defaults and bounds."""

    def test_default_layout_is_twelve_digits(self):
        layout = SkuLayout()

        assert layout.key_length == 9
        assert layout.total_length == 12
        assert layout.max_sequence == 999

    def test_width_per_dimension(self):
        layout = SkuLayout()

        assert [layout.width(d) for d in DIMENSIONS] == [1, 2, 1, 2, 2, 1]

    def test_pattern_per_dimension(self):
        layout = SkuLayout()

        assert layout.pattern("product_type") == "^[0-9]$"
        assert layout.pattern("category") == "^[0-9]{2}$"

    def test_unknown_dimension(self):
        with pytest.raises(SkuError) as exc:
            SkuLayout().width("fabric")

        assert exc.value.code == "UNKNOWN_DIMENSION"

    def test_max_sequence_must_fit_width(self):
        with pytest.raises(ValueError):
            SkuLayout(sequence_width=3, max_sequence=1000)

    def test_widths_must_cover_six_dimensions(self):
        with pytest.raises(ValueError):
            SkuLayout(widths=(1, 2, 1))


# ═══════════════════════════════════════════════════════════════════
# Format validation
# ═══════════════════════════════════════════════════════════════════


class TestValidateFormat:
    """Tests for SegmentCodec.validate_format()."""

    @pytest.mark.parametrize(
        "dimension,code",
        [
            ("product_type", "1"),
            ("category", "10"),
            ("subcategory", "0"),
            ("size", "00"),
            ("color", "99"),
            ("season", "9"),
        ],
    )
    def test_valid_codes(self, codec, dimension, code):
        assert codec.validate_format(dimension, code) is True

    @pytest.mark.parametrize(
        "dimension,code",
        [
            ("product_type", "X"),
            ("product_type", "12"),
            ("category", "1"),
            ("category", "1a"),
            ("size", " 2"),
            ("color", "٠٥"),  # Arabic-Indic digits are not ASCII digits
            ("season", ""),
            ("size", "02\n"),
            ("season", None),
            ("season", 1),
        ],
    )
    def test_invalid_codes(self, codec, dimension, code):
        assert codec.validate_format(dimension, code) is False

    def test_unknown_dimension_is_not_valid(self, codec):
        assert codec.validate_format("fabric", "1") is False

    def test_follows_layout_pattern(self):
        codec = SegmentCodec(SkuLayout(widths=(1, 2, 1, 3, 2, 1)))

        assert codec.layout.pattern("size") == "^[0-9]{3}$"
        assert codec.validate_format("size", "102") is True
        assert codec.validate_format("size", "02") is False


# ═══════════════════════════════════════════════════════════════════
# Encode
# ═══════════════════════════════════════════════════════════════════


class TestEncode:
    """Tests for SegmentCodec.encode()."""

    def test_worked_example(self, codec):
        assert codec.encode(*SEGMENTS, sequence=1) == "110102051001"
        assert codec.encode(*SEGMENTS, sequence=2) == "110102051002"

    def test_sequence_bounds(self, codec):
        assert codec.encode(*SEGMENTS, sequence=999).endswith("999")
        assert codec.encode(*SEGMENTS, sequence=42).endswith("042")

    @pytest.mark.parametrize("sequence", [0, -1, 1000, True, "1", 1.0])
    def test_sequence_out_of_range(self, codec, sequence):
        with pytest.raises(SkuError) as exc:
            codec.encode(*SEGMENTS, sequence=sequence)

        assert exc.value.code == "SEQUENCE_OUT_OF_RANGE"

    def test_invalid_segment_names_field(self, codec):
        with pytest.raises(SkuError) as exc:
            codec.encode("1", "10", "1", "2", "05", "1", sequence=1)

        assert exc.value.code == "INVALID_SEGMENT"
        assert exc.value.details["dimension"] == "size"
        assert exc.value.details["expected_width"] == 2

    def test_first_invalid_segment_reported(self, codec):
        with pytest.raises(SkuError) as exc:
            codec.encode("X", "1", "1", "02", "05", "1", sequence=1)

        assert exc.value.details["dimension"] == "product_type"

    def test_segment_checked_before_sequence(self, codec):
        with pytest.raises(SkuError) as exc:
            codec.encode("1", "10", "1", "02", "5", "1", sequence=0)

        assert exc.value.code == "INVALID_SEGMENT"


# ═══════════════════════════════════════════════════════════════════
# Decode
# ═══════════════════════════════════════════════════════════════════


class TestDecode:
    """Tests for SegmentCodec.decode()."""

    def test_decode_example(self, codec):
        decoded = codec.decode("110102051001")

        assert decoded == DecodedSku(
            product_type="1",
            category="10",
            subcategory="1",
            size="02",
            color="05",
            season="1",
            sequence=1,
        )

    def test_key_property(self, codec):
        decoded = codec.decode("290341307999")

        assert decoded.key == CombinationKey("2", "90", "3", "41", "30", "7")
        assert str(decoded.key) == "290341307"
        assert decoded.sequence == 999

    def test_as_dict(self, codec):
        assert codec.decode("110102051001").as_dict() == {
            "product_type": "1",
            "category": "10",
            "subcategory": "1",
            "size": "02",
            "color": "05",
            "season": "1",
            "sequence": 1,
        }

    @pytest.mark.parametrize("code", ["", "11010205100", "1101020510011", None])
    def test_invalid_length(self, codec, code):
        with pytest.raises(SkuError) as exc:
            codec.decode(code)

        assert exc.value.code == "INVALID_LENGTH"

    @pytest.mark.parametrize("code", ["11010205100A", "1101-0205001", " 10110205001"])
    def test_invalid_characters(self, codec, code):
        with pytest.raises(SkuError) as exc:
            codec.decode(code)

        assert exc.value.code == "INVALID_CHARACTERS"

    def test_zero_sequence_rejected(self, codec):
        with pytest.raises(SkuError) as exc:
            codec.decode("110102051000")

        assert exc.value.code == "SEQUENCE_OUT_OF_RANGE"

    @pytest.mark.parametrize(
        "segments,sequence",
        [
            (("0", "00", "0", "00", "00", "0"), 1),
            (("9", "99", "9", "99", "99", "9"), 999),
            (("1", "10", "1", "02", "05", "1"), 500),
        ],
    )
    def test_round_trip(self, codec, segments, sequence):
        decoded = codec.decode(codec.encode(*segments, sequence=sequence))

        assert tuple(decoded.key) == segments
        assert decoded.sequence == sequence


class TestCustomLayout:
    """A layout passed at construction drives both directions."""

    def test_wider_sequence(self):
        codec = SegmentCodec(SkuLayout(sequence_width=4, max_sequence=9999))

        code = codec.encode(*SEGMENTS, sequence=1234)

        assert code == "1101020511234"
        assert codec.decode(code).sequence == 1234
