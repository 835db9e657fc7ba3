"""
Tests for skuman settings (skuman.conf).
"""

import pytest
from django.core.exceptions import ImproperlyConfigured

from skuman import SkuError, SkuGenerator
from skuman.adapters.catalog import InMemoryCatalogBackend, ModelCatalogBackend
from skuman.adapters.sequence import DatabaseSequenceBackend, LocalSequenceBackend
from skuman.conf import (
    DEFAULTS,
    get_catalog_backend,
    get_layout,
    get_sequence_backend,
    get_setting,
    reset_backends,
)


@pytest.fixture(autouse=True)
def fresh_backends():
    reset_backends()
    yield
    reset_backends()


class TestGetSetting:
    """Lookup order: SKUMAN dict → flat SKUMAN_* setting → DEFAULTS."""

    def test_default(self, settings):
        settings.SKUMAN = {}

        assert get_setting("MAX_SEQUENCE") == 999

    def test_flat_setting(self, settings):
        settings.SKUMAN = {}
        settings.SKUMAN_MAX_SEQUENCE = 500

        assert get_setting("MAX_SEQUENCE") == 500

    def test_dict_wins_over_flat(self, settings):
        settings.SKUMAN = {"MAX_SEQUENCE": 100}
        settings.SKUMAN_MAX_SEQUENCE = 500

        assert get_setting("MAX_SEQUENCE") == 100

    def test_explicit_default(self, settings):
        settings.SKUMAN = {}

        assert get_setting("NOT_A_SETTING", "fallback") == "fallback"
        assert get_setting("NOT_A_SETTING") is None


class TestGetLayout:
    """Layout built from SEGMENT_WIDTHS, SEQUENCE_WIDTH and MAX_SEQUENCE."""

    def test_default_layout(self, settings):
        settings.SKUMAN = {}
        layout = get_layout()

        assert layout.widths == tuple(DEFAULTS["SEGMENT_WIDTHS"].values())
        assert layout.total_length == 12

    def test_partial_width_override(self, settings):
        settings.SKUMAN = {"SEGMENT_WIDTHS": {"size": 3}}
        layout = get_layout()

        assert layout.width("size") == 3
        assert layout.width("color") == 2
        assert layout.total_length == 13

    def test_lower_max_sequence(self, settings):
        settings.SKUMAN = {"MAX_SEQUENCE": 50}

        generator = SkuGenerator(
            catalog=InMemoryCatalogBackend(
                product_type={"1": True},
                category={"10": True},
                subcategory={"1": {"10": True}},
                size={"02": True},
                color={"05": True},
                season={"1": True},
            ),
            sequences=LocalSequenceBackend(),
        )
        for _ in range(50):
            generator.generate("1", "10", "1", "02", "05", "1")

        with pytest.raises(SkuError) as exc:
            generator.generate("1", "10", "1", "02", "05", "1")

        assert exc.value.code == "SEQUENCE_EXHAUSTED"

    def test_max_sequence_wider_than_sequence_rejected(self, settings):
        settings.SKUMAN = {"MAX_SEQUENCE": 5000}

        with pytest.raises(ValueError):
            get_layout()


class TestBackendLoading:
    """Backends are imported from dotted paths and cached."""

    def test_defaults(self, settings):
        settings.SKUMAN = {}

        assert isinstance(get_catalog_backend(), ModelCatalogBackend)
        assert isinstance(get_sequence_backend(), DatabaseSequenceBackend)

    def test_cached(self):
        assert get_sequence_backend() is get_sequence_backend()

    def test_custom_path(self, settings):
        settings.SKUMAN = {
            "SEQUENCE_BACKEND": "skuman.adapters.sequence.LocalSequenceBackend"
        }

        assert isinstance(get_sequence_backend(), LocalSequenceBackend)

    def test_reset(self, settings):
        first = get_sequence_backend()
        reset_backends()

        assert get_sequence_backend() is not first

    def test_model_catalog_rejects_segment_wider_than_column(self, settings):
        settings.SKUMAN = {"SEGMENT_WIDTHS": {"category": 3}}

        with pytest.raises(ImproperlyConfigured) as exc:
            get_catalog_backend()

        assert "category" in str(exc.value)

    def test_in_memory_catalog_accepts_wider_segment(self, settings):
        settings.SKUMAN = {
            "SEGMENT_WIDTHS": {"category": 3},
            "CATALOG_BACKEND": "skuman.adapters.catalog.InMemoryCatalogBackend",
        }

        assert isinstance(get_catalog_backend(), InMemoryCatalogBackend)

    def test_bad_path(self, settings):
        settings.SKUMAN = {"CATALOG_BACKEND": "skuman.adapters.nowhere.Catalog"}

        with pytest.raises(ImproperlyConfigured):
            get_catalog_backend()

    def test_empty_path(self, settings):
        settings.SKUMAN = {"SEQUENCE_BACKEND": ""}

        with pytest.raises(ImproperlyConfigured):
            get_sequence_backend()
