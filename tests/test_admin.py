"""
Tests for skuman admin registrations.
"""

import pytest
from django.contrib import admin
from django.test import RequestFactory
from simple_history.admin import SimpleHistoryAdmin

from skuman.admin import CategoryAdmin, SkuSequenceAdmin, SubcategoryInline
from skuman.models import CATALOG_MODELS, Category, SkuSequence


class TestAdminRegistration:
    """Every catalog is editable with history; counters are read-only."""

    @pytest.mark.parametrize("dimension", sorted(CATALOG_MODELS))
    def test_catalogs_registered_with_history(self, dimension):
        model_admin = admin.site._registry[CATALOG_MODELS[dimension]]

        assert isinstance(model_admin, SimpleHistoryAdmin)

    def test_category_inlines_subcategories(self):
        assert SubcategoryInline in CategoryAdmin.inlines
        assert isinstance(admin.site._registry[Category], CategoryAdmin)

    def test_sequences_cannot_be_added_or_deleted(self):
        model_admin = admin.site._registry[SkuSequence]
        request = RequestFactory().get("/")

        assert isinstance(model_admin, SkuSequenceAdmin)
        assert model_admin.has_add_permission(request) is False
        assert model_admin.has_delete_permission(request) is False
